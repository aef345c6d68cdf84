"""
Representation of a point (or vector) in geocentric Cartesian space
"""

__all__ = ['Cartesian']

import math
from typing import Iterable, Tuple, Union

import numpy as np

from ellipsoids.utils.functions import safe_divide


class Cartesian:
    """
    An immutable three-component vector, in meters when used as a position. The
    origin is the center of the ellipsoid and the axes are right-handed.

    Scalar division follows IEEE semantics: dividing by zero produces inf/nan
    components rather than raising.
    """

    __slots__ = ('x', 'y', 'z')

    ZERO: 'Cartesian'

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        z: Union[float, int, str],
    ):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Cartesian):
            return False

        return (
            self.x == other.x and
            self.y == other.y and
            self.z == other.z
        )

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<Cartesian({self.x}, {self.y}, {self.z})>'

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other: 'Cartesian') -> 'Cartesian':
        return self.add(other)

    def __sub__(self, other: 'Cartesian') -> 'Cartesian':
        return self.subtract(other)

    def __mul__(self, scalar: float) -> 'Cartesian':
        return self.multiply_by_scalar(scalar)

    def __rmul__(self, scalar: float) -> 'Cartesian':
        return self.multiply_by_scalar(scalar)

    def __truediv__(self, scalar: float) -> 'Cartesian':
        return self.divide_by_scalar(scalar)

    def __neg__(self) -> 'Cartesian':
        return self.negate()

    @classmethod
    def from_numpy(cls, arr: Union[np.ndarray, Iterable[float]]) -> 'Cartesian':
        """
        Creates a Cartesian from an array-like of exactly three values

        Args:
            arr:
                An array-like of (x, y, z)

        Returns:
            Cartesian
        """
        values = np.asarray(arr, dtype=float).ravel()
        if values.size != 3:
            raise ValueError(f'Expected 3 components, received {values.size}.')

        return cls(*values.tolist())

    def add(self, other: 'Cartesian') -> 'Cartesian':
        """Componentwise sum of two vectors"""
        return Cartesian(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Cartesian') -> 'Cartesian':
        """Componentwise difference of two vectors"""
        return Cartesian(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply_components(self, other: 'Cartesian') -> 'Cartesian':
        """Componentwise product of two vectors"""
        return Cartesian(self.x * other.x, self.y * other.y, self.z * other.z)

    def divide_components(self, other: 'Cartesian') -> 'Cartesian':
        """Componentwise quotient of two vectors"""
        return Cartesian(
            safe_divide(self.x, other.x),
            safe_divide(self.y, other.y),
            safe_divide(self.z, other.z),
        )

    def multiply_by_scalar(self, scalar: float) -> 'Cartesian':
        return Cartesian(self.x * scalar, self.y * scalar, self.z * scalar)

    def divide_by_scalar(self, scalar: float) -> 'Cartesian':
        return Cartesian(
            safe_divide(self.x, scalar),
            safe_divide(self.y, scalar),
            safe_divide(self.z, scalar),
        )

    def negate(self) -> 'Cartesian':
        return Cartesian(-self.x, -self.y, -self.z)

    def dot(self, other: 'Cartesian') -> float:
        """The dot (scalar) product of two vectors"""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> 'Cartesian':
        """
        Scales the vector to unit length. The zero vector has no direction, and
        normalizing it produces non-finite (nan) components.

        Returns:
            Cartesian
        """
        return self.divide_by_scalar(self.magnitude())

    def distance(self, other: 'Cartesian') -> float:
        """The straight-line distance between two points"""
        return self.subtract(other).magnitude()

    def equals_epsilon(self, other: 'Cartesian', absolute: float = 1e-9) -> bool:
        """
        Test whether two vectors are equal within an absolute tolerance, per component.

        Args:
            other:
                A second Cartesian

            absolute: (float) (Default 1e-9)
                The largest permitted difference between matching components

        Returns:
            bool
        """
        return all(
            abs(left - right) <= absolute
            for left, right in zip(self, other)
        )

    def is_finite(self) -> bool:
        return all(math.isfinite(val) for val in self)

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the vector to an (x, y, z) tuple"""
        return self.x, self.y, self.z

    def to_numpy(self) -> np.ndarray:
        """Converts the vector to a numpy array of shape (3,)"""
        return np.array([self.x, self.y, self.z], dtype=float)


Cartesian.ZERO = Cartesian(0., 0., 0.)
