"""
Ellipsoid of revolution used as the reference surface for coordinate conversions
"""

__all__ = ['Ellipsoid', 'WGS84']

import math
from typing import Optional

from ellipsoids._const import EPSILON1, WGS84_A, WGS84_B
from ellipsoids.cartesian import Cartesian
from ellipsoids.cartographic import Cartographic


class Ellipsoid:
    """
    A read-only set of ellipsoid parameters, derived once from the equatorial and polar
    radii. Instances are never mutated and may be shared freely, including across threads.

    Args:
        equatorial_radius:
            The semi-major axis (a), in meters

        polar_radius:
            The semi-minor axis (b), in meters

        center_tolerance_squared: (Default 0.1)
            Squared ellipsoid-normalized norm below which points are considered too near
            the center for surface projection to iterate
    """

    __slots__ = (
        'equatorial_radius', 'polar_radius', 'radii', 'radii_squared',
        'one_over_radii', 'one_over_radii_squared', 'center_tolerance_squared',
    )

    def __init__(
        self,
        equatorial_radius: float,
        polar_radius: float,
        center_tolerance_squared: float = EPSILON1,
    ):
        a, b = float(equatorial_radius), float(polar_radius)
        for name, radius in (('equatorial', a), ('polar', b)):
            if not math.isfinite(radius) or radius <= 0:
                raise ValueError(f'Ellipsoid {name} radius must be positive and finite; received {radius}')

        _set = object.__setattr__
        _set(self, 'equatorial_radius', a)
        _set(self, 'polar_radius', b)
        _set(self, 'radii', Cartesian(a, a, b))
        _set(self, 'radii_squared', Cartesian(a * a, a * a, b * b))
        _set(self, 'one_over_radii', Cartesian(1. / a, 1. / a, 1. / b))
        _set(self, 'one_over_radii_squared', Cartesian(1. / (a * a), 1. / (a * a), 1. / (b * b)))
        _set(self, 'center_tolerance_squared', float(center_tolerance_squared))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.equatorial_radius == other.equatorial_radius and
            self.polar_radius == other.polar_radius and
            self.center_tolerance_squared == other.center_tolerance_squared
        )

    def __hash__(self):
        return hash((self.equatorial_radius, self.polar_radius, self.center_tolerance_squared))

    def __repr__(self):
        return f'<Ellipsoid({self.equatorial_radius}, {self.polar_radius})>'

    @classmethod
    def from_flattening(cls, equatorial_radius: float, flattening: float):
        """
        Creates an Ellipsoid from its semi-major axis and flattening, i.e. b = a * (1 - f)

        Args:
            equatorial_radius:
                The semi-major axis, in meters

            flattening:
                The flattening, e.g. 1 / 298.257223563 for WGS84

        Returns:
            Ellipsoid
        """
        return cls(equatorial_radius, equatorial_radius * (1 - flattening))

    @property
    def flattening(self) -> float:
        return (self.equatorial_radius - self.polar_radius) / self.equatorial_radius

    def contains(self, cartesian: Cartesian) -> bool:
        """Test whether a point lies on or inside the ellipsoid surface"""
        return cartesian.multiply_components(self.one_over_radii).magnitude_squared() <= 1.

    def cartesian_from_cartographic(self, cartographic: Cartographic) -> Cartesian:
        """Converts a geodetic position on this ellipsoid to a Cartesian point"""
        from ellipsoids.conversion import cartesian_from_cartographic  # pylint: disable=import-outside-toplevel
        return cartesian_from_cartographic(cartographic, self)

    def cartographic_from_cartesian(self, cartesian: Cartesian) -> Optional[Cartographic]:
        """Converts a Cartesian point to a geodetic position on this ellipsoid"""
        from ellipsoids.conversion import cartographic_from_cartesian  # pylint: disable=import-outside-toplevel
        return cartographic_from_cartesian(cartesian, self)

    def geodetic_surface_normal(self, cartesian: Cartesian) -> Cartesian:
        """The outward unit normal of this ellipsoid at a surface point"""
        from ellipsoids.conversion import geodetic_surface_normal  # pylint: disable=import-outside-toplevel
        return geodetic_surface_normal(cartesian, self)

    def scale_to_geodetic_surface(self, cartesian: Cartesian) -> Optional[Cartesian]:
        """Projects a Cartesian point onto this ellipsoid along the surface normal"""
        from ellipsoids.projection import scale_to_geodetic_surface  # pylint: disable=import-outside-toplevel
        return scale_to_geodetic_surface(cartesian, self)


WGS84 = Ellipsoid(WGS84_A, WGS84_B)
