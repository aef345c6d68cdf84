"""
Representation of a geodetic position, i.e. a lon/lat pair plus a height above the ellipsoid
"""

__all__ = ['Cartographic']

import math
from typing import Tuple, Union

from ellipsoids.utils.functions import round_half_up


class Cartographic:
    """
    An immutable geodetic position. Longitude and latitude are in degrees, height is in
    meters above (positive) or below (negative) the ellipsoid surface.

    Unlike a map coordinate, values are not wrapped or bounded on construction.
    """

    __slots__ = ('longitude', 'latitude', 'height')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        height: Union[float, int, str] = 0.,
    ):
        object.__setattr__(self, 'longitude', float(longitude))
        object.__setattr__(self, 'latitude', float(latitude))
        object.__setattr__(self, 'height', float(height))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Cartographic):
            return False

        return (
            self.longitude == other.longitude and
            self.latitude == other.latitude and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude, self.height))

    def __repr__(self):
        return f'<Cartographic({self.longitude}, {self.latitude}, {self.height})>'

    @classmethod
    def from_radians(cls, longitude: float, latitude: float, height: float = 0.):
        """
        Creates a Cartographic from a longitude and latitude expressed in radians

        Args:
            longitude:
                The longitude, in radians

            latitude:
                The latitude, in radians

            height: (Default 0.)
                The height above the ellipsoid, in meters

        Returns:
            Cartographic
        """
        return cls(math.degrees(longitude), math.degrees(latitude), height)

    @classmethod
    def from_dms(
        cls,
        lon: Tuple[int, int, float, str],
        lat: Tuple[int, int, float, str],
        height: float = 0.,
    ):
        """
        Creates a Cartographic from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            height: (Default 0.)
                The height above the ellipsoid, in meters

        Returns:
            Cartographic
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lon), convert(lat), height)

    def equals_epsilon(
        self,
        other: 'Cartographic',
        angular: float = 1e-9,
        linear: float = 1e-6
    ) -> bool:
        """
        Test whether two positions are equal within a tolerance.

        Args:
            other:
                A second Cartographic

            angular: (float) (Default 1e-9)
                Tolerance on longitude and latitude, in degrees

            linear: (float) (Default 1e-6)
                Tolerance on height, in meters

        Returns:
            bool
        """
        return (
            abs(self.longitude - other.longitude) <= angular and
            abs(self.latitude - other.latitude) <= angular and
            abs(self.height - other.height) <= linear
        )

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the longitude and latitude to tuples of degrees, minutes, seconds, hemisphere.
        Height is not included.

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), (...))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the position to a (longitude, latitude, height) tuple"""
        return self.longitude, self.latitude, self.height

    def to_radians(self) -> Tuple[float, float, float]:
        """Converts the position to a (longitude, latitude, height) tuple, angles in radians"""
        return math.radians(self.longitude), math.radians(self.latitude), self.height
