from ellipsoids._version import __version__  # noqa: F401
from ellipsoids.utils.logging import LOGGER, set_log_level
from ellipsoids.cartesian import Cartesian
from ellipsoids.cartographic import Cartographic
from ellipsoids.ellipsoid import Ellipsoid, WGS84
from ellipsoids.projection import scale_to_geocentric_surface, scale_to_geodetic_surface
from ellipsoids.conversion import (
    cartesian_from_cartographic, cartesian_from_cartographic_array,
    cartesian_from_degrees, cartesian_from_radians,
    cartographic_from_cartesian, cartographic_from_cartesian_array,
    geodetic_surface_normal, geodetic_surface_normal_cartographic,
)

__all__ = [
    'Cartesian',
    'Cartographic',
    'Ellipsoid',
    'WGS84',
    'cartesian_from_cartographic',
    'cartesian_from_cartographic_array',
    'cartesian_from_degrees',
    'cartesian_from_radians',
    'cartographic_from_cartesian',
    'cartographic_from_cartesian_array',
    'geodetic_surface_normal',
    'geodetic_surface_normal_cartographic',
    'scale_to_geocentric_surface',
    'scale_to_geodetic_surface',
    'LOGGER',
    'set_log_level',
]
