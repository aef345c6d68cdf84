"""
Module for conversions between geocentric Cartesian and geodetic (cartographic) positions
"""
__all__ = [
    'cartesian_from_cartographic', 'cartesian_from_cartographic_array',
    'cartesian_from_degrees', 'cartesian_from_radians',
    'cartographic_from_cartesian', 'cartographic_from_cartesian_array',
    'geodetic_surface_normal', 'geodetic_surface_normal_cartographic',
]

import math
from typing import Optional

import numpy as np

from ellipsoids.cartesian import Cartesian
from ellipsoids.cartographic import Cartographic
from ellipsoids.ellipsoid import Ellipsoid, WGS84
from ellipsoids.projection import scale_to_geodetic_surface
from ellipsoids.utils.functions import sign


def geodetic_surface_normal(cartesian: Cartesian, ellipsoid: Ellipsoid = WGS84) -> Cartesian:
    """
    Computes the outward unit normal of the ellipsoid at a point on its surface. For
    points off the surface, this is the normal of the confocal surface through the point.

    Args:
        cartesian:
            A point, typically on the ellipsoid surface

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        Cartesian
    """
    return cartesian.multiply_components(ellipsoid.one_over_radii_squared).normalize()


def geodetic_surface_normal_cartographic(cartographic: Cartographic) -> Cartesian:
    """
    Computes the outward unit normal of the ellipsoid at a geodetic position. The
    normal depends only on longitude and latitude.

    Args:
        cartographic:
            A geodetic position

    Returns:
        Cartesian
    """
    lon, lat, _ = cartographic.to_radians()
    cos_lat = math.cos(lat)
    return Cartesian(
        cos_lat * math.cos(lon),
        cos_lat * math.sin(lon),
        math.sin(lat),
    ).normalize()


def cartographic_from_cartesian(
    cartesian: Cartesian,
    ellipsoid: Ellipsoid = WGS84
) -> Optional[Cartographic]:
    """
    Converts a geocentric Cartesian point to longitude, latitude, and height above
    the ellipsoid.

    Args:
        cartesian:
            The point to be converted, in meters

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        Cartographic, or None if the point could not be projected onto the surface
        (i.e. it is at the ellipsoid center, or the projection did not converge)
    """
    surface = scale_to_geodetic_surface(cartesian, ellipsoid)
    if surface is None:
        return None

    normal = geodetic_surface_normal(surface, ellipsoid)
    h = cartesian - surface

    longitude = math.atan2(normal.y, normal.x)
    latitude = math.asin(normal.z)
    height = sign(h.dot(cartesian)) * h.magnitude()

    return Cartographic(math.degrees(longitude), math.degrees(latitude), height)


def cartesian_from_cartographic(
    cartographic: Cartographic,
    ellipsoid: Ellipsoid = WGS84
) -> Cartesian:
    """
    Converts longitude, latitude, and height above the ellipsoid to a geocentric
    Cartesian point.

    Args:
        cartographic:
            The geodetic position to be converted

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        Cartesian
    """
    normal = geodetic_surface_normal_cartographic(cartographic)
    k = ellipsoid.radii_squared.multiply_components(normal)
    gamma = math.sqrt(normal.dot(k))
    return k / gamma + normal * cartographic.height


def cartesian_from_degrees(
    longitude: float,
    latitude: float,
    height: float = 0.,
    ellipsoid: Ellipsoid = WGS84
) -> Cartesian:
    """Convenience wrapper around cartesian_from_cartographic for values in degrees"""
    return cartesian_from_cartographic(Cartographic(longitude, latitude, height), ellipsoid)


def cartesian_from_radians(
    longitude: float,
    latitude: float,
    height: float = 0.,
    ellipsoid: Ellipsoid = WGS84
) -> Cartesian:
    """Convenience wrapper around cartesian_from_cartographic for values in radians"""
    return cartesian_from_cartographic(
        Cartographic.from_radians(longitude, latitude, height),
        ellipsoid
    )


def _as_rows(points, allowed_columns) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim == 1:
        arr = arr[np.newaxis, :]

    if arr.ndim != 2 or arr.shape[1] not in allowed_columns:
        raise ValueError(
            f'Expected an array of shape (N, {"|".join(map(str, allowed_columns))}); '
            f'received {np.shape(points)}'
        )

    return arr


def cartographic_from_cartesian_array(points, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """
    Converts many Cartesian points at once.

    Args:
        points:
            An array-like of [x, y, z], either a single row of shape (3,) or
            many rows of shape (N, 3)

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        A numpy array of [longitude, latitude, height] rows with the same leading
        shape as the input. Rows which could not be converted are filled with nan.
    """
    arr = _as_rows(points, (3,))
    out = np.full(arr.shape, np.nan)
    for idx, row in enumerate(arr):
        result = cartographic_from_cartesian(Cartesian(*row), ellipsoid)
        if result is not None:
            out[idx] = result.to_float()

    return out[0] if np.ndim(points) == 1 else out


def cartesian_from_cartographic_array(points, ellipsoid: Ellipsoid = WGS84) -> np.ndarray:
    """
    Converts many geodetic positions at once.

    Args:
        points:
            An array-like of [longitude, latitude, height] (degrees, degrees, meters),
            either a single row or many rows of shape (N, 3). Rows of shape (N, 2)
            are treated as having zero height.

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        A numpy array of [x, y, z] rows with the same leading shape as the input
    """
    arr = _as_rows(points, (2, 3))
    if arr.shape[1] == 2:
        arr = np.hstack([arr, np.zeros((arr.shape[0], 1))])

    out = np.array([
        cartesian_from_cartographic(Cartographic(*row), ellipsoid).to_float()
        for row in arr
    ]).reshape(arr.shape)

    return out[0] if np.ndim(points) == 1 else out
