"""
Projection of arbitrary Cartesian points onto the surface of an ellipsoid
"""

__all__ = ['scale_to_geocentric_surface', 'scale_to_geodetic_surface']

import math
from typing import Optional

from ellipsoids._const import EPSILON12, MAX_ITERATIONS
from ellipsoids.cartesian import Cartesian
from ellipsoids.ellipsoid import Ellipsoid, WGS84
from ellipsoids.utils.functions import safe_divide
from ellipsoids.utils.logging import LOGGER, warn_once


def _squared_ellipsoid_norm(cartesian: Cartesian, ellipsoid: Ellipsoid):
    """Squared components of the point after scaling each axis to a unit radius"""
    scaled = cartesian.multiply_components(ellipsoid.one_over_radii)
    return scaled.x * scaled.x, scaled.y * scaled.y, scaled.z * scaled.z


def scale_to_geocentric_surface(cartesian: Cartesian, ellipsoid: Ellipsoid = WGS84) -> Cartesian:
    """
    Scales a point along the ray from the ellipsoid center so that it lies on the surface.
    This is a radial projection; the result is generally not the nearest surface point.

    The center of the ellipsoid has no direction, and produces a non-finite result.

    Args:
        cartesian:
            The point to be scaled

        ellipsoid: (Default WGS84)
            The reference ellipsoid

    Returns:
        Cartesian
    """
    x2, y2, z2 = _squared_ellipsoid_norm(cartesian, ellipsoid)
    ratio = math.sqrt(safe_divide(1., x2 + y2 + z2))
    return cartesian.multiply_by_scalar(ratio)


def scale_to_geodetic_surface(
    cartesian: Cartesian,
    ellipsoid: Ellipsoid = WGS84,
    max_iterations: int = MAX_ITERATIONS,
) -> Optional[Cartesian]:
    """
    Finds the point on the ellipsoid surface whose outward normal passes through the
    given point.

    The radial intersection is used as an initial guess, then the multiplier (lambda)
    of the surface normal is refined with Newton-Raphson until the point satisfies the
    ellipsoid equation to within 1e-12. Points closer to the center than the ellipsoid's
    center tolerance are not iterated; their radial intersection is returned instead.

    Args:
        cartesian:
            The point to be projected

        ellipsoid: (Default WGS84)
            The reference ellipsoid

        max_iterations: (int) (Default 1000)
            The number of Newton-Raphson passes after which the projection is abandoned

    Returns:
        The surface point, or None if the point is at (or numerically indistinguishable
        from) the ellipsoid center, or if the iteration failed to converge.
    """
    if max_iterations < 1:
        raise ValueError(f'max_iterations must be at least 1; received {max_iterations}')

    x2, y2, z2 = _squared_ellipsoid_norm(cartesian, ellipsoid)
    squared_norm = x2 + y2 + z2
    ratio = math.sqrt(safe_divide(1., squared_norm))

    # As an initial approximation, assume that the radial intersection is the projection point
    intersection = cartesian.multiply_by_scalar(ratio)

    # Near the center the iteration will not converge
    if squared_norm < ellipsoid.center_tolerance_squared:
        if not math.isfinite(ratio):
            LOGGER.debug('Cannot project %s onto the ellipsoid surface; point is at the center.', cartesian)
            return None

        return intersection

    inv_x2, inv_y2, inv_z2 = ellipsoid.one_over_radii_squared

    # The gradient at the intersection stands in for the true unit normal;
    # the difference in magnitude is absorbed by lambda
    gradient = intersection.multiply_components(ellipsoid.one_over_radii_squared) * 2.
    lambda_ = ((1. - ratio) * cartesian.magnitude()) / (0.5 * gradient.magnitude())
    correction = 0.

    for _ in range(max_iterations):
        lambda_ -= correction

        x_mult = safe_divide(1., 1. + lambda_ * inv_x2)
        y_mult = safe_divide(1., 1. + lambda_ * inv_y2)
        z_mult = safe_divide(1., 1. + lambda_ * inv_z2)

        x_mult2, y_mult2, z_mult2 = x_mult * x_mult, y_mult * y_mult, z_mult * z_mult

        func = x2 * x_mult2 + y2 * y_mult2 + z2 * z_mult2 - 1.
        if abs(func) <= EPSILON12:
            return Cartesian(
                cartesian.x * x_mult,
                cartesian.y * y_mult,
                cartesian.z * z_mult,
            )

        if not math.isfinite(func):
            break

        denominator = (
            x2 * x_mult2 * x_mult * inv_x2 +
            y2 * y_mult2 * y_mult * inv_y2 +
            z2 * z_mult2 * z_mult * inv_z2
        )
        derivative = -2. * denominator
        correction = safe_divide(func, derivative)

    warn_once(
        'Geodetic surface projection failed to converge; no result will be returned '
        '(this warning will not repeat)'
    )
    LOGGER.debug('Surface projection of %s did not converge within %d iterations.', cartesian, max_iterations)
    return None
