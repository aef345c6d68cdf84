import math

import pytest

from ellipsoids import Cartesian, Ellipsoid
from ellipsoids.conversion import cartesian_from_degrees, geodetic_surface_normal
from ellipsoids.projection import *
from ellipsoids.utils.logging import reset_warnings

from tests.functions import assert_cartesians_equal, ellipsoid_equation


def test_scale_to_geodetic_surface_on_surface():
    for lon, lat in ((0., 0.), (45., 30.), (-120., -60.), (179.5, 89.)):
        point = cartesian_from_degrees(lon, lat)
        assert_cartesians_equal(scale_to_geodetic_surface(point), point)


def test_scale_to_geodetic_surface_off_surface():
    surface = cartesian_from_degrees(30., 45.)
    normal = geodetic_surface_normal(surface)

    for height in (1000., -1000., 500_000., 35_786_000.):
        point = surface + normal * height
        actual = scale_to_geodetic_surface(point)
        assert_cartesians_equal(actual, surface)
        assert ellipsoid_equation(actual) == pytest.approx(1., abs=1e-12)


def test_scale_to_geodetic_surface_differs_from_radial():
    point = cartesian_from_degrees(30., 45., 1_000_000.)
    geodetic = scale_to_geodetic_surface(point)
    geocentric = scale_to_geocentric_surface(point)

    # Both lie on the surface, but only the geodetic projection is the normal foot
    assert ellipsoid_equation(geodetic) == pytest.approx(1., abs=1e-12)
    assert ellipsoid_equation(geocentric) == pytest.approx(1., abs=1e-12)
    assert geodetic.distance(geocentric) > 1000.
    assert point.distance(geodetic) < point.distance(geocentric)


def test_scale_to_geodetic_surface_axes():
    assert_cartesians_equal(
        scale_to_geodetic_surface(Cartesian(7_000_000., 0., 0.)),
        Cartesian(6378137.0, 0., 0.)
    )
    assert_cartesians_equal(
        scale_to_geodetic_surface(Cartesian(0., 0., -7_000_000.)),
        Cartesian(0., 0., -6356752.3142451793)
    )


def test_scale_to_geodetic_surface_center():
    assert scale_to_geodetic_surface(Cartesian(0., 0., 0.)) is None


def test_scale_to_geodetic_surface_near_center():
    # Inside the center tolerance; the radial intersection is returned without iteration
    assert_cartesians_equal(
        scale_to_geodetic_surface(Cartesian(1000., 0., 0.)),
        Cartesian(6378137.0, 0., 0.)
    )
    assert_cartesians_equal(
        scale_to_geodetic_surface(Cartesian(1000., 1000., 1000.)),
        scale_to_geocentric_surface(Cartesian(1000., 1000., 1000.))
    )


def test_scale_to_geodetic_surface_custom_ellipsoid():
    sphere = Ellipsoid(1000., 1000.)
    assert_cartesians_equal(
        scale_to_geodetic_surface(Cartesian(0., 3000., 4000.), sphere),
        Cartesian(0., 600., 800.)
    )


def test_scale_to_geodetic_surface_no_convergence(caplog):
    reset_warnings()
    point = cartesian_from_degrees(45., 45., 1_000_000.)

    assert scale_to_geodetic_surface(point, max_iterations=1) is None
    assert 'failed to converge' in caplog.text

    # Plenty of iterations available
    assert scale_to_geodetic_surface(point, max_iterations=50) is not None


def test_scale_to_geodetic_surface_non_finite():
    assert scale_to_geodetic_surface(Cartesian(math.nan, 0., 0.)) is None
    assert scale_to_geodetic_surface(Cartesian(math.inf, 0., 0.)) is None


def test_scale_to_geodetic_surface_invalid_iterations():
    with pytest.raises(ValueError):
        scale_to_geodetic_surface(Cartesian(7_000_000., 0., 0.), max_iterations=0)


def test_scale_to_geocentric_surface():
    assert_cartesians_equal(
        scale_to_geocentric_surface(Cartesian(0., 7_000_000., 0.)),
        Cartesian(0., 6378137.0, 0.)
    )
    assert_cartesians_equal(
        scale_to_geocentric_surface(Cartesian(0., 0., 10.)),
        Cartesian(0., 0., 6356752.3142451793)
    )

    point = Cartesian(1., 2., 3.)
    result = scale_to_geocentric_surface(point)
    assert ellipsoid_equation(result) == pytest.approx(1., abs=1e-12)
    assert result.normalize().equals_epsilon(point.normalize(), 1e-12)

    assert not scale_to_geocentric_surface(Cartesian(0., 0., 0.)).is_finite()
