import math

import pytest

from ellipsoids import Cartesian, Cartographic, Ellipsoid, WGS84
from ellipsoids._const import EPSILON1, WGS84_A, WGS84_B

from tests.functions import assert_cartesians_equal, assert_cartographics_equal


def test_ellipsoid_init():
    ellipsoid = Ellipsoid(2., 1.)
    assert ellipsoid.equatorial_radius == 2.
    assert ellipsoid.polar_radius == 1.
    assert ellipsoid.radii == Cartesian(2., 2., 1.)
    assert ellipsoid.radii_squared == Cartesian(4., 4., 1.)
    assert ellipsoid.one_over_radii == Cartesian(0.5, 0.5, 1.)
    assert ellipsoid.one_over_radii_squared == Cartesian(0.25, 0.25, 1.)
    assert ellipsoid.center_tolerance_squared == EPSILON1

    assert Ellipsoid(2., 1., center_tolerance_squared=1e-6).center_tolerance_squared == 1e-6


def test_ellipsoid_invalid_radii():
    for a, b in ((0., 1.), (1., 0.), (-1., 1.), (1., -1.), (math.inf, 1.), (1., math.nan)):
        with pytest.raises(ValueError):
            Ellipsoid(a, b)


def test_ellipsoid_immutable():
    with pytest.raises(AttributeError):
        WGS84.center_tolerance_squared = 1.


def test_ellipsoid_eq():
    assert Ellipsoid(WGS84_A, WGS84_B) == WGS84
    assert Ellipsoid(WGS84_A, WGS84_A) != WGS84
    assert WGS84 != (WGS84_A, WGS84_B)
    assert len({WGS84, Ellipsoid(WGS84_A, WGS84_B)}) == 1


def test_ellipsoid_repr():
    assert repr(Ellipsoid(2., 1.)) == '<Ellipsoid(2.0, 1.0)>'


def test_wgs84():
    assert WGS84.radii_squared.x == 6378137.0 * 6378137.0
    assert WGS84.radii_squared.z == 6356752.3142451793 * 6356752.3142451793
    assert WGS84.one_over_radii.x == 1. / 6378137.0
    assert WGS84.one_over_radii_squared.z == 1. / (6356752.3142451793 * 6356752.3142451793)
    assert WGS84.center_tolerance_squared == 0.1
    assert WGS84.flattening == pytest.approx(1 / 298.257223563, rel=1e-9)


def test_ellipsoid_from_flattening():
    ellipsoid = Ellipsoid.from_flattening(6378137.0, 1 / 298.257223563)
    assert ellipsoid.equatorial_radius == 6378137.0
    assert ellipsoid.polar_radius == pytest.approx(6356752.3142451793, abs=1e-6)


def test_ellipsoid_contains():
    assert WGS84.contains(Cartesian(0., 0., 0.))
    assert WGS84.contains(Cartesian(6_000_000., 0., 0.))
    assert not WGS84.contains(Cartesian(0., 0., 6_378_000.))
    assert not WGS84.contains(Cartesian(7_000_000., 0., 0.))


def test_ellipsoid_conversions():
    sphere = Ellipsoid(1000., 1000.)

    assert_cartesians_equal(
        sphere.cartesian_from_cartographic(Cartographic(0., 90., 1000.)),
        Cartesian(0., 0., 2000.)
    )
    assert_cartographics_equal(
        sphere.cartographic_from_cartesian(Cartesian(0., 0., 2000.)),
        Cartographic(0., 90., 1000.)
    )
    assert_cartesians_equal(
        sphere.scale_to_geodetic_surface(Cartesian(0., 0., 2000.)),
        Cartesian(0., 0., 1000.)
    )
    assert_cartesians_equal(
        sphere.geodetic_surface_normal(Cartesian(0., 1000., 0.)),
        Cartesian(0., 1., 0.),
        abs_tol=1e-15
    )
    assert sphere.cartographic_from_cartesian(Cartesian(0., 0., 0.)) is None
