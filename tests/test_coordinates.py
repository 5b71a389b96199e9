import pytest

from geogrid import DATUMS, WGS84, LatLon, Mgrs, Utm, Vector3d
from tests.functions import assert_latlons_equal


def test_latlon_init():
    p = LatLon(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.
    assert p.datum is WGS84

    p = LatLon('1.0', '0.0', DATUMS['OSGB36'])
    assert p.to_float() == (1., 0.)
    assert p.datum is DATUMS['OSGB36']

    with pytest.raises(ValueError):
        LatLon('not a number', 0)


def test_latlon_eq_hash():
    points = [LatLon(0., 0.), LatLon(0., 0.), LatLon(1., 1.)]
    assert len(set(points)) == 2
    assert LatLon(0., 0.) in set(points)

    assert LatLon(0., 0.) != LatLon(0., 0., DATUMS['OSGB36'])
    assert LatLon(0., 0.) != (0., 0.)


def test_latlon_repr():
    assert repr(LatLon(48.8583, 2.2945)) == '<LatLon(48.8583, 2.2945)>'


def test_latlon_to_str():
    p = LatLon(48.8583, 2.2945)
    assert p.to_str() == '48°51′30″N, 002°17′40″E'
    assert p.to_str('dms', 2) == '48°51′29.88″N, 002°17′40.20″E'
    assert p.to_str('d') == '48.8583°N, 002.2945°E'
    assert LatLon(-33.857, -77.0365).to_str('d') == '33.8570°S, 077.0365°W'


def test_latlon_conversions():
    p = LatLon(48.8583, 2.2945)

    utm = p.to_utm()
    assert isinstance(utm, Utm)
    assert utm.to_str(3) == '31 N 448251.898 5411943.794'

    mgrs = p.to_mgrs()
    assert isinstance(mgrs, Mgrs)
    assert mgrs.to_str() == '31U DQ 48251 11943'

    cartesian = p.to_cartesian()
    assert isinstance(cartesian, Vector3d)

    assert_latlons_equal(p.convert_datum(DATUMS['OSGB36']).convert_datum(WGS84), p, abs_tol=1e-6)
