import pytest

from geogrid import DATUMS, ELLIPSOIDS, WGS84, Datum, Ellipsoid, get_datum


def test_ellipsoid():
    wgs84 = ELLIPSOIDS['WGS84']
    assert wgs84.a == 6378137.
    assert wgs84.e2 == pytest.approx(0.00669437999014)
    assert wgs84 == Ellipsoid(6378137, 6356752.314245, 1 / 298.257223563, 'other name')
    assert wgs84 != ELLIPSOIDS['GRS80']
    assert len({ELLIPSOIDS['Intl1924'], Ellipsoid(6378388, 6356911.946, 1 / 297)}) == 1
    assert repr(wgs84).startswith('<Ellipsoid(WGS84: a=6378137.0')


def test_datum_init():
    datum = Datum(ELLIPSOIDS['Airy1830'], [1, 2, 3, 4, 5, 6, 7], 'test')
    assert datum.transform == (1., 2., 3., 4., 5., 6., 7.)
    assert repr(datum) == '<Datum(test)>'

    with pytest.raises(ValueError):
        Datum(ELLIPSOIDS['Airy1830'], [1, 2, 3])


def test_datum_eq_hash():
    # names are display-only
    assert DATUMS['ED50'] == DATUMS['Intl1924']
    assert len({DATUMS['ED50'], DATUMS['Intl1924']}) == 1
    assert DATUMS['OSGB36'] != DATUMS['WGS84']
    assert DATUMS['WGS84'] != 'WGS84'


def test_datum_inverse_transform():
    assert DATUMS['NAD27'].inverse_transform() == (-8., 160., 176., 0., 0., 0., 0.)
    assert WGS84.inverse_transform() == (0.,) * 7


def test_datum_registry():
    assert set(DATUMS.keys()) == {
        'ED50', 'Intl1924', 'Irl1975', 'NAD27', 'NAD83', 'NTF', 'OSGB36',
        'Potsdam', 'TokyoJapan', 'WGS72', 'WGS84',
    }
    assert DATUMS['OSGB36'].ellipsoid == ELLIPSOIDS['Airy1830']
    assert DATUMS['TokyoJapan'].ellipsoid == ELLIPSOIDS['Bessel1841']
    assert WGS84.transform == (0.,) * 7


def test_get_datum():
    assert get_datum('OSGB36') is DATUMS['OSGB36']
    assert get_datum('osgb36') is DATUMS['OSGB36']

    with pytest.raises(KeyError):
        get_datum('not a datum')
