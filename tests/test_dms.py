import math

import pytest
from pytest import approx

from geogrid.dms import get_separator, parse_dms, set_separator, to_dms, to_lat, to_lon


DMS_VARIATIONS = [
    '45.76260',
    '45.76260 ',
    '45.76260°',
    '45°45.756′',
    '45° 45.756′',
    '45 45.756',
    '45°45′45.36″',
    '45º45\'45.36"',
    '45°45’45.36”',
    '45 45 45.36 ',
    '45° 45′ 45.36″',
    '45º 45\' 45.36"',
    '45° 45’ 45.36”',
]


@pytest.mark.parametrize('dms', DMS_VARIATIONS)
def test_parse_dms_variations(dms):
    assert parse_dms(dms) == approx(45.76260)
    assert parse_dms('-' + dms) == approx(-45.76260)
    assert parse_dms(dms + 'N') == approx(45.76260)
    assert parse_dms(dms + 'S') == approx(-45.76260)
    assert parse_dms(dms + 'E') == approx(45.76260)
    assert parse_dms(dms + 'W') == approx(-45.76260)


def test_parse_dms_numeric():
    assert parse_dms(51.2) == 51.2
    assert parse_dms(-3) == -3.
    assert isinstance(parse_dms(-3), float)

    # out of range values are passed through
    assert parse_dms('185') == 185.
    assert parse_dms('-365') == -365.

    assert parse_dms('51° 28′ 40.12″ N') == approx(51.4778, abs=1e-4)
    assert parse_dms('000° 00′ 05.31″ W') == approx(-0.0015, abs=1e-4)
    assert parse_dms('3 37 09w') == approx(-3.619167, abs=1e-6)


def test_parse_dms_failures():
    assert parse_dms('0 0 0 0') is None
    assert parse_dms('xxx') is None
    assert parse_dms('') is None


def test_to_dms_zero():
    assert to_dms(0, 'd') == '000.0000°'
    assert to_dms(0, 'd', 0) == '000°'
    assert to_dms(0) == '000°00′00″'
    assert to_dms(0, 'dms', 2) == '000°00′00.00″'


def test_to_dms():
    assert to_dms(45.76260) == '045°45′45″'
    assert to_dms(45.76260, 'd') == '045.7626°'
    assert to_dms(45.76260, 'dm') == '045°45.76′'
    assert to_dms(45.76260, 'dms') == '045°45′45″'
    assert to_dms(45.76260, 'd', 6) == '045.762600°'
    assert to_dms(45.76260, 'dm', 4) == '045°45.7560′'
    assert to_dms(45.76260, 'dms', 2) == '045°45′45.36″'

    # sign is discarded
    assert to_dms(-45.76260) == '045°45′45″'

    # long-form aliases
    assert to_dms(45.76260, 'deg') == '045.7626°'
    assert to_dms(45.76260, 'deg+min') == '045°45.76′'
    assert to_dms(45.76260, 'deg+min+sec') == '045°45′45″'

    # unknown formats fall back to dms
    assert to_dms(45.76260, 'xxx') == '045°45′45″'
    assert to_dms(45.76260, 'xxx', 6) == '045°45′45″'


def test_to_dms_rounding_carries():
    assert to_dms(51.19999999999999, 'd') == '051.2000°'
    assert to_dms(51.19999999999999, 'dm') == '051°12.00′'
    assert to_dms(51.19999999999999, 'dms') == '051°12′00″'

    assert to_dms(0.9999999, 'dm') == '001°00.00′'
    assert to_dms(179.9999999) == '180°00′00″'

    # padding follows the rounded value
    assert to_dms(99.99999, 'd') == '100.0000°'
    assert to_dms(9.99999, 'd') == '010.0000°'
    assert to_dms(9.99999, 'd', 6) == '009.999990°'
    assert to_lat(9.99999, 'd') == '10.0000°N'
    assert to_lon(-99.99999, 'd') == '100.0000°W'


def test_to_dms_non_finite():
    assert to_dms(math.nan) is None
    assert to_dms(math.inf) == 'inf°an′nan″'


def test_to_lat():
    assert to_lat(51.2) == '51°12′00″N'
    assert to_lat(-51.2) == '51°12′00″S'
    assert to_lat(51.2, 'd') == '51.2000°N'
    assert to_lat(math.nan) == '-'


def test_to_lon():
    assert to_lon(0.33) == '000°19′48″E'
    assert to_lon(-0.33) == '000°19′48″W'
    assert to_lon(-135.4545, 'd') == '135.4545°W'
    assert to_lon(math.nan) == '-'


def test_separator():
    assert get_separator() == ''
    try:
        set_separator(' ')
        assert get_separator() == ' '
        assert to_lat(51.2) == '51° 12′ 00″ N'
        assert to_lon(0.33, 'dm') == '000° 19.80′ E'
    finally:
        set_separator('')

    assert to_lat(51.2) == '51°12′00″N'
