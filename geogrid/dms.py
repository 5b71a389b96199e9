"""
Parsing and formatting of angles as degrees / minutes / seconds.

Latitude/longitude values may be written as decimal degrees, or subdivided into
sexagesimal minutes and seconds, with a variety of separators and an optional
compass direction.
"""

__all__ = [
    'get_separator', 'parse_dms', 'set_separator', 'to_dms', 'to_lat', 'to_lon',
]

import math
import re
from typing import Dict, List, Optional, Tuple, Union

from geogrid.utils.functions import round_half_away
from geogrid.utils.logging import LOGGER

# Format aliases mapped to (canonical format, default decimal places)
_FORMATS: Dict[str, Tuple[str, int]] = {
    'd': ('d', 4),
    'deg': ('d', 4),
    'dm': ('dm', 2),
    'deg+min': ('dm', 2),
    'dms': ('dms', 0),
    'deg+min+sec': ('dms', 0),
}

_COMPASS_SUFFIX = re.compile(r'[NSEW]$', re.IGNORECASE)
_NEGATIVE_MARKER = re.compile(r'^-|[WS]$', re.IGNORECASE)
_NON_NUMERIC = re.compile(r'[^0-9.,]+')

# Separator placed between degrees, minutes, seconds and compass direction
_SEPARATOR = ''


def set_separator(separator: str):
    """
    Set the separator used between degrees, minutes, seconds and the compass
    direction when formatting, e.g. ' ' (narrow no-break space) gives
    51° 12′ 00″ N rather than 51°12′00″N.

    Args:
        separator:
            The separator string
    """
    global _SEPARATOR
    _SEPARATOR = separator


def get_separator() -> str:
    """Returns the separator currently used when formatting"""
    return _SEPARATOR


def _to_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def parse_dms(dms: Union[str, float, int]) -> Optional[float]:
    """
    Parses a string representing degrees/minutes/seconds into numeric degrees.

    Accepts signed decimal degrees, or deg-min-sec optionally suffixed by a
    compass direction (NSEW). Any run of non-numeric characters is treated as a
    separator (eg 3° 37′ 09″W, 3 37 09W), and seconds and minutes may be omitted.

    Args:
        dms:
            Degrees or deg/min/sec in a variety of formats

    Returns:
        The angle in signed decimal degrees, or None if the value can't be parsed

    Example:
        lat = parse_dms('51° 28′ 40.12″ N')  # 51.4778
        lon = parse_dms('000° 00′ 05.31″ W')  # -0.0015
    """
    if isinstance(dms, (int, float)):
        return float(dms)

    trimmed = dms.strip()
    as_number = _to_float(trimmed)
    if as_number is not None:
        return as_number

    # Strip off any sign or compass direction & split out separate d/m/s
    stripped = trimmed[1:] if trimmed.startswith('-') else trimmed
    stripped = _COMPASS_SUFFIX.sub('', stripped)

    parts: List[float] = [
        x for x in map(_to_float, _NON_NUMERIC.split(stripped)) if x is not None
    ]

    if len(parts) == 3:
        deg = parts[0] + parts[1] / 60 + parts[2] / 3600
    elif len(parts) == 2:
        deg = parts[0] + parts[1] / 60
    elif len(parts) == 1:
        deg = parts[0]
    else:
        LOGGER.debug("Failed to convert '%s' to decimal degrees", dms)
        return None

    if _NEGATIVE_MARKER.search(trimmed):
        # '-', west and south are negative
        deg = -deg

    return deg


def _whole(value: float) -> str:
    """Renders a whole number without a decimal point; inf/nan render as-is"""
    if math.isfinite(value):
        return str(int(value))
    return str(value)


def _floor(value: float) -> float:
    return math.floor(value) if math.isfinite(value) else value


def to_dms(deg: float, fmt: str = 'dms', dp: Optional[int] = None) -> Optional[str]:
    """
    Converts decimal degrees to deg/min/sec format. Degree, prime and double-prime
    symbols are added; the sign is discarded and no compass direction is added.

    An unrecognized format falls back to 'dms' with 0 decimal places.

    Args:
        deg:
            Degrees to be formatted

        fmt: (str)
            (Default 'dms') One of 'd', 'dm', 'dms' (or 'deg', 'deg+min',
            'deg+min+sec') for degrees, degrees+minutes, degrees+minutes+seconds

        dp: (int)
            (Default 4 for 'd', 2 for 'dm', 0 for 'dms') Number of decimal
            places to use on the last component

    Returns:
        The formatted angle, or None if deg is NaN
    """
    if math.isnan(deg):
        return None

    if fmt in _FORMATS:
        fmt, default_dp = _FORMATS[fmt]
        precision = default_dp if dp is None else dp
    else:
        fmt, precision = 'dms', 0

    degrees = abs(deg)
    sep = _SEPARATOR

    if fmt == 'd':
        d_str = f'{degrees:.{precision}f}'
        rounded = float(d_str)  # pad by the rendered value, e.g. 99.99999 -> 100.0000
        if rounded < 100:
            d_str = '0' + d_str
        if rounded < 10:
            d_str = '0' + d_str
        return f'{d_str}°'

    if fmt == 'dm':
        d = _floor(degrees)
        m = round_half_away((degrees * 60) % 60, precision)
        if m == 60:
            m = 0.
            d += 1

        d_str = ('000' + _whole(d))[-3:]
        m_str = f'{m:.{precision}f}'
        if m < 10:
            m_str = '0' + m_str
        return f'{d_str}°{sep}{m_str}′'

    d = _floor(degrees)
    m = (degrees * 3600 // 60) % 60
    s = round_half_away((degrees * 3600) % 60, precision)
    if s == 60:
        s = 0.
        m += 1
    if m == 60:
        m = 0.
        d += 1

    d_str = ('000' + _whole(d))[-3:]
    m_str = ('00' + _whole(m))[-2:]
    s_str = f'{s:.{precision}f}'
    if s < 10:
        s_str = '0' + s_str
    return f'{d_str}°{sep}{m_str}′{sep}{s_str}″'


def to_lat(deg: float, fmt: str = 'dms', dp: Optional[int] = None) -> str:
    """
    Converts numeric degrees to a deg/min/sec latitude (2-digit degrees, suffixed
    with N/S).

    Args:
        deg:
            Degrees to be formatted

        fmt: (str)
            (Default 'dms') See to_dms()

        dp: (int)
            (Default depends on fmt) See to_dms()

    Returns:
        The formatted latitude, or '-' if deg is not a number
    """
    lat = to_dms(deg, fmt, dp)
    if lat is None:
        return '-'

    # knock off the initial '0' for latitudes
    return f'{lat[1:]}{_SEPARATOR}{"S" if deg < 0 else "N"}'


def to_lon(deg: float, fmt: str = 'dms', dp: Optional[int] = None) -> str:
    """
    Converts numeric degrees to a deg/min/sec longitude (3-digit degrees, suffixed
    with E/W).

    Args:
        deg:
            Degrees to be formatted

        fmt: (str)
            (Default 'dms') See to_dms()

        dp: (int)
            (Default depends on fmt) See to_dms()

    Returns:
        The formatted longitude, or '-' if deg is not a number
    """
    lon = to_dms(deg, fmt, dp)
    if lon is None:
        return '-'

    return f'{lon}{_SEPARATOR}{"W" if deg < 0 else "E"}'
