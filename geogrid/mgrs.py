"""
Conversion between Universal Transverse Mercator (UTM) coordinates and Military
Grid Reference System (MGRS/NATO) grid references.

q.v. www.fgdc.gov/standards/projects/FGDC-standards-projects/usng/fgdc_std_011_2001_usng.pdf p10
"""

__all__ = ['Mgrs', 'format_mgrs', 'mgrs_to_utm', 'parse_mgrs', 'utm_to_mgrs']

import math
import re
from typing import Optional, Tuple

from geogrid._const import (
    E100K_LETTERS, GRID_SQUARE_SIZE, LATITUDE_BANDS, MGRS_PRECISIONS, N100K_LETTERS,
    ROW_LETTER_CYCLE,
)
from geogrid.coordinates import LatLon
from geogrid.datums import Datum, WGS84
from geogrid.errors import GridLetterError, OutOfRangeError, ParseError
from geogrid.utils.functions import round_half_away
from geogrid.utm import Utm, _central_meridian, latlon_to_utm, utm_to_latlon


_VALID_BANDS = LATITUDE_BANDS[:-1]

# Grid reference patterns, tried in order
_SEPARATED = re.compile(
    r'^(?P<zone>\d{1,2})(?P<band>[A-Z])\s+(?P<e100k>[A-Z])(?P<n100k>[A-Z])\s+'
    r'(?P<easting>\d+(?:\.\d*)?)\s+(?P<northing>\d+(?:\.\d*)?)$'
)
_MILITARY = re.compile(
    r'^(?P<zone>\d{1,2})(?P<band>[A-Z])(?P<e100k>[A-Z])(?P<n100k>[A-Z])(?P<digits>\d*)$'
)


class Mgrs:
    """
    An MGRS grid reference.

    Args:
        zone:
            6° longitudinal zone (1..60 covering 180°W..180°E)

        band:
            8° latitudinal band (C..X covering 80°S..84°N)

        e100k:
            First letter (E) of the 100km grid square

        n100k:
            Second letter (N) of the 100km grid square

        easting:
            Easting in meters within the 100km grid square

        northing:
            Northing in meters within the 100km grid square

        datum: (Datum)
            (Default WGS84) The datum the grid reference is based on

    Example:
        Mgrs(31, 'U', 'D', 'Q', 48251, 11932)  # 31U DQ 48251 11932
    """

    def __init__(
        self,
        zone: int,
        band: str,
        e100k: str,
        n100k: str,
        easting: float,
        northing: float,
        datum: Optional[Datum] = None,
    ):
        if isinstance(zone, bool) or not isinstance(zone, int) or not 1 <= zone <= 60:
            raise OutOfRangeError(f'Invalid MGRS grid reference (zone {zone})')

        if len(band) != 1 or band not in _VALID_BANDS:
            raise GridLetterError(f'Invalid MGRS grid reference (band {band})')

        if len(e100k) != 1 or e100k not in E100K_LETTERS[(zone - 1) % 3]:
            raise GridLetterError(
                f'Invalid MGRS grid reference (column letter {e100k} not used in zone {zone})'
            )

        if len(n100k) != 1 or n100k not in N100K_LETTERS[(zone - 1) % 2]:
            raise GridLetterError(
                f'Invalid MGRS grid reference (row letter {n100k} not used in zone {zone})'
            )

        self.zone = zone
        self.band = band
        self.e100k = e100k
        self.n100k = n100k
        self.easting = float(easting)
        self.northing = float(northing)
        if not 0 <= self.easting < GRID_SQUARE_SIZE or not 0 <= self.northing < GRID_SQUARE_SIZE:
            raise OutOfRangeError(
                f'Invalid MGRS grid reference (easting {easting}, northing {northing} '
                'must be within the 100km grid square)'
            )

        self.datum = datum if datum is not None else WGS84

    def __eq__(self, other):
        if not isinstance(other, Mgrs):
            return False

        return (
            self.zone == other.zone and
            self.band == other.band and
            self.e100k == other.e100k and
            self.n100k == other.n100k and
            self.easting == other.easting and
            self.northing == other.northing and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((
            self.zone, self.band, self.e100k, self.n100k,
            self.easting, self.northing, self.datum
        ))

    def __repr__(self):
        return (
            f'<Mgrs({self.zone:02d}{self.band} {self.e100k}{self.n100k} '
            f'{self.easting} {self.northing})>'
        )

    @classmethod
    def from_str(cls, mgrs_str: str, datum: Optional[Datum] = None) -> 'Mgrs':
        """
        Parses an MGRS grid reference, either space-separated ('31U DQ 48251 11932')
        or military style without spaces ('31UDQ4825111932').

        Easting/northing shorter than 5 digits are right-padded with zeros
        (e.g. '12S TC 52 86' is 12S TC 52000 86000); longer values and decimals
        are kept as given.

        Args:
            mgrs_str:
                The grid reference

            datum: (Datum)
                (Default WGS84) The datum the grid reference is based on

        Returns:
            Mgrs
        """
        zone, band, e100k, n100k, easting, northing = _split_grid_reference(mgrs_str)

        return cls(
            int(zone), band, e100k, n100k,
            float(_pad_digits(easting)), float(_pad_digits(northing)),
            datum
        )

    def to_military_str(self, precision: int = 10) -> str:
        """Renders this grid reference without spaces, e.g. '31UDQ4825111932'"""
        return self.to_str(precision).replace(' ', '')

    def to_str(self, precision: int = 10) -> str:
        """
        Renders this grid reference, e.g. '31U DQ 48251 11932'. No space is
        included within the zone/band grid zone designator, to distinguish it
        from a UTM coordinate.

        MGRS grid references are truncated, not rounded (unlike UTM coordinates).

        Args:
            precision: (int)
                (Default 10) Total digits of easting+northing: 2, 4, 6, 8 or 10
                (10km, 1km, 100m, 10m, 1m)

        Returns:
            str; an error message for an unsupported precision
        """
        if precision not in MGRS_PRECISIONS:
            return f'[Mgrs] Invalid precision {precision}'

        digits = precision // 2
        divisor = 10 ** (5 - digits)
        easting = _truncate(self.easting, divisor, digits)
        northing = _truncate(self.northing, divisor, digits)

        return f'{self.zone:02d}{self.band} {self.e100k}{self.n100k} {easting} {northing}'

    def to_utm(self) -> Utm:
        """
        Converts this grid reference to a UTM coordinate. See mgrs_to_utm()

        Returns:
            Utm
        """
        return mgrs_to_utm(self)

    def to_latlon(self) -> LatLon:
        """Converts this grid reference to a lat/lon point, via UTM"""
        return self.to_utm().to_latlon()


def _split_grid_reference(mgrs_str: str) -> Tuple[str, str, str, str, str, str]:
    """Splits a grid reference into zone, band, 100km letters, easting and northing"""
    ref = mgrs_str.strip().upper()

    match = _SEPARATED.match(ref)
    if match:
        return (
            match['zone'], match['band'], match['e100k'], match['n100k'],
            match['easting'], match['northing']
        )

    match = _MILITARY.match(ref)
    if match and len(match['digits']) % 2 == 0:
        digits = match['digits']
        half = len(digits) // 2
        return (
            match['zone'], match['band'], match['e100k'], match['n100k'],
            digits[:half], digits[half:]
        )

    raise ParseError(f'Invalid MGRS grid reference: {mgrs_str}')


def _pad_digits(value: str) -> str:
    # standardise to 10-digit refs (ie meters); decimals are already in meters
    if '.' not in value and len(value) < 5:
        return (value + '00000')[:5]
    return value


def _truncate(value: float, divisor: int, digits: int) -> str:
    truncated = math.floor(value / divisor)
    return str(truncated).zfill(digits)


def _index(letters: str, letter: str, kind: str, zone: int) -> int:
    index = letters.find(letter)
    if index < 0:
        raise GridLetterError(f'{kind} letter {letter} is not used in zone {zone}')
    return index


def utm_to_mgrs(utm: Utm) -> Mgrs:
    """
    Converts a UTM coordinate to an MGRS grid reference.

    Args:
        utm:
            The UTM coordinate

    Returns:
        Mgrs

    Example:
        utm_to_mgrs(Utm(31, 'N', 448251, 5411932)).to_str()  # '31U DQ 48251 11932'
    """
    zone = utm.zone

    # convert to lat/lon to determine the latitude band
    point, _, _ = utm_to_latlon(utm)
    band_index = math.floor(point.latitude / 8 + 10)
    if not 0 <= band_index < len(LATITUDE_BANDS):
        raise OutOfRangeError(f'Latitude {point.latitude} is outside MGRS latitude bands')
    band = LATITUDE_BANDS[band_index]

    # round to nm first so the residuals can't round up into the next grid square
    utm_easting = round_half_away(utm.easting, 6)
    utm_northing = round_half_away(utm.northing, 6)

    # columns in zone 1 are A-H, zone 2 J-R, zone 3 S-Z, then repeating every 3rd zone;
    # col-1 since 1*100e3 -> A (index 0), 2*100e3 -> B (index 1), etc.
    col = math.floor(utm_easting / GRID_SQUARE_SIZE)
    columns = E100K_LETTERS[(zone - 1) % 3]
    if not 1 <= col <= len(columns):
        raise OutOfRangeError(f'Easting {utm.easting} is outside the 100km grid squares of zone {zone}')
    e100k = columns[col - 1]

    # rows in odd zones are A-V, in even zones are F-E
    row = math.floor(utm_northing / GRID_SQUARE_SIZE) % 20
    n100k = N100K_LETTERS[(zone - 1) % 2][row]

    # truncate easting/northing to within the 100km grid square, at nm precision
    easting = round_half_away(math.fmod(utm_easting, GRID_SQUARE_SIZE), 6)
    northing = round_half_away(math.fmod(utm_northing, GRID_SQUARE_SIZE), 6)

    return Mgrs(zone, band, e100k, n100k, easting, northing, utm.datum)


def mgrs_to_utm(mgrs: Mgrs) -> Utm:
    """
    Converts an MGRS grid reference to a UTM coordinate.

    Row letters repeat every 2,000km, so the northing is resolved as the first
    repetition at or above the bottom of the latitude band. A 100km square which
    straddles two bands decodes to the same point whichever band it is given
    with (e.g. 01P ET 00000 68935 and 01Q ET 00000 68935).

    Args:
        mgrs:
            The MGRS grid reference

    Returns:
        Utm

    Example:
        parse_mgrs('31U DQ 48251 11932').to_utm().to_str()  # '31 N 448251 5411932'
    """
    zone = mgrs.zone
    hemisphere = 'N' if mgrs.band >= 'N' else 'S'

    # index+1 since A (index 0) -> 1*100e3, B (index 1) -> 2*100e3, etc.
    col = _index(E100K_LETTERS[(zone - 1) % 3], mgrs.e100k, 'Column', zone) + 1
    e100k = col * GRID_SQUARE_SIZE

    row = _index(N100K_LETTERS[(zone - 1) % 2], mgrs.n100k, 'Row', zone)
    n100k = row * GRID_SQUARE_SIZE

    # lowest northing of the bottom of the band, extended to include the entirety of
    # the bottom-most 100km square (100km square boundaries align with 100km UTM
    # northings). Parallels curve poleward away from the central meridian, so the
    # lowest point is on the central meridian in the northern hemisphere and at the
    # zone edge in the southern. Northing depends only on the offset from the central
    # meridian, so zone 1 (which has no irregular grid zones) stands in for any zone.
    band_latitude = (_index(LATITUDE_BANDS, mgrs.band, 'Band', zone) - 10) * 8
    offset = 0 if band_latitude >= 0 else -3
    band_bottom = latlon_to_utm(
        LatLon(band_latitude, _central_meridian(1) + offset, mgrs.datum)
    ).northing
    band_floor = math.floor(band_bottom / GRID_SQUARE_SIZE) * GRID_SQUARE_SIZE

    # add enough 2,000km blocks to get into the required band
    n2m = 0.
    while n2m + n100k + mgrs.northing < band_floor:
        n2m += ROW_LETTER_CYCLE

    return Utm(zone, hemisphere, e100k + mgrs.easting, n2m + n100k + mgrs.northing, mgrs.datum)


def parse_mgrs(mgrs_str: str, datum: Optional[Datum] = None) -> Mgrs:
    """Parses an MGRS grid reference string. See Mgrs.from_str()"""
    return Mgrs.from_str(mgrs_str, datum)


def format_mgrs(mgrs: Mgrs, precision: int = 10) -> str:
    """Renders an MGRS grid reference as a string. See Mgrs.to_str()"""
    return mgrs.to_str(precision)
