"""
Conversion between Universal Transverse Mercator (UTM) coordinates and
latitude/longitude points.

Implements Karney's method (Karney 2011, 'Transverse Mercator with an accuracy of
a few nanometers'), building on Krüger 1912, using the Krüger series to order
n^6. Results are accurate to 5nm for distances up to 3900km from the central
meridian.
"""

__all__ = ['Utm', 'format_utm', 'latlon_to_utm', 'parse_utm', 'utm_to_latlon']

import math
from typing import Dict, List, Optional, Tuple

from geogrid._const import (
    FALSE_EASTING, FALSE_NORTHING, LATITUDE_BANDS, UTM_MAX_LATITUDE, UTM_MIN_LATITUDE,
    UTM_SCALE_FACTOR,
)
from geogrid.coordinates import LatLon
from geogrid.datums import Datum, Ellipsoid, WGS84
from geogrid.errors import OutOfRangeError, ParseError
from geogrid.utils.functions import round_half_away
from geogrid.utils.logging import warn_once

# Irregular grid zones (Norway/Svalbard): (zone, band) -> (boundary longitude,
# zone shift for points west of the boundary, zone shift for points on or east of it)
_ZONE_EXCEPTIONS: Dict[Tuple[int, str], Tuple[float, int, int]] = {
    (31, 'V'): (3., 0, 1),
    (32, 'X'): (9., -1, 1),
    (34, 'X'): (21., -1, 1),
    (36, 'X'): (33., -1, 1),
}

_NEWTON_TOLERANCE = 1e-12
_NEWTON_MAX_ITERATIONS = 100


class Utm:
    """
    A UTM coordinate.

    Args:
        zone:
            UTM 6° longitudinal zone (1..60 covering 180°W..180°E)

        hemisphere:
            'N' for the northern hemisphere, 'S' for the southern (case-insensitive)

        easting:
            Easting in meters from the false easting (-500km from the central meridian)

        northing:
            Northing in meters from the equator (N) or from the false northing
            -10,000km (S)

        datum: (Datum)
            (Default WGS84) The datum the coordinate is based on

        convergence: (float)
            Meridian convergence (bearing of grid north clockwise from true north),
            in degrees. Populated by projections.

        scale: (float)
            Grid scale factor. Populated by projections.
    """

    def __init__(
        self,
        zone: int,
        hemisphere: str,
        easting: float,
        northing: float,
        datum: Optional[Datum] = None,
        convergence: Optional[float] = None,
        scale: Optional[float] = None,
    ):
        if isinstance(zone, bool) or not isinstance(zone, int) or not 1 <= zone <= 60:
            raise OutOfRangeError(f'Invalid UTM zone {zone}')

        if not isinstance(hemisphere, str) or hemisphere.upper() not in ('N', 'S'):
            raise OutOfRangeError(f'Invalid UTM hemisphere {hemisphere}')

        self.zone = zone
        self.hemisphere = hemisphere.upper()
        self.easting = float(easting)
        self.northing = float(northing)
        self.datum = datum if datum is not None else WGS84
        self.convergence = convergence
        self.scale = scale

    def __eq__(self, other):
        if not isinstance(other, Utm):
            return False

        return (
            self.zone == other.zone and
            self.hemisphere == other.hemisphere and
            self.easting == other.easting and
            self.northing == other.northing and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.zone, self.hemisphere, self.easting, self.northing, self.datum))

    def __repr__(self):
        return f'<Utm({self.zone:02d} {self.hemisphere} {self.easting} {self.northing})>'

    @classmethod
    def from_str(cls, utm_str: str, datum: Optional[Datum] = None) -> 'Utm':
        """
        Parses a UTM coordinate from its space-separated string representation:
        zone, hemisphere, easting and northing, e.g. '31 N 448251 5411932'

        Args:
            utm_str:
                The UTM coordinate string

            datum: (Datum)
                (Default WGS84) The datum the coordinate is defined in

        Returns:
            Utm
        """
        parts = utm_str.split()
        if len(parts) != 4:
            raise ParseError(f'Invalid UTM coordinate: {utm_str}')

        zone, hemisphere, easting, northing = parts
        try:
            zone_num, east, north = int(zone), float(easting), float(northing)
        except ValueError as exc:
            raise ParseError(f'Invalid UTM coordinate: {utm_str}') from exc

        return cls(zone_num, hemisphere, east, north, datum)

    def to_latlon(self) -> LatLon:
        """
        Converts this coordinate to a lat/lon point. See utm_to_latlon()

        Returns:
            LatLon
        """
        return utm_to_latlon(self)[0]

    def to_mgrs(self):
        """
        Converts this coordinate to an MGRS grid reference. See geogrid.mgrs.utm_to_mgrs

        Returns:
            Mgrs
        """
        from geogrid.mgrs import utm_to_mgrs  # pylint: disable=import-outside-toplevel
        return utm_to_mgrs(self)

    def to_str(self, precision: int = 0) -> str:
        """
        Renders this coordinate as a string. A space is left between the zone and
        the hemisphere to distinguish it from an MGRS grid zone designator.

        UTM coordinates are rounded, not truncated (unlike MGRS grid references).

        Args:
            precision: (int)
                (Default 0) Number of digits after the decimal point (3 ≡ mm)

        Returns:
            str, e.g. '31 N 448251 5411932'
        """
        easting = round_half_away(self.easting, precision)
        northing = round_half_away(self.northing, precision)
        return f'{self.zone:02d} {self.hemisphere} {easting:.{precision}f} {northing:.{precision}f}'

    def with_factors(self) -> 'Utm':
        """
        Returns a copy of this coordinate with its convergence and scale populated
        from the inverse projection.
        """
        _, convergence, scale = utm_to_latlon(self)
        return Utm(
            self.zone, self.hemisphere, self.easting, self.northing, self.datum,
            convergence, scale
        )


def _krueger_coefficients(n: float) -> Tuple[List[float], List[float]]:
    """
    The 6th order Krüger series coefficients alpha (forward) and beta (inverse),
    as one-based lists, for the third flattening n
    """
    n2 = n * n
    n3 = n * n2
    n4 = n * n3
    n5 = n * n4
    n6 = n * n5

    alpha = [
        0.,
        1/2*n - 2/3*n2 + 5/16*n3 + 41/180*n4 - 127/288*n5 + 7891/37800*n6,
        13/48*n2 - 3/5*n3 + 557/1440*n4 + 281/630*n5 - 1983433/1935360*n6,
        61/240*n3 - 103/140*n4 + 15061/26880*n5 + 167603/181440*n6,
        49561/161280*n4 - 179/168*n5 + 6601661/7257600*n6,
        34729/80640*n5 - 3418889/1995840*n6,
        212378941/319334400*n6,
    ]
    beta = [
        0.,
        1/2*n - 2/3*n2 + 37/96*n3 - 1/360*n4 - 81/512*n5 + 96199/604800*n6,
        1/48*n2 + 1/15*n3 - 437/1440*n4 + 46/105*n5 - 1118711/3870720*n6,
        17/480*n3 - 37/840*n4 - 209/4480*n5 + 5569/90720*n6,
        4397/161280*n4 - 11/504*n5 - 830251/7257600*n6,
        4583/161280*n5 - 108847/3991680*n6,
        20648693/638668800*n6,
    ]
    return alpha, beta


def _projection_constants(ellipsoid: Ellipsoid) -> Tuple[float, float, float]:
    """Returns eccentricity e, third flattening n and meridian radius A"""
    f = ellipsoid.f
    e = math.sqrt(f * (2 - f))
    n = f / (2 - f)
    n2 = n * n
    # 2πA is the circumference of a meridian
    big_a = ellipsoid.a / (1 + n) * (1 + 1/4*n2 + 1/64*n2*n2 + 1/256*n2*n2*n2)
    return e, n, big_a


def _central_meridian(zone: int) -> float:
    """Longitude of the zone's central meridian, in degrees"""
    return (zone - 1) * 6 - 180 + 3


def _latitude_band(latitude: float) -> str:
    # grid zones are 8° tall; 0°N is offset 10 into the latitude bands
    return LATITUDE_BANDS[math.floor(latitude / 8 + 10)]


def latlon_to_utm(point: LatLon) -> Utm:
    """
    Converts a lat/lon point to a UTM coordinate, applying the Norway/Svalbard
    grid zone exceptions.

    Args:
        point:
            The point to convert. Latitude must be within [-80, 84].

    Returns:
        Utm, with convergence and scale populated

    Example:
        LatLon(48.8582, 2.2945).to_utm().to_str()  # '31 N 448252 5411933'
    """
    lat, lon = point.latitude, point.longitude
    if math.isnan(lat) or math.isnan(lon):
        raise OutOfRangeError(f'Invalid point ({lat}, {lon})')

    if not UTM_MIN_LATITUDE <= lat <= UTM_MAX_LATITUDE:
        raise OutOfRangeError(f'Latitude {lat} is outside UTM limits')

    zone = math.floor((lon + 180) / 6) + 1
    exception = _ZONE_EXCEPTIONS.get((zone, _latitude_band(lat)))
    if exception:
        boundary, shift_west, shift_east = exception
        zone += shift_west if lon < boundary else shift_east

    phi = math.radians(lat)  # latitude ± from equator
    lam = math.radians(lon - _central_meridian(zone))  # longitude ± from central meridian

    ellipsoid = point.datum.ellipsoid
    e, n, big_a = _projection_constants(ellipsoid)
    alpha, _ = _krueger_coefficients(n)
    k0 = UTM_SCALE_FACTOR

    # ---- easting, northing: Karney 2011 Eq 7-14, 29, 35
    cos_lam, sin_lam, tan_lam = math.cos(lam), math.sin(lam), math.tan(lam)

    # τ ≡ tanφ, τʹ ≡ tanφʹ; prime (ʹ) indicates angles on the conformal sphere
    tau = math.tan(phi)
    sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
    tau_p = tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)

    xi_p = math.atan2(tau_p, cos_lam)
    eta_p = math.asinh(sin_lam / math.sqrt(tau_p * tau_p + cos_lam * cos_lam))

    xi, eta = xi_p, eta_p
    p_p, q_p = 1., 0.
    for j in range(1, 7):
        xi += alpha[j] * math.sin(2 * j * xi_p) * math.cosh(2 * j * eta_p)
        eta += alpha[j] * math.cos(2 * j * xi_p) * math.sinh(2 * j * eta_p)
        # ---- convergence: Karney 2011 Eq 23, 24
        p_p += 2 * j * alpha[j] * math.cos(2 * j * xi_p) * math.cosh(2 * j * eta_p)
        q_p += 2 * j * alpha[j] * math.sin(2 * j * xi_p) * math.sinh(2 * j * eta_p)

    x = k0 * big_a * eta
    y = k0 * big_a * xi

    gamma = (
        math.atan(tau_p / math.sqrt(1 + tau_p * tau_p) * tan_lam) +
        math.atan2(q_p, p_p)
    )

    # ---- scale: Karney 2011 Eq 25
    sin_phi = math.sin(phi)
    k_p = (
        math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau) /
        math.sqrt(tau_p * tau_p + cos_lam * cos_lam)
    )
    k_pp = big_a / ellipsoid.a * math.sqrt(p_p * p_p + q_p * q_p)
    k = k0 * k_p * k_pp

    # shift x/y to false origins
    x += FALSE_EASTING
    if y < 0:
        y += FALSE_NORTHING

    return Utm(
        zone,
        'N' if lat >= 0 else 'S',
        round_half_away(x, 6),  # nm precision
        round_half_away(y, 6),
        point.datum,
        convergence=round_half_away(math.degrees(gamma), 9),
        scale=round_half_away(k, 12),
    )


def utm_to_latlon(utm: Utm) -> Tuple[LatLon, float, float]:
    """
    Converts a UTM coordinate to a lat/lon point. The coordinate itself is left
    untouched; its convergence and scale are returned alongside the point.

    Args:
        utm:
            The UTM coordinate to convert

    Returns:
        (LatLon, convergence in degrees, scale factor)

    Example:
        point, _, _ = utm_to_latlon(Utm(31, 'N', 448251.795, 5411932.678))
        point.to_str()  # 48°51′29.52″N, 002°17′40.20″E
    """
    ellipsoid = utm.datum.ellipsoid
    k0 = UTM_SCALE_FACTOR

    x = utm.easting - FALSE_EASTING  # make x ± relative to central meridian
    y = utm.northing - FALSE_NORTHING if utm.hemisphere == 'S' else utm.northing

    # ---- from Karney 2011 Eq 15-22, 36
    e, n, big_a = _projection_constants(ellipsoid)
    _, beta = _krueger_coefficients(n)

    eta = x / (k0 * big_a)
    xi = y / (k0 * big_a)

    xi_p, eta_p = xi, eta
    p, q = 1., 0.
    for j in range(1, 7):
        xi_p -= beta[j] * math.sin(2 * j * xi) * math.cosh(2 * j * eta)
        eta_p -= beta[j] * math.cos(2 * j * xi) * math.sinh(2 * j * eta)
        # ---- convergence: Karney 2011 Eq 26, 27
        p -= 2 * j * beta[j] * math.cos(2 * j * xi) * math.cosh(2 * j * eta)
        q += 2 * j * beta[j] * math.sin(2 * j * xi) * math.sinh(2 * j * eta)

    sinh_eta_p = math.sinh(eta_p)
    sin_xi_p, cos_xi_p = math.sin(xi_p), math.cos(xi_p)

    tau_p = sin_xi_p / math.sqrt(sinh_eta_p * sinh_eta_p + cos_xi_p * cos_xi_p)
    tau = _solve_tau(tau_p, e)

    phi = math.atan(tau)
    lam = math.atan2(sinh_eta_p, cos_xi_p)

    gamma = math.atan(math.tan(xi_p) * math.tanh(eta_p)) + math.atan2(q, p)

    # ---- scale: Karney 2011 Eq 28
    sin_phi = math.sin(phi)
    k_p = (
        math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau) *
        math.sqrt(sinh_eta_p * sinh_eta_p + cos_xi_p * cos_xi_p)
    )
    k_pp = big_a / ellipsoid.a / math.sqrt(p * p + q * q)
    k = k0 * k_p * k_pp

    lon = math.degrees(lam) + _central_meridian(utm.zone)  # zonal to global longitude

    # nm precision (1nm = 10^-11°)
    point = LatLon(
        round_half_away(math.degrees(phi), 11),
        round_half_away(lon, 11),
        utm.datum
    )
    return point, round_half_away(math.degrees(gamma), 9), round_half_away(k, 12)


def _solve_tau(tau_p: float, e: float) -> float:
    """
    Solves for τ ≡ tanφ given the conformal τʹ by Newton's method, which converges
    in 2-3 iterations. δτ can toggle around ±1.12e-16 rather than reach zero (e.g.
    for 31 N 400000 5000000), so a correction that stops shrinking also ends the
    iteration.
    """
    one_minus_e2 = 1 - e * e
    tau_i = tau_p
    last_delta = math.inf
    for _ in range(_NEWTON_MAX_ITERATIONS):
        sigma_i = math.sinh(e * math.atanh(e * tau_i / math.sqrt(1 + tau_i * tau_i)))
        tau_i_p = tau_i * math.sqrt(1 + sigma_i * sigma_i) - sigma_i * math.sqrt(1 + tau_i * tau_i)
        delta = (
            (tau_p - tau_i_p) / math.sqrt(1 + tau_i_p * tau_i_p) *
            (1 + one_minus_e2 * tau_i * tau_i) /
            (one_minus_e2 * math.sqrt(1 + tau_i * tau_i))
        )
        tau_i += delta
        if abs(delta) <= _NEWTON_TOLERANCE or abs(delta) >= abs(last_delta):
            return tau_i
        last_delta = delta

    warn_once(
        f'Latitude did not converge within {_NEWTON_MAX_ITERATIONS} iterations; '
        'results may be imprecise. (this warning will not repeat)'
    )
    return tau_i


def parse_utm(utm_str: str, datum: Optional[Datum] = None) -> Utm:
    """Parses a UTM coordinate string. See Utm.from_str()"""
    return Utm.from_str(utm_str, datum)


def format_utm(utm: Utm, precision: int = 0) -> str:
    """Renders a UTM coordinate as a string. See Utm.to_str()"""
    return utm.to_str(precision)
