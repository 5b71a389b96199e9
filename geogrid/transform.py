"""
Datum conversion via geocentric cartesian coordinates and a 7-parameter Helmert
transform.

q.v. Ordnance Survey 'A guide to coordinate systems in Great Britain', Section 6
"""

__all__ = ['apply_helmert', 'cartesian_to_latlon', 'convert_datum', 'latlon_to_cartesian']

import math
from typing import Sequence

from geogrid.coordinates import LatLon
from geogrid.datums import DATUMS, Datum, WGS84
from geogrid.utils.logging import LOGGER, warn_once
from geogrid.vector import Vector3d


def latlon_to_cartesian(point: LatLon) -> Vector3d:
    """
    Converts a geodetic lat/lon point to geocentric cartesian (x/y/z) coordinates,
    assuming zero height above the ellipsoid.

    Args:
        point:
            The point to convert

    Returns:
        Vector3d, in meters from the earth's centre
    """
    phi = math.radians(point.latitude)
    lam = math.radians(point.longitude)
    h = 0.
    a, e2 = point.datum.ellipsoid.a, point.datum.ellipsoid.e2

    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    sin_lam, cos_lam = math.sin(lam), math.cos(lam)

    nu = a / math.sqrt(1 - e2 * sin_phi * sin_phi)  # radius of curvature in prime vertical

    return Vector3d(
        (nu + h) * cos_phi * cos_lam,
        (nu + h) * cos_phi * sin_lam,
        (nu * (1 - e2) + h) * sin_phi,
    )


def cartesian_to_latlon(vector: Vector3d, datum: Datum) -> LatLon:
    """
    Converts a geocentric cartesian (x/y/z) point to a geodetic lat/lon point on
    the given datum, using Bowring's (1985) closed-form formulation for
    micrometer precision.

    Args:
        vector:
            The cartesian point, in meters from the earth's centre

        datum:
            The datum of the resulting point

    Returns:
        LatLon
    """
    x, y, z = vector.x, vector.y, vector.z
    a, b = datum.ellipsoid.a, datum.ellipsoid.b
    e2 = datum.ellipsoid.e2  # 1st eccentricity squared
    eps2 = e2 / (1 - e2)  # 2nd eccentricity squared
    p = math.sqrt(x * x + y * y)  # distance from minor axis
    r = math.sqrt(p * p + z * z)  # polar radius

    if p == 0:
        # on the polar axis
        phi = math.copysign(math.pi / 2, z) if z else 0.
    else:
        # parametric latitude (Bowring eqn 17, replacing tanβ = z·a / p·b)
        tan_beta = (b * z) / (a * p) * (1 + eps2 * b / r)
        cos_beta = 1 / math.sqrt(1 + tan_beta * tan_beta)
        sin_beta = tan_beta * cos_beta

        # geodetic latitude (Bowring eqn 18)
        phi = math.atan2(
            z + eps2 * b * sin_beta ** 3,
            p - e2 * a * cos_beta ** 3
        )

    lam = math.atan2(y, x)

    return LatLon(math.degrees(phi), math.degrees(lam), datum)


def apply_helmert(vector: Vector3d, transform: Sequence[float]) -> Vector3d:
    """
    Applies a 7-parameter Helmert transform to a cartesian point.

    Args:
        vector:
            The cartesian point

        transform:
            [tx, ty, tz, s, rx, ry, rz] with translations in meters, scale in
            parts-per-million and rotations in arcseconds

    Returns:
        The transformed Vector3d
    """
    x1, y1, z1 = vector.x, vector.y, vector.z
    tx, ty, tz = transform[0], transform[1], transform[2]
    s1 = transform[3] / 1e6 + 1  # normalise ppm to (s+1)
    rx, ry, rz = (math.radians(r / 3600) for r in transform[4:7])  # arcseconds to radians

    return Vector3d(
        tx + x1 * s1 - y1 * rz + z1 * ry,
        ty + x1 * rz + y1 * s1 - z1 * rx,
        tz - x1 * ry + y1 * rx + z1 * s1,
    )


def convert_datum(point: LatLon, datum: Datum) -> LatLon:
    """
    Converts a lat/lon point to a new datum. Transforms are stored relative to
    WGS84, so conversions between two other datums pass through WGS84.

    Args:
        point:
            The point to convert

        datum:
            The datum to convert to

    Returns:
        A new LatLon on the target datum

    Example:
        greenwich = LatLon(51.4778, -0.0016)
        greenwich.convert_datum(DATUMS['OSGB36'])  # 51.4773°N, 000.0000°E
    """
    if DATUMS['NAD83'] in (point.datum, datum):
        warn_once(
            'NAD83 is functionally equivalent to WGS84 at this precision; converting '
            'between them needs more than a Helmert transform. (this warning will not repeat)'
        )

    if point.datum == datum:
        return LatLon(point.latitude, point.longitude, datum)

    if point.datum == WGS84:
        transform = datum.transform
    elif datum == WGS84:
        transform = point.datum.inverse_transform()
    else:
        LOGGER.debug('Converting %r to %r via WGS84', point.datum, datum)
        point = convert_datum(point, WGS84)
        transform = datum.transform

    return cartesian_to_latlon(apply_helmert(latlon_to_cartesian(point), transform), datum)
