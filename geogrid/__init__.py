from geogrid._version import __version__  # noqa: F401
from geogrid.utils.logging import LOGGER
from geogrid.coordinates import LatLon
from geogrid.datums import DATUMS, ELLIPSOIDS, WGS84, Datum, Ellipsoid, get_datum
from geogrid.dms import parse_dms, to_dms, to_lat, to_lon
from geogrid.errors import GridLetterError, GridReferenceError, OutOfRangeError, ParseError
from geogrid.mgrs import Mgrs, format_mgrs, mgrs_to_utm, parse_mgrs, utm_to_mgrs
from geogrid.transform import convert_datum
from geogrid.utm import Utm, format_utm, latlon_to_utm, parse_utm, utm_to_latlon
from geogrid.vector import Vector3d


__all__ = [
    'DATUMS',
    'Datum',
    'ELLIPSOIDS',
    'Ellipsoid',
    'GridLetterError',
    'GridReferenceError',
    'LOGGER',
    'LatLon',
    'Mgrs',
    'OutOfRangeError',
    'ParseError',
    'Utm',
    'Vector3d',
    'WGS84',
    'convert_datum',
    'format_mgrs',
    'format_utm',
    'get_datum',
    'latlon_to_utm',
    'mgrs_to_utm',
    'parse_dms',
    'parse_mgrs',
    'parse_utm',
    'to_dms',
    'to_lat',
    'to_lon',
    'utm_to_latlon',
    'utm_to_mgrs',
]
