"""
Representation of a specific point on earth
"""

__all__ = ['LatLon']

from typing import Optional, Tuple, Union

from geogrid.datums import Datum, WGS84
from geogrid.dms import to_lat, to_lon


class LatLon:
    """
    Representation of a geodetic point (i.e., a lat/lon pair) on a specific datum.

    Latitude and longitude are not range checked; conversions which need a
    bounded value (e.g. to_utm) validate it themselves.

    Args:
        latitude:
            Geodetic latitude, in degrees

        longitude:
            Longitude, in degrees

        datum: (Datum)
            (Default WGS84) The datum this point is defined within
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        datum: Optional[Datum] = None,
    ):
        self.latitude = float(latitude)
        self.longitude = float(longitude)
        self.datum = datum if datum is not None else WGS84

    def __eq__(self, other):
        if not isinstance(other, LatLon):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.datum))

    def __repr__(self):
        return f'<LatLon({self.latitude}, {self.longitude})>'

    def convert_datum(self, datum: Datum) -> 'LatLon':
        """
        Converts this point to a new datum. See geogrid.transform.convert_datum

        Args:
            datum:
                The datum to convert to

        Returns:
            A new LatLon on the target datum
        """
        from geogrid.transform import convert_datum  # pylint: disable=import-outside-toplevel
        return convert_datum(self, datum)

    def to_cartesian(self):
        """
        Converts this point to (geocentric) cartesian x/y/z coordinates.

        Returns:
            Vector3d, in meters from the earth's centre
        """
        from geogrid.transform import latlon_to_cartesian  # pylint: disable=import-outside-toplevel
        return latlon_to_cartesian(self)

    def to_float(self) -> Tuple[float, float]:
        """Returns the point as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude

    def to_str(self, fmt: str = 'dms', dp: Optional[int] = None) -> str:
        """
        Renders this point as degrees, degrees+minutes or degrees+minutes+seconds,
        e.g. '48°51′29.88″N, 002°17′40.20″E'

        Args:
            fmt: (str)
                (Default 'dms') One of 'd', 'dm', 'dms'

            dp: (int)
                (Default 4 for 'd', 2 for 'dm', 0 for 'dms') Number of decimal places

        Returns:
            Comma-separated latitude, longitude
        """
        return f'{to_lat(self.latitude, fmt, dp)}, {to_lon(self.longitude, fmt, dp)}'

    def to_utm(self):
        """
        Converts this point to a UTM coordinate. See geogrid.utm.latlon_to_utm

        Returns:
            Utm
        """
        from geogrid.utm import latlon_to_utm  # pylint: disable=import-outside-toplevel
        return latlon_to_utm(self)

    def to_mgrs(self):
        """
        Converts this point to an MGRS grid reference, via UTM

        Returns:
            Mgrs
        """
        return self.to_utm().to_mgrs()
