"""
Ellipsoid parameters and datums for the coordinate systems geogrid can convert
between.

Each datum carries the Helmert transform parameters to convert from WGS84 into
that datum; WGS84 is the hub, so no transforms are stored between other pairs of
datums. Precision varies between datums, and WGS84 (original) is not defined to
be accurate to better than 1 meter. No transformation should be assumed to be
accurate to better than a meter, and for many datums somewhat less.

Sources:
    ED50:       www.gov.uk/guidance/oil-and-gas-petroleum-operations-notices#pon-4
    Irl1975:    www.osi.ie/wp-content/uploads/2015/05/transformations_booklet.pdf
    NAD27:      en.wikipedia.org/wiki/Helmert_transformation
    NAD83:      www.uvm.edu/giv/resources/WGS84_NAD83.pdf
    NTF:        geodesie.ign.fr/contenu/fichiers/Changement_systeme_geodesique.pdf
    OSGB36:     www.ordnancesurvey.co.uk/docs/support/guide-coordinate-systems-great-britain.pdf
    Potsdam:    kartoweb.itc.nl/geometrics/Coordinate%20transformations/coordtrans.html
    TokyoJapan: www.geocachingtoolbox.com?page=datumEllipsoidDetails
    WGS72:      www.icao.int/safety/pbn/documentation/eurocontrol/eurocontrol wgs 84 implementation manual.pdf
"""

__all__ = [
    'DATUMS', 'Datum', 'ELLIPSOIDS', 'Ellipsoid', 'WGS84', 'WGS84_ELLIPSOID', 'get_datum',
]

from typing import Dict, Sequence, Tuple


class Ellipsoid:
    """
    A reference ellipsoid.

    Args:
        a:
            Semi-major axis, in meters

        b:
            Semi-minor axis, in meters

        f:
            Flattening
    """

    def __init__(self, a: float, b: float, f: float, name: str = ''):
        self.a = float(a)
        self.b = float(b)
        self.f = float(f)
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.b == other.b and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.b, self.f))

    def __repr__(self):
        return f'<Ellipsoid({self.name or "unnamed"}: a={self.a}, b={self.b}, f={self.f})>'

    @property
    def e2(self) -> float:
        """First eccentricity squared, (a²-b²)/a²"""
        return 2 * self.f - self.f * self.f


class Datum:
    """
    A geodetic datum: a reference ellipsoid and the 7-parameter Helmert transform
    which converts WGS84 coordinates into this datum.

    Two datums are equal when their ellipsoid and transform are equal; the name is
    for display only.

    Args:
        ellipsoid:
            The datum's reference ellipsoid

        transform:
            [tx, ty, tz, s, rx, ry, rz] with translations in meters, scale in
            parts-per-million and rotations in arcseconds

        name: (str)
            A display name
    """

    def __init__(self, ellipsoid: Ellipsoid, transform: Sequence[float], name: str = ''):
        if len(transform) != 7:
            raise ValueError(
                f'Datum transforms must have exactly 7 parameters, received {len(transform)}'
            )

        self.ellipsoid = ellipsoid
        self.transform: Tuple[float, ...] = tuple(float(x) for x in transform)
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, Datum):
            return False

        return self.ellipsoid == other.ellipsoid and self.transform == other.transform

    def __hash__(self):
        return hash((self.ellipsoid, self.transform))

    def __repr__(self):
        return f'<Datum({self.name or "unnamed"})>'

    def inverse_transform(self) -> Tuple[float, ...]:
        """The transform parameters converting this datum into WGS84"""
        return tuple(-x for x in self.transform)


ELLIPSOIDS: Dict[str, Ellipsoid] = {
    name: Ellipsoid(a, b, f, name) for name, (a, b, f) in {
        'WGS84':         (6378137,     6356752.314245, 1 / 298.257223563),
        'Airy1830':      (6377563.396, 6356256.909,    1 / 299.3249646),
        'AiryModified':  (6377340.189, 6356034.448,    1 / 299.3249646),
        'Bessel1841':    (6377397.155, 6356078.962818, 1 / 299.1528128),
        'Clarke1866':    (6378206.4,   6356583.8,      1 / 294.978698214),
        'Clarke1880IGN': (6378249.2,   6356515.0,      1 / 293.466021294),
        'GRS80':         (6378137,     6356752.314140, 1 / 298.257222101),
        'Intl1924':      (6378388,     6356911.946,    1 / 297),  # aka Hayford
        'WGS72':         (6378135,     6356750.5,      1 / 298.26),
    }.items()
}

# transforms: t in meters, s in ppm, r in arcseconds
#                                                tx        ty        tz        s        rx       ry       rz
DATUMS: Dict[str, Datum] = {
    name: Datum(ELLIPSOIDS[ellipsoid], transform, name) for name, (ellipsoid, transform) in {
        'ED50':       ('Intl1924',      (89.5,     93.8,     123.1,    -1.2,    0.0,     0.0,     0.156)),
        'Intl1924':   ('Intl1924',      (89.5,     93.8,     123.1,    -1.2,    0.0,     0.0,     0.156)),
        'Irl1975':    ('AiryModified',  (-482.530, 130.596,  -564.557, -8.150,  -1.042,  -0.214,  -0.631)),
        'NAD27':      ('Clarke1866',    (8,        -160,     -176,     0,       0,       0,       0)),
        'NAD83':      ('GRS80',         (1.004,    -1.910,   -0.515,   -0.0015, 0.0267,  0.00034, 0.011)),
        'NTF':        ('Clarke1880IGN', (168,      60,       -320,     0,       0,       0,       0)),
        'OSGB36':     ('Airy1830',      (-446.448, 125.157,  -542.060, 20.4894, -0.1502, -0.2470, -0.8421)),
        'Potsdam':    ('Bessel1841',    (-582,     -105,     -414,     -8.3,    1.04,    0.35,    -3.08)),
        'TokyoJapan': ('Bessel1841',    (148,      -507,     -685,     0,       0,       0,       0)),
        'WGS72':      ('WGS72',         (0,        0,        -4.5,     -0.22,   0,       0,       0.554)),
        'WGS84':      ('WGS84',         (0.0,      0.0,      0.0,      0.0,     0.0,     0.0,     0.0)),
    }.items()
}

WGS84 = DATUMS['WGS84']
WGS84_ELLIPSOID = ELLIPSOIDS['WGS84']


def get_datum(name: str) -> Datum:
    """
    Looks up a datum by name, case-insensitively.

    Args:
        name:
            The datum name, e.g. 'OSGB36'

    Returns:
        Datum
    """
    for key, datum in DATUMS.items():
        if key.lower() == name.lower():
            return datum

    raise KeyError(f"Unknown datum '{name}'. Options: {list(DATUMS.keys())}")
