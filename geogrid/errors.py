"""
Exceptions raised by geogrid
"""

__all__ = ['GridLetterError', 'GridReferenceError', 'OutOfRangeError', 'ParseError']


class GridReferenceError(ValueError):
    """Base class for invalid coordinates and grid references"""


class ParseError(GridReferenceError):
    """Malformed UTM or MGRS text"""


class OutOfRangeError(GridReferenceError):
    """A coordinate component falls outside the range the projection supports"""


class GridLetterError(GridReferenceError, LookupError):
    """A latitude band or 100km square letter is not valid for the zone"""
