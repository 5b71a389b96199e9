"""
Constants declarations for geogrid
"""

# UTM projection
FALSE_EASTING = 500e3  # meters
FALSE_NORTHING = 10_000e3  # meters, southern hemisphere only
UTM_SCALE_FACTOR = 0.9996  # k0, scale on the central meridian
UTM_MIN_LATITUDE = -80.
UTM_MAX_LATITUDE = 84.

# Latitude bands C..X, 8 degrees each, covering 80S to 84N. X is repeated for 80-84N
LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWXX'

# 100km grid square column ('e') letters repeat every third zone
E100K_LETTERS = ('ABCDEFGH', 'JKLMNPQR', 'STUVWXYZ')

# 100km grid square row ('n') letters repeat every other zone
N100K_LETTERS = ('ABCDEFGHJKLMNPQRSTUV', 'FGHJKLMNPQRSTUVABCDE')

GRID_SQUARE_SIZE = 100e3  # meters
ROW_LETTER_CYCLE = 2_000e3  # meters covered by one pass through the row letters

MGRS_PRECISIONS = (2, 4, 6, 8, 10)
