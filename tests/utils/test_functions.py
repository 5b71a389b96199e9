import math

from geogrid.utils.functions import round_half_away


def test_round_half_away():
    assert round_half_away(1.59, 1) == 1.6
    assert round_half_away(1.51, 1) == 1.5
    assert round_half_away(2.5, 0) == 3.
    assert round_half_away(3.5, 0) == 4.

    assert round_half_away(-1.59, 1) == -1.6
    assert round_half_away(-1.51, 1) == -1.5
    assert round_half_away(-2.5, 0) == -3.
    assert round_half_away(-0.5, 0) == -1.

    assert round_half_away(166021.4430814, 6) == 166021.443081
    assert round_half_away(0., 6) == 0.


def test_round_half_away_non_finite():
    assert math.isnan(round_half_away(math.nan, 2))
    assert round_half_away(math.inf, 2) == math.inf
    assert round_half_away(-math.inf, 0) == -math.inf
