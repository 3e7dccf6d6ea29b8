import math

import pytest

from timekeeping.common.time_arithmetic import elapsed_hours, format_duration, round4, to_minutes
from timekeeping.core.exceptions import MalformedTime


def test_to_minutes_parses_clock_strings():
    assert to_minutes("00:00") == 0
    assert to_minutes("09:30") == 570
    assert to_minutes("23:59") == 1439
    assert to_minutes("7:05") == 425
    assert to_minutes("17:30:45") == 1050


@pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "", "9", "09-30", None, 930])
def test_to_minutes_rejects_malformed(value):
    with pytest.raises(MalformedTime):
        to_minutes(value)


def test_elapsed_hours_same_day_with_break():
    assert elapsed_hours("09:00", "17:30", 0.5) == 8.0


def test_elapsed_hours_overnight_wraparound():
    assert elapsed_hours("22:00", "06:00", 0) == 8.0


def test_elapsed_hours_never_negative():
    assert elapsed_hours("09:00", "10:00", 3) == 0.0


def test_round4_snaps_to_quarters():
    assert round4(7.1) == 7.0
    assert round4(7.13) == 7.25
    assert round4(7.4) == 7.5
    assert round4(8.0) == 8.0


def test_round4_halves_round_away_from_zero():
    assert round4(0.125) == 0.25
    assert round4(7.375) == 7.5
    assert round4(2.625) == 2.75


@pytest.mark.parametrize("value", [float("nan"), float("inf"), None, "8", True])
def test_round4_non_numbers_are_zero(value):
    assert round4(value) == 0.0


def test_round4_stays_within_an_eighth():
    h = 0.0
    while h < 30:
        r = round4(h)
        assert math.isclose((r * 4) % 1, 0.0, abs_tol=1e-9)
        assert abs(r - h) <= 0.125 + 1e-9
        h += 0.037


def test_format_duration():
    assert format_duration(0.75) == "45m"
    assert format_duration(8) == "8h"
    assert format_duration(7.5) == "7h 30m"
