from datetime import date

from timekeeping.common.datetime_utils import WeekWindow, parse_iso_date


def test_week_window_runs_monday_to_sunday():
    w = WeekWindow.containing(date(2025, 3, 14))  # Friday
    assert w.start == date(2025, 3, 10)
    assert w.end == date(2025, 3, 16)


def test_sunday_belongs_to_the_previous_monday():
    w = WeekWindow.containing(date(2025, 3, 16))
    assert w.start == date(2025, 3, 10)
    assert WeekWindow.containing(date(2025, 3, 17)).start == date(2025, 3, 17)


def test_parse_iso_date():
    assert parse_iso_date("2025-03-10") == date(2025, 3, 10)
