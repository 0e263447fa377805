from datetime import date, timedelta

import pytest

from carnetdb.julian_dates import (
    YearMonthDay,
    YearMonthDayLast,
    YearMonthWeekday,
    YearMonthWeekdayLast,
)
from carnetdb.julian_partial import MonthDayLast
from carnetdb.julian_units import Month
from carnetdb.julian_weekday import LAST, Weekday

CIVIL_EPOCH = date(1970, 1, 1)


def test_epoch_is_julian_19_december_1969():
    assert YearMonthDay(1969, 12, 19).to_days() == 0
    assert YearMonthDay.from_days(0) == YearMonthDay(1969, 12, 19)


@pytest.mark.parametrize("days", range(-800_000, 800_000, 997))
def test_day_count_round_trip(days):
    ymd = YearMonthDay.from_days(days)
    assert ymd.ok()
    assert ymd.to_days() == days


def test_consecutive_days_are_ordered():
    previous = YearMonthDay.from_days(-1000)
    for days in range(-999, 1000):
        current = YearMonthDay.from_days(days)
        assert previous < current
        assert current.to_days() - previous.to_days() == 1
        previous = current


def test_matches_civil_calendar_shifted_by_thirteen_days():
    start = (date(1950, 1, 1) - CIVIL_EPOCH).days
    for days in range(start, start + 40_000, 37):
        civil = CIVIL_EPOCH + timedelta(days=days - 13)
        ymd = YearMonthDay.from_days(days)
        assert (int(ymd.year), int(ymd.month), int(ymd.day)) == (
            civil.year,
            civil.month,
            civil.day,
        )


def test_leap_years_every_fourth_year():
    assert YearMonthDay(2004, 2, 29).ok()
    assert YearMonthDay(1900, 2, 29).ok()
    assert not YearMonthDay(2001, 2, 29).ok()


def test_invalid_fields_are_not_ok():
    assert not YearMonthDay(2000, 13, 1).ok()
    assert not YearMonthDay(2000, 1, 0).ok()
    assert not YearMonthDay(2000, 4, 31).ok()


@pytest.mark.parametrize("year", [1999, 2000])
@pytest.mark.parametrize("month", range(1, 13))
def test_last_day_is_last_valid_day(year, month):
    last = YearMonthDayLast(year, MonthDayLast(month)).last_day()
    assert YearMonthDay(year, month, last).ok()
    assert not YearMonthDay(year, month, last + 1).ok()
    assert YearMonthDayLast(year, month).to_days() == YearMonthDay(year, month, last).to_days()


def test_last_day_of_invalid_month_raises():
    with pytest.raises(ValueError):
        YearMonthDayLast(2000, MonthDayLast(0)).last_day()


def test_from_last():
    assert YearMonthDay.from_last(YearMonthDayLast(2004, MonthDayLast(2))) == YearMonthDay(
        2004, 2, 29
    )


def test_add_months_and_years_round_trip():
    start = YearMonthDay(2000, 11, 15)
    moved = start.add_months(3)
    assert moved == YearMonthDay(2001, 2, 15)
    assert moved.add_months(-3) == start
    assert start.add_years(5).add_years(-5) == start
    assert start.add_years(5).month == start.month


def test_ymd_string_format():
    assert str(YearMonthDay(2024, 3, 5)) == "2024-03-05"


def test_ymdl_string_and_order():
    assert str(YearMonthDayLast(2024, MonthDayLast(2))) == "2024/Feb/last"
    assert YearMonthDayLast(2000, 2) < YearMonthDayLast(2000, 3)
    assert YearMonthDayLast(2000, 3) < YearMonthDayLast(2001, 1)


def test_ymdl_add_months_carries_year():
    assert YearMonthDayLast(2000, 12).add_months(1) == YearMonthDayLast(2001, 1)
    assert YearMonthDayLast(2001, 1).add_months(-1) == YearMonthDayLast(2000, 12)
    assert YearMonthDayLast(2000, 2).add_years(1) == YearMonthDayLast(2001, 2)


@pytest.mark.parametrize("days", range(-50_000, 50_000, 211))
def test_ymw_round_trip(days):
    ymw = YearMonthWeekday.from_days(days)
    assert ymw.ok()
    assert ymw.to_days() == days
    assert ymw.weekday == Weekday.from_days(days)


@pytest.mark.parametrize("month", range(1, 13))
@pytest.mark.parametrize("weekday", range(7))
def test_ymw_fifth_occurrence_ok_iff_in_month(month, weekday):
    ymw = YearMonthWeekday(2023, month, Weekday(weekday)[5])
    landing = YearMonthDay.from_days(ymw.to_days())
    assert ymw.ok() == (landing.month == Month(month))


def test_ymw_index_zero_not_ok():
    assert not YearMonthWeekday(2023, 5, Weekday(1)[0]).ok()


def test_ymw_string_and_shifts():
    ymw = YearMonthWeekday(2024, 3, Weekday(0)[2])
    assert str(ymw) == "2024/Mar/Sun[2]"
    assert ymw.add_months(10) == YearMonthWeekday(2025, 1, Weekday(0)[2])
    assert ymw.add_years(-1).add_years(1) == ymw


@pytest.mark.parametrize("month", range(1, 13))
@pytest.mark.parametrize("weekday", range(7))
def test_ymwl_is_last_such_weekday(month, weekday):
    ymwl = YearMonthWeekdayLast(2022, month, Weekday(weekday)[LAST])
    assert ymwl.ok()
    days = ymwl.to_days()
    assert Weekday.from_days(days) == Weekday(weekday)
    assert YearMonthDay.from_days(days).month == Month(month)
    assert YearMonthDay.from_days(days + 7).month != Month(month)


def test_ymwl_string_and_shifts():
    ymwl = YearMonthWeekdayLast(2024, 3, Weekday(5)[LAST])
    assert str(ymwl) == "2024/Mar/Fri[last]"
    assert ymwl.add_months(-3) == YearMonthWeekdayLast(2023, 12, Weekday(5)[LAST])
    assert ymwl.add_years(2).year == ymwl.year + 2
    assert not YearMonthWeekdayLast(2024, 0, Weekday(5)[LAST]).ok()