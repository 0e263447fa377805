"""Complete dates of the proleptic Julian calendar.

Day counts are measured from 1970-01-01 of the civil (Gregorian) calendar,
which is 1969-12-19 in the Julian calendar.
"""

from __future__ import annotations

from dataclasses import dataclass

from carnetdb.julian_partial import MonthDayLast, YearMonth
from carnetdb.julian_units import Day, Month, Year
from carnetdb.julian_weekday import Weekday, WeekdayIndexed, WeekdayLast

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FEBRUARY = 2
_EPOCH_OFFSET = 719470


def _year(value: Year | int) -> Year:
    return value if isinstance(value, Year) else Year(int(value))


def _month(value: Month | int) -> Month:
    return value if isinstance(value, Month) else Month(int(value))


def _day(value: Day | int) -> Day:
    return value if isinstance(value, Day) else Day(int(value))


def _month_day_last(value: MonthDayLast | Month | int) -> MonthDayLast:
    return value if isinstance(value, MonthDayLast) else MonthDayLast(_month(value))


@dataclass(frozen=True, order=True)
class YearMonthDay:
    """A Julian calendar date given by year, month and day."""

    year: Year
    month: Month
    day: Day

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", _year(self.year))
        object.__setattr__(self, "month", _month(self.month))
        object.__setattr__(self, "day", _day(self.day))

    @classmethod
    def from_days(cls, days: int) -> YearMonthDay:
        """The date lying a number of days after 1970-01-01 (civil)."""
        z = int(days) + _EPOCH_OFFSET
        era = z // 1461
        doe = z - era * 1461
        yoe = (doe - doe // 1460) // 365
        y = yoe + era * 4
        doy = doe - 365 * yoe
        mp = (5 * doy + 2) // 153
        d = doy - (153 * mp + 2) // 5 + 1
        m = mp + 3 if mp < 10 else mp - 9
        return cls(Year(y + (1 if m <= 2 else 0)), Month(m), Day(d))

    @classmethod
    def from_last(cls, ymdl: YearMonthDayLast) -> YearMonthDay:
        """The date of the last day of a month."""
        return cls(ymdl.year, ymdl.month, Day(ymdl.last_day()))

    def to_days(self) -> int:
        """Number of days from 1970-01-01 (civil) to this date."""
        m = int(self.month)
        y = int(self.year) - (1 if m <= _FEBRUARY else 0)
        d = int(self.day)
        era = y // 4
        yoe = y - era * 4
        doy = (153 * (m - 3 if m > 2 else m + 9) + 2) // 5 + d - 1
        doe = yoe * 365 + doy
        return era * 1461 + doe - _EPOCH_OFFSET

    def ok(self) -> bool:
        """Whether the date exists in the Julian calendar."""
        if not (self.year.ok() and self.month.ok()):
            return False
        last = YearMonthDayLast(self.year, MonthDayLast(self.month)).last_day()
        return 1 <= int(self.day) <= last

    def add_months(self, months: int) -> YearMonthDay:
        """Move by a number of months, keeping the day field."""
        ym = YearMonth(self.year, self.month).add_months(months)
        return YearMonthDay(ym.year, ym.month, self.day)

    def add_years(self, years: int) -> YearMonthDay:
        """Move by a number of years, keeping month and day."""
        return YearMonthDay(self.year + int(years), self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year}-{int(self.month):02d}-{self.day}"


@dataclass(frozen=True, order=True)
class YearMonthDayLast:
    """The last day of a month of a given Julian year."""

    year: Year
    month_day_last: MonthDayLast

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", _year(self.year))
        object.__setattr__(self, "month_day_last", _month_day_last(self.month_day_last))

    @property
    def month(self) -> Month:
        """The month whose last day this is."""
        return self.month_day_last.month

    def last_day(self) -> int:
        """The number of the last day of the month."""
        if not self.month.ok():
            raise ValueError(f"{int(self.month)} is not a valid month")
        m = int(self.month)
        if m == _FEBRUARY and self.year.is_leap():
            return 29
        return _DAYS_IN_MONTH[m - 1]

    def to_days(self) -> int:
        """Number of days from 1970-01-01 (civil) to this date."""
        return YearMonthDay.from_last(self).to_days()

    def ok(self) -> bool:
        """Whether the year and month are valid."""
        return self.year.ok() and self.month_day_last.ok()

    def add_months(self, months: int) -> YearMonthDayLast:
        """Move to the last day of a month a number of months away."""
        ym = YearMonth(self.year, self.month).add_months(months)
        return YearMonthDayLast(ym.year, MonthDayLast(ym.month))

    def add_years(self, years: int) -> YearMonthDayLast:
        """Move to the last day of the same month a number of years away."""
        return YearMonthDayLast(self.year + int(years), self.month_day_last)

    def __str__(self) -> str:
        return f"{self.year}/{self.month_day_last}"


@dataclass(frozen=True)
class YearMonthWeekday:
    """The n-th given weekday of a month of a Julian year."""

    year: Year
    month: Month
    weekday_indexed: WeekdayIndexed

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", _year(self.year))
        object.__setattr__(self, "month", _month(self.month))

    @property
    def weekday(self) -> Weekday:
        """The weekday."""
        return self.weekday_indexed.weekday

    @property
    def index(self) -> int:
        """Which occurrence of the weekday in the month."""
        return self.weekday_indexed.index

    @classmethod
    def from_days(cls, days: int) -> YearMonthWeekday:
        """Describe the date a number of days after 1970-01-01 (civil)."""
        weekday = Weekday.from_days(days)
        ymd = YearMonthDay.from_days(days)
        return cls(ymd.year, ymd.month, weekday[(int(ymd.day) - 1) // 7 + 1])

    def to_days(self) -> int:
        """Number of days from 1970-01-01 (civil) to this date."""
        first = YearMonthDay(self.year, self.month, Day(1)).to_days()
        offset = self.weekday - Weekday.from_days(first)
        return first + offset + (self.index - 1) * 7

    def ok(self) -> bool:
        """Whether this occurrence of the weekday exists in the month."""
        if not (self.year.ok() and self.month.ok() and self.weekday.ok()) or self.index < 1:
            return False
        if self.index <= 4:
            return True
        first = YearMonthDay(self.year, self.month, Day(1)).to_days()
        day = (self.weekday - Weekday.from_days(first)) + (self.index - 1) * 7 + 1
        return day <= YearMonthDayLast(self.year, MonthDayLast(self.month)).last_day()

    def add_months(self, months: int) -> YearMonthWeekday:
        """Same indexed weekday a number of months away."""
        ym = YearMonth(self.year, self.month).add_months(months)
        return YearMonthWeekday(ym.year, ym.month, self.weekday_indexed)

    def add_years(self, years: int) -> YearMonthWeekday:
        """Same indexed weekday of the same month a number of years away."""
        return YearMonthWeekday(self.year + int(years), self.month, self.weekday_indexed)

    def __str__(self) -> str:
        return f"{self.year}/{self.month}/{self.weekday_indexed}"


@dataclass(frozen=True)
class YearMonthWeekdayLast:
    """The last given weekday of a month of a Julian year."""

    year: Year
    month: Month
    weekday_last: WeekdayLast

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", _year(self.year))
        object.__setattr__(self, "month", _month(self.month))

    @property
    def weekday(self) -> Weekday:
        """The weekday."""
        return self.weekday_last.weekday

    def to_days(self) -> int:
        """Number of days from 1970-01-01 (civil) to this date."""
        last = YearMonthDayLast(self.year, MonthDayLast(self.month)).to_days()
        return last - (Weekday.from_days(last) - self.weekday)

    def ok(self) -> bool:
        """Whether year, month and weekday are valid."""
        return self.year.ok() and self.month.ok() and self.weekday_last.ok()

    def add_months(self, months: int) -> YearMonthWeekdayLast:
        """Same last weekday a number of months away."""
        ym = YearMonth(self.year, self.month).add_months(months)
        return YearMonthWeekdayLast(ym.year, ym.month, self.weekday_last)

    def add_years(self, years: int) -> YearMonthWeekdayLast:
        """Same last weekday of the same month a number of years away."""
        return YearMonthWeekdayLast(self.year + int(years), self.month, self.weekday_last)

    def __str__(self) -> str:
        return f"{self.year}/{self.month}/{self.weekday_last}"