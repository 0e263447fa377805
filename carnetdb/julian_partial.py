"""Partial Julian dates: year with month, month with day or weekday."""

from __future__ import annotations

from dataclasses import dataclass

from carnetdb.julian_units import Day, Month, Year
from carnetdb.julian_weekday import WeekdayIndexed, WeekdayLast

# February may hold 29 days when the year is unknown.
_MAX_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _month(value: Month | int) -> Month:
    return value if isinstance(value, Month) else Month(int(value))


def _year(value: Year | int) -> Year:
    return value if isinstance(value, Year) else Year(int(value))


def _day(value: Day | int) -> Day:
    return value if isinstance(value, Day) else Day(int(value))


@dataclass(frozen=True, order=True)
class YearMonth:
    """A month of a given Julian year."""

    year: Year
    month: Month

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", _year(self.year))
        object.__setattr__(self, "month", _month(self.month))

    def ok(self) -> bool:
        """Whether both the year and the month are valid."""
        return self.year.ok() and self.month.ok()

    def add_months(self, months: int) -> YearMonth:
        """Move by a number of months, carrying into the year."""
        years, index = divmod(int(self.month) - 1 + int(months), 12)
        return YearMonth(self.year + years, Month(index + 1))

    def add_years(self, years: int) -> YearMonth:
        """Move by a number of years, keeping the month."""
        return YearMonth(self.year + int(years), self.month)

    def months_since(self, other: YearMonth) -> int:
        """Number of months from ``other`` to this one."""
        return (self.year - other.year) * 12 + (int(self.month) - int(other.month))

    def __str__(self) -> str:
        return f"{self.year}/{self.month}"


@dataclass(frozen=True, order=True)
class MonthDay:
    """A day of a month, in no particular year."""

    month: Month
    day: Day

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", _month(self.month))
        object.__setattr__(self, "day", _day(self.day))

    def ok(self) -> bool:
        """Whether the day exists in that month of some year."""
        if not self.month.ok():
            return False
        return 1 <= int(self.day) <= _MAX_DAYS[int(self.month) - 1]

    def __str__(self) -> str:
        return f"{self.month}/{self.day}"


@dataclass(frozen=True, order=True)
class MonthDayLast:
    """The last day of a month, in no particular year."""

    month: Month

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", _month(self.month))

    def ok(self) -> bool:
        """Whether the month is valid."""
        return self.month.ok()

    def __str__(self) -> str:
        return f"{self.month}/last"


@dataclass(frozen=True)
class MonthWeekday:
    """The n-th given weekday of a month, in no particular year."""

    month: Month
    weekday_indexed: WeekdayIndexed

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", _month(self.month))

    def ok(self) -> bool:
        """Whether the month and the indexed weekday are valid."""
        return self.month.ok() and self.weekday_indexed.ok()

    def __str__(self) -> str:
        return f"{self.month}/{self.weekday_indexed}"


@dataclass(frozen=True)
class MonthWeekdayLast:
    """The last given weekday of a month, in no particular year."""

    month: Month
    weekday_last: WeekdayLast

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", _month(self.month))

    def ok(self) -> bool:
        """Whether the month and the weekday are valid."""
        return self.month.ok() and self.weekday_last.ok()

    def __str__(self) -> str:
        return f"{self.month}/{self.weekday_last}"