"""Day, month and year fields of the proleptic Julian calendar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _wrap_short(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


@dataclass(frozen=True, order=True)
class Day:
    """A day of the month, stored in one byte; valid days are 1 to 31."""

    value: int = field(default=0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & 0xFF)

    def ok(self) -> bool:
        """Whether the day lies in 1..31."""
        return 1 <= self.value <= 31

    def __add__(self, days: int) -> Day:
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return Day(self.value + days)

    __radd__ = __add__

    def __sub__(self, other: Day | int) -> Day | int:
        if isinstance(other, Day):
            return self.value - other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return Day(self.value - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:02d}"


@dataclass(frozen=True, order=True)
class Month:
    """A month of the year, stored in one byte; valid months are 1 to 12."""

    value: int = field(default=0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & 0xFF)

    def ok(self) -> bool:
        """Whether the month lies in 1..12."""
        return 1 <= self.value <= 12

    def __add__(self, months: int) -> Month:
        if isinstance(months, bool) or not isinstance(months, int):
            return NotImplemented
        return Month((self.value - 1 + months) % 12 + 1)

    __radd__ = __add__

    def __sub__(self, other: Month | int) -> Month | int:
        if isinstance(other, Month):
            diff = (self.value - other.value) & 0xFFFFFFFF
            if diff > 11:
                diff = (diff + 12) & 0xFFFFFFFF
            return diff - 0x100000000 if diff >= 0x80000000 else diff
        if isinstance(other, int) and not isinstance(other, bool):
            return self + (-other)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.ok():
            return _MONTH_NAMES[self.value - 1]
        return f"{self.value} is not a valid month"


@dataclass(frozen=True, order=True)
class Year:
    """A Julian year, stored as a signed 16-bit number."""

    value: int = field(default=0)

    MIN: ClassVar[int] = -0x8000
    MAX: ClassVar[int] = 0x7FFF

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap_short(int(self.value)))

    def is_leap(self) -> bool:
        """Every fourth year is a leap year in the Julian calendar."""
        return self.value % 4 == 0

    def ok(self) -> bool:
        """Every representable year is valid."""
        return True

    @classmethod
    def min(cls) -> Year:
        """The smallest representable year."""
        return cls(cls.MIN)

    @classmethod
    def max(cls) -> Year:
        """The largest representable year."""
        return cls(cls.MAX)

    def __add__(self, years: int) -> Year:
        if isinstance(years, bool) or not isinstance(years, int):
            return NotImplemented
        return Year(self.value + years)

    __radd__ = __add__

    def __sub__(self, other: Year | int) -> Year | int:
        if isinstance(other, Year):
            return self.value - other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return Year(self.value - other)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        width = 5 if self.value < 0 else 4
        return f"{self.value:0{width}d}"