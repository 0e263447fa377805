"""Days of the week in the proleptic Julian calendar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

_WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class _LastSpec:
    """Marker selecting the last occurrence of a weekday in a month."""

    _instance: _LastSpec | None = None

    def __new__(cls) -> _LastSpec:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "LAST"


LAST: Final = _LastSpec()


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


@dataclass(frozen=True)
class Weekday:
    """A day of the week, 0 being Sunday; stored in one byte."""

    value: int = field(default=0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & 0xFF)

    @classmethod
    def from_days(cls, days: int) -> Weekday:
        """The weekday of a count of days since 1970-01-01 (a Thursday)."""
        return cls((int(days) + 4) % 7)

    def ok(self) -> bool:
        """Whether the weekday lies in 0..6."""
        return self.value <= 6

    def __add__(self, days: int) -> Weekday:
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return Weekday((self.value + days) % 7)

    __radd__ = __add__

    def __sub__(self, other: Weekday | int) -> Weekday | int:
        if isinstance(other, Weekday):
            diff = (self.value - other.value) & 0xFFFFFFFF
            if diff > 6:
                diff = (diff + 7) & 0xFFFFFFFF
            return _as_int32(diff)
        if isinstance(other, int) and not isinstance(other, bool):
            return self + (-other)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.ok():
            return _WEEKDAY_NAMES[self.value]
        return f"{self.value} is not a valid weekday"

    def __getitem__(self, index: int | _LastSpec) -> WeekdayIndexed | WeekdayLast:
        if isinstance(index, _LastSpec):
            return WeekdayLast(self)
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"weekday index must be an int or LAST, not {type(index).__name__}")
        return WeekdayIndexed(self, index)


@dataclass(frozen=True)
class WeekdayIndexed:
    """The n-th given weekday of a month; weekday and index each fit in four bits."""

    weekday: Weekday
    index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekday", Weekday(int(self.weekday) & 0xF))
        object.__setattr__(self, "index", int(self.index) & 0xF)

    def ok(self) -> bool:
        """Whether the weekday is valid and the index lies in 1..5."""
        return self.weekday.ok() and 1 <= self.index <= 5

    def __str__(self) -> str:
        return f"{self.weekday}[{self.index}]"


@dataclass(frozen=True)
class WeekdayLast:
    """The last given weekday of a month."""

    weekday: Weekday

    def ok(self) -> bool:
        """Whether the weekday is valid."""
        return self.weekday.ok()

    def __str__(self) -> str:
        return f"{self.weekday}[last]"