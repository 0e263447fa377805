import pytest

from carnetdb.julian_weekday import LAST, Weekday, WeekdayIndexed, WeekdayLast


def test_names_fixed_by_format():
    assert str(Weekday(0)) == "Sun"
    assert str(Weekday(6)) == "Sat"
    assert str(Weekday(7)) == "7 is not a valid weekday"


def test_epoch_is_thursday():
    assert str(Weekday.from_days(0)) == "Thu"


@pytest.mark.parametrize("days", [-1000, -30, -6, -5, -4, -1, 0, 1, 3, 365, 100000])
def test_from_days_periodic_and_successive(days):
    assert Weekday.from_days(days + 7) == Weekday.from_days(days)
    assert Weekday.from_days(days + 1) == Weekday.from_days(days) + 1
    assert Weekday.from_days(days).ok()


@pytest.mark.parametrize("start", range(7))
@pytest.mark.parametrize("delta", [-15, -7, -1, 0, 1, 6, 13, 100])
def test_add_then_subtract_round_trip(start, delta):
    wd = Weekday(start)
    moved = wd + delta
    assert moved.ok()
    assert moved - delta == wd
    assert delta + wd == moved
    assert (moved - wd) == delta % 7


@pytest.mark.parametrize("a", range(7))
@pytest.mark.parametrize("b", range(7))
def test_difference_in_range(a, b):
    diff = Weekday(a) - Weekday(b)
    assert 0 <= diff <= 6
    assert Weekday(b) + diff == Weekday(a)


def test_ok_and_int():
    assert Weekday(6).ok()
    assert not Weekday(7).ok()
    assert int(Weekday(3)) == 3
    assert int(Weekday(256 + 2)) == 2


def test_indexing_gives_indexed_weekday():
    indexed = Weekday(1)[2]
    assert indexed == WeekdayIndexed(Weekday(1), 2)
    assert indexed.weekday == Weekday(1)
    assert indexed.index == 2
    assert str(indexed) == "Mon[2]"


def test_indexing_with_last():
    last = Weekday(5)[LAST]
    assert last == WeekdayLast(Weekday(5))
    assert str(last) == "Fri[last]"
    assert last.ok()


def test_indexed_ok_bounds():
    assert Weekday(0)[1].ok()
    assert Weekday(0)[5].ok()
    assert not Weekday(0)[0].ok()
    assert not Weekday(0)[6].ok()
    assert not WeekdayIndexed(Weekday(9), 1).ok()


def test_indexed_fields_truncated_to_four_bits():
    indexed = WeekdayIndexed(Weekday(3), 16 + 2)
    assert indexed.index == 2


def test_last_not_ok_for_invalid_weekday():
    assert not WeekdayLast(Weekday(8)).ok()


def test_bad_index_type():
    with pytest.raises(TypeError):
        Weekday(1)["x"]