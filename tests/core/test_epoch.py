from __future__ import annotations

import datetime as dt

import pytest
from hypothesis import given, strategies as st

from tle_codec.core import epoch
from tle_codec.errors import ValueOutOfRange

UTC = dt.timezone.utc


@pytest.mark.parametrize(
    "two_digit, year", [(70, 1970), (99, 1999), (0, 2000), (16, 2016), (69, 2069)]
)
def test_expand_year_pivots_at_70(two_digit: int, year: int) -> None:
    assert epoch.expand_year(two_digit) == year
    assert epoch.contract_year(year) == two_digit


@pytest.mark.parametrize("year", [1969, 2070, 16])
def test_contract_year_rejects_unrepresentable(year: int) -> None:
    with pytest.raises(ValueOutOfRange):
        epoch.contract_year(year)


def test_expand_year_rejects_more_than_two_digits() -> None:
    with pytest.raises(ValueOutOfRange):
        epoch.expand_year(100)


def test_to_absolute_time_resolves_day_fraction() -> None:
    result = epoch.to_absolute_time(16, 330.54185827)
    expected = dt.datetime(2016, 11, 25, 13, 0, 16, 554528, tzinfo=UTC)
    assert result.tzinfo is UTC
    assert abs(result - expected) <= dt.timedelta(microseconds=1)


def test_leap_day() -> None:
    assert epoch.to_absolute_time(0, 60.5) == dt.datetime(2000, 2, 29, 12, tzinfo=UTC)
    assert epoch.to_absolute_time(1, 60.5) == dt.datetime(2001, 3, 1, 12, tzinfo=UTC)


@pytest.mark.parametrize(
    "two_digit, day",
    [(16, 0.0), (16, 0.5), (17, 366.0), (70, 0.5), (16, 367.0), (16, 367.5), (16, -0.5)],
)
def test_day_outside_epoch_year_is_rejected(two_digit: int, day: float) -> None:
    with pytest.raises(ValueOutOfRange):
        epoch.to_absolute_time(two_digit, day)


def test_last_day_of_leap_year() -> None:
    instant = epoch.to_absolute_time(16, 366.5)
    assert instant == dt.datetime(2016, 12, 31, 12, tzinfo=UTC)
    assert epoch.from_absolute_time(instant) == (16, 366.5)
    assert epoch.to_absolute_time(17, 365.5) == dt.datetime(2017, 12, 31, 12, tzinfo=UTC)


def test_first_instant_of_the_window() -> None:
    instant = epoch.to_absolute_time(70, 1.0)
    assert instant == dt.datetime(1970, 1, 1, tzinfo=UTC)
    assert epoch.from_absolute_time(instant) == (70, 1.0)


def test_from_absolute_time() -> None:
    instant = dt.datetime(2016, 11, 25, 13, 0, 16, 554528, tzinfo=UTC)
    year, day = epoch.from_absolute_time(instant)
    assert year == 16
    assert day == pytest.approx(330.54185827, abs=1e-9)


def test_from_absolute_time_converts_to_utc() -> None:
    instant = dt.datetime(2000, 1, 1, 1, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    year, day = epoch.from_absolute_time(instant)
    assert year == 99
    assert day == pytest.approx(365 + 23 / 24)


def test_from_absolute_time_rejects_naive_datetime() -> None:
    with pytest.raises(ValueError):
        epoch.from_absolute_time(dt.datetime(2016, 11, 25))


def test_from_absolute_time_rejects_year_outside_window() -> None:
    with pytest.raises(ValueOutOfRange):
        epoch.from_absolute_time(dt.datetime(2070, 1, 1, tzinfo=UTC))


@st.composite
def epoch_parts(draw):
    year = draw(st.integers(min_value=1970, max_value=2069))
    day = draw(st.integers(min_value=1, max_value=epoch.days_in_year(year)))
    seconds = draw(st.integers(min_value=0, max_value=86399))
    micros = draw(st.integers(min_value=0, max_value=999_999))
    return year, day, seconds, micros


@given(epoch_parts())
def test_epoch_matches_manual(parts) -> None:
    year, day, seconds, micros = parts
    expected = dt.datetime(year, 1, 1, tzinfo=UTC) + dt.timedelta(
        days=day - 1, seconds=seconds, microseconds=micros
    )
    day_of_year = day + (seconds * 1_000_000 + micros) / epoch.MICROS_PER_DAY

    result = epoch.to_absolute_time(year % 100, day_of_year)
    assert result.tzinfo is UTC
    assert abs(result - expected) <= dt.timedelta(microseconds=1)

    two_digit, back = epoch.from_absolute_time(result)
    assert two_digit == year % 100
    assert back == pytest.approx(day_of_year, abs=2e-11)


def test_round_trip_keeps_eight_fractional_digits() -> None:
    year, day = epoch.from_absolute_time(epoch.to_absolute_time(16, 330.54185827))
    assert year == 16
    assert f"{day:012.8f}" == "330.54185827"
