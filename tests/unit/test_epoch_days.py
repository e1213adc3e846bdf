"""
Тесты для EpochDays — Конвертер Gregorian ↔ Jalali

Проверяемые инварианты:
1. Якорь: 1970-01-01 == 1348-10-11 == epoch_day 0
2. Известные даты Nowruz совпадают с официальным календарём
3. year_start(y + 1) - year_start(y) == length_of_year(y)
4. Round-trip Gregorian → Jalali → Gregorian и обратно без потерь
5. Границы поддерживаемого диапазона → OutOfRange
"""

import random
from datetime import date, datetime

import pytest

from jalali.core.calendar import (
    EPOCH_ANCHOR,
    EPOCH_DAY_MAX,
    EPOCH_DAY_MIN,
    MAX_YEAR,
    MIN_YEAR,
    YEAR_ZERO_EPOCH_DAY,
    InvalidArgument,
    InvalidDate,
    OutOfRange,
    check_epoch_day,
    days_in_month,
    epoch_day_from_gregorian,
    epoch_day_from_jalali,
    gregorian_from_epoch_day,
    gregorian_to_jalali,
    jalali_from_epoch_day,
    jalali_to_gregorian,
    length_of_year,
    year_start_epoch_day,
)

SAMPLES = 10_000


# =============================================================================
# ТЕСТЫ: Якорь и константы
# =============================================================================


class TestAnchor:
    """Якорь epoch-day и производные константы."""

    def test_epoch_anchor(self) -> None:
        assert EPOCH_ANCHOR == (1348, 10, 11)
        assert jalali_from_epoch_day(0) == (1348, 10, 11)
        assert epoch_day_from_jalali(1348, 10, 11) == 0

    def test_year_zero_epoch_day(self) -> None:
        assert YEAR_ZERO_EPOCH_DAY == -492633

    def test_gregorian_epoch(self) -> None:
        assert epoch_day_from_gregorian(date(1970, 1, 1)) == 0
        assert gregorian_from_epoch_day(0) == date(1970, 1, 1)

    def test_range_edges(self) -> None:
        assert EPOCH_DAY_MIN == year_start_epoch_day(MIN_YEAR)
        assert gregorian_from_epoch_day(EPOCH_DAY_MIN) == date(622, 3, 21)
        assert jalali_from_epoch_day(EPOCH_DAY_MIN) == (MIN_YEAR, 1, 1)
        assert jalali_from_epoch_day(EPOCH_DAY_MAX) == (MAX_YEAR, 12, days_in_month(MAX_YEAR, 12))
        assert gregorian_from_epoch_day(EPOCH_DAY_MAX).year == 9999


# =============================================================================
# ТЕСТЫ: Известные даты
# =============================================================================


NOWRUZ = [
    (1392, date(2013, 3, 21)),
    (1395, date(2016, 3, 20)),
    (1399, date(2020, 3, 20)),
    (1400, date(2021, 3, 21)),
    (1403, date(2024, 3, 20)),
    (1404, date(2025, 3, 21)),
]


class TestKnownDates:
    """Сверка с официальным календарём."""

    @pytest.mark.parametrize("year,gregorian", NOWRUZ)
    def test_nowruz(self, year: int, gregorian: date) -> None:
        assert jalali_to_gregorian(year, 1, 1) == gregorian
        assert gregorian_to_jalali(gregorian) == (year, 1, 1)

    @pytest.mark.parametrize(
        "jalali,gregorian",
        [
            ((1392, 2, 15), date(2013, 5, 5)),
            ((1401, 8, 1), date(2022, 10, 23)),
            ((1402, 12, 29), date(2024, 3, 19)),
            ((1403, 12, 30), date(2025, 3, 20)),
        ],
    )
    def test_mid_year_dates(self, jalali: tuple[int, int, int], gregorian: date) -> None:
        assert jalali_to_gregorian(*jalali) == gregorian
        assert gregorian_to_jalali(gregorian) == jalali

    def test_datetime_accepted_as_date(self) -> None:
        assert gregorian_to_jalali(datetime(2024, 3, 20, 23, 59)) == (1403, 1, 1)


# =============================================================================
# ТЕСТЫ: Структура годов
# =============================================================================


class TestYearStart:
    """year_start_epoch_day — замкнутая формула начала года."""

    def test_consecutive_years_differ_by_year_length(self) -> None:
        for year in range(MIN_YEAR, MAX_YEAR + 1):
            assert year_start_epoch_day(year + 1) - year_start_epoch_day(year) == length_of_year(year)

    def test_last_day_of_year_precedes_nowruz(self) -> None:
        assert epoch_day_from_jalali(1402, 12, 29) + 1 == epoch_day_from_jalali(1403, 1, 1)
        assert epoch_day_from_jalali(1403, 12, 30) + 1 == epoch_day_from_jalali(1404, 1, 1)


# =============================================================================
# ТЕСТЫ: Round-trip (10 000 случайных дат)
# =============================================================================


class TestRoundTrip:
    """Конверсии без потерь в обе стороны."""

    def test_gregorian_jalali_gregorian(self) -> None:
        rng = random.Random(1403)
        low = gregorian_from_epoch_day(EPOCH_DAY_MIN).toordinal()
        high = gregorian_from_epoch_day(EPOCH_DAY_MAX).toordinal()

        for _ in range(SAMPLES):
            gregorian = date.fromordinal(rng.randint(low, high))
            assert jalali_to_gregorian(*gregorian_to_jalali(gregorian)) == gregorian

    def test_jalali_gregorian_jalali(self) -> None:
        rng = random.Random(1348)

        for _ in range(SAMPLES):
            year = rng.randint(MIN_YEAR, MAX_YEAR)
            month = rng.randint(1, 12)
            day = rng.randint(1, days_in_month(year, month))
            assert gregorian_to_jalali(jalali_to_gregorian(year, month, day)) == (year, month, day)

    def test_epoch_day_round_trip(self) -> None:
        rng = random.Random(0)

        for _ in range(SAMPLES):
            epoch_day = rng.randint(EPOCH_DAY_MIN, EPOCH_DAY_MAX)
            assert epoch_day_from_jalali(*jalali_from_epoch_day(epoch_day)) == epoch_day

    def test_consecutive_epoch_days_are_consecutive_dates(self) -> None:
        """Соседние epoch-day дают соседние даты (через границы месяцев и лет)."""
        previous = jalali_from_epoch_day(year_start_epoch_day(1402) - 1)
        assert previous == (1401, 12, 29)
        for epoch_day in range(year_start_epoch_day(1402), year_start_epoch_day(1405)):
            current = jalali_from_epoch_day(epoch_day)
            assert current > previous
            previous = current


# =============================================================================
# ТЕСТЫ: Ошибки
# =============================================================================


class TestErrors:
    """Отказы конвертера."""

    def test_epoch_day_below_range(self) -> None:
        with pytest.raises(OutOfRange):
            jalali_from_epoch_day(EPOCH_DAY_MIN - 1)

    def test_epoch_day_above_range(self) -> None:
        with pytest.raises(OutOfRange):
            jalali_from_epoch_day(EPOCH_DAY_MAX + 1)

    def test_gregorian_before_year_one(self) -> None:
        with pytest.raises(OutOfRange):
            gregorian_to_jalali(date(622, 3, 20))

    def test_invalid_jalali_date(self) -> None:
        with pytest.raises(InvalidDate):
            epoch_day_from_jalali(1402, 12, 30)
        with pytest.raises(InvalidDate):
            jalali_to_gregorian(1402, 7, 31)

    def test_non_integer_epoch_day(self) -> None:
        with pytest.raises(InvalidArgument):
            check_epoch_day(1.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgument):
            jalali_from_epoch_day("0")  # type: ignore[arg-type]

    def test_non_date_gregorian(self) -> None:
        with pytest.raises(InvalidArgument):
            epoch_day_from_gregorian("2024-03-20")  # type: ignore[arg-type]

    def test_gregorian_overflow(self) -> None:
        with pytest.raises(OutOfRange):
            gregorian_from_epoch_day(10**9)
