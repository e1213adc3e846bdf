"""
EpochDays — Конвертер Gregorian ↔ Jalali через epoch-day

Epoch-day: знаковое число дней от 1970-01-01 (proleptic Gregorian).
Единственная точка обмена между календарями:

    gregorian → epoch_day → jalali → epoch_day → gregorian   (без потерь)

ЯКОРЬ:
    1970-01-01 (Gregorian) == 1348-10-11 (Jalali) == epoch_day 0

ФОРМУЛЫ:
    year_start(y)  = YEAR_ZERO_EPOCH_DAY + 365 * y + leap_years_before(y)
    epoch_day(d)   = year_start(d.year) + days_before_month(d.month) + d.day - 1

Обратное преобразование:
    1. Целые 33-летние циклы через divmod(days, DAYS_PER_CYCLE)
    2. Не более 33 вычитаний длины года внутри цикла
    3. Месяц и день по фиксированной таблице месяцев

Gregorian сторона использует date.toordinal()/date.fromordinal().
"""

import logging
from datetime import date as GregorianDate
from typing import Final

from jalali.core.calendar.chronology import (
    CYCLE_YEARS,
    DAYS_PER_CYCLE,
    MAX_YEAR,
    MIN_YEAR,
    check_date,
    days_before_month,
    leap_years_before,
    length_of_year,
    month_day_from_day_of_year,
)
from jalali.core.calendar.errors import InvalidArgument, OutOfRange

logger = logging.getLogger(__name__)


# =============================================================================
# ЯКОРЬ И СМЕЩЕНИЯ
# =============================================================================

# Ordinal даты 1970-01-01 (date.toordinal, 0001-01-01 == 1)
GREGORIAN_EPOCH_ORDINAL: Final[int] = GregorianDate(1970, 1, 1).toordinal()

# Jalali дата, соответствующая epoch_day 0
EPOCH_ANCHOR: Final[tuple[int, int, int]] = (1348, 10, 11)


def _year_zero_epoch_day() -> int:
    """
    Epoch-day первого дня условного года 0.

    Выводится из якоря один раз при импорте модуля; результат
    неизменяемая константа уровня процесса.
    """
    anchor_year, anchor_month, anchor_day = EPOCH_ANCHOR
    anchor_offset_in_year = days_before_month(anchor_month) + anchor_day - 1
    return -anchor_offset_in_year - (365 * anchor_year + leap_years_before(anchor_year))


YEAR_ZERO_EPOCH_DAY: Final[int] = _year_zero_epoch_day()


# =============================================================================
# JALALI ↔ EPOCH DAY
# =============================================================================


def year_start_epoch_day(year: int) -> int:
    """
    Epoch-day первого дня года (1 Farvardin).

    Формула замкнутая, без итераций, корректна для любых целых year.

    Args:
        year: Год по календарю Jalali

    Returns:
        Epoch-day 1 Farvardin указанного года
    """
    return YEAR_ZERO_EPOCH_DAY + 365 * year + leap_years_before(year)


# Поддерживаемый диапазон epoch-day: 1 Farvardin MIN_YEAR .. последний день MAX_YEAR
EPOCH_DAY_MIN: Final[int] = year_start_epoch_day(MIN_YEAR)
EPOCH_DAY_MAX: Final[int] = year_start_epoch_day(MAX_YEAR + 1) - 1


def epoch_day_from_jalali(year: int, month: int, day: int) -> int:
    """
    Конверсия: Jalali (year, month, day) → epoch-day.

    Args:
        year: Год (MIN_YEAR..MAX_YEAR)
        month: Месяц (1–12)
        day: День месяца

    Returns:
        Epoch-day (0 == 1970-01-01)

    Raises:
        InvalidDate: Если тройка нарушает инварианты календаря
        OutOfRange: Если год вне поддерживаемого диапазона
    """
    check_date(year, month, day)
    return year_start_epoch_day(year) + days_before_month(month) + day - 1


def jalali_from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """
    Конверсия: epoch-day → Jalali (year, month, day).

    Args:
        epoch_day: Epoch-day (0 == 1970-01-01)

    Returns:
        (year, month, day)

    Raises:
        InvalidArgument: Если epoch_day не целое число
        OutOfRange: Если epoch_day вне [EPOCH_DAY_MIN, EPOCH_DAY_MAX]
    """
    check_epoch_day(epoch_day)

    cycle, day_in_cycle = divmod(epoch_day - YEAR_ZERO_EPOCH_DAY, DAYS_PER_CYCLE)

    # Внутри цикла год с индексом k имеет остаток k mod 33
    year_in_cycle = 0
    year_length = length_of_year(year_in_cycle)
    while day_in_cycle >= year_length:
        day_in_cycle -= year_length
        year_in_cycle += 1
        year_length = length_of_year(year_in_cycle)

    year = cycle * CYCLE_YEARS + year_in_cycle
    month, day = month_day_from_day_of_year(year, day_in_cycle + 1)
    return year, month, day


def check_epoch_day(epoch_day: int) -> int:
    """
    Проверка epoch-day на тип и поддерживаемый диапазон.

    Raises:
        InvalidArgument: Если epoch_day не целое число
        OutOfRange: Если epoch_day вне [EPOCH_DAY_MIN, EPOCH_DAY_MAX]
    """
    if not isinstance(epoch_day, int) or isinstance(epoch_day, bool):
        raise InvalidArgument(f"epoch_day must be an integer, got {epoch_day!r}")
    if not EPOCH_DAY_MIN <= epoch_day <= EPOCH_DAY_MAX:
        logger.debug("Rejected epoch day %d outside supported range", epoch_day)
        raise OutOfRange(
            f"epoch day {epoch_day} outside supported range [{EPOCH_DAY_MIN}, {EPOCH_DAY_MAX}]"
        )
    return epoch_day


# =============================================================================
# GREGORIAN ↔ EPOCH DAY
# =============================================================================


def epoch_day_from_gregorian(value: GregorianDate) -> int:
    """
    Конверсия: datetime.date → epoch-day.

    datetime.datetime тоже принимается (используется только дата).
    """
    if not isinstance(value, GregorianDate):
        raise InvalidArgument(f"expected datetime.date, got {type(value).__name__}")
    return value.toordinal() - GREGORIAN_EPOCH_ORDINAL


def gregorian_from_epoch_day(epoch_day: int) -> GregorianDate:
    """
    Конверсия: epoch-day → datetime.date.

    Raises:
        OutOfRange: Если дата вне диапазона datetime.date (0001..9999)
    """
    try:
        return GregorianDate.fromordinal(epoch_day + GREGORIAN_EPOCH_ORDINAL)
    except (ValueError, OverflowError) as e:
        raise OutOfRange(f"epoch day {epoch_day} has no datetime.date counterpart") from e


# =============================================================================
# КОМПОЗИЦИИ
# =============================================================================


def gregorian_to_jalali(value: GregorianDate) -> tuple[int, int, int]:
    """
    Конверсия: datetime.date → Jalali (year, month, day).

    gregorian_to_jalali(g) = jalali_from_epoch_day(epoch_day_from_gregorian(g))

    Raises:
        OutOfRange: Если дата раньше 1 Farvardin 1 (0622-03-21)
    """
    return jalali_from_epoch_day(epoch_day_from_gregorian(value))


def jalali_to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    """
    Конверсия: Jalali (year, month, day) → datetime.date.

    Raises:
        InvalidDate: Если тройка невалидна
        OutOfRange: Если год вне поддерживаемого диапазона
    """
    return gregorian_from_epoch_day(epoch_day_from_jalali(year, month, day))
