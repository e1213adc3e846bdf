"""
Chronology — Правило високосных лет и таблица длин месяцев

Календарь Solar Hijri (Jalali):
- 12 месяцев: 1–6 по 31 дню, 7–11 по 30 дней, 12 (Esfand) 29 или 30 дней
- Високосный год определяется 33-летним арифметическим циклом
- Длины месяцев 1–11 не зависят от года

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. days_in_month(y, 12) == 30 ⇔ is_leap_year(y)
2. sum(days_in_month(y, m) for m in 1..12) == length_of_year(y)
3. Все функции чистые, без состояния, безопасны для конкурентного вызова

ПРАВИЛО (33-летний цикл):
    leap(y) ⇔ y mod 33 ∈ {1, 5, 9, 13, 17, 22, 26, 30}

Python-модуль (floor modulo) делает правило тотальным для любых целых,
включая отрицательные годы.
"""

from typing import Final

from jalali.core.calendar.errors import InvalidArgument, InvalidDate, OutOfRange

# =============================================================================
# ПАРАМЕТРЫ ЦИКЛА
# =============================================================================

# Длина цикла интеркаляции (лет)
CYCLE_YEARS: Final[int] = 33

# Остатки year mod 33, соответствующие високосным годам
LEAP_RESIDUES: Final[frozenset[int]] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

# Количество високосных лет в одном цикле
LEAP_YEARS_PER_CYCLE: Final[int] = len(LEAP_RESIDUES)

# Длина цикла в днях: 33 * 365 + 8
DAYS_PER_CYCLE: Final[int] = CYCLE_YEARS * 365 + LEAP_YEARS_PER_CYCLE

# Префиксные суммы: сколько високосных остатков строго меньше r (r = 0..33)
LEAP_RESIDUES_BELOW: Final[tuple[int, ...]] = tuple(
    sum(1 for residue in LEAP_RESIDUES if residue < r) for r in range(CYCLE_YEARS + 1)
)


# =============================================================================
# ПОДДЕРЖИВАЕМЫЙ ДИАПАЗОН
# =============================================================================

# Год 1 начинается 0622-03-21 (proleptic Gregorian).
# Год 9377 заканчивается в 9999 году, поэтому каждая валидная дата
# имеет эквивалент в datetime.date.
MIN_YEAR: Final[int] = 1
MAX_YEAR: Final[int] = 9377


# =============================================================================
# ТАБЛИЦА МЕСЯЦЕВ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

# Длины месяцев невисокосного года (индекс 0 = Farvardin)
MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Дней до начала месяца (индекс 0 = Farvardin); не зависит от года
DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = tuple(
    sum(MONTH_LENGTHS[:index]) for index in range(MONTHS_PER_YEAR)
)

# Дней в первой половине года (месяцы 1–6 по 31 дню)
DAYS_IN_FIRST_HALF: Final[int] = 6 * 31


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Проверка, является ли год високосным (366 дней).

    Тотальная функция: определена для любого целого года.

    Args:
        year: Год по календарю Jalali

    Returns:
        True если year mod 33 входит в LEAP_RESIDUES

    Examples:
        >>> is_leap_year(1403)
        True
        >>> is_leap_year(1402)
        False
    """
    return year % CYCLE_YEARS in LEAP_RESIDUES


def length_of_year(year: int) -> int:
    """Длина года в днях: 366 для високосного, иначе 365."""
    return 366 if is_leap_year(year) else 365


def leap_years_before(year: int) -> int:
    """
    Количество високосных лет в полуинтервале [0, year).

    Для отрицательных year результат отрицательный (минус количество
    високосных лет в [year, 0)), что сохраняет линейность:
    leap_years_before(b) - leap_years_before(a) = число високосных в [a, b).

    Args:
        year: Граница (исключительно)

    Returns:
        Число високосных лет
    """
    cycles, residue = divmod(year, CYCLE_YEARS)
    return cycles * LEAP_YEARS_PER_CYCLE + LEAP_RESIDUES_BELOW[residue]


# =============================================================================
# ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце.

    Правило: 1–6 → 31, 7–11 → 30, 12 → 29 (30 в високосный год).

    Args:
        year: Год по календарю Jalali
        month: Месяц (1–12)

    Returns:
        29, 30 или 31

    Raises:
        InvalidArgument: Если month не целое число в [1, 12]
    """
    _require_month(month)
    if month == MONTHS_PER_YEAR and is_leap_year(year):
        return 30
    return MONTH_LENGTHS[month - 1]


def days_before_month(month: int) -> int:
    """
    Сумма длин всех месяцев до указанного.

    Не зависит от года: Esfand последний, поэтому на смещение
    других месяцев не влияет.

    Raises:
        InvalidArgument: Если month вне [1, 12]
    """
    _require_month(month)
    return DAYS_BEFORE_MONTH[month - 1]


def month_day_from_day_of_year(year: int, day_of_year: int) -> tuple[int, int]:
    """
    Перевод дня года (1-based) в пару (month, day).

    Args:
        year: Год (нужен только для проверки границы 366)
        day_of_year: День года, 1..length_of_year(year)

    Returns:
        (month, day)

    Raises:
        InvalidArgument: Если day_of_year вне [1, length_of_year(year)]
    """
    if not _is_int(day_of_year) or not 1 <= day_of_year <= length_of_year(year):
        raise InvalidArgument(
            f"day_of_year must be in [1, {length_of_year(year)}] for year {year}, "
            f"got {day_of_year!r}"
        )

    offset = day_of_year - 1
    if offset < DAYS_IN_FIRST_HALF:
        month, day_index = divmod(offset, 31)
        return month + 1, day_index + 1

    month, day_index = divmod(offset - DAYS_IN_FIRST_HALF, 30)
    return month + 7, day_index + 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def check_year(year: int) -> int:
    """
    Проверка, что год целый и входит в поддерживаемый диапазон.

    Raises:
        InvalidArgument: Если year не целое число
        OutOfRange: Если year вне [MIN_YEAR, MAX_YEAR]
    """
    if not _is_int(year):
        raise InvalidArgument(f"year must be an integer, got {year!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRange(f"year {year} outside supported range [{MIN_YEAR}, {MAX_YEAR}]")
    return year


def check_date(year: int, month: int, day: int) -> None:
    """
    Полная проверка инвариантов тройки (year, month, day).

    Raises:
        InvalidArgument: Если любое поле не целое число
        OutOfRange: Если year вне поддерживаемого диапазона
        InvalidDate: Если month вне [1, 12] или day вне [1, days_in_month]
    """
    check_year(year)
    if not _is_int(month) or not _is_int(day):
        raise InvalidArgument(f"month and day must be integers, got {month!r}, {day!r}")
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidDate(f"Invalid month {month}: must be in [1, {MONTHS_PER_YEAR}]")

    month_length = days_in_month(year, month)
    if not 1 <= day <= month_length:
        if month == MONTHS_PER_YEAR and day == 30:
            raise InvalidDate(f"Invalid date '30 Esfand' as '{year}' is not a leap year")
        raise InvalidDate(
            f"Invalid date {year}-{month:02d}-{day:02d}: day must be in [1, {month_length}]"
        )


def _require_month(month: int) -> None:
    if not _is_int(month) or not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidArgument(f"month must be in [1, {MONTHS_PER_YEAR}], got {month!r}")


def _is_int(value: object) -> bool:
    # bool является подклассом int, но как поле даты недопустим
    return isinstance(value, int) and not isinstance(value, bool)
