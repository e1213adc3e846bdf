"""
JalaliDate — Дата календаря Jalali (Solar Hijri)

Immutable Pydantic модель (year, month, day). Все конверсии проходят через
epoch-day (jalali.core.calendar.epoch_days), поэтому:
- plus_days не моделирует переходы месяц за месяцем
- Gregorian ↔ Jalali ↔ Gregorian возвращает исходную дату

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 ≤ month ≤ 12
2. 1 ≤ day ≤ days_in_month(year, month)
3. MIN_YEAR ≤ year ≤ MAX_YEAR
4. Порядок (year, month, day) совпадает с хронологическим

Арифметика никогда не отклоняет переполнение дня/месяца:
месяц нормализуется, день прижимается к последнему валидному дню месяца.
Ошибка возможна только при выходе года из диапазона (OutOfRange).
"""

import re
from dataclasses import dataclass
from datetime import date as GregorianDate
from datetime import timedelta
from typing import TYPE_CHECKING, Final, Optional, Union, cast

from pydantic import BaseModel, Field, model_validator

from jalali.clock import Clock, ZoneLike, current_datetime
from jalali.core.calendar import chronology, epoch_days
from jalali.core.calendar.chronology import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from jalali.core.calendar.errors import InvalidArgument, JalaliError
from jalali.core.domain.month import JalaliMonth

if TYPE_CHECKING:
    from jalali.core.domain.date_time import JalaliDateTime


# Формат parse(): ровно 8 цифр YYYYMMDD после удаления разделителей
_PARSE_DIGITS: Final[int] = 8
_NON_DIGIT_RE = re.compile(r"\D")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DateResult:
    """
    Результат конструирования без исключений.

    Невалидная пользовательская дата — штатный исход, поэтому try_of
    возвращает ошибку как значение.
    """

    value: Optional["JalaliDate"]
    error: Optional[JalaliError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "JalaliDate":
        """
        Значение или исходная ошибка.

        Raises:
            JalaliError: Если конструирование не удалось
        """
        if self.error is not None:
            raise self.error
        return cast("JalaliDate", self.value)


# =============================================================================
# JALALI DATE MODEL
# =============================================================================


class JalaliDate(BaseModel):
    """
    Дата календаря Jalali.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    Фабрики (of, of_epoch_day, of_gregorian, ...) поднимают ошибки из
    таксономии jalali.core.calendar.errors; прямой вызов конструктора
    поднимает pydantic.ValidationError.
    """

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Год (MIN_YEAR..MAX_YEAR)")
    month: int = Field(..., ge=1, le=MONTHS_PER_YEAR, description="Месяц (1 = Farvardin)")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_day_of_month(self) -> "JalaliDate":
        """Проверка дня относительно длины месяца (Esfand 30 только в високосный год)."""
        chronology.check_date(self.year, self.month, self.day)
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: Union[int, JalaliMonth], day: int) -> "JalaliDate":
        """
        Создание даты из (year, month, day).

        Raises:
            InvalidArgument: Если поле не целое число
            InvalidDate: Если тройка нарушает инварианты календаря
            OutOfRange: Если год вне [MIN_YEAR, MAX_YEAR]
        """
        chronology.check_date(year, month, day)
        return cls(year=int(year), month=int(month), day=int(day))

    @classmethod
    def try_of(cls, year: int, month: Union[int, JalaliMonth], day: int) -> DateResult:
        """
        Создание даты без исключений.

        Returns:
            DateResult с value или error
        """
        try:
            return DateResult(value=cls.of(year, month, day), error=None)
        except JalaliError as e:
            return DateResult(value=None, error=e)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "JalaliDate":
        """
        Создание даты из epoch-day (0 == 1970-01-01).

        Raises:
            OutOfRange: Если epoch_day вне поддерживаемого диапазона
        """
        year, month, day = epoch_days.jalali_from_epoch_day(epoch_day)
        return cls(year=year, month=month, day=day)

    @classmethod
    def of_gregorian(cls, value: GregorianDate) -> "JalaliDate":
        """
        Конверсия datetime.date (или datetime.datetime) → JalaliDate.

        Raises:
            OutOfRange: Если дата раньше 1 Farvardin 1
        """
        return cls.of_epoch_day(epoch_days.epoch_day_from_gregorian(value))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "JalaliDate":
        """
        Создание даты из года и дня года (1..365/366).

        Raises:
            InvalidArgument: Если day_of_year вне диапазона года
            OutOfRange: Если год вне поддерживаемого диапазона
        """
        chronology.check_year(year)
        month, day = chronology.month_day_from_day_of_year(year, day_of_year)
        return cls(year=year, month=month, day=day)

    @classmethod
    def now(cls, zone: Optional[ZoneLike] = None, clock: Optional[Clock] = None) -> "JalaliDate":
        """
        Текущая дата в зоне.

        Args:
            zone: Зона (default: ClockConfig.default_zone)
            clock: Источник времени (default: системные часы)
        """
        return cls.of_gregorian(current_datetime(zone, clock).date())

    @classmethod
    def parse(cls, text: str) -> "JalaliDate":
        """
        Разбор строки вида "1401/06/31", "1401-06-31" или "14010631".

        Разделители отбрасываются, должно остаться ровно 8 цифр YYYYMMDD.

        Raises:
            InvalidArgument: Если строку нельзя разобрать
            InvalidDate: Если дата невалидна
        """
        if not isinstance(text, str):
            raise InvalidArgument(f"cannot parse date from {text!r}")
        digits = _NON_DIGIT_RE.sub("", text)
        if len(digits) != _PARSE_DIGITS or not digits.isascii():
            raise InvalidArgument(f"cannot obtain date value from: {text!r}")
        return cls.of(int(digits[:4]), int(digits[4:6]), int(digits[6:8]))

    # -------------------------------------------------------------------------
    # Поля и производные значения
    # -------------------------------------------------------------------------

    @property
    def month_of_year(self) -> JalaliMonth:
        return JalaliMonth(self.month)

    @property
    def day_of_year(self) -> int:
        """День года (1-based)."""
        return chronology.days_before_month(self.month) + self.day

    def is_leap_year(self) -> bool:
        return chronology.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return chronology.days_in_month(self.year, self.month)

    def length_of_year(self) -> int:
        return chronology.length_of_year(self.year)

    def remaining_days_of_year(self) -> int:
        """Сколько дней осталось до конца года (не включая текущий)."""
        return self.length_of_year() - self.day_of_year

    def weekday(self) -> int:
        """День недели как у datetime.date.weekday(): Monday == 0 ... Sunday == 6."""
        # 1970-01-01 (epoch_day 0) был четвергом
        return (self.to_epoch_day() + 3) % 7

    def isoweekday(self) -> int:
        """День недели как у datetime.date.isoweekday(): Monday == 1 ... Sunday == 7."""
        return self.weekday() + 1

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_epoch_day(self) -> int:
        return epoch_days.epoch_day_from_jalali(self.year, self.month, self.day)

    def to_gregorian(self) -> GregorianDate:
        """Конверсия в datetime.date (обратная к of_gregorian)."""
        return epoch_days.gregorian_from_epoch_day(self.to_epoch_day())

    def at_time(
        self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> "JalaliDateTime":
        """Комбинация с временем суток → JalaliDateTime."""
        from jalali.core.domain.date_time import JalaliDateTime

        return JalaliDateTime.of_date(self, hour, minute, second, nanosecond)

    def at_start_of_day(self) -> "JalaliDateTime":
        return self.at_time()

    # -------------------------------------------------------------------------
    # Копии с изменённым полем
    # -------------------------------------------------------------------------

    def with_year(self, year: int) -> "JalaliDate":
        """Тот же месяц и день в другом году; 30 Esfand прижимается к 29 в невисокосный год."""
        return _resolve_previous_valid(year, self.month, self.day)

    def with_month(self, month: int) -> "JalaliDate":
        """Тот же день в другом месяце; день прижимается к длине месяца."""
        return _resolve_previous_valid(self.year, JalaliMonth.of(month).value, self.day)

    def with_day(self, day: int) -> "JalaliDate":
        return JalaliDate.of(self.year, self.month, day)

    def with_day_of_year(self, day_of_year: int) -> "JalaliDate":
        return JalaliDate.of_year_day(self.year, day_of_year)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def plus_days(self, days: int) -> "JalaliDate":
        """
        Сдвиг на days дней (отрицательный — назад).

        Эквивалентно of_epoch_day(to_epoch_day() + days); переходы через
        границы месяцев и лет обрабатываются автоматически.

        Raises:
            OutOfRange: Если результат вне поддерживаемого диапазона
        """
        _require_amount(days, "days")
        if days == 0:
            return self
        return JalaliDate.of_epoch_day(self.to_epoch_day() + days)

    def plus_weeks(self, weeks: int) -> "JalaliDate":
        _require_amount(weeks, "weeks")
        return self.plus_days(weeks * 7)

    def plus_months(self, months: int) -> "JalaliDate":
        """
        Сдвиг на months месяцев с нормализацией года.

        Месяц 13 становится Farvardin следующего года; если день не
        существует в целевом месяце, он прижимается к последнему дню.

        Examples:
            1401-06-31 + 1 месяц → 1401-07-30
            1401-12-29 + 1 месяц → 1402-01-29

        Raises:
            OutOfRange: Если результат вне поддерживаемого диапазона
        """
        _require_amount(months, "months")
        if months == 0:
            return self
        year, month_index = divmod(self.year * MONTHS_PER_YEAR + (self.month - 1) + months, MONTHS_PER_YEAR)
        return _resolve_previous_valid(year, month_index + 1, self.day)

    def plus_years(self, years: int) -> "JalaliDate":
        """
        Сдвиг на years лет; 30 Esfand прижимается к 29 в невисокосный год.

        Raises:
            OutOfRange: Если результат вне поддерживаемого диапазона
        """
        _require_amount(years, "years")
        if years == 0:
            return self
        return _resolve_previous_valid(self.year + years, self.month, self.day)

    def minus_days(self, days: int) -> "JalaliDate":
        _require_amount(days, "days")
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> "JalaliDate":
        _require_amount(weeks, "weeks")
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> "JalaliDate":
        _require_amount(months, "months")
        return self.plus_months(-months)

    def minus_years(self, years: int) -> "JalaliDate":
        _require_amount(years, "years")
        return self.plus_years(-years)

    def days_until(self, other: "JalaliDate") -> int:
        """Знаковое число дней от self до other (other - self)."""
        return other.to_epoch_day() - self.to_epoch_day()

    def weeks_until(self, other: "JalaliDate") -> int:
        """Число полных недель от self до other (усечение к нулю)."""
        return _truncating_div(self.days_until(other), 7)

    def months_until(self, other: "JalaliDate") -> int:
        """
        Число полных месяцев от self до other (усечение к нулю).

        Месяц считается полным, если день other не меньше дня self
        (для отрицательного направления: не больше).

        Examples:
            1401-06-31 → 1401-07-30: 0
            1401-06-30 → 1401-07-30: 1
            1403-01-15 → 1402-12-16: 0
        """
        start = self._proleptic_month() * 32 + self.day
        end = other._proleptic_month() * 32 + other.day
        return _truncating_div(end - start, 32)

    def years_until(self, other: "JalaliDate") -> int:
        """Число полных лет от self до other (усечение к нулю)."""
        return _truncating_div(self.months_until(other), MONTHS_PER_YEAR)

    def _proleptic_month(self) -> int:
        return self.year * MONTHS_PER_YEAR + self.month - 1

    def __add__(self, other: object) -> "JalaliDate":
        if isinstance(other, timedelta):
            return self.plus_days(other.days)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Union["JalaliDate", timedelta]:
        if isinstance(other, timedelta):
            return self.minus_days(other.days)
        if isinstance(other, JalaliDate):
            return timedelta(days=other.days_until(self))
        return NotImplemented

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _sort_key(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JalaliDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, JalaliDate):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, JalaliDate):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, JalaliDate):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def is_before(self, other: "JalaliDate") -> bool:
        return self < other

    def is_after(self, other: "JalaliDate") -> bool:
        return self > other

    def is_equal(self, other: "JalaliDate") -> bool:
        return self.to_epoch_day() == other.to_epoch_day()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


# =============================================================================
# HELPERS
# =============================================================================


def _resolve_previous_valid(year: int, month: int, day: int) -> JalaliDate:
    """
    Дата с днём, прижатым к последнему валидному дню месяца.

    Raises:
        OutOfRange: Если год вне поддерживаемого диапазона
    """
    chronology.check_year(year)
    return JalaliDate(year=year, month=month, day=min(day, chronology.days_in_month(year, month)))


def _require_amount(amount: int, name: str) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidArgument(f"{name} must be an integer, got {amount!r}")


def _truncating_div(value: int, divisor: int) -> int:
    # // округляет к минус бесконечности, счётчики периодов усекаются к нулю
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальная и максимальная поддерживаемые даты
JALALI_DATE_MIN: Final[JalaliDate] = JalaliDate.of(MIN_YEAR, 1, 1)
JALALI_DATE_MAX: Final[JalaliDate] = JalaliDate.of(
    MAX_YEAR, MONTHS_PER_YEAR, chronology.days_in_month(MAX_YEAR, MONTHS_PER_YEAR)
)

# Дата, соответствующая 1970-01-01 (epoch_day 0)
JALALI_EPOCH_ANCHOR: Final[JalaliDate] = JalaliDate.of(*epoch_days.EPOCH_ANCHOR)
