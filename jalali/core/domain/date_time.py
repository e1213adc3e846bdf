"""
JalaliDateTime — Дата Jalali с временем суток

Immutable Pydantic модель: (date: JalaliDate, hour, minute, second, nanosecond).

Календарная логика полностью делегируется JalaliDate.
Время суток складывается модульно в наносекундах дня с переносом
целых суток в дату:

    total = nano_of_day + delta
    carry_days, nano_of_day' = divmod(total, NANOS_PER_DAY)
    date' = date.plus_days(carry_days)

Форматирование не выполняется: внешний форматтер получает поля
year, month, day, hour, minute, second, nanosecond.
"""

from datetime import datetime, time, timedelta, timezone
from enum import Enum
from typing import TYPE_CHECKING, Final, Optional

from pydantic import BaseModel, Field

from jalali.clock import DEFAULT_CLOCK_CONFIG, Clock, ZoneLike, current_datetime, resolve_zone
from jalali.core.calendar.errors import InvalidArgument, OutOfRange
from jalali.core.domain.date import JalaliDate

if TYPE_CHECKING:
    from jalali.core.domain.zoned_date_time import ZonedJalaliDateTime


# =============================================================================
# КОНСТАНТЫ ВРЕМЕНИ
# =============================================================================

HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_DAY: Final[int] = SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY

NANOS_PER_MICRO: Final[int] = 1_000
NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR: Final[int] = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY: Final[int] = NANOS_PER_HOUR * HOURS_PER_DAY

_UNIX_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TimeUnit(int, Enum):
    """Единица усечения времени суток; значение — длительность в наносекундах."""

    NANOS = 1
    MICROS = NANOS_PER_MICRO
    MILLIS = NANOS_PER_MICRO * 1_000
    SECONDS = NANOS_PER_SECOND
    MINUTES = NANOS_PER_MINUTE
    HOURS = NANOS_PER_HOUR
    DAYS = NANOS_PER_DAY


# =============================================================================
# JALALI DATE-TIME MODEL
# =============================================================================


class JalaliDateTime(BaseModel):
    """
    Локальные дата и время по календарю Jalali (без зоны).

    Immutable модель (frozen=True). Арифметика возвращает новый экземпляр.
    """

    date: JalaliDate = Field(..., description="Дата по календарю Jalali")
    hour: int = Field(0, ge=0, le=HOURS_PER_DAY - 1, description="Час (0-23)")
    minute: int = Field(0, ge=0, le=MINUTES_PER_HOUR - 1, description="Минута (0-59)")
    second: int = Field(0, ge=0, le=SECONDS_PER_MINUTE - 1, description="Секунда (0-59)")
    nanosecond: int = Field(
        0, ge=0, le=NANOS_PER_SECOND - 1, description="Наносекунда (0-999_999_999)"
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> "JalaliDateTime":
        """
        Создание из полей даты и времени.

        Raises:
            InvalidDate: Если дата невалидна
            InvalidArgument: Если поле времени вне диапазона
        """
        return cls.of_date(JalaliDate.of(year, month, day), hour, minute, second, nanosecond)

    @classmethod
    def of_date(
        cls,
        date: JalaliDate,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> "JalaliDateTime":
        """
        Комбинация готовой даты с временем суток.

        Raises:
            InvalidArgument: Если date не JalaliDate или поле времени вне диапазона
        """
        if not isinstance(date, JalaliDate):
            raise InvalidArgument(f"date must be JalaliDate, got {type(date).__name__}")
        _check_time_field("hour", hour, HOURS_PER_DAY - 1)
        _check_time_field("minute", minute, MINUTES_PER_HOUR - 1)
        _check_time_field("second", second, SECONDS_PER_MINUTE - 1)
        _check_time_field("nanosecond", nanosecond, NANOS_PER_SECOND - 1)
        return cls(date=date, hour=hour, minute=minute, second=second, nanosecond=nanosecond)

    @classmethod
    def from_datetime(cls, value: datetime) -> "JalaliDateTime":
        """
        Конверсия datetime.datetime → JalaliDateTime.

        tzinfo игнорируется: берутся локальные поля (wall time).
        """
        if not isinstance(value, datetime):
            raise InvalidArgument(f"expected datetime.datetime, got {type(value).__name__}")
        return cls.of_date(
            JalaliDate.of_gregorian(value.date()),
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICRO,
        )

    @classmethod
    def now(cls, zone: Optional[ZoneLike] = None, clock: Optional[Clock] = None) -> "JalaliDateTime":
        """Текущие локальные дата и время в зоне (default: ClockConfig.default_zone)."""
        return cls.from_datetime(current_datetime(zone, clock))

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nanosecond: int = 0, zone: Optional[ZoneLike] = None
    ) -> "JalaliDateTime":
        """
        Локальные дата/время момента epoch_second (от 1970-01-01T00:00:00Z) в зоне.

        Args:
            epoch_second: Секунды от эпохи (отрицательные — до 1970)
            nanosecond: Доля секунды (0..999_999_999)
            zone: Зона (default: ClockConfig.default_zone)

        Raises:
            InvalidArgument: Если nanosecond вне диапазона или зона неизвестна
            OutOfRange: Если момент вне поддерживаемого диапазона
        """
        _require_amount(epoch_second, "epoch_second")
        _check_time_field("nanosecond", nanosecond, NANOS_PER_SECOND - 1)
        target = resolve_zone(zone if zone is not None else DEFAULT_CLOCK_CONFIG.default_zone)
        try:
            local = (_UNIX_EPOCH + timedelta(seconds=epoch_second)).astimezone(target)
        except OverflowError as e:
            raise OutOfRange(f"epoch second out of range: {epoch_second}") from e
        return cls.of_date(
            JalaliDate.of_gregorian(local.date()), local.hour, local.minute, local.second, nanosecond
        )

    @classmethod
    def of_instant(cls, value: datetime, zone: Optional[ZoneLike] = None) -> "JalaliDateTime":
        """
        Локальные дата/время момента aware datetime в зоне.

        В отличие от from_datetime, момент сначала переводится в zone.

        Raises:
            InvalidArgument: Если value naive или зона неизвестна
        """
        if not isinstance(value, datetime) or value.tzinfo is None:
            raise InvalidArgument(f"expected aware datetime.datetime, got {value!r}")
        target = resolve_zone(zone if zone is not None else DEFAULT_CLOCK_CONFIG.default_zone)
        try:
            return cls.from_datetime(value.astimezone(target))
        except OverflowError as e:
            raise OutOfRange(f"instant out of range: {value!r}") from e

    # -------------------------------------------------------------------------
    # Поля для форматтера
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    def nano_of_day(self) -> int:
        """Наносекунды от начала суток."""
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond
        )

    def second_of_day(self) -> int:
        return self.nano_of_day() // NANOS_PER_SECOND

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_time(self) -> time:
        """Время суток как datetime.time (наносекунды усекаются до микросекунд)."""
        return time(self.hour, self.minute, self.second, self.nanosecond // NANOS_PER_MICRO)

    def to_datetime(self) -> datetime:
        """Naive datetime.datetime с теми же локальными полями."""
        return datetime.combine(self.date.to_gregorian(), self.to_time())

    def at_zone(self, zone: ZoneLike) -> "ZonedJalaliDateTime":
        """
        Привязка к зоне без изменения локальных полей.

        Raises:
            InvalidArgument: Если зона отсутствует или неизвестна
        """
        from jalali.core.domain.zoned_date_time import ZonedJalaliDateTime

        return ZonedJalaliDateTime.of_local(self, zone)

    # -------------------------------------------------------------------------
    # Арифметика: дата
    # -------------------------------------------------------------------------

    def with_date(self, date: JalaliDate) -> "JalaliDateTime":
        if date == self.date:
            return self
        return JalaliDateTime.of_date(date, self.hour, self.minute, self.second, self.nanosecond)

    def with_year(self, year: int) -> "JalaliDateTime":
        """Другой год; 30 Esfand прижимается к 29 в невисокосный год."""
        return self.with_date(self.date.with_year(year))

    def with_month(self, month: int) -> "JalaliDateTime":
        """Другой месяц; день прижимается к длине месяца."""
        return self.with_date(self.date.with_month(month))

    def with_day(self, day: int) -> "JalaliDateTime":
        return self.with_date(self.date.with_day(day))

    def with_day_of_year(self, day_of_year: int) -> "JalaliDateTime":
        return self.with_date(self.date.with_day_of_year(day_of_year))

    def with_hour(self, hour: int) -> "JalaliDateTime":
        return JalaliDateTime.of_date(self.date, hour, self.minute, self.second, self.nanosecond)

    def with_minute(self, minute: int) -> "JalaliDateTime":
        return JalaliDateTime.of_date(self.date, self.hour, minute, self.second, self.nanosecond)

    def with_second(self, second: int) -> "JalaliDateTime":
        return JalaliDateTime.of_date(self.date, self.hour, self.minute, second, self.nanosecond)

    def with_nanosecond(self, nanosecond: int) -> "JalaliDateTime":
        return JalaliDateTime.of_date(self.date, self.hour, self.minute, self.second, nanosecond)

    def truncated_to(self, unit: TimeUnit) -> "JalaliDateTime":
        """
        Обнуление полей времени младше unit (дата не меняется).

        Examples:
            12:34:56.789 → HOURS → 12:00:00
            12:34:56.789 → DAYS  → 00:00:00

        Raises:
            InvalidArgument: Если unit не TimeUnit
        """
        if not isinstance(unit, TimeUnit):
            raise InvalidArgument(f"unit must be TimeUnit, got {unit!r}")
        nano_of_day = self.nano_of_day()
        return self.plus_nanos(-(nano_of_day % unit.value))

    def plus_days(self, days: int) -> "JalaliDateTime":
        return self.with_date(self.date.plus_days(days))

    def plus_weeks(self, weeks: int) -> "JalaliDateTime":
        return self.with_date(self.date.plus_weeks(weeks))

    def plus_months(self, months: int) -> "JalaliDateTime":
        return self.with_date(self.date.plus_months(months))

    def plus_years(self, years: int) -> "JalaliDateTime":
        return self.with_date(self.date.plus_years(years))

    def minus_days(self, days: int) -> "JalaliDateTime":
        return self.with_date(self.date.minus_days(days))

    def minus_weeks(self, weeks: int) -> "JalaliDateTime":
        return self.with_date(self.date.minus_weeks(weeks))

    def minus_months(self, months: int) -> "JalaliDateTime":
        return self.with_date(self.date.minus_months(months))

    def minus_years(self, years: int) -> "JalaliDateTime":
        return self.with_date(self.date.minus_years(years))

    # -------------------------------------------------------------------------
    # Арифметика: время
    # -------------------------------------------------------------------------

    def plus_hours(self, hours: int) -> "JalaliDateTime":
        return self.plus_nanos(_require_amount(hours, "hours") * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> "JalaliDateTime":
        return self.plus_nanos(_require_amount(minutes, "minutes") * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> "JalaliDateTime":
        return self.plus_nanos(_require_amount(seconds, "seconds") * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> "JalaliDateTime":
        """
        Сдвиг на nanos наносекунд с переносом в дату.

        Raises:
            OutOfRange: Если дата результата вне поддерживаемого диапазона
        """
        _require_amount(nanos, "nanos")
        if nanos == 0:
            return self

        carry_days, nano_of_day = divmod(self.nano_of_day() + nanos, NANOS_PER_DAY)
        hour, rest = divmod(nano_of_day, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)
        return JalaliDateTime.of_date(self.date.plus_days(carry_days), hour, minute, second, nanosecond)

    def minus_hours(self, hours: int) -> "JalaliDateTime":
        return self.plus_hours(-_require_amount(hours, "hours"))

    def minus_minutes(self, minutes: int) -> "JalaliDateTime":
        return self.plus_minutes(-_require_amount(minutes, "minutes"))

    def minus_seconds(self, seconds: int) -> "JalaliDateTime":
        return self.plus_seconds(-_require_amount(seconds, "seconds"))

    def minus_nanos(self, nanos: int) -> "JalaliDateTime":
        return self.plus_nanos(-_require_amount(nanos, "nanos"))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _sort_key(self) -> tuple[int, int]:
        return self.date.to_epoch_day(), self.nano_of_day()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def is_before(self, other: "JalaliDateTime") -> bool:
        return self < other

    def is_after(self, other: "JalaliDateTime") -> bool:
        return self > other

    def __str__(self) -> str:
        text = f"{self.date}T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond:
            text += f".{self.nanosecond:09d}"
        return text


# =============================================================================
# HELPERS
# =============================================================================


def _check_time_field(name: str, value: int, max_value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= max_value:
        raise InvalidArgument(f"{name} must be in [0, {max_value}], got {value!r}")


def _require_amount(amount: int, name: str) -> int:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidArgument(f"{name} must be an integer, got {amount!r}")
    return amount
