"""
ZonedJalaliDateTime — Локальные дата и время Jalali с зоной

Immutable Pydantic модель: (date_time: JalaliDateTime, zone: tzinfo).

Зона непрозрачна для календарной арифметики: високосность, длины месяцев и
сдвиги по дням вычисляются по локальным полям date_time. Смещение (offset)
выводится из зоны для локального времени по запросу.

JSON форма: zone сериализуется ключом ("Asia/Tehran", "UTC", "UTC+03:30")
и разрешается обратно через jalali.clock.resolve_zone.
"""

from datetime import datetime, timedelta, tzinfo
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from jalali.clock import (
    DEFAULT_CLOCK_CONFIG,
    Clock,
    ZoneLike,
    current_datetime,
    resolve_zone,
    zone_key,
)
from jalali.core.calendar.errors import InvalidArgument
from jalali.core.domain.date_time import SECONDS_PER_DAY, JalaliDateTime


class ZonedJalaliDateTime(BaseModel):
    """
    Локальные дата/время Jalali, привязанные к зоне.

    Immutable модель (frozen=True). Арифметика выполняется по локальному
    времени; зона переносится в результат без изменений.
    """

    date_time: JalaliDateTime = Field(..., description="Локальные дата и время")
    zone: tzinfo = Field(..., description="Зона (ZoneInfo или фиксированное смещение)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("zone", mode="before")
    @classmethod
    def validate_zone(cls, v: Any) -> tzinfo:
        """Разрешение строкового идентификатора зоны в tzinfo."""
        return resolve_zone(v)

    @field_serializer("zone")
    def serialize_zone(self, zone: tzinfo) -> str:
        return zone_key(zone)

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
        *,
        zone: ZoneLike,
    ) -> "ZonedJalaliDateTime":
        """
        Создание из полей и идентификатора зоны (zone только по имени).

        Raises:
            InvalidDate: Если дата невалидна
            InvalidArgument: Если поле времени вне диапазона или зона неизвестна
        """
        local = JalaliDateTime.of(year, month, day, hour, minute, second, nanosecond)
        return cls.of_local(local, zone)

    @classmethod
    def of_local(cls, date_time: JalaliDateTime, zone: ZoneLike) -> "ZonedJalaliDateTime":
        """
        Привязка локальных даты/времени к зоне без изменения полей.

        Raises:
            InvalidArgument: Если зона отсутствует или неизвестна
        """
        if not isinstance(date_time, JalaliDateTime):
            raise InvalidArgument(f"date_time must be JalaliDateTime, got {type(date_time).__name__}")
        return cls(date_time=date_time, zone=resolve_zone(zone))

    @classmethod
    def from_datetime(cls, value: datetime) -> "ZonedJalaliDateTime":
        """
        Конверсия aware datetime.datetime → ZonedJalaliDateTime.

        Raises:
            InvalidArgument: Если value naive (без tzinfo)
        """
        if not isinstance(value, datetime) or value.tzinfo is None:
            raise InvalidArgument(f"expected aware datetime.datetime, got {value!r}")
        return cls.of_local(JalaliDateTime.from_datetime(value), value.tzinfo)

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nanosecond: int = 0, zone: Optional[ZoneLike] = None
    ) -> "ZonedJalaliDateTime":
        """Момент epoch_second в зоне (default: ClockConfig.default_zone)."""
        target = resolve_zone(zone if zone is not None else DEFAULT_CLOCK_CONFIG.default_zone)
        return cls.of_local(JalaliDateTime.of_epoch_second(epoch_second, nanosecond, target), target)

    @classmethod
    def now(cls, zone: Optional[ZoneLike] = None, clock: Optional[Clock] = None) -> "ZonedJalaliDateTime":
        """Текущий момент в зоне (default: ClockConfig.default_zone)."""
        return cls.from_datetime(current_datetime(zone, clock))

    # -------------------------------------------------------------------------
    # Поля для форматтера
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date_time.year

    @property
    def month(self) -> int:
        return self.date_time.month

    @property
    def day(self) -> int:
        return self.date_time.day

    @property
    def hour(self) -> int:
        return self.date_time.hour

    @property
    def minute(self) -> int:
        return self.date_time.minute

    @property
    def second(self) -> int:
        return self.date_time.second

    @property
    def nanosecond(self) -> int:
        return self.date_time.nanosecond

    @property
    def offset(self) -> timedelta:
        """Смещение зоны от UTC для локального времени date_time."""
        offset = self.zone.utcoffset(self.date_time.to_datetime())
        if offset is None:
            raise InvalidArgument(f"zone {self.zone!r} does not provide a UTC offset")
        return offset

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_datetime(self) -> datetime:
        """Aware datetime.datetime (наносекунды усекаются до микросекунд)."""
        return self.date_time.to_datetime().replace(tzinfo=self.zone)

    def to_epoch_second(self) -> int:
        """Секунды от 1970-01-01T00:00:00Z."""
        local_seconds = self.date_time.date.to_epoch_day() * SECONDS_PER_DAY + self.date_time.second_of_day()
        return local_seconds - int(self.offset.total_seconds())

    def with_zone_same_instant(self, zone: ZoneLike) -> "ZonedJalaliDateTime":
        """
        Тот же момент времени в другой зоне (локальные поля пересчитываются).

        Доля секунды не зависит от смещения зоны и переносится как есть.
        """
        target = resolve_zone(zone)
        shifted = self.to_datetime().astimezone(target)
        local = JalaliDateTime.from_datetime(shifted)
        local = JalaliDateTime.of_date(
            local.date, local.hour, local.minute, local.second, self.date_time.nanosecond
        )
        return ZonedJalaliDateTime.of_local(local, target)

    def with_zone_same_local(self, zone: ZoneLike) -> "ZonedJalaliDateTime":
        """Те же локальные поля в другой зоне (момент времени меняется)."""
        return ZonedJalaliDateTime.of_local(self.date_time, zone)

    # -------------------------------------------------------------------------
    # Арифметика (по локальному времени, зона сохраняется)
    # -------------------------------------------------------------------------

    def _with_local(self, date_time: JalaliDateTime) -> "ZonedJalaliDateTime":
        return ZonedJalaliDateTime(date_time=date_time, zone=self.zone)

    def plus_days(self, days: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_days(days))

    def plus_weeks(self, weeks: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_weeks(weeks))

    def plus_months(self, months: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_months(months))

    def plus_years(self, years: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_years(years))

    def plus_hours(self, hours: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_hours(hours))

    def plus_minutes(self, minutes: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.plus_nanos(nanos))

    def minus_days(self, days: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_days(days))

    def minus_weeks(self, weeks: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_weeks(weeks))

    def minus_months(self, months: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_months(months))

    def minus_years(self, years: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_years(years))

    def minus_hours(self, hours: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_hours(hours))

    def minus_minutes(self, minutes: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_minutes(minutes))

    def minus_seconds(self, seconds: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_seconds(seconds))

    def minus_nanos(self, nanos: int) -> "ZonedJalaliDateTime":
        return self._with_local(self.date_time.minus_nanos(nanos))

    # -------------------------------------------------------------------------
    # Сравнение (по моменту времени)
    # -------------------------------------------------------------------------

    def _instant_key(self) -> tuple[int, int]:
        return self.to_epoch_second(), self.date_time.nanosecond

    def is_before(self, other: "ZonedJalaliDateTime") -> bool:
        return self._instant_key() < other._instant_key()

    def is_after(self, other: "ZonedJalaliDateTime") -> bool:
        return self._instant_key() > other._instant_key()

    def is_same_instant(self, other: "ZonedJalaliDateTime") -> bool:
        return self._instant_key() == other._instant_key()

    def __str__(self) -> str:
        return f"{self.date_time}[{zone_key(self.zone)}]"
