"""Clock & Zones — внешний коллаборатор для now() и зон.

Ядро календаря не знает о зонах. Этот модуль:
- Разрешает идентификатор зоны (str | tzinfo) в tzinfo
- Читает текущий момент из clock (Callable[[], datetime]) и переводит в зону
- Сериализует зону обратно в ключ для JSON контрактов

Поддерживаемые идентификаторы:
- IANA ключи zoneinfo ("Asia/Tehran", "Europe/Berlin")
- "UTC" → timezone.utc
- Фиксированные смещения "UTC+03:30" / "UTC-05:00" → timezone(timedelta)
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from jalali.core.calendar.errors import InvalidArgument

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
ZoneLike = Union[tzinfo, str]

_FIXED_OFFSET_RE = re.compile(r"^UTC([+-])(\d{2}):(\d{2})$")


@dataclass(frozen=True)
class ClockConfig:
    """Конфигурация чтения текущего времени.

    - default_zone: зона для now() без явной зоны
    - naive_clock_zone: зона, в которой интерпретируется naive datetime от clock
    """
    default_zone: str = "Asia/Tehran"
    naive_clock_zone: str = "UTC"


DEFAULT_CLOCK_CONFIG = ClockConfig()


def system_clock() -> datetime:
    """Текущий момент (aware, UTC)."""
    return datetime.now(timezone.utc)


def resolve_zone(zone: Optional[ZoneLike]) -> tzinfo:
    """Разрешение идентификатора зоны в tzinfo.

    Args:
        zone: tzinfo, IANA ключ, "UTC" или "UTC±HH:MM"

    Returns:
        tzinfo

    Raises:
        InvalidArgument: если зона отсутствует или неизвестна
    """
    if zone is None:
        raise InvalidArgument("zone is required")
    if isinstance(zone, tzinfo):
        return zone
    if not isinstance(zone, str) or not zone.strip():
        raise InvalidArgument(f"zone must be tzinfo or a non-empty string, got {zone!r}")

    key = zone.strip()
    if key == "UTC":
        return timezone.utc

    match = _FIXED_OFFSET_RE.match(key)
    if match:
        sign, hours, minutes = match.groups()
        if int(hours) > 23 or int(minutes) > 59:
            raise InvalidArgument(f"zone offset out of range: {key}")
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        return timezone(-offset if sign == "-" else offset)

    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.debug("Unknown zone id %r: %s", key, e)
        raise InvalidArgument(f"unknown zone: {key}") from e


def zone_key(zone: tzinfo) -> str:
    """Обратное к resolve_zone: tzinfo → строковый ключ.

    ZoneInfo → IANA ключ; timezone.utc → "UTC"; прочие фиксированные
    смещения → "UTC±HH:MM".
    """
    if isinstance(zone, ZoneInfo):
        return zone.key
    offset = zone.utcoffset(None)
    if offset is None:
        raise InvalidArgument(f"zone {zone!r} has no fixed offset and no key")
    if offset == timedelta(0):
        return "UTC"

    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def current_datetime(
    zone: Optional[ZoneLike] = None,
    clock: Optional[Clock] = None,
    config: ClockConfig = DEFAULT_CLOCK_CONFIG,
) -> datetime:
    """Текущий момент в указанной зоне (aware datetime).

    Args:
        zone: зона результата (default: config.default_zone)
        clock: источник времени (default: system_clock)
        config: конфигурация по умолчанию

    Returns:
        aware datetime в зоне zone
    """
    target = resolve_zone(zone if zone is not None else config.default_zone)
    moment = (clock or system_clock)()
    if moment.tzinfo is None:
        # naive показания clock трактуются как время в naive_clock_zone
        logger.debug("Clock returned naive datetime, assuming %s", config.naive_clock_zone)
        moment = moment.replace(tzinfo=resolve_zone(config.naive_clock_zone))
    return moment.astimezone(target)
