"""Clock — чтение текущего времени и разрешение зон для Jalali типов.

Тонкий слой композиции над zoneinfo:
- ClockConfig с зоной по умолчанию
- resolve_zone / zone_key для идентификаторов зон
- current_datetime для now()
"""

from .zones import (
    DEFAULT_CLOCK_CONFIG,
    Clock,
    ClockConfig,
    ZoneLike,
    current_datetime,
    resolve_zone,
    system_clock,
    zone_key,
)

__all__ = [
    "Clock",
    "ClockConfig",
    "DEFAULT_CLOCK_CONFIG",
    "ZoneLike",
    "current_datetime",
    "resolve_zone",
    "system_clock",
    "zone_key",
]
