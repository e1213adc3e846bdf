"""
Contract Validation Module

Валидация JSON контрактов сериализованных Jalali значений.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    JalaliDateTimeValidator,
    JalaliDateValidator,
    SchemaLoader,
    ZonedJalaliDateTimeValidator,
    load_jalali_date,
    load_jalali_date_time,
    load_zoned_jalali_date_time,
    validate_jalali_date,
    validate_jalali_date_time,
    validate_zoned_jalali_date_time,
)

__all__ = [
    # Classes
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "JalaliDateValidator",
    "JalaliDateTimeValidator",
    "ZonedJalaliDateTimeValidator",
    # Functions
    "validate_jalali_date",
    "validate_jalali_date_time",
    "validate_zoned_jalali_date_time",
    "load_jalali_date",
    "load_jalali_date_time",
    "load_zoned_jalali_date_time",
]
