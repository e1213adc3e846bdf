"""
Core calendar modules для Jalali

Правило високосных лет, таблица месяцев и конвертер через epoch-day.
Чистые функции без состояния.
"""

# Errors
from jalali.core.calendar.errors import (
    InvalidArgument,
    InvalidDate,
    JalaliError,
    OutOfRange,
)

# Chronology (leap-year oracle + month table)
from jalali.core.calendar.chronology import (
    # Cycle constants
    CYCLE_YEARS,
    DAYS_PER_CYCLE,
    LEAP_RESIDUES,
    # Range
    MAX_YEAR,
    MIN_YEAR,
    # Month table
    DAYS_BEFORE_MONTH,
    MONTH_LENGTHS,
    MONTHS_PER_YEAR,
    # Functions
    check_date,
    check_year,
    days_before_month,
    days_in_month,
    is_leap_year,
    leap_years_before,
    length_of_year,
    month_day_from_day_of_year,
)

# Epoch days (Gregorian ↔ Jalali converter)
from jalali.core.calendar.epoch_days import (
    EPOCH_ANCHOR,
    EPOCH_DAY_MAX,
    EPOCH_DAY_MIN,
    YEAR_ZERO_EPOCH_DAY,
    check_epoch_day,
    epoch_day_from_gregorian,
    epoch_day_from_jalali,
    gregorian_from_epoch_day,
    gregorian_to_jalali,
    jalali_from_epoch_day,
    jalali_to_gregorian,
    year_start_epoch_day,
)

__all__ = [
    # Errors
    "JalaliError",
    "InvalidArgument",
    "InvalidDate",
    "OutOfRange",
    # Chronology: Constants
    "CYCLE_YEARS",
    "DAYS_PER_CYCLE",
    "LEAP_RESIDUES",
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_PER_YEAR",
    "MONTH_LENGTHS",
    "DAYS_BEFORE_MONTH",
    # Chronology: Functions
    "is_leap_year",
    "length_of_year",
    "leap_years_before",
    "days_in_month",
    "days_before_month",
    "month_day_from_day_of_year",
    "check_year",
    "check_date",
    # Epoch days: Constants
    "EPOCH_ANCHOR",
    "EPOCH_DAY_MIN",
    "EPOCH_DAY_MAX",
    "YEAR_ZERO_EPOCH_DAY",
    # Epoch days: Functions
    "year_start_epoch_day",
    "epoch_day_from_jalali",
    "jalali_from_epoch_day",
    "check_epoch_day",
    "epoch_day_from_gregorian",
    "gregorian_from_epoch_day",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
]
