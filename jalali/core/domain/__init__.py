"""
Domain models и value objects календаря Jalali.

JalaliDate, JalaliDateTime, ZonedJalaliDateTime и перечисление JalaliMonth.
"""

from jalali.core.calendar.errors import (
    InvalidArgument,
    InvalidDate,
    JalaliError,
    OutOfRange,
)
from jalali.core.domain.date import (
    JALALI_DATE_MAX,
    JALALI_DATE_MIN,
    JALALI_EPOCH_ANCHOR,
    DateResult,
    JalaliDate,
)
from jalali.core.domain.date_time import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
    JalaliDateTime,
    TimeUnit,
)
from jalali.core.domain.month import JalaliMonth
from jalali.core.domain.zoned_date_time import ZonedJalaliDateTime

__all__ = [
    # Errors
    "JalaliError",
    "InvalidArgument",
    "InvalidDate",
    "OutOfRange",
    # Month
    "JalaliMonth",
    # Date model
    "JalaliDate",
    "DateResult",
    "JALALI_DATE_MIN",
    "JALALI_DATE_MAX",
    "JALALI_EPOCH_ANCHOR",
    # Date-time model
    "JalaliDateTime",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_DAY",
    "NANOS_PER_MICRO",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "TimeUnit",
    # Zoned date-time model
    "ZonedJalaliDateTime",
]
