"""
JalaliMonth — Месяцы календаря Jalali

Перечисление 12 месяцев с длинами и смещениями внутри года.
Названия констант — транслитерация; локализованные названия для отображения
являются задачей форматирования и здесь не хранятся.
"""

from enum import Enum

from jalali.core.calendar.chronology import (
    DAYS_BEFORE_MONTH,
    MONTH_LENGTHS,
    MONTHS_PER_YEAR,
)
from jalali.core.calendar.errors import InvalidArgument


class JalaliMonth(int, Enum):
    """Месяц года (1 = Farvardin, 12 = Esfand)"""

    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    @classmethod
    def of(cls, month: int) -> "JalaliMonth":
        """
        Получение месяца по номеру.

        Raises:
            InvalidArgument: Если month вне [1, 12]
        """
        try:
            return cls(month)
        except ValueError as e:
            raise InvalidArgument(f"month must be in [1, {MONTHS_PER_YEAR}], got {month!r}") from e

    def length(self, leap_year: bool) -> int:
        """Длина месяца в днях для (не)високосного года."""
        if self is JalaliMonth.ESFAND and leap_year:
            return 30
        return MONTH_LENGTHS[self.value - 1]

    def min_length(self) -> int:
        """Минимальная длина месяца (Esfand: 29)."""
        return self.length(False)

    def max_length(self) -> int:
        """Максимальная длина месяца (Esfand: 30)."""
        return self.length(True)

    def first_day_of_year(self) -> int:
        """
        День года (1-based), с которого начинается месяц.

        Не зависит от високосности: Esfand последний.
        """
        return DAYS_BEFORE_MONTH[self.value - 1] + 1

    def plus(self, months: int) -> "JalaliMonth":
        """Месяц через `months` месяцев (по кругу, год не учитывается)."""
        return JalaliMonth((self.value - 1 + months) % MONTHS_PER_YEAR + 1)

    def minus(self, months: int) -> "JalaliMonth":
        """Месяц `months` месяцев назад (по кругу)."""
        return self.plus(-months)
