"""
Errors — Таксономия ошибок календаря

Все ошибки наследуются от ValueError, поэтому их можно поднимать внутри
pydantic-валидаторов и ловить обычным `except ValueError`.

Иерархия:
- JalaliError
  - InvalidArgument  (параметр вне синтаксического домена: month=13, zone=None)
  - InvalidDate      (комбинация year/month/day нарушает правила календаря)
    - OutOfRange     (год или epoch-day вне поддерживаемого диапазона)
"""


class JalaliError(ValueError):
    """Базовая ошибка пакета."""

    pass


class InvalidArgument(JalaliError):
    """
    Параметр отсутствует или вне своего домена.

    Примеры: месяц вне [1, 12] в days_in_month, час 24, неизвестная зона.
    """

    pass


class InvalidDate(JalaliError):
    """
    Дата нарушает инварианты календаря.

    Примеры: 31 Mehr, 30 Esfand в невисокосный год.
    """

    pass


class OutOfRange(InvalidDate):
    """
    Год или epoch-day вне поддерживаемого диапазона.

    Поднимается при конструировании и при арифметике, если результат
    выходит за [MIN_YEAR, MAX_YEAR].
    """

    pass
