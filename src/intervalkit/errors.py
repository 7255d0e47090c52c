"""
Errors — Иерархия исключений для границ интервалов

Все ошибки библиотеки делятся на два класса:
- Ошибки построения (BoundConstructionError): граница непригодна к использованию
- Ошибки сравнения (IncomparableBoundsError): две конкретные границы нельзя упорядочить

MissingValueError стоит отдельно: отсутствующее значение (None) недопустимо
ни при построении, ни при сравнении.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки построения никогда не повторяются внутри библиотеки
2. IncomparableBoundsError всегда хранит исходную причину (__cause__)
3. Ни одна ошибка не подавляется и не заменяется значением по умолчанию
"""

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from intervalkit.bounds.base import Bound


# =============================================================================
# ФОРМАТЫ СООБЩЕНИЙ
# =============================================================================

INCOMPARABLE_BOUNDS_MESSAGE_FORMAT: Final[str] = "Bounds {first} and {second} cannot be compared"


# =============================================================================
# БАЗОВЫЕ ИСКЛЮЧЕНИЯ
# =============================================================================


class BoundError(Exception):
    """Корень иерархии ошибок intervalkit."""

    pass


class MissingValueError(BoundError, TypeError):
    """
    Обязательное значение отсутствует (None).

    Возникает, если вместо границы, числа или текста передан None.
    """

    pass


# =============================================================================
# ОШИБКИ ПОСТРОЕНИЯ
# =============================================================================


class BoundConstructionError(BoundError):
    """Граница не может быть построена из переданного значения."""

    pass


class IncompatibleNumericTypeError(BoundConstructionError, TypeError):
    """
    Конкретный числовой тип не задаёт порядок над собственными значениями.

    Пример: пользовательский numbers.Number без __lt__, complex, bool.
    """

    pass


class InvalidFiniteValueError(BoundConstructionError, ValueError):
    """Значение с плавающей точкой является NaN или бесконечностью."""

    pass


class InvalidNumericTextError(BoundConstructionError, ValueError):
    """Текст не является десятичной записью числа."""

    pass


# =============================================================================
# ОШИБКИ СРАВНЕНИЯ
# =============================================================================


class IncomparableBoundsError(BoundError):
    """
    Две границы не могут быть упорядочены.

    Хранит обе границы и исходную причину для диагностики. Причина
    передаётся явно (cause=...) или через `raise ... from exc`.

    Attributes:
        first_bound: Первая граница сравнения (или None)
        second_bound: Вторая граница сравнения (или None)
    """

    def __init__(
        self,
        first_bound: "Bound | None" = None,
        second_bound: "Bound | None" = None,
        message: str | None = None,
        cause: BaseException | None = None,
    ):
        if message is None:
            message = INCOMPARABLE_BOUNDS_MESSAGE_FORMAT.format(
                first=first_bound, second=second_bound
            )
        super().__init__(message)
        self.first_bound = first_bound
        self.second_bound = second_bound
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """Исходная причина, по которой сравнение не удалось."""
        return self.__cause__


class IncomparableNumbersError(ValueError):
    """
    Два числа разных представлений не удалось привести к общему порядку.

    Поднимается числовым компаратором; компаратор границ всегда
    оборачивает её в IncomparableBoundsError.
    """

    pass
