"""
Bound Factory — Построение корректных границ

Единственный рекомендуемый способ получить границу из «сырого» ввода:
- infinite(positive) / positive_infinity() / negative_infinity()
- finite(number): число любого self-comparable типа
- finite_from_text(text): десятичная запись → Decimal → finite()

Фабрика не хранит состояния. Бесконечные границы являются общими экземплярами
POSITIVE_INFINITY / NEGATIVE_INFINITY.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from intervalkit.bounds.finite import FiniteBound
from intervalkit.bounds.infinite import NEGATIVE_INFINITY, POSITIVE_INFINITY, InfiniteBound
from intervalkit.bounds.validation import is_numeral, require_value, validate_sign
from intervalkit.errors import InvalidNumericTextError


class BoundFactory:
    """Фабрика immutable границ."""

    def infinite(self, positive: bool) -> InfiniteBound:
        """
        Бесконечная граница заданного знака.

        Args:
            positive: True для +∞, False для -∞

        Returns:
            Общий экземпляр POSITIVE_INFINITY или NEGATIVE_INFINITY
        """
        validate_sign(positive)
        return POSITIVE_INFINITY if positive else NEGATIVE_INFINITY

    def positive_infinity(self) -> InfiniteBound:
        return self.infinite(True)

    def negative_infinity(self) -> InfiniteBound:
        return self.infinite(False)

    def finite(self, number: Any) -> FiniteBound:
        """
        Конечная граница с заданным значением.

        Args:
            number: Число (int, float, Decimal, Fraction, пользовательский numbers.Number)

        Returns:
            FiniteBound со значением number и value_type == type(number)

        Raises:
            MissingValueError: Если number is None
            IncompatibleNumericTypeError: Если тип числа не задаёт порядок над собой
            InvalidFiniteValueError: Если значение NaN или бесконечно
        """
        return FiniteBound(number)

    def finite_from_text(self, text: str) -> FiniteBound:
        """
        Конечная граница из десятичной записи.

        Значение хранится как Decimal без потери точности.

        Args:
            text: Десятичная запись ("1", "-0.25", "1.5e3")

        Returns:
            FiniteBound со значением Decimal(text)

        Raises:
            MissingValueError: Если text is None
            InvalidNumericTextError: Если text не является десятичной записью

        Examples:
            >>> BoundFactory().finite_from_text("2.50").value
            Decimal('2.50')
        """
        require_value(text, "Number text")
        if not isinstance(text, str):
            raise InvalidNumericTextError(
                f"Number text must be str, got {type(text).__qualname__}"
            )
        if not is_numeral(text):
            raise InvalidNumericTextError(f"Cannot parse {text!r} as a decimal number")

        try:
            number = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidNumericTextError(f"Cannot parse {text!r} as a decimal number") from exc

        return self.finite(number)


# Глобальный экземпляр фабрики
_BOUND_FACTORY = BoundFactory()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def get_bound_factory() -> BoundFactory:
    """Общий экземпляр BoundFactory."""
    return _BOUND_FACTORY


def make_infinite(positive: bool) -> InfiniteBound:
    """Бесконечная граница заданного знака."""
    return _BOUND_FACTORY.infinite(positive)


def make_finite(number: Any) -> FiniteBound:
    """Конечная граница с заданным значением (см. BoundFactory.finite)."""
    return _BOUND_FACTORY.finite(number)


def make_finite_from_text(text: str) -> FiniteBound:
    """Конечная граница из десятичной записи (см. BoundFactory.finite_from_text)."""
    return _BOUND_FACTORY.finite_from_text(text)
