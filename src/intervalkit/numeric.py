"""
Numeric Comparator — Сравнение чисел разных конкретных представлений

Сравнивает два числа, конкретные типы которых могут различаться
(int, float, Decimal, Fraction, пользовательские numbers.Number).

Правила:
- Одинаковый конкретный тип → собственный порядок типа (операторы < и >)
- Разные типы → каноническое точное представление:
    * int / numbers.Rational → int или Fraction
    * Decimal → Decimal без изменений
    * float → Decimal по кратчайшей round-trip записи (repr), т.е. 0.1 == Decimal("0.1")
    * прочие типы → Decimal(str(value))
  Канонические значения сравниваются встроенными смешанными сравнениями
  int / Fraction / Decimal: они точны и не раскрывают экспоненту Decimal.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 == 1.0 == Decimal("1") == Fraction(1) в смысле порядка (результат 0)
2. Порядок одинаков при сравнении внутри типа и между типами
3. Время сравнения не зависит от величины экспоненты (Decimal("1e999999999"))
4. Невозможность сравнения → IncomparableNumbersError, без значений по умолчанию
"""

import math
import numbers
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any

from intervalkit.errors import IncomparableNumbersError, MissingValueError


# =============================================================================
# КАНОНИЧЕСКОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def _finite_decimal(number: Decimal) -> Decimal:
    if not number.is_finite():
        raise IncomparableNumbersError(f"Decimal {number} has no finite position")
    return number


def to_canonical(number: Any) -> int | Fraction | Decimal:
    """
    Точное каноническое представление числа.

    Args:
        number: Число любого конкретного типа

    Returns:
        int или Fraction для рациональных типов, Decimal для остальных

    Raises:
        IncomparableNumbersError: Если число не конечно или его запись не числовая

    Examples:
        >>> to_canonical(0.1)
        Decimal('0.1')
        >>> to_canonical(Fraction(6, 4))
        Fraction(3, 2)
    """
    if isinstance(number, (int, Fraction)):
        return number

    if isinstance(number, numbers.Rational):
        return Fraction(number.numerator, number.denominator)

    if isinstance(number, Decimal):
        return _finite_decimal(number)

    if isinstance(number, float):
        if not math.isfinite(number):
            raise IncomparableNumbersError(f"Float {number} has no finite position")
        # float.__repr__ даёт кратчайшую запись и для подклассов float
        return Decimal(float.__repr__(number))

    text = str(number)
    try:
        return _finite_decimal(Decimal(text))
    except InvalidOperation as exc:
        raise IncomparableNumbersError(
            f"Cannot interpret {text!r} ({type(number).__qualname__}) as a number"
        ) from exc


def _rational_decimal_text(fraction: Fraction) -> str:
    denominator = fraction.denominator

    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        raise IncomparableNumbersError(
            f"{fraction} has no finite decimal representation"
        )

    exponent = max(twos, fives)
    coefficient = Decimal(fraction.numerator * (10**exponent // fraction.denominator))
    sign, digits, _ = coefficient.as_tuple()
    return str(Decimal((sign, digits, -exponent)))


def to_decimal_text(number: Any) -> str:
    """
    Точная десятичная запись числа.

    Используется для сериализации конечных границ. Decimal сохраняет
    собственную запись (включая масштаб: "1.50" остаётся "1.50").
    Дроби с бесконечной десятичной записью (например, 1/3) не представимы.

    Raises:
        IncomparableNumbersError: Если число не конечно или не имеет конечной записи
    """
    canonical = to_canonical(number)

    if isinstance(canonical, Decimal):
        return str(canonical)
    if isinstance(canonical, int):
        return str(Decimal(canonical))
    return _rational_decimal_text(canonical)


# =============================================================================
# КОМПАРАТОР
# =============================================================================


def _three_way(first: Any, second: Any) -> int:
    if first < second:
        return -1
    if second < first:
        return 1
    return 0


class NumberComparator:
    """
    Трёхзначный компаратор чисел разных конкретных представлений.

    Не хранит состояния; безопасен для использования из нескольких потоков.
    """

    def compare(self, first: Any, second: Any) -> int:
        """
        Сравнение двух чисел.

        Args:
            first: Первое число
            second: Второе число

        Returns:
            -1, 0 или 1

        Raises:
            MissingValueError: Если одно из чисел None
            IncomparableNumbersError: Если числа нельзя привести к общему порядку
        """
        if first is None or second is None:
            raise MissingValueError("Numbers to compare cannot be None")

        if type(first) is type(second):
            return _three_way(first, second)

        return _three_way(to_canonical(first), to_canonical(second))

    def __call__(self, first: Any, second: Any) -> int:
        return self.compare(first, second)


# Глобальный экземпляр компаратора
_NUMBER_COMPARATOR = NumberComparator()


def get_number_comparator() -> NumberComparator:
    """Общий экземпляр NumberComparator."""
    return _NUMBER_COMPARATOR


def compare_numbers(first: Any, second: Any) -> int:
    """Сравнение двух чисел общим NumberComparator."""
    return _NUMBER_COMPARATOR.compare(first, second)
