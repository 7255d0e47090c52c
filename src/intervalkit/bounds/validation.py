"""
Validation — Проверки значений конечных границ

Единственное место, где решается, пригодно ли число для конечной границы:
1. Значение присутствует (не None)
2. Конкретный тип числа задаёт порядок над собственными значениями
3. Значение с плавающей точкой конечно (не NaN, не ±Inf)

Проверка 2 (capability probe): тип должен быть numbers.Number и
определять __lt__ сам (а не наследовать от object). int, float,
Decimal, Fraction и любые numbers.Real проходят; complex и bool не проходят.
Сама операция сравнения при проверке НЕ вызывается: ошибка в
пользовательском порядке проявится только при сравнении границ.
"""

import logging
import math
import numbers
import re
from decimal import Decimal
from typing import Any, Final

from intervalkit.errors import (
    IncompatibleNumericTypeError,
    InvalidFiniteValueError,
    MissingValueError,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Десятичная запись: знак, цифры с дробной частью (или .цифры), экспонента.
# Пробелы, NaN/Infinity и подчёркивания не допускаются.
NUMERAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_self_comparable(number: Any) -> bool:
    """
    Проверка, задаёт ли конкретный тип числа порядок над собой.

    Args:
        number: Проверяемое значение

    Returns:
        True для numbers.Real, Decimal и numbers.Number с собственным __lt__
    """
    if isinstance(number, bool) or not isinstance(number, numbers.Number):
        return False

    if isinstance(number, (numbers.Real, Decimal)):
        return True

    if isinstance(number, numbers.Complex):
        return False

    return type(number).__lt__ is not object.__lt__


def is_finite_number(number: Any) -> bool:
    """
    Проверка конечности значения.

    Рациональные числа всегда конечны. Для Decimal и прочих
    numbers.Real проверяются NaN и бесконечности.
    """
    if isinstance(number, Decimal):
        return number.is_finite()

    if isinstance(number, numbers.Rational):
        return True

    if isinstance(number, numbers.Real):
        return math.isfinite(number)

    return True


def is_numeral(text: str) -> bool:
    """Проверка, является ли текст десятичной записью числа."""
    return NUMERAL_PATTERN.fullmatch(text) is not None


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_value(value: Any, name: str = "Value") -> None:
    """
    Raises:
        MissingValueError: Если value is None
    """
    if value is None:
        raise MissingValueError(f"{name} cannot be None")


def require_self_comparable(number: Any) -> None:
    """
    Raises:
        IncompatibleNumericTypeError: Если тип числа не задаёт порядок над собой
    """
    if not is_self_comparable(number):
        number_type = type(number)
        logger.debug("Rejected %s: no self ordering", number_type.__qualname__)
        raise IncompatibleNumericTypeError(
            f"Cannot create a finite bound: {number_type.__module__}."
            f"{number_type.__qualname__} does not define an ordering over "
            f"{number_type.__qualname__}"
        )


def require_finite(number: Any) -> None:
    """
    Raises:
        InvalidFiniteValueError: Если значение NaN или бесконечно
    """
    if not is_finite_number(number):
        logger.debug("Rejected non-finite value %r", number)
        raise InvalidFiniteValueError(
            f"Value of finite bound cannot be infinite or NaN, got {number}"
        )


def validate_finite_value(number: Any) -> None:
    """
    Полная проверка значения конечной границы.

    Порядок проверок фиксирован: None → тип → конечность.

    Raises:
        MissingValueError: Если number is None
        IncompatibleNumericTypeError: Если тип не задаёт порядок над собой
        InvalidFiniteValueError: Если значение NaN или бесконечно
    """
    require_value(number, "Number")
    require_self_comparable(number)
    require_finite(number)


def validate_sign(positive: Any) -> None:
    """
    Проверка знака бесконечной границы.

    Raises:
        MissingValueError: Если positive is None
        TypeError: Если positive не bool
    """
    require_value(positive, "Sign")
    if not isinstance(positive, bool):
        raise TypeError(f"Sign of infinite bound must be bool, got {type(positive).__qualname__}")
