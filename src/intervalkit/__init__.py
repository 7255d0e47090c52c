"""
intervalkit — границы числовых интервалов и полный порядок над ними.

Содержит:
- bounds/     : модель границ, построение, компаратор
- contracts/  : JSON представление границ
- numeric     : сравнение чисел разных конкретных типов
- errors      : иерархия исключений
"""

from intervalkit.bounds import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    Bound,
    BoundComparator,
    BoundFactory,
    FiniteBound,
    InfiniteBound,
    bound_sort_key,
    compare_bounds,
    make_finite,
    make_finite_from_text,
    make_infinite,
)
from intervalkit.errors import (
    BoundConstructionError,
    BoundError,
    IncomparableBoundsError,
    IncomparableNumbersError,
    IncompatibleNumericTypeError,
    InvalidFiniteValueError,
    InvalidNumericTextError,
    MissingValueError,
)
from intervalkit.numeric import NumberComparator, compare_numbers

__version__ = "0.1.0"

__all__ = [
    # Bounds
    "Bound",
    "FiniteBound",
    "InfiniteBound",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "BoundFactory",
    "make_infinite",
    "make_finite",
    "make_finite_from_text",
    "BoundComparator",
    "compare_bounds",
    "bound_sort_key",
    # Numbers
    "NumberComparator",
    "compare_numbers",
    # Errors
    "BoundError",
    "MissingValueError",
    "BoundConstructionError",
    "IncompatibleNumericTypeError",
    "InvalidFiniteValueError",
    "InvalidNumericTextError",
    "IncomparableBoundsError",
    "IncomparableNumbersError",
]
