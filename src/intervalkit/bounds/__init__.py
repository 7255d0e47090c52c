"""
Границы числовых интервалов: модель, построение и полный порядок.
"""

from intervalkit.bounds.base import Bound
from intervalkit.bounds.comparison import (
    BoundComparator,
    bound_sort_key,
    compare_bounds,
    get_bound_comparator,
)
from intervalkit.bounds.factory import (
    BoundFactory,
    get_bound_factory,
    make_finite,
    make_finite_from_text,
    make_infinite,
)
from intervalkit.bounds.finite import FiniteBound
from intervalkit.bounds.infinite import NEGATIVE_INFINITY, POSITIVE_INFINITY, InfiniteBound
from intervalkit.bounds.validation import (
    NUMERAL_PATTERN,
    is_finite_number,
    is_numeral,
    is_self_comparable,
    validate_finite_value,
)

__all__ = [
    # Model
    "Bound",
    "FiniteBound",
    "InfiniteBound",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    # Construction
    "BoundFactory",
    "get_bound_factory",
    "make_infinite",
    "make_finite",
    "make_finite_from_text",
    # Validation
    "NUMERAL_PATTERN",
    "is_self_comparable",
    "is_finite_number",
    "is_numeral",
    "validate_finite_value",
    # Comparison
    "BoundComparator",
    "get_bound_comparator",
    "compare_bounds",
    "bound_sort_key",
]
