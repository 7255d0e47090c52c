"""
InfiniteBound — Бесконечная граница интервала

Граница без значения, только со знаком. Две бесконечные границы
одного знака упорядочены как равные и равны по ==.
"""

from dataclasses import dataclass
from typing import ClassVar, Final

from intervalkit.bounds.base import Bound
from intervalkit.bounds.validation import validate_sign


@dataclass(frozen=True, repr=False)
class InfiniteBound(Bound):
    """
    Бесконечная граница (+∞ или -∞).

    Attributes:
        positive: True для +∞, False для -∞
    """

    positive: bool

    _final_methods: ClassVar[tuple[str, ...]] = ("is_finite", "is_negative")

    def __post_init__(self) -> None:
        validate_sign(self.positive)

    def is_finite(self) -> bool:
        return False

    def is_positive(self) -> bool:
        return self.positive

    def is_negative(self) -> bool:
        """Логическое отрицание is_positive()."""
        return not self.is_positive()

    def __str__(self) -> str:
        kind = "Positive " if self.is_positive() else "Negative "
        return kind + "InfiniteBound"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(positive={self.positive!r})"


# =============================================================================
# ОБЩИЕ ЭКЗЕМПЛЯРЫ
# =============================================================================

POSITIVE_INFINITY: Final[InfiniteBound] = InfiniteBound(True)
NEGATIVE_INFINITY: Final[InfiniteBound] = InfiniteBound(False)
