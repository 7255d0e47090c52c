"""
Bound — Граница числового интервала

Закрытое множество вариантов:
- FiniteBound: конечная граница с числовым значением
- InfiniteBound: бесконечная граница со знаком, без значения

Третий вариант запрещён: прямым наследником Bound может быть только
FiniteBound или InfiniteBound (проверяется при создании класса).
Наследовать сами варианты разрешено.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_infinite() == not is_finite() для любой границы
2. Каждый экземпляр принадлежит ровно одному варианту
3. Методы, объявленные в _final_methods, не переопределяются в наследниках

Операторы <, <=, >, >= делегируют компаратору границ. Оператор ==
остаётся структурным равенством (значение + конкретный тип), поэтому
FiniteBound(1) и FiniteBound(1.0) упорядочены как равные, но не равны.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Final

# =============================================================================
# ДОПУСТИМЫЕ ВАРИАНТЫ
# =============================================================================

_PERMITTED_VARIANTS: Final[frozenset[str]] = frozenset(
    {
        "intervalkit.bounds.finite.FiniteBound",
        "intervalkit.bounds.infinite.InfiniteBound",
    }
)


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _compare(first: "Bound", second: "Bound") -> int:
    from intervalkit.bounds.comparison import compare_bounds

    return compare_bounds(first, second)


# =============================================================================
# BOUND
# =============================================================================


class Bound(ABC):
    """
    Граница интервала: конечная или бесконечная.

    Вариант определяется is_finite(); is_infinite() всегда его отрицание.
    """

    _final_methods: ClassVar[tuple[str, ...]] = ("is_infinite",)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        for base in cls.__mro__[1:]:
            for name in base.__dict__.get("_final_methods", ()):
                if name in cls.__dict__:
                    raise TypeError(
                        f"{cls.__qualname__} cannot override final method "
                        f"{base.__qualname__}.{name}()"
                    )

        if _qualified_name(cls) in _PERMITTED_VARIANTS:
            return

        variants = [
            base for base in cls.__mro__[1:] if _qualified_name(base) in _PERMITTED_VARIANTS
        ]
        if len(variants) != 1:
            raise TypeError(
                f"{cls.__qualname__} must extend exactly one of FiniteBound, InfiniteBound"
            )

    @abstractmethod
    def is_finite(self) -> bool:
        """True только для FiniteBound."""

    def is_infinite(self) -> bool:
        """Логическое отрицание is_finite()."""
        return not self.is_finite()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return _compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return _compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return _compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return _compare(self, other) >= 0
