"""
Bound Comparison — Полный порядок над границами интервалов

Порядок:
    -∞ < любая конечная граница < +∞
    конечные границы упорядочены по числовому значению независимо от
    конкретного типа (сравнение делегируется NumberComparator)
    бесконечные границы одного знака равны

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compare(x, x) == 0 для любой границы
2. None на входе → MissingValueError (до попытки сравнения)
3. Любое исключение во время сравнения → IncomparableBoundsError с исходной причиной
4. Компаратор не хранит состояния и безопасен для нескольких потоков
"""

import logging
from functools import cmp_to_key

from intervalkit.bounds.base import Bound
from intervalkit.bounds.finite import FiniteBound
from intervalkit.bounds.infinite import InfiniteBound
from intervalkit.bounds.validation import require_value
from intervalkit.errors import IncomparableBoundsError
from intervalkit.numeric import compare_numbers

logger = logging.getLogger(__name__)


# =============================================================================
# ДИСПЕТЧЕРИЗАЦИЯ ПО ВАРИАНТАМ
# =============================================================================


def _require_bound(bound: object, name: str) -> None:
    require_value(bound, name)
    if not isinstance(bound, Bound):
        raise TypeError(f"{name} must be a Bound, got {type(bound).__qualname__}")


def _as_infinite(bound: Bound) -> InfiniteBound:
    if isinstance(bound, InfiniteBound):
        return bound
    # Недостижимо: Bound допускает только два варианта
    raise TypeError(f"Unknown bound variant: {type(bound).__qualname__}")


def _compare_finite(first: FiniteBound, second: Bound) -> int:
    if isinstance(second, FiniteBound):
        return compare_numbers(first.value, second.value)
    return -_compare_infinite(_as_infinite(second), first)


def _compare_infinite(first: InfiniteBound, second: Bound) -> int:
    if isinstance(second, FiniteBound):
        return 1 if first.is_positive() else -1
    return _compare_infinite_bounds(first, _as_infinite(second))


def _compare_infinite_bounds(first: InfiniteBound, second: InfiniteBound) -> int:
    if first.is_negative():
        return 0 if second.is_negative() else -1
    return 0 if second.is_positive() else 1


# =============================================================================
# КОМПАРАТОР
# =============================================================================


class BoundComparator:
    """
    Трёхзначный компаратор границ.

    Используется как функция сравнения (comparator(a, b)) или как ключ
    сортировки (sorted(bounds, key=comparator.key())).
    """

    def compare(self, first_bound: Bound, second_bound: Bound) -> int:
        """
        Сравнение двух границ.

        Args:
            first_bound: Первая граница
            second_bound: Вторая граница

        Returns:
            Отрицательное, 0 или положительное число

        Raises:
            MissingValueError: Если одна из границ None
            TypeError: Если аргумент не Bound
            IncomparableBoundsError: Если сравнение не удалось (причина в __cause__)

        Examples:
            >>> from intervalkit.bounds.factory import make_finite, make_infinite
            >>> BoundComparator().compare(make_infinite(False), make_finite(0))
            -1
        """
        _require_bound(first_bound, "First bound")
        _require_bound(second_bound, "Second bound")

        if first_bound is second_bound:
            return 0

        try:
            if isinstance(first_bound, FiniteBound):
                return _compare_finite(first_bound, second_bound)
            return _compare_infinite(_as_infinite(first_bound), second_bound)
        except Exception as exc:
            logger.debug("Cannot compare %s and %s: %r", first_bound, second_bound, exc)
            raise IncomparableBoundsError(first_bound, second_bound) from exc

    def __call__(self, first_bound: Bound, second_bound: Bound) -> int:
        return self.compare(first_bound, second_bound)

    def key(self):
        """Ключ сортировки на основе compare (functools.cmp_to_key)."""
        return cmp_to_key(self.compare)


# Глобальный экземпляр компаратора
_BOUND_COMPARATOR = BoundComparator()


def get_bound_comparator() -> BoundComparator:
    """Общий экземпляр BoundComparator."""
    return _BOUND_COMPARATOR


def compare_bounds(first_bound: Bound, second_bound: Bound) -> int:
    """Сравнение двух границ общим BoundComparator."""
    return _BOUND_COMPARATOR.compare(first_bound, second_bound)


bound_sort_key = cmp_to_key(compare_bounds)
