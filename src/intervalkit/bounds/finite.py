"""
FiniteBound — Конечная граница интервала

Immutable граница с числовым значением и тегом его конкретного типа.
value_type нужен, чтобы сравнивать границы с разными представлениями
чисел (int против Decimal и т.п.).

Равенство (==) строгое по типу и масштабу Decimal: FiniteBound(1) != FiniteBound(1.0)
и FiniteBound(Decimal("1.0")) != FiniteBound(Decimal("1")), хотя компаратор
упорядочивает их как равные.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar, Generic, TypeVar

from intervalkit.bounds.base import Bound
from intervalkit.bounds.validation import validate_finite_value

T = TypeVar("T")


@dataclass(frozen=True, repr=False)
class FiniteBound(Bound, Generic[T]):
    """
    Конечная граница.

    Значение проверяется при создании (None, порядок типа, NaN/Inf),
    поэтому любой существующий экземпляр пригоден для сравнения.

    Attributes:
        value: Числовое значение границы
        value_type: Конкретный тип значения (type(value))
        value_scale: Экспонента Decimal значения (None для прочих типов)
    """

    value: T
    value_type: type = field(init=False, compare=True)
    value_scale: int | None = field(init=False, compare=True, default=None)

    _final_methods: ClassVar[tuple[str, ...]] = ("is_finite",)

    def __post_init__(self) -> None:
        validate_finite_value(self.value)
        object.__setattr__(self, "value_type", type(self.value))
        if isinstance(self.value, Decimal):
            object.__setattr__(self, "value_scale", self.value.as_tuple().exponent)

    def is_finite(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"FiniteBound{{{self.value_type.__qualname__}: {self.value}}}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r})"
