"""
Bound Payload — Pydantic модели для передачи границ в JSON

Формат:
    {"kind": "finite", "value": "1.5", "value_type": "float"}
    {"kind": "infinite", "positive": true}

Значение конечной границы передаётся десятичной записью, чтобы не терять
точность. При загрузке граница восстанавливается через
make_finite_from_text и получает value_type == Decimal: она упорядочена
как равная исходной, но не равна ей по ==.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from intervalkit.bounds.base import Bound
from intervalkit.bounds.factory import make_finite_from_text, make_infinite
from intervalkit.bounds.finite import FiniteBound
from intervalkit.bounds.infinite import InfiniteBound
from intervalkit.bounds.validation import is_numeral, require_value
from intervalkit.numeric import to_decimal_text


# =============================================================================
# MODELS
# =============================================================================


class FiniteBoundPayload(BaseModel):
    """Конечная граница в JSON."""

    kind: Literal["finite"] = "finite"
    value: str = Field(..., min_length=1, description="Десятичная запись значения")
    value_type: str | None = Field(
        default=None, description="Имя исходного типа значения (информационно)"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("value")
    @classmethod
    def validate_numeral(cls, v: str) -> str:
        """Значение должно быть десятичной записью (без NaN/Infinity)."""
        if not is_numeral(v):
            raise ValueError(f"value {v!r} is not a decimal numeral")
        return v


class InfiniteBoundPayload(BaseModel):
    """Бесконечная граница в JSON."""

    kind: Literal["infinite"] = "infinite"
    positive: bool = Field(..., strict=True, description="True для +∞, False для -∞")

    model_config = {"frozen": True, "extra": "forbid"}


BoundPayload = Annotated[
    Union[FiniteBoundPayload, InfiniteBoundPayload], Field(discriminator="kind")
]

_BOUND_PAYLOAD_ADAPTER: TypeAdapter = TypeAdapter(BoundPayload)


# =============================================================================
# CONVERSION
# =============================================================================


def bound_to_payload(bound: Bound) -> dict[str, Any]:
    """
    Сериализация границы в JSON-совместимый dict.

    Raises:
        MissingValueError: Если bound is None
        TypeError: Если bound не Bound
        IncomparableNumbersError: Если значение не имеет конечной десятичной записи
    """
    require_value(bound, "Bound")

    if isinstance(bound, FiniteBound):
        payload: FiniteBoundPayload | InfiniteBoundPayload = FiniteBoundPayload(
            value=to_decimal_text(bound.value),
            value_type=bound.value_type.__qualname__,
        )
    elif isinstance(bound, InfiniteBound):
        payload = InfiniteBoundPayload(positive=bound.is_positive())
    else:
        raise TypeError(f"Expected Bound, got {type(bound).__qualname__}")

    return payload.model_dump()


def parse_bound_payload(data: Any) -> FiniteBoundPayload | InfiniteBoundPayload:
    """
    Разбор dict в payload модель.

    Raises:
        pydantic.ValidationError: Если данные не соответствуют формату
    """
    return _BOUND_PAYLOAD_ADAPTER.validate_python(data)


def bound_from_payload(data: Any) -> Bound:
    """
    Восстановление границы из JSON-совместимого dict.

    Raises:
        pydantic.ValidationError: Если данные не соответствуют формату
    """
    payload = parse_bound_payload(data)
    if isinstance(payload, FiniteBoundPayload):
        return make_finite_from_text(payload.value)
    return make_infinite(payload.positive)
