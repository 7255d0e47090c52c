"""
Contract Module

JSON представление границ: pydantic модели и JSON Schema валидация.
"""

from .payload import (
    BoundPayload,
    FiniteBoundPayload,
    InfiniteBoundPayload,
    bound_from_payload,
    bound_to_payload,
    parse_bound_payload,
)
from .validators import (
    BOUND_SCHEMA_NAME,
    BoundContractValidator,
    SCHEMA_DIR,
    load_schema,
    validate_bound_payload,
)

__all__ = [
    # Models
    "BoundPayload",
    "FiniteBoundPayload",
    "InfiniteBoundPayload",
    # Conversion
    "bound_to_payload",
    "bound_from_payload",
    "parse_bound_payload",
    # Schema validation
    "BOUND_SCHEMA_NAME",
    "SCHEMA_DIR",
    "load_schema",
    "BoundContractValidator",
    "validate_bound_payload",
]
