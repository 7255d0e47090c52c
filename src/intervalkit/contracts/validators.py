"""
Bound Schema Validation

Проверка JSON представления границ по JSON Schema (Draft 2020-12).
Схема bound.json поставляется с пакетом в каталоге schema/.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator

BOUND_SCHEMA_NAME: Final[str] = "bound"

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и проверка схемы; результат кэшируется по (имя, каталог).

    Raises:
        FileNotFoundError: Нет каталога или файла схемы
        ValueError: Файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


class BoundContractValidator:
    """Валидатор JSON представления границы."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._validator = Draft202012Validator(load_schema(BOUND_SCHEMA_NAME, schema_dir))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Данные не соответствуют схеме
        """
        self._validator.validate(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Сообщения всех нарушений схемы в порядке пути; пустой список для валидных данных."""
        errors = sorted(
            self._validator.iter_errors(data),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        return [
            f"{'/'.join(map(str, error.absolute_path)) or '<root>'}: {error.message}"
            for error in errors
        ]


_BOUND_VALIDATOR: BoundContractValidator | None = None


def validate_bound_payload(data: Dict[str, Any]) -> None:
    """
    Валидация JSON данных границы общим валидатором.

    Raises:
        jsonschema.ValidationError: Данные не соответствуют схеме
    """
    global _BOUND_VALIDATOR
    if _BOUND_VALIDATOR is None:
        _BOUND_VALIDATOR = BoundContractValidator()
    _BOUND_VALIDATOR.validate(data)
