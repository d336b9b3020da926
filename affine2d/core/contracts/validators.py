"""
JSON Schema контракты для сериализованных геометрических значений

to_dict() каждого типа (Point2D, Vertex2D, Vector2D, Matrix) должен
проходить свою схему; from_dict() дополнительно проверяется pydantic.

Схемы лежат в affine2d/core/contracts/schema/ и ставятся вместе с пакетом:
point2d.json, vertex2d.json, vector2d.json, matrix.json.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Читает схемы контрактов из каталога и кэширует их по имени.

    Каждая схема при первой загрузке проходит meta-validation Draft 2020-12.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без ".json" (например, 'vertex2d').

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# Схемы пакета читаются один раз на процесс
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Draft 2020-12 валидатор, привязанный к одной схеме пакета."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая найденная ошибка контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения контракта, а не только первое."""
        return self.validator.iter_errors(data)


class Point2DValidator(ContractValidator):
    """Контракт Point2D.to_dict(): {x, y}."""

    def __init__(self):
        super().__init__("point2d")


class Vertex2DValidator(ContractValidator):
    """Контракт Vertex2D.to_dict(): координата и обе контрольные точки."""

    def __init__(self):
        super().__init__("vertex2d")


class Vector2DValidator(ContractValidator):
    """Контракт Vector2D.to_dict(): {x, y}."""

    def __init__(self):
        super().__init__("vector2d")


class MatrixValidator(ContractValidator):
    """Контракт Matrix.to_dict(): поля a, b, c, d, tx, ty."""

    def __init__(self):
        super().__init__("matrix")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_point2d(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме point2d
    """
    Point2DValidator().validate(data)


def validate_vertex2d(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме vertex2d
    """
    Vertex2DValidator().validate(data)


def validate_vector2d(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме vector2d
    """
    Vector2DValidator().validate(data)


def validate_matrix(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме matrix
    """
    MatrixValidator().validate(data)
