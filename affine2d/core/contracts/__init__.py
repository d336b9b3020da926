"""
Contract Validation Module

Модуль для валидации JSON контрактов геометрических значений.
"""

from .validators import (
    ContractValidator,
    MatrixValidator,
    Point2DValidator,
    SchemaLoader,
    Vector2DValidator,
    Vertex2DValidator,
    validate_matrix,
    validate_point2d,
    validate_vector2d,
    validate_vertex2d,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Point2DValidator",
    "Vertex2DValidator",
    "Vector2DValidator",
    "MatrixValidator",
    # Functions
    "validate_point2d",
    "validate_vertex2d",
    "validate_vector2d",
    "validate_matrix",
]
