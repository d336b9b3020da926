"""
Geometry value types: Point2D, Vertex2D, Vector2D, Matrix.

Плюс контракты коллабораторов (поверхность рисования, приёмник диагностики)
и адаптер диагностики поверх logging.
"""

from affine2d.core.geometry.diagnostics import (
    DEFAULT_LOGGER_NAME,
    DiagnosticsConfig,
    LoggingReporter,
    resolve_reporter,
)
from affine2d.core.geometry.matrix import Matrix
from affine2d.core.geometry.point import DEFAULT_INTERPOLATION_FACTOR, Point2D
from affine2d.core.geometry.protocols import (
    DiagnosticReporter,
    PointLike,
    Severity,
    TransformSurface,
)
from affine2d.core.geometry.vector import Vector2D
from affine2d.core.geometry.vertex import MAX_VERTEX_ARGS, Vertex2D

__all__ = [
    # Value types
    "Point2D",
    "Vertex2D",
    "Vector2D",
    "Matrix",
    # Constants
    "DEFAULT_INTERPOLATION_FACTOR",
    "DEFAULT_LOGGER_NAME",
    "MAX_VERTEX_ARGS",
    # Collaborator contracts
    "PointLike",
    "TransformSurface",
    "DiagnosticReporter",
    "Severity",
    # Diagnostics
    "DiagnosticsConfig",
    "LoggingReporter",
    "resolve_reporter",
]
