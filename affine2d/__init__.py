"""
affine2d — 2D affine-geometry kernel.

Points, free vectors, Bezier-ready vertices and 2x3 affine matrices for
positioning and transforming shapes on a drawing surface.
"""

from affine2d.core.geometry import (
    DiagnosticReporter,
    DiagnosticsConfig,
    LoggingReporter,
    Matrix,
    Point2D,
    PointLike,
    Severity,
    TransformSurface,
    Vector2D,
    Vertex2D,
)

__version__ = "0.1.0"

__all__ = [
    "Point2D",
    "Vertex2D",
    "Vector2D",
    "Matrix",
    "PointLike",
    "TransformSurface",
    "DiagnosticReporter",
    "Severity",
    "DiagnosticsConfig",
    "LoggingReporter",
]
