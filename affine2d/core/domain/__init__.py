"""
Domain models and value objects.

Contains serializable snapshots of the geometry value types.
"""

from affine2d.core.domain.snapshots import (
    MatrixSnapshot,
    Point2DSnapshot,
    Vector2DSnapshot,
    Vertex2DSnapshot,
)

__all__ = [
    "Point2DSnapshot",
    "Vertex2DSnapshot",
    "Vector2DSnapshot",
    "MatrixSnapshot",
]
