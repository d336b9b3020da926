"""
Tests for Pydantic Snapshot Models

Покрывает:
- Создание и валидацию снапшотов
- to_dict / from_dict для всех геометрических типов
- Immutability (frozen=True)
- Non-finite значения (результат обращения вырожденной матрицы)
"""

import math

import pytest
from pydantic import ValidationError

from affine2d.core.domain import (
    MatrixSnapshot,
    Point2DSnapshot,
    Vector2DSnapshot,
    Vertex2DSnapshot,
)
from affine2d.core.geometry import Matrix, Point2D, Vector2D, Vertex2D


class TestSnapshotModels:
    """Тесты самих pydantic моделей"""

    def test_snapshots_are_frozen(self) -> None:
        snapshot = Point2DSnapshot(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            snapshot.x = 5.0

    def test_required_fields(self) -> None:
        with pytest.raises(ValidationError):
            MatrixSnapshot(a=1.0, b=0.0, c=0.0, d=1.0, tx=0.0)

    def test_non_numeric_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Vector2DSnapshot(x="left", y=0.0)

    def test_non_finite_values_allowed(self) -> None:
        snapshot = MatrixSnapshot(
            a=math.inf, b=-math.inf, c=-math.inf, d=math.inf, tx=math.nan, ty=math.nan
        )
        assert math.isinf(snapshot.a)
        assert math.isnan(snapshot.tx)


class TestValueTypeSerialization:
    """Тесты to_dict / from_dict / to_snapshot"""

    def test_point(self) -> None:
        data = Point2D(1.5, -2).to_dict()
        assert data == {"x": 1.5, "y": -2.0}
        assert Point2D.from_dict(data) == Point2D(1.5, -2)

    def test_vector(self) -> None:
        snapshot = Vector2D(3, 4).to_snapshot()
        assert isinstance(snapshot, Vector2DSnapshot)
        assert Vector2D.from_snapshot(snapshot) == Vector2D(3, 4)

    def test_vertex(self) -> None:
        vertex = Vertex2D.from_args(1, 2, 3, 4, 5, 6)
        data = vertex.to_dict()
        assert data == {"x": 1, "y": 2, "cp1x": 3, "cp1y": 4, "cp2x": 5, "cp2y": 6}
        assert isinstance(vertex.to_snapshot(), Vertex2DSnapshot)
        assert Vertex2D.from_dict(data) == vertex

    def test_matrix_restores_zero_fields_exactly(self) -> None:
        """from_dict не подставляет единичные значения вместо нулей"""
        m = Matrix.from_dict({"a": 0.0, "b": 1.0, "c": -1.0, "d": 0.0, "tx": 0.0, "ty": 0.0})
        assert m.to_tuple() == (0.0, 1.0, -1.0, 0.0, 0.0, 0.0)

    def test_singular_inversion_survives_snapshot(self) -> None:
        m = Matrix(1, 2, 2, 4)
        m.invert()

        restored = Matrix.from_snapshot(m.to_snapshot())

        assert restored.a == math.inf
        assert restored.b == -math.inf
        assert math.isnan(restored.tx)
        assert math.isnan(restored.ty)

    def test_from_dict_rejects_malformed_payload(self) -> None:
        with pytest.raises(ValidationError):
            Point2D.from_dict({"x": 1.0})
        with pytest.raises(ValidationError):
            Vertex2D.from_dict({"x": 1.0, "y": 2.0})
