"""
Тесты для Vector2D

Проверяет:
1. add / subtract / clone: чистые операции
2. dot / cross product и правую нормаль
3. normalize / dir / multiply: мутации на месте и их отсутствие
4. proj / proj_length, включая нулевой аргумент с WARNING
"""

import logging
import math

import pytest

from affine2d.core.geometry import Severity, Vector2D
from affine2d.core.geometry.diagnostics import DEFAULT_LOGGER_NAME


# =============================================================================
# ЧИСТЫЕ ОПЕРАЦИИ
# =============================================================================


class TestVector2DPureOperations:
    """Тесты clone, add, subtract, products, right_normal"""

    def test_components_are_required(self) -> None:
        with pytest.raises(TypeError):
            Vector2D()  # type: ignore[call-arg]

    def test_clone_is_independent(self) -> None:
        v = Vector2D(1, 2)
        copy = v.clone()
        copy.multiply(3)
        assert v == Vector2D(1, 2)

    def test_add_and_subtract(self) -> None:
        v1, v2 = Vector2D(1, 2), Vector2D(3, 5)
        assert v1.add(v2) == Vector2D(4, 7)
        assert v1.subtract(v2) == Vector2D(-2, -3)
        assert v1 == Vector2D(1, 2)
        assert v2 == Vector2D(3, 5)

    def test_operators(self) -> None:
        assert Vector2D(1, 2) + Vector2D(3, 5) == Vector2D(4, 7)
        assert Vector2D(1, 2) - Vector2D(3, 5) == Vector2D(-2, -3)

    def test_orthogonal_unit_vectors(self) -> None:
        """(1,0)·(0,1) = 0, (1,0)×(0,1) = 1"""
        x_axis, y_axis = Vector2D(1, 0), Vector2D(0, 1)
        assert x_axis.dot_product(y_axis) == 0
        assert x_axis.cross_product(y_axis) == 1
        assert y_axis.cross_product(x_axis) == -1

    def test_dot_product(self) -> None:
        assert Vector2D(2, 3).dot_product(Vector2D(4, -1)) == 5

    def test_right_normal(self) -> None:
        """Правая нормаль (1,0) → (0,1)"""
        assert Vector2D(1, 0).right_normal() == Vector2D(0, 1)
        assert Vector2D(2, 3).right_normal() == Vector2D(-3, 2)

    def test_length(self) -> None:
        assert Vector2D(3, 4).length() == 5.0

    def test_str_format(self) -> None:
        assert str(Vector2D(0.6, 0.8)) == "(x=0.6, y=0.8)"
        assert str(Vector2D(3, -4)) == "(x=3, y=-4)"


# =============================================================================
# МУТАЦИИ
# =============================================================================


class TestVector2DMutations:
    """Тесты multiply, normalize, dir"""

    def test_multiply_in_place(self) -> None:
        v = Vector2D(1, -2)
        assert v.multiply(2.5) is None
        assert v == Vector2D(2.5, -5)

    def test_normalize(self) -> None:
        """(3,4) → (0.6, 0.8), длина ≈ 1"""
        v = Vector2D(3, 4)
        v.normalize()
        assert v.x == pytest.approx(0.6)
        assert v.y == pytest.approx(0.8)
        assert v.length() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_noop(self) -> None:
        v = Vector2D(0, 0)
        v.normalize()
        assert v == Vector2D(0, 0)
        assert not math.isnan(v.x)

    def test_dir_does_not_mutate_receiver(self) -> None:
        v = Vector2D(0, 5)
        direction = v.dir()
        assert direction == Vector2D(0, 1)
        assert v == Vector2D(0, 5)

    def test_nan_propagates(self) -> None:
        """NaN не санитизируется"""
        v = Vector2D(float("nan"), 1)
        assert math.isnan(v.length())


# =============================================================================
# ПРОЕКЦИИ
# =============================================================================


class TestVector2DProjection:
    """Тесты proj / proj_length"""

    def test_proj_onto_axis(self) -> None:
        assert Vector2D(2, 3).proj(Vector2D(1, 0)) == Vector2D(2, 0)

    def test_proj_scales_along_argument(self) -> None:
        """Проекция на (0,2): (0,2) * (dot / |v2|^2)"""
        result = Vector2D(3, 4).proj(Vector2D(0, 2))
        assert result == Vector2D(0, 4)

    def test_proj_does_not_mutate_operands(self) -> None:
        v1, v2 = Vector2D(3, 4), Vector2D(0, 2)
        v1.proj(v2)
        assert v1 == Vector2D(3, 4)
        assert v2 == Vector2D(0, 2)

    def test_proj_length(self) -> None:
        assert Vector2D(3, 4).proj_length(Vector2D(0, 2)) == 2.0

    def test_proj_length_is_absolute(self) -> None:
        assert Vector2D(-3, -4).proj_length(Vector2D(0, 2)) == 2.0

    def test_proj_zero_vector_returns_clone_of_receiver(self, reporter) -> None:
        """Нулевой аргумент → клон получателя и WARNING"""
        v = Vector2D(3, 4)
        result = v.proj(Vector2D(0, 0), reporter=reporter)

        assert result == Vector2D(3, 4)
        assert result is not v
        assert reporter.severities == [Severity.WARNING]
        assert "0 length vector" in reporter.messages[0][0]

    def test_proj_length_zero_vector_returns_zero(self, reporter) -> None:
        """Нулевой аргумент → 0 и WARNING"""
        assert Vector2D(3, 4).proj_length(Vector2D(0, 0), reporter=reporter) == 0
        assert reporter.severities == [Severity.WARNING]

    def test_zero_vector_logs_through_default_reporter(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger=DEFAULT_LOGGER_NAME):
            Vector2D(1, 1).proj(Vector2D(0, 0))
            Vector2D(1, 1).proj_length(Vector2D(0, 0))

        messages = [record.getMessage() for record in caplog.records]
        assert messages == [
            "Vector2D.proj was called with a 0 length vector",
            "Vector2D.proj_length was called with a 0 length vector",
        ]
