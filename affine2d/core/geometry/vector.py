"""
Vector2D — свободный 2D-вектор

Вектор описывает величину и направление, не позицию.
Бинарные операции принимают второй вектор явным аргументом и возвращают
новый экземпляр; multiply и normalize мутируют получателя на месте.

ИНВАРИАНТЫ:
1. normalize на нулевом векторе: no-op (без деления на ноль)
2. proj / proj_length с нулевым аргументом не падают: WARNING + fallback
   (клон получателя / 0)
"""

import math
from dataclasses import dataclass
from typing import Any

from affine2d.core.domain.snapshots import Vector2DSnapshot
from affine2d.core.math.numerical_safeguards import format_number

from .diagnostics import resolve_reporter
from .protocols import DiagnosticReporter, Severity


@dataclass
class Vector2D:
    """Вектор (x, y). Обе компоненты обязательны."""

    x: float
    y: float

    def clone(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    def add(self, v2: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + v2.x, self.y + v2.y)

    def subtract(self, v2: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - v2.x, self.y - v2.y)

    __add__ = add
    __sub__ = subtract

    def right_normal(self) -> "Vector2D":
        """Правая нормаль: (-y, x)."""
        return Vector2D(self.y * -1, self.x)

    def dir(self) -> "Vector2D":
        """Единичный вектор того же направления. Получатель не меняется."""
        v = self.clone()
        v.normalize()
        return v

    def dot_product(self, v2: "Vector2D") -> float:
        return (self.x * v2.x) + (self.y * v2.y)

    def cross_product(self, v2: "Vector2D") -> float:
        """Скалярное 2D векторное произведение: x * v2.y - y * v2.x."""
        return (self.x * v2.y) - (self.y * v2.x)

    def proj(
        self, v2: "Vector2D", *, reporter: DiagnosticReporter | None = None
    ) -> "Vector2D":
        """
        Проекция self на v2.

        Формула:
            v2 * (dot(self, v2) / dot(v2, v2))

        Args:
            v2: Вектор, на который проецируем
            reporter: приёмник диагностики (опционально)

        Returns:
            Новый вектор вдоль v2; если v2 нулевой, то клон self (с WARNING)
        """
        den = v2.dot_product(v2)
        if den == 0:
            resolve_reporter(reporter).report(
                "Vector2D.proj was called with a 0 length vector", Severity.WARNING
            )
            return self.clone()

        v = v2.clone()
        v.multiply(self.dot_product(v2) / den)
        return v

    def proj_length(
        self, v2: "Vector2D", *, reporter: DiagnosticReporter | None = None
    ) -> float:
        """
        Длина проекции: |dot(self, v2) / dot(v2, v2)|.

        Returns:
            Неотрицательное число; 0 если v2 нулевой (с WARNING)
        """
        den = v2.dot_product(v2)
        if den == 0:
            resolve_reporter(reporter).report(
                "Vector2D.proj_length was called with a 0 length vector",
                Severity.WARNING,
            )
            return 0
        return abs(self.dot_product(v2) / den)

    def length(self) -> float:
        return math.sqrt((self.x * self.x) + (self.y * self.y))

    def multiply(self, number: float) -> None:
        """Масштабировать вектор на месте."""
        self.x *= number
        self.y *= number

    def normalize(self) -> None:
        """Привести к единичной длине на месте. Нулевой вектор не меняется."""
        length = self.length()
        if length != 0:
            self.x /= length
            self.y /= length

    def __str__(self) -> str:
        return f"(x={format_number(self.x)}, y={format_number(self.y)})"

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> Vector2DSnapshot:
        return Vector2DSnapshot(x=self.x, y=self.y)

    @classmethod
    def from_snapshot(cls, snapshot: Vector2DSnapshot) -> "Vector2D":
        return cls(snapshot.x, snapshot.y)

    def to_dict(self) -> dict[str, float]:
        return self.to_snapshot().model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector2D":
        """
        Raises:
            pydantic.ValidationError: Если data не соответствует Vector2DSnapshot
        """
        return cls.from_snapshot(Vector2DSnapshot.model_validate(data))
