"""
Point2D — голая 2D-координата

Базовый тип геометрии. Мутируется на месте только через offset;
add / subtract / clone / interpolate / polar всегда создают новый экземпляр
и не трогают операнды.
"""

import math
from dataclasses import dataclass
from typing import Any, Final

from affine2d.core.domain.snapshots import Point2DSnapshot
from affine2d.core.math.numerical_safeguards import format_number

from .diagnostics import resolve_reporter
from .protocols import DiagnosticReporter, PointLike, Severity

# Множитель interpolate по умолчанию (даёт середину отрезка)
DEFAULT_INTERPOLATION_FACTOR: Final[float] = 0.5


@dataclass
class Point2D(PointLike):
    """
    Точка с координатами x, y.

    Опущенная или "ложная" координата (None, 0) становится 0.0.
    Равенство (== и equals) точное, без толерантности.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        # None и 0 дают 0; NaN сохраняется и распространяется арифметически
        self.x = self.x or 0.0
        self.y = self.y or 0.0

    def length(self) -> float:
        """Евклидово расстояние от (0, 0) до точки."""
        return math.sqrt((self.x * self.x) + (self.y * self.y))

    def clone(self) -> "Point2D":
        return Point2D(self.x, self.y)

    def as_point(self) -> "Point2D":
        return self.clone()

    def add(
        self, p: Any, *, reporter: DiagnosticReporter | None = None
    ) -> "Point2D | None":
        """
        Новая точка с суммой координат.

        Args:
            p: Point-like значение (Point2D или Vertex2D)
            reporter: приёмник диагностики (опционально)

        Returns:
            Новый Point2D или None, если p не point-like (с WARNING)
        """
        if not isinstance(p, PointLike):
            resolve_reporter(reporter).report(
                f"Point2D.add expects a point-like argument, got {type(p).__name__}",
                Severity.WARNING,
            )
            return None
        return Point2D(self.x + p.x, self.y + p.y)

    def subtract(
        self, p: Any, *, reporter: DiagnosticReporter | None = None
    ) -> "Point2D | None":
        """
        Новая точка с разностью координат (self - p).

        Returns:
            Новый Point2D или None, если p не point-like (с WARNING)
        """
        if not isinstance(p, PointLike):
            resolve_reporter(reporter).report(
                f"Point2D.subtract expects a point-like argument, got {type(p).__name__}",
                Severity.WARNING,
            )
            return None
        return Point2D(self.x - p.x, self.y - p.y)

    def equals(self, other: Any) -> bool:
        """Точное покомпонентное равенство. Тип other не проверяется."""
        return self.x == other.x and self.y == other.y

    def offset(self, dx: float, dy: float) -> None:
        """Сдвинуть точку на месте."""
        self.x += dx
        self.y += dy

    def __str__(self) -> str:
        return f"(x={format_number(self.x)}, y={format_number(self.y)})"

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> Point2DSnapshot:
        return Point2DSnapshot(x=self.x, y=self.y)

    @classmethod
    def from_snapshot(cls, snapshot: Point2DSnapshot) -> "Point2D":
        return cls(snapshot.x, snapshot.y)

    def to_dict(self) -> dict[str, float]:
        return self.to_snapshot().model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point2D":
        """
        Raises:
            pydantic.ValidationError: Если data не соответствует Point2DSnapshot
        """
        return cls.from_snapshot(Point2DSnapshot.model_validate(data))

    # -------------------------------------------------------------------------
    # Статические конструкторы
    # -------------------------------------------------------------------------

    @staticmethod
    def interpolate(
        p1: Any,
        p2: Any,
        f: float = DEFAULT_INTERPOLATION_FACTOR,
        *,
        reporter: DiagnosticReporter | None = None,
    ) -> "Point2D":
        """
        Точка "между" p1 и p2.

        ВАЖНО: формула берёт сумму координат, умноженную на f:
            x = (p1.x + p2.x) * f
            y = (p1.y + p2.y) * f
        Это середина отрезка только при f = 0.5; при других f это НЕ
        линейная интерполяция.

        Args:
            p1: Point-like значение
            p2: Point-like значение
            f: Множитель (default: 0.5)
            reporter: приёмник диагностики (опционально)

        Returns:
            Новый Point2D; (0, 0) с WARNING, если p1 или p2 не point-like
        """
        if not (isinstance(p1, PointLike) and isinstance(p2, PointLike)):
            resolve_reporter(reporter).report(
                "Point2D.interpolate expects its first two arguments to be point-like",
                Severity.WARNING,
            )
            return Point2D()

        if f is None:
            f = DEFAULT_INTERPOLATION_FACTOR
        return Point2D((p1.x + p2.x) * f, (p1.y + p2.y) * f)

    @staticmethod
    def polar(length: float = 0.0, angle: float = 0.0) -> "Point2D":
        """
        Перевод полярных координат в декартовы.

        Args:
            length: Расстояние от начала координат
            angle: Угол в радианах

        Returns:
            Point2D(length * cos(angle), length * sin(angle))
        """
        length = length or 0.0
        angle = angle or 0.0
        return Point2D(length * math.cos(angle), length * math.sin(angle))
