"""
Vertex2D — вершина кубического сегмента

Вершина хранит собственную координату (Point2D) и две контрольные точки
кубической кривой, заканчивающейся в (x, y). Координата вершины встроена
композицией, а не наследованием; аксессоры x / y совпадают с Point2D.

Пути конструирования:
- Vertex2D(point, cp1=None, cp2=None): полная форма
- from_coordinates(x, y) / from_point(p) / from_points(point, cp1, cp2)
- from_args(*args): разбор смешанных аргументов (point-like или пары чисел)

Правило умолчаний: cp1 по умолчанию = точка вершины, cp2 = cp1.
"""

from dataclasses import dataclass, field
from typing import Any, Final

from affine2d.core.domain.snapshots import Vertex2DSnapshot
from affine2d.core.math.numerical_safeguards import format_number, is_number

from .diagnostics import resolve_reporter
from .point import Point2D
from .protocols import DiagnosticReporter, PointLike, Severity

# Максимальное число позиционных аргументов from_args: три пары координат
MAX_VERTEX_ARGS: Final[int] = 6


@dataclass
class Vertex2D(PointLike):
    """
    Вершина с двумя контрольными точками.

    Все три координаты хранятся как независимые копии Point2D.
    """

    point: Point2D = field(default_factory=Point2D)
    cp1: Point2D | None = None
    cp2: Point2D | None = None

    def __post_init__(self) -> None:
        self.point = self.point.as_point()
        self.cp1 = self.point.clone() if self.cp1 is None else self.cp1.as_point()
        self.cp2 = self.cp1.clone() if self.cp2 is None else self.cp2.as_point()

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_coordinates(cls, x: float, y: float) -> "Vertex2D":
        """Вершина без кривизны: обе контрольные точки совпадают с (x, y)."""
        return cls(Point2D(x, y))

    @classmethod
    def from_point(cls, p: PointLike) -> "Vertex2D":
        return cls(p.as_point())

    @classmethod
    def from_points(
        cls,
        point: PointLike,
        cp1: PointLike | None = None,
        cp2: PointLike | None = None,
    ) -> "Vertex2D":
        return cls(
            point.as_point(),
            None if cp1 is None else cp1.as_point(),
            None if cp2 is None else cp2.as_point(),
        )

    @classmethod
    def from_args(
        cls, *args: Any, reporter: DiagnosticReporter | None = None
    ) -> "Vertex2D":
        """
        Разбор до шести позиционных аргументов в три слота координат.

        Каждый слот принимает либо одно point-like значение, либо пару чисел:
            вершина: args[0] или (args[0], args[1])
            cp1:     args[1] или (args[2], args[3])
            cp2:     args[2] или (args[4], args[5])

        Неразрешённый cp2 берёт значение cp1, неразрешённый cp1 берёт значение
        вершины. Если не разрешается даже вершина, используется (0, 0)
        и в reporter уходит WARNING.

        Examples:
            >>> Vertex2D.from_args(1, 2, 3, 4, 5, 6).to_array()
            [3, 4, 5, 6, 1, 2]
            >>> Vertex2D.from_args(Point2D(5, 5)).to_array()
            [5, 5, 5, 5, 5, 5]
        """
        slots = list(args[:MAX_VERTEX_ARGS])
        slots += [None] * (MAX_VERTEX_ARGS - len(slots))

        point = _resolve_slot(slots[0], slots[0], slots[1])
        if point is None:
            resolve_reporter(reporter).report(
                "Unable to resolve Vertex2D arguments, used (0, 0) instead",
                Severity.WARNING,
            )
            point = Point2D()

        cp1 = _resolve_slot(slots[1], slots[2], slots[3])
        cp2 = _resolve_slot(slots[2], slots[4], slots[5])
        return cls(point, cp1, cp2)

    # -------------------------------------------------------------------------
    # Coordinate accessors
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return self.point.x

    @x.setter
    def x(self, value: float) -> None:
        self.point.x = value

    @property
    def y(self) -> float:
        return self.point.y

    @y.setter
    def y(self, value: float) -> None:
        self.point.y = value

    @property
    def cp1x(self) -> float:
        return self.cp1.x

    @cp1x.setter
    def cp1x(self, value: float) -> None:
        self.cp1.x = value

    @property
    def cp1y(self) -> float:
        return self.cp1.y

    @cp1y.setter
    def cp1y(self, value: float) -> None:
        self.cp1.y = value

    @property
    def cp2x(self) -> float:
        return self.cp2.x

    @cp2x.setter
    def cp2x(self, value: float) -> None:
        self.cp2.x = value

    @property
    def cp2y(self) -> float:
        return self.cp2.y

    @cp2y.setter
    def cp2y(self, value: float) -> None:
        self.cp2.y = value

    # -------------------------------------------------------------------------
    # Point behaviour (delegated to the embedded coordinate)
    # -------------------------------------------------------------------------

    def as_point(self) -> Point2D:
        return self.point.clone()

    def length(self) -> float:
        return self.point.length()

    def equals(self, other: Any) -> bool:
        """Сравнивает только координату вершины, как Point2D.equals."""
        return self.point.equals(other)

    def offset(self, dx: float, dy: float) -> None:
        """Сдвигает координату вершины. Контрольные точки не двигаются."""
        self.point.offset(dx, dy)

    def add(
        self, p: Any, *, reporter: DiagnosticReporter | None = None
    ) -> Point2D | None:
        return self.point.add(p, reporter=reporter)

    def subtract(
        self, p: Any, *, reporter: DiagnosticReporter | None = None
    ) -> Point2D | None:
        return self.point.subtract(p, reporter=reporter)

    def clone(self) -> "Vertex2D":
        return Vertex2D(self.point, self.cp1, self.cp2)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_array(self) -> list[float]:
        """
        Аргументы для кубической кривой (bezierCurveTo):
        [cp1x, cp1y, cp2x, cp2y, x, y]
        """
        return [self.cp1x, self.cp1y, self.cp2x, self.cp2y, self.x, self.y]

    def __str__(self) -> str:
        return "[" + ", ".join(format_number(v) for v in self.to_array()) + "]"

    def to_snapshot(self) -> Vertex2DSnapshot:
        return Vertex2DSnapshot(
            x=self.x,
            y=self.y,
            cp1x=self.cp1x,
            cp1y=self.cp1y,
            cp2x=self.cp2x,
            cp2y=self.cp2y,
        )

    @classmethod
    def from_snapshot(cls, snapshot: Vertex2DSnapshot) -> "Vertex2D":
        return cls(
            Point2D(snapshot.x, snapshot.y),
            Point2D(snapshot.cp1x, snapshot.cp1y),
            Point2D(snapshot.cp2x, snapshot.cp2y),
        )

    def to_dict(self) -> dict[str, float]:
        return self.to_snapshot().model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex2D":
        """
        Raises:
            pydantic.ValidationError: Если data не соответствует Vertex2DSnapshot
        """
        return cls.from_snapshot(Vertex2DSnapshot.model_validate(data))


def _has_coordinates(value: Any) -> bool:
    # Duck-typed point: ненулевые числовые x и y
    px = getattr(value, "x", None)
    py = getattr(value, "y", None)
    return is_number(px) and is_number(py) and bool(px) and bool(py)


def _resolve_slot(value: Any, x: Any, y: Any) -> Point2D | None:
    if isinstance(value, PointLike) or _has_coordinates(value):
        return Point2D(value.x, value.y)
    if is_number(x) and is_number(y):
        return Point2D(x, y)
    return None
