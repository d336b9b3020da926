"""
Контракты коллабораторов геометрического ядра

Ядро не знает о конкретной поверхности рисования и конкретном логгере.
Здесь описаны только интерфейсы, через которые оно с ними общается:
- PointLike: явная "точечная" способность (Point2D, Vertex2D)
- TransformSurface: приёмник аффинного преобразования (6 параметров)
- DiagnosticReporter: приёмник диагностических сообщений
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .point import Point2D


# =============================================================================
# ENUMS
# =============================================================================


class Severity(str, Enum):
    """Уровень важности диагностического сообщения"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# =============================================================================
# POINT-LIKE
# =============================================================================


class PointLike(ABC):
    """
    Способность "быть точкой": координаты x, y.

    Реализуется Point2D и Vertex2D. Проверяется через isinstance только там,
    где ядро принимает разнородный ввод (конструирование Vertex2D,
    Point2D.add / subtract / interpolate).
    """

    x: float
    y: float

    @abstractmethod
    def as_point(self) -> "Point2D":
        """Независимая копия координаты в виде Point2D."""


# =============================================================================
# COLLABORATORS
# =============================================================================


@runtime_checkable
class TransformSurface(Protocol):
    """
    Поверхность рисования, принимающая аффинное преобразование.

    Сигнатуры совпадают с transform / setTransform у canvas-контекстов:
    (a, b, c, d, tx, ty) описывает отображение
    (x, y) -> (a*x + c*y + tx, b*x + d*y + ty).
    """

    def transform(
        self, a: float, b: float, c: float, d: float, tx: float, ty: float
    ) -> None:
        """Скомпоновать преобразование с текущим преобразованием поверхности."""
        ...

    def set_transform(
        self, a: float, b: float, c: float, d: float, tx: float, ty: float
    ) -> None:
        """Заменить текущее преобразование поверхности."""
        ...


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Приёмник диагностики. Никогда не должен прерывать вызывающую операцию."""

    def report(self, message: str, severity: Severity = Severity.WARNING) -> None:
        ...
