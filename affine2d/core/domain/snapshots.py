"""
Snapshots — сериализуемые снимки геометрических значений

Immutable Pydantic модели, представляющие состояние Point2D, Vertex2D,
Vector2D и Matrix в момент снятия снапшота.
Полная совместимость с JSON Schema (affine2d/core/contracts/schema/).

Non-finite значения (NaN/Inf) допустимы: результат обращения вырожденной
матрицы должен проходить через снапшот без потерь.
"""

from pydantic import BaseModel, Field


# =============================================================================
# POINTS
# =============================================================================


class Point2DSnapshot(BaseModel):
    """Снимок Point2D."""

    x: float = Field(..., description="Координата X")
    y: float = Field(..., description="Координата Y")

    model_config = {"frozen": True}


class Vertex2DSnapshot(BaseModel):
    """
    Снимок Vertex2D: координата вершины и две контрольные точки
    кубического сегмента, заканчивающегося в (x, y).
    """

    x: float = Field(..., description="Координата X вершины")
    y: float = Field(..., description="Координата Y вершины")
    cp1x: float = Field(..., description="X первой контрольной точки")
    cp1y: float = Field(..., description="Y первой контрольной точки")
    cp2x: float = Field(..., description="X второй контрольной точки")
    cp2y: float = Field(..., description="Y второй контрольной точки")

    model_config = {"frozen": True}


# =============================================================================
# VECTORS
# =============================================================================


class Vector2DSnapshot(BaseModel):
    """Снимок Vector2D."""

    x: float = Field(..., description="Компонента X")
    y: float = Field(..., description="Компонента Y")

    model_config = {"frozen": True}


# =============================================================================
# MATRIX
# =============================================================================


class MatrixSnapshot(BaseModel):
    """
    Снимок аффинной матрицы 2x3.

    Отображение: (x, y) -> (a*x + c*y + tx, b*x + d*y + ty)
    """

    a: float = Field(..., description="Линейная часть, строка X, столбец X")
    b: float = Field(..., description="Линейная часть, строка Y, столбец X")
    c: float = Field(..., description="Линейная часть, строка X, столбец Y")
    d: float = Field(..., description="Линейная часть, строка Y, столбец Y")
    tx: float = Field(..., description="Смещение по X")
    ty: float = Field(..., description="Смещение по Y")

    model_config = {"frozen": True}
