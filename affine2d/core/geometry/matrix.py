"""
Matrix — аффинное преобразование 2x3

Поля a, b, c, d, tx, ty задают отображение:
    (x, y) -> (a*x + c*y + tx, b*x + d*y + ty)

Матрица мутируется на месте (multiply, identity, invert, rotate, scale,
translate); clone даёт независимую копию. Никакая операция не бросает
исключений: вырожденные входы дают non-finite поля.

ОСОБЕННОСТИ (сохраняются намеренно):
1. rotate меняет только линейную часть (a, b, c, d); tx, ty не трогает
2. scale умножает и смещение: tx *= sx, ty *= sy
3. invert не проверяет детерминант: при det = 0 все поля NaN/±Inf
"""

import math
from typing import Any

from affine2d.core.domain.snapshots import MatrixSnapshot
from affine2d.core.math.numerical_safeguards import (
    EPS_CALC,
    format_number,
    is_close,
    is_valid_float,
    is_zero,
    or_default,
)

from .protocols import TransformSurface

_FIELDS = ("a", "b", "c", "d", "tx", "ty")


class Matrix:
    """
    Аффинная матрица 2x3.

    Конструктор подставляет единичное значение для любого опущенного или
    "ложного" аргумента (None, 0, NaN): a и d становятся 1, остальные 0.
    """

    def __init__(
        self,
        a: float | None = 1.0,
        b: float | None = 0.0,
        c: float | None = 0.0,
        d: float | None = 1.0,
        tx: float | None = 0.0,
        ty: float | None = 0.0,
    ):
        self.a = or_default(a, 1.0)
        self.b = or_default(b, 0.0)
        self.c = or_default(c, 0.0)
        self.d = or_default(d, 1.0)
        self.tx = or_default(tx, 0.0)
        self.ty = or_default(ty, 0.0)

    # -------------------------------------------------------------------------
    # Surface
    # -------------------------------------------------------------------------

    def apply(self, surface: TransformSurface) -> None:
        """Скомпоновать матрицу с текущим преобразованием поверхности."""
        surface.transform(self.a, self.b, self.c, self.d, self.tx, self.ty)

    def override(self, surface: TransformSurface) -> None:
        """Заменить текущее преобразование поверхности этой матрицей."""
        surface.set_transform(self.a, self.b, self.c, self.d, self.tx, self.ty)

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def clone(self) -> "Matrix":
        """Независимая копия с точно такими же полями (без подстановки умолчаний)."""
        m = Matrix()
        m.a, m.b, m.c, m.d, m.tx, m.ty = self.to_tuple()
        return m

    def multiply(self, m2: "Matrix") -> None:
        """
        Скомпоновать на месте: сначала текущее преобразование, затем m2.

        Формула (порядок важен):
            a'  = a*m2.a + b*m2.c
            b'  = a*m2.b + b*m2.d
            c'  = c*m2.a + d*m2.c
            d'  = c*m2.b + d*m2.d
            tx' = tx*m2.a + ty*m2.c + m2.tx
            ty' = tx*m2.b + ty*m2.d + m2.ty
        """
        a, b, c, d, tx, ty = self.to_tuple()

        self.a = a * m2.a + b * m2.c
        self.b = a * m2.b + b * m2.d
        self.c = c * m2.a + d * m2.c
        self.d = c * m2.b + d * m2.d
        self.tx = tx * m2.a + ty * m2.c + m2.tx
        self.ty = tx * m2.b + ty * m2.d + m2.ty

    def identity(self) -> None:
        """Сбросить матрицу в единичную."""
        self.a = 1.0
        self.b = 0.0
        self.c = 0.0
        self.d = 1.0
        self.tx = 0.0
        self.ty = 0.0

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def is_invertible(self) -> bool:
        """
        Подсказка для вызывающего кода перед invert.

        Returns:
            True если детерминант конечен и не близок к нулю (EPS_CALC)
        """
        det = self.determinant()
        return is_valid_float(det) and not is_zero(det, EPS_CALC)

    def invert(self) -> None:
        """
        Обратить матрицу на месте (замкнутая форма 2x2 + смещение).

        Детерминант не проверяется: при det = 0 поля становятся NaN/±Inf.
        """
        a, b, c, d, tx, ty = self.to_tuple()
        det = a * d - b * c

        self.a = _div(d, det)
        self.b = _div(-b, det)
        self.c = _div(-c, det)
        self.d = _div(a, det)
        self.tx = _div(c * ty - d * tx, det)
        self.ty = _div(-(a * ty - b * tx), det)

    def rotate(self, angle: float) -> None:
        """
        Повернуть линейную часть на angle радиан.

        tx, ty остаются без изменений.
        """
        sin = math.sin(angle)
        cos = math.cos(angle)
        a, b, c, d = self.a, self.b, self.c, self.d

        self.a = a * cos - b * sin
        self.b = a * sin + b * cos
        self.c = c * cos - d * sin
        self.d = c * sin + d * cos

    def scale(self, sx: float, sy: float) -> None:
        """Масштабировать: a и tx на sx, d и ty на sy. b и c не меняются."""
        self.a *= sx
        self.d *= sy
        self.tx *= sx
        self.ty *= sy

    def translate(self, tx: float, ty: float) -> None:
        self.tx += tx
        self.ty += ty

    # -------------------------------------------------------------------------
    # Comparison / output
    # -------------------------------------------------------------------------

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.tx, self.ty)

    def almost_equals(self, other: "Matrix", abs_tol: float = 1e-9) -> bool:
        """
        Покомпонентное сравнение с абсолютной толерантностью.

        Raises:
            ValueError: Если abs_tol отрицательна
        """
        return all(
            is_close(mine, theirs, rel_tol=0.0, abs_tol=abs_tol)
            for mine, theirs in zip(self.to_tuple(), other.to_tuple())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(_FIELDS, self.to_tuple()))
        return f"Matrix({fields})"

    def __str__(self) -> str:
        return (
            f"[a: {format_number(self.a)}, b: {format_number(self.b)}, "
            f"c: {format_number(self.c)}, d: {format_number(self.d)}, "
            f"tx: {format_number(self.tx)}, ty: {format_number(self.ty)}]"
        )

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> MatrixSnapshot:
        return MatrixSnapshot(**dict(zip(_FIELDS, self.to_tuple())))

    @classmethod
    def from_snapshot(cls, snapshot: MatrixSnapshot) -> "Matrix":
        """Восстанавливает поля точно, без подстановки единичных значений."""
        m = cls()
        for name in _FIELDS:
            setattr(m, name, getattr(snapshot, name))
        return m

    def to_dict(self) -> dict[str, float]:
        return self.to_snapshot().model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Matrix":
        """
        Raises:
            pydantic.ValidationError: Если data не соответствует MatrixSnapshot
        """
        return cls.from_snapshot(MatrixSnapshot.model_validate(data))


def _div(numerator: float, denominator: float) -> float:
    # IEEE-деление: x/0 -> ±inf, 0/0 -> nan (Python бросил бы ZeroDivisionError)
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
