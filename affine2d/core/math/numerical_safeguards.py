"""
Numerical Safeguards — float-примитивы геометрического ядра

Модуль содержит общие числовые помощники, на которые опираются
Point2D / Vertex2D / Vector2D / Matrix:
- Epsilon-параметры для сравнений float
- Проверки валидности (NaN/Inf) и "числовости" значений
- Epsilon-сравнения float
- Диагностическое текстовое представление чисел

ИНВАРИАНТЫ:
1. Функции модуля чистые: не мутируют аргументы и не имеют состояния
2. Геометрические операции НЕ санитизируют NaN/Inf, они распространяются
   арифметически. Исключение: or_default в конструкторе Matrix
"""

import math
from numbers import Real
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений (например, проверка вырожденности детерминанта)
EPS_CALC: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ ЗНАЧЕНИЙ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_number(value: Any) -> bool:
    """
    Проверка, является ли значение числом, пригодным как координата.

    bool исключается явно (в Python это подкласс int), NaN числом
    не считается. Inf считается числом.

    Args:
        value: Произвольное значение

    Returns:
        True для int/float (и прочих numbers.Real), кроме bool и NaN

    Examples:
        >>> is_number(3)
        True
        >>> is_number(2.5)
        True
        >>> is_number(True)
        False
        >>> is_number(float('nan'))
        False
        >>> is_number("3")
        False
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def or_default(value: Any, default: float) -> Any:
    """
    Значение или default, если значение "ложное".

    Ложными считаются None, 0, False и NaN.

    Examples:
        >>> or_default(None, 1.0)
        1.0
        >>> or_default(float('nan'), 0.0)
        0.0
        >>> or_default(2.5, 1.0)
        2.5
    """
    if not value or (isinstance(value, Real) and math.isnan(value)):
        return default
    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность отрицательна

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(
            f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}"
        )
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: float) -> str:
    """
    Диагностическое текстовое представление числа.

    Целые значения печатаются без дробной части, остальные кратчайшим
    repr. Результат предназначен для логов и __str__, не для парсинга.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.25)
        '0.25'
        >>> format_number(float('inf'))
        'inf'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
