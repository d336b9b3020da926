"""
Core math modules для affine2d

Численные примитивы, общие для всех геометрических типов.
"""

from affine2d.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Predicates
    is_number,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    # Utilities
    format_number,
    or_default,
)

__all__ = [
    # Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Predicates
    "is_number",
    "is_valid_float",
    # Epsilon comparisons
    "is_close",
    "is_zero",
    # Utilities
    "format_number",
    "or_default",
]
