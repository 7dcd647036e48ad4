"""
Core math modules для opticalc

Численные примитивы: epsilon-сравнения, нормализация осей, округление,
проверка показателя преломления.
"""

from opticalc.core.math.numerical_safeguards import (
    # Epsilon constants
    AIR_INDEX,
    AXIS_PERIOD_DEG,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_POWER,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    is_close,
    is_zero,
    # Axes and rounding
    normalize_axis,
    round_to_decimals,
    # Validation
    validate_refractive_index,
)

__all__ = [
    # Epsilon constants
    "AIR_INDEX",
    "AXIS_PERIOD_DEG",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_POWER",
    # NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Epsilon comparisons
    "is_close",
    "is_zero",
    # Axes and rounding
    "normalize_axis",
    "round_to_decimals",
    # Validation
    "validate_refractive_index",
]
