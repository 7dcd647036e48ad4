"""
Numerical Safeguards — примитивы для оптических вычислений

Модуль обеспечивает численную устойчивость оптических формул:
- NaN/Inf проверки входов (ни один результат не должен молча стать NaN/Inf)
- Epsilon-сравнения float для диоптрий и углов
- Нормализация оси цилиндра в диапазон [0, 180)
- Округление для клинического представления (prism report)
- Проверка показателя преломления (refractive index)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ось цилиндра всегда в [0, 180): ось и ось+180° оптически идентичны
2. Показатель преломления строго > 1.0 и конечен
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для оптической силы (диоптрии)
# Ниже этого порога цилиндр считается нулевым (сферическая матрица)
EPS_POWER: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Период оси цилиндра (градусы)
AXIS_PERIOD_DEG: Final[float] = 180.0

# Показатель преломления воздуха: нижняя (исключённая) граница для материалов
AIR_INDEX: Final[float] = 1.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация: значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ValueError: если value равно NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be finite, got {value}")
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

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(-2.25, -2.0)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """Проверка, близко ли значение к нулю (abs(value) <= tol)."""
    return abs(value) <= tol


# =============================================================================
# ОСИ И МЕРИДИАНЫ
# =============================================================================


def normalize_axis(axis_deg: float) -> float:
    """
    Нормализация оси цилиндра в диапазон [0, 180).

    Ось цилиндра определена по модулю 180°: оси 0° и 180° (а также -5° и 175°)
    описывают одну и ту же линзу.

    Args:
        axis_deg: Ось в градусах (любое конечное значение)

    Returns:
        Ось в [0, 180)

    Examples:
        >>> normalize_axis(180.0)
        0.0
        >>> normalize_axis(-5.0)
        175.0
        >>> normalize_axis(270.0)
        90.0
    """
    axis = axis_deg % AXIS_PERIOD_DEG
    # -1e-20 % 180.0 == 180.0 после округления
    if axis >= AXIS_PERIOD_DEG:
        axis = 0.0
    # -0.0 → 0.0
    return axis + 0.0


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Округление до заданного числа знаков после запятой (round half away from zero).

    Используется для клинического представления результатов (например, призма
    с точностью 0.001Δ). Банковское округление встроенного round() здесь
    не подходит: 0.0625 → 0.063, как на бланке.

    Args:
        value: Значение для округления
        decimals: Число знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: если decimals < 0

    Examples:
        >>> round_to_decimals(0.3259765, 3)
        0.326
        >>> round_to_decimals(-1.2345, 2)
        -1.23
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    scale = 10**decimals
    ratio = value * scale

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return steps / scale


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_refractive_index(index: float, name: str = "index") -> float:
    """
    Проверка показателя преломления материала линзы.

    Индекс должен быть конечным и строго больше 1.0 (воздух): при n = 1
    множитель (n - 1) обращается в ноль, и конверсия силы теряет смысл.

    Args:
        index: Показатель преломления
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        index без изменений

    Raises:
        ValueError: если index не конечен или index <= 1.0
    """
    if not is_valid_float(index):
        raise ValueError(f"{name} must be finite, got {index}")
    if index <= AIR_INDEX:
        raise ValueError(f"{name} must be > {AIR_INDEX}, got {index}")
    return index
