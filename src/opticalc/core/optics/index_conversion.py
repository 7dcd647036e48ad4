"""
Index Conversion — пересчёт силы между показателями преломления

Физика (тонкая линза в воздухе):
    F = (n - 1) · K,  где K зависит только от кривизн поверхностей.

Диоптриметр, откалиброванный на n_assumed, измеряет:
    F_meas = (n_assumed - 1) · K
Истинная сила материала n_actual:
    F_true = (n_actual - 1) · K
⇒   F_true = F_meas · (n_actual - 1) / (n_assumed - 1)

Пример: поликарбонатная линза (1.586) с истинной силой -5.00 D читается
на диоптриметре 1.523 как ≈ -4.463 D.

Толщина и вершинная рефракция не учитываются (в пределах допусков ANSI
для рутинной работы). Ось при пересчёте не меняется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. index <= 1.0 или NaN/Inf → InvalidIndex (никогда не NaN/Inf в результате)
2. Round-trip: convert_power(convert_power(p, a, b), b, a) ≈ p
"""

import logging

from opticalc.core.domain.spherocyl import SpheroCyl
from opticalc.core.math.numerical_safeguards import validate_refractive_index

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidIndex(ValueError):
    """
    Недопустимый показатель преломления: n <= 1.0 или не конечен.

    При n = 1 (воздух) множитель (n - 1) равен нулю: деление на ноль
    вместо осмысленной силы.
    """

    def __init__(self, name: str, index: float, reason: str):
        self.name = name
        self.index = index
        super().__init__(f"Invalid refractive index {name}={index}: {reason}")


def _checked_index(index: float, name: str) -> float:
    try:
        return validate_refractive_index(index, name)
    except ValueError as e:
        logger.debug("Rejected refractive index %s=%r", name, index)
        raise InvalidIndex(name, index, str(e)) from e


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def index_ratio(from_index: float, to_index: float) -> float:
    """
    Множитель пересчёта (to_index - 1) / (from_index - 1).

    Raises:
        InvalidIndex: если любой из индексов <= 1.0 или не конечен
    """
    k_from = _checked_index(from_index, "from_index") - 1.0
    k_to = _checked_index(to_index, "to_index") - 1.0
    return k_to / k_from


def convert_power(measured_power: float, from_index: float, to_index: float) -> float:
    """
    Пересчёт силы, измеренной при from_index, в силу при to_index.

    true = measured · (to_index - 1) / (from_index - 1)

    Args:
        measured_power: Сила (D), измеренная в предположении from_index
        from_index: Показатель преломления, на который откалиброван прибор
        to_index: Фактический показатель преломления материала

    Returns:
        Сила (D) для to_index

    Raises:
        InvalidIndex: если индекс <= 1.0 или не конечен

    Examples:
        >>> round(convert_power(-4.463, 1.523, 1.586), 2)
        -5.0
    """
    return measured_power * index_ratio(from_index, to_index)


def convert_rx(rx: SpheroCyl, from_index: float, to_index: float) -> SpheroCyl:
    """
    Пересчёт полной рецептуры: sphere и cylinder масштабируются одним
    множителем, ось без изменений.

    Raises:
        InvalidIndex: если индекс <= 1.0 или не конечен
    """
    ratio = index_ratio(from_index, to_index)
    return SpheroCyl(
        sphere=rx.sphere * ratio,
        cylinder=rx.cylinder * ratio,
        axis_deg=rx.axis_deg,
    )


def simulate_lensmeter_reading(
    true_rx: SpheroCyl,
    lensmeter_index: float,
    true_index: float,
) -> SpheroCyl:
    """
    Показание диоптриметра, откалиброванного на lensmeter_index, для линзы
    с истинной рецептурой true_rx из материала true_index.

    Обратное направление к convert_rx: convert_rx(true_rx, true_index, lensmeter_index).
    Порядок аргументов существенен: формула несимметрична.

    Examples:
        Истинная -5.00 D @ 1.586, прибор 1.523 → ≈ -4.463 D

    Raises:
        InvalidIndex: если индекс <= 1.0 или не конечен
    """
    return convert_rx(true_rx, from_index=true_index, to_index=lensmeter_index)
