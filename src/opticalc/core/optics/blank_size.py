"""
Blank Size — минимальный диаметр заготовки для однофокальной линзы

    Minimum Blank Size = ED + (A + DBL - PD)

    ED  — effective diameter оправы (мм)
    A   — eyesize, горизонтальный размер проёма (мм)
    DBL — bridge, расстояние между проёмами (мм)
    PD  — межзрачковое расстояние (мм)

(A + DBL - PD) = 2 × децентрация одной линзы.

Рекомендуемый размер добавляет 2 мм (рабочая кромка 1 мм по краю).

Входы не валидируются: отрицательные значения проходят через арифметику.
"""

from typing import Final

# Припуск на рабочую кромку (мм)
WORKING_EDGE_ALLOWANCE_MM: Final[float] = 2.0


def per_lens_decentration(eyesize_mm: float, bridge_mm: float, ipd_mm: float) -> float:
    """Децентрация одной линзы: (A + DBL - PD) / 2 (мм)"""
    return (eyesize_mm + bridge_mm - ipd_mm) / 2.0


def minimum_blank_size(
    effective_diameter_mm: float,
    eyesize_mm: float,
    bridge_mm: float,
    ipd_mm: float,
) -> float:
    """
    Минимальный диаметр заготовки (мм).

    Examples:
        >>> minimum_blank_size(55.0, 50.0, 15.0, 53.0)
        67.0
    """
    return effective_diameter_mm + (eyesize_mm + bridge_mm - ipd_mm)


def recommended_blank_size(
    effective_diameter_mm: float,
    eyesize_mm: float,
    bridge_mm: float,
    ipd_mm: float,
) -> float:
    """
    Рекомендуемый диаметр заготовки: минимальный + 2 мм.

    Examples:
        >>> recommended_blank_size(55.0, 50.0, 15.0, 53.0)
        69.0
    """
    return (
        minimum_blank_size(effective_diameter_mm, eyesize_mm, bridge_mm, ipd_mm)
        + WORKING_EDGE_ALLOWANCE_MM
    )
