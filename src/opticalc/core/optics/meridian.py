"""
Oblique Meridian — сила линзы в косом меридиане

    F(φ) = S + C · sin²(φ - axis)

Эквивалентно члену Px матрицы силы в базисе, повёрнутом на (φ - axis).
"""

from opticalc.core.domain.spherocyl import SpheroCyl


def oblique_meridian(lens: SpheroCyl, meridian_deg: float) -> float:
    """
    Сила линзы в меридиане meridian_deg.

    φ = 0°/180° — горизонталь, φ = 90° — вертикаль. Ошибок нет.
    """
    return lens.power_at(meridian_deg)


def principal_meridians(lens: SpheroCyl) -> tuple[float, float]:
    """
    Силы в главных меридианах: (в меридиане оси, в меридиане оси + 90°).

    Для -1.00 / -2.00 x 180 → (-1.00, -3.00).
    """
    return lens.power_at(lens.axis_deg), lens.power_at(lens.axis_deg + 90.0)
