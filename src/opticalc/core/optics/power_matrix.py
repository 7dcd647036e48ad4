"""
PowerMatrix — дипотрийная матрица силы линзы

Симметричная матрица 2×2 в горизонтально-вертикальном базисе:

    F = [[Px, Pt],
         [Pt, Py]]

    Px = S + C · sin²θ      сила в меридиане 180° (горизонталь)
    Py = S + C · cos²θ      сила в меридиане 90° (вертикаль)
    Pt = -C · sinθ · cosθ   торический (перекрёстный) член

    θ — ось цилиндра (радианы).

Матрицы сил аддитивны в фиксированном базисе, поэтому сложение матриц
моделирует наложение тонких линз (crossed cylinders), а произведение
матрицы на вектор децентрации — правило Прентиса.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Симметрия по построению (хранится один Pt)
2. trace = Px + Py = 2S + C
3. Декомпозиция в minus-cylinder форме (глобальная конвенция)
4. Сферическая матрица (Δ ≈ 0) → cylinder = 0, axis = 0
"""

import math
from dataclasses import dataclass

from opticalc.core.domain.spherocyl import CylinderForm, SpheroCyl
from opticalc.core.math.numerical_safeguards import EPS_POWER, is_zero, normalize_axis
from opticalc.core.optics.transposition import transpose


@dataclass(frozen=True)
class PowerMatrix:
    """Матрица силы [[px, pt], [pt, py]] (диоптрии)."""

    px: float
    pt: float
    py: float

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_spherocyl(cls, lens: SpheroCyl) -> "PowerMatrix":
        """
        Построение матрицы из сферо-цилиндрической рецептуры.

        Ошибок нет: значения не проверяются клинически.
        """
        axis_rad = math.radians(lens.axis_deg)
        sin_axis = math.sin(axis_rad)
        cos_axis = math.cos(axis_rad)

        return cls(
            px=lens.sphere + lens.cylinder * sin_axis * sin_axis,
            pt=-lens.cylinder * sin_axis * cos_axis,
            py=lens.sphere + lens.cylinder * cos_axis * cos_axis,
        )

    @classmethod
    def zero(cls) -> "PowerMatrix":
        """Матрица плано-линзы"""
        return cls(px=0.0, pt=0.0, py=0.0)

    # -------------------------------------------------------------------------
    # Инварианты
    # -------------------------------------------------------------------------

    @property
    def trace(self) -> float:
        """Px + Py (= 2S + C)"""
        return self.px + self.py

    @property
    def determinant(self) -> float:
        """Px · Py - Pt²"""
        return self.px * self.py - self.pt * self.pt

    @property
    def cylinder_magnitude(self) -> float:
        """
        Δ = |P1 - P2| = sqrt(trace² - 4·det).

        Отрицательный дискриминант (только из-за округления) обрезается до 0.
        """
        return math.sqrt(max(self.trace * self.trace - 4.0 * self.determinant, 0.0))

    def principal_powers(self) -> tuple[float, float]:
        """
        Главные силы (собственные значения), (более плюсовая, более минусовая).

        P1,2 = (Px + Py)/2 ± sqrt(((Px - Py)/2)² + Pt²)
        """
        mean = self.trace / 2.0
        half_delta = self.cylinder_magnitude / 2.0
        return mean + half_delta, mean - half_delta

    def is_spherical(self, tol: float = EPS_POWER) -> bool:
        """True если цилиндрической составляющей нет (Δ ≈ 0)"""
        return is_zero(self.cylinder_magnitude, tol)

    def as_rows(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Матрица в виде ((Px, Pt), (Pt, Py))"""
        return (self.px, self.pt), (self.pt, self.py)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def __add__(self, other: "PowerMatrix") -> "PowerMatrix":
        if not isinstance(other, PowerMatrix):
            return NotImplemented
        return PowerMatrix(
            px=self.px + other.px,
            pt=self.pt + other.pt,
            py=self.py + other.py,
        )

    # -------------------------------------------------------------------------
    # Декомпозиция
    # -------------------------------------------------------------------------

    def to_spherocyl(self, form: CylinderForm = CylinderForm.MINUS) -> SpheroCyl:
        """
        Восстановление сферо-цилиндрической рецептуры из матрицы.

        Minus-cylinder (по умолчанию):
            cylinder = -Δ
            sphere   = (trace + Δ) / 2   (более плюсовая главная сила)
            axis     = atan2(2·Pt, Px - Py) / 2, нормализованная в [0, 180)

        При -C > 0: 2·Pt = -C·sin2θ, Px - Py = -C·cos2θ. Для осей 0° и 90°
        Pt равен нулю (или шуму), но Px - Py остаётся ненулевым.

        Plus-cylinder форма получается транспозицией minus-формы.

        Вырожденный случай: для сферической матрицы ось не определена,
        возвращается cylinder = 0, axis = 0.

        Args:
            form: Форма записи результата (default: MINUS)

        Returns:
            SpheroCyl
        """
        delta = self.cylinder_magnitude

        if is_zero(delta, EPS_POWER):
            return SpheroCyl(sphere=self.trace / 2.0, cylinder=0.0, axis_deg=0.0)

        cylinder = -delta
        sphere = (self.trace - cylinder) / 2.0
        axis_deg = normalize_axis(math.degrees(math.atan2(2.0 * self.pt, self.px - self.py)) / 2.0)

        minus_form = SpheroCyl(sphere=sphere, cylinder=cylinder, axis_deg=axis_deg)

        if form == CylinderForm.PLUS:
            return transpose(minus_form)
        return minus_form
