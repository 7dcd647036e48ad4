"""
SpheroCyl — сферо-цилиндрическая рецептура линзы

Immutable Pydantic модель: sphere (D), cylinder (D), axis_deg (градусы).

Ось нормализуется при создании в [0, 180): оси 0° и 180° дают равные
значения, поэтому все тригонометрические формулы получают уже нормализованную
ось. Знак цилиндра задаётся вызывающим кодом (minus- или plus-cylinder форма).
"""

import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from opticalc.core.math.numerical_safeguards import normalize_axis


# =============================================================================
# ENUMS
# =============================================================================


class CylinderForm(str, Enum):
    """Форма записи цилиндра"""

    MINUS = "minus"  # cylinder <= 0
    PLUS = "plus"  # cylinder > 0


# =============================================================================
# SPHEROCYL MODEL
# =============================================================================


class SpheroCyl(BaseModel):
    """
    Сферо-цилиндрическая рецептура.

    Примеры:
        +2.00 DS             → SpheroCyl(sphere=2.0, cylinder=0.0, axis_deg=0.0)
        -1.25 DC × 180       → SpheroCyl(sphere=0.0, cylinder=-1.25, axis_deg=180.0)
                               (axis_deg хранится как 0.0)

    Immutable модель (frozen=True). Сериализуется в camelCase
    (`axisDeg`) для внешних контрактов.
    """

    sphere: float = Field(..., description="Сферический компонент (D)")
    cylinder: float = Field(0.0, description="Цилиндрический компонент (D), minus или plus форма")
    axis_deg: float = Field(0.0, description="Ось цилиндра (градусы), нормализуется в [0, 180)")

    model_config = {
        "frozen": True,
        "allow_inf_nan": False,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("axis_deg")
    @classmethod
    def normalize_axis_deg(cls, v: float) -> float:
        """Ось определена по модулю 180°"""
        return normalize_axis(v)

    @property
    def form(self) -> CylinderForm:
        """Форма записи цилиндра (нулевой цилиндр считается minus-формой)"""
        return CylinderForm.PLUS if self.cylinder > 0 else CylinderForm.MINUS

    @property
    def spherical_equivalent(self) -> float:
        """Сферический эквивалент: S + C/2"""
        return self.sphere + self.cylinder / 2.0

    def is_spherical(self) -> bool:
        """True если цилиндр точно равен нулю"""
        return self.cylinder == 0.0

    def power_at(self, meridian_deg: float) -> float:
        """
        Сила линзы в произвольном меридиане.

        F(φ) = S + C · sin²(φ - axis)

        φ = 0° — горизонтальный меридиан, φ = 90° — вертикальный.

        Args:
            meridian_deg: Меридиан в градусах

        Returns:
            Сила в диоптриях
        """
        delta = math.radians(meridian_deg - self.axis_deg)
        return self.sphere + self.cylinder * math.sin(delta) ** 2

    def __str__(self) -> str:
        return f"{self.sphere:+.2f} / {self.cylinder:+.2f} x {self.axis_deg:g}"
