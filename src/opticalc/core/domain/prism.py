"""
Prism — модели децентрации и индуцированной призмы

Immutable Pydantic модели:
- Eye: глаз (OD / OS), определяет знак горизонтальной децентрации и язык базы
- Decentration: смещение оптического центра (мм)
- PowerComponents: элементы матрицы силы (Px, Pt, Py), по которым считалась призма
- InducedPrism: знаковые компоненты призмы (Δ) и модуль
- ClinicalInducedPrism: призма с привязкой к глазу и клиническими базами
- PrismReport: округлённое представление для бланка (3 знака)

Знаки (правило Прентиса в матричной форме):
    horizontal < 0 → OD: Base In,  OS: Base Out
    horizontal > 0 → OD: Base Out, OS: Base In
    vertical   < 0 → Base Up
    vertical   > 0 → Base Down
"""

import math
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from opticalc.core.math.numerical_safeguards import round_to_decimals


# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Точность призмы на бланке (знаков после запятой, 0.001Δ)
PRISM_REPORT_DECIMALS: Final[int] = 3


# =============================================================================
# ENUMS
# =============================================================================


class Eye(str, Enum):
    """Глаз"""

    OD = "OD"  # правый
    OS = "OS"  # левый


class HorizontalBase(str, Enum):
    """Направление горизонтальной базы относительно пациента"""

    IN = "Base In"
    OUT = "Base Out"


class VerticalBase(str, Enum):
    """Направление вертикальной базы"""

    UP = "Base Up"
    DOWN = "Base Down"


_CAMEL_FROZEN = {
    "frozen": True,
    "allow_inf_nan": False,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


# =============================================================================
# DECENTRATION
# =============================================================================


class Decentration(BaseModel):
    """
    Децентрация оптического центра относительно зрачковой оси.

    horizontal_mm: +in (назально) / -out (темпорально)
    vertical_mm:   +up / -down
    """

    horizontal_mm: float = Field(0.0, description="Горизонтальная децентрация (мм), +in / -out")
    vertical_mm: float = Field(0.0, description="Вертикальная децентрация (мм), +up / -down")

    model_config = _CAMEL_FROZEN


# =============================================================================
# POWER COMPONENTS
# =============================================================================


class PowerComponents(BaseModel):
    """
    Элементы матрицы силы линзы (D).

    Во внешней форме ключи Px / Pt / Py.
    """

    px: float = Field(..., alias="Px", description="Сила в горизонтальном меридиане (D)")
    pt: float = Field(..., alias="Pt", description="Торический (перекрёстный) член (D)")
    py: float = Field(..., alias="Py", description="Сила в вертикальном меридиане (D)")

    model_config = _CAMEL_FROZEN

    def rounded(self, decimals: int) -> "PowerComponents":
        """Копия с округлением каждого элемента"""
        return PowerComponents(
            px=round_to_decimals(self.px, decimals),
            pt=round_to_decimals(self.pt, decimals),
            py=round_to_decimals(self.py, decimals),
        )


# =============================================================================
# INDUCED PRISM
# =============================================================================


class InducedPrism(BaseModel):
    """
    Знаковые компоненты индуцированной призмы (призменные диоптрии, Δ).

    Знак кодирует направление до перевода в клиническую базу.

    Модуль не может быть бесконечным (allow_inf_nan=False): при экстремальных
    силе и децентрации (порядка 1e300) hypot переполняется, и создание модели
    завершается pydantic ValidationError. Клинические входы до этого не доходят.
    """

    horizontal_prism: float = Field(..., description="Горизонтальная призма (Δ, со знаком)")
    vertical_prism: float = Field(..., description="Вертикальная призма (Δ, со знаком)")
    magnitude: float = Field(..., ge=0, description="Результирующая призма (Δ)")

    model_config = _CAMEL_FROZEN

    @model_validator(mode="after")
    def validate_magnitude(self) -> "InducedPrism":
        """magnitude = hypot(horizontal, vertical)"""
        expected = math.hypot(self.horizontal_prism, self.vertical_prism)
        if not math.isclose(self.magnitude, expected, rel_tol=1e-9, abs_tol=1e-12):
            raise ValueError(
                f"magnitude {self.magnitude} does not match components (expected {expected})"
            )
        return self

    @classmethod
    def from_components(cls, horizontal: float, vertical: float) -> "InducedPrism":
        """Создание из знаковых компонент (модуль вычисляется)"""
        return cls(
            horizontal_prism=horizontal,
            vertical_prism=vertical,
            magnitude=math.hypot(horizontal, vertical),
        )

    @property
    def angle_deg(self) -> float:
        """
        Направление результирующей призмы в знаковых осях (градусы, [0, 360)).

        Для нулевой призмы возвращает 0.0.
        """
        if self.magnitude == 0.0:
            return 0.0
        return math.degrees(math.atan2(self.vertical_prism, self.horizontal_prism)) % 360.0


class PrismReport(BaseModel):
    """
    Клиническое представление призмы для бланка.

    Значения — модули, округлённые до PRISM_REPORT_DECIMALS знаков.
    База равна None, если округлённая компонента равна нулю.
    """

    eye: Eye
    power_components: PowerComponents
    horizontal_prism: float = Field(..., ge=0)
    horizontal_base: Optional[HorizontalBase] = None
    vertical_prism: float = Field(..., ge=0)
    vertical_base: Optional[VerticalBase] = None
    magnitude: float = Field(..., ge=0)

    model_config = _CAMEL_FROZEN

    def __str__(self) -> str:
        parts = []
        if self.horizontal_base is not None:
            parts.append(f"{self.horizontal_prism:.3f}Δ {self.horizontal_base.value}")
        if self.vertical_base is not None:
            parts.append(f"{self.vertical_prism:.3f}Δ {self.vertical_base.value}")
        return f"{self.eye.value}: " + (", ".join(parts) if parts else "no prism")


class ClinicalInducedPrism(BaseModel):
    """
    Индуцированная призма с привязкой к глазу.

    Полная точность хранится в prism и power_components; округление
    выполняется только в report().
    """

    eye: Eye
    prism: InducedPrism
    power_components: PowerComponents

    model_config = _CAMEL_FROZEN

    def horizontal(self) -> Optional[tuple[float, HorizontalBase]]:
        """
        Горизонтальная призма и её база.

        Полярность базы зеркальна между OD и OS: одинаковая физическая
        назальная децентрация даёт противоположный знак компоненты.

        Returns:
            (модуль, база) или None для нулевой компоненты
        """
        value = self.prism.horizontal_prism
        if value == 0.0:
            return None

        if self.eye == Eye.OD:
            base = HorizontalBase.IN if value < 0.0 else HorizontalBase.OUT
        else:
            base = HorizontalBase.OUT if value < 0.0 else HorizontalBase.IN

        return abs(value), base

    def vertical(self) -> Optional[tuple[float, VerticalBase]]:
        """
        Вертикальная призма и её база (не зависит от глаза).

        Returns:
            (модуль, база) или None для нулевой компоненты
        """
        value = self.prism.vertical_prism
        if value == 0.0:
            return None

        base = VerticalBase.UP if value < 0.0 else VerticalBase.DOWN
        return abs(value), base

    def report(self, decimals: int = PRISM_REPORT_DECIMALS) -> PrismReport:
        """
        Округлённое клиническое представление.

        Компонента, округлившаяся до нуля, выводится без базы.

        Args:
            decimals: Число знаков после запятой (default: 3)

        Returns:
            PrismReport
        """
        horizontal_prism, horizontal_base = _rounded_component(self.horizontal(), decimals)
        vertical_prism, vertical_base = _rounded_component(self.vertical(), decimals)

        return PrismReport(
            eye=self.eye,
            power_components=self.power_components.rounded(decimals),
            horizontal_prism=horizontal_prism,
            horizontal_base=horizontal_base,
            vertical_prism=vertical_prism,
            vertical_base=vertical_base,
            magnitude=round_to_decimals(self.prism.magnitude, decimals),
        )


def _rounded_component(
    component: Optional[tuple[float, Enum]], decimals: int
) -> tuple[float, Optional[Enum]]:
    if component is None:
        return 0.0, None
    value = round_to_decimals(component[0], decimals)
    if value == 0.0:
        return 0.0, None
    return value, component[1]
