"""
Materials — показатели преломления материалов очковых линз

Все значения для D-линии натрия (589.3 нм) при 20°C.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ПОКАЗАТЕЛИ ПРЕЛОМЛЕНИЯ
# =============================================================================

# CR-39 (Columbia Resin #39), стандартный органический материал
CR_39_INDEX: Final[float] = 1.498

# Trivex
TRIVEX_INDEX: Final[float] = 1.532

# Crown glass; калибровка большинства диоптриметров
CROWN_GLASS_INDEX: Final[float] = 1.523

# Поликарбонат
POLYCARBONATE_INDEX: Final[float] = 1.586

# Высокоиндексные полимеры
HIGH_INDEX_160_INDEX: Final[float] = 1.600
HIGH_INDEX_167_INDEX: Final[float] = 1.670
HIGH_INDEX_174_INDEX: Final[float] = 1.740


# =============================================================================
# ENUMS
# =============================================================================


class LensMaterial(str, Enum):
    """Материал линзы"""

    CR_39 = "cr_39"
    TRIVEX = "trivex"
    CROWN_GLASS = "crown_glass"
    POLYCARBONATE = "polycarbonate"
    HIGH_INDEX_160 = "high_index_160"
    HIGH_INDEX_167 = "high_index_167"
    HIGH_INDEX_174 = "high_index_174"

    @property
    def index(self) -> float:
        """Показатель преломления материала"""
        return MATERIAL_INDICES[self]


MATERIAL_INDICES: Final[dict[LensMaterial, float]] = {
    LensMaterial.CR_39: CR_39_INDEX,
    LensMaterial.TRIVEX: TRIVEX_INDEX,
    LensMaterial.CROWN_GLASS: CROWN_GLASS_INDEX,
    LensMaterial.POLYCARBONATE: POLYCARBONATE_INDEX,
    LensMaterial.HIGH_INDEX_160: HIGH_INDEX_160_INDEX,
    LensMaterial.HIGH_INDEX_167: HIGH_INDEX_167_INDEX,
    LensMaterial.HIGH_INDEX_174: HIGH_INDEX_174_INDEX,
}
