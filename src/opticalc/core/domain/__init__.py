"""
Domain models and value objects.

Contains the prescription, decentration and prism value types and the lens
material constants.
"""

from opticalc.core.domain.materials import (
    CR_39_INDEX,
    CROWN_GLASS_INDEX,
    HIGH_INDEX_160_INDEX,
    HIGH_INDEX_167_INDEX,
    HIGH_INDEX_174_INDEX,
    MATERIAL_INDICES,
    POLYCARBONATE_INDEX,
    TRIVEX_INDEX,
    LensMaterial,
)
from opticalc.core.domain.prism import (
    PRISM_REPORT_DECIMALS,
    ClinicalInducedPrism,
    Decentration,
    Eye,
    HorizontalBase,
    InducedPrism,
    PowerComponents,
    PrismReport,
    VerticalBase,
)
from opticalc.core.domain.spherocyl import CylinderForm, SpheroCyl

__all__ = [
    # Prescription
    "SpheroCyl",
    "CylinderForm",
    # Prism
    "Eye",
    "HorizontalBase",
    "VerticalBase",
    "Decentration",
    "PowerComponents",
    "InducedPrism",
    "ClinicalInducedPrism",
    "PrismReport",
    "PRISM_REPORT_DECIMALS",
    # Materials
    "CR_39_INDEX",
    "TRIVEX_INDEX",
    "CROWN_GLASS_INDEX",
    "POLYCARBONATE_INDEX",
    "HIGH_INDEX_160_INDEX",
    "HIGH_INDEX_167_INDEX",
    "HIGH_INDEX_174_INDEX",
    "MATERIAL_INDICES",
    "LensMaterial",
]
