"""
opticalc — clinical optics calculations for spectacle lenses.

Refractive-index power conversion, lensmeter simulation, induced prism
(Prentice's rule in matrix form), obliquely crossed cylinders, transposition,
oblique meridian power and lens blank sizing.
"""

import logging

from opticalc.core.domain import (
    CR_39_INDEX,
    CROWN_GLASS_INDEX,
    HIGH_INDEX_160_INDEX,
    HIGH_INDEX_167_INDEX,
    HIGH_INDEX_174_INDEX,
    POLYCARBONATE_INDEX,
    TRIVEX_INDEX,
    ClinicalInducedPrism,
    CylinderForm,
    Decentration,
    Eye,
    HorizontalBase,
    InducedPrism,
    LensMaterial,
    PowerComponents,
    PrismReport,
    SpheroCyl,
    VerticalBase,
)
from opticalc.core.optics import (
    InvalidIndex,
    PowerMatrix,
    combine_lenses,
    convert_power,
    convert_rx,
    crossed_cylinders,
    induced_prism,
    minimum_blank_size,
    oblique_meridian,
    recommended_blank_size,
    simulate_lensmeter_reading,
    transpose,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Value types
    "SpheroCyl",
    "CylinderForm",
    "PowerMatrix",
    "Eye",
    "HorizontalBase",
    "VerticalBase",
    "Decentration",
    "PowerComponents",
    "InducedPrism",
    "ClinicalInducedPrism",
    "PrismReport",
    # Errors
    "InvalidIndex",
    # Operations
    "convert_power",
    "convert_rx",
    "simulate_lensmeter_reading",
    "induced_prism",
    "crossed_cylinders",
    "combine_lenses",
    "transpose",
    "oblique_meridian",
    "minimum_blank_size",
    "recommended_blank_size",
    # Materials
    "CR_39_INDEX",
    "TRIVEX_INDEX",
    "CROWN_GLASS_INDEX",
    "POLYCARBONATE_INDEX",
    "HIGH_INDEX_160_INDEX",
    "HIGH_INDEX_167_INDEX",
    "HIGH_INDEX_174_INDEX",
    "LensMaterial",
]
