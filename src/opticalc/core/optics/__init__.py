"""
Optics operations для opticalc

Все операции — чистые функции над immutable значениями.
"""

# Power Matrix
from opticalc.core.optics.power_matrix import PowerMatrix

# Index Conversion
from opticalc.core.optics.index_conversion import (
    InvalidIndex,
    convert_power,
    convert_rx,
    index_ratio,
    simulate_lensmeter_reading,
)

# Induced Prism
from opticalc.core.optics.prism import adjusted_decentration_mm, induced_prism

# Crossed Cylinders
from opticalc.core.optics.crossed_cylinders import combine_lenses, crossed_cylinders

# Transposition
from opticalc.core.optics.transposition import to_minus_cylinder, to_plus_cylinder, transpose

# Oblique Meridian
from opticalc.core.optics.meridian import oblique_meridian, principal_meridians

# Blank Size
from opticalc.core.optics.blank_size import (
    WORKING_EDGE_ALLOWANCE_MM,
    minimum_blank_size,
    per_lens_decentration,
    recommended_blank_size,
)

__all__ = [
    # Power Matrix
    "PowerMatrix",
    # Index Conversion — Exceptions
    "InvalidIndex",
    # Index Conversion — Functions
    "convert_power",
    "convert_rx",
    "index_ratio",
    "simulate_lensmeter_reading",
    # Induced Prism
    "adjusted_decentration_mm",
    "induced_prism",
    # Crossed Cylinders
    "combine_lenses",
    "crossed_cylinders",
    # Transposition
    "to_minus_cylinder",
    "to_plus_cylinder",
    "transpose",
    # Oblique Meridian
    "oblique_meridian",
    "principal_meridians",
    # Blank Size — Constants
    "WORKING_EDGE_ALLOWANCE_MM",
    # Blank Size — Functions
    "minimum_blank_size",
    "per_lens_decentration",
    "recommended_blank_size",
]
