"""
Contract Validation Module

Валидация внешних значений (host-facing) против JSON Schema контрактов.
"""

from .validators import (
    ContractValidator,
    DecentrationValidator,
    EyeValidator,
    PrismReportValidator,
    SchemaLoader,
    SpheroCylValidator,
    validate_decentration,
    validate_eye,
    validate_prism_report,
    validate_spherocyl,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SpheroCylValidator",
    "DecentrationValidator",
    "EyeValidator",
    "PrismReportValidator",
    # Functions
    "validate_spherocyl",
    "validate_decentration",
    "validate_eye",
    "validate_prism_report",
]
