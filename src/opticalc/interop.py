"""
Interop — внешний (host-facing) интерфейс

Функции доступны под теми же camelCase именами, что и в скриптовом
(JS/WASM) окружении, и принимают/возвращают JSON-совместимые значения:

    convertPower(measuredPower, fromIndex, toIndex)            -> number
    convertRx(spheroCyl, fromIndex, toIndex)                   -> SpheroCyl
    simulateLensmeterReading(trueRx, lensmeterIndex, trueIndex) -> SpheroCyl
    inducedPrism(eye, lens, decentration)                      -> PrismReport
    crossedCylinders(lensA, lensB)                             -> SpheroCyl
    transpose(spheroCyl)                                       -> SpheroCyl
    obliqueMeridian(lens, meridianDeg)                         -> number
    minimumBlankSize(ed, eyesize, bridge, ipd)                 -> number
    recommendedBlankSize(ed, eyesize, bridge, ipd)             -> number

Входные значения проверяются JSON Schema контрактами (opticalc.core.contracts),
результат inducedPrism — на выходе. Ошибки пробрасываются:
- jsonschema.ValidationError — значение не соответствует контракту
- InvalidIndex — недопустимый показатель преломления
- UnknownExport — неизвестное имя функции
"""

import logging
from typing import Any, Callable, Dict

from opticalc.core.contracts import (
    validate_decentration,
    validate_eye,
    validate_prism_report,
    validate_spherocyl,
)
from opticalc.core.domain import Decentration, Eye, SpheroCyl
from opticalc.core.optics import (
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

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownExport(KeyError):
    """Вызов функции, отсутствующей во внешнем интерфейсе."""


# =============================================================================
# РЕЕСТР
# =============================================================================

EXPORTS: Dict[str, Callable[..., Any]] = {}


def export(name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Регистрация функции во внешнем интерфейсе под именем name."""

    def register(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in EXPORTS:
            raise ValueError(f"Export {name!r} already registered")
        EXPORTS[name] = func
        return func

    return register


def invoke(name: str, *args: Any) -> Any:
    """
    Вызов функции внешнего интерфейса по имени.

    Args:
        name: camelCase имя (например, 'convertPower')
        *args: JSON-совместимые аргументы

    Returns:
        JSON-совместимый результат

    Raises:
        UnknownExport: Если имя не зарегистрировано
    """
    try:
        func = EXPORTS[name]
    except KeyError:
        raise UnknownExport(name) from None

    logger.debug("interop call %s(%d args)", name, len(args))
    return func(*args)


# =============================================================================
# КОНВЕРТЕРЫ ЗНАЧЕНИЙ
# =============================================================================


def _spherocyl_in(data: Dict[str, Any]) -> SpheroCyl:
    validate_spherocyl(data)
    return SpheroCyl.model_validate(data)


def _spherocyl_out(rx: SpheroCyl) -> Dict[str, Any]:
    return rx.model_dump(by_alias=True)


def _decentration_in(data: Dict[str, Any]) -> Decentration:
    validate_decentration(data)
    return Decentration.model_validate(data)


def _eye_in(data: str) -> Eye:
    validate_eye(data)
    return Eye(data)


# =============================================================================
# ФУНКЦИИ
# =============================================================================


@export("convertPower")
def convert_power_host(measured_power: float, from_index: float, to_index: float) -> float:
    return convert_power(measured_power, from_index, to_index)


@export("convertRx")
def convert_rx_host(rx: Dict[str, Any], from_index: float, to_index: float) -> Dict[str, Any]:
    return _spherocyl_out(convert_rx(_spherocyl_in(rx), from_index, to_index))


@export("simulateLensmeterReading")
def simulate_lensmeter_reading_host(
    true_rx: Dict[str, Any], lensmeter_index: float, true_index: float
) -> Dict[str, Any]:
    reading = simulate_lensmeter_reading(_spherocyl_in(true_rx), lensmeter_index, true_index)
    return _spherocyl_out(reading)


@export("inducedPrism")
def induced_prism_host(
    eye: str, lens: Dict[str, Any], decentration: Dict[str, Any]
) -> Dict[str, Any]:
    prism = induced_prism(_eye_in(eye), _spherocyl_in(lens), _decentration_in(decentration))
    report = prism.report().model_dump(by_alias=True, mode="json")
    validate_prism_report(report)
    return report


@export("crossedCylinders")
def crossed_cylinders_host(lens_a: Dict[str, Any], lens_b: Dict[str, Any]) -> Dict[str, Any]:
    return _spherocyl_out(crossed_cylinders(_spherocyl_in(lens_a), _spherocyl_in(lens_b)))


@export("transpose")
def transpose_host(rx: Dict[str, Any]) -> Dict[str, Any]:
    return _spherocyl_out(transpose(_spherocyl_in(rx)))


@export("obliqueMeridian")
def oblique_meridian_host(lens: Dict[str, Any], meridian_deg: float) -> float:
    return oblique_meridian(_spherocyl_in(lens), meridian_deg)


@export("minimumBlankSize")
def minimum_blank_size_host(
    effective_diameter_mm: float, eyesize_mm: float, bridge_mm: float, ipd_mm: float
) -> float:
    return minimum_blank_size(effective_diameter_mm, eyesize_mm, bridge_mm, ipd_mm)


@export("recommendedBlankSize")
def recommended_blank_size_host(
    effective_diameter_mm: float, eyesize_mm: float, bridge_mm: float, ipd_mm: float
) -> float:
    return recommended_blank_size(effective_diameter_mm, eyesize_mm, bridge_mm, ipd_mm)
