"""
JSON Schema Contract Validators

Валидация внешних (host-facing) значений согласно JSON Schema контрактам.
Один и тот же контракт описывает формы значений для любого хоста:
нативного вызова и скриптового (JS/WASM) окружения.

Схемы (contracts/schema/):
- spherocyl.json     — {"sphere", "cylinder", "axisDeg"}
- decentration.json  — {"horizontalMm", "verticalMm"}
- eye.json           — "OD" | "OS"
- prism_report.json  — результат inducedPrism
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом (package data) в каталоге schema/
    рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'spherocyl')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SpheroCylValidator(ContractValidator):
    """Валидатор для spherocyl контракта."""

    def __init__(self):
        super().__init__("spherocyl")


class DecentrationValidator(ContractValidator):
    """Валидатор для decentration контракта."""

    def __init__(self):
        super().__init__("decentration")


class EyeValidator(ContractValidator):
    """Валидатор для eye контракта."""

    def __init__(self):
        super().__init__("eye")


class PrismReportValidator(ContractValidator):
    """Валидатор для prism_report контракта."""

    def __init__(self):
        super().__init__("prism_report")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_spherocyl(data: Dict[str, Any]) -> None:
    """
    Валидация spherocyl данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SpheroCylValidator().validate(data)


def validate_decentration(data: Dict[str, Any]) -> None:
    """
    Валидация decentration данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DecentrationValidator().validate(data)


def validate_eye(data: str) -> None:
    """
    Валидация обозначения глаза.

    Raises:
        ValidationError: Если значение не "OD" / "OS"
    """
    EyeValidator().validate(data)


def validate_prism_report(data: Dict[str, Any]) -> None:
    """
    Валидация prism_report данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PrismReportValidator().validate(data)
