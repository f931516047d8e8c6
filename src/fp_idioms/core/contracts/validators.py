"""
Report Contracts — JSON Schema проверка отчётов демо-программ

Схемы поставляются внутри пакета (fp_idioms/core/contracts/schema/)
и читаются через importlib.resources, поэтому работают и из исходников,
и после обычной установки.

Каждой модели отчёта соответствует одна схема (REPORT_SCHEMAS):
- EvenSquaresReport → even_squares_report.json
- ClosuresReport    → closures_report.json

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Схемы загружаются лениво, при первой проверке, а не при импорте
2. Каждая схема проходит meta-validation (Draft 2020-12) до использования
3. Отчёт проверяется в той форме, в которой он сериализуется в JSON
"""

import json
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from fp_idioms.logger import logger

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Пакет и подкаталог, где лежат *.json схемы
SCHEMA_PACKAGE: Final[str] = "fp_idioms.core.contracts"
SCHEMA_SUBDIR: Final[str] = "schema"

# Имя модели отчёта → имя схемы (без расширения)
REPORT_SCHEMAS: Final[Dict[str, str]] = {
    "EvenSquaresReport": "even_squares_report",
    "ClosuresReport": "closures_report",
}


def packaged_schema_dir() -> Traversable:
    """Каталог схем внутри установленного пакета."""
    return resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_SUBDIR)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema с кэшем.

    schema_dir может быть pathlib.Path или Traversable из importlib.resources:
    используются только joinpath / is_dir / is_file / read_text / iterdir.
    """

    def __init__(self, schema_dir: Traversable | None = None):
        self._schema_dir = schema_dir if schema_dir is not None else packaged_schema_dir()
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Traversable:
        return self._schema_dir

    def available(self) -> List[str]:
        """Имена всех схем в каталоге, отсортированные."""
        return sorted(
            entry.name[: -len(".json")]
            for entry in self._schema_dir.iterdir()
            if entry.name.endswith(".json")
        )

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-validation схемы.

        Args:
            schema_name: Имя схемы без расширения (например, 'closures_report')

        Returns:
            Схема как dict (из кэша при повторном вызове)

        Raises:
            FileNotFoundError: Если файла схемы нет
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_file = self._schema_dir.joinpath(f"{schema_name}.json")
        if not schema_file.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_file}")

        schema = json.loads(schema_file.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("loaded schema %s", schema_name)
        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=1)
def default_loader() -> SchemaLoader:
    """Общий загрузчик пакетных схем, создаётся при первом обращении."""
    return SchemaLoader()


# =============================================================================
# REPORT CONTRACT
# =============================================================================


class ReportContract:
    """
    Контракт одной схемы: проверка dict или pydantic-отчёта.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def check(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self._validator.validate(data)
        logger.debug("%s contract satisfied", self.schema_name)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def violations(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения в виде "<путь>: <сообщение>", отсортированные по пути.

        Корень документа обозначается "$".
        """
        messages = []
        for error in self._validator.iter_errors(data):
            path = "/".join(str(part) for part in error.absolute_path) or "$"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)

    def check_report(self, report: BaseModel) -> Dict[str, Any]:
        """
        Проверка pydantic-отчёта в его JSON-форме.

        Returns:
            JSON-совместимый dict, прошедший проверку
        """
        data = report.model_dump(mode="json")
        self.check(data)
        return data


def contract_for(report: BaseModel) -> ReportContract:
    """
    Контракт для модели отчёта по её типу.

    Raises:
        ValueError: Если для типа отчёта нет схемы
    """
    report_type = type(report).__name__
    if report_type not in REPORT_SCHEMAS:
        raise ValueError(f"No contract registered for {report_type}")
    return ReportContract(REPORT_SCHEMAS[report_type])


def validate_report(report: BaseModel) -> Dict[str, Any]:
    """
    Проверка отчёта по его контракту.

    Returns:
        JSON-совместимый dict отчёта

    Raises:
        ValueError: Если для типа отчёта нет схемы
        jsonschema.ValidationError: Если отчёт нарушает схему
    """
    return contract_for(report).check_report(report)


def validate_even_squares_report(data: Dict[str, Any]) -> None:
    ReportContract("even_squares_report").check(data)


def validate_closures_report(data: Dict[str, Any]) -> None:
    ReportContract("closures_report").check(data)
