"""
JSON Schema Contract Validators

Валидация сериализованных Jalali значений согласно JSON Schema контрактам
(Draft 2020-12, библиотека jsonschema).

Схемы (jalali/core/contracts/schema/):
- jalali_date.json
- jalali_date_time.json
- zoned_jalali_date_time.json

Схема проверяет форму payload и диапазоны полей. Зависящие от года
инварианты (30 Esfand только в високосный год) проверяет модель:
load_* сначала валидирует payload, затем строит значение через фабрику.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from jalali.core.domain import JalaliDate, JalaliDateTime, ZonedJalaliDateTime

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    По умолчанию читает схемы, поставляемые вместе с пакетом.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'jalali_date')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует валидацию payload против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("%s contract violation at %s: %s", self.schema_name, list(e.absolute_path), e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class JalaliDateValidator(ContractValidator):
    """Валидатор для jalali_date контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("jalali_date", loader)


class JalaliDateTimeValidator(ContractValidator):
    """Валидатор для jalali_date_time контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("jalali_date_time", loader)


class ZonedJalaliDateTimeValidator(ContractValidator):
    """Валидатор для zoned_jalali_date_time контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("zoned_jalali_date_time", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_jalali_date(data: Dict[str, Any]) -> None:
    """
    Валидация jalali_date payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    JalaliDateValidator().validate(data)


def validate_jalali_date_time(data: Dict[str, Any]) -> None:
    """
    Валидация jalali_date_time payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    JalaliDateTimeValidator().validate(data)


def validate_zoned_jalali_date_time(data: Dict[str, Any]) -> None:
    """
    Валидация zoned_jalali_date_time payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ZonedJalaliDateTimeValidator().validate(data)


def _build_date(data: Dict[str, Any]) -> JalaliDate:
    return JalaliDate.of(data["year"], data["month"], data["day"])


def _build_date_time(data: Dict[str, Any]) -> JalaliDateTime:
    return JalaliDateTime.of_date(
        _build_date(data["date"]),
        data["hour"],
        data["minute"],
        data["second"],
        data["nanosecond"],
    )


def load_jalali_date(data: Dict[str, Any]) -> JalaliDate:
    """
    Валидация payload и построение JalaliDate.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidDate: Если дата невалидна для своего года
    """
    validate_jalali_date(data)
    return _build_date(data)


def load_jalali_date_time(data: Dict[str, Any]) -> JalaliDateTime:
    """
    Валидация payload и построение JalaliDateTime.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidDate: Если дата невалидна для своего года
    """
    validate_jalali_date_time(data)
    return _build_date_time(data)


def load_zoned_jalali_date_time(data: Dict[str, Any]) -> ZonedJalaliDateTime:
    """
    Валидация payload и построение ZonedJalaliDateTime.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidDate: Если дата невалидна для своего года
        InvalidArgument: Если зона неизвестна
    """
    validate_zoned_jalali_date_time(data)
    return ZonedJalaliDateTime.of_local(_build_date_time(data["date_time"]), data["zone"])
