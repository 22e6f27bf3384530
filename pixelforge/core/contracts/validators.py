"""
JSON Schema Contract Validators

Модуль для валидации JSON документов, которые ядро передаёт внешним
коллабораторам. Использует библиотеку jsonschema для проверки соответствия
данных схемам.

Схемы (pixelforge/core/contracts/schema/):
- rarity_stats.json — результат оценки редкости
- nft_metadata.json — Metaplex-совместимый документ метаданных
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rarity_stats')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class RarityStatsValidator(ContractValidator):
    """Валидатор для rarity_stats контракта."""

    def __init__(self):
        super().__init__("rarity_stats")


class NFTMetadataValidator(ContractValidator):
    """Валидатор для nft_metadata контракта."""

    def __init__(self):
        super().__init__("nft_metadata")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rarity_stats(data: Dict[str, Any]) -> None:
    """
    Валидация rarity_stats документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RarityStatsValidator().validate(data)


def validate_nft_metadata(data: Dict[str, Any]) -> None:
    """
    Валидация nft_metadata документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NFTMetadataValidator().validate(data)
