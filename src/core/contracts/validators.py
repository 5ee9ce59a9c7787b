"""
Fraction Contract

JSON Schema (Draft 2020-12) контракт сериализованной дроби.
Схема schema/fraction.json поставляется как package data и читается
через importlib.resources.

Схема и валидатор собираются лениво при первом обращении и кэшируются:
импорт модуля не обращается к файловой системе.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

from jsonschema import Draft202012Validator

FRACTION_SCHEMA = "fraction.json"


@lru_cache(maxsize=None)
def load_fraction_schema() -> Dict[str, Any]:
    """
    Загрузка схемы fraction.json из package data.

    Returns:
        Схема как dict (один и тот же объект при повторных вызовах)

    Raises:
        jsonschema.SchemaError: Если файл не является валидной JSON Schema
    """
    source = resources.files(__package__).joinpath("schema").joinpath(FRACTION_SCHEMA)
    schema = json.loads(source.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return schema


@lru_cache(maxsize=None)
def fraction_validator() -> Draft202012Validator:
    """Кэшированный валидатор контракта дроби."""
    return Draft202012Validator(load_fraction_schema())


def validate_fraction(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной дроби.

    Args:
        data: {"numerator": int, "denominator": int, "sign": "positive"|"negative"}

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    fraction_validator().validate(data)
