"""
Contract Validation Module

JSON Schema контракт сериализованной дроби.
"""

from .validators import (
    fraction_validator,
    load_fraction_schema,
    validate_fraction,
)

__all__ = [
    "load_fraction_schema",
    "fraction_validator",
    "validate_fraction",
]
