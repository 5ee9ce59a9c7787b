"""
Domain models and value objects.

Contains the Fraction value type (with its exceptions, config and null-safe
functional API) and the numeric Vector container.
"""

from src.core.domain.fraction import (
    DEFAULT_FRACTION_CONFIG,
    MAGNITUDE_MAX,
    DivisionByZero,
    EvenRootOfNegative,
    Fraction,
    FractionConfig,
    FractionError,
    FractionOverflow,
    FractionParseError,
    NonFiniteValue,
    NonIntegerRoot,
    RootError,
    RootMode,
    Sign,
    add,
    add_integer,
    divide,
    divide_by_integer,
    evaluate,
    format_fraction,
    format_integer_ratio,
    get_denominator,
    get_numerator,
    multiply,
    multiply_integer,
    nth_root,
    power,
    simplify,
    subtract,
    subtract_integer,
)
from src.core.domain.vector import Vector

__all__ = [
    # Fraction model
    "Fraction",
    "Sign",
    "MAGNITUDE_MAX",
    # Config
    "FractionConfig",
    "RootMode",
    "DEFAULT_FRACTION_CONFIG",
    # Exceptions
    "FractionError",
    "DivisionByZero",
    "FractionParseError",
    "NonFiniteValue",
    "FractionOverflow",
    "RootError",
    "EvenRootOfNegative",
    "NonIntegerRoot",
    # Null-safe API
    "evaluate",
    "format_fraction",
    "format_integer_ratio",
    "simplify",
    "multiply",
    "add",
    "subtract",
    "divide",
    "multiply_integer",
    "add_integer",
    "subtract_integer",
    "divide_by_integer",
    "power",
    "nth_root",
    "get_numerator",
    "get_denominator",
    # Vector
    "Vector",
]
