"""
Core math modules

Чистые численные примитивы: gcd, целочисленная степень, корни n-й степени,
округление и валидация аргументов.
"""

from src.core.math.numeric_helpers import (
    # Constants
    NTH_ROOT_EPS,
    # Integer primitives
    abs_value,
    gcd,
    pow_int,
    # Nth roots
    approximate_nth_root,
    integer_nth_root,
    is_exact_nth_power,
    is_nth_root_integer,
    # Rounding
    is_integer,
    round_half_away,
    round_places,
    # Float checks
    is_valid_float,
    # Validation
    validate_non_negative_int,
    validate_positive_int,
)

__all__ = [
    # Constants
    "NTH_ROOT_EPS",
    # Integer primitives
    "abs_value",
    "gcd",
    "pow_int",
    # Nth roots
    "approximate_nth_root",
    "integer_nth_root",
    "is_exact_nth_power",
    "is_nth_root_integer",
    # Rounding
    "is_integer",
    "round_half_away",
    "round_places",
    # Float checks
    "is_valid_float",
    # Validation
    "validate_non_negative_int",
    "validate_positive_int",
]
