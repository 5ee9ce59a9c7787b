"""
Numeric Helpers — Integer & Float Primitives

Модуль содержит чистые функции без состояния, которые используются
Fraction и Vector:
- abs/gcd для нормализации дробей
- Быстрое целочисленное возведение в степень (square-and-multiply)
- Проверка целочисленности корня n-й степени (приближённая и точная)
- Округление float до заданного числа знаков после запятой
- Проверка конечности float и валидация аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(0, 0) == 0 (используется как no-op sentinel в simplify)
2. pow_int принимает только неотрицательные целые показатели
3. integer_nth_root точен для любых неотрицательных int (без float)
4. Все функции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final, Union

Number = Union[int, float]

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Допуск приближённой проверки корня n-й степени
# |value^(1/n) - round(value^(1/n))| <= NTH_ROOT_EPS
NTH_ROOT_EPS: Final[float] = 1e-5


# =============================================================================
# БАЗОВЫЕ ФУНКЦИИ
# =============================================================================


def abs_value(value: Number) -> Number:
    """
    Абсолютное значение числа (int или float).

    Examples:
        >>> abs_value(-5)
        5
        >>> abs_value(-3.14)
        3.14
    """
    if value < 0:
        return -value
    return value


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    gcd ассоциативен: gcd(a, b, c) == gcd(a, gcd(b, c)).

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        Неотрицательный НОД:
        - gcd(0, b) == |b|
        - gcd(a, 0) == |a|
        - gcd(0, 0) == 0

    Examples:
        >>> gcd(48, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        0
    """
    a = abs_value(a)
    b = abs_value(b)

    if a == 0 or b == 0:
        return a + b

    while b != 0:
        a, b = b, a % b
    return a


def pow_int(base: int, exponent: int) -> int:
    """
    Целочисленное возведение в степень base**exponent.

    Бинарный алгоритм (square-and-multiply), O(log exponent):
    на каждом шаге показатель сдвигается вправо на 1 бит,
    а основание возводится в квадрат.

    Args:
        base: Основание (может быть отрицательным)
        exponent: Неотрицательный целый показатель

    Returns:
        base**exponent; pow_int(x, 0) == 1

    Raises:
        ValueError: Если exponent < 0 или не int

    Examples:
        >>> pow_int(2, 10)
        1024
        >>> pow_int(-2, 3)
        -8
    """
    validate_non_negative_int(exponent, "exponent")

    result = 1
    while exponent > 0:
        if exponent & 1:
            # Нечётный показатель
            result *= base
        exponent >>= 1
        # Квадрат не нужен на последнем шаге (exponent == 0)
        if exponent:
            base *= base
    return result


# =============================================================================
# КОРНИ N-Й СТЕПЕНИ
# =============================================================================


def is_nth_root_integer(value: int, degree: int, tol: float = NTH_ROOT_EPS) -> bool:
    """
    Приближённая проверка: является ли корень степени degree из value целым.

    Вычисляет value^(1/degree) во float и принимает результат, если он
    отличается от ближайшего целого не более чем на tol.

    ВНИМАНИЕ: эвристика. Для больших magnitudes возможны как ложные
    срабатывания, так и ложные отказы. Для точной проверки используйте
    is_exact_nth_power.

    Args:
        value: Неотрицательное целое
        degree: Степень корня (>= 1)
        tol: Допуск (default: NTH_ROOT_EPS)

    Returns:
        True если корень целый с точностью tol

    Examples:
        >>> is_nth_root_integer(27, 3)
        True
        >>> is_nth_root_integer(20, 2)
        False
    """
    validate_positive_int(degree, "degree")

    nth_root = float(value) ** (1.0 / degree)
    return abs(nth_root - round_half_away(nth_root)) <= tol


def approximate_nth_root(value: int, degree: int) -> int:
    """Округлённый float-корень степени degree из value."""
    validate_positive_int(degree, "degree")
    return int(round_half_away(float(value) ** (1.0 / degree)))


def integer_nth_root(value: int, degree: int) -> int:
    """
    Точный целый корень: floor(value^(1/degree)) без float-арифметики.

    Итерация Ньютона на целых числах, стартующая сверху от корня.

    Args:
        value: Неотрицательное целое
        degree: Степень корня (>= 1)

    Returns:
        Наибольшее r такое, что r**degree <= value

    Raises:
        ValueError: Если value < 0 или degree < 1

    Examples:
        >>> integer_nth_root(27, 3)
        3
        >>> integer_nth_root(20, 2)
        4
    """
    validate_non_negative_int(value, "value")
    validate_positive_int(degree, "degree")

    if value < 2 or degree == 1:
        return value

    # Начальное приближение сверху: 2^ceil(bits/degree) > root
    x = 1 << -(-value.bit_length() // degree)
    while True:
        y = ((degree - 1) * x + value // pow_int(x, degree - 1)) // degree
        if y >= x:
            return x
        x = y


def is_exact_nth_power(value: int, degree: int) -> bool:
    """Точная проверка: value == r**degree для некоторого целого r."""
    root = integer_nth_root(value, degree)
    return pow_int(root, degree) == value


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float) -> float:
    """
    Округление до целого "half away from zero" (как math.Round в C/Go).

    Встроенный round() использует banker's rounding, поэтому здесь
    используется floor/ceil.
    """
    if value >= 0:
        return float(math.floor(value + 0.5))
    return float(math.ceil(value - 0.5))


def round_places(value: float, places: int) -> float:
    """
    Округление float до places знаков после запятой.

    Args:
        value: Исходное значение
        places: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение (half away from zero)

    Examples:
        >>> round_places(2.3456, 2)
        2.35
        >>> round_places(-1.005, 0)
        -1.0
    """
    validate_non_negative_int(places, "places")

    scale = math.pow(10, places)
    return round_half_away(value * scale) / scale


def is_integer(value: float) -> bool:
    """
    Проверка, что float является целым значением.

    NaN и Inf никогда не считаются целыми.
    """
    if not is_valid_float(value):
        return False
    return value == math.trunc(value)


# =============================================================================
# FLOAT ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение является неотрицательным int.

    Raises:
        TypeError: Если значение не int (bool не допускается)
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение является положительным int.

    Raises:
        TypeError: Если значение не int (bool не допускается)
        ValueError: Если value <= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
