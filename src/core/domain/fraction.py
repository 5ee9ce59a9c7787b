"""
Fraction — Точное рациональное число (sign-magnitude)

Immutable Pydantic модель рационального числа p/q:
- numerator и denominator хранятся как абсолютные значения (magnitudes)
- sign — единственный источник знака значения
- value = sign * numerator / denominator

Модуль обеспечивает:
- Конструирование из int, float и строковых выражений "a / b"
- Упрощение (деление на НОД)
- Арифметику через перекрёстное умножение без common-denominator shortcut
- Возведение в степень и извлечение корня n-й степени
- Каноническое форматирование (смешанная дробь) и integer ratio

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. numerator >= 0, denominator > 0 (ноль в знаменателе → DivisionByZero)
2. Канонический ноль всегда имеет sign = POSITIVE
3. |numerator|, |denominator| <= MAGNITUDE_MAX (иначе FractionOverflow)
4. Каждая операция возвращает НОВЫЙ экземпляр (frozen=True),
   цепочки a.multiply(b).add(c) поддерживаются
5. Форматирование НЕ упрощает дробь автоматически: "2/4" остаётся "2/4"

Invalid/empty состояние моделируется через None: null-safe функции в конце
модуля принимают Fraction | None и пропагируют None вместо ошибки.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Final, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.contracts.validators import validate_fraction
from src.core.math.numeric_helpers import (
    NTH_ROOT_EPS,
    abs_value,
    approximate_nth_root,
    gcd,
    integer_nth_root,
    is_exact_nth_power,
    is_nth_root_integer,
    is_valid_float,
    pow_int,
    validate_non_negative_int,
    validate_positive_int,
)

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальная magnitude числителя/знаменателя (диапазон signed int64)
# Результат операции за пределами диапазона → FractionOverflow
MAGNITUDE_MAX: Final[int] = 2**63 - 1

# Числовой литерал: int или float (с ведущими цифрами или без),
# опциональный знак и опциональная экспонента (e / E)
NUMBER_PATTERN: Final[str] = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"

# "a / b" с произвольными пробелами вокруг чисел и разделителя
FRACTION_PATTERN: Final[re.Pattern] = re.compile(
    rf"\s*({NUMBER_PATTERN})\s*/\s*({NUMBER_PATTERN})\s*",
    re.ASCII,
)

# Символы, при наличии которых литерал разбирается как float
FLOAT_MARKERS: Final[frozenset] = frozenset(".eE")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionError(Exception):
    """Базовое исключение для операций с Fraction."""

    pass


class DivisionByZero(FractionError, ZeroDivisionError):
    """Ноль в знаменателе: при конструировании или делении."""

    pass


class FractionParseError(FractionError, ValueError):
    """
    Некорректное строковое представление дроби.

    Если причиной стала ошибка разбора числового литерала,
    исходное исключение доступно через __cause__.
    """

    pass


class NonFiniteValue(FractionError, ValueError):
    """NaN/Inf не имеют представления в виде дроби."""

    pass


class FractionOverflow(FractionError, OverflowError):
    """Magnitude числителя или знаменателя превышает MAGNITUDE_MAX."""

    pass


class RootError(FractionError, ValueError):
    """Корень n-й степени не может быть представлен дробью."""

    pass


class EvenRootOfNegative(RootError):
    """Корень чётной степени из отрицательного числа."""

    pass


class NonIntegerRoot(RootError):
    """
    Корень числителя или знаменателя не является целым.

    Иррациональные результаты намеренно не представляются:
    ленивого/символьного представления корня нет.
    """

    pass


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак дроби"""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def factor(self) -> int:
        """Знак как множитель ±1."""
        return -1 if self is Sign.NEGATIVE else 1

    @classmethod
    def from_factor(cls, factor: int) -> "Sign":
        return cls.NEGATIVE if factor < 0 else cls.POSITIVE

    def flipped(self) -> "Sign":
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE

    def combine(self, other: "Sign") -> "Sign":
        """Знак произведения/частного: одинаковые → POSITIVE, разные → NEGATIVE."""
        return Sign.POSITIVE if self is other else Sign.NEGATIVE


class RootMode(str, Enum):
    """Режим проверки целочисленности корня n-й степени"""

    # Точный целочисленный корень (Newton на int)
    EXACT = "exact"
    # Float-эвристика value^(1/n) с допуском root_tolerance
    APPROXIMATE = "approximate"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FractionConfig:
    """Конфигурация операций Fraction.

    root_mode:
    - EXACT: точная проверка r**n == value (default)
    - APPROXIMATE: |value^(1/n) - round(value^(1/n))| <= root_tolerance,
      совместимо с float-эвристикой, ошибается на больших magnitudes
    """

    root_mode: RootMode = RootMode.EXACT
    root_tolerance: float = NTH_ROOT_EPS


DEFAULT_FRACTION_CONFIG: Final[FractionConfig] = FractionConfig()


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное число в sign-magnitude представлении.

    Immutable модель (frozen=True): каждая операция возвращает новый
    экземпляр. Для создания используйте конструкторы new / from_number /
    from_string, а не прямой вызов с отрицательными значениями.

    Examples:
        >>> str(Fraction.new(7, 3))
        '2 1/3'
        >>> str(Fraction.new(1, 2).add(Fraction.new(-3, 4)).simplify())
        '-1/4'
    """

    numerator: int = Field(
        ..., ge=0, le=MAGNITUDE_MAX, strict=True, description="Magnitude числителя"
    )
    denominator: int = Field(
        ..., gt=0, le=MAGNITUDE_MAX, strict=True, description="Magnitude знаменателя"
    )
    sign: Sign = Field(default=Sign.POSITIVE, description="Знак значения")

    model_config = {"frozen": True}  # Immutable

    @field_validator("sign")
    @classmethod
    def validate_canonical_zero(cls, v: Sign, info: ValidationInfo) -> Sign:
        """
        Канонический ноль: нулевой числитель всегда хранится с POSITIVE.

        Отрицательного нуля не существует.
        """
        if info.data.get("numerator") == 0:
            return Sign.POSITIVE
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _build(cls, numerator: int, denominator: int, sign: Sign) -> "Fraction":
        """Сборка из magnitudes с проверкой нуля и диапазона."""
        if denominator == 0:
            raise DivisionByZero("division by zero")

        for name, value in (("numerator", numerator), ("denominator", denominator)):
            if value > MAGNITUDE_MAX:
                raise FractionOverflow(
                    f"{name} magnitude {value} exceeds {MAGNITUDE_MAX}"
                )

        return cls(numerator=numerator, denominator=denominator, sign=sign)

    @classmethod
    def new(cls, numerator: int, denominator: int) -> "Fraction":
        """
        Дробь numerator/denominator из знаковых целых.

        Знак отрицательный, если ровно один из аргументов отрицателен
        (сравнение знаков, без вычисления произведения).

        Args:
            numerator: Числитель (любой знак)
            denominator: Знаменатель (любой знак, != 0)

        Returns:
            Fraction с абсолютными magnitudes

        Raises:
            DivisionByZero: Если denominator == 0
            TypeError: Если аргументы не int

        Examples:
            >>> Fraction.new(-4, 2).as_integer_ratio_string()
            '-4/2'
            >>> Fraction.new(3, -4).sign
            <Sign.NEGATIVE: 'negative'>
        """
        _require_int(numerator, "numerator")
        _require_int(denominator, "denominator")

        if denominator == 0:
            raise DivisionByZero("division by zero")

        negative = (numerator < 0) != (denominator < 0)
        return cls._build(
            abs_value(numerator),
            abs_value(denominator),
            Sign.NEGATIVE if negative else Sign.POSITIVE,
        )

    @classmethod
    def from_number(cls, value: Union[int, float]) -> "Fraction":
        """
        Дробь из int или float.

        int → value/1. float → точная десятичная дробь по минимальному
        десятичному представлению значения (а не по двоичному приближению):
        numerator = цифры без точки, denominator = 10^(число знаков после точки).
        Результат не упрощается.

        Args:
            value: int или конечный float

        Returns:
            Fraction

        Raises:
            NonFiniteValue: Если value NaN или Inf
            FractionOverflow: Если десятичное представление выходит за MAGNITUDE_MAX
            TypeError: Если value не int/float

        Examples:
            >>> Fraction.from_number(0.125).as_integer_ratio_string()
            '125/1000'
            >>> Fraction.from_number(5).as_integer_ratio_string()
            '5/1'
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"value must be an int or float, got {type(value).__name__}")

        if isinstance(value, int):
            return cls.new(value, 1)

        if not is_valid_float(value):
            raise NonFiniteValue(f"cannot represent {value!r} as a fraction")

        if value == 0:
            return cls.new(0, 1)

        # repr даёт кратчайшее round-trip представление, normalize убирает
        # хвостовые нули, "f" раскрывает экспоненту: 1e-07 → "0.0000001"
        text = format(Decimal(repr(value)).normalize(), "f")

        decimal_places = 0
        point = text.find(".")
        if point >= 1:
            decimal_places = len(text) - point - 1

        return cls.new(int(text.replace(".", "", 1)), pow_int(10, decimal_places))

    @classmethod
    def from_string(cls, text: str) -> "Fraction":
        """
        Разбор строки вида "a / b".

        Грамматика: \\s*(NUM)\\s*/\\s*(NUM)\\s*, где
        NUM = [+-]?(\\d+\\.?\\d*|\\.\\d+)([eE][+-]?\\d+)?

        - Если ни один литерал не содержит '.', 'e', 'E' — оба разбираются
          как int и передаются в new (результат не упрощается)
        - Иначе оба разбираются как float, конвертируются через from_number,
          делятся и упрощаются

        Args:
            text: Строковое выражение дроби

        Returns:
            Fraction

        Raises:
            FractionParseError: При несоответствии грамматике, ошибке
                разбора литерала или целом литерале вне MAGNITUDE_MAX
            DivisionByZero: Если знаменатель равен нулю

        Examples:
            >>> Fraction.from_string(" -3 / 4 ").evaluate()
            -0.75
            >>> str(Fraction.from_string("1.5 / 0.5"))
            '3'
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        match = FRACTION_PATTERN.fullmatch(text)
        if match is None:
            logger.debug("Rejected fraction literal %r", text)
            raise FractionParseError(f"invalid fraction format: {text!r}")

        numerator_text, denominator_text = match.group(1), match.group(2)

        if not (FLOAT_MARKERS & set(numerator_text + denominator_text)):
            numerator = int(numerator_text)
            denominator = int(denominator_text)
            for literal in (numerator, denominator):
                if abs_value(literal) > MAGNITUDE_MAX:
                    logger.debug("Integer literal out of range in %r", text)
                    raise FractionParseError(
                        f"integer literal out of range in {text!r}"
                    ) from FractionOverflow(
                        f"literal magnitude {abs_value(literal)} exceeds {MAGNITUDE_MAX}"
                    )
            return cls.new(numerator, denominator)

        try:
            numerator_value = float(numerator_text)
            denominator_value = float(denominator_text)
        except ValueError as e:
            raise FractionParseError(f"invalid float literal in {text!r}") from e

        try:
            numerator_fraction = cls.from_number(numerator_value)
            denominator_fraction = cls.from_number(denominator_value)
        except NonFiniteValue as e:
            logger.debug("Literal out of float range in %r", text)
            raise FractionParseError(f"float literal out of range in {text!r}") from e

        return numerator_fraction.divide(denominator_fraction).simplify()

    # -------------------------------------------------------------------------
    # Упрощение, значение, форматирование
    # -------------------------------------------------------------------------

    def simplify(self) -> "Fraction":
        """
        Деление числителя и знаменателя на их НОД.

        Знак не меняется. Идемпотентно: f.simplify().simplify() == f.simplify().
        """
        divisor = gcd(self.numerator, self.denominator)
        if divisor == 0:
            return self
        return self._build(
            self.numerator // divisor, self.denominator // divisor, self.sign
        )

    def evaluate(self) -> float:
        """Значение дроби как float."""
        value = self.numerator / self.denominator
        if self.sign is Sign.NEGATIVE and self.numerator != 0:
            return -value
        return value

    def signed_numerator(self) -> int:
        """Числитель со знаком дроби."""
        return self.sign.factor * self.numerator

    def to_canonical_string(self) -> str:
        """
        Каноническое представление как смешанной дроби.

        - "{w}" если остаток равен 0
        - "{r}/{d}" если целая часть равна 0
        - "{w} {r}/{d}" иначе
        Префикс "-" для отрицательных. Дробь не упрощается.

        Examples:
            >>> Fraction.new(7, 3).to_canonical_string()
            '2 1/3'
            >>> Fraction.new(2, 4).to_canonical_string()
            '2/4'
        """
        whole, remainder = 0, self.numerator
        if self.numerator >= self.denominator:
            whole, remainder = divmod(self.numerator, self.denominator)

        if remainder == 0:
            result = f"{whole}"
        elif whole == 0:
            result = f"{remainder}/{self.denominator}"
        else:
            result = f"{whole} {remainder}/{self.denominator}"

        if self.sign is Sign.NEGATIVE:
            return f"-{result}"
        return result

    def as_integer_ratio_string(self) -> str:
        """Представление "[-]numerator/denominator" без упрощения."""
        result = f"{self.numerator}/{self.denominator}"
        if self.sign is Sign.NEGATIVE:
            return f"-{result}"
        return result

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Fraction":
        """Смена знака без изменения magnitudes."""
        return self._build(self.numerator, self.denominator, self.sign.flipped())

    def multiply(self, other: "Fraction") -> "Fraction":
        """(a/b)·(c/d) = (a·c)/(b·d), знак = произведение знаков."""
        return self._build(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
            self.sign.combine(other.sign),
        )

    def multiply_integer(self, value: int) -> "Fraction":
        _require_int(value, "value")
        return self.multiply(Fraction.from_number(value))

    def add(self, other: "Fraction") -> "Fraction":
        """
        Сложение через перекрёстное умножение.

        combined = s·a·d + o·c·b (s, o — знаки ±1)
        результат = |combined| / (b·d), знак NEGATIVE iff combined < 0

        Общий знаменатель не ищется: результат можно упростить через simplify.
        """
        combined = (
            self.sign.factor * self.numerator * other.denominator
            + other.sign.factor * other.numerator * self.denominator
        )
        return self._build(
            abs_value(combined),
            self.denominator * other.denominator,
            Sign.NEGATIVE if combined < 0 else Sign.POSITIVE,
        )

    def add_integer(self, value: int) -> "Fraction":
        _require_int(value, "value")
        return self.add(Fraction.from_number(value))

    def subtract(self, other: "Fraction") -> "Fraction":
        """a - b = a + (-b)"""
        return self.add(other.negate())

    def subtract_integer(self, value: int) -> "Fraction":
        _require_int(value, "value")
        return self.subtract(Fraction.from_number(value))

    def divide(self, other: "Fraction") -> "Fraction":
        """
        Деление: (a/b) / (c/d) = (a·d)/(b·c), знак = частное знаков.

        Raises:
            DivisionByZero: Если other имеет нулевое значение
            FractionOverflow: Если результат выходит за MAGNITUDE_MAX
        """
        if other.numerator == 0:
            raise DivisionByZero("division by a zero-valued fraction")

        return self._build(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
            self.sign.combine(other.sign),
        )

    def divide_by_integer(self, value: int) -> "Fraction":
        """
        Деление на целое.

        Raises:
            DivisionByZero: Если value == 0
        """
        _require_int(value, "value")
        if value == 0:
            raise DivisionByZero("division by zero")
        return self.divide(Fraction.from_number(value))

    # -------------------------------------------------------------------------
    # Степень и корень
    # -------------------------------------------------------------------------

    def pow(self, exponent: int) -> "Fraction":
        """
        Возведение в неотрицательную целую степень.

        numerator' = numerator^e, denominator' = denominator^e.
        Отрицательный знак сохраняется только при нечётном e.

        Raises:
            ValueError: Если exponent < 0
            FractionOverflow: Если результат выходит за MAGNITUDE_MAX
        """
        validate_non_negative_int(exponent, "exponent")

        _check_pow_bound(self.numerator, exponent, "numerator")
        _check_pow_bound(self.denominator, exponent, "denominator")

        return self._build(
            pow_int(self.numerator, exponent),
            pow_int(self.denominator, exponent),
            Sign.from_factor(pow_int(self.sign.factor, exponent)),
        )

    def nth_root(
        self, degree: int, config: Optional[FractionConfig] = None
    ) -> "Fraction":
        """
        Корень степени degree.

        Корень извлекается только если и числитель, и знаменатель имеют
        целые корни степени degree. Знак сохраняется (для нечётных степеней).

        Args:
            degree: Степень корня (>= 1)
            config: Режим проверки корня (default: DEFAULT_FRACTION_CONFIG)

        Returns:
            Fraction с корнями magnitudes

        Raises:
            EvenRootOfNegative: Если дробь отрицательна и degree чётная
            NonIntegerRoot: Если корень не представим дробью

        Examples:
            >>> str(Fraction.new(4, 9).nth_root(2))
            '2/3'
            >>> str(Fraction.new(-8, 27).nth_root(3))
            '-2/3'
        """
        validate_positive_int(degree, "degree")
        config = config or DEFAULT_FRACTION_CONFIG

        if self.sign is Sign.NEGATIVE and degree % 2 == 0:
            raise EvenRootOfNegative(
                f"the even root (degree={degree}) of a negative number does not exist"
            )

        if config.root_mode is RootMode.APPROXIMATE:
            has_root = is_nth_root_integer(
                self.numerator, degree, config.root_tolerance
            ) and is_nth_root_integer(self.denominator, degree, config.root_tolerance)
        else:
            has_root = is_exact_nth_power(
                self.numerator, degree
            ) and is_exact_nth_power(self.denominator, degree)

        if not has_root:
            logger.debug(
                "Refused root degree=%d of %s (mode=%s)",
                degree,
                self.as_integer_ratio_string(),
                config.root_mode.value,
            )
            raise NonIntegerRoot(
                f"the root (degree={degree}) of {self.as_integer_ratio_string()} "
                f"does not yield a valid fraction"
            )

        if config.root_mode is RootMode.APPROXIMATE:
            numerator = approximate_nth_root(self.numerator, degree)
            denominator = approximate_nth_root(self.denominator, degree)
        else:
            numerator = integer_nth_root(self.numerator, degree)
            denominator = integer_nth_root(self.denominator, degree)

        return self._build(numerator, denominator, self.sign)

    # -------------------------------------------------------------------------
    # Контракт
    # -------------------------------------------------------------------------

    def to_contract(self) -> dict:
        """Сериализация в JSON-совместимый dict (схема fraction.json)."""
        return self.model_dump(mode="json")

    @classmethod
    def from_contract(cls, data: dict) -> "Fraction":
        """
        Десериализация с валидацией против схемы fraction.json.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_fraction(data)
        return cls.model_validate(data)

    # -------------------------------------------------------------------------
    # Python протоколы
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __float__(self) -> float:
        return self.evaluate()

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __abs__(self) -> "Fraction":
        return self._build(self.numerator, self.denominator, Sign.POSITIVE)

    def __add__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.multiply(self)

    def __truediv__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: object) -> "Fraction":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    def __pow__(self, exponent: object) -> "Fraction":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _coerce(value: object) -> Optional[Fraction]:
    """Fraction или int → Fraction; прочие типы → None (NotImplemented)."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction.from_number(value)
    return None


def _check_pow_bound(value: int, exponent: int, name: str) -> None:
    """
    Ранний отказ до вычисления value**exponent.

    value >= 2^(bits-1), поэтому при (bits-1)·exponent >= 63 степень
    гарантированно больше MAGNITUDE_MAX.
    """
    if value > 1 and (value.bit_length() - 1) * exponent >= 63:
        raise FractionOverflow(
            f"{name} magnitude {value}**{exponent} exceeds {MAGNITUDE_MAX}"
        )


# =============================================================================
# NULL-SAFE ОПЕРАЦИИ (invalid/empty состояние = None)
# =============================================================================


def evaluate(fraction: Optional[Fraction]) -> float:
    """Значение дроби; NaN для None."""
    if fraction is None:
        return float("nan")
    return fraction.evaluate()


def format_fraction(fraction: Optional[Fraction]) -> str:
    """Каноническое представление; "NaN" для None."""
    if fraction is None:
        return "NaN"
    return fraction.to_canonical_string()


def format_integer_ratio(fraction: Optional[Fraction]) -> str:
    """Integer ratio "[-]a/b"; "NaN" для None."""
    if fraction is None:
        return "NaN"
    return fraction.as_integer_ratio_string()


def simplify(fraction: Optional[Fraction]) -> Optional[Fraction]:
    if fraction is None:
        return None
    return fraction.simplify()


def multiply(left: Optional[Fraction], right: Optional[Fraction]) -> Optional[Fraction]:
    if left is None or right is None:
        return None
    return left.multiply(right)


def add(left: Optional[Fraction], right: Optional[Fraction]) -> Optional[Fraction]:
    if left is None or right is None:
        return None
    return left.add(right)


def subtract(left: Optional[Fraction], right: Optional[Fraction]) -> Optional[Fraction]:
    if left is None or right is None:
        return None
    return left.subtract(right)


def divide(left: Optional[Fraction], right: Optional[Fraction]) -> Optional[Fraction]:
    """
    Null-safe деление.

    None пропагируется, но деление на нулевую дробь всё равно
    поднимает DivisionByZero.
    """
    if left is None or right is None:
        return None
    return left.divide(right)


def multiply_integer(fraction: Optional[Fraction], value: int) -> Optional[Fraction]:
    if fraction is None:
        return None
    return fraction.multiply_integer(value)


def add_integer(fraction: Optional[Fraction], value: int) -> Optional[Fraction]:
    if fraction is None:
        return None
    return fraction.add_integer(value)


def subtract_integer(fraction: Optional[Fraction], value: int) -> Optional[Fraction]:
    if fraction is None:
        return None
    return fraction.subtract_integer(value)


def divide_by_integer(fraction: Optional[Fraction], value: int) -> Optional[Fraction]:
    if fraction is None:
        return None
    return fraction.divide_by_integer(value)


def power(fraction: Optional[Fraction], exponent: int) -> Optional[Fraction]:
    """Null-safe Fraction.pow."""
    if fraction is None:
        return None
    return fraction.pow(exponent)


def nth_root(
    fraction: Optional[Fraction],
    degree: int,
    config: Optional[FractionConfig] = None,
) -> Optional[Fraction]:
    """
    Null-safe корень n-й степени.

    None пропагируется; отказ в корне для валидной дроби по-прежнему
    поднимает EvenRootOfNegative / NonIntegerRoot.
    """
    if fraction is None:
        return None
    return fraction.nth_root(degree, config)


def get_numerator(fraction: Optional[Fraction]) -> tuple[int, bool]:
    """
    Числитель со знаком и флаг валидности.

    Returns:
        (signed_numerator, True) или (0, False) для None
    """
    if fraction is None:
        return (0, False)
    return (fraction.signed_numerator(), True)


def get_denominator(fraction: Optional[Fraction]) -> tuple[int, bool]:
    """
    Знаменатель и флаг валидности.

    Returns:
        (denominator, True) или (0, False) для None
    """
    if fraction is None:
        return (0, False)
    return (fraction.denominator, True)
