"""
Vector — Числовой вектор с поэлементной арифметикой

Изменяемый контейнер над списком int или float:
- Конструкторы new / from_value / from_range
- Поэлементная арифметика со смещением (add/subtract/multiply/divide)
- Масштабирование, сумма, произведение, скалярное произведение, норма
- Округление float-элементов

ВАЖНО:
1. Мутирующие методы работают in-place и возвращают self для цепочек.
   Для независимой копии вызывайте clone().
2. from_range всегда возвращает вектор из float.
3. Арифметика со смещением обрабатывает только индексы, общие для обоих
   векторов: элементы за пределами диапазона игнорируются.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Union

from src.core.math.numeric_helpers import (
    round_places,
    validate_non_negative_int,
)

Number = Union[int, float]


@dataclass
class Vector:
    """Числовой вектор (mutable)."""

    elements: List[Number] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, *elements: Number) -> "Vector":
        """Вектор из произвольного числа элементов."""
        return cls(list(elements))

    @classmethod
    def from_value(cls, value: Number, count: int) -> "Vector":
        """
        Вектор из count одинаковых элементов (например, все нули или единицы).

        Raises:
            ValueError: Если count < 0
        """
        validate_non_negative_int(count, "count")
        return cls([value] * count)

    @classmethod
    def from_range(cls, lo: Number, hi: Number, steps: int) -> "Vector":
        """
        Вектор [lo, ..., hi] с steps равномерно распределёнными
        промежуточными элементами.

        При steps == 0 возвращается [lo, hi]. Элементы всегда float.

        Examples:
            >>> Vector.from_range(0, 1, 3).elements
            [0.0, 0.25, 0.5, 0.75, 1.0]
        """
        validate_non_negative_int(steps, "steps")

        f_lo = float(lo)
        f_hi = float(hi)
        width = (f_hi - f_lo) / (steps + 1)
        interior = [f_lo + i * width for i in range(1, steps + 1)]
        return cls([f_lo, *interior, f_hi])

    def clone(self) -> "Vector":
        """Независимая копия вектора."""
        return Vector(list(self.elements))

    # -------------------------------------------------------------------------
    # Протокол последовательности
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Number]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> Number:
        return self.elements[index]

    # -------------------------------------------------------------------------
    # Поэлементная арифметика
    # -------------------------------------------------------------------------

    def _apply(self, other: "Vector", offset: int, operation: str) -> "Vector":
        # Окно индексов [offset, len(self)) ∩ other сдвинутый на offset
        if offset < 0 or offset >= len(self.elements):
            return self

        limit = min(len(self.elements), offset + len(other.elements))
        for index in range(offset, limit):
            value = other.elements[index - offset]
            if operation == "add":
                self.elements[index] += value
            elif operation == "multiply":
                self.elements[index] *= value
            elif operation == "divide":
                self.elements[index] /= value
            else:
                raise ValueError(f"Unknown vector operation: {operation}")
        return self

    def add(self, other: "Vector", offset: int = 0) -> "Vector":
        """
        Поэлементное сложение (in-place).

        При offset > 0 other сдвигается на offset позиций: other[0]
        складывается с self[offset]. Лишние элементы other игнорируются.
        """
        return self._apply(other, offset, "add")

    def subtract(self, other: "Vector", offset: int = 0) -> "Vector":
        """Поэлементное вычитание (in-place), other не изменяется."""
        return self._apply(other.clone().scale(-1), offset, "add")

    def multiply(self, other: "Vector", offset: int = 0) -> "Vector":
        """Поэлементное умножение (in-place)."""
        return self._apply(other, offset, "multiply")

    def divide(self, other: "Vector", offset: int = 0) -> "Vector":
        """
        Поэлементное деление (in-place), всегда true division.

        Raises:
            ZeroDivisionError: Если делитель в окне равен нулю
        """
        return self._apply(other, offset, "divide")

    def scale(self, factor: Number) -> "Vector":
        """Умножение каждого элемента на скаляр (in-place)."""
        self.elements = [value * factor for value in self.elements]
        return self

    # -------------------------------------------------------------------------
    # Редукции
    # -------------------------------------------------------------------------

    def sum(self) -> Number:
        total: Number = 0
        for value in self.elements:
            total += value
        return total

    def product(self) -> Number:
        """Произведение элементов; для пустого вектора 1."""
        result: Number = 1
        for value in self.elements:
            result *= value
        return result

    def dot(self, other: "Vector") -> Number:
        """
        Скалярное произведение.

        Raises:
            ValueError: Если длины векторов различаются
        """
        if len(self.elements) != len(other.elements):
            raise ValueError(
                f"Vector length mismatch: {len(self.elements)} != {len(other.elements)}"
            )
        return sum(a * b for a, b in zip(self.elements, other.elements))

    def magnitude(self) -> float:
        """Евклидова норма: sqrt(v·v)."""
        return math.sqrt(self.dot(self))

    def round(self, precision: int) -> "Vector":
        """
        Округление float-элементов до precision знаков (in-place).

        int-элементы не изменяются.
        """
        validate_non_negative_int(precision, "precision")
        self.elements = [
            round_places(value, precision) if isinstance(value, float) else value
            for value in self.elements
        ]
        return self
