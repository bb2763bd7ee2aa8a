"""Dense square matrices of floats with arithmetic operators."""

from __future__ import annotations

import numbers
import operator
from typing import Iterator, List


def _trunc_mod(value: float, modulus: int) -> float:
    """Truncate ``value`` toward zero, then take a remainder with the dividend's sign."""
    whole = int(value)
    remainder = abs(whole) % modulus
    return float(-remainder if whole < 0 else remainder)


class SquareMat:
    """A square matrix of floats, zero-initialised.

    Equality and ordering compare the sums of all elements.
    """

    __hash__ = None  # mutable, and equality is not identity

    def __init__(self, size: int) -> None:
        if not isinstance(size, numbers.Integral) or isinstance(size, bool):
            raise TypeError("size must be an integer")
        if size <= 0:
            raise ValueError("size must be greater than 0")
        self._rows: List[List[float]] = [[0.0] * size for _ in range(size)]

    @classmethod
    def _from_rows(cls, rows: List[List[float]]) -> "SquareMat":
        result = cls.__new__(cls)
        result._rows = rows
        return result

    @property
    def size(self) -> int:
        """Number of rows (and of columns)."""
        return len(self._rows)

    def _values(self) -> Iterator[float]:
        for row in self._rows:
            yield from row

    def _total(self) -> float:
        total = 0.0
        for value in self._values():
            total += value
        return total

    def _check_same_size(self, other: "SquareMat") -> None:
        if self.size != other.size:
            raise ValueError("matrix sizes must be the same")

    def _map(self, func) -> "SquareMat":
        return self._from_rows([[func(v) for v in row] for row in self._rows])

    def _zip_map(self, other: "SquareMat", func) -> "SquareMat":
        self._check_same_size(other)
        return self._from_rows(
            [list(map(func, mine, theirs)) for mine, theirs in zip(self._rows, other._rows)]
        )

    def _matmul(self, other: "SquareMat") -> "SquareMat":
        self._check_same_size(other)
        columns = list(zip(*other._rows))
        return self._from_rows(
            [[sum(map(operator.mul, row, col), 0.0) for col in columns] for row in self._rows]
        )

    def copy(self) -> "SquareMat":
        """Return an independent copy."""
        return self._from_rows([list(row) for row in self._rows])

    def assign(self, other: "SquareMat") -> "SquareMat":
        """Replace this matrix's contents (and size) with a copy of ``other``."""
        if other is not self:
            self._rows = [list(row) for row in other._rows]
        return self

    # Arithmetic -----------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._zip_map(other, operator.add)

    def __sub__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._zip_map(other, operator.sub)

    def __neg__(self) -> "SquareMat":
        return self._map(operator.neg)

    def __mul__(self, other):
        if isinstance(other, SquareMat):
            return self._matmul(other)
        if isinstance(other, numbers.Real):
            if other == 0:
                return SquareMat(self.size)
            if other == 1:
                return self.copy()
            if other == -1:
                return -self
            return self._map(lambda v: other * v)
        return NotImplemented

    def __rmul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._map(lambda v: scalar * v)

    def __mod__(self, other):
        """Element-wise product with a matrix, or truncating modulo by a positive int."""
        if isinstance(other, SquareMat):
            return self._zip_map(other, operator.mul)
        if isinstance(other, numbers.Integral):
            if other <= 0:
                raise ValueError("modulus must be positive")
            return self._map(lambda v: _trunc_mod(v, other))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("scalar must be different than 0")
        return self._map(lambda v: v / scalar)

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        result = SquareMat(self.size)
        for i, row in enumerate(result._rows):
            row[i] = 1.0
        current = self.copy()
        while exponent > 0:
            if exponent % 2 == 1:
                result = result._matmul(current)
            current = current._matmul(current)
            exponent //= 2
        return result

    def __xor__(self, exponent):
        return self.__pow__(exponent)

    # Increment / decrement ------------------------------------------------

    def _shift(self, delta: float) -> None:
        for row in self._rows:
            row[:] = [v + delta for v in row]

    def increment(self) -> "SquareMat":
        """Add 1 to every element in place and return this matrix."""
        self._shift(1.0)
        return self

    def decrement(self) -> "SquareMat":
        """Subtract 1 from every element in place and return this matrix."""
        self._shift(-1.0)
        return self

    def post_increment(self) -> "SquareMat":
        """Add 1 to every element in place and return a copy of the old value."""
        previous = self.copy()
        self._shift(1.0)
        return previous

    def post_decrement(self) -> "SquareMat":
        """Subtract 1 from every element in place and return a copy of the old value."""
        previous = self.copy()
        self._shift(-1.0)
        return previous

    # Structure ------------------------------------------------------------

    def transpose(self) -> "SquareMat":
        """Return the transpose."""
        return self._from_rows([list(col) for col in zip(*self._rows)])

    def __invert__(self) -> "SquareMat":
        return self.transpose()

    def __getitem__(self, index: int) -> List[float]:
        """Return row ``index`` as a mutable list; negative indices are rejected."""
        if not isinstance(index, numbers.Integral):
            raise TypeError("row index must be an integer")
        if not 0 <= index < self.size:
            raise IndexError("index out of bounds")
        return self._rows[index]

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return self.size

    # Comparison by element sum ---------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._total() == other._total()

    def __ne__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self == other

    def __lt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._total() < other._total()

    def __le__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not other < self

    def __gt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return other < self

    def __ge__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self < other

    # Minor and determinant --------------------------------------------------

    def minor(self, row: int, col: int) -> "SquareMat":
        """Return the matrix with ``row`` and ``col`` removed."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError("index out of bounds - check row or col")
        if self.size == 1:
            raise ValueError("size must be greater than 0")
        return self._from_rows(
            [
                [v for j, v in enumerate(values) if j != col]
                for i, values in enumerate(self._rows)
                if i != row
            ]
        )

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row.

        For sizes above 2 the running total is truncated to an integer after
        every term.
        """
        m = self._rows
        if self.size == 1:
            return m[0][0]
        if self.size == 2:
            return m[0][0] * m[1][1] - m[0][1] * m[1][0]
        det = 0
        for i, value in enumerate(m[0]):
            sign = 1 if i % 2 == 0 else -1
            det = int(det + sign * value * self.minor(0, i).determinant())
        return float(det)

    # In-place operators -----------------------------------------------------

    def __iadd__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._rows = self._zip_map(other, operator.add)._rows
        return self

    def __isub__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._rows = self._zip_map(other, operator.sub)._rows
        return self

    def __imul__(self, other):
        if isinstance(other, SquareMat):
            self._rows = self._matmul(other)._rows
            return self
        if isinstance(other, numbers.Real):
            if other == 0:
                self._rows = SquareMat(self.size)._rows
            elif self.size != 1:
                self._rows = [[v * other for v in row] for row in self._rows]
            return self
        return NotImplemented

    def __imod__(self, other):
        result = self.__mod__(other)
        if result is NotImplemented:
            return NotImplemented
        self._rows = result._rows
        return self

    def __itruediv__(self, scalar):
        result = self.__truediv__(scalar)
        if result is NotImplemented:
            return NotImplemented
        self._rows = result._rows
        return self

    # Display ------------------------------------------------------------------

    def __str__(self) -> str:
        lines = [f"Matrix ({self.size}x{self.size})\n"]
        for row in self._rows:
            cells = "".join("%3g " % v for v in row)
            lines.append(f"|{cells}|\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"SquareMat.from({self._rows!r})"