"""Dense row-major matrix implemented with only the Python standard library."""
from __future__ import annotations

import math
import random
from typing import Callable, List, Sequence

from .errors import DimensionMismatch, InvalidDimension

Grid = List[List[float]]
Vector = List[float]


def _check_size(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimension(f"{name} must be positive, got {value}")


class Matrix:
    """A fixed-shape grid of floats.

    Operations named ``*_in_place``, ``add_*``, ``multiply_*`` and
    :meth:`randomize_uniform` mutate the receiver and return ``None``. The
    static methods always allocate a new matrix and leave their operands
    untouched.
    """

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int) -> None:
        _check_size("rows", rows)
        _check_size("cols", cols)
        self.rows = rows
        self.cols = cols
        self.data: Grid = [[0.0 for _ in range(cols)] for _ in range(rows)]

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def from_vector(cls, values: Sequence[float]) -> Matrix:
        """Return a ``len(values) x 1`` column holding ``values`` in order."""

        if len(values) == 0:
            raise InvalidDimension("cannot build a column from an empty vector")
        result = cls(len(values), 1)
        for i, value in enumerate(values):
            result.data[i][0] = float(value)
        return result

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        if len(rows) == 0 or len(rows[0]) == 0:
            raise InvalidDimension("cannot build a matrix from empty rows")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimension(
                    f"row {index} has {len(row)} entries, expected {width}"
                )
        result = cls(len(rows), width)
        result.data = [[float(value) for value in row] for row in rows]
        return result

    @classmethod
    def identity(cls, size: int) -> Matrix:
        result = cls(size, size)
        for i in range(size):
            result.data[i][i] = 1.0
        return result

    def copy(self) -> Matrix:
        result = Matrix(self.rows, self.cols)
        result.data = [row.copy() for row in self.data]
        return result

    # ------------------------------------------------------------------
    # inspection
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def get(self, row: int, col: int) -> float:
        return self.data[row][col]

    def to_vector(self) -> Vector:
        """Flatten the entries in row-major order."""

        return [value for row in self.data for value in row]

    def allclose(self, other: Matrix, tol: float = 1e-9) -> bool:
        self._require_same_shape(other, "compare")
        return all(
            math.isclose(va, vb, rel_tol=tol, abs_tol=tol)
            for row_a, row_b in zip(self.data, other.data)
            for va, vb in zip(row_a, row_b)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.data!r})"

    # ------------------------------------------------------------------
    # in-place operations
    # ------------------------------------------------------------------
    def randomize_uniform(self, rng: random.Random | None = None) -> None:
        """Fill with Xavier/Glorot uniform samples on ``[-limit, limit]``.

        ``limit = sqrt(6 / (rows + cols))``. Samples come from the
        process-wide :mod:`random` state unless ``rng`` is given.
        """

        source = rng if rng is not None else random
        limit = math.sqrt(6.0 / (self.rows + self.cols))
        self.data = [
            [source.uniform(-limit, limit) for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def add_matrix(self, other: Matrix) -> None:
        self._require_same_shape(other, "add")
        for row, other_row in zip(self.data, other.data):
            for j, value in enumerate(other_row):
                row[j] += value

    def add_scalar(self, value: float) -> None:
        for row in self.data:
            for j in range(self.cols):
                row[j] += value

    def multiply_matrix(self, other: Matrix) -> None:
        """Hadamard (elementwise) product with ``other``."""

        self._require_same_shape(other, "multiply elementwise")
        for row, other_row in zip(self.data, other.data):
            for j, value in enumerate(other_row):
                row[j] *= value

    def multiply_scalar(self, value: float) -> None:
        for row in self.data:
            for j in range(self.cols):
                row[j] *= value

    def map_in_place(self, fn: Callable[[float], float]) -> None:
        self.data = [[fn(value) for value in row] for row in self.data]

    # ------------------------------------------------------------------
    # allocating operations
    # ------------------------------------------------------------------
    @staticmethod
    def subtract(a: Matrix, b: Matrix) -> Matrix:
        """Return ``a - b`` elementwise."""

        a._require_same_shape(b, "subtract")
        result = Matrix(a.rows, a.cols)
        result.data = [
            [va - vb for va, vb in zip(row_a, row_b)]
            for row_a, row_b in zip(a.data, b.data)
        ]
        return result

    @staticmethod
    def matmul(a: Matrix, b: Matrix) -> Matrix:
        """Standard matrix product of an ``m x k`` and a ``k x n`` matrix."""

        if a.cols != b.rows:
            raise DimensionMismatch(f"cannot multiply {a.shape} by {b.shape}")
        result = Matrix(a.rows, b.cols)
        for i in range(a.rows):
            a_row = a.data[i]
            out_row = result.data[i]
            for k in range(a.cols):
                aik = a_row[k]
                b_row = b.data[k]
                for j in range(b.cols):
                    out_row[j] += aik * b_row[j]
        return result

    @staticmethod
    def transpose(m: Matrix) -> Matrix:
        result = Matrix(m.cols, m.rows)
        result.data = [list(col) for col in zip(*m.data)]
        return result

    @staticmethod
    def map_to_new(m: Matrix, fn: Callable[[float], float]) -> Matrix:
        result = Matrix(m.rows, m.cols)
        result.data = [[fn(value) for value in row] for row in m.data]
        return result

    def _require_same_shape(self, other: Matrix, action: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatch(f"cannot {action} {self.shape} and {other.shape}")


__all__ = ["Matrix", "Grid", "Vector"]
