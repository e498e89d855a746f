# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Real matrices with a memoized Gauss-Jordan engine.

A Matrix never changes after construction. Elementary row operations
return a new Matrix; the in-place versions live on
elimination.EliminationWorkspace, which is only used while reducing.

The RREF and inverse are memo cells that start out UNSET. Once computed
they hold either a Matrix, ``None`` (no inverse), or ``self`` when the
matrix is already in RREF / is its own inverse. The cells are written by
a single owner without locking; do not share a Matrix across threads
while its caches are still being filled.
"""

import logging
from numbers import Real
from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import elimination
from .elimination import EliminationWorkspace
from .errors import DimensionMismatchError, InvalidConstructionError, MatrixIndexError
from .utils import (
    DEFAULT_PRECISION,
    UNSET,
    all_zero,
    as_float_array,
    format_entry,
    freeze,
    is_zero,
)
from .vector import Vector

logger = logging.getLogger(__name__)


class Matrix:
    def __init__(self, rows: Sequence[Sequence[float]]):
        self._a = freeze(as_float_array(rows, 2))
        self._rref = UNSET
        self._inverse = UNSET

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls(np.eye(n))

    @classmethod
    def zeros(cls, n: int, m: int) -> "Matrix":
        return cls(np.zeros((n, m)))

    @classmethod
    def from_columns(cls, columns: Sequence[Vector]) -> "Matrix":
        """Matrix whose j-th column is the j-th Vector in standard coordinates."""
        if len(columns) == 0:
            raise InvalidConstructionError("need at least one column vector")
        n = columns[0].in_space()
        if any(v.in_space() != n for v in columns):
            raise InvalidConstructionError(
                "The parameter columns is invalid - all of its Vectors must be "
                "in the same space."
            )
        return cls(np.column_stack([v.to_standard_basis().components for v in columns]))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._a.shape[0]

    @property
    def column_count(self) -> int:
        return self._a.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._a.shape

    @property
    def contents(self) -> np.ndarray:
        """A writable copy of the entries."""
        return self._a.copy()

    def to_list(self) -> List[List[float]]:
        return self._a.tolist()

    def _check_row(self, i: int):
        if not 0 <= i < self.row_count:
            raise MatrixIndexError(i, "row")

    def _check_column(self, j: int):
        if not 0 <= j < self.column_count:
            raise MatrixIndexError(j, "column")

    def value(self, i: int, j: int) -> float:
        self._check_row(i)
        self._check_column(j)
        return float(self._a[i, j])

    def __getitem__(self, index: Tuple[int, int]) -> float:
        i, j = index
        return self.value(i, j)

    def row_vector(self, i: int) -> Vector:
        self._check_row(i)
        return Vector(self._a[i])

    def column_vector(self, j: int) -> Vector:
        self._check_column(j)
        return Vector(self._a[:, j])

    def column_vectors(self) -> List[Vector]:
        return [Vector(self._a[:, j]) for j in range(self.column_count)]

    # ------------------------------------------------------------------
    # Overrides
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._a, other._a))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, precision: int = DEFAULT_PRECISION) -> str:
        """
        One line per row framed by ``|``. Each column is right-aligned to
        its widest entry; whole numbers print without decimals and every
        entry gets thousands separators.
        """
        cells = [
            [format_entry(x, precision, grouping=True) for x in row] for row in self._a
        ]
        widths = [max(len(row[j]) for row in cells) for j in range(self.column_count)]
        lines = []
        for row in cells:
            body = "".join(" " + s.rjust(w) for s, w in zip(row, widths))
            lines.append(f"|{body} |")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_square(self) -> bool:
        return self.row_count == self.column_count

    def _all_zero_where(self, mask: np.ndarray) -> bool:
        return all(is_zero(x) for x in self._a[mask])

    def is_diagonal(self) -> bool:
        if not self.is_square():
            return False
        return self._all_zero_where(~np.eye(self.row_count, dtype=bool))

    def is_upper_triangular(self) -> bool:
        if not self.is_square():
            return False
        return self._all_zero_where(np.tril(np.ones(self.shape, dtype=bool), k=-1))

    def is_lower_triangular(self) -> bool:
        if not self.is_square():
            return False
        return self._all_zero_where(np.triu(np.ones(self.shape, dtype=bool), k=1))

    def is_identity(self) -> bool:
        return self.is_square() and all_zero(self._a - np.eye(self.row_count))

    def is_zero(self) -> bool:
        return all(is_zero(x) for x in self._a.flat)

    def is_rref(self) -> bool:
        return self == self.rref()

    def is_transition_matrix(self, positive: bool = False) -> bool:
        """Every column is a (positive) distribution vector."""
        return all(v.is_distribution_vector(positive) for v in self.column_vectors())

    def is_positive_transition_matrix(self) -> bool:
        return self.is_transition_matrix(positive=True)

    def is_invertible(self) -> bool:
        return self.is_square() and self.rank() == self.row_count

    def is_consistent(self, augment: Optional[Vector] = None) -> bool:
        """
        Treat this Matrix (or this Matrix augmented with `augment`) as an
        augmented system and report whether it has any solution.
        """
        if augment is not None:
            return self.augment(augment).is_consistent()
        return elimination.rref_is_consistent(self.rref()._a)

    # ------------------------------------------------------------------
    # Elementary row operations
    # ------------------------------------------------------------------

    def _row_op(self, op: str, *args) -> "Matrix":
        W = EliminationWorkspace(self._a)
        getattr(W, op)(*args)
        return Matrix(W.A)

    def swap_rows(self, i1: int, i2: int) -> "Matrix":
        return self._row_op("swap_rows", i1, i2)

    def divide_row(self, i: int, scalar: float) -> "Matrix":
        return self._row_op("divide_row", i, scalar)

    def subtract_row(self, target: int, multiple: float, source: int) -> "Matrix":
        return self._row_op("subtract_row", target, multiple, source)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Matrix") -> "Matrix":
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot add or subtract Matrices of different dimensions "
                f"({self.shape} vs {other.shape})."
            )
        return Matrix(self._a + other._a)

    def subtract(self, other: "Matrix") -> "Matrix":
        return self.add(other.multiply(-1))

    def _multiply_vector(self, x: np.ndarray) -> np.ndarray:
        # i-th entry is row i dotted with x
        return np.array([float(row @ x) for row in self._a])

    def multiply(self, other, basis=None):
        """
        Multiply by a scalar, a Vector or a Matrix.

        A Vector is multiplied through its coordinates; the result is a
        Vector expressed in `basis` (standard basis when omitted). A Matrix
        product is built column by column and is not commutative.
        """
        if isinstance(other, Matrix):
            if self.column_count != other.row_count:
                raise DimensionMismatchError(
                    "The number of columns in the first Matrix must match the "
                    "number of rows in the second to multiply them."
                )
            columns = [self._multiply_vector(other._a[:, j]) for j in range(other.column_count)]
            return Matrix(np.column_stack(columns))
        if isinstance(other, Vector):
            if self.column_count != len(other):
                raise DimensionMismatchError(
                    f"The number of columns in this Matrix ({self.column_count}) "
                    f"must match the number of components in the Vector ({len(other)})."
                )
            return Vector(self._multiply_vector(other.components), basis)
        if isinstance(other, Real):
            return Matrix(self._a * other)
        raise TypeError(f"cannot multiply a Matrix by {type(other).__name__}")

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.multiply(-1)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.multiply(other)

    def transpose(self) -> "Matrix":
        return Matrix(self._a.T)

    def augment(self, column: Vector) -> "Matrix":
        """Append `column` as one extra column (coefficient -> augmented)."""
        if self.row_count != len(column):
            raise DimensionMismatchError(
                "Can only augment a Matrix with a column Vector which has the "
                "same number of components as the Matrix does rows."
            )
        return Matrix(np.column_stack([self._a, column.components]))

    def append(self, other: "Matrix") -> "Matrix":
        """Concatenate the columns of `other` to the right of this Matrix."""
        if self.row_count != other.row_count:
            raise DimensionMismatchError(
                f"Cannot append a Matrix with {other.row_count} rows to one "
                f"with {self.row_count} rows."
            )
        return Matrix(np.hstack([self._a, other._a]))

    def splice(self, start: int, end: Optional[int] = None) -> "Matrix":
        """Columns start (inclusive) through end (exclusive, default: last)."""
        if end is None:
            end = self.column_count
        self._check_column(start)
        if not start < end <= self.column_count:
            raise MatrixIndexError(end, "column")
        return Matrix(self._a[:, start:end])

    # ------------------------------------------------------------------
    # Elimination
    # ------------------------------------------------------------------

    def rref(self) -> "Matrix":
        """Reduced row echelon form, computed once and cached."""
        if self._rref is UNSET:
            R, _pivots = elimination.rref(self._a)
            if all_zero(R - self._a):
                self._rref = self
            else:
                reduced = Matrix(R)
                reduced._rref = reduced
                self._rref = reduced
        return self._rref

    def rank(self, augmented: bool = False) -> int:
        """
        Number of pivot columns in the RREF. With `augmented` the last
        column is ignored so an inconsistent row is not counted.
        """
        return elimination.rank_from_rref(self.rref()._a, augmented=augmented)

    def nullity(self) -> int:
        return self.column_count - self.rank()

    def nullspace(self) -> List[Vector]:
        """
        Coordinate vectors spanning the null space, one per free column.
        Empty when the columns are independent.
        """
        N = elimination.rref_nullspace(self.rref()._a)
        return [Vector(N[:, k]) for k in range(N.shape[1])]

    def inverse(self) -> Optional["Matrix"]:
        """The inverse, or None if this Matrix is not invertible. Cached."""
        if self._inverse is UNSET:
            inv = elimination.inverse_elimination(self._a)
            if inv is None:
                self._inverse = None
            elif all_zero(inv - self._a):
                self._inverse = self
            else:
                inverse = Matrix(inv)
                inverse._inverse = self
                self._inverse = inverse
        return self._inverse

    def find_solution(self, augment: Optional[Vector] = None) -> Optional[Vector]:
        """
        Treat this Matrix as an augmented system (or augment it with
        `augment` first) and return its solution if it is unique.

        Returns None if there is no solution or infinitely many.
        """
        if augment is not None:
            return self.augment(augment).find_solution()
        x = elimination.rref_solution(self.rref()._a)
        if x is None:
            return None
        return Vector(x)
