# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vectors in R^n, optionally expressed relative to a Basis.

A Vector is immutable. Its components are coordinates with respect to its
basis (``None`` means the standard basis), so two Vectors with different
components can still be equal when they name the same point.
"""

import functools
import logging
import math
from numbers import Real
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from . import elimination
from .errors import (
    DimensionMismatchError,
    InvalidConstructionError,
    VectorIndexError,
)
from .utils import DEFAULT_PRECISION, as_float_array, format_entry, freeze, is_zero

if TYPE_CHECKING:
    from .basis import Basis

logger = logging.getLogger(__name__)


class Vector:
    def __init__(self, components: Sequence[float], basis: Optional["Basis"] = None):
        c = as_float_array(components, 1)
        if basis is not None and len(basis) != c.shape[0]:
            raise InvalidConstructionError(
                f"a basis of {len(basis)} vectors needs {len(basis)} "
                f"coordinates, got {c.shape[0]}"
            )
        self._c = freeze(c)
        self._basis = basis

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def components(self) -> np.ndarray:
        """Coordinates relative to `basis` (a copy)."""
        return self._c.copy()

    @property
    def basis(self) -> Optional["Basis"]:
        return self._basis

    def component(self, i: int) -> float:
        if not 0 <= i < self._c.shape[0]:
            raise VectorIndexError(i)
        return float(self._c[i])

    def __getitem__(self, i: int) -> float:
        return self.component(i)

    def __len__(self) -> int:
        return self._c.shape[0]

    def __iter__(self):
        return (float(x) for x in self._c)

    def in_space(self) -> int:
        """Dimension of the ambient space R^n this Vector lives in."""
        if self._basis is None:
            return self._c.shape[0]
        return self._basis.in_space()

    def _standard(self) -> np.ndarray:
        """Components with respect to the standard basis."""
        if self._basis is None:
            return self._c
        return self._basis.as_array() @ self._c

    # ------------------------------------------------------------------
    # Overrides
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """
        Basis-independent equality: `other` is first re-expressed in this
        Vector's basis, then compared component by component.
        """
        if self is other:
            return True
        if not isinstance(other, Vector):
            return NotImplemented
        try:
            converted = other.to_basis(self._basis)
        except DimensionMismatchError:
            return False
        return bool(np.array_equal(self._c, converted._c))

    __hash__ = None

    def __repr__(self) -> str:
        comps = ", ".join(repr(float(x)) for x in self._c)
        if self._basis is None:
            return f"{self.__class__.__name__}([{comps}])"
        return f"{self.__class__.__name__}([{comps}], basis={self._basis!r})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, precision: int = DEFAULT_PRECISION) -> str:
        return "<" + ", ".join(format_entry(x, precision) for x in self._c) + ">"

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_zero_vector(self) -> bool:
        return all(is_zero(x) for x in self._c)

    def is_scalar_multiple_of(self, other: "Vector") -> bool:
        """
        True if `other` is k * self for some scalar k, i.e. the two are
        parallel or antiparallel. The zero vector is only a multiple of
        itself.
        """
        a, b = self._standard(), other._standard()
        if a.shape != b.shape:
            return False
        if self.is_zero_vector():
            return other.is_zero_vector()

        multiplier = 0.0
        for x, y in zip(a, b):
            if not is_zero(x):
                multiplier = y / x
                break
        return all(is_zero(x * multiplier - y) for x, y in zip(a, b))

    def is_orthogonal_to(self, other: "Vector") -> bool:
        return is_zero(self.dot_product(other))

    def is_linear_combination_of(self, vectors: Sequence["Vector"]) -> bool:
        """
        True if this Vector lies in the span of `vectors`, i.e. the system
        with `vectors` as coefficient columns and this Vector as the
        right-hand side is consistent. False for an empty candidate set.
        """
        if len(vectors) == 0:
            return False
        n = self.in_space()
        for v in vectors:
            if v.in_space() != n:
                raise DimensionMismatchError(
                    f"cannot combine vectors from {v.in_space()}-space "
                    f"into a vector in {n}-space"
                )
        A = np.column_stack([v._standard() for v in vectors])
        return elimination.is_consistent(A, self._standard())

    def is_distribution_vector(self, positive: bool = False) -> bool:
        """
        All components are >= 0 (> 0 if `positive`) and sum to 1.
        """
        total = 0.0
        for x in self._standard():
            if is_zero(x):
                if positive:
                    return False
            elif x < 0:
                return False
            total += x
        return is_zero(total - 1)

    def is_positive_distribution_vector(self) -> bool:
        return self.is_distribution_vector(positive=True)

    # ------------------------------------------------------------------
    # Vector operations
    # ------------------------------------------------------------------

    def _check_same_space(self, other: "Vector", op: str):
        if not isinstance(other, Vector):
            raise TypeError(f"cannot {op} a Vector and {type(other).__name__}")
        if self.in_space() != other.in_space():
            raise DimensionMismatchError(
                f"Cannot {op} Vectors that are not in the same space "
                f"({self.in_space()} vs {other.in_space()})."
            )

    def dot_product(self, other: "Vector") -> float:
        self._check_same_space(other, "take the dot product of")
        total = 0.0
        for x, y in zip(self._standard(), other._standard()):
            total += x * y
        return float(total)

    def length(self) -> float:
        return math.sqrt(self.dot_product(self))

    def add(self, other: "Vector") -> "Vector":
        """Sum, expressed in this Vector's basis."""
        self._check_same_space(other, "add")
        rhs = other.to_basis(self._basis)
        return Vector(self._c + rhs._c, self._basis)

    def subtract(self, other: "Vector") -> "Vector":
        self._check_same_space(other, "subtract")
        rhs = other.to_basis(self._basis)
        return Vector(self._c - rhs._c, self._basis)

    def scalar_multiply(self, scalar: float) -> "Vector":
        return Vector(self._c * scalar, self._basis)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.scalar_multiply(-1)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    # ------------------------------------------------------------------
    # Change of basis
    # ------------------------------------------------------------------

    def to_basis(self, new_basis: Optional["Basis"]) -> "Vector":
        """
        Re-express this Vector in `new_basis` (``None`` for the standard
        basis) by solving  S_new x = S_old c.

        Raises DimensionMismatchError if the bases live in different
        spaces or the Vector is not in the span of `new_basis`.
        """
        if new_basis is self._basis:
            return self
        y = self._standard()
        if new_basis is None:
            return Vector(y)
        if new_basis.in_space() != y.shape[0]:
            raise DimensionMismatchError(
                f"cannot express a vector in {y.shape[0]}-space in a basis "
                f"of {new_basis.in_space()}-space"
            )
        if len(new_basis) == 0:
            raise DimensionMismatchError("the zero subspace has no coordinates")

        x = elimination.gaussian_solve(new_basis.as_array(), y)
        if x is None:
            raise DimensionMismatchError(
                "vector does not lie in the span of the target basis"
            )
        logger.debug(f"{self} -> {x} in a basis of length {len(new_basis)}")
        return Vector(x, new_basis)

    def to_standard_basis(self) -> "Vector":
        return self.to_basis(None)

    # ------------------------------------------------------------------
    # Vector sets
    # ------------------------------------------------------------------

    @staticmethod
    def are_linearly_independent(vectors: Sequence["Vector"]) -> bool:
        """
        True iff the null space of the matrix whose columns are `vectors`
        (in standard coordinates) is {0}. An empty set is independent.
        """
        if len(vectors) == 0:
            return True
        n = vectors[0].in_space()
        if any(v.in_space() != n for v in vectors):
            raise InvalidConstructionError("All the vectors must be in the same space.")
        A = np.column_stack([v._standard() for v in vectors])
        return elimination.rank_elimination(A) == A.shape[1]

    @staticmethod
    def remove_redundant(vectors: Sequence["Vector"]) -> List["Vector"]:
        """
        Greedy left-to-right scan that keeps a vector only if it is non-zero
        and not a linear combination of the vectors kept so far.
        """
        kept: List[Vector] = []
        for v in vectors:
            if v.is_zero_vector() or v.is_linear_combination_of(kept):
                continue
            kept.append(v)
        return kept


@functools.lru_cache(maxsize=None)
def zero_vector(n: int) -> Vector:
    """The zero vector of R^n (memoized; Vectors are immutable)."""
    if n < 1:
        raise InvalidConstructionError(f"a vector needs at least one component, got {n}")
    return Vector(np.zeros(n))


@functools.lru_cache(maxsize=None)
def standard_vector(n: int, i: int) -> Vector:
    """e_i of R^n, 0-indexed."""
    if n < 1:
        raise InvalidConstructionError(f"a vector needs at least one component, got {n}")
    if not 0 <= i < n:
        raise VectorIndexError(i)
    components = np.zeros(n)
    components[i] = 1.0
    return Vector(components)
