# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Bases of subspaces of R^n.
"""

import functools
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatchError, InvalidConstructionError
from .matrix import Matrix
from .utils import all_zero, freeze
from .vector import Vector, standard_vector


class Basis:
    """
    An ordered set of linearly independent Vectors, all in R^n.

    The vectors are stored in standard coordinates, so a Basis does not
    depend on the bases its inputs were expressed in. An empty Basis is
    the basis of the zero subspace and needs `in_space` to say which R^n
    it lives in.
    """

    def __init__(self, vectors: Sequence[Vector], in_space: Optional[int] = None):
        vectors = list(vectors)
        if not vectors:
            if in_space is None or in_space < 1:
                raise InvalidConstructionError(
                    "An empty basis needs the dimension of its ambient space."
                )
            n = in_space
        else:
            n = vectors[0].in_space()
            if any(v.in_space() != n for v in vectors):
                raise InvalidConstructionError("All the vectors must be in the same space.")
            if in_space is not None and in_space != n:
                raise InvalidConstructionError(
                    f"Vectors in {n}-space cannot form a basis of {in_space}-space."
                )
            if not Vector.are_linearly_independent(vectors):
                raise InvalidConstructionError(
                    "All the vectors must be linearly independent to form a basis."
                )

        self._vectors: Tuple[Vector, ...] = tuple(v.to_standard_basis() for v in vectors)
        self._n = n
        if self._vectors:
            S = np.column_stack([v.components for v in self._vectors])
        else:
            S = np.zeros((n, 0))
        self._S = freeze(S)

    @property
    def vectors(self) -> Tuple[Vector, ...]:
        return self._vectors

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._vectors)

    def __getitem__(self, i: int) -> Vector:
        return self._vectors[i]

    def length(self) -> int:
        """Number of vectors, i.e. the dimension of the spanned subspace."""
        return len(self._vectors)

    def in_space(self) -> int:
        """n, the dimension of the space the basis vectors live in."""
        return self._n

    def as_array(self) -> np.ndarray:
        """Read-only (n, length) array with the basis vectors as columns."""
        return self._S

    def as_matrix(self) -> Matrix:
        """The change-of-basis matrix S whose columns are the basis vectors."""
        if not self._vectors:
            raise InvalidConstructionError("The zero subspace has no basis matrix.")
        return Matrix(self._S)

    def __eq__(self, other: object) -> bool:
        """Literal equality: the same vectors in the same order."""
        if self is other:
            return True
        if not isinstance(other, Basis):
            return NotImplemented
        return self._n == other._n and bool(np.array_equal(self._S, other._S))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self._vectors) + "}"

    def spans_full_space(self) -> bool:
        return self.length() == self._n

    def is_standard_basis(self) -> bool:
        return self.spans_full_space() and all_zero(self._S - np.eye(self._n))

    def contains(self, v: Vector) -> bool:
        """True if `v` lies in the subspace spanned by this Basis."""
        if v.in_space() != self._n:
            raise DimensionMismatchError(
                f"a vector in {v.in_space()}-space is never in a subspace "
                f"of {self._n}-space"
            )
        if not self._vectors:
            return v.is_zero_vector()
        return v.is_linear_combination_of(self._vectors)

    def same_subspace(self, other: "Basis") -> bool:
        """
        True if both bases span the same subspace. Row reduction keeps the
        row space fixed, so the RREF with the basis vectors as rows is a
        normal form of the subspace.
        """
        if self._n != other._n or self.length() != other.length():
            return False
        if not self._vectors:
            return True
        return self.as_matrix().transpose().rref() == other.as_matrix().transpose().rref()


@functools.lru_cache(maxsize=None)
def standard_basis(n: int) -> Basis:
    """e_0, ..., e_{n-1} of R^n (memoized; a Basis is immutable)."""
    return Basis([standard_vector(n, i) for i in range(n)])
