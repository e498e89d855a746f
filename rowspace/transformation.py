# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Linear transformations T: R^m -> R^n.

T(x) = A x where A is an n-by-m matrix acting on coordinates: the input is
first expressed in the domain basis and the output is read in the target
basis. Both bases must span their whole space.
"""

import logging
from typing import Optional

from .basis import Basis, standard_basis
from .errors import (
    DimensionMismatchError,
    InvalidConstructionError,
    UnsupportedOperationError,
)
from .matrix import Matrix
from .space import VectorSpace
from .utils import UNSET
from .vector import Vector

logger = logging.getLogger(__name__)


class LinearTransformation:
    def __init__(
        self,
        matrix: Matrix,
        domain_basis: Optional[Basis] = None,
        target_basis: Optional[Basis] = None,
    ):
        """
        Parameters
        ----------
        matrix : Matrix            (n, m)
            Transformation matrix A.
        domain_basis : Basis | None
            Basis of R^m used for inputs; None means the standard basis.
        target_basis : Basis | None
            Basis of R^n used for outputs; None means the standard basis.
        """
        if not isinstance(matrix, Matrix):
            raise TypeError(f"expected a Matrix, got {type(matrix).__name__}")
        if domain_basis is not None and matrix.column_count != domain_basis.in_space():
            raise DimensionMismatchError(
                f"A matrix with {matrix.column_count} columns cannot act on "
                f"{domain_basis.in_space()}-space."
            )
        if target_basis is not None and matrix.row_count != target_basis.in_space():
            raise DimensionMismatchError(
                f"A matrix with {matrix.row_count} rows cannot map into "
                f"{target_basis.in_space()}-space."
            )
        if domain_basis is not None and not domain_basis.spans_full_space():
            raise InvalidConstructionError("The domain basis must span the entire domain space.")
        if target_basis is not None and not target_basis.spans_full_space():
            raise InvalidConstructionError("The target basis must span the entire target space.")

        self._matrix = matrix
        if domain_basis is None:
            domain_basis = standard_basis(matrix.column_count)
        if target_basis is None:
            target_basis = standard_basis(matrix.row_count)
        self._domain_basis = domain_basis
        self._target_basis = target_basis
        self._inverse = UNSET

    @classmethod
    def in_basis(cls, matrix: Matrix, basis: Basis) -> "LinearTransformation":
        """A transformation that uses `basis` for both its domain and target."""
        return cls(matrix, basis, basis)

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def domain_basis(self) -> Basis:
        return self._domain_basis

    @property
    def target_basis(self) -> Basis:
        return self._target_basis

    def domain_space(self) -> VectorSpace:
        return VectorSpace(self._domain_basis)

    def target_space(self) -> VectorSpace:
        return VectorSpace(self._target_basis)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._matrix!r}, "
            f"domain_basis={self._domain_basis!r}, target_basis={self._target_basis!r})"
        )

    def transform(self, v: Vector) -> Vector:
        """T(v), expressed in the target basis."""
        m = self.domain_space().dimension()
        if v.in_space() != m:
            raise DimensionMismatchError(
                f"This linear transformation can only transform a Vector that is in {m}-space"
            )
        return self._matrix.multiply(v.to_basis(self._domain_basis), self._target_basis)

    __call__ = transform

    def kernel(self) -> VectorSpace:
        """
        {x : T(x) = 0}, from the free variables of the homogeneous system,
        as a subspace of the domain.
        """
        vectors = [
            Vector(v.components, self._domain_basis) for v in self._matrix.nullspace()
        ]
        return VectorSpace(Basis(vectors, in_space=self._domain_basis.in_space()))

    def image(self) -> VectorSpace:
        """The column space of A, as a subspace of the target."""
        columns = [
            Vector(v.components, self._target_basis) for v in self._matrix.column_vectors()
        ]
        independent = Vector.remove_redundant(columns)
        return VectorSpace(Basis(independent, in_space=self._target_basis.in_space()))

    def is_isomorphism(self) -> bool:
        return self._matrix.is_invertible()

    def inverse(self) -> Optional["LinearTransformation"]:
        """T^-1 with domain and target swapped, or None. Cached."""
        if self._inverse is UNSET:
            inv = self._matrix.inverse()
            if inv is None:
                logger.debug("transformation is not an isomorphism")
                self._inverse = None
            else:
                self._inverse = LinearTransformation(
                    inv, self._target_basis, self._domain_basis
                )
        return self._inverse

    def to_basis(self, new_basis: Basis) -> "LinearTransformation":
        """
        The similar transformation  S_new^-1 S A S^-1 S_new,  where S is the
        current basis matrix. Only defined when the domain and target bases
        are the same.
        """
        if self._domain_basis != self._target_basis:
            raise UnsupportedOperationError(
                "Cannot change the basis of a linear transformation whose "
                "domain basis and target basis are not the same."
            )
        if self._domain_basis.in_space() != new_basis.in_space():
            raise DimensionMismatchError(
                "The new basis must describe the same space as the current basis."
            )
        if not new_basis.spans_full_space():
            raise InvalidConstructionError("The new basis must span the entire space.")
        if self._domain_basis == new_basis:
            return self

        S = self._domain_basis.as_matrix()
        S_new = new_basis.as_matrix()
        A = S_new.inverse() @ S @ self._matrix @ S.inverse() @ S_new
        logger.debug(f"change of basis:\n{A}")
        return LinearTransformation.in_basis(A, new_basis)

    def to_standard_basis(self) -> "LinearTransformation":
        return self.to_basis(standard_basis(self._domain_basis.in_space()))
