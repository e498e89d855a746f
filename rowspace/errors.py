# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by rowspace.

Each class also derives from the builtin exception a caller would
naturally catch, so ``except ValueError`` keeps working.

Outcomes that are expected rather than programmer errors (a singular
matrix has no inverse, a system has no unique solution) are never
raised; those operations return ``None``.
"""


class LinalgError(Exception):
    """Base class for every rowspace error."""


class DimensionMismatchError(LinalgError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class IndexOutOfRangeError(LinalgError, IndexError):
    """A row, column or component index is outside the valid range."""


class MatrixIndexError(IndexOutOfRangeError):
    def __init__(self, index: int, axis: str = "row"):
        self.index = index
        self.axis = axis
        super().__init__(f"Matrix {axis} index out of range: {index}")


class VectorIndexError(IndexOutOfRangeError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Vector index out of range: {index}")


class InvalidConstructionError(LinalgError, ValueError):
    """Arguments cannot form a valid Vector, Matrix, Basis or transformation."""


class SingularOperationError(LinalgError, ZeroDivisionError):
    """An elementary row operation would divide by zero."""


class UnsupportedOperationError(LinalgError, TypeError):
    """The operation is not defined for this kind of object."""
