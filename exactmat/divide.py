#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""One-sided inhomogeneous linear systems: right and left division of matrices

    safe_right_divide(B, A, L):  some X with X*A + Y*L = B for some Y ("X = B A^-1 modulo L")
    safe_left_divide(A, B):      some X with A*X = B ("X = A^-1 B")

The safe_* functions raise UnsolvableError if no exact solution exists. The
right_divide/left_divide counterparts never raise it; they return a
DivisionResult that either carries the solution or is the NO_SOLUTION sentinel.
The unique_* variants first check that the solution, if any, is unique.
"""

import logging
from typing import Optional

from .basis import basis_of_columns, basis_of_rows
from .exceptions import NotUniqueError, ShapeMismatchError, UnsolvableError
from .matrix import RingMatrix, check_same_ring, identity_matrix, zero_matrix
from .matrixtools import union_of_columns, union_of_rows
from .normal_form_interface import normal_form, solve_linear_system

LOG = logging.getLogger(__name__)


class DivisionResult:
    """Outcome of right_divide or left_divide

    A result is truthy if and only if the system was solvable. Failed divisions all
    return the NO_SOLUTION singleton, so callers may test with 'is NO_SOLUTION'.

    Args:
        solution (optional (RingMatrix)):
            The particular solution, or None if the system is unsolvable.
    """

    __slots__ = ('_solution',)

    def __init__(self, solution: Optional[RingMatrix] = None):
        self._solution = solution

    @property
    def solution(self) -> Optional[RingMatrix]:
        return self._solution

    @property
    def solvable(self) -> bool:
        return self._solution is not None

    def __bool__(self) -> bool:
        return self.solvable

    def unwrap(self) -> RingMatrix:
        """Return the solution or raise UnsolvableError."""
        if self._solution is None:
            raise UnsolvableError("Unable to solve linear system")
        return self._solution

    def __eq__(self, other) -> bool:
        if not isinstance(other, DivisionResult):
            return NotImplemented
        return self._solution == other._solution

    def __hash__(self) -> int:
        return hash(self._solution)

    def __repr__(self) -> str:
        if self._solution is None:
            return "NO_SOLUTION"
        return f"DivisionResult({self._solution!r})"


NO_SOLUTION = DivisionResult()


def _check_right_operands(B: RingMatrix, A: RingMatrix, L: RingMatrix):
    ring = A.ring
    check_same_ring(ring, [B, L], 'right_divide')
    for name, mat in (('B', B), ('L', L)):
        if mat.ncols != A.ncols:
            raise ShapeMismatchError(f"right_divide: {name} has {mat.ncols} columns, A has {A.ncols}.",
                                     expected=A.ncols,
                                     actual=mat.ncols)


def safe_right_divide(B: RingMatrix, A: RingMatrix, L: Optional[RingMatrix] = None,
                      backend: Optional[str] = None) -> RingMatrix:
    """Find a particular solution X of X*A + Y*L = B (Y is forgotten)

    The block matrix

        [ I   B   0 ]
        [ 0   A   I ]
        [ 0   L   0 ]

    is brought into normal form. The leading identity records which combination of
    the rows of B, A and L clears the B-columns; the identity attached to A records
    the coefficients of A in that combination. If the first rows(B) rows still have a
    nonzero B-block, the system is unsolvable. Otherwise X is the negated block of
    these rows under the trailing identity.

    Example:
        >>> A = matrix(range(1, 10), 3, 3, ZZ)
        >>> B = matrix([3, 5, 7, 13, 16, 19, 29, 33, 37], 3, 3, ZZ)
        >>> L = matrix(range(2, 11), 3, 3, ZZ)
        >>> safe_right_divide(B, A, L).to_list()
        [[0, 0, -2], [0, 0, -1], [0, 0, 0]]

    Args:
        B, A (RingMatrix):
            Matrices over the same ring with the same number of columns.

        L (optional (RingMatrix)):
            Relations with the same number of columns. Defaults to the (0 x cols(A))
            zero matrix, i.e. the system X*A = B.

        backend (optional (str)):
            Backend for rational matrices, see exactmat.select_backend.

    Returns:
        (RingMatrix):
        A matrix X of shape (rows(B) x rows(A)).

    Raises:
        ShapeMismatchError: If rings or column counts differ.
        UnsolvableError: If the system has no solution.
    """
    ring = A.ring
    if L is None:
        L = zero_matrix(0, A.ncols, ring)
    _check_right_operands(B, A, L)
    nr_cols = A.ncols
    nr_rows_a, nr_rows_b, nr_rows_l = A.nrows, B.nrows, L.nrows

    union_rows_ident_zero = union_of_rows(ring, nr_rows_b, [
        identity_matrix(nr_rows_b, ring),
        zero_matrix(nr_rows_a, nr_rows_b, ring),
        zero_matrix(nr_rows_l, nr_rows_b, ring),
    ])
    union_rows_b_a_l = union_of_rows(ring, nr_cols, [B, A, L])
    union_rows_zero_ident = union_of_rows(ring, nr_rows_a, [
        zero_matrix(nr_rows_b, nr_rows_a, ring),
        identity_matrix(nr_rows_a, ring),
        zero_matrix(nr_rows_l, nr_rows_a, ring),
    ])
    union_mat = union_of_columns(ring, nr_rows_b + nr_rows_a + nr_rows_l,
                                 [union_rows_ident_zero, union_rows_b_a_l, union_rows_zero_ident])
    reduced, _ = normal_form(union_mat, backend)

    remainder = reduced.sub_matrix(0, nr_rows_b, nr_rows_b, nr_rows_b + nr_cols)
    if not remainder.is_zero():
        LOG.debug(f"X*A + Y*L = B unsolvable for A {A.nrows}x{A.ncols}, B {B.nrows}x{B.ncols} over {ring}.")
        raise UnsolvableError("Unable to solve linear system")
    return -reduced.sub_matrix(0, nr_rows_b, nr_rows_b + nr_cols, union_mat.ncols)


def right_divide(B: RingMatrix, A: RingMatrix, L: Optional[RingMatrix] = None,
                 backend: Optional[str] = None) -> DivisionResult:
    """Solve X*A + Y*L = B like safe_right_divide, but return NO_SOLUTION instead of raising

    Shape and ring mismatches still raise ShapeMismatchError.

    Example:
        >>> result = right_divide(B, A)
        >>> if result:
        ...     X = result.solution
    """
    try:
        return DivisionResult(safe_right_divide(B, A, L, backend))
    except UnsolvableError:
        return NO_SOLUTION


def unique_right_divide(B: RingMatrix, A: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Solve X*A = B and assert that the solution is unique

    The solution is unique exactly if A has full row rank. This is checked before the
    system is solved.

    Raises:
        NotUniqueError: If A does not have full row rank.
        UnsolvableError: If the system has no solution.
    """
    if basis_of_rows(A, backend).nrows != A.nrows:
        LOG.debug(f"A {A.nrows}x{A.ncols} over {A.ring} has no full row rank.")
        raise NotUniqueError("The inhomogeneous linear system of equations XA=B has no unique solution")
    return safe_right_divide(B, A, backend=backend)


def _check_left_operands(A: RingMatrix, B: RingMatrix):
    check_same_ring(A.ring, [B], 'left_divide')
    if B.nrows != A.nrows:
        raise ShapeMismatchError(f"left_divide: B has {B.nrows} rows, A has {A.nrows}.",
                                 expected=A.nrows,
                                 actual=B.nrows)


def safe_left_divide(A: RingMatrix, B: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Find a particular solution X of A*X = B

    Example:
        >>> A = matrix(range(1, 7), 3, 2, ZZ)
        >>> B = matrix(range(2, 8), 3, 2, ZZ)
        >>> safe_left_divide(A, B).to_list()
        [[0, -1], [1, 2]]

    Returns:
        (RingMatrix):
        A matrix X of shape (cols(A) x cols(B)).

    Raises:
        ShapeMismatchError: If rings or row counts differ.
        UnsolvableError: If the system has no solution.
    """
    _check_left_operands(A, B)
    return solve_linear_system(A, B, backend)


def left_divide(A: RingMatrix, B: RingMatrix, backend: Optional[str] = None) -> DivisionResult:
    """Solve A*X = B like safe_left_divide, but return NO_SOLUTION instead of raising."""
    try:
        return DivisionResult(safe_left_divide(A, B, backend))
    except UnsolvableError:
        return NO_SOLUTION


def unique_left_divide(A: RingMatrix, B: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Solve A*X = B and assert that the solution is unique

    Raises:
        NotUniqueError: If A does not have full column rank.
        UnsolvableError: If the system has no solution.
    """
    if basis_of_columns(A, backend).ncols != A.ncols:
        LOG.debug(f"A {A.nrows}x{A.ncols} over {A.ring} has no full column rank.")
        raise NotUniqueError("The inhomogeneous linear system of equations AX=B has no unique solution")
    return safe_left_divide(A, B, backend)
