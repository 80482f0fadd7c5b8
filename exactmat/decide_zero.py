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
"""Reduction of matrices modulo the row or column space of another matrix"""

from typing import Optional

from .basis import basis_of_rows
from .exceptions import ShapeMismatchError
from .matrix import RingMatrix, check_same_ring, identity_matrix, zero_matrix
from .matrixtools import union_of_columns, union_of_rows


def decide_zero_rows(B: RingMatrix, A: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Reduce the rows of B modulo the row space of A

    The matrix

        [ I   B ]
        [ 0   A ]

    is reduced. Because of the identity block its rank is at least rows(B), so its
    first rows(B) rows carry the reduced rows of B, each congruent to the corresponding
    row of B modulo the rows of A.

    Example:
        >>> A = matrix(range(1, 7), 3, 2, ZZ)
        >>> decide_zero_rows(matrix(range(2, 8), 3, 2, ZZ), A).to_list()
        [[0, 1], [0, 1], [0, 1]]

    Returns:
        (RingMatrix):
        A matrix of the shape of B. Row i is zero exactly if row i of B lies in the
        row space of A.

    Raises:
        ShapeMismatchError: If the rings or the column counts differ.
    """
    ring = B.ring
    check_same_ring(ring, [A], 'decide_zero_rows')
    if A.ncols != B.ncols:
        raise ShapeMismatchError(f"decide_zero_rows: A has {A.ncols} columns, B has {B.ncols}.",
                                 expected=B.ncols,
                                 actual=A.ncols)
    nr_rows_a, nr_rows_b = A.nrows, B.nrows
    nr_cols = B.ncols
    tracking = union_of_rows(ring, nr_rows_b, [identity_matrix(nr_rows_b, ring), zero_matrix(nr_rows_a, nr_rows_b, ring)])
    stacked = union_of_columns(ring, nr_rows_b + nr_rows_a, [tracking, union_of_rows(ring, nr_cols, [B, A])])
    reduced = basis_of_rows(stacked, backend)
    return reduced.sub_matrix(0, nr_rows_b, nr_rows_b, nr_rows_b + nr_cols)


def decide_zero_columns(B: RingMatrix, A: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Reduce the columns of B modulo the column space of A."""
    if A.nrows != B.nrows:
        raise ShapeMismatchError(f"decide_zero_columns: A has {A.nrows} rows, B has {B.nrows}.",
                                 expected=B.nrows,
                                 actual=A.nrows)
    return decide_zero_rows(B.transpose(), A.transpose(), backend).transpose()
