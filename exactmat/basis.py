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
"""Bases of row and column spaces, and zero row/column detection"""

from typing import List, Optional

from .matrix import RingMatrix
from .normal_form_interface import normal_form


def basis_of_rows(mat: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Return a basis of the row space of mat

    The basis consists of the nonzero rows of the normal form of mat, so it has full
    row rank and spans the same row space as mat.

    Example:
        >>> basis_of_rows(matrix(range(1, 10), 3, 3, ZZ)).to_list()
        [[1, 2, 3], [0, 3, 6]]
        >>> basis_of_rows(matrix(range(1, 10), 3, 3, QQ)).to_list() == [[1, 0, -1], [0, 1, 2]]
        True
    """
    reduced, rank = normal_form(mat, backend)
    return reduced.sub_matrix(0, rank, 0, mat.ncols)


def basis_of_columns(mat: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Return a basis of the column space of mat (the transposed counterpart of basis_of_rows)."""
    return basis_of_rows(mat.transpose(), backend).transpose()


def zero_rows(mat: RingMatrix) -> List[int]:
    """Return the (possibly empty) list of indices of the zero rows of mat."""
    return [i for i in range(mat.nrows) if not any(mat.row(i))]


def zero_columns(mat: RingMatrix) -> List[int]:
    """Return the (possibly empty) list of indices of the zero columns of mat."""
    return [j for j in range(mat.ncols) if not any(mat.column(j))]


def first_zero_row(mat: RingMatrix) -> int:
    """Return the index of the first zero row of mat, or mat.nrows if there is none."""
    return next((i for i in range(mat.nrows) if not any(mat.row(i))), mat.nrows)


def first_zero_column(mat: RingMatrix) -> int:
    """Return the index of the first zero column of mat, or mat.ncols if there is none."""
    return next((j for j in range(mat.ncols) if not any(mat.column(j))), mat.ncols)
