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
"""Syzygies: generators of the left and right kernel of a matrix

The syzygies of the rows of A are the row vectors X with X * A = 0. They are read
off a single normal form of the augmented matrix [A | I]: the identity block
records for every reduced row which combination of the rows of A produced it.
Once the A-block of a reduced row vanishes, its recorded combination is a kernel
element. The normal form puts these rows contiguously at the bottom, and there
are exactly rows(A) - rank(A) of them, so together they generate the kernel.
"""

import logging
from typing import Optional

from .basis import first_zero_row
from .matrix import RingMatrix, identity_matrix
from .matrixtools import union_of_columns
from .normal_form_interface import normal_form

LOG = logging.getLogger(__name__)


def syzygies_of_rows(mat: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Compute generators of the left kernel {X : X * mat = 0}

    Example:
        >>> s = syzygies_of_rows(matrix(range(4, 10), 3, 2, ZZ))
        >>> s.to_list()
        [[1, -2, 1]]

    Args:
        mat (RingMatrix):
            A matrix A over ZZ or QQ.

        backend (optional (str)):
            Backend for rational matrices, see exactmat.select_backend.

    Returns:
        (RingMatrix):
        A matrix with rows(A) columns whose rows generate the left kernel of A. If
        A has full row rank, this is the (0 x rows(A))-matrix.
    """
    ring = mat.ring
    nr_rows, nr_cols = mat.shape
    augmented = union_of_columns(ring, nr_rows, [mat, identity_matrix(nr_rows, ring)])
    reduced, _ = normal_form(augmented, backend)
    start = first_zero_row(reduced.sub_matrix(0, nr_rows, 0, nr_cols))
    syzygies = reduced.sub_matrix(start, nr_rows, nr_cols, nr_cols + nr_rows)
    LOG.debug(f"Found {syzygies.nrows} row syzygies of a {nr_rows}x{nr_cols} matrix over {ring}.")
    return syzygies


def syzygies_of_columns(mat: RingMatrix, backend: Optional[str] = None) -> RingMatrix:
    """Compute generators of the right kernel {X : mat * X = 0}

    Returns:
        (RingMatrix):
        A matrix with cols(mat) rows whose columns generate the right kernel.
    """
    return syzygies_of_rows(mat.transpose(), backend).transpose()
