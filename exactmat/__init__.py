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
"""exactmat: exact linear algebra over the integers and the rationals

Matrices over ZZ and QQ, their canonical normal forms and the operations built on
them: row and column bases, syzygies, one-sided division and reduction modulo a
row or column space.

Example:
    >>> from exactmat import ZZ, matrix, safe_right_divide
    >>> A = matrix(range(1, 7), 3, 2, ZZ)
    >>> B = matrix(range(3, 9), 3, 2, ZZ)
    >>> safe_right_divide(B, A).to_list()
    [[0, 1, 0], [0, 0, 1], [0, -1, 2]]
"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .exceptions import *
from .rings import *
from .matrix import *
from .normal_form_interface import (avail_backends, select_backend, normal_form, hermite_form, rref, rank,
                                    solve_linear_system)
from .matrixtools import *
from .basis import *
from .syzygies import *
from .divide import *
from .decide_zero import *
