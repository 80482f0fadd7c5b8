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
"""Exception hierarchy of the exactmat package

All exceptions inherit from ExactMatError so that callers can catch any
package-specific failure at once. Each concrete class additionally derives
from the closest builtin exception (ValueError, IndexError, ArithmeticError,
RuntimeError), so code that predates this module keeps working.
"""


class ExactMatError(Exception):
    """Base exception for all exactmat errors."""
    pass


class ShapeMismatchError(ExactMatError, ValueError):
    """Matrix dimensions or rings are incompatible.

    Raised by constructors, arithmetic, block assembly, row/column selection
    and the divide functions before any computation takes place.

    Attributes:
        expected: The expected shape, dimension or ring, if known
        actual: The shape, dimension or ring that was provided, if known
    """

    def __init__(self, message: str, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ExactMatError, IndexError):
    """A row or column index lies outside of the valid range.

    Attributes:
        index: The offending index
        bound: The number of rows (or columns); valid indices are 0 <= index < bound
    """

    def __init__(self, message: str, index=None, bound=None):
        super().__init__(message)
        self.index = index
        self.bound = bound


class UnsolvableError(ExactMatError, ArithmeticError):
    """The inhomogeneous linear system has no exact solution over the ring."""
    pass


class NotUniqueError(ExactMatError, ArithmeticError):
    """The inhomogeneous linear system does not have a unique solution."""
    pass


class ConversionError(ExactMatError, ValueError):
    """A value cannot be represented exactly in the target ring.

    Attributes:
        value: The value that failed to convert
        ring: The target ring
    """

    def __init__(self, message: str, value=None, ring=None):
        super().__init__(message)
        self.value = value
        self.ring = ring


class BackendError(ExactMatError, RuntimeError):
    """A normal form backend was used on a ring it does not support."""
    pass
