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
"""Exact coefficient rings: the integers ZZ and the rationals QQ

Both rings are process-wide singletons that are compared by identity. Ring
elements are plain Python numbers: int for ZZ and fractions.Fraction for QQ,
so element arithmetic is exact and needs no wrapper type. The rings take care
of converting foreign numbers (numpy scalars, floats, sympy.Rational, FLINT
numbers, strings) into their element type.

Example:
    >>> from exactmat import ZZ, QQ
    >>> QQ.coerce('3/4')
    Fraction(3, 4)
    >>> ZZ.coerce(QQ.coerce(6))
    6
"""

import logging
import math
from fractions import Fraction
from operator import index
from typing import Optional, Union

import numpy as np
from sympy import Rational

from .exceptions import ConversionError
from .names import INTEGERS, RATIONALS

LOG = logging.getLogger(__name__)

Element = Union[int, Fraction]


def float_to_rational(val, max_precision: int = 6, max_denom: int = 100) -> Fraction:
    """Convert a float to a Fraction with a bounded denominator.

    Strategy:
    1. Try limit_denominator(max_denom) for small fractions like 1/3, 5/11
    2. Check if it reconstructs correctly at the given precision
    3. If not, use a power of 10 (auto-reduces to only 2,5 factors)

    Args:
        val (float):
            Finite value to convert.

        max_precision (int):
            Maximum decimal precision to preserve (default 6).

        max_denom (int):
            Maximum denominator for "nice" fractions (default 100).

    Returns:
        (Fraction):
        Rational approximation of val.
    """
    val = float(val)
    if not math.isfinite(val):
        raise ConversionError(f"Cannot convert non-finite float {val} to a rational number.", value=val)
    if val == int(val):
        return Fraction(int(val))
    small_frac = Fraction(val).limit_denominator(max_denom)
    if round(float(small_frac), max_precision) == round(val, max_precision):
        return small_frac
    denom = 10**max_precision
    LOG.debug(f"Rounded {val} to {max_precision} decimal places for rational conversion.")
    return Fraction(round(val * denom), denom)


def to_fraction(value) -> Fraction:
    """Convert a supported number type to a Fraction.

    Accepts int, Fraction, numpy integers and floats, Python floats, sympy.Rational,
    FLINT numbers (fmpz, fmpq) and strings such as '3/4' or '-2'.

    Raises:
        ConversionError: If the value has an unsupported type or cannot be parsed.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise ConversionError("Boolean values are not ring elements.", value=value)
    if isinstance(value, (int, np.integer)):
        return Fraction(int(value))
    if isinstance(value, (float, np.floating)):
        return float_to_rational(value)
    if isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except ValueError as exc:
            raise ConversionError(f"Cannot parse '{value}' as a rational number.", value=value) from exc
    if hasattr(value, 'p') and hasattr(value, 'q'):  # flint.fmpq
        return Fraction(int(value.p), int(value.q))
    try:
        return Fraction(index(value))  # flint.fmpz and other integer types
    except TypeError:
        raise ConversionError(f"Cannot convert {type(value).__name__} to a rational number.", value=value) from None


class Ring:
    """Base class of the exact coefficient rings

    Instances of this class are singletons. Use the module level objects ZZ and
    QQ instead of instantiating rings yourself. Copying or pickling a ring
    returns the very same object, so matrices can always compare their rings
    by identity.

    Multiplying a ring with a matrix from the left rewrites the matrix over
    this ring (see exactmat.matrix.change_base_ring):

        >>> QQ * mat
    """

    name = None
    symbol = None
    is_field = False
    zero = None
    one = None
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def coerce(self, value) -> Element:
        """Convert value into an element of this ring or raise ConversionError."""
        raise NotImplementedError

    def is_zero(self, value) -> bool:
        return value == 0

    def exact_quotient(self, a, b) -> Optional[Element]:
        """Return q with q * b == a if such an element of the ring exists, otherwise None."""
        raise NotImplementedError

    def __mul__(self, other):
        from .matrix import RingMatrix, change_base_ring
        if isinstance(other, RingMatrix):
            return change_base_ring(self, other)
        return NotImplemented

    def __repr__(self) -> str:
        return self.name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        # pickled by reference to the module level singleton
        return self.symbol


class IntegerRing(Ring):
    """The ring of integers, elements are Python ints"""

    name = INTEGERS
    symbol = 'ZZ'
    zero = 0
    one = 1

    def coerce(self, value) -> int:
        if type(value) is int:
            return value
        frac = to_fraction(value)
        if frac.denominator != 1:
            raise ConversionError(f"{value} is not an integer and cannot be converted to {self.name}.",
                                  value=value,
                                  ring=self)
        return frac.numerator

    def exact_quotient(self, a, b) -> Optional[int]:
        if b == 0:
            return 0 if a == 0 else None
        q, r = divmod(a, b)
        return q if r == 0 else None


class RationalField(Ring):
    """The field of rational numbers, elements are fractions.Fraction"""

    name = RATIONALS
    symbol = 'QQ'
    is_field = True
    zero = Fraction(0)
    one = Fraction(1)

    def coerce(self, value) -> Fraction:
        return to_fraction(value)

    def exact_quotient(self, a, b) -> Optional[Fraction]:
        if b == 0:
            return self.zero if a == 0 else None
        return Fraction(a) / b


ZZ = IntegerRing()
QQ = RationalField()
