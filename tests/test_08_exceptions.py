"""Test the exception hierarchy."""
import pytest
from exactmat import *


@pytest.mark.parametrize("error, builtin", [(ShapeMismatchError, ValueError), (IndexOutOfBoundsError, IndexError),
                                            (UnsolvableError, ArithmeticError), (NotUniqueError, ArithmeticError),
                                            (ConversionError, ValueError), (BackendError, RuntimeError)])
def test_hierarchy(error, builtin):
    assert (issubclass(error, ExactMatError))
    assert (issubclass(error, builtin))


def test_attributes():
    with pytest.raises(ShapeMismatchError) as exc:
        matrix(range(1, 7), 2, 3, ZZ) * matrix(range(1, 7), 2, 3, ZZ)
    assert (exc.value.expected == 3 and exc.value.actual == 2)
    with pytest.raises(ConversionError) as exc:
        ZZ.coerce('1/3')
    assert (exc.value.ring is ZZ)
    assert (exc.value.value == '1/3')


def test_catch_all():
    A = matrix(range(1, 7), 3, 2, ZZ)
    with pytest.raises(ExactMatError):
        unique_right_divide(A, A)
    with pytest.raises(ExactMatError):
        safe_left_divide(matrix([2], 1, 1, ZZ), matrix([1], 1, 1, ZZ))
