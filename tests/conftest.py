import pytest
from exactmat import ZZ, QQ, matrix
from exactmat.names import *
from exactmat.normal_form_interface import avail_backends

# Normal form backends in order of preference, restricted to the installed ones
backends = [b for b in BACKEND_PRIORITY if b in avail_backends]


@pytest.fixture(params=[ZZ, QQ], scope="session", ids=['ZZ', 'QQ'])
def ring(request: pytest.FixtureRequest):
    """Provide session-level fixture for the coefficient rings."""
    return request.param


@pytest.fixture(params=backends, scope="session")
def backend(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for the available normal form backends."""
    return request.param


@pytest.fixture
def mat1(ring):
    """[[1, 2], [3, 4], [5, 6]]"""
    return matrix(range(1, 7), 3, 2, ring)


@pytest.fixture
def mat2(ring):
    """[[2, 3], [4, 5], [6, 7]]"""
    return matrix(range(2, 8), 3, 2, ring)
