import pytest
from exactalgebra.names import *

# numerator/denominator pairs spanning both encodings, before normalization
rational_pairs = [
    (6, 4),
    (-7, 3),
    (5, -4),
    (0, 9),
    (12, 6),
    (2**32 - 1, 2**31),
    (-(2**40) - 1, 3),
    (7, 2**45),
    (2**70 + 1, 2**35),
]

# non-zero divisors, integer and rational, word-sized and arbitrary
divisor_pairs = [
    (3, 1),
    (-4, 1),
    (2, 3),
    (-5, 7),
    (2**64 + 3, 1),
    (1, 2**40),
]

integers = [0, 1, -1, 17, -128, 129, 2**31, 2**63 - 1, -(2**63), 2**64 + 5, -(3**50)]


@pytest.fixture(params=BOUNDARY_POLICIES, scope="session")
def boundary_policy(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for word boundary policies."""
    return request.param


@pytest.fixture(params=rational_pairs, scope="session")
def rational_pair(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for raw numerator/denominator pairs."""
    return request.param


@pytest.fixture(params=divisor_pairs, scope="session")
def divisor_pair(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for non-zero divisors."""
    return request.param


@pytest.fixture(params=integers, scope="session")
def integer(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for plain integers around the word boundaries."""
    return request.param


@pytest.fixture(params=[1, 3, 8, 11], scope="session")
def modulus(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for positive moduli."""
    return request.param
