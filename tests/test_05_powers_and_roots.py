"""Powers by squaring, exponent splitting, and roots with remainder."""
from decimal import Decimal, ROUND_DOWN, ROUND_FLOOR, ROUND_CEILING, ROUND_HALF_EVEN, ROUND_HALF_DOWN, ROUND_UP
from fractions import Fraction
import pytest
import exactalgebra as ea
from exactalgebra import from_int, from_ints, from_ints_strict, get_context
from exactalgebra.prim_math_utils import INT_MAX

# =============================================================================
# Powers
# =============================================================================


def test_raised_scenario():
    """(5/-4)^3 = -125/64."""
    assert from_ints(5, -4).raised(3) == from_ints(-125, 64)


@pytest.mark.parametrize("exponent", [0, 1, 2, 3, 5, 8, 9, 17, 64, 100])
def test_raised_matches_fraction(rational_pair, exponent):
    """Small, medium and large exponents agree with Fraction powers."""
    base = from_ints(*rational_pair)
    if base.is_zero() and exponent == 0:
        return
    res = base.raised(exponent)
    assert Fraction(res.numerator, res.denominator) == Fraction(*rational_pair)**exponent


def test_power_consistency(rational_pair):
    """b^e == b^(e - sign(e)) * b (or / b) for exponents of both signs."""
    base = from_ints(*rational_pair)
    if base.is_zero():
        return
    for exponent in range(-6, 7):
        if exponent == 0:
            continue
        step = base if exponent > 0 else base.inverted()
        previous = base.raised(exponent - (1 if exponent > 0 else -1))
        assert base.raised(exponent) == previous * step, f"{base}^{exponent}"


def test_negative_exponents():
    """Negative exponents invert the positive power."""
    assert from_ints(2, 3).raised(-2) == from_ints(9, 4)
    assert from_int(2).raised(-10) == from_ints(1, 1024)
    assert from_int(-2) ** -3 == from_ints(-1, 8)


def test_zero_powers():
    """0^0 and 0^negative are undefined, 0^positive is 0."""
    zero = from_int(0)
    assert zero.raised(5) is zero
    with pytest.raises(ea.UndefinedOperationError):
        zero.raised(0)
    with pytest.raises(ea.DivisionByZeroError):
        zero.raised(-1)
    with pytest.raises(ea.UndefinedOperationError):
        from_ints_strict(0).raised(-2)


def test_exponent_types():
    """Exponents may be ints or whole exactalgebra values, nothing else."""
    assert from_int(3).raised(from_int(4)) == from_int(81)
    assert from_int(3) ** from_ints_strict(4) == from_int(81)
    with pytest.raises(TypeError):
        from_int(3).raised(from_ints(1, 2))
    with pytest.raises(TypeError):
        from_int(3).raised(2.0)
    with pytest.raises(ea.InvalidArgumentError):
        from_int(3).raised(None)


def test_power_leaves_word():
    """Powers of word-sized values promote when they grow."""
    assert type(from_int(3).raised(39)) is ea.FiniteInteger
    assert type(from_int(3).raised(40)) is ea.ArbitraryInteger
    assert from_int(3).raised(40).numerator == 3**40
    assert from_ints(3, 2).raised(30) == from_ints(3**30, 2**30)


@pytest.mark.timeout(30)
def test_exponent_beyond_int_max():
    """Exponents past 2**31 - 1 are split into chunks."""
    exponent = INT_MAX + 6
    assert from_int(1).raised(exponent) is from_int(1)
    assert from_int(-1).raised(exponent) is from_int(-1)
    assert from_int(-1).raised(exponent + 1) is from_int(1)
    assert from_int(-1).raised(2 * INT_MAX + 3) is from_int(-1)
    assert from_ints_strict(-1).raised(-exponent).equiv(-1)


# =============================================================================
# Roots
# =============================================================================


def test_root_scenario():
    """sqrt(35/2) truncates to 4 with remainder 3/2."""
    pair = from_ints(35, 2).root_z_with_remainder(2)
    assert pair.value == from_int(4)
    assert pair.remainder == from_ints(3, 2)


@pytest.mark.parametrize("value, index, root", [
    (0, 3, 0),
    (1, 5, 1),
    (27, 3, 3),
    (26, 3, 2),
    (-27, 3, -3),
    (-30, 3, -3),
    (10**40 + 1, 2, 10**20),
    (2**198, 3, 2**66),
    (2**198 - 1, 3, 2**66 - 1),
    (3**100, 4, 3**25),
    (3**100 - 1, 4, 3**25 - 1),
])
def test_integer_roots(value, index, root):
    """Integer roots truncate toward zero; remainder is value - root**index."""
    pair = from_int(value).root_z_with_remainder(index)
    assert pair.value.numerator == root, f"{index}-th root of {value}"
    assert pair.remainder.numerator == value - root**index


def test_root_bounds(rational_pair):
    """floor^n <= |x| < (floor + 1)^n for every value."""
    value = from_ints(*rational_pair)
    if value.is_negative():
        value = value.negated()
    for index in (1, 2, 3, 7):
        floor = value.root_z_with_remainder(index).value.numerator
        exact = Fraction(value.numerator, value.denominator)
        assert floor**index <= exact < (floor + 1)**index, f"{index}-th root of {value}: {floor}"


def test_root_errors():
    """Even roots of negatives and non-positive indices are refused."""
    with pytest.raises(ea.UndefinedOperationError):
        from_int(-4).root_z_with_remainder(2)
    with pytest.raises(ea.UndefinedOperationError):
        from_ints(-1, 4).sqrt_round_q()
    with pytest.raises(ea.InvalidArgumentError):
        from_int(4).root_z_with_remainder(0)
    with pytest.raises(ea.InvalidArgumentError):
        from_int(4).root_round_z(-2)


def test_sqrt_with_remainder():
    """Integer square roots are exact."""
    root, rem = from_int(17).sqrt_z_with_remainder()
    assert (root.numerator, rem.numerator) == (4, 1)
    pair = from_ints(35, 2).sqrt_z_with_remainder()
    assert pair.value == from_int(4) and pair.remainder == from_ints(3, 2)
    with pytest.raises(ea.UndefinedOperationError):
        from_int(-1).sqrt_z_with_remainder()


@pytest.mark.parametrize("num, den, rounding, expected", [
    (16, 1, ROUND_CEILING, 4),
    (17, 1, ROUND_CEILING, 5),
    (17, 1, ROUND_FLOOR, 4),
    (24, 1, ROUND_HALF_EVEN, 5),
    (9, 4, ROUND_HALF_EVEN, 2),
    (9, 4, ROUND_HALF_DOWN, 1),
    (25, 4, ROUND_HALF_EVEN, 2),
    (1, 4, ROUND_UP, 1),
    (1, 4, ROUND_DOWN, 0),
])
def test_sqrt_round_z(num, den, rounding, expected):
    """Rounded square roots, exact at ties and perfect squares."""
    assert from_ints(num, den).sqrt_round_z(rounding).numerator == expected


def test_odd_root_round_z_negative():
    """Rounding of negative odd roots follows the sign."""
    assert from_int(-26).root_round_z(3, ROUND_FLOOR).numerator == -3
    assert from_int(-26).root_round_z(3, ROUND_CEILING).numerator == -2
    assert from_int(-27).root_round_z(3, ROUND_UP).numerator == -3


def test_root_round_q():
    """Rational roots rounded to the requested precision."""
    root2 = from_int(2).sqrt_round_q(get_context(10))
    assert root2.to_decimal(get_context(10)) == Decimal("1.414213562")
    assert from_ints(1, 4).sqrt_round_q() == from_ints(1, 2)
    assert from_int(-8).root_round_q(3, get_context(5)) == from_int(-2)
    cube = from_int(10).root_round_q(3, get_context(20))
    assert abs(Fraction(cube.numerator, cube.denominator)**3 - 10) < Fraction(1, 10**17)


def test_root_q_with_remainder():
    """Truncated rational root with non-negative remainder."""
    pair = from_int(2).root_q_with_remainder(2, 5)
    assert pair.value == from_ints(14142, 10000)
    assert pair.remainder == from_int(2) - from_ints(14142, 10000).squared()
    assert not pair.remainder.is_negative()


@pytest.mark.parametrize("rounding", [ROUND_DOWN, ROUND_FLOOR, ROUND_CEILING, ROUND_UP, ROUND_HALF_EVEN])
def test_exact_rational_roots_survive_rounding(rounding):
    """Exact roots come back exact whatever the rounding direction."""
    assert from_int(1000).root_round_q(3, get_context(20, rounding)) == from_int(10)
    assert from_int(-1000).root_round_q(3, get_context(20, rounding)) == from_int(-10)
    assert from_ints(1, 8).root_round_q(3, get_context(10, rounding)) == from_ints(1, 2)
    assert from_ints(9, 400).sqrt_round_q(get_context(7, rounding)) == from_ints(3, 20)
    assert from_ints(1, 10**12).sqrt_round_q(get_context(3, rounding)) == from_ints(1, 10**6)


def test_exact_root_with_remainder():
    """A perfect cube has a zero remainder."""
    pair = from_int(1000).root_q_with_remainder(3)
    assert pair.value == from_int(10)
    assert pair.remainder == from_int(0)
    assert pair.is_exact()
    pair = from_ints(27, 64).root_q_with_remainder(3, 4)
    assert pair.value == from_ints(3, 4)
    assert pair.is_exact()


def test_inexact_root_directions():
    """The last digit of an inexact root follows the rounding direction."""
    assert from_int(2).root_round_q(2, get_context(10, ROUND_DOWN)) == from_ints(1414213562, 10**9)
    assert from_int(2).root_round_q(2, get_context(10, ROUND_CEILING)) == from_ints(1414213563, 10**9)
    assert from_int(-2).root_round_q(3, get_context(5, ROUND_FLOOR)) == from_ints(-12600, 10**4)
    assert from_int(-2).root_round_q(3, get_context(5, ROUND_CEILING)) == from_ints(-12599, 10**4)
    assert from_int(99999).root_round_q(2, get_context(3, ROUND_UP)) == from_int(317)


def test_root_context_precision_checked():
    """The approximation context must be wider than the rounding context."""
    value = from_int(2)
    with pytest.raises(ea.InvalidArgumentError):
        value._root_decimal(2, get_context(10), get_context(10))
    assert value._root_decimal(2, get_context(12), get_context(10)) == Decimal("1.414213562")
