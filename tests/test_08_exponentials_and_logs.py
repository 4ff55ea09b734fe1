"""Exponentials, natural logarithms, rational powers and logarithms to a base, with remainders."""
from decimal import Decimal, ROUND_DOWN, ROUND_FLOOR, ROUND_CEILING
from fractions import Fraction
import pytest
import exactalgebra as ea
from exactalgebra import from_int, from_ints, get_context

# =============================================================================
# Exponentials
# =============================================================================


def test_exp_round_z():
    """e^x rounded to an integer follows the rounding mode."""
    assert from_int(0).exp_round_z() is from_int(1)
    assert from_int(2).exp_round_z(ROUND_DOWN) == from_int(7)
    assert from_int(2).exp_round_z(ROUND_CEILING) == from_int(8)
    assert from_int(10).exp_round_z(ROUND_DOWN) == from_int(22026)
    assert from_int(-1).exp_round_z(ROUND_DOWN) is from_int(0)


def test_exp_round_q():
    """e^x as a rational rounded to the context."""
    e = from_int(1).exp_round_q(get_context(10))
    assert e.to_decimal(get_context(10)) == Decimal("2.718281828")
    assert from_ints(1, 2).exp_round_q(get_context(6, ROUND_DOWN)) == from_ints(164872, 10**5)


def test_exp_z_with_remainder():
    """The remainder of e^x is x - ln(floor)."""
    pair = from_int(0).exp_z_with_remainder()
    assert pair.value is from_int(1)
    assert pair.is_exact()
    pair = from_int(3).exp_z_with_remainder()
    assert pair.value == from_int(20)
    assert 0 < pair.remainder < from_ints(1, 100)
    with pytest.raises(ea.UndefinedOperationError):
        from_int(-1).exp_z_with_remainder()


def test_exp_q_with_remainder():
    """A truncated rational exponential leaves a small non-negative remainder."""
    pair = from_int(1).exp_q_with_remainder(10)
    assert pair.value == from_ints(2718281828, 10**9)
    assert not pair.remainder.is_negative()
    assert pair.remainder < from_ints(1, 10**8)


# =============================================================================
# Natural logarithms
# =============================================================================


def test_ln_round_z():
    """ln(x) rounded to an integer."""
    assert from_int(1).ln_round_z() is from_int(0)
    assert from_int(10).ln_round_z(ROUND_DOWN) == from_int(2)
    assert from_int(10).ln_round_z(ROUND_CEILING) == from_int(3)
    assert from_ints(1, 10).ln_round_z(ROUND_FLOOR) == from_int(-3)


def test_ln_round_q():
    """ln(x) as a rational rounded to the context."""
    assert from_int(10).ln_round_q(get_context(8)) == from_ints(23025851, 10**7)
    assert from_int(1).ln_round_q() is from_int(0)


@pytest.mark.parametrize("value", [from_int(0), from_ints(-1, 2), from_int(-3)])
def test_ln_of_non_positive_values(value):
    """Logarithms are only defined for positive values."""
    with pytest.raises(ea.UndefinedOperationError):
        value.ln_round_z()
    with pytest.raises(ea.UndefinedOperationError):
        value.ln_round_q()
    with pytest.raises(ea.UndefinedOperationError):
        value.ln_z_with_remainder()


def test_ln_with_remainder():
    """The remainder of ln(x) is x - e^floor."""
    pair = from_int(1).ln_z_with_remainder()
    assert pair.value is from_int(0)
    assert pair.is_exact()
    pair = from_int(8).ln_z_with_remainder()
    assert pair.value == from_int(2)
    assert 0 < pair.remainder < 1
    pair = from_int(10).ln_q_with_remainder(5)
    assert pair.value == from_ints(23025, 10**4)
    assert 0 < pair.remainder < from_ints(1, 1000)


# =============================================================================
# Rational powers
# =============================================================================


def test_small_rational_powers_are_exact():
    """Powers n/d with small n and d go through exact roots."""
    assert from_int(9).power_round_z(from_ints(1, 2)) == from_int(3)
    assert from_int(1000).power_round_q(from_ints(2, 3), get_context(20, ROUND_DOWN)) == from_int(100)
    assert from_int(1000).power_round_q(from_ints(-2, 3), get_context(20, ROUND_CEILING)) == from_ints(1, 100)
    assert from_int(-8).power_round_z(from_ints(1, 3)) == from_int(-2)
    assert from_int(3).power_round_z(2) == from_int(9)
    assert from_int(2).power_round_q(-3) == from_ints(1, 8)


def test_power_of_negative_base():
    """Even roots of negative bases are undefined."""
    with pytest.raises(ea.UndefinedOperationError):
        from_int(-8).power_round_z(from_ints(1, 2))
    with pytest.raises(ea.UndefinedOperationError):
        from_int(-8).power_round_q(from_ints(1, 100))
    assert from_int(-8).power_round_q(from_ints(1, 101), get_context(10)).is_negative()


def test_approximated_powers():
    """Powers with large numerator or denominator use the decimal approximation."""
    value = from_int(2).power_round_q(from_ints(1, 100), get_context(10))
    assert value.to_decimal(get_context(10)) == Decimal("1.006955550")
    assert from_int(2).power_round_z(from_ints(201, 100), ROUND_DOWN) == from_int(4)
    assert from_int(2).power_round_z(from_ints(201, 100), ROUND_CEILING) == from_int(5)


def test_powers_of_zero():
    """0^p is 0 for positive p, undefined for 0, a division by zero for negative p."""
    zero = from_int(0)
    assert zero.power_round_z(from_ints(1, 2)) is zero
    assert zero.power_round_q(from_ints(1, 100)) == zero
    with pytest.raises(ea.UndefinedOperationError):
        zero.power_round_q(0)
    with pytest.raises(ea.DivisionByZeroError):
        zero.power_round_z(from_ints(-1, 2))
    with pytest.raises(ea.DivisionByZeroError):
        zero.power_z_with_remainder(from_ints(-1, 2))


def test_power_with_remainder():
    """The remainder of x^p is x - floor^(1/p), exact for rational inverses."""
    pair = from_int(10).power_z_with_remainder(from_ints(1, 2))
    assert (pair.value, pair.remainder) == (from_int(3), from_int(1))
    pair = from_int(1000).power_q_with_remainder(from_ints(1, 3))
    assert pair.value == from_int(10)
    assert pair.is_exact()
    pair = from_int(5).power_z_with_remainder(0)
    assert pair.value is from_int(1)
    assert pair.is_exact()
    pair = from_int(17).power_z_with_remainder(from_ints(1, 4))
    assert pair.value == from_int(2)
    assert pair.remainder == from_int(1)


# =============================================================================
# Logarithms to a base
# =============================================================================


def test_log_base_round_z():
    """Exact logarithms stay exact under every rounding mode."""
    assert from_int(81).log_base_round_z(3, ROUND_DOWN) == from_int(4)
    assert from_int(81).log_base_round_z(3, ROUND_CEILING) == from_int(4)
    assert from_int(80).log_base_round_z(3, ROUND_DOWN) == from_int(3)
    assert from_int(80).log_base_round_z(3, ROUND_CEILING) == from_int(4)
    assert from_int(2**200).log_base_round_z(2, ROUND_FLOOR) == from_int(200)


def test_log_base_round_q():
    """Rational logarithms are settled exactly before rounding."""
    assert from_ints(1, 8).log_base_round_q(2) == from_int(-3)
    assert from_int(1000).log_base_round_q(10, get_context(20, ROUND_FLOOR)) == from_int(3)
    assert from_int(2).log_base_round_q(8, get_context(5, ROUND_CEILING)) == from_ints(33334, 10**5)
    assert from_int(2).log_base_round_q(8, get_context(5, ROUND_FLOOR)) == from_ints(33333, 10**5)
    assert from_int(4).log_base_round_q(from_ints(1, 2)) == from_int(-2)
    ratio = from_int(10).log_base_round_q(2, get_context(10))
    assert ratio.to_decimal(get_context(10)) == Decimal("3.321928095")


@pytest.mark.parametrize("value, base", [
    (from_int(8), 1),
    (from_int(8), 0),
    (from_int(8), -2),
    (from_int(0), 2),
    (from_ints(-1, 2), 2),
])
def test_log_base_domain(value, base):
    """Non-positive values and bases, and base one, are refused."""
    with pytest.raises(ea.UndefinedOperationError):
        value.log_base_round_z(base)
    with pytest.raises(ea.UndefinedOperationError):
        value.log_base_q_with_remainder(base)


def test_log_base_with_remainder():
    """The remainder of log_b(x) is x - b^floor, exactly."""
    pair = from_int(80).log_base_z_with_remainder(3)
    assert (pair.value, pair.remainder) == (from_int(3), from_int(53))
    pair = from_int(81).log_base_z_with_remainder(3)
    assert (pair.value, pair.remainder) == (from_int(4), from_int(0))
    pair = from_int(1000).log_base_q_with_remainder(10, 5)
    assert pair.value == from_int(3)
    assert pair.is_exact()
    value, remainder = from_ints(1, 3).log_base_z_with_remainder(2)
    assert value == from_int(-1)
    assert Fraction(remainder.numerator, remainder.denominator) == Fraction(1, 3) - Fraction(1, 2)
