"""
Integer skeleton.

AlgebraInteger is the integer family of the tower: a rational whose
denominator is fixed to 1 but which never compares == to a rational. Besides
integer-valued arithmetic it carries the number theory of the package (gcf,
lcm, divisibility, primes, modular inverse) and exact narrowing to
fixed-width words.
"""

from decimal import Decimal, Context
from typing import List, Optional

from ..exceptions import (UndefinedOperationError, InvalidArgumentError, DisallowedNarrowingError,
                          check_radix)
from ..names import INTEGER
from .. import prim_math_utils as pmu
from .. import flint_interface
from .algebra_number import get_context, index_value
from .rational import Rational, int_to_string
from .remainder_pair import RemainderPair


def _from_int(value: int):
    from .integer_factory import from_int
    return from_int(value)


class AlgebraInteger(Rational):
    """Exact integer; numerator is the value, denominator is always 1"""

    @property
    def denominator(self) -> int:
        return 1

    @property
    def whole(self) -> int:
        return self.numerator

    def whole_ai(self):
        return self

    def numerator_ai(self):
        return self

    def rank(self) -> str:
        return INTEGER

    def coefficient_highest_rank(self) -> type:
        return AlgebraInteger

    def is_one(self) -> bool:
        return self.numerator == 1

    def is_whole(self) -> bool:
        return True

    def is_even(self) -> bool:
        return self.numerator % 2 == 0

    def to_decimal(self, context: Optional[Context] = None) -> Decimal:
        if context is None:
            context = get_context()
        return context.plus(Decimal(self.numerator))

    def to_int(self, rounding: Optional[str] = None) -> int:
        return self.numerator

    def to_string(self, radix: int = 10) -> str:
        return int_to_string(self.numerator, check_radix(radix))

    def round_z(self, rounding: Optional[str] = None):
        return self

    def int_value_exact(self) -> int:
        """The value as a signed 32-bit int; DisallowedNarrowingError if it does not fit"""
        value = self.numerator
        if not pmu.can_be_int(value):
            raise DisallowedNarrowingError(type(self).__name__, 'int32', value)
        return value

    def long_value_exact(self) -> int:
        """The value as a signed 64-bit int; DisallowedNarrowingError if it does not fit"""
        value = self.numerator
        if not pmu.can_be_long(value):
            raise DisallowedNarrowingError(type(self).__name__, 'int64', value)
        return value

    # ------------------------------------------------------------------
    # Integer arithmetic
    # ------------------------------------------------------------------

    def sum(self, augend):
        augend = self._operand(augend)
        if isinstance(augend, AlgebraInteger):
            return _from_int(self.numerator + augend.numerator)
        return super().sum(augend)

    def difference(self, subtrahend):
        subtrahend = self._operand(subtrahend)
        if isinstance(subtrahend, AlgebraInteger):
            return _from_int(self.numerator - subtrahend.numerator)
        return super().difference(subtrahend)

    def product(self, multiplicand):
        multiplicand = self._operand(multiplicand)
        if isinstance(multiplicand, AlgebraInteger):
            return _from_int(self.numerator * multiplicand.numerator)
        return super().product(multiplicand)

    def negated(self):
        return _from_int(-self.numerator)

    def quotient_z(self, divisor):
        divisor = self._operand(divisor)
        if isinstance(divisor, AlgebraInteger):
            return _from_int(pmu.truncated_divmod(self.numerator, divisor.numerator)[0])
        return super().quotient_z(divisor)

    def quotient_z_with_remainder(self, divisor) -> RemainderPair:
        divisor = self._operand(divisor)
        if isinstance(divisor, AlgebraInteger):
            quotient, remainder = pmu.truncated_divmod(self.numerator, divisor.numerator)
            return RemainderPair(_from_int(quotient), _from_int(remainder))
        return super().quotient_z_with_remainder(divisor)

    def remainder(self, divisor):
        divisor = self._operand(divisor)
        if isinstance(divisor, AlgebraInteger):
            return _from_int(pmu.truncated_divmod(self.numerator, divisor.numerator)[1])
        return super().remainder(divisor)

    def modulo(self, modulus):
        modulus = self._operand(modulus)
        if isinstance(modulus, AlgebraInteger):
            self._check_modulus(modulus)
            return _from_int(self.numerator % modulus.numerator)
        return super().modulo(modulus)

    def raised_z(self, exponent):
        """Integer power; negative exponents are not allowed"""
        exponent = index_value(exponent)
        if exponent < 0:
            raise InvalidArgumentError(f"Disallowed negative exponent: {exponent}")
        self._check_zero_power(exponent)
        return self._positive_raiser(exponent)

    def sqrt_z_with_remainder(self) -> RemainderPair:
        if self.is_negative():
            raise UndefinedOperationError(f"Even root (2) of negative value {self}")
        root, remainder = pmu.sqrt_and_remainder(self.numerator)
        return RemainderPair(_from_int(root), _from_int(remainder))

    # ------------------------------------------------------------------
    # Number theory
    # ------------------------------------------------------------------

    def gcf(self, that):
        """Greatest common factor; undefined for 0 and 0"""
        that = self._integer_operand(that)
        if self.is_zero() and that.is_zero():
            raise UndefinedOperationError("GCF of 0 and 0")
        return _from_int(pmu.gcf(self.numerator, that.numerator))

    def lcm(self, that):
        """Least common multiple (positive); 0 is not allowed"""
        that = self._integer_operand(that)
        return _from_int(pmu.lcm(self.numerator, that.numerator))

    def can_divide_by(self, divisor) -> bool:
        divisor = self._integer_operand(divisor)
        return pmu.is_divisible(self.numerator, divisor.numerator)

    def is_prime(self) -> bool:
        return flint_interface.is_prime(self.numerator)

    def factors(self) -> List['AlgebraInteger']:
        """All positive divisors of |this|, ascending; empty for 0"""
        if self.is_zero():
            return []
        divisors = [1]
        for prime, exponent in flint_interface.prime_factors(self.numerator):
            divisors = [d * prime**k for d in divisors for k in range(exponent + 1)]
        return [_from_int(d) for d in sorted(divisors)]

    def prime_factorization(self) -> List['AlgebraInteger']:
        """Prime factors with multiplicity, ascending; empty unless this is greater than 1"""
        if self.numerator < 2:
            return []
        return [_from_int(prime)
                for prime, exponent in flint_interface.prime_factors(self.numerator)
                for _ in range(exponent)]

    def mod_inverse(self, modulus):
        """x with this * x == 1 (mod modulus), in [0, modulus)"""
        modulus = self._integer_operand(modulus)
        self._check_modulus(modulus)
        try:
            return _from_int(pow(self.numerator, -1, modulus.numerator))
        except ValueError as e:
            raise UndefinedOperationError(f"{self} has no inverse modulo {modulus}") from e

    def _integer_operand(self, that) -> 'AlgebraInteger':
        that = self._operand(that)
        if not isinstance(that, AlgebraInteger):
            raise TypeError(f"integer operand required, got {type(that).__name__}")
        return that

    def __index__(self) -> int:
        return self.numerator

    def __hash__(self) -> int:
        return ~hash(self.numerator)
