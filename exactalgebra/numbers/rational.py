"""
Rational skeleton.

Rational implements the AlgebraNumber primitives over the numerator and
denominator of the irreducible form: cross multiplication for sums and
differences, numerator/denominator products, exact comparison and exact
rounding. Results are renormalized through rational_factory.from_ints, which
picks the most compact valid representation (integer before rational, packed
word before arbitrary precision).
"""

from decimal import Decimal, Context
from typing import Optional

import numpy as np

from ..exceptions import DivisionByZeroError, check_radix
from ..names import RATIONAL
from ..prim_math_utils import big_pow, round_quotient
from .algebra_number import AlgebraNumber, get_context


def int_to_string(value: int, radix: int = 10) -> str:
    """Signed integer in the given radix, lower case digits"""
    if radix == 10:
        return str(value)
    return np.base_repr(value, base=radix).lower()


class Rational(AlgebraNumber):
    """
    Exact rational number numerator/denominator.

    The denominator is always positive and shares no factor with the
    numerator. Two rationals are == only if both are of the rational family
    and have equal numerators and denominators.
    """

    @property
    def whole(self) -> int:
        """Integer part, truncated toward zero"""
        num = self.numerator
        den = self.denominator
        return -(-num // den) if num < 0 else num // den

    def numerator_ai(self):
        """Numerator as an integer value"""
        from .integer_factory import from_int
        return from_int(self.numerator)

    def denominator_ai(self):
        """Denominator as an integer value"""
        from .integer_factory import from_int
        return from_int(self.denominator)

    def whole_ai(self):
        """Integer part as an integer value"""
        from .integer_factory import from_int
        return from_int(self.whole)

    def rank(self) -> str:
        return RATIONAL

    def coefficient_highest_rank(self) -> type:
        return Rational

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    def is_negative(self) -> bool:
        return self.numerator < 0

    def is_whole(self) -> bool:
        return self.denominator == 1

    def to_decimal(self, context: Optional[Context] = None) -> Decimal:
        if context is None:
            context = get_context()
        if self.is_whole():
            return context.plus(Decimal(self.numerator))
        return context.divide(Decimal(self.numerator), Decimal(self.denominator))

    def to_int(self, rounding: Optional[str] = None) -> int:
        return round_quotient(self.numerator, self.denominator, rounding)

    def to_string(self, radix: int = 10) -> str:
        """"num/den" in the given radix, or just "num" for whole values"""
        radix = check_radix(radix)
        res = int_to_string(self.numerator, radix)
        if not self.is_whole():
            res += "/" + int_to_string(self.denominator, radix)
        return res

    def as_mixed_number(self, radix: Optional[int] = None) -> str:
        """
        Mixed number string such as "3+(1/2)" or "-3-(1/2)".

        Args:
            radix: Radix of the digits; None means 10

        Returns:
            The whole part followed by the magnitude of the fractional part in
            parentheses, joined by the sign of the value. Whole values print
            as their integer string.
        """
        radix = check_radix(radix)
        whole = self.whole_ai()
        whole_s = whole.to_string(radix)
        if self.is_whole():
            return whole_s
        part = self.difference(whole).magnitude()
        sep = "-(" if self.is_negative() else "+("
        return whole_s + sep + part.to_string(radix) + ")"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def sum(self, augend):
        return self._arith_res(self._operand(augend), False)

    def difference(self, subtrahend):
        return self._arith_res(self._operand(subtrahend), True)

    def _arith_res(self, that, subtract: bool):
        # a/b +- c/d = (ad +- cb) / bd
        from .rational_factory import from_ints
        this_num = self.numerator * that.denominator
        that_num = that.numerator * self.denominator
        new_num = this_num - that_num if subtract else this_num + that_num
        return from_ints(new_num, self.denominator * that.denominator)

    def product(self, multiplicand):
        return self._mult_res(self._operand(multiplicand), False)

    def quotient(self, divisor):
        return self._mult_res(self._operand(divisor), True)

    def _mult_res(self, that, divide: bool):
        from .rational_factory import from_ints
        if divide:
            if that.is_zero():
                raise DivisionByZeroError("Cannot divide by 0")
            return from_ints(self.numerator * that.denominator, self.denominator * that.numerator)
        return from_ints(self.numerator * that.numerator, self.denominator * that.denominator)

    def negated(self):
        from .rational_factory import from_ints
        return from_ints(-self.numerator, self.denominator)

    def inverted(self):
        from .rational_factory import from_ints
        if self.is_zero():
            raise DivisionByZeroError("Cannot invert 0")
        return from_ints(self.denominator, self.numerator)

    def compare_to(self, that) -> int:
        that = self._operand(that)
        left = self.numerator * that.denominator
        right = that.numerator * self.denominator
        return (left > right) - (left < right)

    def _raise_base_case(self, exponent: int):
        # numerator and denominator stay coprime under powers
        from .rational_factory import from_ints
        return from_ints(big_pow(self.numerator, exponent), big_pow(self.denominator, exponent))

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational) and other.rank() == self.rank():
            return self.numerator == other.numerator and self.denominator == other.denominator
        return False

    def __hash__(self) -> int:
        return ~(0xAAAAAAAA - hash(self.numerator)) ^ (0x55555555 * hash(self.denominator))
