"""
Rational packed into a single 64-bit word.

Layout of the word:

    bits  0-31: magnitude of the numerator, unsigned
    bits 32-63: denominator, signed; its sign is the sign of the value

The denominator may reach 2**31 (the EXTENDED 32-bit bound). Its positive form
does not fit a signed half word and is stored as 0, which is never a valid
denominator otherwise. Numerator and denominator are decoded into Python ints
on first access and kept.
"""

import logging

from ..exceptions import DivisionByZeroError, RepresentationOverflowError
from ..names import UNSIGNED, EXTENDED, DEFAULT
from ..prim_math_utils import LONG_TO_INT_MASK, NEG_INT_MIN, can_be_int, can_be_long, gcf
from .rational import Rational

LOG = logging.getLogger(__name__)

ZERO_VAL = 1 << 32
ONE_VAL = ZERO_VAL + 1


def does_fit(numerator: int, denominator: int) -> bool:
    """Whether a normalized numerator/denominator pair can be packed"""
    return can_be_int(abs(numerator), UNSIGNED) and can_be_int(denominator, EXTENDED)


def _compress(magnitude: int, signed_denominator: int) -> int:
    if signed_denominator in (0, NEG_INT_MIN):
        return magnitude
    return (signed_denominator << 32) | magnitude


class FiniteRational(Rational):
    """
    Packed rational, valid while |numerator| < 2**32 and denominator <= 2**31.

    Arithmetic between two FiniteRationals reads the word fields directly,
    without decoding into the numerator/denominator mirror. Equal
    denominators are added without cross multiplication. Word products are
    checked against the 64-bit bounds; results leaving the word are
    recomputed through the arbitrary-precision skeleton.
    """

    def __init__(self, numerator: int, denominator: int):
        """
        Packs an already normalized pair.

        Args:
            numerator: Signed numerator, coprime to denominator
            denominator: Positive denominator
        """
        signed_den = -denominator if numerator < 0 else denominator
        self._value = _compress(abs(numerator), signed_den)
        self._numerator = None
        self._denominator = None

    @staticmethod
    def value_of(numerator: int, denominator: int = 1):
        """Natural construction; may return an integer or an ArbitraryRational"""
        from .rational_factory import from_ints
        return from_ints(numerator, denominator)

    @staticmethod
    def value_of_strict(numerator: int, denominator: int = 1) -> 'FiniteRational':
        """Always a FiniteRational (even for whole values), or RepresentationOverflowError"""
        if denominator == 0:
            raise DivisionByZeroError("Cannot have denominator of 0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcf(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
        if not does_fit(numerator, denominator):
            raise RepresentationOverflowError(f"Overflow of bounds of FiniteRational for {numerator}/{denominator}. "
                                              "Consider using ArbitraryRational or factory instead")
        return FiniteRational(numerator, denominator)

    @property
    def packed(self) -> int:
        """The raw 64-bit word"""
        return self._value

    def _numerator_magnitude(self) -> int:
        return self._value & LONG_TO_INT_MASK

    def _denominator_signed(self) -> int:
        den = self._value >> 32
        return NEG_INT_MIN if den == 0 else den

    def _word_parts(self):
        """Signed numerator and positive denominator read from the word"""
        magnitude = self._numerator_magnitude()
        if self._value < 0:
            return -magnitude, -self._denominator_signed()
        return magnitude, self._denominator_signed()

    @property
    def numerator(self) -> int:
        numerator = self._numerator
        if numerator is None:
            magnitude = self._numerator_magnitude()
            numerator = self._numerator = -magnitude if self._value < 0 else magnitude
        return numerator

    @property
    def denominator(self) -> int:
        denominator = self._denominator
        if denominator is None:
            denominator = self._denominator = abs(self._denominator_signed())
        return denominator

    @property
    def whole(self) -> int:
        whole = self._numerator_magnitude() // abs(self._denominator_signed())
        return -whole if self._value < 0 else whole

    def is_zero(self) -> bool:
        return self._value == ZERO_VAL

    def is_one(self) -> bool:
        return self._value == ONE_VAL

    def is_negative(self) -> bool:
        return self._value < 0

    def is_whole(self) -> bool:
        return abs(self._value >> 32) == 1

    # ------------------------------------------------------------------
    # Word-sized fast paths
    # ------------------------------------------------------------------

    def compare_to(self, that) -> int:
        that = self._operand(that)
        if not isinstance(that, FiniteRational):
            return super().compare_to(that)
        this_num, this_den = self._word_parts()
        that_num, that_den = that._word_parts()
        left = this_num * that_den
        right = that_num * this_den
        return (left > right) - (left < right)

    def negated(self):
        if self.is_zero():
            return self
        res = FiniteRational.__new__(FiniteRational)
        res._value = _compress(self._numerator_magnitude(), -self._denominator_signed())
        res._numerator = None
        res._denominator = self._denominator
        return res

    def inverted(self):
        from .rational_factory import from_ints
        if self.is_zero():
            raise DivisionByZeroError("Cannot invert 0")
        return from_ints(self.denominator, self.numerator)

    def sum(self, augend):
        augend = self._operand(augend)
        if isinstance(augend, FiniteRational):
            return self._arith_find(augend, False)
        return super().sum(augend)

    def difference(self, subtrahend):
        subtrahend = self._operand(subtrahend)
        if isinstance(subtrahend, FiniteRational):
            return self._arith_find(subtrahend, True)
        return super().difference(subtrahend)

    def _arith_find(self, that: 'FiniteRational', subtract: bool):
        from .rational_factory import from_ints
        this_num, this_den = self._word_parts()
        that_num, that_den = that._word_parts()
        if this_den == that_den:
            # shared denominator, numerators of at most 33 bits cannot leave the word
            return from_ints(this_num - that_num if subtract else this_num + that_num, this_den)
        this_num *= that_den
        that_num *= this_den
        new_num = this_num - that_num if subtract else this_num + that_num
        if not can_be_long(new_num, DEFAULT):
            LOG.debug(f"FiniteRational {'difference' if subtract else 'sum'} overflows a word, "
                      f"using arbitrary precision")
            return super().difference(that) if subtract else super().sum(that)
        return from_ints(new_num, this_den * that_den)

    def product(self, multiplicand):
        multiplicand = self._operand(multiplicand)
        if isinstance(multiplicand, FiniteRational):
            return self._mult_find(multiplicand, False)
        return super().product(multiplicand)

    def quotient(self, divisor):
        divisor = self._operand(divisor)
        if isinstance(divisor, FiniteRational):
            return self._mult_find(divisor, True)
        return super().quotient(divisor)

    def _mult_find(self, that: 'FiniteRational', divide: bool):
        from .rational_factory import from_ints
        this_num, this_den = self._word_parts()
        that_num, that_den = that._word_parts()
        if divide:
            if that.is_zero():
                raise DivisionByZeroError("Cannot divide by 0")
            new_num = this_num * that_den
            new_den = this_den * that_num
        else:
            new_num = this_num * that_num
            new_den = this_den * that_den
        if not (can_be_long(new_num, DEFAULT) and can_be_long(new_den, DEFAULT)):
            LOG.debug(f"FiniteRational {'quotient' if divide else 'product'} overflows a word, "
                      f"using arbitrary precision")
            return super().quotient(that) if divide else super().product(that)
        return from_ints(new_num, new_den)

    def __repr__(self) -> str:
        return f"FiniteRational({self.numerator}, {self.denominator})"
