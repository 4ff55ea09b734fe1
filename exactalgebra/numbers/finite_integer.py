"""Integer held in a signed 64-bit word, within the SHORTENED range [-LONG_MAX, LONG_MAX]."""

import logging

from ..exceptions import RepresentationOverflowError, DivisionByZeroError, confirm_not_none
from ..names import SHORTENED
from ..prim_math_utils import can_be_long, pow_word, truncated_divmod
from . import cache
from .algebra_integer import AlgebraInteger

LOG = logging.getLogger(__name__)


class FiniteInteger(AlgebraInteger):
    """
    Word-sized integer.

    The range is symmetric so that negation and magnitude never leave the
    word. Integer arithmetic between two FiniteIntegers is done on the word
    values and checked against that range; results that do not fit are
    handed to the arbitrary-precision skeleton.
    """

    def __init__(self, value: int):
        self._value = value

    @staticmethod
    def value_of(value: int):
        """Natural construction; cached, word-sized or arbitrary as the value requires"""
        from .integer_factory import from_int
        return from_int(value)

    @staticmethod
    def value_of_strict(value: int) -> 'FiniteInteger':
        """Always a FiniteInteger, or RepresentationOverflowError"""
        confirm_not_none(value)
        cached = cache.get(value)
        if cached is not None:
            return cached
        if not can_be_long(value, SHORTENED):
            raise RepresentationOverflowError("This value is too large for FiniteInteger")
        return FiniteInteger(value)

    @property
    def numerator(self) -> int:
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def is_negative(self) -> bool:
        return self._value < 0

    def compare_to(self, that) -> int:
        that = self._operand(that)
        if isinstance(that, FiniteInteger):
            return (self._value > that._value) - (self._value < that._value)
        return super().compare_to(that)

    def _word_result(self, res: int, op: str, that):
        from .integer_factory import from_int
        if can_be_long(res, SHORTENED):
            return from_int(res)
        LOG.debug(f"FiniteInteger {op} leaves the word, using arbitrary precision")
        return getattr(super(), op)(that)

    def sum(self, augend):
        augend = self._operand(augend)
        if isinstance(augend, FiniteInteger):
            return self._word_result(self._value + augend._value, 'sum', augend)
        return super().sum(augend)

    def difference(self, subtrahend):
        subtrahend = self._operand(subtrahend)
        if isinstance(subtrahend, FiniteInteger):
            return self._word_result(self._value - subtrahend._value, 'difference', subtrahend)
        return super().difference(subtrahend)

    def product(self, multiplicand):
        multiplicand = self._operand(multiplicand)
        if isinstance(multiplicand, FiniteInteger):
            return self._word_result(self._value * multiplicand._value, 'product', multiplicand)
        return super().product(multiplicand)

    def quotient_z(self, divisor):
        # |dividend / divisor| <= |dividend|, so the word always holds the result
        from .integer_factory import from_int
        divisor = self._operand(divisor)
        if isinstance(divisor, FiniteInteger):
            return from_int(truncated_divmod(self._value, divisor._value)[0])
        return super().quotient_z(divisor)

    def remainder(self, divisor):
        from .integer_factory import from_int
        divisor = self._operand(divisor)
        if isinstance(divisor, FiniteInteger):
            return from_int(truncated_divmod(self._value, divisor._value)[1])
        return super().remainder(divisor)

    def modulo(self, modulus):
        from .integer_factory import from_int
        modulus = self._operand(modulus)
        if isinstance(modulus, FiniteInteger):
            self._check_modulus(modulus)
            return from_int(self._value % modulus._value)
        return super().modulo(modulus)

    def negated(self):
        from .integer_factory import from_int
        return from_int(-self._value)

    def inverted(self):
        from .rational_factory import from_ints
        if self._value == 0:
            raise DivisionByZeroError("Cannot invert 0")
        return from_ints(1, self._value)

    def _raise_base_case(self, exponent: int):
        from .integer_factory import from_int
        res = pow_word(self._value, exponent)
        if res is None:
            LOG.debug(f"FiniteInteger power {exponent} leaves the word, using arbitrary precision")
            return super()._raise_base_case(exponent)
        return from_int(res)

    def __repr__(self) -> str:
        return f"FiniteInteger({self._value})"
