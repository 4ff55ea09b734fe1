"""
Entry points for integer values.

from_int is the natural path: cached instance for small values, FiniteInteger
when the value fits the SHORTENED 64-bit range, ArbitraryInteger otherwise.
from_int_uncached is the same selection without consulting the cache, so it
always yields a fresh object. Neither ever fails on size; the word-only
constructor is FiniteInteger.value_of_strict.

IntegerFactory is a reusable builder for code that collects the value
before constructing it:

    >>> IntegerFactory.new_integer().whole(2**70).build()
    ArbitraryInteger(1180591620717411303424)
"""

from ..exceptions import InvalidArgumentError, confirm_not_none
from ..names import SHORTENED, WHOLE
from ..prim_math_utils import can_be_long
from . import cache
from .algebra_integer import AlgebraInteger
from .finite_integer import FiniteInteger
from .arbitrary_integer import ArbitraryInteger


def _check_int(value) -> int:
    confirm_not_none(value)
    if isinstance(value, AlgebraInteger):
        return value.numerator
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"int required, got {type(value).__name__}")
    return value


def from_int(value) -> AlgebraInteger:
    """Most compact integer for value"""
    value = _check_int(value)
    cached = cache.get(value)
    if cached is not None:
        return cached
    if can_be_long(value, SHORTENED):
        return FiniteInteger(value)
    return ArbitraryInteger(value)


def from_int_uncached(value) -> AlgebraInteger:
    """Word-sized or arbitrary integer for value, bypassing the cache"""
    value = _check_int(value)
    if can_be_long(value, SHORTENED):
        return FiniteInteger(value)
    return ArbitraryInteger(value)


class IntegerFactory:
    """Builder collecting the whole value of an integer"""

    def __init__(self):
        self._whole = None

    @staticmethod
    def new_integer() -> 'IntegerFactory':
        return IntegerFactory()

    def whole(self, value) -> 'IntegerFactory':
        self._whole = _check_int(value)
        return self

    def clear(self):
        self._whole = None

    def _value(self) -> int:
        if self._whole is None:
            raise InvalidArgumentError(f"No {WHOLE} value given to build from")
        return self._whole

    def build(self) -> AlgebraInteger:
        return from_int(self._value())

    def build_uncached(self) -> AlgebraInteger:
        return from_int_uncached(self._value())
