"""Integer backed by an arbitrary-precision Python int."""

from ..exceptions import confirm_not_none
from .algebra_integer import AlgebraInteger


class ArbitraryInteger(AlgebraInteger):
    """Integer without size bounds"""

    def __init__(self, value: int):
        self._value = value

    @staticmethod
    def value_of(value: int):
        """Natural construction; may return a cached or word-sized integer instead"""
        from .integer_factory import from_int
        return from_int(value)

    @staticmethod
    def value_of_strict(value: int) -> 'ArbitraryInteger':
        """Always a new ArbitraryInteger, whatever the size of value"""
        confirm_not_none(value)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"int required, got {type(value).__name__}")
        return ArbitraryInteger(value)

    @property
    def numerator(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"ArbitraryInteger({self._value})"
