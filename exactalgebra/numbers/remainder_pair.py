"""
Result type of truncating operations.

quotient_z_with_remainder, root_z_with_remainder and friends return a
RemainderPair holding the truncated value and what was left over. The pair
unpacks like a tuple:

    >>> q, r = value_of(17).quotient_z_with_remainder(3)
"""

from ..exceptions import confirm_not_none


class RemainderPair:
    """
    Immutable (value, remainder) pair.

    The predicates look at both fields: a pair is zero only if nothing is left
    over, and it is negative if its value is negative or, for a zero value,
    if the remainder is.
    """

    def __init__(self, value, remainder):
        self._value = confirm_not_none(value, 'value')
        self._remainder = confirm_not_none(remainder, 'remainder')

    @property
    def value(self):
        """The truncated result"""
        return self._value

    @property
    def remainder(self):
        """What the truncation left over"""
        return self._remainder

    def is_zero(self) -> bool:
        return self._value.is_zero() and self._remainder.is_zero()

    def is_one(self) -> bool:
        return self._value.is_one() and self._remainder.is_zero()

    def is_negative(self) -> bool:
        return self._value.is_negative() or (self._value.is_zero() and self._remainder.is_negative())

    def is_exact(self) -> bool:
        """True if the truncation lost nothing"""
        return self._remainder.is_zero()

    def __iter__(self):
        yield self._value
        yield self._remainder

    def __eq__(self, other) -> bool:
        if isinstance(other, RemainderPair):
            return self._value == other._value and self._remainder == other._remainder
        return False

    def __hash__(self) -> int:
        return hash((self._value, self._remainder))

    def __str__(self) -> str:
        return f"{self._value}, remainder {self._remainder}"

    def __repr__(self) -> str:
        return f"RemainderPair({self._value!r}, {self._remainder!r})"
