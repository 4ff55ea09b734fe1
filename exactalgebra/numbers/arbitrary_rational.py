"""Rational backed by arbitrary-precision Python ints."""

from ..exceptions import DivisionByZeroError, confirm_not_none
from ..prim_math_utils import gcf
from .rational import Rational


class ArbitraryRational(Rational):
    """Rational without size bounds; always a valid encoding"""

    def __init__(self, numerator: int, denominator: int):
        """Wraps an already normalized pair (denominator positive, coprime to numerator)"""
        self._numerator = numerator
        self._denominator = denominator

    @staticmethod
    def value_of(numerator: int, denominator: int = 1):
        """Natural construction; picks the most compact representation"""
        from .rational_factory import from_ints
        return from_ints(numerator, denominator)

    @staticmethod
    def value_of_strict(numerator: int, denominator: int = 1) -> 'ArbitraryRational':
        """Normalized ArbitraryRational regardless of size, also for whole values"""
        confirm_not_none(numerator, 'numerator')
        confirm_not_none(denominator, 'denominator')
        if denominator == 0:
            raise DivisionByZeroError("Cannot have denominator of 0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcf(numerator, denominator)
        return ArbitraryRational(numerator // divisor, denominator // divisor)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __repr__(self) -> str:
        return f"ArbitraryRational({self._numerator}, {self._denominator})"
