"""
Exact Number Tower

This module provides the exact number types of exactalgebra:
- Rational values in a packed 64-bit word or on arbitrary-precision ints
- Integer values in a 64-bit word or on arbitrary-precision ints
- Natural and strict factories that pick the representation
- RemainderPair results of truncating operations

No operation rounds unless rounding is requested explicitly.
"""

from .remainder_pair import RemainderPair
from .algebra_number import AlgebraNumber, DEFAULT_ROUNDING, DEFAULT_PRECISION, MAX_PRECISION, get_context
from .rational import Rational
from .finite_rational import FiniteRational
from .arbitrary_rational import ArbitraryRational
from .algebra_integer import AlgebraInteger
from .finite_integer import FiniteInteger
from .arbitrary_integer import ArbitraryInteger
from .integer_factory import IntegerFactory, from_int, from_int_uncached
from .rational_factory import (RationalFactory, from_ints, from_ints_strict, from_numbers, from_decimal, from_float,
                               from_string, from_number)
from .cache import CACHE_DEPTH

__all__ = [
    'RemainderPair',
    'AlgebraNumber',
    'Rational',
    'FiniteRational',
    'ArbitraryRational',
    'AlgebraInteger',
    'FiniteInteger',
    'ArbitraryInteger',
    'IntegerFactory',
    'RationalFactory',
    'from_int',
    'from_int_uncached',
    'from_ints',
    'from_ints_strict',
    'from_numbers',
    'from_decimal',
    'from_float',
    'from_string',
    'from_number',
    'get_context',
    'DEFAULT_ROUNDING',
    'DEFAULT_PRECISION',
    'MAX_PRECISION',
    'CACHE_DEPTH',
]
