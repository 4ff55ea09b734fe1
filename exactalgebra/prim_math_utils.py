#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Word-size boundary tests and integer helpers

All packed representations in exactalgebra decide whether a result still fits
their machine word through can_be_compact (or its shorthands can_be_int and
can_be_long). The boundary policies are:

    SHORTENED:  [-MAX, MAX], the signed range without its negative extreme
    DEFAULT:    [MIN, MAX], the full signed range
    EXTENDED:   [MIN, -MIN], the signed range plus the positive twin of MIN
    UNSIGNED:   [0, 2*MAX + 1]

Example:
    >>> can_be_int(2**31, EXTENDED)
    True
    >>> can_be_long(-2**63, SHORTENED)
    False
"""

import decimal
import logging
import math
from typing import Dict, Optional, Tuple

import numpy as np

from .names import SHORTENED, DEFAULT, EXTENDED, UNSIGNED
from .exceptions import (UndefinedOperationError, DivisionByZeroError, InvalidArgumentError, confirm_not_none)

LOG = logging.getLogger(__name__)

INT_MAX = int(np.iinfo(np.int32).max)
INT_MIN = int(np.iinfo(np.int32).min)
UINT_MAX = int(np.iinfo(np.uint32).max)
LONG_MAX = int(np.iinfo(np.int64).max)
LONG_MIN = int(np.iinfo(np.int64).min)

# mask of the low half of a 64-bit word
LONG_TO_INT_MASK = UINT_MAX
NEG_INT_MIN = -INT_MIN

BAD_GCF = "Undefined input pair: 0, 0"
BAD_LCM = "Disallowed input: 0"


def _bound_table(signed, unsigned) -> Dict[str, Tuple[int, int]]:
    smin = int(np.iinfo(signed).min)
    smax = int(np.iinfo(signed).max)
    umax = int(np.iinfo(unsigned).max)
    return {
        SHORTENED: (-smax, smax),
        DEFAULT: (smin, smax),
        EXTENDED: (smin, -smin),
        UNSIGNED: (0, umax),
    }


_BOUNDS = {
    8: _bound_table(np.int8, np.uint8),
    16: _bound_table(np.int16, np.uint16),
    32: _bound_table(np.int32, np.uint32),
    64: _bound_table(np.int64, np.uint64),
}


def boundary_range(policy: Optional[str] = None, width: int = 64) -> Tuple[int, int]:
    """Inclusive (lower, upper) bounds of a word of the given bit width under a policy.

    Args:
        policy: One of SHORTENED, DEFAULT, EXTENDED, UNSIGNED. None means DEFAULT.
        width: Word width in bits (8, 16, 32 or 64)

    Returns:
        Tuple (lower, upper)
    """
    if policy is None:
        policy = DEFAULT
    try:
        table = _BOUNDS[width]
    except KeyError:
        raise InvalidArgumentError(f"unsupported word width: {width}") from None
    try:
        return table[policy]
    except KeyError:
        raise InvalidArgumentError(f"unknown boundary policy: {policy}") from None


def can_be_compact(value: int, policy: Optional[str] = None, width: int = 64) -> bool:
    """Check whether an arbitrary-precision integer fits a word of the given width under policy."""
    confirm_not_none(value)
    lower, upper = boundary_range(policy, width)
    return lower <= value <= upper


def can_be_int(value: int, policy: Optional[str] = None) -> bool:
    """can_be_compact for 32-bit words"""
    return can_be_compact(value, policy, 32)


def can_be_long(value: int, policy: Optional[str] = None) -> bool:
    """can_be_compact for 64-bit words"""
    return can_be_compact(value, policy, 64)


def gcf(left: int, right: int) -> int:
    """Greatest common factor, always positive. gcf(0, 0) is undefined."""
    if left == 0 and right == 0:
        raise UndefinedOperationError(BAD_GCF)
    return math.gcd(left, right)


def lcm(left: int, right: int) -> int:
    """Least common multiple of the magnitudes; 0 is not an allowed input."""
    if left == 0 or right == 0:
        raise UndefinedOperationError(BAD_LCM)
    left = abs(left)
    right = abs(right)
    return (left * right) // math.gcd(left, right)


def is_divisible(dividend: int, divisor: int) -> bool:
    if divisor == 0:
        raise DivisionByZeroError("Cannot divide by 0")
    return dividend % divisor == 0


def sqrt_and_remainder(value: int) -> Tuple[int, int]:
    """
    Integer square root and remainder of a non-negative value.

    Returns:
        Tuple (root, remainder) with root**2 + remainder == value
    """
    if value < 0:
        raise UndefinedOperationError(f"Square root of negative value not defined: {value}")
    root = math.isqrt(value)
    return root, value - root * root


def pow_word(base: int, exponent: int, policy: Optional[str] = SHORTENED) -> Optional[int]:
    """
    Power that stays within a signed 64-bit word.

    Args:
        base: Base, itself within the word
        exponent: Non-negative exponent
        policy: Boundary policy the result must satisfy

    Returns:
        base**exponent, or None if the result leaves the word
    """
    if exponent < 0:
        raise InvalidArgumentError(f"Negative exponent: {exponent}")
    if base == 0 and exponent == 0:
        raise UndefinedOperationError("0^0 is undefined")
    if base in (0, 1) or exponent == 0:
        return 1 if exponent == 0 else base
    if base == -1:
        return -1 if exponent % 2 else 1
    # |base| >= 2, so anything past 63 multiplications has already overflowed
    if exponent >= 64:
        return None
    res = 1
    for _ in range(exponent):
        res *= base
        if not can_be_long(res, policy):
            return None
    return res


def big_pow(base: int, exponent: int) -> int:
    """
    Arbitrary-precision power whose exponent may exceed the 32-bit range.

    The exponent is consumed in chunks of INT_MAX, so that no single call
    to the underlying power ever receives an exponent beyond a 32-bit word.
    0^0 is undefined.
    """
    confirm_not_none(exponent, 'exponent')
    if exponent < 0:
        raise InvalidArgumentError(f"Negative exponent: {exponent}")
    if base == 0 and exponent == 0:
        raise UndefinedOperationError("0^0 is undefined")
    if base in (0, 1):
        return base
    if base == -1:
        return -1 if exponent % 2 else 1
    res = 1
    while exponent > INT_MAX:
        exponent -= INT_MAX
        res *= base**INT_MAX
    return res * base**exponent


def round_quotient(numerator: int, denominator: int, rounding: Optional[str] = None) -> int:
    """
    Exact numerator/denominator rounded to an integer.

    Args:
        numerator: Any integer
        denominator: Positive integer
        rounding: A decimal rounding mode (decimal.ROUND_*); None means ROUND_HALF_EVEN

    Returns:
        The rounded integer quotient, computed without any decimal approximation
    """
    if denominator <= 0:
        raise InvalidArgumentError(f"denominator must be positive, got {denominator}")
    if rounding is None:
        rounding = decimal.ROUND_HALF_EVEN
    floor, rem = divmod(numerator, denominator)
    if rem == 0:
        return floor
    toward_zero = floor + 1 if numerator < 0 else floor
    away_from_zero = floor if numerator < 0 else floor + 1
    if rounding == decimal.ROUND_DOWN:
        return toward_zero
    if rounding == decimal.ROUND_UP:
        return away_from_zero
    if rounding == decimal.ROUND_FLOOR:
        return floor
    if rounding == decimal.ROUND_CEILING:
        return floor + 1
    if rounding == decimal.ROUND_05UP:
        return away_from_zero if abs(toward_zero) % 10 in (0, 5) else toward_zero
    if rounding not in (decimal.ROUND_HALF_UP, decimal.ROUND_HALF_DOWN, decimal.ROUND_HALF_EVEN):
        raise InvalidArgumentError(f"unknown rounding mode: {rounding}")
    twice = 2 * rem
    if twice < denominator:
        return floor
    if twice > denominator:
        return floor + 1
    # exactly half way
    if rounding == decimal.ROUND_HALF_UP:
        return away_from_zero
    if rounding == decimal.ROUND_HALF_DOWN:
        return toward_zero
    return floor if floor % 2 == 0 else floor + 1


def truncated_divmod(dividend: int, divisor: int) -> Tuple[int, int]:
    """divmod rounding the quotient toward zero; the remainder takes the dividend's sign"""
    if divisor == 0:
        raise DivisionByZeroError("Cannot divide by 0")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor
