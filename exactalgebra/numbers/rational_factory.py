"""
Entry points for rational values.

Every natural construction runs through from_ints, which normalizes in a
fixed order:

    1. a zero denominator raises DivisionByZeroError
    2. a negative denominator negates both parts
    3. both parts are divided by their greatest common factor
    4. a denominator of 1 yields an integer value (integer_factory.from_int)
    5. otherwise FiniteRational if the pair can be packed, else ArbitraryRational

from_ints_strict performs steps 1-3 and 5 only, so its result is always of
the rational family.

The conversions (from_decimal, from_float, from_string, from_number) are
exact: a float becomes the rational of its binary value, a Decimal the
rational of its digits.
"""

from decimal import Decimal
from fractions import Fraction
import re

from ..exceptions import DivisionByZeroError, InvalidArgumentError, check_radix, confirm_not_none
from ..names import WHOLE, NUMERATOR, DENOMINATOR
from ..prim_math_utils import gcf
from .algebra_number import AlgebraNumber
from .arbitrary_rational import ArbitraryRational
from .finite_rational import FiniteRational, does_fit
from .integer_factory import from_int

_FRACTION_PATTERN = re.compile(r'^\s*([+-]?\d+)\s*/\s*([+-]?\d+)\s*$')


def _check_int(value, name: str) -> int:
    confirm_not_none(value, name)
    if isinstance(value, AlgebraNumber):
        if not value.is_whole():
            raise TypeError(f"{name} must be integral, got {value}")
        return value.numerator
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _normalize(numerator: int, denominator: int):
    if denominator == 0:
        raise DivisionByZeroError("Cannot have denominator of 0")
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    divisor = gcf(numerator, denominator)
    return numerator // divisor, denominator // divisor


def from_ints(numerator, denominator=1):
    """
    Most compact value of numerator/denominator.

    Args:
        numerator: int or integral AlgebraNumber
        denominator: int or integral AlgebraNumber, not 0

    Returns:
        An integer value when the reduced denominator is 1, a FiniteRational
        when the reduced pair fits the packed word, an ArbitraryRational otherwise
    """
    numerator, denominator = _normalize(_check_int(numerator, NUMERATOR), _check_int(denominator, DENOMINATOR))
    if denominator == 1:
        return from_int(numerator)
    if does_fit(numerator, denominator):
        return FiniteRational(numerator, denominator)
    return ArbitraryRational(numerator, denominator)


def from_ints_strict(numerator, denominator=1):
    """numerator/denominator in the rational family, also for whole values"""
    numerator, denominator = _normalize(_check_int(numerator, NUMERATOR), _check_int(denominator, DENOMINATOR))
    if does_fit(numerator, denominator):
        return FiniteRational(numerator, denominator)
    return ArbitraryRational(numerator, denominator)


def from_numbers(whole=None, numerator=None, denominator=None):
    """
    Value of a mixed number such as 3 1/2 given as its three parts.

    Each part may be None or anything from_number accepts. A negative whole
    part with a non-negative fraction reads like written mixed numbers do:
    from_numbers(-3, 1, 2) is -7/2.

    Raises:
        InvalidArgumentError: if all three parts are None
    """
    whole_n = None if whole is None else from_number(whole)
    num_n = None if numerator is None else from_number(numerator)
    den_n = None if denominator is None else from_number(denominator)
    if whole_n is None:
        if num_n is None:
            if den_n is None:
                raise InvalidArgumentError("At least one of whole, numerator and denominator must be given")
            return den_n.inverted()
        return num_n if den_n is None else num_n.quotient(den_n)
    if num_n is None:
        return whole_n
    fraction = num_n if den_n is None else num_n.quotient(den_n)
    if whole_n.is_negative() and not fraction.is_negative():
        return whole_n.difference(fraction)
    return whole_n.sum(fraction)


def from_decimal(value: Decimal):
    """Exact rational value of a finite Decimal"""
    confirm_not_none(value)
    if not value.is_finite():
        raise InvalidArgumentError(f"Cannot represent non-finite value: {value}")
    return from_ints(*value.as_integer_ratio())


def from_float(value: float):
    """Exact rational value of the binary floating point number"""
    confirm_not_none(value)
    return from_decimal(Decimal(value))


def from_string(value: str, radix: int = 10):
    """
    Parses "n", "n/d" or, for radix 10, a decimal literal such as "-1.25e3".
    """
    confirm_not_none(value)
    radix = check_radix(radix)
    match = _FRACTION_PATTERN.match(value) if radix == 10 else None
    if match:
        return from_ints(int(match.group(1)), int(match.group(2)))
    if radix != 10:
        parts = value.split('/')
        if len(parts) > 2:
            raise InvalidArgumentError(f"Not a rational literal: {value!r}")
        try:
            ints = [int(part.strip(), radix) for part in parts]
        except ValueError as e:
            raise InvalidArgumentError(f"Not a rational literal in radix {radix}: {value!r}") from e
        return from_ints(*ints)
    try:
        number = Decimal(value.strip())
    except ArithmeticError as e:
        raise InvalidArgumentError(f"Not a rational literal: {value!r}") from e
    return from_decimal(number)


def from_number(value):
    """
    Natural value of any supported number type.

    Accepts AlgebraNumber (returned as is), int, Fraction, Decimal, float,
    str and sympy Rational/Integer.
    """
    confirm_not_none(value)
    if isinstance(value, AlgebraNumber):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a number type")
    if isinstance(value, int):
        return from_int(value)
    if isinstance(value, Fraction):
        return from_ints(value.numerator, value.denominator)
    if isinstance(value, Decimal):
        return from_decimal(value)
    if isinstance(value, float):
        return from_float(value)
    if isinstance(value, str):
        return from_string(value)
    # sympy Rational and Integer expose p and q
    if hasattr(value, 'p') and hasattr(value, 'q'):
        return from_ints(int(value.p), int(value.q))
    raise TypeError(f"Cannot convert {type(value).__name__} to an exact number")


class RationalFactory:
    """
    Builder for whole + numerator/denominator.

    Parts that are not set count as 0 (whole, numerator) or 1 (denominator);
    at least one part must be set. build() follows from_ints, build_strict()
    follows from_ints_strict.

        >>> RationalFactory.new_rational().whole(1).numerator(1).denominator(3).build()
        FiniteRational(4, 3)
    """

    def __init__(self):
        self.clear()

    @staticmethod
    def new_rational() -> 'RationalFactory':
        return RationalFactory()

    def whole(self, value) -> 'RationalFactory':
        self._whole = _check_int(value, WHOLE)
        return self

    def numerator(self, value) -> 'RationalFactory':
        self._numerator = _check_int(value, NUMERATOR)
        return self

    def denominator(self, value) -> 'RationalFactory':
        value = _check_int(value, DENOMINATOR)
        if value == 0:
            raise DivisionByZeroError("0 cannot be a denominator")
        self._denominator = value
        return self

    def clear(self):
        self._whole = None
        self._numerator = None
        self._denominator = None

    def _parts(self):
        if self._whole is None and self._numerator is None and self._denominator is None:
            raise InvalidArgumentError("No value given to build from")
        den = 1 if self._denominator is None else self._denominator
        num = 0 if self._numerator is None else self._numerator
        if self._whole is not None:
            num += self._whole * den
        return num, den

    def build(self):
        return from_ints(*self._parts())

    def build_strict(self):
        return from_ints_strict(*self._parts())
