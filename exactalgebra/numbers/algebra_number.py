"""
Arithmetic skeleton shared by every exactalgebra number.

AlgebraNumber derives the full operator set (truncating quotients, modulo,
powers, roots and rounding) from a small set of primitives that each
representation supplies: numerator/denominator access, sum, difference,
product, quotient, negated, inverted, compare_to, to_decimal and to_int.
Compact representations override the hot primitives with word-sized
arithmetic and fall back to this skeleton when a result leaves their word.

Approximating operations (roots, exponentials, logarithms, real powers,
round_q) work on decimal.Decimal values and thread two contexts: a first,
wider context used for the approximation itself and a second one used for
the final rounding decision. The first one always carries more digits than
the second. Wherever the result can be rational (roots, rational powers,
logarithms to a base) it is settled with exact integer arithmetic before the
final rounding.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, Context, ROUND_DOWN, ROUND_FLOOR, ROUND_CEILING, ROUND_HALF_EVEN
from fractions import Fraction
import logging
from typing import Optional

from ..exceptions import UndefinedOperationError, DivisionByZeroError, InvalidArgumentError
from ..names import (NEGATIVE_SUB_MINUS_ONE, NEGATIVE_ONE, NEGATIVE_SUP_MINUS_ONE, ZERO, POSITIVE_SUB_ONE,
                     POSITIVE_ONE, POSITIVE_SUP_ONE)
from ..prim_math_utils import INT_MAX, round_quotient
from .remainder_pair import RemainderPair

LOG = logging.getLogger(__name__)

DEFAULT_ROUNDING = ROUND_HALF_EVEN
# bits in the mantissa of a double
DEFAULT_PRECISION = 52
MAX_PRECISION = INT_MAX // 32 + 1
DEFAULT_FIRST_OP_PRECISION = 64
PRECISION_TO_ADD_FOR_FIRST_OP = 2
# powers up to this exponent are built by repeated multiplication from the square
SMALL_EXPONENT = 8
# log10(2), to estimate decimal digits from a bit length
_LOG10_2 = 0.30103
# log10(e), to estimate the decimal digits of an exponential
_LOG10_E = 0.43429
# rational exponents and logarithms with numerator and denominator up to this
# bound are settled exactly instead of through exp/ln approximations
EXACT_EXPONENT_LIMIT = 64


def get_context(precision: Optional[int] = None, rounding: Optional[str] = None) -> Context:
    """Fresh decimal context; None falls back to DEFAULT_PRECISION and DEFAULT_ROUNDING"""
    if precision is None:
        precision = DEFAULT_PRECISION
    if precision <= 0:
        raise InvalidArgumentError(f"precision must be positive, got {precision}")
    return Context(prec=precision, rounding=DEFAULT_ROUNDING if rounding is None else rounding)


DEFAULT_CONTEXT = get_context()


def rat_context(context: Optional[Context] = None) -> Context:
    """Context a rational result is rounded to, with its precision capped at MAX_PRECISION"""
    if context is None:
        return get_context()
    if context.prec > MAX_PRECISION:
        return get_context(MAX_PRECISION, context.rounding)
    return context


def init_context_q(rational_context: Context) -> Context:
    """Approximation context for a result that is later rounded to rational_context"""
    return get_context(rational_context.prec + PRECISION_TO_ADD_FOR_FIRST_OP, rational_context.rounding)


def init_context_z(rounding: Optional[str] = None, digits: int = 0) -> Context:
    """Approximation context for a result rounded to an integer of roughly `digits` digits"""
    return get_context(max(DEFAULT_FIRST_OP_PRECISION, digits + PRECISION_TO_ADD_FOR_FIRST_OP), rounding)


def check_contexts(init_context: Context, rational_context: Optional[Context]):
    """The approximation context must carry more digits than the context of the final rounding"""
    if rational_context is not None and rational_context.prec >= init_context.prec:
        raise InvalidArgumentError(f"approximation precision {init_context.prec} must exceed "
                                   f"rounding precision {rational_context.prec}")


def finish_real_op(approx: Decimal, init_context: Context, rational_context: Optional[Context] = None) -> Decimal:
    """Rounds an approximation to rational_context, or to an integral Decimal under init_context.rounding"""
    if rational_context is None:
        return approx.to_integral_value(rounding=init_context.rounding)
    return rational_context.plus(approx)


def as_algebra_number(value):
    """Wraps int and Fraction values through the natural factories; other values give None"""
    if isinstance(value, AlgebraNumber):
        return value
    if isinstance(value, int):
        from .integer_factory import from_int
        return from_int(value)
    if isinstance(value, Fraction):
        from .rational_factory import from_ints
        return from_ints(value.numerator, value.denominator)
    return None


def index_value(value, name: str = 'exponent') -> int:
    """Plain int of an exponent or root index given as int or whole AlgebraNumber"""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if isinstance(value, AlgebraNumber):
        if not value.is_whole():
            raise TypeError(f"{name} must be integral, got {value}")
        return value.numerator
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


class AlgebraNumber(ABC):
    """
    Exact number with the shared arithmetic skeleton.

    Subclasses are immutable. Equality (== and hash) is representation
    sensitive: an integer never equals a rational, even with the same value.
    Use equiv() for value-based comparison across families.
    """

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def numerator(self) -> int:
        """Numerator of the irreducible form; carries the sign"""
        pass

    @property
    @abstractmethod
    def denominator(self) -> int:
        """Denominator of the irreducible form; always positive"""
        pass

    @abstractmethod
    def rank(self) -> str:
        """Representational family of this value (names.INTEGER or names.RATIONAL)"""
        pass

    @abstractmethod
    def coefficient_highest_rank(self) -> type:
        """The family class this value's runtime class belongs to"""
        pass

    @abstractmethod
    def is_zero(self) -> bool:
        pass

    @abstractmethod
    def is_one(self) -> bool:
        pass

    @abstractmethod
    def is_negative(self) -> bool:
        pass

    @abstractmethod
    def is_whole(self) -> bool:
        """True if the value has no fractional part"""
        pass

    @abstractmethod
    def to_decimal(self, context: Optional[Context] = None) -> Decimal:
        """
        Decimal approximation of this value.

        Args:
            context: Precision and rounding of the approximation;
                None means DEFAULT_PRECISION digits and DEFAULT_ROUNDING

        Returns:
            Decimal rounded to the context
        """
        pass

    @abstractmethod
    def to_int(self, rounding: Optional[str] = None) -> int:
        """
        This value rounded to a Python int.

        Args:
            rounding: A decimal rounding mode; None means DEFAULT_ROUNDING
        """
        pass

    @abstractmethod
    def to_string(self, radix: int = 10) -> str:
        pass

    @abstractmethod
    def sum(self, augend) -> 'AlgebraNumber':
        pass

    @abstractmethod
    def difference(self, subtrahend) -> 'AlgebraNumber':
        pass

    @abstractmethod
    def product(self, multiplicand) -> 'AlgebraNumber':
        pass

    @abstractmethod
    def quotient(self, divisor) -> 'AlgebraNumber':
        pass

    @abstractmethod
    def negated(self) -> 'AlgebraNumber':
        pass

    @abstractmethod
    def inverted(self) -> 'AlgebraNumber':
        pass

    @abstractmethod
    def compare_to(self, that) -> int:
        """-1, 0 or 1 as this is less than, equal to or greater than that"""
        pass

    # ------------------------------------------------------------------
    # Skeleton
    # ------------------------------------------------------------------

    def _operand(self, that) -> 'AlgebraNumber':
        number = as_algebra_number(that)
        if number is None:
            if that is None:
                raise InvalidArgumentError("operand must not be None")
            raise TypeError(f"unsupported operand type: {type(that).__name__}")
        return number

    def signum(self) -> int:
        if self.is_zero():
            return 0
        return -1 if self.is_negative() else 1

    def sigmagnum(self) -> str:
        """Sign and magnitude class relative to one (see names.SIGMAGNUMS)"""
        if self.is_zero():
            return ZERO
        mag_cmp = self.magnitude().compare_to(1)
        if self.is_negative():
            return (NEGATIVE_SUP_MINUS_ONE, NEGATIVE_ONE, NEGATIVE_SUB_MINUS_ONE)[mag_cmp + 1]
        return (POSITIVE_SUB_ONE, POSITIVE_ONE, POSITIVE_SUP_ONE)[mag_cmp + 1]

    def equiv(self, that) -> bool:
        """Value-based equality, independent of representation"""
        return self.compare_to(self._operand(that)) == 0

    def magnitude(self) -> 'AlgebraNumber':
        return self.negated() if self.is_negative() else self

    def max(self, that) -> 'AlgebraNumber':
        that = self._operand(that)
        return self if self.compare_to(that) >= 0 else that

    def min(self, that) -> 'AlgebraNumber':
        that = self._operand(that)
        return self if self.compare_to(that) <= 0 else that

    def squared(self) -> 'AlgebraNumber':
        return self.product(self)

    def round_z(self, rounding: Optional[str] = None):
        """This value rounded to an integer value under the given decimal rounding mode"""
        from .integer_factory import from_int
        return from_int(self.to_int(rounding))

    def round_q(self, context: Optional[Context] = None):
        """
        This value rounded to the precision of context and turned back into a rational.

        A value that already fits the precision comes back unchanged in value.
        """
        from .rational_factory import from_decimal
        return from_decimal(self.to_decimal(rat_context(context)))

    def quotient_z(self, divisor):
        """Quotient truncated toward zero"""
        return self.quotient(divisor).round_z(ROUND_DOWN)

    def quotient_round_z(self, divisor, rounding: Optional[str] = None):
        return self.quotient(divisor).round_z(rounding)

    def quotient_z_with_remainder(self, divisor) -> RemainderPair:
        """Truncated quotient and the remainder dividend - quotient * divisor"""
        divisor = self._operand(divisor)
        floor = self.quotient_z(divisor)
        return RemainderPair(floor, self.difference(floor.product(divisor)))

    def remainder(self, divisor):
        return self.quotient_z_with_remainder(divisor).remainder

    def modulo(self, modulus):
        """Remainder moved into [0, modulus); modulus must be strictly positive"""
        modulus = self._operand(modulus)
        self._check_modulus(modulus)
        rem = self.remainder(modulus)
        return rem.sum(modulus) if rem.is_negative() else rem

    @staticmethod
    def _check_modulus(modulus):
        if modulus.is_zero():
            raise DivisionByZeroError("Modulus of 0")
        if modulus.is_negative():
            raise UndefinedOperationError(f"Non-positive modulus: {modulus}")

    # ------------------------------------------------------------------
    # Powers
    # ------------------------------------------------------------------

    def raised(self, exponent):
        """
        This value raised to an integer exponent.

        Args:
            exponent: int or integral AlgebraNumber, may be negative and may
                exceed a 32-bit word

        Returns:
            The exact power; a negative exponent yields the inverse of the positive power
        """
        exponent = index_value(exponent)
        self._check_zero_power(exponent)
        if exponent < 0:
            return self._positive_raiser(-exponent).inverted()
        return self._positive_raiser(exponent)

    def _check_zero_power(self, exponent: int):
        if self.is_zero():
            if exponent == 0:
                raise UndefinedOperationError("0^0 is undefined")
            if exponent < 0:
                raise DivisionByZeroError("0 raised to a negative exponent")

    def _positive_raiser(self, exponent: int):
        # base^e = (base^INT_MAX)^(e // INT_MAX) * base^(e % INT_MAX)
        if exponent > INT_MAX:
            chunks, rest = divmod(exponent, INT_MAX)
            LOG.debug(f"Splitting exponent {exponent} into {chunks} chunks of {INT_MAX}")
            return self._int_raiser(INT_MAX)._positive_raiser(chunks).product(self._int_raiser(rest))
        return self._int_raiser(exponent)

    def _int_raiser(self, exponent: int):
        if exponent == 0:
            from .integer_factory import from_int
            return from_int(1)
        if exponent == 1:
            return self
        if exponent == 2:
            return self.squared()
        if exponent <= SMALL_EXPONENT:
            res = self.squared()
            for _ in range(exponent - 2):
                res = res.product(self)
            return res
        return self._raise_base_case(exponent)

    def _raise_base_case(self, exponent: int):
        """this^exponent for SMALL_EXPONENT < exponent <= INT_MAX"""
        res = None
        square = self
        while exponent:
            if exponent & 1:
                res = square if res is None else res.product(square)
            exponent >>= 1
            if exponent:
                square = square.squared()
        return res

    # ------------------------------------------------------------------
    # Roots
    # ------------------------------------------------------------------

    def _check_index(self, index) -> int:
        index = index_value(index, 'index')
        if index <= 0:
            raise InvalidArgumentError(f"Disallowed non-positive index: {index}")
        if index % 2 == 0 and self.is_negative():
            raise UndefinedOperationError(f"Even root ({index}) of negative value {self}")
        return index

    def _integer_digits(self, scale: float = 1.0) -> int:
        """Rough decimal digit count of the integer part of |this|^scale"""
        bits = abs(self.to_int(ROUND_DOWN)).bit_length()
        return int(bits * _LOG10_2 * scale) + 1

    def _magnitude_power_decimal(self, exponent: Decimal, negate: bool, init_context: Context,
                                 rational_context: Optional[Context] = None) -> Decimal:
        """
        |this|^exponent approximated as exp(ln(|this|) * exponent) under init_context.

        The approximation is negated when asked, then rounded to
        rational_context when given, and to an integral Decimal under
        init_context.rounding otherwise.
        """
        check_contexts(init_context, rational_context)
        if self.is_zero():
            approx = Decimal(0)
        else:
            magnitude = self.magnitude().to_decimal(init_context)
            approx = init_context.exp(init_context.multiply(init_context.ln(magnitude), exponent))
            if negate:
                approx = approx.copy_negate()
        return finish_real_op(approx, init_context, rational_context)

    def _root_decimal(self, index: int, init_context: Context, rational_context: Optional[Context] = None) -> Decimal:
        """index-th root approximated as exp(ln(|x|) / index), see _magnitude_power_decimal"""
        power = init_context.divide(Decimal(1), Decimal(index))
        return self._magnitude_power_decimal(power, self.is_negative(), init_context, rational_context)

    def _root_floor(self, index: int) -> int:
        """Exact index-th root truncated toward zero"""
        candidate = abs(int(self._root_decimal(index, init_context_z(ROUND_DOWN, self._integer_digits(1 / index)))))
        num = abs(self.numerator)
        den = self.denominator
        # settle the last unit of the approximation exactly: candidate^index <= |x| < (candidate+1)^index
        while candidate > 0 and candidate**index * den > num:
            candidate -= 1
        while (candidate + 1)**index * den <= num:
            candidate += 1
        return -candidate if self.is_negative() else candidate

    def root_z_with_remainder(self, index) -> RemainderPair:
        """
        Integer index-th root truncated toward zero, with remainder this - root^index.

        Even roots of negative values are undefined.
        """
        from .integer_factory import from_int
        index = self._check_index(index)
        floor = from_int(self._root_floor(index))
        return RemainderPair(floor, self.difference(floor.raised(index)))

    def root_round_z(self, index, rounding: Optional[str] = None):
        """index-th root rounded to an integer value under the given decimal rounding mode"""
        from .integer_factory import from_int
        index = self._check_index(index)
        floor = abs(self._root_floor(index))
        if rounding == ROUND_DOWN:
            return from_int(-floor if self.is_negative() else floor)
        num = abs(self.numerator)
        den = self.denominator
        # classify the dropped fraction f of the root exactly: 0, below, at or above one half
        if floor**index * den == num:
            fraction_class = 0
        else:
            midpoint = (2 * floor + 1)**index * den
            target = num << index
            fraction_class = 2 + (target > midpoint) - (target < midpoint)
        quarters = 4 * floor + fraction_class
        return from_int(round_quotient(-quarters if self.is_negative() else quarters, 4, rounding))

    def root_round_q(self, index, context: Optional[Context] = None):
        """
        index-th root as a rational, rounded to the precision of context.

        The decimal approximation only places the leading digit. The digits
        themselves are the exactly rounded integer root of this value shifted
        by a power of ten, so an exact root comes back exact under every
        rounding mode.
        """
        from .integer_factory import from_int
        index = self._check_index(index)
        rational_context = rat_context(context)
        if self.is_zero():
            return from_int(0)
        approx = self._root_decimal(index, init_context_q(rational_context), rational_context)
        return self._shifted_root(index, rational_context, rational_context.prec - 1 - approx.adjusted())

    def _shifted_root(self, index: int, rational_context: Context, shift: int):
        # root(x * 10^(index*shift)) == root(x) * 10^shift; the shift is settled
        # once the rounded root carries exactly prec digits (or is 10^prec)
        from .rational_factory import from_ints
        low = 10**(rational_context.prec - 1)
        high = 10 * low
        while True:
            if shift >= 0:
                shifted = from_ints(self.numerator * 10**(index * shift), self.denominator)
            else:
                shifted = from_ints(self.numerator, self.denominator * 10**(-index * shift))
            digits = shifted.root_round_z(index, rational_context.rounding).numerator
            if abs(digits) < low:
                shift += 1
            elif abs(digits) > high:
                shift -= 1
            else:
                break
        if shift >= 0:
            return from_ints(digits, 10**shift)
        return from_ints(digits * 10**(-shift), 1)

    def root_q_with_remainder(self, index, precision: Optional[int] = None) -> RemainderPair:
        """Rational root truncated to precision digits, with remainder this - root^index"""
        floor = self.root_round_q(index, get_context(precision, ROUND_DOWN))
        return RemainderPair(floor, self.difference(floor.raised(index)))

    def sqrt_z_with_remainder(self) -> RemainderPair:
        return self.root_z_with_remainder(2)

    def sqrt_round_z(self, rounding: Optional[str] = None):
        return self.root_round_z(2, rounding)

    def sqrt_round_q(self, context: Optional[Context] = None):
        return self.root_round_q(2, context)

    # ------------------------------------------------------------------
    # Exponentials, real powers and logarithms
    # ------------------------------------------------------------------

    def _exp_decimal(self, init_context: Context, rational_context: Optional[Context] = None) -> Decimal:
        check_contexts(init_context, rational_context)
        return finish_real_op(init_context.exp(self.to_decimal(init_context)), init_context, rational_context)

    def _exp_digits(self) -> int:
        if self.is_negative():
            return 1
        return int(self.to_int(ROUND_CEILING) * _LOG10_E) + 1

    def exp_round_z(self, rounding: Optional[str] = None):
        """e^this rounded to an integer value under the given decimal rounding mode"""
        from .integer_factory import from_int
        return from_int(int(self._exp_decimal(init_context_z(rounding, self._exp_digits()))))

    def exp_round_q(self, context: Optional[Context] = None):
        """e^this as a rational, rounded to the precision of context"""
        from .rational_factory import from_decimal
        rational_context = rat_context(context)
        return from_decimal(self._exp_decimal(init_context_q(rational_context), rational_context))

    def exp_z_with_remainder(self) -> RemainderPair:
        """
        e^this truncated to an integer, with remainder this - ln(floor).

        ln(floor) is rounded to DEFAULT_PRECISION digits. A negative value
        truncates to 0, which has no logarithm (UndefinedOperationError).
        """
        floor = self.exp_round_z(ROUND_DOWN)
        return RemainderPair(floor, self.difference(floor.ln_round_q()))

    def exp_q_with_remainder(self, precision: Optional[int] = None) -> RemainderPair:
        floor = self.exp_round_q(get_context(precision, ROUND_DOWN))
        return RemainderPair(floor, self.difference(floor.ln_round_q(get_context(precision))))

    def _check_log_domain(self):
        if self.is_zero() or self.is_negative():
            raise UndefinedOperationError(f"Logarithm of non-positive value {self}")

    def _ln_decimal(self, init_context: Context, rational_context: Optional[Context] = None) -> Decimal:
        self._check_log_domain()
        check_contexts(init_context, rational_context)
        return finish_real_op(init_context.ln(self.to_decimal(init_context)), init_context, rational_context)

    def ln_round_z(self, rounding: Optional[str] = None):
        """Natural logarithm rounded to an integer value; this must be positive"""
        from .integer_factory import from_int
        return from_int(int(self._ln_decimal(init_context_z(rounding))))

    def ln_round_q(self, context: Optional[Context] = None):
        """Natural logarithm as a rational, rounded to the precision of context"""
        from .rational_factory import from_decimal
        rational_context = rat_context(context)
        return from_decimal(self._ln_decimal(init_context_q(rational_context), rational_context))

    def ln_z_with_remainder(self) -> RemainderPair:
        """ln(this) truncated to an integer, with remainder this - e^floor (rounded to DEFAULT_PRECISION digits)"""
        floor = self.ln_round_z(ROUND_DOWN)
        return RemainderPair(floor, self.difference(floor.exp_round_q()))

    def ln_q_with_remainder(self, precision: Optional[int] = None) -> RemainderPair:
        floor = self.ln_round_q(get_context(precision, ROUND_DOWN))
        return RemainderPair(floor, self.difference(floor.exp_round_q(get_context(precision))))

    def _power_operand(self, power) -> 'AlgebraNumber':
        power = self._operand(power)
        self._check_zero_power(power.signum())
        return power

    @staticmethod
    def _is_small_exponent(power) -> bool:
        return power.denominator <= EXACT_EXPONENT_LIMIT and abs(power.numerator) <= EXACT_EXPONENT_LIMIT

    def _power_decimal(self, power, init_context: Context, rational_context: Optional[Context] = None) -> Decimal:
        """this^power for a non-whole rational power, through exp and ln"""
        if self.is_negative() and power.denominator % 2 == 0:
            raise UndefinedOperationError(f"Even root ({power.denominator}) of negative value {self}")
        negate = self.is_negative() and power.numerator % 2 == 1
        return self._magnitude_power_decimal(power.to_decimal(init_context), negate, init_context, rational_context)

    def power_round_z(self, power, rounding: Optional[str] = None):
        """
        this raised to a rational power, rounded to an integer value.

        Whole powers go through raised, small rational powers n/d through the
        exact d-th root of this^n; only the remaining ones are approximated.
        """
        from .integer_factory import from_int
        power = self._power_operand(power)
        if power.is_whole():
            return self.raised(power).round_z(rounding)
        if self._is_small_exponent(power):
            return self.raised(power.numerator).root_round_z(power.denominator, rounding)
        digits = self._integer_digits(float(power.magnitude()))
        return from_int(int(self._power_decimal(power, init_context_z(rounding, digits))))

    def power_round_q(self, power, context: Optional[Context] = None):
        """this raised to a rational power, as a rational rounded to the precision of context"""
        from .rational_factory import from_decimal
        power = self._power_operand(power)
        if power.is_whole():
            return self.raised(power).round_q(context)
        if self._is_small_exponent(power):
            return self.raised(power.numerator).root_round_q(power.denominator, context)
        rational_context = rat_context(context)
        return from_decimal(self._power_decimal(power, init_context_q(rational_context), rational_context))

    def _power_remainder(self, power, floor, precision: Optional[int] = None):
        from .integer_factory import from_int
        if power.is_zero():
            return from_int(0)
        return self.difference(floor.power_round_q(power.inverted(), get_context(precision)))

    def power_z_with_remainder(self, power) -> RemainderPair:
        """
        this^power truncated to an integer, with remainder this - floor^(1/power).

        The inverse power is exact whenever it is rational and rounded to
        DEFAULT_PRECISION digits otherwise; a zero power leaves no remainder.
        """
        power = self._power_operand(power)
        floor = self.power_round_z(power, ROUND_DOWN)
        return RemainderPair(floor, self._power_remainder(power, floor))

    def power_q_with_remainder(self, power, precision: Optional[int] = None) -> RemainderPair:
        power = self._power_operand(power)
        floor = self.power_round_q(power, get_context(precision, ROUND_DOWN))
        return RemainderPair(floor, self._power_remainder(power, floor, precision))

    def _log_base_operand(self, base) -> 'AlgebraNumber':
        base = self._operand(base)
        self._check_log_domain()
        if base.is_zero() or base.is_negative() or base.is_one():
            raise UndefinedOperationError(f"Disallowed logarithm base: {base}")
        return base

    def _log_base_decimal(self, base, init_context: Context) -> Decimal:
        return init_context.divide(init_context.ln(self.to_decimal(init_context)),
                                   init_context.ln(base.to_decimal(init_context)))

    def _exact_log_base(self, base, approx: Decimal, init_context: Context):
        """The logarithm as a rational n/d with d <= EXACT_EXPONENT_LIMIT if it is one, else None"""
        from .rational_factory import from_ints
        guess = Fraction(approx).limit_denominator(EXACT_EXPONENT_LIMIT)
        if abs(Fraction(approx) - guess) > Fraction(max(1, abs(guess)), 10**(init_context.prec // 2)):
            return None
        # log_base(this) == n/d  <=>  this^d == base^n
        if self.raised(guess.denominator).equiv(base.raised(guess.numerator)):
            return from_ints(guess.numerator, guess.denominator)
        return None

    def log_base_round_z(self, base, rounding: Optional[str] = None):
        """Logarithm to the given base, rounded to an integer value"""
        from .integer_factory import from_int
        base = self._log_base_operand(base)
        init_context = init_context_z(rounding)
        approx = self._log_base_decimal(base, init_context)
        exact = self._exact_log_base(base, approx, init_context)
        if exact is not None:
            return exact.round_z(rounding)
        return from_int(int(finish_real_op(approx, init_context)))

    def log_base_round_q(self, base, context: Optional[Context] = None):
        """Logarithm to the given base as a rational, rounded to the precision of context"""
        from .rational_factory import from_decimal
        base = self._log_base_operand(base)
        rational_context = rat_context(context)
        init_context = init_context_q(rational_context)
        approx = self._log_base_decimal(base, init_context)
        exact = self._exact_log_base(base, approx, init_context)
        if exact is not None:
            return exact.round_q(rational_context)
        return from_decimal(finish_real_op(approx, init_context, rational_context))

    def log_base_z_with_remainder(self, base) -> RemainderPair:
        """Logarithm truncated to an integer, with the exact remainder this - base^floor"""
        base = self._operand(base)
        floor = self.log_base_round_z(base, ROUND_DOWN)
        return RemainderPair(floor, self.difference(base.raised(floor)))

    def log_base_q_with_remainder(self, base, precision: Optional[int] = None) -> RemainderPair:
        base = self._operand(base)
        floor = self.log_base_round_q(base, get_context(precision, ROUND_DOWN))
        return RemainderPair(floor, self.difference(base.power_round_q(floor, get_context(precision))))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_sympy(self):
        """sympy.Rational (or sympy.Integer) of the same value"""
        from sympy import Rational as SympyRational
        return SympyRational(self.numerator, self.denominator)

    # ------------------------------------------------------------------
    # Python operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.sum(other)

    def __radd__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else other.sum(self)

    def __sub__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.difference(other)

    def __rsub__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else other.difference(self)

    def __mul__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.product(other)

    def __rmul__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else other.product(self)

    def __truediv__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.quotient(other)

    def __rtruediv__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else other.quotient(self)

    def __floordiv__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.quotient_round_z(other, ROUND_FLOOR)

    def __mod__(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.modulo(other)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        return self.raised(exponent)

    def __neg__(self):
        return self.negated()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.magnitude()

    def _cmp(self, other):
        other = as_algebra_number(other)
        return NotImplemented if other is None else self.compare_to(other)

    def __lt__(self, other):
        res = self._cmp(other)
        return res if res is NotImplemented else res < 0

    def __le__(self, other):
        res = self._cmp(other)
        return res if res is NotImplemented else res <= 0

    def __gt__(self, other):
        res = self._cmp(other)
        return res if res is NotImplemented else res > 0

    def __ge__(self, other):
        res = self._cmp(other)
        return res if res is NotImplemented else res >= 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __int__(self) -> int:
        return self.to_int(ROUND_DOWN)

    def __trunc__(self) -> int:
        return self.to_int(ROUND_DOWN)

    def __floor__(self) -> int:
        return self.to_int(ROUND_FLOOR)

    def __ceil__(self) -> int:
        return self.to_int(ROUND_CEILING)

    def __str__(self) -> str:
        return self.to_string(10)
