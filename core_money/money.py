"""
Money Value Type

Immutable amount-plus-currency value. Arithmetic never mixes currencies and
never goes through float: amounts are Decimal and every operation returns a
new Money. Rounding and allocation keep track of every minor unit.
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional, Sequence

from .arithmetic import (
    I64_MAX, I64_MIN, Round, Scalar, decimal_from_minor, money_context, plain_digits,
    round_decimal, scale_by_exponent, to_decimal,
)
from .currency import FormattableCurrency
from .errors import (
    CurrencyMismatchError, DivisionByZeroError, InvalidCurrencyError,
    InvalidRatioError, MoneyOverflowError,
)
from .format import Params, display_params, format_money, parse_amount

if TYPE_CHECKING:
    from .exchange import Exchange

logger = logging.getLogger(__name__)

__all__ = ["Money", "Round"]


@dataclass(frozen=True, eq=False)
class Money:
    """
    Amount of a specific currency.

    The amount is stored exactly as given; construction never rounds. Use
    round() to snap to the currency exponent.
    """
    amount: Decimal
    currency: FormattableCurrency

    def __post_init__(self):
        if not isinstance(self.currency, FormattableCurrency):
            raise TypeError(f"Expected a currency, got {self.currency!r}")
        object.__setattr__(self, 'amount', to_decimal(self.amount))

    # Constructors

    @classmethod
    def from_minor(cls, amount: int, currency: FormattableCurrency) -> 'Money':
        """Create from minor units, e.g. 1000 -> 10.00 USD"""
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"Minor units must be an integer, got {amount!r}")
        return cls(decimal_from_minor(amount, currency.exponent), currency)

    @classmethod
    def from_major(cls, amount: int, currency: FormattableCurrency) -> 'Money':
        """Create from major units, e.g. 1000 -> 1,000 USD"""
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"Major units must be an integer, got {amount!r}")
        return cls(Decimal(amount), currency)

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: FormattableCurrency) -> 'Money':
        """Create from a Decimal, keeping any extra precision"""
        return cls(amount, currency)

    @classmethod
    def from_str(cls, amount: str, currency: FormattableCurrency) -> 'Money':
        """
        Create from a locale-formatted amount string

        Raises:
            InvalidAmountError: If the string is empty or malformed for the
                currency's locale
        """
        return cls(parse_amount(amount, currency), currency)

    # State

    def is_zero(self) -> bool:
        """Check if amount is zero (negative zero included)"""
        return self.amount == 0

    def is_positive(self) -> bool:
        """Check if amount is strictly positive"""
        return self.amount > 0

    def is_negative(self) -> bool:
        """Check if amount is strictly negative"""
        return self.amount < 0

    # Arithmetic

    def _check_same_currency(self, other: 'Money') -> None:
        """
        Check if two Money objects have the same currency.

        Raises:
            TypeError: If other is not Money
            CurrencyMismatchError: If currency codes differ
        """
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def add(self, other: 'Money') -> 'Money':
        self._check_same_currency(other)
        with money_context("Addition"):
            return Money(self.amount + other.amount, self.currency)

    def sub(self, other: 'Money') -> 'Money':
        self._check_same_currency(other)
        with money_context("Subtraction"):
            return Money(self.amount - other.amount, self.currency)

    def mul(self, scalar: Scalar) -> 'Money':
        """
        Multiply by a scalar

        Raises:
            MoneyOverflowError: If the product leaves the representable range
        """
        factor = to_decimal(scalar)
        with money_context("Multiplication"):
            return Money(self.amount * factor, self.currency)

    def div(self, scalar: Scalar) -> 'Money':
        """
        Divide by a scalar

        Raises:
            DivisionByZeroError: If scalar is exactly zero
        """
        divisor = to_decimal(scalar)
        if divisor == 0:
            raise DivisionByZeroError(f"Cannot divide {self!r} by zero")
        with money_context("Division"):
            return Money(self.amount / divisor, self.currency)

    def neg(self) -> 'Money':
        return Money(-self.amount, self.currency)

    def abs(self) -> 'Money':
        return Money(self.amount.copy_abs(), self.currency)

    # Comparison

    def compare(self, other: 'Money') -> int:
        """Return -1, 0 or 1; raises CurrencyMismatchError for different currencies"""
        self._check_same_currency(other)
        if self.amount < other.amount:
            return -1
        if self.amount > other.amount:
            return 1
        return 0

    def gt(self, other: 'Money') -> bool:
        return self.compare(other) > 0

    def gte(self, other: 'Money') -> bool:
        return self.compare(other) >= 0

    def lt(self, other: 'Money') -> bool:
        return self.compare(other) < 0

    def lte(self, other: 'Money') -> bool:
        return self.compare(other) <= 0

    def eq(self, other: 'Money') -> bool:
        return self.compare(other) == 0

    # Rounding and allocation

    def round(self, digits: int, strategy: Round = Round.HALF_EVEN) -> 'Money':
        """Return this value rounded to `digits` fractional places"""
        return Money(round_decimal(self.amount, digits, strategy), self.currency)

    def allocate(self, shares: Sequence[int]) -> List['Money']:
        """
        Split into parts proportional to integer weights.

        Works in minor units: each part gets floor(total * weight / sum) and
        the leftover units are handed out one at a time from the first part
        onward, so the parts always add up to the (minor-unit) total.

        Args:
            shares: Non-negative integer weights, at least one positive

        Returns:
            One Money per weight, in the same order

        Raises:
            InvalidRatioError: If shares is empty, all zero, or has a negative
                or non-integer weight
        """
        weights = list(shares)
        if not weights:
            raise InvalidRatioError("Cannot allocate across an empty list of shares")
        for weight in weights:
            if not isinstance(weight, int) or isinstance(weight, bool) or weight < 0:
                raise InvalidRatioError(f"Shares must be non-negative integers, got {weight!r}")
        total_weight = sum(weights)
        if total_weight == 0:
            raise InvalidRatioError("Cannot allocate when every share is zero")

        exponent = self.currency.exponent
        total_minor = math.floor(scale_by_exponent(self.amount, exponent))

        parts = [total_minor * weight // total_weight for weight in weights]
        remainder = total_minor - sum(parts)
        index = 0
        while remainder > 0:
            parts[index % len(parts)] += 1
            remainder -= 1
            index += 1

        return [Money.from_minor(part, self.currency) for part in parts]

    def split(self, n: int) -> List['Money']:
        """Divide into n equal parts, earlier parts absorbing any leftover minor units"""
        if not isinstance(n, int) or n < 1:
            raise InvalidRatioError(f"Cannot split into {n!r} parts")
        return self.allocate([1] * n)

    # Conversions

    def to_minor_units(self) -> int:
        """
        Amount in minor units, truncated toward zero.

        Lossy convenience: returns 0 when the value does not fit a signed
        64-bit integer.
        """
        try:
            minor = int(scale_by_exponent(self.amount, self.currency.exponent))
        except MoneyOverflowError:
            minor = None
        if minor is None or minor < I64_MIN or minor > I64_MAX:
            logger.debug("Minor units of %r do not fit 64 bits, returning 0", self)
            return 0
        return minor

    def to_f64_lossy(self) -> float:
        """Amount as a float, for display and interop only. NaN if not representable."""
        value = float(self.amount)
        if not math.isfinite(value):
            return math.nan
        return value

    def exchange_to(self, target: FormattableCurrency, exchange: 'Exchange') -> 'Money':
        """
        Convert into another currency using a rate registered in an Exchange

        Raises:
            InvalidCurrencyError: If the exchange has no rate for the pair
        """
        rate = exchange.get_rate(self.currency, target)
        if rate is None:
            raise InvalidCurrencyError(
                f"No exchange rate available for {self.currency.code} -> {target.code}"
            )
        return rate.convert(self)

    def format(self, params: Optional[Params] = None) -> str:
        """Format with explicit Params; defaults to the currency's display form"""
        return format_money(self, params if params is not None else display_params(self.currency))

    # Python protocol

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Money):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Money):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> 'Money':
        return self.neg()

    def __pos__(self) -> 'Money':
        return self

    def __abs__(self) -> 'Money':
        return self.abs()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.currency.code == other.currency.code and self.amount == other.amount

    def __hash__(self) -> int:
        return hash((self.currency.code, self.amount))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.gte(other)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Money('{plain_digits(self.amount)}', {self.currency.code})"
