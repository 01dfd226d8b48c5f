"""
FastMoney - Fixed-Point Money

Integer minor-unit mirror of Money for latency-sensitive paths such as order
matching. Every operation is overflow-checked against the signed 64-bit range
and reports MoneyOverflowError instead of wrapping. Allocation, exchange and
formatting go through Money.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from .arithmetic import I64_MAX, I64_MIN, scale_by_exponent
from .currency import FormattableCurrency
from .errors import (
    CurrencyMismatchError, DivisionByZeroError, MoneyOverflowError, PrecisionLossError,
)
from .money import Money

logger = logging.getLogger(__name__)


def _checked(value: int, operation: str) -> int:
    """Return value if it fits a signed 64-bit integer"""
    if value < I64_MIN or value > I64_MAX:
        raise MoneyOverflowError(f"{operation} overflows the 64-bit minor-unit range")
    return value


def _require_int(value, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True, eq=False)
class FastMoney:
    """
    Amount held as integer minor units of a currency.

    Equivalent to a Money whose amount is minor_units / 10**exponent.
    """
    minor_units: int
    currency: FormattableCurrency

    def __post_init__(self):
        if not isinstance(self.currency, FormattableCurrency):
            raise TypeError(f"Expected a currency, got {self.currency!r}")
        _checked(_require_int(self.minor_units, "minor_units"), "Construction")

    @classmethod
    def from_minor(cls, minor_units: int, currency: FormattableCurrency) -> 'FastMoney':
        """Create from minor units, e.g. 9999 -> 99.99 USD"""
        return cls(minor_units, currency)

    @classmethod
    def from_major(cls, amount: int, currency: FormattableCurrency) -> 'FastMoney':
        """Create from major units; raises MoneyOverflowError if scaling overflows"""
        _require_int(amount, "amount")
        return cls(_checked(amount * 10 ** currency.exponent, "Scaling to minor units"), currency)

    # Bridges to Money

    def to_money(self) -> Money:
        """Lossless conversion to Money"""
        return Money.from_minor(self.minor_units, self.currency)

    @classmethod
    def from_money(cls, money: Money) -> 'FastMoney':
        """
        Strict conversion from Money.

        Raises:
            PrecisionLossError: If the amount has precision finer than the
                currency exponent (e.g. 10.005 USD)
            MoneyOverflowError: If the minor units do not fit 64 bits
        """
        scaled = scale_by_exponent(money.amount, money.currency.exponent)
        minor_units = int(scaled)
        if scaled != minor_units:
            raise PrecisionLossError(
                f"{money!r} has more than {money.currency.exponent} fractional digits"
            )
        return cls(_checked(minor_units, "Conversion from Money"), money.currency)

    @classmethod
    def from_money_lossy(cls, money: Money) -> 'FastMoney':
        """
        Conversion from Money that truncates extra precision toward zero.

        Raises:
            MoneyOverflowError: If the minor units do not fit 64 bits
        """
        scaled = scale_by_exponent(money.amount, money.currency.exponent)
        minor_units = int(scaled)
        if scaled != minor_units:
            logger.debug("Truncating %r to %d minor units", money, minor_units)
        return cls(_checked(minor_units, "Conversion from Money"), money.currency)

    # Arithmetic

    def _check_same_currency(self, other: 'FastMoney') -> None:
        if not isinstance(other, FastMoney):
            raise TypeError(f"Expected FastMoney, got {type(other).__name__}")
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def add(self, other: 'FastMoney') -> 'FastMoney':
        self._check_same_currency(other)
        return FastMoney(_checked(self.minor_units + other.minor_units, "Addition"), self.currency)

    def sub(self, other: 'FastMoney') -> 'FastMoney':
        self._check_same_currency(other)
        return FastMoney(_checked(self.minor_units - other.minor_units, "Subtraction"), self.currency)

    def mul(self, n: int) -> 'FastMoney':
        _require_int(n, "n")
        return FastMoney(_checked(self.minor_units * n, "Multiplication"), self.currency)

    def div(self, n: int) -> 'FastMoney':
        """Divide by an integer, truncating toward zero"""
        _require_int(n, "n")
        if n == 0:
            raise DivisionByZeroError(f"Cannot divide {self!r} by zero")
        quotient = abs(self.minor_units) // abs(n)
        if (self.minor_units < 0) != (n < 0):
            quotient = -quotient
        return FastMoney(_checked(quotient, "Division"), self.currency)

    def neg(self) -> 'FastMoney':
        return FastMoney(_checked(-self.minor_units, "Negation"), self.currency)

    def abs(self) -> 'FastMoney':
        return FastMoney(_checked(abs(self.minor_units), "Absolute value"), self.currency)

    def is_zero(self) -> bool:
        return self.minor_units == 0

    def is_positive(self) -> bool:
        return self.minor_units > 0

    def is_negative(self) -> bool:
        return self.minor_units < 0

    # Comparison

    def compare(self, other: 'FastMoney') -> int:
        """Return -1, 0 or 1; raises CurrencyMismatchError for different currencies"""
        self._check_same_currency(other)
        return (self.minor_units > other.minor_units) - (self.minor_units < other.minor_units)

    def gt(self, other: 'FastMoney') -> bool:
        return self.compare(other) > 0

    def gte(self, other: 'FastMoney') -> bool:
        return self.compare(other) >= 0

    def lt(self, other: 'FastMoney') -> bool:
        return self.compare(other) < 0

    def lte(self, other: 'FastMoney') -> bool:
        return self.compare(other) <= 0

    def eq(self, other: 'FastMoney') -> bool:
        return self.compare(other) == 0

    @property
    def amount(self) -> Decimal:
        """Amount in major units as an exact Decimal"""
        return self.to_money().amount

    # Python protocol

    def __add__(self, other):
        if not isinstance(other, FastMoney):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, FastMoney):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __floordiv__(self, other):
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> 'FastMoney':
        return self.neg()

    def __abs__(self) -> 'FastMoney':
        return self.abs()

    def __eq__(self, other) -> bool:
        if not isinstance(other, FastMoney):
            return False
        return self.currency.code == other.currency.code and self.minor_units == other.minor_units

    def __hash__(self) -> int:
        return hash((self.currency.code, self.minor_units))

    def __lt__(self, other) -> bool:
        if not isinstance(other, FastMoney):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, FastMoney):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, FastMoney):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, FastMoney):
            return NotImplemented
        return self.gte(other)

    def __str__(self) -> str:
        return str(self.to_money())

    def __repr__(self) -> str:
        return f"FastMoney({self.minor_units}, {self.currency.code})"
