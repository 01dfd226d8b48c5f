"""
Decimal Arithmetic Helpers

Shared decimal context and conversions for Money, FastMoney and the formatter.
All money arithmetic runs inside a local copy of MONEY_CONTEXT so the
process-wide decimal context is never touched.
"""

from contextlib import contextmanager
from decimal import (
    Context, Decimal, DivisionByZero, InvalidOperation, Overflow,
    ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext,
)
from enum import Enum
from typing import Iterator, Union

from .errors import InvalidAmountError, MoneyOverflowError

# 28 significant digits, magnitudes below 10**29
MONEY_CONTEXT = Context(
    prec=28,
    rounding=ROUND_HALF_EVEN,
    Emin=-28,
    Emax=28,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

Scalar = Union[int, Decimal, float, str]


class Round(Enum):
    """Midpoint rounding strategies"""
    HALF_UP = ROUND_HALF_UP      # 2.5 -> 3, -2.5 -> -3
    HALF_DOWN = ROUND_HALF_DOWN  # 2.5 -> 2, -2.5 -> -2
    HALF_EVEN = ROUND_HALF_EVEN  # 2.5 -> 2, 3.5 -> 4


@contextmanager
def money_context(operation: str) -> Iterator[Context]:
    """Run decimal arithmetic in MONEY_CONTEXT, reporting range errors as MoneyOverflowError"""
    try:
        with localcontext(MONEY_CONTEXT) as ctx:
            yield ctx
    except (Overflow, InvalidOperation) as e:
        raise MoneyOverflowError(f"{operation} exceeds the representable decimal range") from e


def to_decimal(value: Scalar) -> Decimal:
    """
    Convert a numeric scalar into Decimal

    Floats go through str() so 0.85 becomes Decimal('0.85') rather than its
    binary expansion.

    Raises:
        InvalidAmountError: If a string does not hold a finite number
        TypeError: For non-numeric values
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a numeric value, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(f"Cannot convert {value!r} to Decimal") from None
    else:
        raise TypeError(f"Expected a numeric value, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return result


def scale_by_exponent(amount: Decimal, exponent: int) -> Decimal:
    """
    Return amount * 10**exponent exactly, by shifting the decimal exponent.

    No digits are rounded away, however many the amount carries.

    Raises:
        MoneyOverflowError: If the result exceeds the representable range
    """
    sign, digits, amount_exponent = amount.as_tuple()
    scaled = Decimal((sign, digits, amount_exponent + exponent))
    if scaled and scaled.adjusted() > MONEY_CONTEXT.Emax:
        raise MoneyOverflowError("Scaling exceeds the representable decimal range")
    return scaled


def decimal_from_minor(minor_units: int, exponent: int) -> Decimal:
    """Exact Decimal for minor_units * 10**-exponent, e.g. (1100, 2) -> Decimal('11.00')"""
    sign, digits, _ = Decimal(minor_units).as_tuple()
    return Decimal((sign, digits, -exponent))


def round_decimal(amount: Decimal, digits: int, strategy: Round = Round.HALF_EVEN) -> Decimal:
    """
    Round to a number of fractional digits.

    Amounts that already have `digits` or fewer fractional digits are
    returned unchanged, so rounding is idempotent and never pads zeros.
    """
    if digits < 0:
        raise ValueError(f"Rounding digits must be non-negative, got {digits}")
    if amount.as_tuple().exponent >= -digits:
        return amount
    with money_context("Rounding") as ctx:
        return amount.quantize(Decimal(1).scaleb(-digits), rounding=strategy.value, context=ctx)


def plain_digits(amount: Decimal) -> str:
    """Render a Decimal without scientific notation"""
    return format(amount, 'f')
