"""
Money Formatter and Parser

Renders Money as locale-formatted strings ("-$1,000.00", "1.000,00 €") and
parses locale-formatted amount strings back into Decimal. Parsing is stricter
than formatting: digit groups must match the locale's grouping pattern.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, DecimalException, Inexact
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .arithmetic import MONEY_CONTEXT, Round, plain_digits, round_decimal
from .currency import FormattableCurrency
from .errors import InvalidAmountError
from .locale import LocalFormat

if TYPE_CHECKING:
    from .money import Money

_LEADING_GROUP = re.compile(r"[+-]?[0-9]*")
_DIGITS = re.compile(r"[0-9]+")

# Parsed amounts must fit MONEY_CONTEXT; only trailing zeros may be dropped
_PARSE_CONTEXT = MONEY_CONTEXT.copy()
_PARSE_CONTEXT.traps[Inexact] = True


class Position(Enum):
    """Tokens that can be placed in a formatted money string"""
    SIGN = "sign"
    SYMBOL = "symbol"
    CODE = "code"
    AMOUNT = "amount"
    SPACE = "space"


@dataclass(frozen=True)
class Params:
    """Formatting parameters; defaults render en-us style amounts"""
    digit_separator: str = ","
    exponent_separator: str = "."
    separator_pattern: Tuple[int, ...] = (3, 3, 3)
    positions: Tuple[Position, ...] = (Position.SIGN, Position.SYMBOL, Position.AMOUNT)
    rounding: Optional[int] = None  # Fractional digits, HALF_EVEN
    symbol: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'separator_pattern', tuple(self.separator_pattern))
        object.__setattr__(self, 'positions', tuple(self.positions))


def display_params(currency: FormattableCurrency) -> Params:
    """Params for the default display form of a currency (what str(money) uses)"""
    local_format = LocalFormat.from_locale(currency.locale)
    if currency.symbol_first:
        positions = (Position.SIGN, Position.SYMBOL, Position.AMOUNT)
    else:
        positions = (Position.SIGN, Position.AMOUNT, Position.SYMBOL)

    return Params(
        digit_separator=local_format.digit_separator,
        exponent_separator=local_format.exponent_separator,
        separator_pattern=local_format.digit_separator_pattern,
        positions=positions,
        rounding=currency.exponent,
        symbol=currency.symbol,
        code=currency.code,
    )


def format_money(money: 'Money', params: Params = Params()) -> str:
    """
    Format a Money value according to params.

    Args:
        money: Value to format
        params: Separators, grouping, rounding and token positions

    Returns:
        Formatted string; optional tokens that are not set render as ''
    """
    amount = money.amount
    if params.rounding is not None:
        amount = round_decimal(amount, params.rounding, Round.HALF_EVEN)

    formatted_amount = format_amount(plain_digits(amount), params)

    pieces = []
    for position in params.positions:
        if position is Position.SPACE:
            pieces.append(" ")
        elif position is Position.AMOUNT:
            pieces.append(formatted_amount)
        elif position is Position.CODE:
            pieces.append(params.code or "")
        elif position is Position.SYMBOL:
            pieces.append(params.symbol or "")
        elif position is Position.SIGN:
            pieces.append("-" if amount < 0 else "")
    return "".join(pieces)


def format_amount(raw_amount: str, params: Params) -> str:
    """Group the digits of a plain decimal string and swap in the locale separators"""
    integer_part, _, fraction_part = raw_amount.partition(".")
    digits = format_digits(integer_part.lstrip("-+"), params.digit_separator, params.separator_pattern)
    if fraction_part:
        return f"{digits}{params.exponent_separator}{fraction_part}"
    return digits


def format_digits(raw_digits: str, separator: str, pattern: Sequence[int]) -> str:
    """
    Insert separators walking the pattern from the least significant digit.

    A group size of 0 still consumes a slot, so (0, 2) turns "100" into "1,00,".
    """
    digits = raw_digits
    current_position = 0
    for size in pattern:
        current_position += size
        if len(digits) > current_position:
            cut = len(digits) - current_position
            digits = digits[:cut] + separator + digits[cut:]
            current_position += len(separator)
    return digits


def parse_amount(text: str, currency: FormattableCurrency) -> Decimal:
    """
    Parse a locale-formatted amount string for a currency.

    Args:
        text: Amount such as "1,000.50" (en-us) or "1.000,50" (en-eu)
        currency: Currency whose locale and exponent apply

    Returns:
        Decimal amount; when no fractional part is given it is padded to the
        currency exponent ("100" -> Decimal("100.00") for USD)

    Raises:
        InvalidAmountError: Empty input, misplaced separators, digit groups
            that do not match the locale pattern, non-numeric content, or
            more significant digits than the money context holds
    """
    if not isinstance(text, str):
        raise InvalidAmountError(f"Amount must be a string, got {type(text).__name__}")
    if not text:
        raise InvalidAmountError("Amount string is empty")

    local_format = LocalFormat.from_locale(currency.locale)
    parts = text.split(local_format.exponent_separator)
    if len(parts) > 2:
        raise InvalidAmountError(
            f"Amount {text!r} has more than one '{local_format.exponent_separator}' separator"
        )

    groups = parts[0].split(local_format.digit_separator)
    leading, trailing = groups[0], groups[1:]

    # Check group sizes from the least significant group outward
    pending = list(groups)
    for size in local_format.digit_separator_pattern:
        if len(pending) <= 1:
            break
        group = pending.pop()
        if len(group) != size:
            raise InvalidAmountError(
                f"Amount {text!r} has digit group {group!r}, expected {size} digits "
                f"for locale {local_format.name}"
            )

    if not _LEADING_GROUP.fullmatch(leading) or (trailing and not leading.lstrip("+-")):
        raise InvalidAmountError(f"Amount {text!r} is not a valid number")
    if any(not _DIGITS.fullmatch(group) for group in trailing):
        raise InvalidAmountError(f"Amount {text!r} is not a valid number")

    sign = leading[0] if leading[:1] in ("+", "-") else ""
    integer_digits = leading.lstrip("+-") + "".join(trailing)

    if len(parts) == 2:
        fraction_digits = parts[1]
        if not _DIGITS.fullmatch(fraction_digits):
            raise InvalidAmountError(f"Amount {text!r} has an invalid fractional part")
    else:
        if not integer_digits:
            raise InvalidAmountError(f"Amount {text!r} has no digits")
        fraction_digits = "0" * currency.exponent

    canonical = f"{sign}{integer_digits or '0'}"
    if fraction_digits:
        canonical += f".{fraction_digits}"

    try:
        return _PARSE_CONTEXT.create_decimal(canonical)
    except DecimalException:
        raise InvalidAmountError(
            f"Amount {text!r} does not fit {MONEY_CONTEXT.prec} significant digits"
        ) from None
