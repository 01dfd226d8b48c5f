"""
Exchange Rates

ExchangeRate converts Money from one currency into another; Exchange is a
caller-owned registry of the latest rate per ordered currency pair. Rates are
applied exactly, no rounding is done on conversion.

Exchange is not synchronized. Callers sharing one across threads must guard
writes with their own lock.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple

from .arithmetic import Scalar, money_context, to_decimal
from .currency import FormattableCurrency
from .errors import DivisionByZeroError, InvalidCurrencyError
from .money import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeRate:
    """Rate of conversion from one currency into another"""
    from_currency: FormattableCurrency
    to_currency: FormattableCurrency
    rate: Decimal

    def __post_init__(self):
        if self.from_currency.code == self.to_currency.code:
            raise InvalidCurrencyError(
                f"Exchange rate needs two different currencies, got {self.from_currency.code} twice"
            )
        object.__setattr__(self, 'rate', to_decimal(self.rate))

    def convert(self, money: Money) -> Money:
        """
        Convert money from from_currency into to_currency

        Args:
            money: Amount denominated in from_currency

        Returns:
            Money in to_currency with amount = money.amount * rate, unrounded

        Raises:
            InvalidCurrencyError: If money is not in from_currency
        """
        if money.currency.code != self.from_currency.code:
            raise InvalidCurrencyError(
                f"Rate converts {self.from_currency.code}, cannot convert {money.currency.code}"
            )
        with money_context("Conversion"):
            return Money(money.amount * self.rate, self.to_currency)

    def inverse(self) -> 'ExchangeRate':
        """
        Reciprocal rate for the reverse pair

        Raises:
            DivisionByZeroError: If the rate is zero
        """
        if self.rate == 0:
            raise DivisionByZeroError(
                f"Zero rate {self.from_currency.code} -> {self.to_currency.code} has no inverse"
            )
        with money_context("Rate inversion"):
            inverse_rate = Decimal(1) / self.rate
        return ExchangeRate(self.to_currency, self.from_currency, inverse_rate)


class Exchange:
    """Registry of exchange rates keyed by (from code, to code)"""

    def __init__(self):
        self._rates: Dict[Tuple[str, str], ExchangeRate] = {}

    def set_rate(self, rate: ExchangeRate) -> None:
        """Insert or overwrite the rate for its currency pair"""
        key = (rate.from_currency.code, rate.to_currency.code)
        self._rates[key] = rate
        logger.debug(f"Exchange rate {key[0]} -> {key[1]} set to {rate.rate}")

    def set_rate_and_inverse(self, rate: ExchangeRate) -> None:
        """
        Store a rate and its reciprocal for the reverse pair

        Nothing is stored when the rate is zero.

        Raises:
            DivisionByZeroError: If the rate is zero
        """
        inverse = rate.inverse()
        self.set_rate(rate)
        self.set_rate(inverse)

    def get_rate(self, from_currency: FormattableCurrency,
                 to_currency: FormattableCurrency) -> Optional[ExchangeRate]:
        """Get exchange rate for currency pair, or None when not set"""
        return self._rates.get((from_currency.code, to_currency.code))

    def rates(self) -> Dict[Tuple[str, str], ExchangeRate]:
        """Get a copy of all current exchange rates"""
        return self._rates.copy()

    def __contains__(self, pair) -> bool:
        return pair in self._rates

    def __len__(self) -> int:
        return len(self._rates)
