"""
Serialized Form

Money and FastMoney travel as {"amount": "<decimal string>", "currency": "<code>"}.
Both types share the shape so either can be read back as the other.
Currency codes are resolved through an explicit CurrencyRegistry.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .arithmetic import plain_digits, to_decimal
from .errors import DeserializationError, InvalidAmountError, MoneyOverflowError
from .fast_money import FastMoney
from .money import Money
from .registry import CurrencyRegistry, build_registry


class MoneyModel(BaseModel):
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    amount: str = Field(..., description="Decimal amount as string")
    currency: str = Field(..., description="Currency code (USD, EUR, etc.)")

    @classmethod
    def from_money(cls, money: Money) -> 'MoneyModel':
        return cls(amount=plain_digits(money.amount), currency=money.currency.code)

    @classmethod
    def from_fast_money(cls, money: FastMoney) -> 'MoneyModel':
        return cls.from_money(money.to_money())

    def to_money(self, registry: CurrencyRegistry) -> Money:
        """
        Resolve the currency and parse the amount

        Raises:
            DeserializationError: Unknown currency code or invalid amount
        """
        currency = registry.get(self.currency)
        if currency is None:
            raise DeserializationError(f"unknown currency: {self.currency}")
        try:
            amount = to_decimal(self.amount.strip())
        except InvalidAmountError as e:
            raise DeserializationError(f"invalid amount: {self.amount!r}") from e
        return Money.from_decimal(amount, currency)

    def to_fast_money(self, registry: CurrencyRegistry) -> FastMoney:
        """
        Like to_money, then truncate to whole minor units

        Raises:
            DeserializationError: Unknown currency, invalid amount, or an
                amount outside the 64-bit minor-unit range
        """
        money = self.to_money(registry)
        try:
            return FastMoney.from_money_lossy(money)
        except MoneyOverflowError as e:
            raise DeserializationError(f"invalid amount: {self.amount!r} ({e})") from e


def _load_model(data: str) -> MoneyModel:
    try:
        return MoneyModel.model_validate_json(data)
    except ValidationError as e:
        for error in e.errors():
            if error["type"] == "missing":
                raise DeserializationError(f"missing field `{error['loc'][0]}`") from e
        raise DeserializationError(f"malformed money document: {e}") from e


def money_to_json(money: Money) -> str:
    return MoneyModel.from_money(money).model_dump_json()


def money_from_json(data: str, registry: Optional[CurrencyRegistry] = None) -> Money:
    """
    Parse a JSON money document

    Args:
        data: JSON text such as '{"amount": "12.34", "currency": "USD"}'
        registry: Registry to resolve the code against; built from the
            global configuration when omitted

    Raises:
        DeserializationError: On missing fields, unknown currency or invalid amount
    """
    if registry is None:
        registry = build_registry()
    return _load_model(data).to_money(registry)


def fast_money_to_json(money: FastMoney) -> str:
    return MoneyModel.from_fast_money(money).model_dump_json()


def fast_money_from_json(data: str, registry: Optional[CurrencyRegistry] = None) -> FastMoney:
    """Parse a JSON money document into FastMoney, truncating extra precision"""
    if registry is None:
        registry = build_registry()
    return _load_model(data).to_fast_money(registry)
