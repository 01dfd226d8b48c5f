"""
Test suite for the JSON serialized form of Money and FastMoney
"""

import json
import pytest
from decimal import Decimal

from core_money.errors import DeserializationError
from core_money.fast_money import FastMoney
from core_money.iso import ISO, USD
from core_money.crypto import BTC
from core_money.money import Money
from core_money.registry import CurrencyRegistry
from core_money.serialization import (
    MoneyModel, fast_money_from_json, fast_money_to_json, money_from_json, money_to_json,
)


class TestMoneyModel:
    """Test the pydantic model"""

    def test_from_money(self):
        model = MoneyModel.from_money(Money.from_minor(1234, USD))
        assert model.amount == "12.34"
        assert model.currency == "USD"

    def test_plain_digits(self):
        """Test amounts are never written in scientific notation"""
        model = MoneyModel.from_money(Money(Decimal('1E+3'), USD))
        assert model.amount == "1000"

    def test_from_fast_money(self):
        model = MoneyModel.from_fast_money(FastMoney.from_minor(-5678, USD))
        assert model.amount == "-56.78"

    def test_numeric_amount_accepted(self):
        model = MoneyModel(amount=12.5, currency="USD")
        assert model.amount == "12.5"


class TestMoneyJson:
    """Test Money JSON round trips and failures"""

    def setup_method(self):
        """Set up test fixtures"""
        self.registry = CurrencyRegistry()
        self.registry.register_set(ISO)

    def test_to_json(self):
        data = json.loads(money_to_json(Money.from_minor(1234, USD)))
        assert data == {"amount": "12.34", "currency": "USD"}

    def test_roundtrip(self):
        for money in (Money.from_minor(1234, USD), Money.from_minor(-1, USD),
                      Money.from_decimal(Decimal('10.005'), USD)):
            assert money_from_json(money_to_json(money), self.registry) == money

    def test_reversed_field_order(self):
        money = money_from_json('{"currency": "USD", "amount": "50.00"}', self.registry)
        assert money == Money.from_minor(5000, USD)

    def test_default_registry(self):
        """Test the configured registry is used when none is passed"""
        money = money_from_json('{"amount": "0.5", "currency": "BTC"}')
        assert money.currency is BTC

    def test_missing_field(self):
        with pytest.raises(DeserializationError, match="missing field `amount`"):
            money_from_json('{"currency": "USD"}', self.registry)
        with pytest.raises(DeserializationError, match="missing field `currency`"):
            money_from_json('{"amount": "1.00"}', self.registry)

    def test_unknown_currency(self):
        with pytest.raises(DeserializationError, match="unknown currency"):
            money_from_json('{"amount": "100.00", "currency": "XYZ"}', self.registry)

    def test_invalid_amount(self):
        with pytest.raises(DeserializationError, match="invalid amount"):
            money_from_json('{"amount": "abc", "currency": "USD"}', self.registry)
        with pytest.raises(DeserializationError, match="invalid amount"):
            money_from_json('{"amount": "NaN", "currency": "USD"}', self.registry)

    def test_malformed_document(self):
        with pytest.raises(DeserializationError):
            money_from_json('{"amount": "1.00", "currency": "USD", "memo": "x"}', self.registry)
        with pytest.raises(DeserializationError):
            money_from_json('not json', self.registry)


class TestFastMoneyJson:
    """Test FastMoney JSON round trips"""

    def setup_method(self):
        """Set up test fixtures"""
        self.registry = CurrencyRegistry()
        self.registry.register_set(ISO)

    def test_same_shape_as_money(self):
        fast = FastMoney.from_minor(1234, USD)
        assert fast_money_to_json(fast) == money_to_json(fast.to_money())

    def test_roundtrip(self):
        for minor in (0, 1234, -5678):
            fast = FastMoney.from_minor(minor, USD)
            assert fast_money_from_json(fast_money_to_json(fast), self.registry) == fast

    def test_reads_money_json(self):
        fast = fast_money_from_json('{"amount": "12.34", "currency": "USD"}', self.registry)
        assert fast.minor_units == 1234

    def test_extra_precision_truncated(self):
        fast = fast_money_from_json('{"amount": "12.345", "currency": "USD"}', self.registry)
        assert fast.minor_units == 1234

    def test_out_of_range(self):
        with pytest.raises(DeserializationError, match="invalid amount"):
            fast_money_from_json('{"amount": "1e30", "currency": "USD"}', self.registry)

    def test_unknown_currency(self):
        with pytest.raises(DeserializationError, match="unknown currency"):
            fast_money_from_json('{"amount": "100.00", "currency": "XYZ"}', self.registry)
