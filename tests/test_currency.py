"""
Test suite for currencies, currency sets, the registry and locales
"""

import json
import pytest

from core_money.config import CoreMoneyConfig
from core_money.crypto import BTC, CRYPTO, ETH
from core_money.currency import Currency, CurrencySet, FormattableCurrency, define_currency_set
from core_money.errors import InvalidCurrencyError
from core_money.iso import EUR, INR, ISO, JPY, USD
from core_money.locale import LocalFormat, Locale
from core_money.money import Money
from core_money.registry import CurrencyRegistry, build_registry, load_currency_set


class TestCurrency:
    """Test Currency descriptors"""

    def test_creation(self):
        currency = Currency("pts", 0, symbol="P")
        assert currency.code == "PTS"
        assert currency.locale == Locale.EN_US
        assert currency.symbol_first is True
        assert str(currency) == "PTS"
        assert repr(currency) == "Currency('PTS', 0)"

    def test_identity_by_code(self):
        """Test descriptors with the same code are the same currency"""
        other_usd = Currency("USD", 2, symbol="US$")
        assert other_usd == USD
        assert hash(other_usd) == hash(USD)
        assert Money.from_minor(100, other_usd) == Money.from_minor(100, USD)

    def test_invalid_fields(self):
        with pytest.raises(InvalidCurrencyError):
            Currency("", 2)
        with pytest.raises(InvalidCurrencyError):
            Currency("ABC", -1)
        with pytest.raises(InvalidCurrencyError):
            Currency("ABC", 29)
        with pytest.raises(InvalidCurrencyError):
            Currency("ABC", 2, locale="en-us")

    def test_conforms_to_protocol(self):
        assert isinstance(USD, FormattableCurrency)
        assert not isinstance("USD", FormattableCurrency)


class TestCurrencySets:
    """Test built-in sets and the set builder"""

    def test_iso_lookup(self):
        assert ISO.find("USD") is USD
        assert ISO.find("usd") is USD
        assert ISO.find("840") is USD
        assert ISO["EUR"] is EUR
        assert "JPY" in ISO
        assert JPY.exponent == 0
        assert INR.locale == Locale.EN_IN

    def test_unknown_code(self):
        assert ISO.get("XYZ") is None
        with pytest.raises(InvalidCurrencyError, match="not a known currency"):
            ISO.find("XYZ")

    def test_crypto_lookup(self):
        assert CRYPTO.find("btc") is BTC
        assert ETH.exponent == 18
        assert "USD" not in CRYPTO

    def test_define_currency_set(self):
        points = define_currency_set("loyalty", [
            {"code": "PTS", "exponent": 0, "symbol": "P", "locale": "en-eu"},
            Currency("MLS", 1, symbol="mi", symbol_first=False),
        ])
        assert points.name == "loyalty"
        assert len(points) == 2
        assert points.codes() == ["PTS", "MLS"]
        assert points.find("pts").locale == Locale.EN_EU
        assert str(Money.from_minor(12345, points.find("MLS"))) == "1,234.5mi"

    def test_duplicate_codes_rejected(self):
        with pytest.raises(InvalidCurrencyError, match="Duplicate currency code"):
            CurrencySet("dupes", [Currency("ABC", 2), Currency("abc", 0)])

    def test_bad_records(self):
        with pytest.raises(InvalidCurrencyError, match="Unknown locale"):
            define_currency_set("bad", [{"code": "ABC", "exponent": 2, "locale": "fr-fr"}])
        with pytest.raises(InvalidCurrencyError):
            define_currency_set("bad", [{"code": "ABC", "exponent": 2, "colour": "red"}])


class TestLocale:
    """Test locale formatting rules"""

    def test_formats(self):
        assert LocalFormat.from_locale(Locale.EN_US).digit_separator == ","
        assert LocalFormat.from_locale(Locale.EN_IN).digit_separator_pattern == (3, 2, 2)
        assert LocalFormat.from_locale(Locale.EN_EU).exponent_separator == ","
        assert LocalFormat.from_locale(Locale.EN_BY).digit_separator == " "

    def test_separators_must_differ(self):
        with pytest.raises(ValueError):
            LocalFormat("broken", ",", ",", (3,))

    def test_every_locale_has_a_format(self):
        for locale in Locale:
            assert LocalFormat.from_locale(locale).name == locale.value


class TestCurrencyRegistry:
    """Test the currency registry"""

    def setup_method(self):
        """Set up test fixtures"""
        self.registry = CurrencyRegistry()
        self.registry.register_set(ISO)

    def test_find(self):
        assert self.registry.find("usd") is USD
        assert self.registry.find("978") is EUR
        assert self.registry.get("BTC") is None
        with pytest.raises(InvalidCurrencyError):
            self.registry.find("BTC")

    def test_register_additional_set(self):
        self.registry.register_set(CRYPTO)
        assert self.registry.find("BTC") is BTC
        assert len(self.registry) == len(ISO) + len(CRYPTO)
        assert [s.name for s in self.registry.sets] == ["iso", "crypto"]

    def test_conflicting_set_rejected(self):
        clash = define_currency_set("clash", [{"code": "USD", "exponent": 2}])
        with pytest.raises(InvalidCurrencyError, match="already registered"):
            self.registry.register_set(clash)
        assert len(self.registry.sets) == 1

    def test_locale_format(self):
        assert self.registry.locale_format(Locale.EN_EU).digit_separator == "."
        assert self.registry.locale_format("EN-IN").digit_separator_pattern == (3, 2, 2)
        with pytest.raises(InvalidCurrencyError):
            self.registry.locale_format("fr-fr")

    def test_build_registry(self):
        assert "BTC" in build_registry(CoreMoneyConfig(include_crypto=True))
        assert "BTC" not in build_registry(CoreMoneyConfig(include_crypto=False))

    def test_build_registry_with_currency_file(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text(json.dumps([{"code": "PTS", "exponent": 0, "symbol": "P"}]))
        registry = build_registry(CoreMoneyConfig(currencies_file=str(path), currencies_set_name="points"))
        assert registry.find("PTS").symbol == "P"
        assert registry.sets[-1].name == "points"


class TestLoadCurrencySet:
    """Test loading user-defined currency tables"""

    def test_load(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text(json.dumps([
            {"code": "PTS", "exponent": 0, "symbol": "P", "name": "Points"},
            {"code": "GEM", "exponent": 2, "locale": "en-eu", "symbol_first": False},
        ]))
        currency_set = load_currency_set(path, name="game")
        assert currency_set.name == "game"
        assert currency_set.find("GEM").locale == Locale.EN_EU
        assert currency_set.find("PTS").name == "Points"

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text(json.dumps([{"code": "PTS", "exponent": -1}]))
        with pytest.raises(InvalidCurrencyError, match="Cannot load currency table"):
            load_currency_set(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "currencies.json"
        path.write_text("[{")
        with pytest.raises(InvalidCurrencyError):
            load_currency_set(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidCurrencyError):
            load_currency_set(tmp_path / "absent.json")
