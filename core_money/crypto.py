"""
Crypto Currency Set

Built-in table of common crypto assets. All use the en-us locale.
"""

from .currency import define_currency_set
from .locale import Locale


def _asset(code: str, exponent: int, name: str, symbol: str = None, symbol_first: bool = False) -> dict:
    return {
        "code": code,
        "exponent": exponent,
        "locale": Locale.EN_US,
        "minor_denomination": 10 ** exponent,
        "name": name,
        "symbol": symbol or code,
        "symbol_first": symbol_first,
    }


CRYPTO = define_currency_set("crypto", [
    _asset("BCH", 8, "Bitcoin Cash"),
    _asset("BTC", 8, "Bitcoin", symbol="₿", symbol_first=True),
    _asset("DAI", 18, "Dai Stablecoin"),
    _asset("ETH", 18, "Ethereum"),
    _asset("USDC", 6, "USD Coin"),
    _asset("USDT", 6, "Tether"),
    _asset("XTZ", 6, "Tezos"),
    _asset("ZEC", 8, "ZCash"),
])

BCH = CRYPTO.find("BCH")
BTC = CRYPTO.find("BTC")
DAI = CRYPTO.find("DAI")
ETH = CRYPTO.find("ETH")
USDC = CRYPTO.find("USDC")
USDT = CRYPTO.find("USDT")
XTZ = CRYPTO.find("XTZ")
ZEC = CRYPTO.find("ZEC")
