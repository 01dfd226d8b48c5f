"""
ISO-4217 Currency Set

Built-in table of ISO currencies. Codes resolve by alphabetic code ("USD")
or numeric code ("840").
"""

from .currency import define_currency_set
from .locale import Locale

ISO = define_currency_set("iso", [
    {"code": "AED", "numeric_code": "784", "exponent": 2, "locale": Locale.EN_US, "minor_denomination": 25,
     "name": "United Arab Emirates Dirham", "symbol": "د.إ", "symbol_first": False},
    {"code": "ARS", "numeric_code": "032", "exponent": 2, "locale": Locale.EN_EU, "minor_denomination": 1,
     "name": "Argentine Peso", "symbol": "$", "symbol_first": True},
    {"code": "AUD", "numeric_code": "036", "exponent": 2, "locale": Locale.EN_US, "minor_denomination": 5,
     "name": "Australian Dollar", "symbol": "$", "symbol_first": True},
    {"code": "BHD", "numeric_code": "048", "exponent": 3, "locale": Locale.EN_US, "minor_denomination": 5,
     "name": "Bahraini Dinar", "symbol": "ب.د", "symbol_first": True},
    {"code": "BYN", "numeric_code": "933", "exponent": 2, "locale": Locale.EN_BY, "minor_denomination": 1,
     "name": "Belarusian Ruble", "symbol": "Br", "symbol_first": False},
    {"code": "CAD", "numeric_code": "124", "exponent": 2, "locale": Locale.EN_US, "minor_denomination": 5,
     "name": "Canadian Dollar", "symbol": "$", "symbol_first": True},
    {"code": "CHF", "numeric_code": "756", "exponent": 2, "locale": Locale.EN_US, "minor_denomination": 5,
     "name": "Swiss Franc", "symbol": "CHF", "symbol_first": True},
    {"code": "EUR", "numeric_code": "978", "exponent": 2, "locale": Locale.EN_EU, "minor_denomination": 1,
     "name": "Euro", "symbol": "€", "symbol_first": True},
    {"code": "GBP", "numeric_code": "826", "exponent": 2, "locale": Locale.EN_US, "minor_denomination": 1,
     "name": "British Pound", "symbol": "£", "symbol_first": True},
    {"code": "INR", "numeric_code": "356", "exponent": 2, "locale": Locale.EN_IN, "minor_denomination": 50,
     "name": "Indian Rupee", "symbol": "₹", "symbol_first": True},
    {"code": "JPY", "numeric_code": "392", "exponent": 0, "locale": Locale.EN_US, "minor_denomination": 1,
     "name": "Japanese Yen", "symbol": "¥", "symbol_first": True},
    {"code": "USD", "numeric_code": "840", "exponent": 2, "locale": Locale.EN_US, "minor_denomination": 1,
     "name": "United States Dollar", "symbol": "$", "symbol_first": True},
])

AED = ISO.find("AED")
ARS = ISO.find("ARS")
AUD = ISO.find("AUD")
BHD = ISO.find("BHD")
BYN = ISO.find("BYN")
CAD = ISO.find("CAD")
CHF = ISO.find("CHF")
EUR = ISO.find("EUR")
GBP = ISO.find("GBP")
INR = ISO.find("INR")
JPY = ISO.find("JPY")
USD = ISO.find("USD")
