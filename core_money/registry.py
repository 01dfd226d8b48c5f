"""
Currency Registry

Explicit registry object that resolves currency codes across one or more
currency sets. Built once at start-up (see build_registry) and passed to
whatever needs to resolve codes, e.g. deserialization.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .config import CoreMoneyConfig, get_config
from .crypto import CRYPTO
from .currency import Currency, CurrencySet, define_currency_set
from .errors import InvalidCurrencyError
from .iso import ISO
from .locale import LocalFormat, Locale

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Resolves codes to currency descriptors across registered sets"""

    def __init__(self):
        self._sets: List[CurrencySet] = []
        self._by_code: Dict[str, Currency] = {}
        self._by_numeric: Dict[str, Currency] = {}

    def register_set(self, currency_set: CurrencySet) -> None:
        """
        Register every currency of a set.

        Raises:
            InvalidCurrencyError: If a code (or numeric code) is already
                registered by another set, which would make lookups ambiguous
        """
        for currency in currency_set:
            if currency.code in self._by_code:
                raise InvalidCurrencyError(
                    f"Currency {currency.code} from set '{currency_set.name}' is already registered"
                )
            if currency.numeric_code and currency.numeric_code in self._by_numeric:
                raise InvalidCurrencyError(
                    f"Numeric code {currency.numeric_code} from set '{currency_set.name}' is already registered"
                )

        for currency in currency_set:
            self._by_code[currency.code] = currency
            if currency.numeric_code:
                self._by_numeric[currency.numeric_code] = currency
        self._sets.append(currency_set)
        logger.debug(f"Registered currency set '{currency_set.name}' with {len(currency_set)} currencies")

    def get(self, code: str) -> Optional[Currency]:
        if not isinstance(code, str):
            return None
        normalized = code.strip().upper()
        currency = self._by_code.get(normalized)
        if currency is None and normalized.isdigit():
            currency = self._by_numeric.get(normalized)
        return currency

    def find(self, code: str) -> Currency:
        """
        Look up a currency by alphabetic or numeric code

        Raises:
            InvalidCurrencyError: If no registered set defines the code
        """
        currency = self.get(code)
        if currency is None:
            raise InvalidCurrencyError(f"{code!r} is not a known currency")
        return currency

    def locale_format(self, locale: Union[Locale, str]) -> LocalFormat:
        """Formatting rules for a locale or locale tag ("en-in")"""
        if isinstance(locale, str):
            try:
                locale = Locale(locale.strip().lower())
            except ValueError:
                raise InvalidCurrencyError(f"Unknown locale {locale!r}") from None
        return LocalFormat.from_locale(locale)

    @property
    def sets(self) -> List[CurrencySet]:
        return list(self._sets)

    def __contains__(self, code) -> bool:
        return self.get(code) is not None

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)


class CurrencyRecord(BaseModel):
    """One entry of a user-defined currency table"""
    model_config = ConfigDict(extra="forbid")

    code: str = Field(..., min_length=1, description="Currency code, e.g. PTS")
    exponent: int = Field(..., ge=0, le=28, description="Number of fractional digits")
    locale: Locale = Field(Locale.EN_US, description="Locale tag, e.g. en-us")
    symbol: str = ""
    symbol_first: bool = True
    minor_denomination: int = Field(1, ge=1)
    name: str = ""
    numeric_code: Optional[str] = None


_RECORDS = TypeAdapter(List[CurrencyRecord])


def load_currency_set(path: Union[str, Path], name: str = "custom") -> CurrencySet:
    """
    Load a currency set from a JSON file holding a list of currency records

    Args:
        path: JSON file, e.g. [{"code": "PTS", "exponent": 0, "symbol": "P"}]
        name: Name of the resulting set

    Raises:
        InvalidCurrencyError: If the file cannot be read or a record is invalid
    """
    path = Path(path)
    try:
        records = _RECORDS.validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        raise InvalidCurrencyError(f"Cannot load currency table {path}: {e}") from e

    currency_set = define_currency_set(name, [record.model_dump() for record in records])
    logger.info(f"Loaded {len(currency_set)} currencies from {path}")
    return currency_set


def build_registry(settings: Optional[CoreMoneyConfig] = None) -> CurrencyRegistry:
    """
    Build the registry described by configuration

    ISO currencies are always registered; crypto currencies when
    include_crypto is set; and the JSON table named by currencies_file.
    """
    settings = settings or get_config()
    registry = CurrencyRegistry()
    registry.register_set(ISO)
    if settings.include_crypto:
        registry.register_set(CRYPTO)
    if settings.currencies_file:
        registry.register_set(load_currency_set(settings.currencies_file, settings.currencies_set_name))
    return registry
