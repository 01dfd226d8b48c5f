"""
Currency Descriptors and Currency Sets

Immutable currency metadata (code, exponent, locale, symbol) and the
data-driven builder that turns a table of records into a named, searchable
currency set. Money and FastMoney hold references to these descriptors and
never copy them.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, Union, runtime_checkable

from .errors import InvalidCurrencyError
from .locale import Locale

MAX_EXPONENT = 28  # Finest scale the money decimal context can hold


@runtime_checkable
class FormattableCurrency(Protocol):
    """Anything Money can be denominated in"""
    code: str
    exponent: int
    locale: Locale
    symbol: str
    symbol_first: bool


@dataclass(frozen=True, eq=False)
class Currency:
    """
    Currency descriptor.

    Two descriptors denote the same currency iff their codes are equal; the
    remaining fields are display metadata.
    """
    code: str
    exponent: int
    locale: Locale = Locale.EN_US
    symbol: str = ""
    symbol_first: bool = True
    minor_denomination: int = 1  # Smallest circulating minor-unit increment
    name: str = ""
    numeric_code: Optional[str] = None  # ISO-4217 numeric code, e.g. "840"

    def __post_init__(self):
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidCurrencyError(f"Currency code must be a non-empty string, got {self.code!r}")
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise InvalidCurrencyError(f"Exponent of {self.code} must be an integer, got {self.exponent!r}")
        if self.exponent < 0 or self.exponent > MAX_EXPONENT:
            raise InvalidCurrencyError(
                f"Exponent of {self.code} must be between 0 and {MAX_EXPONENT}, got {self.exponent}"
            )
        if not isinstance(self.locale, Locale):
            raise InvalidCurrencyError(f"Locale of {self.code} must be a Locale, got {self.locale!r}")
        object.__setattr__(self, 'code', self.code.strip().upper())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency('{self.code}', {self.exponent})"


CurrencyEntry = Union[Currency, Mapping[str, object]]


class CurrencySet:
    """
    Named, immutable collection of currencies with code lookup.

    Alphabetic codes are matched case-insensitively; all-digit codes are
    matched against ISO numeric codes.
    """

    def __init__(self, name: str, currencies: Iterable[Currency]):
        self._name = name
        self._by_code: Dict[str, Currency] = {}
        self._by_numeric: Dict[str, Currency] = {}

        for currency in currencies:
            if currency.code in self._by_code:
                raise InvalidCurrencyError(f"Duplicate currency code {currency.code} in set '{name}'")
            self._by_code[currency.code] = currency
            if currency.numeric_code:
                if currency.numeric_code in self._by_numeric:
                    raise InvalidCurrencyError(
                        f"Duplicate numeric code {currency.numeric_code} in set '{name}'"
                    )
                self._by_numeric[currency.numeric_code] = currency

    @property
    def name(self) -> str:
        return self._name

    def get(self, code: str) -> Optional[Currency]:
        """Return the currency for a code, or None if this set does not define it"""
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
            InvalidCurrencyError: If the code is not part of this set
        """
        currency = self.get(code)
        if currency is None:
            raise InvalidCurrencyError(f"{code!r} is not a known currency in set '{self._name}'")
        return currency

    def codes(self) -> List[str]:
        return list(self._by_code)

    def __getitem__(self, code: str) -> Currency:
        return self.find(code)

    def __contains__(self, code) -> bool:
        return self.get(code) is not None

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"CurrencySet('{self._name}', {len(self)} currencies)"


def define_currency_set(name: str, records: Iterable[CurrencyEntry]) -> CurrencySet:
    """
    Build a named currency set from a table of records.

    Args:
        name: Name of the set (e.g. "iso", "crypto", "loyalty-points")
        records: Currency instances or mappings with Currency field names.
            A mapping may give ``locale`` as a Locale or its tag ("en-us").

    Returns:
        Immutable CurrencySet
    """
    currencies = []
    for record in records:
        if isinstance(record, Currency):
            currencies.append(record)
            continue

        fields = dict(record)
        locale = fields.get('locale', Locale.EN_US)
        if isinstance(locale, str):
            try:
                fields['locale'] = Locale(locale.lower())
            except ValueError:
                raise InvalidCurrencyError(
                    f"Unknown locale {locale!r} for currency {fields.get('code')!r}"
                ) from None
        try:
            currencies.append(Currency(**fields))
        except TypeError as e:
            raise InvalidCurrencyError(f"Invalid currency record {record!r}: {e}") from e

    return CurrencySet(name, currencies)
