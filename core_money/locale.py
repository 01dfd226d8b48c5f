"""
Locale Formatting Rules

Punctuation and digit grouping used to render and parse amounts for a region.
Each Locale maps to exactly one LocalFormat.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Locale(Enum):
    """Regions with distinct money formatting conventions"""
    EN_US = "en-us"  # 1,000,000.00
    EN_IN = "en-in"  # 10,00,000.00
    EN_EU = "en-eu"  # 1.000.000,00
    EN_BY = "en-by"  # 1 000 000,00


@dataclass(frozen=True)
class LocalFormat:
    """
    Formatting metadata for a locale.

    The separator pattern lists group sizes counted from the fractional point
    outward, e.g. (3, 2, 2) for Indian grouping.
    """
    name: str
    digit_separator: str
    exponent_separator: str
    digit_separator_pattern: Tuple[int, ...]

    def __post_init__(self):
        if self.digit_separator == self.exponent_separator:
            raise ValueError(
                f"Locale {self.name} uses '{self.digit_separator}' as both digit "
                f"and exponent separator"
            )
        if any(size < 0 for size in self.digit_separator_pattern):
            raise ValueError(f"Locale {self.name} has a negative group size")

    @classmethod
    def from_locale(cls, locale: Locale) -> 'LocalFormat':
        """Return the LocalFormat for a locale"""
        try:
            return _LOCAL_FORMATS[locale]
        except KeyError:
            raise ValueError(f"No format defined for locale {locale}") from None


_LOCAL_FORMATS: Dict[Locale, LocalFormat] = {
    Locale.EN_US: LocalFormat("en-us", ",", ".", (3, 3, 3)),
    Locale.EN_IN: LocalFormat("en-in", ",", ".", (3, 2, 2)),
    Locale.EN_EU: LocalFormat("en-eu", ".", ",", (3, 3, 3)),
    Locale.EN_BY: LocalFormat("en-by", " ", ",", (3, 3, 3)),
}
