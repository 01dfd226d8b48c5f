"""
Core Money

Monetary values with currency safety: an exact Decimal Money type, a
fixed-point FastMoney variant, locale-aware formatting and parsing, and
exchange-rate conversion.
"""

__version__ = "1.0.0"
