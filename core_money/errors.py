"""
Money Error Types

Every failure raised by the money engine derives from MoneyError, which is a
ValueError so callers that only guard against ValueError keep working.
"""


class MoneyError(ValueError):
    """Base class for all money engine errors"""


class InvalidCurrencyError(MoneyError):
    """Unknown currency code, or identical currencies where distinct ones are required"""


class InvalidAmountError(MoneyError):
    """Amount string could not be parsed"""


class InvalidRatioError(MoneyError):
    """Allocation weights are empty, negative or all zero"""


class CurrencyMismatchError(MoneyError):
    """Raised when a binary operation combines two different currencies."""

    def __init__(self, expected: str, actual: str) -> None:
        """Initialize currency mismatch error.

        Args:
            expected: Currency code of the left-hand operand.
            actual: Currency code of the right-hand operand.
        """
        super().__init__(f"Currency mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Division (or rate inversion) by an exact zero"""


class MoneyOverflowError(MoneyError, OverflowError):
    """Result does not fit the representable range"""


class PrecisionLossError(MoneyError):
    """Amount carries precision finer than the currency exponent"""


class DeserializationError(MoneyError):
    """Serialized money record is missing a field or names an unknown currency"""
