"""Exception types raised by the digit arithmetic engine."""

from .config import NUM_DIGITS

__all__ = ['DigitArithError', 'DigitRangeError', 'OperandError']


class DigitArithError(Exception):
    """Base class for all digit arithmetic errors."""


class DigitRangeError(DigitArithError, ValueError):
    """Raised when a digit range is out of bounds or inverted."""
    def __init__(self, low, high, message: str = ""):
        self.low = low
        self.high = high
        super().__init__(message or f"Invalid digit range {low}..{high} "
                                    f"(need 0 <= low <= high <= {NUM_DIGITS - 1})")


class OperandError(DigitArithError, ValueError):
    """Raised when an operand does not fit in a 64-bit word."""
    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name}: {value!r} is not a 64-bit unsigned word")
