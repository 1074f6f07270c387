"""
Digit Arithmetic — Digit Ranges + Nibble Access

A packed word holds 16 four-bit digit slots:

    bits 63..60  59..56  ...   7..4   3..0
    slot   15      14    ...    1      0

Every arithmetic operation works over a contiguous, inclusive range of
slots. DigitRange validates the range once at construction so the
engine never sees an inverted or out-of-bounds range.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .config import (
    DIGIT_BITS, DIGIT_MASK, NUM_DIGITS, WORD_MASK, DISPLAY_WIDTH,
    DECIMAL_BASE, MANTISSA_LOW, MANTISSA_HIGH, EXPONENT_LOW, EXPONENT_HIGH,
)
from .errors import DigitRangeError, OperandError

__all__ = [
    'DigitRange', 'MANTISSA_DIGITS', 'EXPONENT_DIGITS', 'ALL_DIGITS',
    'digit_shift', 'digit_mask', 'get_digit', 'set_digit',
    'split_digits', 'join_digits', 'field_value', 'is_bcd',
    'check_word', 'format_word',
]


# ══════════════════════════════════════════════
# Digit range
# ══════════════════════════════════════════════

@dataclass(frozen=True)
class DigitRange:
    """Inclusive span of digit slots, low <= high, both in 0..15."""
    low: int
    high: int

    def __post_init__(self):
        if not (isinstance(self.low, int) and isinstance(self.high, int)):
            raise DigitRangeError(self.low, self.high,
                                  f"Digit indices must be ints, got "
                                  f"{self.low!r}..{self.high!r}")
        if not 0 <= self.low <= self.high < NUM_DIGITS:
            raise DigitRangeError(self.low, self.high)

    @classmethod
    def single(cls, index: int) -> DigitRange:
        return cls(index, index)

    @property
    def width(self) -> int:
        """Number of slots in the range."""
        return self.high - self.low + 1

    @property
    def mask(self) -> int:
        """64-bit mask with every bit of every slot in the range set."""
        return ((1 << (self.width * DIGIT_BITS)) - 1) << digit_shift(self.low)

    def indices(self) -> range:
        """Slot indices from low to high (carry propagation order)."""
        return range(self.low, self.high + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices())

    def __contains__(self, index) -> bool:
        return self.low <= index <= self.high

    def __str__(self) -> str:
        return f"{self.low}..{self.high}"


MANTISSA_DIGITS = DigitRange(MANTISSA_LOW, MANTISSA_HIGH)
EXPONENT_DIGITS = DigitRange(EXPONENT_LOW, EXPONENT_HIGH)
ALL_DIGITS = DigitRange(0, NUM_DIGITS - 1)


# ══════════════════════════════════════════════
# Nibble access
# ══════════════════════════════════════════════

def digit_shift(index: int) -> int:
    """Bit position of the low bit of slot `index`."""
    return index * DIGIT_BITS


def digit_mask(index: int) -> int:
    """Mask selecting the four bits of slot `index`."""
    return DIGIT_MASK << digit_shift(index)


def get_digit(word: int, index: int) -> int:
    """Read the 4-bit digit at slot `index`."""
    return (word >> digit_shift(index)) & DIGIT_MASK


def set_digit(word: int, index: int, value: int) -> int:
    """Return `word` with slot `index` replaced by the low nibble of `value`."""
    shift = digit_shift(index)
    return (word & ~(DIGIT_MASK << shift) & WORD_MASK) | ((value & DIGIT_MASK) << shift)


def split_digits(word: int, digits: DigitRange) -> List[int]:
    """Slot values of `word` over `digits`, least significant first."""
    return [get_digit(word, i) for i in digits]


def join_digits(values: Iterable[int], digits: DigitRange, base_word: int = 0) -> int:
    """Write `values` (least significant first) into `digits` of `base_word`.

    Raises DigitRangeError if the number of values does not match the
    range width.
    """
    values = list(values)
    if len(values) != digits.width:
        raise DigitRangeError(digits.low, digits.high,
                              f"Expected {digits.width} digits for range "
                              f"{digits}, got {len(values)}")
    word = base_word
    for index, value in zip(digits, values):
        word = set_digit(word, index, value)
    return word


def field_value(word: int, digits: DigitRange, base: int = DECIMAL_BASE) -> int:
    """Numeric value of the field, reading each slot as a digit in `base`.

    Digits are taken at face value, so a BCD field holding A-F gives a
    number that has no decimal meaning.
    """
    value = 0
    for index in reversed(digits.indices()):
        value = value * base + get_digit(word, index)
    return value


def is_bcd(word: int, digits: DigitRange) -> bool:
    """True if every slot in `digits` holds a decimal digit 0-9."""
    return all(d < DECIMAL_BASE for d in split_digits(word, digits))


def check_word(value, name: str = "operand") -> int:
    """Return `value` unchanged if it is a 64-bit unsigned word."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandError(name, value)
    if not 0 <= value <= WORD_MASK:
        raise OperandError(name, value)
    return value


def format_word(word: int, width: int = DISPLAY_WIDTH) -> str:
    """Zero-padded lowercase hex, e.g. format_word(0x1000) -> '00000000001000'."""
    return f"{word:0{width}x}"
