"""
Digit Arithmetic — Digit-Serial Adder/Subtractor

The calculator's arithmetic unit works one 4-bit digit at a time,
starting at the least significant slot of the selected range and
rippling the carry upward. The same adder handles both number systems:

  BCD mode:  each slot is a decimal digit 0-9
  Hex mode:  each slot is a hexadecimal digit 0-F

Subtraction is done as complement-and-add:
  b' = b ^ 0xF       (15's complement of the subtrahend digit)
  s  = a + b' + c    (c is "no borrow", so borrow-in is inverted first)

Decimal correction per digit (BCD mode only):
  add: if s > 9, force carry and add 6   (skip codes A-F)
  sub: if no carry out of the nibble, add 10  (wrap borrow into 0-9)

The carry/borrow returned to the caller is always in the caller's sense:
True means the addition overflowed the range, or the subtraction
needed a borrow from beyond it.

Slots outside the range are copied from arg1 unchanged. BCD-mode digits
are not validated; A-F nibbles go through the same adder and come out
however the correction logic leaves them.
"""

from typing import Optional, Tuple

from .config import DIGIT_MASK, BCD_ADD_ADJUST, BCD_SUB_ADJUST
from .digits import (
    DigitRange, MANTISSA_DIGITS, EXPONENT_DIGITS,
    digit_shift, check_word,
)
from .errors import DigitRangeError

__all__ = ['add_sub', 'add_one_bcd_m', 'add_one_bcd_x']


def _resolve_range(low_digit, high_digit, digits) -> DigitRange:
    if digits is not None:
        if low_digit is not None or high_digit is not None:
            raise DigitRangeError(low_digit, high_digit,
                                  "Pass either low_digit/high_digit or digits=, not both")
        if not isinstance(digits, DigitRange):
            raise DigitRangeError(None, None,
                                  f"digits must be a DigitRange, got {digits!r}")
        return digits
    if low_digit is None or high_digit is None:
        raise DigitRangeError(low_digit, high_digit,
                              "Both low_digit and high_digit are required")
    return DigitRange(low_digit, high_digit)


def add_sub(bcd: bool, subtract: bool, arg1: int, arg2: int, carry_in: bool,
            low_digit: Optional[int] = None, high_digit: Optional[int] = None,
            *, digits: Optional[DigitRange] = None) -> Tuple[int, bool]:
    """Add or subtract two packed words over a range of digit slots.

    Args:
        bcd: Decimal digits with BCD correction (True) or plain hex digits.
        subtract: Compute arg1 - arg2 instead of arg1 + arg2.
        arg1: First operand; also supplies every slot outside the range.
        arg2: Second operand (the subtrahend when subtracting).
        carry_in: Carry into the lowest slot (borrow-in when subtracting).
        low_digit, high_digit: Inclusive slot range, 0 <= low <= high <= 15.
        digits: The same range as a DigitRange (keyword only, instead of
            low_digit/high_digit).

    Returns:
        (result, carry_out). carry_out is the carry (or borrow) out of the
        highest slot; callers that don't need it just drop it.
    """
    span = _resolve_range(low_digit, high_digit, digits)
    check_word(arg1, "arg1")
    check_word(arg2, "arg2")

    result = arg1
    carry = bool(carry_in) ^ bool(subtract)   # for subtract, carry means "no borrow"

    for index in span.indices():
        shift = digit_shift(index)
        a = (arg1 >> shift) & DIGIT_MASK
        b = (arg2 >> shift) & DIGIT_MASK
        if subtract:
            b ^= DIGIT_MASK
        s = a + b + carry
        carry = s > DIGIT_MASK
        if bcd:
            if subtract:
                if not carry:
                    s += BCD_SUB_ADJUST
            else:
                carry |= s > 9
                if carry:
                    s += BCD_ADD_ADJUST
        result = (result & ~(DIGIT_MASK << shift)) | ((s & DIGIT_MASK) << shift)

    return result, carry ^ bool(subtract)


def add_one_bcd_m(arg: int) -> int:
    """Increment the 10-digit decimal mantissa field (slots 3-12) by one."""
    result, _ = add_sub(True, False, arg, 0, True, digits=MANTISSA_DIGITS)
    return result


def add_one_bcd_x(arg: int) -> int:
    """Increment the 2-digit decimal exponent field (slots 0-1) by one."""
    result, _ = add_sub(True, False, arg, 0, True, digits=EXPONENT_DIGITS)
    return result
