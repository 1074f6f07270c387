"""
Packed-Digit Arithmetic for HP Calculator Emulation
===================================================
Digit-serial add/subtract over 64-bit registers made of sixteen 4-bit
digit slots, in BCD or hexadecimal, as used by the arithmetic unit of
the classic HP calculators.

Layout (for contributors):
    config.py     word geometry and field positions
    errors.py     DigitArithError hierarchy
    digits.py     DigitRange + nibble helpers
    alu.py        add_sub engine and the two field incrementers
    selftest.py   fixed BCD increment vectors and the comparison table
    log_setup.py  rich console / file logging for the harness

Typical use:
    >>> from digit_arith import add_sub
    >>> add_sub(True, False, 0x0999, 0x0001, False, 0, 3)
    (4096, False)
"""

__version__ = "0.1.0"

from .errors import DigitArithError, DigitRangeError, OperandError
from .digits import (
    DigitRange, MANTISSA_DIGITS, EXPONENT_DIGITS, ALL_DIGITS,
    get_digit, set_digit, split_digits, join_digits, field_value,
    is_bcd, format_word,
)
from .alu import add_sub, add_one_bcd_m, add_one_bcd_x

__all__ = [
    'DigitArithError', 'DigitRangeError', 'OperandError',
    'DigitRange', 'MANTISSA_DIGITS', 'EXPONENT_DIGITS', 'ALL_DIGITS',
    'get_digit', 'set_digit', 'split_digits', 'join_digits', 'field_value',
    'is_bcd', 'format_word',
    'add_sub', 'add_one_bcd_m', 'add_one_bcd_x',
]
