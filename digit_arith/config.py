"""
Digit Arithmetic — Word Geometry / Field Configuration
======================================================

A register word is 64 bits wide, split into 16 four-bit digit slots.
Slot 0 is the least significant nibble, slot 15 the most significant.

    slot:  15 14 13 12 11 10  9  8  7  6  5  4  3  2  1  0
                    |<-------- mantissa ------->|    |<->|
                                                   exponent

Field positions below are the ones the calculator uses for its
10-digit mantissa and 2-digit exponent.
"""

# =============================================================================
#  WORD GEOMETRY
# =============================================================================
DIGIT_BITS = 4            # Bits per digit slot (one nibble)
DIGIT_MASK = 0xF          # Mask for a single nibble
NUM_DIGITS = 16           # Slots per word
WORD_BITS = DIGIT_BITS * NUM_DIGITS
WORD_MASK = (1 << WORD_BITS) - 1

DECIMAL_BASE = 10
HEX_BASE = 16

# BCD correction constants
BCD_ADD_ADJUST = 6        # Skip the six codes A-F on decimal carry
BCD_SUB_ADJUST = 10       # Wrap a decimal borrow back into 0-9


# =============================================================================
#  REGISTER FIELDS
# =============================================================================
MANTISSA_LOW = 3
MANTISSA_HIGH = 12        # 10 digits: slots 3..12
EXPONENT_LOW = 0
EXPONENT_HIGH = 1         # 2 digits: slots 0..1


# =============================================================================
#  SELF-TEST HARNESS
# =============================================================================
DISPLAY_WIDTH = 14        # Hex digits per table column


# =============================================================================
#  LOGGING
# =============================================================================
# The harness takes no command line arguments, so its console level comes
# from the environment.
LOG_LEVEL_ENV = "DIGIT_ARITH_LOG_LEVEL"
DEFAULT_CONSOLE_LEVEL = "WARNING"
LOG_FILE_ENV = "DIGIT_ARITH_LOG_FILE"
