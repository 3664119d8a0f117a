"""Digit classification for radix <= 16.

A fixed 256-entry table maps lowercase characters to their digit value so
numeric scanning can classify a character with a single lookup.
"""

import numpy as np

# Digit value per character code, -1 for characters with no digit value
DIGIT_TABLE: np.ndarray = np.full(256, -1, dtype=np.int8)

for _value, _char in enumerate("0123456789abcdef"):
    DIGIT_TABLE[ord(_char)] = _value

DIGIT_TABLE.flags.writeable = False

del _value, _char


def get_digit(char: str, radix: int) -> int:
    """Return the value of *char* as a digit in *radix*, or -1.

    Lookup is case-insensitive. Characters outside the 0-255 code range,
    and values not below *radix*, are not digits.
    """
    if len(char) != 1:
        return -1
    lowered = char.lower()
    # Some characters lowercase to more than one code point
    if len(lowered) != 1:
        return -1
    code = ord(lowered)
    if code > 255:
        return -1
    value = int(DIGIT_TABLE[code])
    return value if value < radix else -1


def is_digit(char: str, radix: int) -> bool:
    return get_digit(char, radix) != -1
