# banana/core/types.py
from __future__ import annotations

# Native element delimiters (first byte with the high bit set)
LIST = 0x80
INT = 0x81
STRING = 0x82
NEG = 0x83
FLOAT = 0x84

NATIVE_DELIMITERS: frozenset[int] = frozenset({LIST, INT, STRING, NEG, FLOAT})

HIGH_BIT = 0x80

INT32_MAX = (1 << 31) - 1
INT32_MIN = -(1 << 31)

# Accumulator bound before the next base-128 digit is folded in
PREMAX = 1 << 24

FLOAT_PAYLOAD = 8
