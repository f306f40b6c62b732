# banana/core/primitives.py
"""
Low-level Banana pieces operating on byte slices.

Every element on the wire is ``[preamble][delimiter][payload...]``: the
delimiter is the first byte with its high bit set, the preamble is the run
of bytes before it. For native types the preamble is a base-128 magnitude,
least significant digit first.
"""
from __future__ import annotations

import struct
from typing import Tuple

from banana.errors import Empty, NoType, Overflow, TooShort, Invalid
from banana.core.types import HIGH_BIT, PREMAX, FLOAT, FLOAT_PAYLOAD

_DOUBLE_BE = struct.Struct(">d")


def as_view(data) -> memoryview:
    """Return a flat byte view over ``data`` without copying it."""
    view = data if isinstance(data, memoryview) else memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def split_preamble(data: memoryview) -> Tuple[memoryview, int]:
    """Split ``data`` into ``(preamble, delimiter)``."""
    if len(data) == 0:
        raise Empty()
    for idx, b in enumerate(data):
        if b >= HIGH_BIT:
            return data[:idx], b
    raise NoType()


def dec_posint(digits) -> int:
    """Decode a non-negative base-128 magnitude; empty digits mean 0."""
    res = 0
    for b in reversed(digits):
        # below PREMAX any 7-bit digit keeps res <= INT32_MAX
        if res >= PREMAX:
            raise Overflow(bytes(digits))
        res = (res << 7) + b
    return res


def dec_negint(digits) -> int:
    """Decode a base-128 magnitude as the absolute value of a negative int."""
    res = 0
    for b in reversed(digits):
        # at exactly -PREMAX only a zero digit is allowed, giving INT32_MIN
        if res < -PREMAX or (res == -PREMAX and b != 0):
            raise Overflow(bytes(digits))
        res = (res << 7) - b
    return res


def enc_uint(out: bytearray, value: int) -> None:
    """Append ``value`` as base-128 digits, least significant first."""
    while value > 127:
        out.append(value % 128)
        value >>= 7
    out.append(value)


def dec_string(preamble: memoryview, data: memoryview) -> memoryview:
    """Slice the string payload that follows ``[preamble][0x82]`` in ``data``."""
    length = dec_posint(preamble)
    start = len(preamble) + 1
    end = start + length
    if end > len(data):
        raise TooShort(length, len(data) - start)
    return data[start:end]


def dec_float(preamble: memoryview, data: memoryview) -> float:
    # Payload is the big-endian IEEE-754 bit pattern
    if len(preamble) != 0:
        raise Invalid(
            f"Float values must not have a length preamble, but got {list(preamble)}"
        )
    if len(data) < 1 + FLOAT_PAYLOAD:
        raise TooShort(1 + FLOAT_PAYLOAD, len(data))
    return _DOUBLE_BE.unpack(data[1:1 + FLOAT_PAYLOAD])[0]


def enc_float(out: bytearray, value: float) -> None:
    out.append(FLOAT)
    out += _DOUBLE_BE.pack(value)
