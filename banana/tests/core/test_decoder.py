from __future__ import annotations

import array
import logging
from typing import Optional

import pytest

from banana import (
    Codec, CodecConfig, decode, decode_with_remainder,
    Integer, String, Float, List, Extension,
    Empty, Invalid, NoType, Overflow, TooShort, UnknownType,
)
from banana.profiles.base import Profile


class FakeProfile(Profile):
    """Claims 0xff; the preamble is an optional single content byte."""

    name = "fake"

    def decode(self, delimiter, preamble, data):
        if delimiter != 0xFF:
            raise UnknownType(delimiter)
        if len(preamble) == 0:
            return FakeValue(None), data[1:]
        if len(preamble) == 1:
            return FakeValue(preamble[0]), data[2:]
        raise Invalid("Invalid length")

    def encode(self, value, out):
        if value.contents is not None:
            out.append(value.contents)
        out.append(0xFF)

    def owns(self, value):
        return isinstance(value, FakeValue)


class FakeValue:
    def __init__(self, contents: Optional[int]):
        self.contents = contents

    def __eq__(self, other):
        return isinstance(other, FakeValue) and other.contents == self.contents

    def __repr__(self):
        return f"FakeValue({self.contents!r})"


# ---------------- native types ----------------

def test_decode_integers():
    assert decode(bytes([0x12, 0x34, 0x81])) == Integer(6674)
    assert decode(bytes([0x12, 0x34, 0x83])) == Integer(-6674)
    assert decode(bytes([0x01, 0x81])) == Integer(1)
    assert decode(bytes([0x01, 0x83])) == Integer(-1)


def test_decode_integer_without_preamble_is_zero():
    assert decode(bytes([0x81])) == Integer(0)


def test_decode_int32_bounds():
    assert decode(bytes([0x7F, 0x7F, 0x7F, 0x7F, 0x07, 0x81])) == Integer(2**31 - 1)
    assert decode(bytes([0x00, 0x00, 0x00, 0x00, 0x08, 0x83])) == Integer(-(2**31))


def test_decode_int32_overflow():
    with pytest.raises(Overflow) as exc:
        decode(bytes([0x00, 0x00, 0x00, 0x00, 0x08, 0x81]))
    assert exc.value == Overflow(b"\x00\x00\x00\x00\x08")

    with pytest.raises(Overflow):
        decode(bytes([0x01, 0x00, 0x00, 0x00, 0x08, 0x83]))


def test_decode_string():
    assert decode(b"\x05\x82hello") == String(b"hello")
    assert decode(b"\x03\x82ban") == String(b"ban")


def test_decode_string_too_short():
    with pytest.raises(TooShort) as exc:
        decode(b"\x04\x82ban")
    assert exc.value == TooShort(4, 3)


def test_decode_float():
    assert decode(bytes([0x84, 0x3F, 0xF8, 0, 0, 0, 0, 0, 0])) == Float(1.5)


def test_decode_float_ignores_trailing_bytes():
    assert decode(bytes([0x84, 0x40, 0x37, 0, 0, 0, 0, 0, 0, 12, 12])) == Float(23.0)


def test_decode_float_too_short():
    with pytest.raises(TooShort) as exc:
        decode(bytes([0x84, 0x3F, 0xF8]))
    assert exc.value == TooShort(9, 3)


def test_decode_lists():
    assert decode(bytes([0x00, 0x80])) == List([])
    assert decode(bytes([2, 0x80, 0x01, 0x81, 0x17, 0x81])) == List([Integer(1), Integer(23)])
    assert decode(bytes([0x02, 0x80, 0x02, 0x81, 0x03, 0x83])) == List([Integer(2), Integer(-3)])


def test_decode_nested_list():
    raw = bytes([2, 0x80, 1, 0x81, 1, 0x80, 5, 0x82]) + b"hello"
    assert decode(raw) == List([Integer(1), List([String(b"hello")])])


def test_decode_list_closes_several_levels_at_once():
    # [[[1]], 2]
    raw = bytes([2, 0x80, 1, 0x80, 1, 0x80, 1, 0x81, 2, 0x81])
    assert decode(raw) == List([List([List([Integer(1)])]), Integer(2)])


def test_decode_list_without_length():
    with pytest.raises(Invalid) as exc:
        decode(bytes([0x80]))
    assert exc.value == Invalid("List without a length")


def test_decode_list_child_error_propagates():
    # second child is a truncated string
    with pytest.raises(TooShort):
        decode(bytes([2, 0x80, 0x01, 0x81, 0x05, 0x82]) + b"hi")


def test_decode_list_missing_children():
    with pytest.raises(Empty):
        decode(bytes([3, 0x80, 0x01, 0x81]))


def test_decode_errors_for_bad_input():
    with pytest.raises(Empty):
        decode(b"")
    with pytest.raises(NoType):
        decode(b"\x01\x02")
    with pytest.raises(UnknownType) as exc:
        decode(bytes([0x01, 0x87]))
    assert exc.value.delimiter == 0x87


# ---------------- remainder ----------------

def test_decode_with_remainder_returns_suffix():
    raw = bytes([0x01, 0x81, 0x02, 0x81])
    element, rem = decode_with_remainder(raw)
    assert element == Integer(1)
    assert bytes(rem) == b"\x02\x81"
    assert rem.obj is raw


def test_decode_with_remainder_walks_a_stream():
    raw = b"\x01\x81\x03\x82abc\x00\x80"
    out = []
    rem = memoryview(raw)
    while len(rem):
        element, rem = decode_with_remainder(rem)
        out.append(element)
    assert out == [Integer(1), String(b"abc"), List()]


def test_decode_does_not_mutate_input():
    raw = bytearray(b"\x02\x80\x01\x81\x03\x82abc")
    before = bytes(raw)
    decode(raw)
    assert bytes(raw) == before


# ---------------- config ----------------

def test_decode_tolerates_trailing_bytes_by_default():
    assert decode(b"\x01\x81garbage\x81") == Integer(1)


def test_decode_strict_rejects_trailing_bytes():
    with pytest.raises(Invalid) as exc:
        decode(b"\x01\x81\x02\x81", config=CodecConfig(strict=True))
    assert "2 trailing byte(s)" in exc.value.message


def test_decode_strict_accepts_exact_input():
    assert decode(b"\x01\x81", config=CodecConfig(strict=True)) == Integer(1)


def test_decode_max_depth():
    nested = bytes([1, 0x80] * 3 + [0, 0x80])  # four levels of lists
    assert decode(nested, config=CodecConfig(max_depth=4)) == List([List([List([List()])])])
    with pytest.raises(Invalid):
        decode(nested, config=CodecConfig(max_depth=3))


def test_decode_deep_nesting_does_not_hit_recursion_limit():
    depth = 5000
    raw = bytes([1, 0x80] * depth + [0x07, 0x81])
    element = decode(raw, config=CodecConfig(max_depth=None))
    for _ in range(depth):
        assert isinstance(element, List)
        element = element[0]
    assert element == Integer(7)


def test_decode_size_limit():
    cfg = CodecConfig(size_limit=4)
    assert decode(b"\x04\x82abcd", config=cfg) == String(b"abcd")
    with pytest.raises(Invalid):
        decode(b"\x05\x82hello", config=cfg)
    with pytest.raises(Invalid):
        decode(bytes([5, 0x80]) + bytes([0x81]) * 5, config=cfg)


# ---------------- profile hook ----------------

def test_profile_claims_its_delimiter():
    codec = Codec(FakeProfile())
    assert codec.decode(bytes([ord("a"), 0xFF])) == Extension(FakeValue(ord("a")))
    assert codec.decode(bytes([0xFF])) == Extension(FakeValue(None))


def test_profile_unknown_everywhere_raises_unknown_type():
    codec = Codec(FakeProfile())
    with pytest.raises(UnknownType) as exc:
        codec.decode(bytes([0x61, 0xFE]))
    assert exc.value == UnknownType(0xFE)


def test_profile_invalid_aborts_decoding():
    codec = Codec(FakeProfile())
    with pytest.raises(Invalid):
        codec.decode(bytes([0x01, 0x02, 0xFF]))


def test_profile_values_inside_lists():
    codec = Codec(FakeProfile())
    raw = bytes([2, 0x80, ord("%"), 0xFF, 127, 0x81])
    assert codec.decode(raw) == List([Extension(FakeValue(ord("%"))), Integer(127)])


def test_profile_falls_through_to_native_types():
    codec = Codec(FakeProfile())
    assert codec.decode(b"\x05\x82hello") == String(b"hello")


def test_decode_with_remainder_logs_byte_counts(caplog):
    # two little-endian items: 01 81 | 02 81
    raw = array.array("H", [0x8101, 0x8102])
    if raw.tobytes() != b"\x01\x81\x02\x81":
        raw.byteswap()

    with caplog.at_level(logging.DEBUG, logger="banana.core.defs"):
        element, rem = decode_with_remainder(raw)

    assert element == Integer(1)
    assert bytes(rem) == b"\x02\x81"
    assert "consumed=2 remaining=2" in caplog.text
