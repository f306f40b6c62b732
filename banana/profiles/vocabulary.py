# banana/profiles/vocabulary.py
from __future__ import annotations

from enum import IntEnum
from typing import Any, Tuple, Type

from banana.errors import Invalid, UnknownType
from banana.core.types import HIGH_BIT, NATIVE_DELIMITERS
from .base import Profile


class VocabularyProfile(Profile):
    """
    Profile made of short opcodes behind one reserved delimiter.

    Wire form of an opcode: ``[code][delimiter]``, exactly one preamble byte
    and no payload.
    """

    def __init__(self, name: str, delimiter: int, opcodes: Type[IntEnum]):
        delimiter = int(delimiter)
        if not (HIGH_BIT <= delimiter <= 0xFF):
            raise ValueError(f"Delimiter 0x{delimiter:x} must be a byte with the high bit set")
        if delimiter in NATIVE_DELIMITERS:
            raise ValueError(f"Delimiter 0x{delimiter:02x} collides with a native Banana type")
        for op in opcodes:
            if not (0 <= int(op) < HIGH_BIT):
                raise ValueError(f"Opcode {op.name}=0x{int(op):x} does not fit in a preamble byte")

        self.name = name
        self.delimiter = delimiter
        self.opcodes = opcodes
        self._by_code = {int(op): op for op in opcodes}

    def decode(self, delimiter: int, preamble: memoryview, data: memoryview) -> Tuple[Any, memoryview]:
        if delimiter != self.delimiter:
            raise UnknownType(delimiter)
        if len(preamble) != 1:
            raise Invalid(
                f"{self.name.upper()} element type 0x{self.delimiter:02x} must be prefixed "
                f"by exactly one byte (got {len(preamble)})"
            )
        op = self._by_code.get(preamble[0])
        if op is None:
            raise Invalid(f"Unknown {self.name.upper()} short identifier 0x{preamble[0]:x}")
        return op, data[2:]

    def encode(self, value: Any, out: bytearray) -> None:
        if not self.owns(value):
            raise TypeError(f"{value!r} is not a {self.name!r} opcode")
        out.append(int(value))
        out.append(self.delimiter)

    def owns(self, value: Any) -> bool:
        return isinstance(value, self.opcodes)

    def format_value(self, value: Any) -> str:
        return value.name if self.owns(value) else repr(value)

    def __repr__(self) -> str:
        return f"VocabularyProfile({self.name!r}, 0x{self.delimiter:02x}, {self.opcodes.__name__})"
