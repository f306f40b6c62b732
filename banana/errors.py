# banana/errors.py
from __future__ import annotations


class BananaError(Exception):
    """
    Base class for all expected codec failures.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, callers, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class DecodeError(BananaError):
    """
    Byte input could not be decoded into an element.

    Subclasses form a closed set of kinds; each carries its own payload so
    callers can build diagnostics without re-parsing the input.
    """
    code = "decode_error"

    def _payload(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __repr__(self) -> str:
        args = ", ".join(repr(p) for p in self._payload())
        return f"{type(self).__name__}({args})"


class NoType(DecodeError):
    """No byte with the high bit set: the delimiter is missing or truncated."""
    code = "no_type"

    def __init__(self):
        super().__init__("No type delimiter found in input")


class Empty(DecodeError):
    code = "empty"

    def __init__(self):
        super().__init__("Cannot decode an empty buffer")


class UnknownType(DecodeError):
    """
    Delimiter not recognized.

    Raised by a profile it means "not mine"; the decoder then tries the
    native types. Raised by the decoder it is final.
    """
    code = "unknown_type"

    def __init__(self, delimiter: int):
        super().__init__(
            f"Unknown element type 0x{delimiter:02x}",
            hint="Is the right profile selected?",
        )
        self.delimiter = delimiter

    def _payload(self) -> tuple:
        return (self.delimiter,)


class Overflow(DecodeError):
    code = "overflow"

    def __init__(self, digits: bytes):
        digits = bytes(digits)
        super().__init__(
            f"Magnitude {digits.hex(' ')} does not fit in a signed 32-bit integer",
            details={"digits": digits},
        )
        self.digits = digits

    def _payload(self) -> tuple:
        return (self.digits,)


class TooShort(DecodeError):
    code = "too_short"

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Input too short: expected {expected} byte(s), got {actual}",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual

    def _payload(self) -> tuple:
        return (self.expected, self.actual)


class Invalid(DecodeError):
    """Structurally malformed element."""
    code = "invalid"

    def __init__(self, message: str):
        super().__init__(message)

    def _payload(self) -> tuple:
        return (self.message,)
