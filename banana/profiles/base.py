# banana/profiles/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Tuple

from banana.errors import UnknownType


class Profile(ABC):
    """
    Extension capability layered on top of plain Banana.

    The decoder offers every element to ``decode`` before trying the native
    types. A profile that does not claim ``delimiter`` must raise
    ``UnknownType(delimiter)``; any other error aborts decoding.
    """

    name: str = "profile"

    @abstractmethod
    def decode(self, delimiter: int, preamble: memoryview, data: memoryview) -> Tuple[Any, memoryview]:
        """
        Decode one extension value.

        ``preamble`` holds the bytes before ``delimiter``; ``data`` starts at
        the beginning of the element (preamble included). Returns the value
        and the remainder of ``data`` after the element.
        """

    @abstractmethod
    def encode(self, value: Any, out: bytearray) -> None:
        """Append the wire form of ``value`` (preamble, delimiter, payload) to ``out``."""

    def owns(self, value: Any) -> bool:
        return False

    def format_value(self, value: Any) -> str:
        return repr(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class NoneProfile(Profile):
    """The default profile: claims nothing, giving plain Banana."""

    name = "none"

    def decode(self, delimiter: int, preamble: memoryview, data: memoryview) -> Tuple[Any, memoryview]:
        raise UnknownType(delimiter)

    def encode(self, value: Any, out: bytearray) -> None:
        raise TypeError(f"{self.name!r} profile has no extension values (got {value!r})")

    def __repr__(self) -> str:
        return "NoneProfile()"
