# banana/core/element.py
"""
Banana element model.

An element is exactly one of ``Integer``, ``String``, ``Float``, ``List``
or ``Extension``. Elements are immutable values; lists own their children.
``Extension`` wraps a value produced by the active profile and is not
inspected any further here.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Union

from banana.core.types import INT32_MAX, INT32_MIN


@dataclass(frozen=True)
class Integer:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer value must be an int, got {type(self.value).__name__}")
        if not (INT32_MIN <= self.value <= INT32_MAX):
            raise ValueError(f"Integer value {self.value} outside signed 32-bit range")


@dataclass(frozen=True)
class String:
    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            raise TypeError("String value must be bytes; encode text first")
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise TypeError(f"String value must be bytes-like, got {type(self.value).__name__}")
        if not isinstance(self.value, bytes):
            object.__setattr__(self, "value", bytes(self.value))

    def text(self, encoding: str = "utf-8") -> str:
        return self.value.decode(encoding)


@dataclass(frozen=True)
class Float:
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise TypeError(f"Float value must be a real number, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, init=False)
class List:
    items: tuple

    def __init__(self, items: Iterable["Element"] = ()):
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Element"]:
        return iter(self.items)

    def __getitem__(self, idx):
        return self.items[idx]


@dataclass(frozen=True)
class Extension:
    value: Any


Element = Union[Integer, String, Float, List, Extension]
