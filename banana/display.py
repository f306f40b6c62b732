# banana/display.py
"""
Human-readable rendering of elements, for logs and the dump CLI.

    123            Integer
    1.5            Float
    b"hello"       String (UTF-8), or [255, 0] when not valid UTF-8
    [1, b"x"]      List
    VERSION        Extension, as named by the profile
"""
from __future__ import annotations

from typing import Optional

from banana.core.element import Element, Extension, Float, Integer, List, String
from banana.profiles.base import Profile


def format_string(raw: bytes) -> str:
    try:
        return f'b"{raw.decode("utf-8")}"'
    except UnicodeDecodeError:
        return repr(list(raw))


def format_element(element: Element, profile: Optional[Profile] = None) -> str:
    if isinstance(element, Integer):
        return str(element.value)
    if isinstance(element, Float):
        return repr(element.value)
    if isinstance(element, String):
        return format_string(element.value)
    if isinstance(element, List):
        return "[" + ", ".join(format_element(e, profile) for e in element.items) + "]"
    if isinstance(element, Extension):
        if profile is None:
            return repr(element.value)
        return profile.format_value(element.value)
    raise TypeError(f"Not a Banana element: {element!r}")
