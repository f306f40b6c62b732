from __future__ import annotations

from banana.core.element import Element, Extension, Float, Integer, List, String
from banana.core.primitives import enc_float, enc_uint
from banana.core.types import INT, LIST, NEG, STRING


def encode_scalar(codec, element: Element, out: bytearray) -> None:
    if isinstance(element, Integer):
        if element.value >= 0:
            enc_uint(out, element.value)
            out.append(INT)
        else:
            # Python ints do not wrap: -INT32_MIN is the 1 << 31 magnitude
            enc_uint(out, -element.value)
            out.append(NEG)
        return

    if isinstance(element, String):
        enc_uint(out, len(element.value))
        out.append(STRING)
        out += element.value
        return

    if isinstance(element, Float):
        enc_float(out, element.value)
        return

    if isinstance(element, Extension):
        codec.profile.encode(element.value, out)
        return

    raise TypeError(f"Cannot encode {type(element).__name__} as a Banana element")


def encode_into(codec, element: Element, out: bytearray) -> None:
    """Append the encoding of ``element`` to ``out``, children in order."""
    stack = [iter((element,))]
    while stack:
        for elt in stack[-1]:
            if isinstance(elt, List):
                enc_uint(out, len(elt.items))
                out.append(LIST)
                stack.append(iter(elt.items))
                break
            encode_scalar(codec, elt, out)
        else:
            stack.pop()


def encode(codec, element: Element) -> bytes:
    out = bytearray()
    encode_into(codec, element, out)
    return bytes(out)
