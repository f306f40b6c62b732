from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from banana.errors import Invalid, UnknownType
from banana.core.element import Element, Extension, Float, Integer, List, String
from banana.core.primitives import (
    as_view,
    dec_float,
    dec_negint,
    dec_posint,
    dec_string,
    split_preamble,
)
from banana.core.types import FLOAT, FLOAT_PAYLOAD, INT, LIST, NEG, STRING


@dataclass(frozen=True)
class ListHead:
    """A list delimiter and its element count; children follow in the stream."""
    count: int


def check_size(codec, size: int, what: str) -> None:
    limit = codec.config.size_limit
    if limit is not None and size > limit:
        raise Invalid(f"{what} size {size} exceeds size_limit {limit}")


def decode_head(codec, data: memoryview) -> Tuple[Union[Element, ListHead], memoryview]:
    """
    Decode the element starting at ``data``, stopping after a list header.

    The active profile gets the first refusal; ``UnknownType`` from it means
    "not mine" and native dispatch takes over.
    """
    preamble, delimiter = split_preamble(data)

    try:
        value, rem = codec.profile.decode(delimiter, preamble, data)
    except UnknownType:
        pass
    else:
        return Extension(value), rem

    body = data[len(preamble) + 1:]

    if delimiter == INT:
        return Integer(dec_posint(preamble)), body

    if delimiter == NEG:
        return Integer(dec_negint(preamble)), body

    if delimiter == STRING:
        check_size(codec, dec_posint(preamble), "String")
        raw = dec_string(preamble, data)
        return String(bytes(raw)), body[len(raw):]

    if delimiter == LIST:
        if len(preamble) == 0:
            raise Invalid("List without a length")
        count = dec_posint(preamble)
        check_size(codec, count, "List")
        return ListHead(count), body

    if delimiter == FLOAT:
        return Float(dec_float(preamble, data)), data[1 + FLOAT_PAYLOAD:]

    raise UnknownType(delimiter)


def decode_with_remainder(codec, data) -> Tuple[Element, memoryview]:
    """
    Decode one element and return it with the unconsumed tail of ``data``.

    Lists are driven with an explicit stack rather than recursion, so
    nesting is bounded by ``config.max_depth`` instead of the interpreter.
    """
    view = as_view(data)
    max_depth = codec.config.max_depth

    # open lists: (declared count, children decoded so far)
    stack: list[tuple[int, list]] = []

    while True:
        head, view = decode_head(codec, view)

        if isinstance(head, ListHead):
            if max_depth is not None and len(stack) >= max_depth:
                raise Invalid(f"List nesting exceeds max_depth {max_depth}")
            if head.count:
                stack.append((head.count, []))
                continue
            element: Element = List()
        else:
            element = head

        # attach to the innermost open list, closing every list that fills up
        while stack:
            count, children = stack[-1]
            children.append(element)
            if len(children) < count:
                break
            stack.pop()
            element = List(children)

        if not stack:
            return element, view


def decode(codec, data) -> Element:
    element, rem = decode_with_remainder(codec, data)
    if codec.config.strict and len(rem):
        codec.log.warning("Rejecting %d trailing byte(s) after element (strict mode)", len(rem))
        raise Invalid(f"{len(rem)} trailing byte(s) after element")
    return element
