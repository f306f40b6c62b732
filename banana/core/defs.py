from __future__ import annotations

import logging
from typing import Optional, Tuple

from banana.config import CodecConfig, DEFAULTS
from banana.core.element import Element
from banana.core import decoder, encoder
from banana.core.primitives import as_view
from banana.display import format_element
from banana.profiles.base import NoneProfile, Profile


class Codec:
    """Banana decoder/encoder bound to one extension profile."""

    def __init__(
        self,
        profile: Optional[Profile] = None,
        config: Optional[CodecConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.profile: Profile = profile if profile is not None else NoneProfile()
        self.config: CodecConfig = config if config is not None else DEFAULTS
        self.log = logger or logging.getLogger(__name__)

    def decode_with_remainder(self, data) -> Tuple[Element, memoryview]:
        view = as_view(data)
        element, rem = decoder.decode_with_remainder(self, view)
        self.log.debug(
            "Decoded %s (profile=%s) consumed=%d remaining=%d",
            type(element).__name__,
            self.profile.name,
            len(view) - len(rem),
            len(rem),
        )
        return element, rem

    def decode(self, data) -> Element:
        element = decoder.decode(self, data)
        self.log.debug("Decoded %s (profile=%s)", type(element).__name__, self.profile.name)
        return element

    def encode(self, element: Element) -> bytes:
        raw = encoder.encode(self, element)
        self.log.debug("Encoded %s into %d bytes", type(element).__name__, len(raw))
        return raw

    def encode_into(self, element: Element, out: bytearray) -> None:
        encoder.encode_into(self, element, out)

    def format(self, element: Element) -> str:
        return format_element(element, self.profile)

    def __repr__(self) -> str:
        return f"Codec(profile={self.profile!r}, config={self.config!r})"


def decode_with_remainder(
    data, profile: Optional[Profile] = None, *, config: Optional[CodecConfig] = None
) -> Tuple[Element, memoryview]:
    return Codec(profile, config).decode_with_remainder(data)


def decode(data, profile: Optional[Profile] = None, *, config: Optional[CodecConfig] = None) -> Element:
    return Codec(profile, config).decode(data)


def encode(element: Element, profile: Optional[Profile] = None) -> bytes:
    """
    Encode ``element`` to a fresh buffer.

    ``Extension`` values are written by ``profile``, which must own them:
    with the default ``NoneProfile`` any extension raises ``TypeError``, so
    pass e.g. ``PerspectiveBroker`` when encoding PB opcodes.
    """
    return Codec(profile).encode(element)
