# banana/profiles/pb.py
"""
Perspective Broker (PB) profile.

PB is Twisted's remote-object messaging layer. On top of Banana it only
adds a vocabulary of short opcodes, each sent as ``[code][0x87]``. This
module labels those opcodes; it does not interpret them.
"""
from __future__ import annotations

from enum import IntEnum

from .vocabulary import VocabularyProfile

PB_DELIMITER = 0x87


class PB(IntEnum):
    NONE = 0x01
    CLASS = 0x02
    DEREFERENCE = 0x03
    REFERENCE = 0x04
    DICTIONARY = 0x05
    FUNCTION = 0x06
    INSTANCE = 0x07
    LIST = 0x08
    MODULE = 0x09
    PERSISTENT = 0x0A
    TUPLE = 0x0B
    UNPERSISTABLE = 0x0C
    COPY = 0x0D
    CACHE = 0x0E
    CACHED = 0x0F
    REMOTE = 0x10
    LOCAL = 0x11
    LCACHE = 0x12
    VERSION = 0x13
    LOGIN = 0x14
    PASSWORD = 0x15
    CHALLENGE = 0x16
    LOGGED_IN = 0x17
    NOT_LOGGED_IN = 0x18
    CACHE_MESSAGE = 0x19
    MESSAGE = 0x1A
    ANSWER = 0x1B
    ERROR = 0x1C
    DECREF = 0x1D
    DECACHE = 0x1E
    UNCACHE = 0x1F

    @property
    def token(self) -> bytes:
        """The PB dialect word this opcode abbreviates."""
        return _TOKENS[self]


_TOKENS = {
    PB.NONE: b"None",
    PB.CLASS: b"class",
    PB.DEREFERENCE: b"dereference",
    PB.REFERENCE: b"reference",
    PB.DICTIONARY: b"dictionary",
    PB.FUNCTION: b"function",
    PB.INSTANCE: b"instance",
    PB.LIST: b"list",
    PB.MODULE: b"module",
    PB.PERSISTENT: b"persistent",
    PB.TUPLE: b"tuple",
    PB.UNPERSISTABLE: b"unpersistable",
    PB.COPY: b"copy",
    PB.CACHE: b"cache",
    PB.CACHED: b"cached",
    PB.REMOTE: b"remote",
    PB.LOCAL: b"local",
    PB.LCACHE: b"lcache",
    PB.VERSION: b"version",
    PB.LOGIN: b"login",
    PB.PASSWORD: b"password",
    PB.CHALLENGE: b"challenge",
    PB.LOGGED_IN: b"logged_in",
    PB.NOT_LOGGED_IN: b"not_logged_in",
    PB.CACHE_MESSAGE: b"cachemessage",
    PB.MESSAGE: b"message",
    PB.ANSWER: b"answer",
    PB.ERROR: b"error",
    PB.DECREF: b"decref",
    PB.DECACHE: b"decache",
    PB.UNCACHE: b"uncache",
}

PerspectiveBroker = VocabularyProfile("pb", PB_DELIMITER, PB)
