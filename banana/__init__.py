# banana/__init__.py

# Core classes
from .core import (
    Codec, decode, decode_with_remainder, encode,
    Element, Integer, String, Float, List, Extension,
)
from .config import CodecConfig, load_config
from .errors import (
    BananaError, DecodeError,
    NoType, Empty, UnknownType, Overflow, TooShort, Invalid,
)
from .profiles import Profile, NoneProfile, VocabularyProfile, PB, PerspectiveBroker
from .display import format_element

__all__ = [
    "Codec", "decode", "decode_with_remainder", "encode",
    "Element", "Integer", "String", "Float", "List", "Extension",
    "CodecConfig", "load_config",
    "BananaError", "DecodeError",
    "NoType", "Empty", "UnknownType", "Overflow", "TooShort", "Invalid",
    "Profile", "NoneProfile", "VocabularyProfile", "PB", "PerspectiveBroker",
    "format_element",
]
