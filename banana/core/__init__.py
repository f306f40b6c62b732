# banana/core/__init__.py

from .element import Element, Integer, String, Float, List, Extension
from .defs import Codec, decode, decode_with_remainder, encode

__all__ = [
    "Element", "Integer", "String", "Float", "List", "Extension",
    "Codec", "decode", "decode_with_remainder", "encode",
]
