# banana/profiles/loader.py
from __future__ import annotations

import hashlib
import logging
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .vocabulary import VocabularyProfile

log = logging.getLogger(__name__)


class VocabularyLoader:
    """
    Load an opcode vocabulary from YAML and keep the file's SHA256.

    Expected document::

        name: pb
        delimiter: 0x87
        opcodes:
          NONE: 0x01
          CLASS: 0x02
    """

    REQUIRED_KEYS = ("name", "delimiter", "opcodes")

    def __init__(self, path: Path):
        self.path = Path(path)

        self.doc: Dict[str, Any] = {}
        self.name: str = ""
        self.delimiter: int = 0
        self.opcodes: Dict[str, int] = {}

        self.file_hash: Optional[str] = None

    def load(self) -> "VocabularyLoader":
        if not self.path.exists():
            raise FileNotFoundError(f"Vocabulary file not found: {self.path}")

        raw = self.path.read_bytes()
        self.file_hash = hashlib.sha256(raw).hexdigest()
        self.doc = yaml.safe_load(raw.decode("utf-8")) or {}

        if not isinstance(self.doc, dict):
            raise ValueError(f"{self.path.name} must be a mapping")
        missing = [k for k in self.REQUIRED_KEYS if k not in self.doc]
        if missing:
            raise ValueError(f"{self.path.name} is missing key(s): {', '.join(missing)}")

        name = self.doc["name"]
        if not isinstance(name, str) or not name:
            raise ValueError(f"{self.path.name}: 'name' must be a non-empty string")

        delimiter = self.doc["delimiter"]
        if isinstance(delimiter, bool) or not isinstance(delimiter, int):
            raise ValueError(f"{self.path.name}: 'delimiter' must be an integer, got {delimiter!r}")

        opcodes = self.doc["opcodes"]
        if not isinstance(opcodes, dict) or not opcodes:
            raise ValueError(f"{self.path.name}: 'opcodes' must be a non-empty mapping")
        for op_name, code in opcodes.items():
            if not isinstance(op_name, str) or not op_name.isidentifier():
                raise ValueError(f"{self.path.name}: invalid opcode name {op_name!r}")
            if isinstance(code, bool) or not isinstance(code, int):
                raise ValueError(f"{self.path.name}: opcode {op_name} must map to an integer")

        codes = list(opcodes.values())
        if len(set(codes)) != len(codes):
            raise ValueError(f"{self.path.name}: duplicate opcode values")

        self.name = name
        self.delimiter = delimiter
        self.opcodes = dict(opcodes)

        log.info(
            "Loaded vocabulary '%s' (delimiter=0x%02x, %d opcodes, sha256=%s)",
            self.name,
            self.delimiter,
            len(self.opcodes),
            self.file_hash,
        )
        return self

    def build(self) -> VocabularyProfile:
        if not self.opcodes:
            self.load()
        enum_name = "".join(part.capitalize() for part in self.name.split("_")) or "Opcode"
        opcodes = IntEnum(enum_name, self.opcodes)
        return VocabularyProfile(self.name, self.delimiter, opcodes)


def load_vocabulary(path: Path) -> VocabularyProfile:
    return VocabularyLoader(path).load().build()
