# banana/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass(frozen=True)
class CodecConfig:
    strict: bool = False               # reject trailing bytes in decode()
    max_depth: Optional[int] = 512     # list nesting ceiling; 0/None disables
    size_limit: Optional[int] = None   # max list count / string length; 0/None disables

    def __post_init__(self) -> None:
        for name in ("max_depth", "size_limit"):
            v = getattr(self, name)
            if v is None:
                continue
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise ValueError(f"{name} must be a non-negative integer or None, got {v!r}")
            if v == 0:
                object.__setattr__(self, name, None)
        if not isinstance(self.strict, bool):
            raise ValueError(f"strict must be a bool, got {self.strict!r}")


DEFAULTS = CodecConfig()


def config_from_dict(data: Dict[str, Any]) -> CodecConfig:
    known = {f.name for f in fields(CodecConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown codec config key(s): {', '.join(unknown)}")
    return CodecConfig(**data)


def load_config(path: Path) -> CodecConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Codec config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        doc = yaml.safe_load(f) or {}
    if not isinstance(doc, dict):
        raise ValueError(f"{path.name} must be a mapping")
    return config_from_dict(doc)
