# banana/cli/commands.py
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from banana.config import DEFAULTS, load_config
from banana.core import Codec, Integer, String
from banana.profiles import get_profile, load_vocabulary
from banana.profiles.registry import REGISTRY
from banana.profiles.vocabulary import VocabularyProfile

from banana.cli.args import parse_hex

log = logging.getLogger(__name__)


class UsageError(Exception):
    """Bad command-line input (exit code 2)."""


# ---------------- Logging ----------------

def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the root logger (idempotent)."""
    root = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING

    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(sh)

    root.setLevel(level)


# ---------------- Helpers ----------------

def read_input(args: argparse.Namespace) -> bytes:
    if args.file and args.hex:
        raise UsageError("Give either hex bytes or --file, not both")
    if args.file:
        path = Path(args.file)
        if not path.is_file():
            raise UsageError(f"Input file not found: {path}")
        return path.read_bytes()
    if not args.hex:
        raise UsageError("No input: give hex bytes or --file")
    try:
        return parse_hex(" ".join(args.hex))
    except ValueError as e:
        raise UsageError(str(e)) from None


def build_codec(args: argparse.Namespace) -> Codec:
    try:
        config = load_config(Path(args.config)) if args.config else DEFAULTS
        if args.vocabulary:
            profile = load_vocabulary(Path(args.vocabulary))
        else:
            profile = get_profile(args.profile)
    except (FileNotFoundError, ValueError) as e:
        raise UsageError(str(e)) from None
    except KeyError as e:
        raise UsageError(e.args[0]) from None

    if args.strict:
        config = replace(config, strict=True)
    return Codec(profile, config)


# ---------------- Commands ----------------

def cmd_profiles() -> int:
    for name in REGISTRY.names():
        profile = REGISTRY.get(name)
        if isinstance(profile, VocabularyProfile):
            print(f"{name:<8} delimiter=0x{profile.delimiter:02x} opcodes={len(profile.opcodes)}")
        else:
            print(f"{name:<8} (plain Banana)")
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    data = read_input(args)
    codec = build_codec(args)

    if codec.config.strict:
        element = codec.decode(data)
        rem_len = 0
    else:
        element, rem = codec.decode_with_remainder(data)
        rem_len = len(rem)

    print(codec.format(element))
    if rem_len:
        print(f"remaining: {rem_len} byte(s)")
    return 0


def cmd_encode_int(value: int) -> int:
    try:
        element = Integer(value)
    except ValueError as e:
        raise UsageError(str(e)) from None
    print(Codec().encode(element).hex(" "))
    return 0


def cmd_encode_str(text: str) -> int:
    print(Codec().encode(String(text.encode("utf-8"))).hex(" "))
    return 0
