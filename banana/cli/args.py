# banana/cli/args.py
from __future__ import annotations

import argparse
from typing import Optional


def parse_hex(text: str) -> bytes:
    """Parse hex text, ignoring whitespace and a 0x prefix on each token."""
    tokens = [t[2:] if t[:2].lower() == "0x" else t for t in str(text).split()]
    s = "".join(tokens)
    try:
        return bytes.fromhex(s)
    except ValueError:
        raise ValueError(f"Invalid hex input '{text}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="banana-dump", description="Inspect Banana-encoded data.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("profiles", help="List registered extension profiles.")

    pd = sub.add_parser("decode", help="Decode one element and print it.")
    pd.add_argument("hex", nargs="*", default=[], help="Hex bytes, whitespace allowed.")
    pd.add_argument("--file", help="Read raw bytes from a binary file.")
    pd.add_argument("--profile", default="none", help="Profile name (see: banana-dump profiles).")
    pd.add_argument("--vocabulary", help="YAML opcode vocabulary; overrides --profile.")
    pd.add_argument("--config", help="YAML codec config (strict, max_depth, size_limit).")
    pd.add_argument("--strict", action="store_true", help="Reject trailing bytes after the element.")

    pi = sub.add_parser("encode-int", help="Encode an integer and print its hex.")
    pi.add_argument("value", type=int)

    ps = sub.add_parser("encode-str", help="Encode UTF-8 text as a byte string and print its hex.")
    ps.add_argument("text")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
