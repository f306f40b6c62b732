# banana/cli/main.py
from __future__ import annotations

import sys
from typing import Optional

from banana.errors import BananaError

from banana.cli.args import parse_args
from banana.cli.commands import (
    UsageError,
    configure_logging,
    cmd_profiles,
    cmd_decode,
    cmd_encode_int,
    cmd_encode_str,
)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.cmd == "profiles":
            return cmd_profiles()
        if args.cmd == "decode":
            return cmd_decode(args)
        if args.cmd == "encode-int":
            return cmd_encode_int(args.value)
        if args.cmd == "encode-str":
            return cmd_encode_str(args.text)

        return 2
    except UsageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except BananaError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
