"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .host import HostResolutionError, resolve_host
from .options import OptionError, parse_args
from .report import format_start_message
from .tracer import Tracer

PROG = "hoptrace"
EX_USAGE = 64


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a trace from command-line arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1

    try:
        options = parse_args(args)
    except OptionError as err:
        print(f"{PROG}: {err}", file=sys.stderr)
        return EX_USAGE
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    try:
        address = resolve_host(options.hostname)
    except HostResolutionError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    try:
        with Tracer(options, address) as tracer:
            sys.stdout.write(
                format_start_message(options.hostname, address, options.max_ttl)
            )
            sys.stdout.flush()
            tracer.run(sys.stdout)
    except OSError as err:
        print(f"{PROG}: {err.strerror or err}", file=sys.stderr)
        return err.errno or 1
    return 0


if __name__ == "__main__":
    sys.exit(main())