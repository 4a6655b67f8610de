"""Command-line options for the route tracer."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_PORT = 33434
DEFAULT_WAIT = 2
DEFAULT_MAX_TTL = 64
DEFAULT_START_TTL = 1
DEFAULT_TRIES = 3

UINT16_MAX = 0xFFFF
UINT_MAX = 0xFFFFFFFF
MAX_TRIES = 10

_ULONG_WRAP = 1 << 64
_NUMBER = re.compile(r"\s*([+-]?)(\d+)")


class OptionError(ValueError):
    """Raised when the command line cannot be turned into options."""


@dataclass
class TraceOptions:
    """Settings that drive a trace."""

    port: int = DEFAULT_PORT
    start_ttl: int = DEFAULT_START_TTL
    max_ttl: int = DEFAULT_MAX_TTL
    wait: int = DEFAULT_WAIT
    tries: int = DEFAULT_TRIES
    hostname: Optional[str] = None
    resolve: bool = False


def parse_ulong(arg: str, maximum: int) -> int:
    """Parse an unsigned decimal number no larger than ``maximum``."""
    match = _NUMBER.match(arg)
    if match is None:
        value, rest = 0, arg
    else:
        sign, digits = match.groups()
        value = int(digits)
        if sign == "-" and value:
            value = (_ULONG_WRAP - value) % _ULONG_WRAP
        rest = arg[match.end():]
    if rest:
        raise OptionError(f"invalid value (`{arg}' near `{rest}')")
    if value > maximum:
        raise OptionError(f"option value too big: {arg}")
    return value


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise OptionError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="hoptrace",
        description="Print the route packets take to a network host.",
    )
    parser.add_argument(
        "-f", "--first-hop", metavar="NUM",
        help="set initial hop distance, i.e., time-to-live",
    )
    parser.add_argument(
        "-m", "--max-hop", metavar="NUM",
        help=f"set maximal hop count (default: {DEFAULT_MAX_TTL})",
    )
    parser.add_argument(
        "-p", "--port", metavar="PORT",
        help=f"use destination PORT port (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "-q", "--tries", metavar="NUM",
        help=f"send NUM probe packets per hop (default: {DEFAULT_TRIES})",
    )
    parser.add_argument(
        "-w", "--wait", metavar="NUM",
        help="wait NUM seconds for response (default: 3)",
    )
    parser.add_argument(
        "--resolve-hostnames", action="store_true", help="resolve hostnames"
    )
    parser.add_argument("-V", "--version", action="version", version="hoptrace 2.0")
    parser.add_argument("host", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: Sequence[str]) -> TraceOptions:
    """Build options from command-line arguments (without the program name)."""
    namespace = _build_parser().parse_intermixed_args(list(argv))
    options = TraceOptions(resolve=namespace.resolve_hostnames)

    if namespace.first_hop is not None:
        # The hop distance is kept in a single byte.
        options.start_ttl = parse_ulong(namespace.first_hop, UINT16_MAX) & 0xFF
    if namespace.port is not None:
        options.port = parse_ulong(namespace.port, UINT16_MAX)
    if namespace.tries is not None:
        options.tries = parse_ulong(namespace.tries, MAX_TRIES)
    if namespace.wait is not None:
        options.wait = parse_ulong(namespace.wait, UINT_MAX)
    # --max-hop is accepted, but the hop limit stays at its default.

    if not namespace.host:
        raise OptionError("missing host operand")
    options.hostname = namespace.host[-1]
    return options