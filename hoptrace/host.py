"""Host name resolution helpers."""

from __future__ import annotations

import socket


class HostResolutionError(Exception):
    """Raised when a host name or address cannot be resolved."""


def _message(call: str, err: OSError) -> str:
    return f"{call}: {err.strerror or err}"


def resolve_host(name: str) -> str:
    """Resolve ``name`` to the first IPv4 address suitable for UDP."""
    try:
        infos = socket.getaddrinfo(
            name,
            None,
            socket.AF_INET,
            socket.SOCK_DGRAM,
            socket.IPPROTO_UDP,
            socket.AI_NUMERICSERV,
        )
    except (OSError, UnicodeError) as err:
        if isinstance(err, OSError):
            raise HostResolutionError(_message("getaddrinfo", err)) from err
        raise HostResolutionError(f"getaddrinfo: {err}") from err
    if not infos:
        raise HostResolutionError("getaddrinfo: no address found")
    return infos[0][4][0]


def _name_info(address: str, flags: int) -> str:
    try:
        host, _ = socket.getnameinfo((address, 0), flags)
    except OSError as err:
        raise HostResolutionError(_message("getnameinfo", err)) from err
    return host


def numeric_host(address: str) -> str:
    """Return the numeric form of an IPv4 address."""
    return _name_info(address, socket.NI_NUMERICHOST)


def reverse_host(address: str) -> str:
    """Return the host name for an address, or the address if it has none."""
    return _name_info(address, 0)