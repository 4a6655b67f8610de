"""Formatting of trace output."""

from __future__ import annotations


def elapsed_ms(send_time: float, recv_time: float) -> float:
    """Milliseconds between two timestamps given in seconds."""
    return (recv_time - send_time) * 1000.0


def format_time(ms: float) -> str:
    """Round-trip time as printed after a reply."""
    return f" {ms:.3f}ms "


def format_hop_index(ttl: int, start_ttl: int) -> str:
    """Hop number printed at the start of each line."""
    return f"{ttl - start_ttl + 1:3d}  "


def format_start_message(hostname: str, address: str, max_ttl: int) -> str:
    """Header line printed before the first hop."""
    return f"traceroute to {hostname} ({address}), {max_ttl} hops max\n"