"""Probe sending and the hop-by-hop trace loop."""

from __future__ import annotations

import select
import socket
import sys
import time
from dataclasses import dataclass
from typing import Optional, TextIO

from .host import HostResolutionError, numeric_host, reverse_host
from .options import TraceOptions
from .report import elapsed_ms, format_hop_index, format_time

PAYLOAD = b"SUPERMAN\x00"
RECV_BUFFER_SIZE = 1024


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe: who answered (if anyone) and how long it took."""

    address: Optional[str]
    elapsed_ms: float


class Tracer:
    """Sends UDP probes with rising TTL and listens for ICMP replies."""

    def __init__(
        self,
        options: TraceOptions,
        address: str,
        send_sock: Optional[socket.socket] = None,
        recv_sock: Optional[socket.socket] = None,
    ) -> None:
        self.options = options
        self.address = address
        self.send_sock = send_sock
        self.recv_sock = recv_sock
        self.port = options.port

    def open(self) -> "Tracer":
        """Create any socket that was not supplied."""
        if self.send_sock is None:
            try:
                self.send_sock = socket.socket(
                    socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP
                )
            except OSError as err:
                raise OSError(err.errno, f"send socket: {err.strerror}") from err
        if self.recv_sock is None:
            try:
                self.recv_sock = socket.socket(
                    socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP
                )
            except OSError as err:
                self.close()
                raise OSError(err.errno, f"recv socket: {err.strerror}") from err
        return self

    def close(self) -> None:
        """Close both sockets."""
        for sock in (self.send_sock, self.recv_sock):
            if sock is not None:
                sock.close()
        self.send_sock = None
        self.recv_sock = None

    def __enter__(self) -> "Tracer":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def send_probe(self, ttl: int) -> ProbeResult:
        """Send one probe with the given TTL and wait for a reply."""
        if self.send_sock is None or self.recv_sock is None:
            raise RuntimeError("tracer is not open")
        self.send_sock.setsockopt(socket.IPPROTO_IP, socket.IP_TTL, ttl)
        try:
            self.send_sock.sendto(PAYLOAD, (self.address, self.port))
        except OSError:
            # A failed send simply shows up as an unanswered probe.
            pass
        sent = time.perf_counter()
        ready, _, _ = select.select([self.recv_sock], [], [], self.options.wait)
        received = time.perf_counter()
        elapsed = elapsed_ms(sent, received)

        if not ready:
            return ProbeResult(None, elapsed)
        try:
            _, sender = self.recv_sock.recvfrom(RECV_BUFFER_SIZE)
        except OSError as err:
            raise OSError(err.errno, f"recvfrom: {err.strerror}") from err
        return ProbeResult(sender[0], elapsed)

    def _write_host(self, out: TextIO, address: str) -> None:
        try:
            out.write(f" {numeric_host(address)} ")
            if self.options.resolve:
                out.write(f"({reverse_host(address)}) ")
        except HostResolutionError as err:
            print(f"error: {err}", file=sys.stderr)

    def run(self, out: TextIO) -> bool:
        """Trace hop by hop, writing one line per hop; True if the target answered."""
        options = self.options
        ttl = options.start_ttl
        last_address: Optional[str] = None
        reached = False

        while not reached and ttl < options.max_ttl:
            host_printed = False
            for attempt in range(options.tries):
                result = self.send_probe(ttl)
                if attempt == 0:
                    out.write(format_hop_index(ttl, options.start_ttl))
                if result.address is None:
                    out.write(" * ")
                    continue
                last_address = result.address
                if not host_printed:
                    self._write_host(out, result.address)
                    host_printed = True
                out.write(format_time(result.elapsed_ms))
            out.write("\n")
            out.flush()

            reached = last_address == self.address
            self.port += 1
            ttl += 1

        return reached