"""Trace the hops IPv4 packets take to a host using UDP probes and ICMP replies."""

__version__ = "0.1.0"