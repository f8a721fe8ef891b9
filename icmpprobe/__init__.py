"""ICMP echo client: send pings, report replies and round-trip statistics."""

__version__ = "0.1.0"