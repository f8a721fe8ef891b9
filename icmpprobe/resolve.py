"""Resolving a destination name to an IPv4 address."""

from __future__ import annotations

import socket


class ResolveError(Exception):
    """The destination could not be resolved."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"{target}: {reason}")
        self.target = target
        self.reason = reason


def resolve_host(target: str) -> str:
    """Return the first IPv4 address for ``target`` as a dotted string."""
    try:
        results = socket.getaddrinfo(
            target, None, socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP
        )
    except socket.gaierror as exc:
        raise ResolveError(target, exc.strerror or str(exc)) from exc
    if not results:
        raise ResolveError(target, "no address associated with name")
    return results[0][4][0]