"""Command-line argument handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

HELP_FLAGS = frozenset({"-?", "-h", "--help"})


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    hostname: str
    verbose: bool = False


class UsageError(Exception):
    """The command line could not be used."""

    def __init__(self, message: str, *, show_usage: bool = False) -> None:
        super().__init__(message)
        self.show_usage = show_usage


class HelpRequested(Exception):
    """The user asked for the usage text."""


def usage_text() -> str:
    """Return the usage text shown for help and for a missing destination."""
    return (
        "Usage\n"
        "ping [options] <destination>\n"
        "\n"
        "Options:\n"
        "  <destination>      dns name or ip address\n"
        "  -v                 verbose output\n"
    )


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    if not argv:
        raise UsageError(usage_text(), show_usage=True)

    hostname: str | None = None
    verbose = False
    for arg in argv:
        if arg == "-v":
            verbose = True
        elif arg in HELP_FLAGS:
            raise HelpRequested(usage_text())
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option: {arg}")
        else:
            hostname = arg

    if hostname is None:
        raise UsageError(usage_text(), show_usage=True)
    return Options(hostname=hostname, verbose=verbose)