"""The ping loop: sending echo requests and reading replies."""

from __future__ import annotations

import os
import socket
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .args import HelpRequested, UsageError, parse_args
from .icmp import ECHO_REPLY, PACKET_SIZE, build_echo_request, parse_ip_packet
from .resolve import ResolveError, resolve_host
from .stats import PingStats, time_diff_ms

RECV_BUFFER = 1024


def open_icmp_socket(timeout: float = 1.0) -> socket.socket:
    """Open a raw ICMP socket whose receives give up after ``timeout`` seconds."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    sock.settimeout(timeout)
    return sock


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


@dataclass
class PingSession:
    """State of one run of echo requests against a single address."""

    hostname: str
    address: str
    sock: socket.socket
    identifier: int = field(default_factory=os.getpid)
    verbose: bool = False
    stats: PingStats = field(default_factory=PingStats)
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep
    interval: float = 1.0
    running: bool = True
    send_time: float = 0.0

    def send(self, seq: int) -> None:
        """Send one echo request with sequence number ``seq``."""
        packet = build_echo_request(self.identifier, seq)
        self.send_time = self.clock()
        try:
            self.sock.sendto(packet, (self.address, 0))
        except OSError as exc:
            print(f"sendto: {_reason(exc)}", file=sys.stderr)
            return
        self.stats.sent += 1
        print(f"ICMP Echo Request sent to {self.address}")

    def receive(self) -> float | None:
        """Wait for one packet and handle it; return its round-trip time if it was a reply."""
        try:
            buffer, _ = self.sock.recvfrom(RECV_BUFFER)
        except (TimeoutError, BlockingIOError):
            if self.verbose:
                print(f"Request timeout for icmp_seq={self.stats.rtt_count + 1}")
            return None
        except OSError as exc:
            print(f"recvfrom error: {_reason(exc)}", file=sys.stderr)
            return None
        return self.handle_reply(buffer, self.clock())

    def handle_reply(self, buffer: bytes, recv_time: float) -> float | None:
        """Check a received packet; record and report it if it answers our request."""
        msg = parse_ip_packet(buffer)
        if msg.type == ECHO_REPLY and msg.identifier == self.identifier & 0xFFFF:
            rtt = time_diff_ms(self.send_time, recv_time)
            self.stats.update(rtt)
            print(
                f"{msg.icmp_length} bytes from {self.address}: "
                f"icmp_seq={msg.sequence} ttl={msg.ttl} time={rtt:.1f} ms"
            )
            return rtt
        if self.verbose:
            print(f"Received ICMP type {msg.type} code {msg.code} (not echo reply)")
        return None

    def stop(self) -> None:
        """Ask the loop to finish after the current round."""
        self.running = False

    def run(self) -> None:
        """Send a request and wait for a reply once per interval until stopped."""
        seq = 1
        try:
            while self.running:
                self.send(seq)
                self.receive()
                seq += 1
                self.sleep(self.interval)
        except KeyboardInterrupt:
            self.stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ping command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except HelpRequested as exc:
        print(exc, end="")
        return 0
    except UsageError as exc:
        if exc.show_usage:
            print(exc, end="")
        else:
            print(exc, file=sys.stderr)
        return 1

    try:
        address = resolve_host(options.hostname)
    except ResolveError as exc:
        print(f"icmpprobe: {exc}", file=sys.stderr)
        return 1

    print(f"PING {options.hostname} ({address}) {PACKET_SIZE} bytes of data.")

    try:
        sock = open_icmp_socket()
    except OSError as exc:
        print(f"socket: {_reason(exc)}", file=sys.stderr)
        return 1

    with sock:
        session = PingSession(
            hostname=options.hostname,
            address=address,
            sock=sock,
            verbose=options.verbose,
        )
        session.run()
    print(session.stats.summary(options.hostname), end="")
    return 0