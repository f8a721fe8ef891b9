"""Round-trip time statistics."""

from __future__ import annotations

from dataclasses import dataclass


def time_diff_ms(start: float, end: float) -> float:
    """Return the time from ``start`` to ``end`` (seconds) in milliseconds."""
    return (end - start) * 1000.0


@dataclass
class PingStats:
    """Counters and round-trip times for one ping session."""

    sent: int = 0
    received: int = 0
    rtt_min: float = 0.0
    rtt_max: float = 0.0
    rtt_total: float = 0.0
    rtt_count: int = 0

    def update(self, rtt: float) -> None:
        """Record one reply with round-trip time ``rtt`` in milliseconds."""
        self.received += 1
        self.rtt_total += rtt
        self.rtt_count += 1
        if self.rtt_min == 0 or rtt < self.rtt_min:
            self.rtt_min = rtt
        if rtt > self.rtt_max:
            self.rtt_max = rtt

    @property
    def rtt_avg(self) -> float:
        """Mean round-trip time, or 0.0 when nothing was measured."""
        return self.rtt_total / self.rtt_count if self.rtt_count else 0.0

    def loss_percent(self) -> float:
        """Percentage of requests that got no reply."""
        if self.sent <= 0:
            return 0.0
        return 100.0 * (self.sent - self.received) / self.sent

    def summary(self, hostname: str) -> str:
        """Return the closing report, including its leading blank line."""
        text = (
            f"\n--- {hostname} ping statistics ---\n"
            f"{self.sent} packets transmitted, {self.received} received, "
            f"{self.loss_percent():.0f}% packet loss\n"
        )
        if self.rtt_count > 0:
            text += f"rtt min/avg/max = {self.rtt_min:.3f}/{self.rtt_avg:.3f}/{self.rtt_max:.3f} ms\n"
        return text