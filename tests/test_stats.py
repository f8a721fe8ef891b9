import pytest

from icmpprobe.stats import PingStats, time_diff_ms


def test_time_diff_ms():
    assert time_diff_ms(1.0, 1.5) == pytest.approx(500.0)


def test_time_diff_is_antisymmetric():
    assert time_diff_ms(2.0, 3.25) == pytest.approx(-time_diff_ms(3.25, 2.0))


def test_update_tracks_min_max_and_counts():
    stats = PingStats()
    for rtt in (10.0, 5.0, 20.0):
        stats.update(rtt)
    assert stats.rtt_min == 5.0
    assert stats.rtt_max == 20.0
    assert stats.received == 3
    assert stats.rtt_count == 3
    assert stats.rtt_avg == pytest.approx(stats.rtt_total / 3)


def test_min_never_exceeds_max():
    stats = PingStats()
    for rtt in (3.3, 1.1, 2.2, 9.9):
        stats.update(rtt)
        assert stats.rtt_min <= stats.rtt_avg <= stats.rtt_max


def test_loss_without_sent_packets():
    assert PingStats().loss_percent() == 0.0


def test_full_loss():
    assert PingStats(sent=4).loss_percent() == 100.0


def test_no_loss():
    stats = PingStats(sent=2)
    stats.update(1.0)
    stats.update(2.0)
    assert stats.loss_percent() == 0.0


def test_summary_without_replies_has_no_rtt_line():
    text = PingStats(sent=2).summary("example.com")
    assert text.startswith("\n--- example.com ping statistics ---\n")
    assert "2 packets transmitted, 0 received, 100% packet loss" in text
    assert "rtt" not in text


def test_summary_with_replies():
    stats = PingStats(sent=1)
    stats.update(12.0)
    lines = stats.summary("example.com").splitlines()
    assert lines[2] == "1 packets transmitted, 1 received, 0% packet loss"
    assert lines[3] == "rtt min/avg/max = 12.000/12.000/12.000 ms"