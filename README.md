# icmpprobe

`icmpprobe` sends an ICMP Echo Request to an IPv4 host once a second and
waits up to a second for an answer after each one. It prints every Echo Reply
with its size, sequence number, TTL and round-trip time, and prints a summary
when you stop it with Ctrl+C.

## Installation

```
pip install .
```

## Usage

Raw ICMP sockets need elevated privileges, so run the command as root or give
the interpreter the `CAP_NET_RAW` capability:

```
sudo icmpprobe example.com
```

Options:

```
icmpprobe [options] <destination>

  <destination>      dns name or ip address
  -v                 verbose output
  -h, -?, --help     show usage and exit
```

If several destinations are given, the last one is used. An unknown option,
or no destination at all, ends the command with exit status 1. A name that
cannot be resolved, or a raw socket that cannot be opened, is reported on
standard error and also gives exit status 1.

With `-v`, receive timeouts are reported, and so is every received ICMP
message that is not an Echo Reply carrying this process's identifier.

Example output:

```
PING example.com (192.0.2.10) 64 bytes of data.
ICMP Echo Request sent to 192.0.2.10
64 bytes from 192.0.2.10: icmp_seq=1 ttl=56 time=12.3 ms
^C
--- example.com ping statistics ---
1 packets transmitted, 1 received, 0% packet loss
rtt min/avg/max = 12.301/12.301/12.301 ms
```

Every request is 64 bytes: an 8-byte ICMP header followed by 56 bytes of the
value 42. The identifier is the process ID.

## Library use

The building blocks can also be used from Python:

```python
from icmpprobe.icmp import build_echo_request, checksum, parse_ip_packet
from icmpprobe.stats import PingStats

packet = build_echo_request(identifier=1234, seq=1)
assert len(packet) == 64
assert checksum(packet) == 0  # a packet with a valid checksum sums to zero

stats = PingStats()
stats.update(10.0)
stats.update(20.0)
stats.sent = 2
print(stats.summary("example.com"))
```

- `icmpprobe.args.parse_args` turns the arguments after the program name into
  an `Options` value (`hostname`, `verbose`); it raises `HelpRequested` for the
  help flags and `UsageError` for bad command lines. `usage_text()` returns the
  usage text.
- `icmpprobe.icmp.parse_ip_packet` reads the ICMP header out of a packet that
  starts with an IPv4 header and returns an `IcmpMessage`; it raises
  `ValueError` for packets too short to hold both headers.
- `icmpprobe.stats.PingStats` keeps counters and round-trip times;
  `loss_percent()` and `summary(hostname)` give the closing figures, and
  `time_diff_ms(start, end)` converts two times in seconds to milliseconds.
- `icmpprobe.resolve.resolve_host` turns a host name or dotted IPv4 address
  into an address and raises `ResolveError` when that fails.
- `icmpprobe.session.open_icmp_socket` opens the raw socket, and
  `icmpprobe.session.PingSession` runs the send/receive loop (`send`,
  `receive`, `handle_reply`, `run`, `stop`). `icmpprobe.session.main` is the
  command itself and returns its exit status.

## Limits

Only IPv4 is supported. There are no options for a packet count, interval,
packet size or deadline: the command runs until it is interrupted.

## Running the tests

```
pip install .[test]
pytest
```