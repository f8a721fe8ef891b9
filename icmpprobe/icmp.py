"""Building and reading ICMP echo messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ECHO_REPLY = 0
ECHO_REQUEST = 8
PACKET_SIZE = 64
PAYLOAD_SIZE = 56
PAYLOAD_BYTE = 42

_ICMP_HEADER = struct.Struct(">BBHHH")
_MIN_IP_HEADER = 20


@dataclass(frozen=True)
class IcmpMessage:
    """An ICMP message read from a raw IPv4 packet."""

    type: int
    code: int
    checksum: int
    identifier: int
    sequence: int
    ttl: int
    ip_header_length: int
    icmp_length: int


def checksum(data: bytes) -> int:
    """Return the Internet one's complement checksum of ``data``."""
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(word for (word,) in struct.iter_unpack(">H", data))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def build_echo_request(identifier: int, seq: int) -> bytes:
    """Build a 64-byte echo request carrying a fixed payload."""
    payload = bytes([PAYLOAD_BYTE]) * PAYLOAD_SIZE
    header = _ICMP_HEADER.pack(ECHO_REQUEST, 0, 0, identifier & 0xFFFF, seq & 0xFFFF)
    cksum = checksum(header + payload)
    header = _ICMP_HEADER.pack(ECHO_REQUEST, 0, cksum, identifier & 0xFFFF, seq & 0xFFFF)
    return header + payload


def parse_ip_packet(buffer: bytes) -> IcmpMessage:
    """Read the ICMP header from a packet that starts with an IPv4 header."""
    if len(buffer) < _MIN_IP_HEADER:
        raise ValueError("packet too short for an IPv4 header")
    header_length = (buffer[0] & 0x0F) << 2
    if len(buffer) < header_length + _ICMP_HEADER.size:
        raise ValueError("packet too short for an ICMP header")
    msg_type, code, cksum, identifier, sequence = _ICMP_HEADER.unpack_from(buffer, header_length)
    return IcmpMessage(
        type=msg_type,
        code=code,
        checksum=cksum,
        identifier=identifier,
        sequence=sequence,
        ttl=buffer[8],
        ip_header_length=header_length,
        icmp_length=len(buffer) - header_length,
    )