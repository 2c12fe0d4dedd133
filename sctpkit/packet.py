"""SCTP packets: the common header followed by chunks."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .chunkheader import CHUNK_HEADER_SIZE, ChunkHeader, padding_length
from .chunktype import ChunkType, chunk_type_name
from .errors import ChecksumMismatchError, PacketError
from .forward_tsn import ChunkForwardTSN
from .heartbeat import ChunkHeartbeat
from .init import ChunkInit, ChunkInitAck
from .payload_data import ChunkPayloadData
from .reconfig import ChunkReconfig
from .selective_ack import ChunkSelectiveAck
from .shutdown import ChunkShutdown, ChunkShutdownAck, ChunkShutdownComplete

PACKET_HEADER_SIZE = 12
_COMMON = struct.Struct("!HHI")
_CASTAGNOLI = 0x82F63B78


def _make_table() -> list[int]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _CASTAGNOLI if crc & 1 else crc >> 1
        table.append(crc)
    return table


_TABLE = _make_table()


def _crc32c(data: bytes) -> int:
    crc = 0xFFFFFFFF
    for byte in data:
        crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


def generate_packet_checksum(raw: bytes) -> int:
    """CRC32c of the packet with its checksum field taken as zero."""
    raw = bytes(raw)
    if len(raw) < PACKET_HEADER_SIZE:
        raise PacketError(
            f"raw is smaller than the minimum length for a SCTP packet: {len(raw)} bytes"
        )
    return _crc32c(raw[:8] + bytes(4) + raw[PACKET_HEADER_SIZE:])


_CHUNK_DECODERS: dict[int, Callable[[bytes], Any]] = {
    ChunkType.INIT: ChunkInit.from_bytes,
    ChunkType.INIT_ACK: ChunkInitAck.from_bytes,
    # These chunks are kept as their type, flags and opaque value.
    ChunkType.ABORT: ChunkHeader.from_bytes,
    ChunkType.COOKIE_ECHO: ChunkHeader.from_bytes,
    ChunkType.COOKIE_ACK: ChunkHeader.from_bytes,
    ChunkType.ERROR: ChunkHeader.from_bytes,
    ChunkType.HEARTBEAT: ChunkHeartbeat.from_bytes,
    ChunkType.PAYLOAD_DATA: ChunkPayloadData.from_bytes,
    ChunkType.SACK: ChunkSelectiveAck.from_bytes,
    ChunkType.RECONFIG: ChunkReconfig.from_bytes,
    ChunkType.FORWARD_TSN: ChunkForwardTSN.from_bytes,
    ChunkType.SHUTDOWN: ChunkShutdown.from_bytes,
    ChunkType.SHUTDOWN_ACK: ChunkShutdownAck.from_bytes,
    ChunkType.SHUTDOWN_COMPLETE: ChunkShutdownComplete.from_bytes,
}


@dataclass
class Packet:
    """An SCTP common header and the chunks that follow it."""

    source_port: int = 0
    destination_port: int = 0
    verification_tag: int = 0
    chunks: list[Any] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Packet:
        raw = bytes(raw)
        if len(raw) < PACKET_HEADER_SIZE:
            raise PacketError(
                "raw is smaller than the minimum length for a SCTP packet: "
                f"raw only {len(raw)} bytes, {PACKET_HEADER_SIZE} is the minimum length"
            )
        source, destination, tag = _COMMON.unpack_from(raw)

        chunks = []
        offset = PACKET_HEADER_SIZE
        while offset != len(raw):
            if offset + CHUNK_HEADER_SIZE > len(raw):
                raise PacketError(
                    "unable to parse SCTP chunk, not enough data for complete header: "
                    f"offset {offset} remaining {len(raw)}"
                )
            typ = raw[offset]
            decoder = _CHUNK_DECODERS.get(typ)
            if decoder is None:
                raise PacketError(
                    f"failed to unmarshal, contains unknown chunk type: {chunk_type_name(typ)}"
                )
            chunks.append(decoder(raw[offset:]))
            length = int.from_bytes(raw[offset + 2 : offset + 4], "big")
            offset += length + padding_length(length)

        theirs = int.from_bytes(raw[8:12], "little")
        ours = generate_packet_checksum(raw)
        if theirs != ours:
            raise ChecksumMismatchError(f"checksum mismatch theirs: {theirs} ours: {ours}")
        return cls(source, destination, tag, chunks)

    def to_bytes(self) -> bytes:
        try:
            header = _COMMON.pack(self.source_port, self.destination_port, self.verification_tag)
        except struct.error as exc:
            raise PacketError(f"packet header field out of range: {exc}") from exc
        buf = bytearray(header + bytes(4))
        for chunk in self.chunks:
            buf += chunk.to_bytes()
            buf += bytes(padding_length(len(buf)))
        buf[8:12] = generate_packet_checksum(buf).to_bytes(4, "little")
        return bytes(buf)

    def __str__(self) -> str:
        text = (
            "Packet:\n"
            f"\tsourcePort: {self.source_port}\n"
            f"\tdestinationPort: {self.destination_port}\n"
            f"\tverificationTag: {self.verification_tag}\n"
            "\t"
        )
        return text + "".join(f"Chunk {i}:\n {c}" for i, c in enumerate(self.chunks))