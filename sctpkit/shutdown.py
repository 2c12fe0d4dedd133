"""The SHUTDOWN, SHUTDOWN ACK and SHUTDOWN COMPLETE chunks."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .chunkheader import build_chunk, parse_chunk_header
from .chunktype import ChunkType, chunk_type_name
from .errors import ChunkHeaderError, ChunkTypeMismatchError

CUMULATIVE_TSN_ACK_LENGTH = 4
_TSN = struct.Struct("!I")


def _parse_typed(raw: bytes, expected: ChunkType) -> tuple[int, bytes]:
    typ, flags, value = parse_chunk_header(raw)
    if typ != expected:
        raise ChunkTypeMismatchError(
            f"ChunkType is not of type {expected}: actually is {chunk_type_name(typ)}"
        )
    return flags, value


@dataclass
class ChunkShutdown:
    """Starts a graceful close and acknowledges data up to a TSN."""

    cumulative_tsn_ack: int = 0
    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkShutdown:
        flags, value = _parse_typed(raw, ChunkType.SHUTDOWN)
        if len(value) != CUMULATIVE_TSN_ACK_LENGTH:
            raise ChunkHeaderError("invalid chunk size")
        (tsn,) = _TSN.unpack(value)
        return cls(tsn, flags)

    def to_bytes(self) -> bytes:
        return build_chunk(ChunkType.SHUTDOWN, self.flags, _TSN.pack(self.cumulative_tsn_ack))

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False

    def __str__(self) -> str:
        return str(ChunkType.SHUTDOWN)


@dataclass
class ChunkShutdownAck:
    """Acknowledges a SHUTDOWN."""

    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkShutdownAck:
        flags, _value = _parse_typed(raw, ChunkType.SHUTDOWN_ACK)
        return cls(flags)

    def to_bytes(self) -> bytes:
        return build_chunk(ChunkType.SHUTDOWN_ACK, self.flags, b"")

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False

    def __str__(self) -> str:
        return str(ChunkType.SHUTDOWN_ACK)


@dataclass
class ChunkShutdownComplete:
    """Ends the shutdown sequence."""

    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkShutdownComplete:
        flags, _value = _parse_typed(raw, ChunkType.SHUTDOWN_COMPLETE)
        return cls(flags)

    def to_bytes(self) -> bytes:
        return build_chunk(ChunkType.SHUTDOWN_COMPLETE, self.flags, b"")

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False

    def __str__(self) -> str:
        return str(ChunkType.SHUTDOWN_COMPLETE)