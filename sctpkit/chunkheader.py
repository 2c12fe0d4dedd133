"""The common header shared by every SCTP chunk."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .chunktype import ChunkType, chunk_type_name
from .errors import ChunkHeaderError

CHUNK_HEADER_SIZE = 4
_HEADER = struct.Struct("!BBH")
_MAX_LENGTH = 0xFFFF


def padding_length(length: int) -> int:
    """Return how many zero bytes bring ``length`` to a multiple of 4."""
    return -length % 4


def pad(data: bytes, count: int) -> bytes:
    """Return ``data`` followed by ``count`` zero bytes."""
    return bytes(data) + bytes(count)


def _as_chunk_type(value: int) -> ChunkType | int:
    try:
        return ChunkType(value)
    except ValueError:
        return value


def parse_chunk_header(raw: bytes) -> tuple[ChunkType | int, int, bytes]:
    """Split a chunk into its type, flags and value.

    Up to three bytes of trailing padding must be zero; four or more
    trailing bytes belong to the next chunk and are left alone.
    """
    raw = bytes(raw)
    if len(raw) < CHUNK_HEADER_SIZE:
        raise ChunkHeaderError(
            f"raw is too small for a SCTP chunk: raw only {len(raw)} bytes, "
            f"{CHUNK_HEADER_SIZE} is the minimum length"
        )

    typ, flags, length = _HEADER.unpack_from(raw)
    after_value = len(raw) - length
    if length < CHUNK_HEADER_SIZE or after_value < 0:
        raise ChunkHeaderError(
            "not enough data left in SCTP packet to satisfy requested length: "
            f"remain {length - CHUNK_HEADER_SIZE} req {len(raw) - CHUNK_HEADER_SIZE}"
        )
    if after_value < 4:
        for offset in reversed(range(length, len(raw))):
            if raw[offset] != 0:
                raise ChunkHeaderError(f"chunk padding is non-zero at offset: {offset}")

    return _as_chunk_type(typ), flags, raw[CHUNK_HEADER_SIZE:length]


def build_chunk(typ: int, flags: int, value: bytes) -> bytes:
    """Encode a chunk header followed by its value, without trailing padding."""
    value = bytes(value)
    length = len(value) + CHUNK_HEADER_SIZE
    if length > _MAX_LENGTH:
        raise ChunkHeaderError(f"chunk value of {len(value)} bytes is too long")
    return _HEADER.pack(int(typ), flags, length) + value


@dataclass
class ChunkHeader:
    """A chunk reduced to its type, flags and raw value."""

    typ: ChunkType | int
    flags: int = 0
    value: bytes = b""

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkHeader:
        typ, flags, value = parse_chunk_header(raw)
        return cls(typ, flags, value)

    def to_bytes(self) -> bytes:
        return build_chunk(self.typ, self.flags, self.value)

    def value_length(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return chunk_type_name(self.typ)