"""The FORWARD TSN chunk used by partial reliability."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .chunkheader import build_chunk, parse_chunk_header
from .chunktype import ChunkType
from .errors import ChunkTooShortError

NEW_CUMULATIVE_TSN_LENGTH = 4
FORWARD_TSN_STREAM_LENGTH = 4
_STREAM = struct.Struct("!HH")
_TSN = struct.Struct("!I")


@dataclass
class ForwardTSNStream:
    """A stream skipped by a FORWARD TSN and its largest skipped sequence number."""

    identifier: int = 0
    sequence: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ForwardTSNStream:
        if len(raw) < FORWARD_TSN_STREAM_LENGTH:
            raise ChunkTooShortError("chunk too short")
        identifier, sequence = _STREAM.unpack_from(bytes(raw))
        return cls(identifier, sequence)

    def to_bytes(self) -> bytes:
        return _STREAM.pack(self.identifier, self.sequence)


@dataclass
class ChunkForwardTSN:
    """Tells the receiver to move its cumulative TSN forward past abandoned data."""

    new_cumulative_tsn: int = 0
    streams: list[ForwardTSNStream] = field(default_factory=list)
    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkForwardTSN:
        _typ, flags, value = parse_chunk_header(raw)
        if len(value) < NEW_CUMULATIVE_TSN_LENGTH:
            raise ChunkTooShortError("chunk too short")
        (tsn,) = _TSN.unpack_from(value)

        streams = []
        for offset in range(NEW_CUMULATIVE_TSN_LENGTH, len(value), FORWARD_TSN_STREAM_LENGTH):
            try:
                streams.append(ForwardTSNStream.from_bytes(value[offset:]))
            except ChunkTooShortError as exc:
                raise ChunkTooShortError(f"failed to marshal stream: {exc}") from exc
        return cls(tsn, streams, flags)

    def to_bytes(self) -> bytes:
        value = _TSN.pack(self.new_cumulative_tsn)
        value += b"".join(stream.to_bytes() for stream in self.streams)
        return build_chunk(ChunkType.FORWARD_TSN, self.flags, value)

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return True

    def __str__(self) -> str:
        lines = [f"New Cumulative TSN: {self.new_cumulative_tsn}\n"]
        lines.extend(f" - si={s.identifier}, ssn={s.sequence}\n" for s in self.streams)
        return "".join(lines)