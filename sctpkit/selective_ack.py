"""The SACK chunk that acknowledges received DATA chunks."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from .chunkheader import build_chunk, parse_chunk_header
from .chunktype import ChunkType, chunk_type_name
from .errors import ChunkHeaderError, ChunkTooShortError, ChunkTypeMismatchError, SctpError

SELECTIVE_ACK_HEADER_SIZE = 12
_FIXED = struct.Struct("!IIHH")
_GAP = struct.Struct("!HH")
_DUP = struct.Struct("!I")


@dataclass
class GapAckBlock:
    """A run of received TSNs, as offsets from the cumulative TSN ack."""

    start: int = 0
    end: int = 0

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass
class ChunkSelectiveAck:
    """Acknowledges DATA chunks and reports gaps and duplicates."""

    cumulative_tsn_ack: int = 0
    advertised_receiver_window_credit: int = 0
    gap_ack_blocks: list[GapAckBlock] = field(default_factory=list)
    duplicate_tsn: list[int] = field(default_factory=list)
    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkSelectiveAck:
        typ, flags, value = parse_chunk_header(raw)
        if typ != ChunkType.SACK:
            raise ChunkTypeMismatchError(
                f"ChunkType is not of type SACK: actually is {chunk_type_name(typ)}"
            )
        if len(value) < SELECTIVE_ACK_HEADER_SIZE:
            raise ChunkTooShortError(
                "SACK Chunk size is not large enough to contain header: "
                f"{len(value)} remaining, needs {SELECTIVE_ACK_HEADER_SIZE} bytes"
            )
        tsn, arwnd, n_gaps, n_dups = _FIXED.unpack_from(value)
        if len(value) != SELECTIVE_ACK_HEADER_SIZE + 4 * n_gaps + 4 * n_dups:
            raise ChunkHeaderError(
                "SACK Chunk size does not match predicted amount from header values"
            )

        gaps_end = SELECTIVE_ACK_HEADER_SIZE + 4 * n_gaps
        gaps = [
            GapAckBlock(start, end)
            for start, end in _GAP.iter_unpack(value[SELECTIVE_ACK_HEADER_SIZE:gaps_end])
        ]
        dups = [tsn_ for (tsn_,) in _DUP.iter_unpack(value[gaps_end:])]
        return cls(tsn, arwnd, gaps, dups, flags)

    def to_bytes(self) -> bytes:
        try:
            parts = [
                _FIXED.pack(
                    self.cumulative_tsn_ack,
                    self.advertised_receiver_window_credit,
                    len(self.gap_ack_blocks),
                    len(self.duplicate_tsn),
                )
            ]
            parts.extend(_GAP.pack(g.start, g.end) for g in self.gap_ack_blocks)
            parts.extend(_DUP.pack(t) for t in self.duplicate_tsn)
        except struct.error as exc:
            raise SctpError(f"SACK field out of range: {exc}") from exc
        return build_chunk(ChunkType.SACK, self.flags, b"".join(parts))

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False

    def __str__(self) -> str:
        dups = " ".join(str(t) for t in self.duplicate_tsn)
        text = (
            f"SACK cumTsnAck={self.cumulative_tsn_ack} "
            f"arwnd={self.advertised_receiver_window_credit} dupTsn=[{dups}]"
        )
        return text + "".join(f"\n gap ack: {gap}" for gap in self.gap_ack_blocks)