"""The DATA chunk that carries user messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

from .chunkheader import build_chunk, parse_chunk_header
from .chunktype import ChunkType
from .errors import ChunkTooShortError

PAYLOAD_DATA_ENDING_FRAGMENT_BITMASK = 1
PAYLOAD_DATA_BEGINNING_FRAGMENT_BITMASK = 2
PAYLOAD_DATA_UNORDERED_BITMASK = 4
PAYLOAD_DATA_IMMEDIATE_SACK = 8

PAYLOAD_DATA_HEADER_SIZE = 12
_FIXED = struct.Struct("!IHHI")


class PayloadProtocolIdentifier(IntEnum):
    """Payload protocol identifiers used by data channels."""

    UNKNOWN = 0
    WEBRTC_DCEP = 50
    WEBRTC_STRING = 51
    WEBRTC_BINARY = 53
    WEBRTC_STRING_EMPTY = 56
    WEBRTC_BINARY_EMPTY = 57

    def __str__(self) -> str:
        return _LABELS.get(self, f"Unknown Payload Protocol Identifier: {int(self)}")


_LABELS = {
    PayloadProtocolIdentifier.WEBRTC_DCEP: "WebRTC DCEP",
    PayloadProtocolIdentifier.WEBRTC_STRING: "WebRTC String",
    PayloadProtocolIdentifier.WEBRTC_BINARY: "WebRTC Binary",
    PayloadProtocolIdentifier.WEBRTC_STRING_EMPTY: "WebRTC String (Empty)",
    PayloadProtocolIdentifier.WEBRTC_BINARY_EMPTY: "WebRTC Binary (Empty)",
}


def payload_type_name(value: int) -> str:
    """Return the display name of a payload protocol identifier, known or not."""
    try:
        return str(PayloadProtocolIdentifier(value))
    except ValueError:
        return f"Unknown Payload Protocol Identifier: {int(value)}"


def _as_payload_type(value: int) -> PayloadProtocolIdentifier | int:
    try:
        return PayloadProtocolIdentifier(value)
    except ValueError:
        return value


@dataclass
class ChunkPayloadData:
    """A DATA chunk together with the sender-side state kept for it."""

    tsn: int = 0
    stream_identifier: int = 0
    stream_sequence_number: int = 0
    payload_type: PayloadProtocolIdentifier | int = PayloadProtocolIdentifier.UNKNOWN
    user_data: bytes = b""

    unordered: bool = False
    beginning_fragment: bool = False
    ending_fragment: bool = False
    immediate_sack: bool = False

    # Whether the peer has acknowledged this chunk.
    acked: bool = False
    miss_indicator: int = 0

    # Partial-reliability state, used only by the sender.
    since: float | None = None
    n_sent: int = 0
    # Set when a T1-RTX timeout fires while the chunk is still in flight.
    retransmit: bool = False

    # First fragment of the message this chunk belongs to.
    head: ChunkPayloadData | None = field(default=None, repr=False, compare=False)

    _abandoned: bool = field(default=False, init=False, repr=False, compare=False)
    _all_inflight: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkPayloadData:
        _typ, flags, value = parse_chunk_header(raw)
        if len(value) < PAYLOAD_DATA_HEADER_SIZE:
            raise ChunkTooShortError("packet is smaller than the header size")
        tsn, stream_id, ssn, ppi = _FIXED.unpack_from(value)
        return cls(
            tsn=tsn,
            stream_identifier=stream_id,
            stream_sequence_number=ssn,
            payload_type=_as_payload_type(ppi),
            user_data=value[PAYLOAD_DATA_HEADER_SIZE:],
            unordered=bool(flags & PAYLOAD_DATA_UNORDERED_BITMASK),
            beginning_fragment=bool(flags & PAYLOAD_DATA_BEGINNING_FRAGMENT_BITMASK),
            ending_fragment=bool(flags & PAYLOAD_DATA_ENDING_FRAGMENT_BITMASK),
            immediate_sack=bool(flags & PAYLOAD_DATA_IMMEDIATE_SACK),
        )

    def _flags(self) -> int:
        flags = 0
        if self.ending_fragment:
            flags |= PAYLOAD_DATA_ENDING_FRAGMENT_BITMASK
        if self.beginning_fragment:
            flags |= PAYLOAD_DATA_BEGINNING_FRAGMENT_BITMASK
        if self.unordered:
            flags |= PAYLOAD_DATA_UNORDERED_BITMASK
        if self.immediate_sack:
            flags |= PAYLOAD_DATA_IMMEDIATE_SACK
        return flags

    def to_bytes(self) -> bytes:
        value = _FIXED.pack(
            self.tsn,
            self.stream_identifier,
            self.stream_sequence_number,
            int(self.payload_type),
        ) + bytes(self.user_data)
        return build_chunk(ChunkType.PAYLOAD_DATA, self._flags(), value)

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False

    def __str__(self) -> str:
        return f"{ChunkType.PAYLOAD_DATA}\n{self.tsn}"

    def abandoned(self) -> bool:
        """Whether the message is abandoned and all of its fragments are in flight."""
        owner = self.head if self.head is not None else self
        return owner._abandoned and owner._all_inflight

    def set_abandoned(self, abandoned: bool) -> None:
        """Mark the whole message as abandoned or not."""
        owner = self.head if self.head is not None else self
        owner._abandoned = abandoned

    def set_all_inflight(self) -> None:
        """Record that every fragment is in flight; only the last fragment does so."""
        if self.ending_fragment:
            owner = self.head if self.head is not None else self
            owner._all_inflight = True