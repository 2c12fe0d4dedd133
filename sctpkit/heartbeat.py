"""The HEARTBEAT and HEARTBEAT ACK chunks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .chunkheader import build_chunk, pad, padding_length, parse_chunk_header
from .chunktype import ChunkType, chunk_type_name
from .errors import ChunkTooShortError, ChunkTypeMismatchError, ParamError, UnimplementedError
from .params import HeartbeatInfo, Param, ParamType, build_param, parse_param_type


@dataclass
class ChunkHeartbeat:
    """Probes the reachability of the peer; carries one Heartbeat Info parameter."""

    params: list[Param] = field(default_factory=list)
    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkHeartbeat:
        typ, flags, value = parse_chunk_header(raw)
        if typ != ChunkType.HEARTBEAT:
            raise ChunkTypeMismatchError(
                f"ChunkType is not of type HEARTBEAT: actually is {chunk_type_name(typ)}"
            )
        if not value:
            raise ChunkTooShortError(
                f"heartbeat is not long enough to contain Heartbeat Info: {len(bytes(raw))}"
            )
        try:
            param_type = parse_param_type(value)
        except ParamError as exc:
            raise ParamError(f"failed to parse param type: {exc}") from exc
        if param_type != ParamType.HEARTBEAT_INFO:
            raise ParamError(f"heartbeat should only have HEARTBEAT param: instead have {param_type}")
        try:
            param = build_param(param_type, value)
        except ParamError as exc:
            raise type(exc)(f"failed unmarshalling param in Heartbeat Chunk: {exc}") from exc
        return cls([param], flags)

    def to_bytes(self) -> bytes:
        raise UnimplementedError("unimplemented")

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False


@dataclass
class ChunkHeartbeatAck:
    """Answers a HEARTBEAT by echoing its Heartbeat Info parameter."""

    params: list[Param] = field(default_factory=list)
    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkHeartbeatAck:
        raise UnimplementedError("unimplemented")

    def to_bytes(self) -> bytes:
        if len(self.params) != 1:
            raise ParamError("heartbeat Ack must have one param")
        if not isinstance(self.params[0], HeartbeatInfo):
            raise ParamError("heartbeat Ack must have one param, and it should be a HeartbeatInfo")

        parts = []
        last = len(self.params) - 1
        for index, param in enumerate(self.params):
            try:
                encoded = param.to_bytes()
            except (ParamError, ValueError) as exc:
                raise ParamError(f"unable to marshal parameter for Heartbeat Ack: {exc}") from exc
            # Padding of every parameter but the last counts in the chunk length.
            if index != last:
                encoded = pad(encoded, padding_length(len(encoded)))
            parts.append(encoded)
        return build_chunk(ChunkType.HEARTBEAT_ACK, self.flags, b"".join(parts))

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return False