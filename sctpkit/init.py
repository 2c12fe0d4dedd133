"""The INIT and INIT ACK chunks and the body they share."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from .chunkheader import build_chunk, pad, padding_length, parse_chunk_header
from .chunktype import ChunkType, chunk_type_name
from .errors import (
    ChunkHeaderError,
    ChunkTooShortError,
    ChunkTypeMismatchError,
    ChunkValidationError,
    ParamError,
    SctpError,
)
from .params import Param, build_param, parse_param_type

INIT_CHUNK_MIN_LENGTH = 16
INIT_OPTIONAL_VAR_HEADER_LENGTH = 4
MIN_ADVERTISED_RECEIVER_WINDOW = 1500
_FIXED = struct.Struct("!IIHHI")

_C = TypeVar("_C", bound="InitCommon")


def _parse_params(raw: bytes, start: int) -> Iterator[Param]:
    offset = start
    # A trailing piece no longer than a parameter header is left unread.
    while len(raw) - offset > INIT_OPTIONAL_VAR_HEADER_LENGTH:
        rest = raw[offset:]
        try:
            param_type = parse_param_type(rest)
        except ParamError as exc:
            raise ParamError(f"failed to parse param type: {exc}") from exc
        try:
            param = build_param(param_type, rest)
        except ParamError as exc:
            raise type(exc)(f"failed unmarshalling param in Init Chunk: {exc}") from exc
        yield param
        length = param.length()
        offset += length + padding_length(length)


@dataclass
class InitCommon:
    """Fixed fields and optional parameters shared by INIT and INIT ACK."""

    initiate_tag: int = 0
    advertised_receiver_window_credit: int = 0
    num_outbound_streams: int = 0
    num_inbound_streams: int = 0
    initial_tsn: int = 0
    params: list[Param] = field(default_factory=list)

    @classmethod
    def from_value(cls, raw: bytes) -> InitCommon:
        """Decode a chunk value: the fixed fields followed by parameters."""
        raw = bytes(raw)
        if len(raw) < INIT_CHUNK_MIN_LENGTH:
            raise ChunkTooShortError(
                "chunk Value isn't long enough for mandatory parameters exp: "
                f"{INIT_CHUNK_MIN_LENGTH} actual: {len(raw)}"
            )
        tag, arwnd, outbound, inbound, tsn = _FIXED.unpack_from(raw)
        params = list(_parse_params(raw, INIT_CHUNK_MIN_LENGTH))
        return cls(tag, arwnd, outbound, inbound, tsn, params)

    def value_bytes(self) -> bytes:
        """Encode the chunk value, padding every parameter but the last."""
        try:
            fixed = _FIXED.pack(
                self.initiate_tag,
                self.advertised_receiver_window_credit,
                self.num_outbound_streams,
                self.num_inbound_streams,
                self.initial_tsn,
            )
        except struct.error as exc:
            raise SctpError(f"INIT field out of range: {exc}") from exc

        parts = [fixed]
        last = len(self.params) - 1
        for index, param in enumerate(self.params):
            try:
                encoded = param.to_bytes()
            except (ParamError, struct.error) as exc:
                raise ParamError(f"unable to marshal parameter for INIT/INITACK: {exc}") from exc
            if index != last:
                encoded = pad(encoded, padding_length(len(encoded)))
            parts.append(encoded)
        return b"".join(parts)

    def __str__(self) -> str:
        text = (
            f"initiateTag: {self.initiate_tag}\n"
            f"\tadvertisedReceiverWindowCredit: {self.advertised_receiver_window_credit}\n"
            f"\tnumOutboundStreams: {self.num_outbound_streams}\n"
            f"\tnumInboundStreams: {self.num_inbound_streams}\n"
            f"\tinitialTSN: {self.initial_tsn}"
        )
        return text + "".join(f"Param {i}:\n {p}" for i, p in enumerate(self.params))


def _decode(cls: type[_C], chunk_type: ChunkType, raw: bytes) -> _C:
    typ, flags, value = parse_chunk_header(raw)
    if typ != chunk_type:
        raise ChunkTypeMismatchError(
            f"ChunkType is not of type {chunk_type}: actually is {chunk_type_name(typ)}"
        )
    if len(value) < INIT_CHUNK_MIN_LENGTH:
        raise ChunkTooShortError(
            "chunk Value isn't long enough for mandatory parameters exp: "
            f"{INIT_CHUNK_MIN_LENGTH} actual: {len(value)}"
        )
    # The flags are reserved and must be zero.
    if flags != 0:
        raise ChunkHeaderError(f"ChunkType of type {chunk_type} flags must be all 0")
    try:
        chunk = cls.from_value(value)
    except SctpError as exc:
        raise type(exc)(f"failed to unmarshal INIT body: {exc}") from exc
    assert isinstance(chunk, cls)
    return chunk


def _encode(chunk: InitCommon, chunk_type: ChunkType) -> bytes:
    try:
        value = chunk.value_bytes()
    except SctpError as exc:
        raise type(exc)(f"failed marshaling INIT common data: {exc}") from exc
    return build_chunk(chunk_type, 0, value)


def _check(chunk: InitCommon) -> bool:
    if chunk.initiate_tag == 0:
        raise ChunkValidationError(
            "ChunkType of type INIT ACK InitiateTag must not be 0", abort=True
        )
    if chunk.num_inbound_streams == 0:
        raise ChunkValidationError("INIT ACK inbound stream request must be > 0", abort=True)
    if chunk.num_outbound_streams == 0:
        raise ChunkValidationError("INIT ACK outbound stream request must be > 0", abort=True)
    if chunk.advertised_receiver_window_credit < MIN_ADVERTISED_RECEIVER_WINDOW:
        raise ChunkValidationError(
            "INIT ACK Advertised Receiver Window Credit (a_rwnd) must be >= 1500",
            abort=True,
        )
    return False


@dataclass
class ChunkInit(InitCommon):
    """An INIT chunk, which opens an association."""

    _chunk_type: ClassVar[ChunkType] = ChunkType.INIT

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkInit:
        """Decode an INIT chunk."""
        return _decode(cls, cls._chunk_type, raw)

    def to_bytes(self) -> bytes:
        """Encode the chunk with its header."""
        return _encode(self, self._chunk_type)

    def check(self) -> bool:
        """Return False when valid; raise ChunkValidationError calling for an abort."""
        return _check(self)

    def __str__(self) -> str:
        return f"{self._chunk_type}\n{InitCommon.__str__(self)}"


@dataclass
class ChunkInitAck(InitCommon):
    """An INIT ACK chunk, the answer to an INIT."""

    _chunk_type: ClassVar[ChunkType] = ChunkType.INIT_ACK

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkInitAck:
        """Decode an INIT ACK chunk."""
        return _decode(cls, cls._chunk_type, raw)

    def to_bytes(self) -> bytes:
        """Encode the chunk with its header."""
        return _encode(self, self._chunk_type)

    def check(self) -> bool:
        """Return False when valid; raise ChunkValidationError calling for an abort."""
        return _check(self)

    def __str__(self) -> str:
        return f"{self._chunk_type}\n{InitCommon.__str__(self)}"