"""Type-length-value parameters carried inside SCTP chunks."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from .chunktype import ChunkType
from .errors import ParamError, ParamTypeUnhandledError

PARAM_HEADER_SIZE = 4
_PARAM_HEADER = struct.Struct("!HH")
_RESET_REQUEST_FIXED = struct.Struct("!III")


class ParamType(IntEnum):
    """Value of the Parameter Type field."""

    HEARTBEAT_INFO = 1
    IPV4_ADDR = 5
    IPV6_ADDR = 6
    STATE_COOKIE = 7
    UNRECOGNIZED_PARAM = 8
    COOKIE_PRESERVATIVE = 9
    HOST_NAME_ADDR = 11
    SUPPORTED_ADDR_TYPES = 12
    OUT_SSN_RESET_REQ = 13
    INC_SSN_RESET_REQ = 14
    SSN_TSN_RESET_REQ = 15
    RECONFIG_RESP = 16
    ADD_OUT_STREAMS_REQ = 17
    ADD_INC_STREAMS_REQ = 18
    ECN_CAPABLE = 0x8000
    RANDOM = 0x8002
    CHUNK_LIST = 0x8003
    REQ_HMAC_ALGO = 0x8004
    PADDING = 0x8005
    SUPPORTED_EXT = 0x8008
    FORWARD_TSN_SUPP = 0xC000
    ADD_IP_ADDR = 0xC001
    DEL_IP_ADDR = 0xC002
    ERR_CLAUSE_IND = 0xC003
    SET_PRI_ADDR = 0xC004
    SUCCESS_IND = 0xC005
    ADAPT_LAYER_IND = 0xC006


def _as_param_type(value: int) -> ParamType | int:
    try:
        return ParamType(value)
    except ValueError:
        return value


def _param_type_name(value: int) -> str:
    try:
        return ParamType(value).name
    except ValueError:
        return f"Unknown ParamType: {int(value)}"


def _split_param(raw: bytes) -> tuple[ParamType | int, bytes]:
    raw = bytes(raw)
    if len(raw) < PARAM_HEADER_SIZE:
        raise ParamError(f"param header too short: {len(raw)} bytes")
    typ, length = _PARAM_HEADER.unpack_from(raw)
    if length < PARAM_HEADER_SIZE:
        raise ParamError(f"param length {length} is smaller than its header")
    if length > len(raw):
        raise ParamError(f"param length {length} exceeds the {len(raw)} bytes available")
    return _as_param_type(typ), raw[PARAM_HEADER_SIZE:length]


def parse_param_type(raw: bytes) -> ParamType | int:
    """Read the parameter type from the first two bytes of ``raw``."""
    if len(raw) < 2:
        raise ParamError(f"param too short to hold a type: {len(raw)} bytes")
    return _as_param_type(int.from_bytes(bytes(raw[:2]), "big"))


class Param:
    """A parameter whose value is kept as opaque bytes."""

    def __init__(self, param_type: int, value: bytes = b"") -> None:
        self.param_type = _as_param_type(param_type)
        self.value = bytes(value)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Param:
        param_type, value = _split_param(raw)
        return cls._from_value(param_type, value)

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> Param:
        return cls(param_type, value)

    def _value_bytes(self) -> bytes:
        return self.value

    def to_bytes(self) -> bytes:
        value = self._value_bytes()
        return _PARAM_HEADER.pack(int(self.param_type), PARAM_HEADER_SIZE + len(value)) + value

    def length(self) -> int:
        """Length as written in the header: type, length and value, no padding."""
        return PARAM_HEADER_SIZE + len(self._value_bytes())

    def __str__(self) -> str:
        return _param_type_name(self.param_type)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.param_type, self.value) == (other.param_type, other.value)

    def __repr__(self) -> str:
        return f"Param(param_type={self.param_type!r}, value={self.value!r})"


@dataclass(eq=True)
class ForwardTSNSupported(Param):
    """Announces support for the FORWARD TSN chunk."""

    param_type: ClassVar[ParamType] = ParamType.FORWARD_TSN_SUPP

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> ForwardTSNSupported:
        return cls()

    def _value_bytes(self) -> bytes:
        return b""


@dataclass(eq=True)
class ECNCapable(Param):
    """Announces support for explicit congestion notification."""

    param_type: ClassVar[ParamType] = ParamType.ECN_CAPABLE

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> ECNCapable:
        return cls()

    def _value_bytes(self) -> bytes:
        return b""


@dataclass(eq=True)
class HeartbeatInfo(Param):
    """Opaque heartbeat information echoed back by the peer."""

    param_type: ClassVar[ParamType] = ParamType.HEARTBEAT_INFO
    heartbeat_information: bytes = b""

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> HeartbeatInfo:
        return cls(bytes(value))

    def _value_bytes(self) -> bytes:
        return bytes(self.heartbeat_information)


@dataclass(eq=True)
class RandomParam(Param):
    """Random data used for authentication keys."""

    param_type: ClassVar[ParamType] = ParamType.RANDOM
    random_data: bytes = b""

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> RandomParam:
        return cls(bytes(value))

    def _value_bytes(self) -> bytes:
        return bytes(self.random_data)


@dataclass(eq=True)
class ChunkList(Param):
    """List of chunk types, one byte each."""

    param_type: ClassVar[ParamType] = ParamType.CHUNK_LIST
    chunk_types: list[ChunkType | int] = field(default_factory=list)

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> ChunkList:
        types: list[ChunkType | int] = []
        for byte in value:
            try:
                types.append(ChunkType(byte))
            except ValueError:
                types.append(byte)
        return cls(types)

    def _value_bytes(self) -> bytes:
        return bytes(int(t) for t in self.chunk_types)


@dataclass(eq=True)
class OutgoingResetRequest(Param):
    """Request to reset some or all outgoing streams.

    An empty ``stream_identifiers`` list asks for every stream to be reset.
    """

    param_type: ClassVar[ParamType] = ParamType.OUT_SSN_RESET_REQ
    reconfig_request_sequence_number: int = 0
    reconfig_response_sequence_number: int = 0
    sender_last_tsn: int = 0
    stream_identifiers: list[int] = field(default_factory=list)

    @classmethod
    def _from_value(cls, param_type: int, value: bytes) -> OutgoingResetRequest:
        fixed = _RESET_REQUEST_FIXED.size
        if len(value) < fixed:
            raise ParamError("outgoing SSN reset request parameter too short")
        request, response, last_tsn = _RESET_REQUEST_FIXED.unpack_from(value)
        count = (len(value) - fixed) // 2
        streams = list(struct.unpack_from(f"!{count}H", value, fixed))
        return cls(request, response, last_tsn, streams)

    def _value_bytes(self) -> bytes:
        fixed = _RESET_REQUEST_FIXED.pack(
            self.reconfig_request_sequence_number,
            self.reconfig_response_sequence_number,
            self.sender_last_tsn,
        )
        return fixed + struct.pack(f"!{len(self.stream_identifiers)}H", *self.stream_identifiers)


_DECODERS: dict[int, type[Param]] = {
    ParamType.FORWARD_TSN_SUPP: ForwardTSNSupported,
    ParamType.ECN_CAPABLE: ECNCapable,
    ParamType.RANDOM: RandomParam,
    ParamType.CHUNK_LIST: ChunkList,
    ParamType.HEARTBEAT_INFO: HeartbeatInfo,
    ParamType.OUT_SSN_RESET_REQ: OutgoingResetRequest,
    # Known parameters whose value is kept as opaque bytes.
    ParamType.SUPPORTED_EXT: Param,
    ParamType.REQ_HMAC_ALGO: Param,
    ParamType.STATE_COOKIE: Param,
    ParamType.RECONFIG_RESP: Param,
}


def build_param(param_type: int, raw: bytes) -> Param:
    """Decode ``raw`` as a parameter of the given type."""
    decoder = _DECODERS.get(int(param_type))
    if decoder is None:
        raise ParamTypeUnhandledError(f"unhandled ParamType: {_param_type_name(param_type)}")
    return decoder.from_bytes(raw)