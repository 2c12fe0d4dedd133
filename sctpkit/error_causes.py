"""Error causes carried in ERROR and ABORT chunks."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .errors import ErrorCauseError

ERROR_CAUSE_HEADER_SIZE = 4
_CAUSE_HEADER = struct.Struct("!HH")
_MAX_LENGTH = 0xFFFF


class ErrorCauseCode(IntEnum):
    """Value of the Cause Code field."""

    INVALID_STREAM_IDENTIFIER = 1
    MISSING_MANDATORY_PARAMETER = 2
    STALE_COOKIE_ERROR = 3
    OUT_OF_RESOURCE = 4
    UNRESOLVABLE_ADDRESS = 5
    UNRECOGNIZED_CHUNK_TYPE = 6
    INVALID_MANDATORY_PARAMETER = 7
    UNRECOGNIZED_PARAMETERS = 8
    NO_USER_DATA = 9
    COOKIE_RECEIVED_WHILE_SHUTTING_DOWN = 10
    RESTART_OF_AN_ASSOCIATION_WITH_NEW_ADDRESSES = 11
    USER_INITIATED_ABORT = 12
    PROTOCOL_VIOLATION = 13

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    ErrorCauseCode.INVALID_STREAM_IDENTIFIER: "Invalid Stream Identifier",
    ErrorCauseCode.MISSING_MANDATORY_PARAMETER: "Missing Mandatory Parameter",
    ErrorCauseCode.STALE_COOKIE_ERROR: "Stale Cookie Error",
    ErrorCauseCode.OUT_OF_RESOURCE: "Out Of Resource",
    ErrorCauseCode.UNRESOLVABLE_ADDRESS: "Unresolvable IP",
    ErrorCauseCode.UNRECOGNIZED_CHUNK_TYPE: "Unrecognized Chunk Type",
    ErrorCauseCode.INVALID_MANDATORY_PARAMETER: "Invalid Mandatory Parameter",
    ErrorCauseCode.UNRECOGNIZED_PARAMETERS: "Unrecognized Parameters",
    ErrorCauseCode.NO_USER_DATA: "No User Data",
    ErrorCauseCode.COOKIE_RECEIVED_WHILE_SHUTTING_DOWN: "Cookie Received While Shutting Down",
    ErrorCauseCode.RESTART_OF_AN_ASSOCIATION_WITH_NEW_ADDRESSES: (
        "Restart Of An Association With New Addresses"
    ),
    ErrorCauseCode.USER_INITIATED_ABORT: "User Initiated Abort",
    ErrorCauseCode.PROTOCOL_VIOLATION: "Protocol Violation",
}


def error_cause_name(value: int) -> str:
    """Return the display name of a cause code, known or not."""
    try:
        return str(ErrorCauseCode(value))
    except ValueError:
        return f"Unknown CauseCode: {int(value)}"


def _as_code(value: int) -> ErrorCauseCode | int:
    try:
        return ErrorCauseCode(value)
    except ValueError:
        return value


def _split_cause(raw: bytes) -> tuple[ErrorCauseCode | int, bytes]:
    raw = bytes(raw)
    if len(raw) < ERROR_CAUSE_HEADER_SIZE:
        raise ErrorCauseError(f"error cause too short: {len(raw)} bytes")
    code, length = _CAUSE_HEADER.unpack_from(raw)
    if length < ERROR_CAUSE_HEADER_SIZE:
        raise ErrorCauseError(f"error cause length {length} is smaller than its header")
    if length > len(raw):
        raise ErrorCauseError(
            f"error cause length {length} exceeds the {len(raw)} bytes available"
        )
    return _as_code(code), raw[ERROR_CAUSE_HEADER_SIZE:length]


class ErrorCause:
    """An error cause whose value is kept as opaque bytes."""

    def __init__(self, code: int, value: bytes = b"") -> None:
        self.code = _as_code(code)
        self.value = bytes(value)

    @classmethod
    def from_bytes(cls, raw: bytes) -> ErrorCause:
        code, value = _split_cause(raw)
        return cls._from_value(code, value)

    @classmethod
    def _from_value(cls, code: int, value: bytes) -> ErrorCause:
        return cls(code, value)

    def _value_bytes(self) -> bytes:
        return self.value

    def to_bytes(self) -> bytes:
        value = bytes(self._value_bytes())
        length = ERROR_CAUSE_HEADER_SIZE + len(value)
        if length > _MAX_LENGTH:
            raise ErrorCauseError(f"error cause value of {len(value)} bytes is too long")
        return _CAUSE_HEADER.pack(int(self.code), length) + value

    def length(self) -> int:
        """Length as written in the header: code, length and value."""
        return ERROR_CAUSE_HEADER_SIZE + len(self._value_bytes())

    def __str__(self) -> str:
        return error_cause_name(self.code)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.code, self.value) == (other.code, other.value)

    def __repr__(self) -> str:
        return f"ErrorCause(code={self.code!r}, value={self.value!r})"


@dataclass(eq=True)
class InvalidMandatoryParameter(ErrorCause):
    """A mandatory parameter carried an invalid value."""

    code: ClassVar[ErrorCauseCode] = ErrorCauseCode.INVALID_MANDATORY_PARAMETER
    value: bytes = b""

    @classmethod
    def _from_value(cls, code: int, value: bytes) -> InvalidMandatoryParameter:
        return cls(bytes(value))

    def _value_bytes(self) -> bytes:
        return bytes(self.value)


@dataclass(eq=True)
class UnrecognizedChunkType(ErrorCause):
    """The peer sent a chunk type this endpoint does not understand."""

    code: ClassVar[ErrorCauseCode] = ErrorCauseCode.UNRECOGNIZED_CHUNK_TYPE
    unrecognized_chunk: bytes = b""

    @classmethod
    def _from_value(cls, code: int, value: bytes) -> UnrecognizedChunkType:
        return cls(bytes(value))

    def _value_bytes(self) -> bytes:
        return bytes(self.unrecognized_chunk)


@dataclass(eq=True)
class ProtocolViolation(ErrorCause):
    """The peer broke the protocol in a way no other cause describes."""

    code: ClassVar[ErrorCauseCode] = ErrorCauseCode.PROTOCOL_VIOLATION
    additional_information: bytes = b""

    @classmethod
    def from_bytes(cls, raw: bytes) -> ProtocolViolation:
        try:
            cause = super().from_bytes(raw)
        except ErrorCauseError as exc:
            raise ErrorCauseError(f"unable to unmarshal Protocol Violation error: {exc}") from exc
        assert isinstance(cause, ProtocolViolation)
        return cause

    @classmethod
    def _from_value(cls, code: int, value: bytes) -> ProtocolViolation:
        return cls(bytes(value))

    def _value_bytes(self) -> bytes:
        return bytes(self.additional_information)

    def __str__(self) -> str:
        text = bytes(self.additional_information).decode("utf-8", errors="replace")
        return f"{error_cause_name(self.code)}: {text}"


@dataclass(eq=True)
class UserInitiatedAbort(ErrorCause):
    """The upper layer asked for the abort, optionally with a reason."""

    code: ClassVar[ErrorCauseCode] = ErrorCauseCode.USER_INITIATED_ABORT
    upper_layer_abort_reason: bytes = b""

    @classmethod
    def _from_value(cls, code: int, value: bytes) -> UserInitiatedAbort:
        return cls(bytes(value))

    def _value_bytes(self) -> bytes:
        return bytes(self.upper_layer_abort_reason)

    def __str__(self) -> str:
        text = bytes(self.upper_layer_abort_reason).decode("utf-8", errors="replace")
        return f"{error_cause_name(self.code)}: {text}"


_DECODERS: dict[int, type[ErrorCause]] = {
    ErrorCauseCode.INVALID_MANDATORY_PARAMETER: InvalidMandatoryParameter,
    ErrorCauseCode.UNRECOGNIZED_CHUNK_TYPE: UnrecognizedChunkType,
    ErrorCauseCode.PROTOCOL_VIOLATION: ProtocolViolation,
    ErrorCauseCode.USER_INITIATED_ABORT: UserInitiatedAbort,
}


def build_error_cause(raw: bytes) -> ErrorCause:
    """Decode ``raw`` into the error cause class that matches its code."""
    raw = bytes(raw)
    if len(raw) < 2:
        raise ErrorCauseError(f"error cause too short to hold a code: {len(raw)} bytes")
    code = int.from_bytes(raw[:2], "big")
    decoder = _DECODERS.get(code)
    if decoder is None:
        raise ErrorCauseError(f"BuildErrorCause does not handle: {error_cause_name(code)}")
    return decoder.from_bytes(raw)