"""Exception hierarchy for SCTP encoding and decoding."""

from __future__ import annotations


class SctpError(ValueError):
    """Base class for every error raised while handling SCTP data."""


class ChunkHeaderError(SctpError):
    """A chunk header is truncated, inconsistent or badly padded."""


class ChunkTypeMismatchError(SctpError):
    """A chunk was decoded as a type it does not carry."""


class ChunkTooShortError(SctpError):
    """A chunk value is too short for the fields it must hold."""


class ChunkValidationError(SctpError):
    """A decoded chunk breaks a protocol rule.

    ``abort`` tells whether the association has to be aborted.
    """

    def __init__(self, message: str, abort: bool = True) -> None:
        super().__init__(message)
        self.abort = abort


class ParamError(SctpError):
    """A TLV parameter could not be decoded or encoded."""


class ParamTypeUnhandledError(ParamError):
    """A parameter type has no decoder."""


class ErrorCauseError(SctpError):
    """An error cause could not be decoded or encoded."""


class PacketError(SctpError):
    """An SCTP packet could not be decoded or encoded."""


class ChecksumMismatchError(PacketError):
    """The CRC32c checksum of a packet does not match its contents."""


class UnimplementedError(SctpError):
    """The requested operation is not supported for this chunk."""