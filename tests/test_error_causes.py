import pytest

from sctpkit.error_causes import (
    ErrorCause,
    ErrorCauseCode,
    InvalidMandatoryParameter,
    ProtocolViolation,
    UnrecognizedChunkType,
    UserInitiatedAbort,
    build_error_cause,
    error_cause_name,
)
from sctpkit.errors import ErrorCauseError


@pytest.mark.parametrize(
    "code, expected",
    [
        (ErrorCauseCode.INVALID_STREAM_IDENTIFIER, "Invalid Stream Identifier"),
        (ErrorCauseCode.UNRESOLVABLE_ADDRESS, "Unresolvable IP"),
        (ErrorCauseCode.UNRECOGNIZED_CHUNK_TYPE, "Unrecognized Chunk Type"),
        (ErrorCauseCode.USER_INITIATED_ABORT, "User Initiated Abort"),
        (ErrorCauseCode.PROTOCOL_VIOLATION, "Protocol Violation"),
    ],
)
def test_code_names(code, expected):
    assert str(code) == expected
    assert error_cause_name(int(code)) == expected


def test_unknown_code_name():
    assert error_cause_name(99) == "Unknown CauseCode: 99"


def test_user_initiated_abort_wire_bytes():
    cause = UserInitiatedAbort(b"abc")
    assert cause.to_bytes() == b"\x00\x0c\x00\x07abc"


@pytest.mark.parametrize(
    "cause",
    [
        InvalidMandatoryParameter(b"\x01\x02"),
        UnrecognizedChunkType(b"\xff\x00\x00\x04"),
        ProtocolViolation(b"bad tsn"),
        UserInitiatedAbort(b"closing"),
        UserInitiatedAbort(),
    ],
)
def test_round_trip_through_build(cause):
    raw = cause.to_bytes()
    decoded = build_error_cause(raw)
    assert decoded == cause
    assert type(decoded) is type(cause)
    assert decoded.to_bytes() == raw
    assert decoded.length() == len(raw)


def test_decoded_code_matches_class():
    raw = ProtocolViolation(b"x").to_bytes()
    assert build_error_cause(raw).code is ErrorCauseCode.PROTOCOL_VIOLATION


def test_trailing_bytes_are_ignored():
    raw = UserInitiatedAbort(b"bye").to_bytes()
    decoded = build_error_cause(raw + b"\x00\x00")
    assert decoded == UserInitiatedAbort(b"bye")


def test_string_forms():
    assert str(UserInitiatedAbort(b"bye")) == "User Initiated Abort: bye"
    assert str(ProtocolViolation(b"oops")) == "Protocol Violation: oops"
    assert str(UnrecognizedChunkType(b"\x00")) == "Unrecognized Chunk Type"
    assert str(InvalidMandatoryParameter()) == "Invalid Mandatory Parameter"


def test_generic_cause_round_trip():
    cause = ErrorCause(ErrorCauseCode.NO_USER_DATA, b"\x00\x00\x00\x05")
    decoded = ErrorCause.from_bytes(cause.to_bytes())
    assert decoded == cause
    assert str(decoded) == "No User Data"


def test_unhandled_code_raises():
    raw = ErrorCause(ErrorCauseCode.STALE_COOKIE_ERROR, b"").to_bytes()
    with pytest.raises(ErrorCauseError, match="does not handle: Stale Cookie Error"):
        build_error_cause(raw)


@pytest.mark.parametrize("raw", [b"", b"\x00", b"\x00\x0c\x00"])
def test_truncated_header_raises(raw):
    with pytest.raises(ErrorCauseError):
        build_error_cause(raw)


def test_length_beyond_data_raises():
    raw = UserInitiatedAbort(b"abcdef").to_bytes()[:-2]
    with pytest.raises(ErrorCauseError):
        build_error_cause(raw)


def test_protocol_violation_failure_is_wrapped():
    raw = ProtocolViolation(b"abcdef").to_bytes()[:-1]
    with pytest.raises(ErrorCauseError, match="Protocol Violation"):
        build_error_cause(raw)