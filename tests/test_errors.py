import pytest

from sctpkit.errors import (
    ChecksumMismatchError,
    ChunkHeaderError,
    ChunkTooShortError,
    ChunkTypeMismatchError,
    ChunkValidationError,
    ErrorCauseError,
    PacketError,
    ParamError,
    ParamTypeUnhandledError,
    SctpError,
    UnimplementedError,
)


def test_validation_error_keeps_abort_flag_and_message():
    err = ChunkValidationError("initiate tag must not be 0", True)
    assert err.abort is True
    assert str(err) == "initiate tag must not be 0"


def test_validation_error_without_abort():
    err = ChunkValidationError("soft failure", abort=False)
    assert err.abort is False
    assert str(err) == "soft failure"


def test_validation_error_defaults_to_abort():
    assert ChunkValidationError("bad").abort is True


def test_checksum_mismatch_is_a_packet_error():
    err = ChecksumMismatchError("checksum mismatch")
    assert isinstance(err, PacketError) and str(err) == "checksum mismatch"


def test_unhandled_param_is_a_param_error():
    err = ParamTypeUnhandledError("unhandled ParamType: 0")
    assert isinstance(err, ParamError) and str(err) == "unhandled ParamType: 0"


@pytest.mark.parametrize(
    "error_class",
    [
        ChunkHeaderError,
        ChunkTypeMismatchError,
        ChunkTooShortError,
        ChunkValidationError,
        ParamError,
        ErrorCauseError,
        PacketError,
        UnimplementedError,
    ],
)
def test_every_error_is_an_sctp_error(error_class):
    err = error_class("boom")
    assert isinstance(err, SctpError) and str(err) == "boom"


def test_sctp_error_is_a_value_error():
    err = ChunkTooShortError("chunk too short")
    assert isinstance(err, ValueError) and err.args == ("chunk too short",)