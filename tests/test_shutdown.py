import pytest

from sctpkit.errors import ChunkTypeMismatchError, SctpError
from sctpkit.shutdown import ChunkShutdown, ChunkShutdownAck, ChunkShutdownComplete


def test_shutdown_round_trip():
    binary = bytes([0x07, 0x00, 0x00, 0x08, 0x12, 0x34, 0x56, 0x78])
    chunk = ChunkShutdown.from_bytes(binary)
    assert chunk.cumulative_tsn_ack == 0x12345678
    assert chunk.to_bytes() == binary


@pytest.mark.parametrize(
    "binary",
    [
        bytes([0x07, 0x00, 0x00, 0x07, 0x12, 0x34, 0x56, 0x78]),
        bytes([0x07, 0x00, 0x00, 0x09, 0x12, 0x34, 0x56, 0x78]),
        bytes([0x07, 0x00, 0x00, 0x08, 0x12, 0x34, 0x56]),
        bytes([0x07, 0x00, 0x00, 0x08, 0x12, 0x34, 0x56, 0x78, 0x9F]),
        bytes([0x08, 0x00, 0x00, 0x08, 0x12, 0x34, 0x56, 0x78]),
    ],
    ids=[
        "length too short",
        "length too long",
        "payload too short",
        "payload too long",
        "invalid type",
    ],
)
def test_shutdown_failure(binary):
    with pytest.raises(SctpError):
        ChunkShutdown.from_bytes(binary)


def test_shutdown_wrong_type_message():
    with pytest.raises(ChunkTypeMismatchError, match="actually is SHUTDOWN-ACK"):
        ChunkShutdown.from_bytes(bytes([0x08, 0x00, 0x00, 0x08, 0x12, 0x34, 0x56, 0x78]))


def test_shutdown_invalid_size_with_zero_padding():
    with pytest.raises(SctpError, match="invalid chunk size"):
        ChunkShutdown.from_bytes(bytes([0x07, 0x00, 0x00, 0x07, 0x12, 0x34, 0x56, 0x00]))


def test_shutdown_ack_round_trip():
    binary = bytes([0x08, 0x00, 0x00, 0x04])
    assert ChunkShutdownAck.from_bytes(binary).to_bytes() == binary


@pytest.mark.parametrize(
    "binary",
    [
        bytes([0x08, 0x00, 0x00]),
        bytes([0x08, 0x00, 0x00, 0x04, 0x12]),
        bytes([0x0F, 0x00, 0x00, 0x04]),
    ],
    ids=["length too short", "length too long", "invalid type"],
)
def test_shutdown_ack_failure(binary):
    with pytest.raises(SctpError):
        ChunkShutdownAck.from_bytes(binary)


def test_shutdown_complete_round_trip():
    binary = bytes([0x0E, 0x00, 0x00, 0x04])
    assert ChunkShutdownComplete.from_bytes(binary).to_bytes() == binary


def test_shutdown_complete_keeps_flags():
    binary = bytes([0x0E, 0x01, 0x00, 0x04])
    chunk = ChunkShutdownComplete.from_bytes(binary)
    assert chunk.flags == 1
    assert chunk.to_bytes() == binary


@pytest.mark.parametrize(
    "binary",
    [
        bytes([0x0E, 0x00, 0x00]),
        bytes([0x0E, 0x00, 0x00, 0x04, 0x12]),
        bytes([0x0F, 0x00, 0x00, 0x04]),
    ],
    ids=["length too short", "length too long", "invalid type"],
)
def test_shutdown_complete_failure(binary):
    with pytest.raises(SctpError):
        ChunkShutdownComplete.from_bytes(binary)


def test_checks_do_not_abort():
    assert ChunkShutdown().check() is False
    assert ChunkShutdownAck().check() is False
    assert ChunkShutdownComplete().check() is False


def test_strings():
    assert str(ChunkShutdown()) == "SHUTDOWN"
    assert str(ChunkShutdownAck()) == "SHUTDOWN-ACK"
    assert str(ChunkShutdownComplete()) == "SHUTDOWN-COMPLETE"