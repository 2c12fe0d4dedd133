import pytest

from sctpkit.chunkheader import build_chunk
from sctpkit.chunktype import ChunkType
from sctpkit.errors import (
    ChunkHeaderError,
    ChunkTooShortError,
    ChunkTypeMismatchError,
    ParamError,
    UnimplementedError,
)
from sctpkit.heartbeat import ChunkHeartbeat, ChunkHeartbeatAck
from sctpkit.params import ECNCapable, HeartbeatInfo


def _heartbeat(info: bytes) -> bytes:
    return build_chunk(ChunkType.HEARTBEAT, 0, HeartbeatInfo(info).to_bytes())


def test_heartbeat_parses_info():
    chunk = ChunkHeartbeat.from_bytes(_heartbeat(b"\x01\x02\x03\x04"))
    assert chunk.params == [HeartbeatInfo(b"\x01\x02\x03\x04")]


def test_heartbeat_with_padding():
    raw = _heartbeat(b"\x09\x08\x07") + b"\x00"
    chunk = ChunkHeartbeat.from_bytes(raw)
    assert chunk.params[0].heartbeat_information == b"\x09\x08\x07"


def test_heartbeat_wrong_type():
    raw = build_chunk(ChunkType.SACK, 0, HeartbeatInfo(b"x").to_bytes())
    with pytest.raises(ChunkTypeMismatchError):
        ChunkHeartbeat.from_bytes(raw)


def test_heartbeat_without_info():
    with pytest.raises(ChunkTooShortError):
        ChunkHeartbeat.from_bytes(build_chunk(ChunkType.HEARTBEAT, 0, b""))


def test_heartbeat_with_other_param():
    raw = build_chunk(ChunkType.HEARTBEAT, 0, ECNCapable().to_bytes())
    with pytest.raises(ParamError):
        ChunkHeartbeat.from_bytes(raw)


def test_heartbeat_header_too_small():
    with pytest.raises(ChunkHeaderError):
        ChunkHeartbeat.from_bytes(b"\x04\x00")


def test_heartbeat_marshal_unimplemented():
    with pytest.raises(UnimplementedError):
        ChunkHeartbeat([HeartbeatInfo(b"a")]).to_bytes()


def test_heartbeat_check_does_not_abort():
    assert ChunkHeartbeat().check() is False


def test_heartbeat_ack_wire_bytes():
    ack = ChunkHeartbeatAck([HeartbeatInfo(b"\xaa")])
    assert ack.to_bytes() == bytes([0x05, 0x00, 0x00, 0x09, 0x00, 0x01, 0x00, 0x05, 0xAA])


def test_heartbeat_ack_echoes_heartbeat_info():
    received = ChunkHeartbeat.from_bytes(_heartbeat(b"opaque-state"))
    ack = ChunkHeartbeatAck(received.params)
    expected = build_chunk(ChunkType.HEARTBEAT_ACK, 0, HeartbeatInfo(b"opaque-state").to_bytes())
    assert ack.to_bytes() == expected


@pytest.mark.parametrize(
    "params",
    [[], [HeartbeatInfo(b"a"), HeartbeatInfo(b"b")], [ECNCapable()]],
)
def test_heartbeat_ack_rejects_bad_params(params):
    with pytest.raises(ParamError):
        ChunkHeartbeatAck(params).to_bytes()


def test_heartbeat_ack_unmarshal_unimplemented():
    with pytest.raises(UnimplementedError):
        ChunkHeartbeatAck.from_bytes(b"\x05\x00\x00\x04")


def test_heartbeat_ack_check_does_not_abort():
    assert ChunkHeartbeatAck().check() is False