import pytest

from sctpkit.chunkheader import pad
from sctpkit.errors import ChunkHeaderError, ParamError
from sctpkit.params import OutgoingResetRequest
from sctpkit.reconfig import ChunkReconfig


def param_a() -> bytes:
    return bytes([0x0, 0xD, 0x0, 0x16, 0x0, 0x0, 0x0, 0x1, 0x0, 0x0, 0x0, 0x2,
                  0x0, 0x0, 0x0, 0x3, 0x0, 0x4, 0x0, 0x5, 0x0, 0x6])


def param_b() -> bytes:
    return bytes([0x0, 0xD, 0x0, 0x10, 0x0, 0x0, 0x0, 0x1, 0x0, 0x0, 0x0, 0x2,
                  0x0, 0x0, 0x0, 0x3])


@pytest.mark.parametrize(
    "binary",
    [
        bytes([0x82, 0x0, 0x0, 0x1A]) + param_a(),
        bytes([0x82, 0x0, 0x0, 0x14]) + param_b(),
        bytes([0x82, 0x0, 0x0, 0x2C]) + pad(param_a(), 2) + param_b(),
        bytes([0x82, 0x0, 0x0, 0x2A]) + param_b() + param_a(),
    ],
)
def test_reconfig_round_trip(binary):
    chunk = ChunkReconfig.from_bytes(binary)
    assert chunk.to_bytes() == binary


def test_reconfig_parsed_params():
    chunk = ChunkReconfig.from_bytes(bytes([0x82, 0x0, 0x0, 0x2C]) + pad(param_a(), 2) + param_b())
    assert chunk.param_a == OutgoingResetRequest(1, 2, 3, [4, 5, 6])
    assert chunk.param_b == OutgoingResetRequest(1, 2, 3, [])


def test_reconfig_single_param_has_no_b():
    chunk = ChunkReconfig.from_bytes(bytes([0x82, 0x0, 0x0, 0x14]) + param_b())
    assert chunk.param_b is None


@pytest.mark.parametrize(
    "binary, error",
    [
        (bytes([0x82]), ChunkHeaderError),
        (bytes([0x82, 0x0, 0x0, 0x4]), ParamError),
        (bytes([0x82, 0x0, 0x0, 0x8, 0x0, 0xD, 0x0, 0x0]), ParamError),
        (bytes([0x82, 0x0, 0x0, 0x18]) + param_b() + bytes([0x0, 0xD, 0x0, 0x0]), ParamError),
    ],
    ids=["header too short", "missing param type A", "wrong param A", "wrong param B"],
)
def test_reconfig_unmarshal_failure(binary, error):
    with pytest.raises(error):
        ChunkReconfig.from_bytes(binary)


def test_reconfig_marshal_without_param_a():
    with pytest.raises(ParamError):
        ChunkReconfig().to_bytes()


def test_reconfig_check_aborts():
    assert ChunkReconfig.from_bytes(bytes([0x82, 0x0, 0x0, 0x14]) + param_b()).check() is True


def test_reconfig_str_lists_params():
    chunk = ChunkReconfig.from_bytes(bytes([0x82, 0x0, 0x0, 0x2A]) + param_b() + param_a())
    text = str(chunk)
    assert text.startswith("Param A:\n ")
    assert "Param B:\n " in text