# sctpkit

Pure-Python encoding and decoding of SCTP (RFC 4960 / RFC 6525) wire
structures: the common packet header with its CRC32c checksum, chunks,
type-length-value parameters and error causes. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

## Modules

- `sctpkit.packet`: `Packet` (source and destination port, verification tag,
  chunks) with `from_bytes` and `to_bytes`, and `generate_packet_checksum`.
  Decoding checks the checksum and raises `ChecksumMismatchError` when it is
  wrong; encoding pads each chunk to a multiple of 4 bytes and fills the
  checksum in. ABORT, ERROR, COOKIE-ECHO and COOKIE-ACK chunks are decoded
  as a plain `ChunkHeader` (type, flags, opaque value); any other type
  without a decoder raises `PacketError`.
- `sctpkit.chunktype`: the `ChunkType` enum and `chunk_type_name`.
- `sctpkit.chunkheader`: `ChunkHeader`, `parse_chunk_header`, `build_chunk`,
  `padding_length` and `pad`.
- Chunks, each with `from_bytes`, `to_bytes` and `check`:
  - `sctpkit.init`: `ChunkInit`, `ChunkInitAck` and their shared body
    `InitCommon` (`from_value`, `value_bytes`).
  - `sctpkit.payload_data`: `ChunkPayloadData` and the
    `PayloadProtocolIdentifier` enum with `payload_type_name`. The chunk
    also keeps sender-side state: `abandoned`, `set_abandoned` and
    `set_all_inflight` act on the first fragment of a message through `head`.
  - `sctpkit.selective_ack`: `ChunkSelectiveAck` and `GapAckBlock`.
  - `sctpkit.heartbeat`: `ChunkHeartbeat` (decode only; `to_bytes` raises
    `UnimplementedError`) and `ChunkHeartbeatAck` (encode only, with exactly
    one `HeartbeatInfo` parameter; `from_bytes` raises `UnimplementedError`).
  - `sctpkit.reconfig`: `ChunkReconfig` with one or two parameters.
  - `sctpkit.forward_tsn`: `ChunkForwardTSN` and `ForwardTSNStream`.
  - `sctpkit.shutdown`: `ChunkShutdown`, `ChunkShutdownAck` and
    `ChunkShutdownComplete`.
- `sctpkit.params`: `ParamType`, the base `Param`, and `ForwardTSNSupported`,
  `ECNCapable`, `HeartbeatInfo`, `RandomParam`, `ChunkList` and
  `OutgoingResetRequest`, with `parse_param_type` and `build_param`.
  Supported-extensions, requested-HMAC-algorithm, state-cookie and
  reconfig-response parameters are decoded as a plain `Param` holding the
  raw value.
- `sctpkit.error_causes`: `ErrorCauseCode`, `error_cause_name`, the base
  `ErrorCause`, and `InvalidMandatoryParameter`, `UnrecognizedChunkType`,
  `ProtocolViolation` and `UserInitiatedAbort`, with `build_error_cause`.
- `sctpkit.control_queue`: `ControlQueue`, which collects packets with
  `push` and `push_all` and hands them all back with `pop_all`.

## Example

```python
from sctpkit.packet import Packet
from sctpkit.shutdown import ChunkShutdown

raw_chunk = bytes([0x07, 0x00, 0x00, 0x08, 0x12, 0x34, 0x56, 0x78])
chunk = ChunkShutdown.from_bytes(raw_chunk)
print(chunk)                       # SHUTDOWN
print(chunk.cumulative_tsn_ack)    # 305419896
assert chunk.to_bytes() == raw_chunk

header_only = bytes([0x13, 0x88, 0x13, 0x88, 0, 0, 0, 0, 0x06, 0xA9, 0x00, 0xE1])
packet = Packet.from_bytes(header_only)
assert packet.source_port == 5000
assert packet.to_bytes() == header_only
```

## Errors

Every error is a subclass of `sctpkit.errors.SctpError` (itself a
`ValueError`): `ChunkHeaderError`, `ChunkTypeMismatchError`,
`ChunkTooShortError`, `ParamError`, `ParamTypeUnhandledError`,
`ErrorCauseError`, `PacketError`, `ChecksumMismatchError`,
`UnimplementedError` and `ChunkValidationError`.

`check()` on `ChunkInit` and `ChunkInitAck` returns `False` for a valid chunk
and raises `ChunkValidationError` (with `abort` set) when the initiate tag or
a stream count is zero or the advertised receiver window is below 1500.
On the other chunks `check()` returns whether the chunk calls for an abort:
`True` for `ChunkForwardTSN` and `ChunkReconfig`, `False` otherwise.

## What it does not do

sctpkit only turns bytes into objects and back. It has no association state
machine, no streams, no timers or retransmission, and opens no sockets;
sending and receiving packets is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```