"""Encoding and decoding of SCTP packets, chunks, parameters and error causes."""

__version__ = "0.1.0"

__all__ = [
    "chunkheader",
    "chunktype",
    "control_queue",
    "error_causes",
    "errors",
    "forward_tsn",
    "heartbeat",
    "init",
    "packet",
    "params",
    "payload_data",
    "reconfig",
    "selective_ack",
    "shutdown",
]