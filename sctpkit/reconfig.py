"""The RE-CONFIG chunk used to reset streams."""

from __future__ import annotations

from dataclasses import dataclass

from .chunkheader import build_chunk, pad, padding_length, parse_chunk_header
from .chunktype import ChunkType
from .errors import ParamError
from .params import Param, build_param, parse_param_type


def _decode_param(raw: bytes) -> Param:
    try:
        param_type = parse_param_type(raw)
    except ParamError as exc:
        raise ParamError(f"failed to parse param type: {exc}") from exc
    return build_param(param_type, raw)


@dataclass
class ChunkReconfig:
    """Carries one or two re-configuration parameters."""

    param_a: Param | None = None
    param_b: Param | None = None
    flags: int = 0

    @classmethod
    def from_bytes(cls, raw: bytes) -> ChunkReconfig:
        _typ, flags, value = parse_chunk_header(raw)
        param_a = _decode_param(value)
        length = param_a.length()
        offset = length + padding_length(length)
        param_b = _decode_param(value[offset:]) if len(value) > offset else None
        return cls(param_a, param_b, flags)

    def to_bytes(self) -> bytes:
        if self.param_a is None:
            raise ParamError("unable to marshal parameter A for reconfig: missing")
        try:
            out = self.param_a.to_bytes()
        except (ParamError, ValueError) as exc:
            raise ParamError(f"unable to marshal parameter A for reconfig: {exc}") from exc
        if self.param_b is not None:
            out = pad(out, padding_length(len(out)))
            try:
                out += self.param_b.to_bytes()
            except (ParamError, ValueError) as exc:
                raise ParamError(f"unable to marshal parameter B for reconfig: {exc}") from exc
        return build_chunk(ChunkType.RECONFIG, self.flags, out)

    def check(self) -> bool:
        """Return whether receiving this chunk calls for an abort."""
        return True

    def __str__(self) -> str:
        text = f"Param A:\n {self.param_a}"
        if self.param_b is not None:
            text += f"Param B:\n {self.param_b}"
        return text