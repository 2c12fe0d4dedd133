"""A queue of outgoing control packets."""

from __future__ import annotations

from collections.abc import Iterable

from .packet import Packet


class ControlQueue:
    """Collects control packets until they are all taken at once."""

    def __init__(self) -> None:
        self._queue: list[Packet] = []

    def push(self, packet: Packet) -> None:
        self._queue.append(packet)

    def push_all(self, packets: Iterable[Packet]) -> None:
        self._queue.extend(packets)

    def pop_all(self) -> list[Packet]:
        """Return every queued packet in order and empty the queue."""
        packets, self._queue = self._queue, []
        return packets

    def __len__(self) -> int:
        return len(self._queue)