from sctpkit.control_queue import ControlQueue
from sctpkit.packet import Packet


def test_new_queue_is_empty():
    queue = ControlQueue()
    assert len(queue) == 0
    assert queue.pop_all() == []


def test_push_and_pop_all_keeps_order():
    queue = ControlQueue()
    first, second, third = Packet(1, 2, 3), Packet(4, 5, 6), Packet(7, 8, 9)
    queue.push(first)
    queue.push_all([second, third])
    assert len(queue) == 3
    assert queue.pop_all() == [first, second, third]


def test_pop_all_empties_queue():
    queue = ControlQueue()
    queue.push(Packet(1, 1, 1))
    queue.pop_all()
    assert len(queue) == 0
    assert queue.pop_all() == []


def test_popped_list_is_independent():
    queue = ControlQueue()
    queue.push(Packet(1, 1, 1))
    popped = queue.pop_all()
    queue.push(Packet(2, 2, 2))
    assert popped == [Packet(1, 1, 1)]
    assert queue.pop_all() == [Packet(2, 2, 2)]