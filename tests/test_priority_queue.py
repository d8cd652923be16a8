import pytest

from streetmap.graph.priority_queue import UpdatablePriorityQueue


def test_pops_in_priority_order():
    pq = UpdatablePriorityQueue()
    for item, priority in [("c", 3.0), ("a", 1.0), ("b", 2.0)]:
        pq.add(item, priority)

    assert [pq.pop(), pq.pop(), pq.pop()] == ["a", "b", "c"]
    assert len(pq) == 0


def test_equal_priorities_pop_in_insertion_order():
    pq = UpdatablePriorityQueue()
    for item in ["x", "y", "z"]:
        pq.add(item, 1.0)

    assert [pq.pop(), pq.pop(), pq.pop()] == ["x", "y", "z"]


def test_change_priority_reorders_and_drops_stale_entry():
    pq = UpdatablePriorityQueue()
    pq.add("a", 5.0)
    pq.add("b", 3.0)

    pq.change_priority("a", 1.0)

    assert len(pq) == 2
    assert pq.peek() == "a"
    assert pq.pop() == "a"
    assert pq.pop() == "b"
    assert not pq


def test_change_priority_can_increase():
    pq = UpdatablePriorityQueue()
    pq.add("a", 1.0)
    pq.add("b", 2.0)

    pq.change_priority("a", 10.0)

    assert pq.peek() == "b"


def test_membership_tracks_pops():
    pq = UpdatablePriorityQueue()
    pq.add(1, 0.0)

    assert 1 in pq
    pq.pop()
    assert 1 not in pq


def test_empty_queue_raises():
    pq = UpdatablePriorityQueue()

    with pytest.raises(IndexError):
        pq.peek()
    with pytest.raises(IndexError):
        pq.pop()


def test_duplicate_add_and_unknown_change_raise():
    pq = UpdatablePriorityQueue()
    pq.add("a", 1.0)

    with pytest.raises(ValueError):
        pq.add("a", 2.0)
    with pytest.raises(KeyError):
        pq.change_priority("missing", 0.0)
