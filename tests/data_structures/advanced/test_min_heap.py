import os
import random
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../../..")))

from classics.config import ClassicsConfig, set_config
from classics.data_structures.advanced.min_heap import MinHeap
from classics.exceptions import EmptyError, InvalidArgumentError


def _assert_heap_order(heap):
    size = heap.size()
    assert heap[0] is None
    for i in range(1, size + 1):
        for child in (2 * i, 2 * i + 1):
            if child <= size:
                assert not heap[child] < heap[i]
    for i in range(size + 1, heap.capacity):
        assert heap[i] is None


def _drain(heap):
    return [heap.remove() for _ in range(heap.size())]


def test_build_heap_and_incremental_add_drain_equally():
    data = [5, 9, 3, 7, 1, 4, 8, 2, 6]

    built = MinHeap.build_heap(data)
    assert built.execute() == [1, 2, 3, 5, 9, 4, 8, 7, 6]
    assert built.capacity == 2 * len(data) + 1
    _assert_heap_order(built)

    incremental = MinHeap()
    for item in data:
        incremental.add(item)
    _assert_heap_order(incremental)

    assert _drain(built) == list(range(1, 10))
    assert _drain(incremental) == list(range(1, 10))
    assert data == [5, 9, 3, 7, 1, 4, 8, 2, 6]


def test_capacity_doubles_and_never_shrinks():
    heap = MinHeap()
    assert heap.capacity == 13
    for item in range(12):
        heap.add(item)
    assert heap.capacity == 13
    heap.add(12)
    assert heap.capacity == 26
    assert heap.size() == 13

    _drain(heap)
    assert heap.is_empty()
    assert heap.capacity == 26

    heap.clear()
    assert heap.capacity == 13


def test_initial_capacity_from_config():
    set_config(ClassicsConfig(heap_initial_capacity=4))
    try:
        heap = MinHeap()
        assert heap.capacity == 4
        for item in [3, 1, 2, 0]:
            heap.add(item)
        assert heap.capacity == 8
    finally:
        set_config(None)
    assert MinHeap(initial_capacity=5).capacity == 5


def test_peek_and_remove_on_empty():
    heap = MinHeap()
    with pytest.raises(EmptyError):
        heap.remove()
    with pytest.raises(EmptyError):
        heap.peek()
    with pytest.raises(IndexError):
        heap.remove()


def test_peek_does_not_remove():
    heap = MinHeap([4, 2, 8])
    assert heap.peek() == 2
    assert len(heap) == 3
    assert heap.remove() == 2
    assert heap.peek() == 4


def test_none_rejected():
    with pytest.raises(InvalidArgumentError):
        MinHeap().add(None)
    with pytest.raises(InvalidArgumentError):
        MinHeap.build_heap(None)
    with pytest.raises(InvalidArgumentError):
        MinHeap.build_heap([3, None, 1])


def test_random_operations_keep_heap_order():
    rng = random.Random(11)
    heap = MinHeap()
    reference = []
    values = iter(rng.sample(range(100_000), 2_000))

    for _ in range(2_000):
        if reference and rng.random() < 0.4:
            smallest = min(reference)
            reference.remove(smallest)
            assert heap.remove() == smallest
        else:
            item = next(values)
            heap.add(item)
            reference.append(item)
        assert heap.size() == len(reference)
    _assert_heap_order(heap)
    assert _drain(heap) == sorted(reference)
