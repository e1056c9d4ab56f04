import pytest

from algodrills.heap import MaxHeap

SAMPLES = [
    [5],
    [3, 1, 2],
    [1, 2, 3, 4, 5, 6, 7],
    [9, 9, 1, 4, 9, 0, -3, 7],
    [-5, -1, -10, 0],
]


def _is_heap(items):
    return all(
        items[(i - 1) // 2] >= items[i] for i in range(1, len(items))
    )


def _heap_violations(items):
    return [
        i for i in range(1, len(items)) if items[(i - 1) // 2] < items[i]
    ]


@pytest.mark.parametrize("values", SAMPLES)
def test_construction_keeps_heap_order(values):
    heap = MaxHeap(values)
    stored = list(heap)
    assert _is_heap(stored)
    assert sorted(stored) == sorted(values)
    assert stored[0] == max(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_pop_returns_values_in_descending_order(values):
    heap = MaxHeap(values)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


@pytest.mark.parametrize("values", SAMPLES)
def test_heap_stays_valid_after_each_pop(values):
    heap = MaxHeap(values)
    remaining = sorted(values, reverse=True)
    while remaining:
        assert heap.pop() == remaining.pop(0)
        stored = list(heap)
        assert _heap_violations(stored) == []
        assert sorted(stored, reverse=True) == remaining
    assert len(heap) == 0


def test_push_updates_length_and_root():
    heap = MaxHeap([4, 2])
    heap.push(10)
    assert len(heap) == 3
    assert list(heap)[0] == 10
    heap.push(1)
    assert _is_heap(list(heap))
    assert len(heap) == 4


def test_empty_heap_pop_raises():
    heap = MaxHeap([])
    with pytest.raises(IndexError):
        heap.pop()


def test_pop_after_draining_raises():
    heap = MaxHeap([1])
    assert heap.pop() == 1
    with pytest.raises(IndexError):
        heap.pop()