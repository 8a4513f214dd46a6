"""Array-backed binary min-heap, heap sort and heap classification."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Iterable, Iterator, Sequence


class HeapType(enum.Enum):
    MIN = "Min Heap"
    MAX = "Max Heap"
    INVALID = "Invalid Heap"


def _sift_down(items: list[int], size: int, index: int) -> None:
    while True:
        smallest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] < items[smallest]:
            smallest = left
        if right < size and items[right] < items[smallest]:
            smallest = right
        if smallest == index:
            return
        items[index], items[smallest] = items[smallest], items[index]
        index = smallest


def _heapify(items: list[int]) -> None:
    for index in range(len(items) // 2 - 1, -1, -1):
        _sift_down(items, len(items), index)


def build_min_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a min-heap in array order."""
    items = list(values)
    _heapify(items)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort into descending order by moving each heap minimum to the end."""
    items = build_min_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def check_heap_type(values: Sequence[int]) -> HeapType:
    """Classify an array as a min-heap, a max-heap or neither."""
    pairs = [
        (values[parent], values[child])
        for child in range(1, len(values))
        for parent in [(child - 1) // 2]
    ]
    if all(parent <= child for parent, child in pairs):
        return HeapType.MIN
    if all(parent >= child for parent, child in pairs):
        return HeapType.MAX
    return HeapType.INVALID


class MinHeap:
    """Min-heap of integers; iteration yields the underlying array order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = build_min_heap(values)

    def insert(self, key: int) -> None:
        items = self._items
        items.append(key)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not items[index] < items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def extract_min(self) -> int:
        if not self._items:
            raise IndexError("heap is empty")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, len(self._items), 0)
        return smallest

    def kth_smallest(self, k: int) -> int:
        """The k-th smallest value (1-based), leaving the heap untouched."""
        if not 1 <= k <= len(self._items):
            raise ValueError("Invalid k!")
        scratch = MinHeap()
        scratch._items = list(self._items)
        for _ in range(k - 1):
            scratch.extract_min()
        return scratch.extract_min()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)


def _join(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run the heap demonstration."""
    parser = argparse.ArgumentParser(description="Binary heap demonstration.")
    parser.parse_args(argv)

    heap = MinHeap([10, 5, 20, 2, 8])
    print(f"Min Heap before insertions: {_join(heap)}")

    for key in (3, 1, 15):
        heap.insert(key)
    print(f"Min Heap after insertions: {_join(heap)}")

    print(f"Sorted Array: {_join(heap_sort(heap))}")

    samples = ([2, 5, 8, 10, 15], [20, 15, 10, 5, 2], [10, 2, 20, 5, 8])
    for number, sample in enumerate(samples, start=1):
        print(f"Array {number}: {check_heap_type(sample).value}")

    k = 3
    try:
        print(f"{k}rd smallest element: {heap.kth_smallest(k)}")
    except ValueError:
        print("Invalid k!")
    return 0