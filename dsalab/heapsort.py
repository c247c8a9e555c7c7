"""Max-heap sorting of marks, used to find the highest and lowest scores."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def heapify(values: list[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down so the first ``size`` items keep the max-heap property."""
    while True:
        left = 2 * index + 1
        right = 2 * index + 2
        largest = index
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted with a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        heapify(items, size, index)
    for end in range(size - 1, -1, -1):
        items[end], items[0] = items[0], items[end]
        heapify(items, end, 0)
    return items


def mark_extremes(marks: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(maximum, minimum)`` of the marks; raise ValueError if there are none."""
    ordered = heap_sort(marks)
    if not ordered:
        raise ValueError("at least one mark is required")
    return ordered[-1], ordered[0]