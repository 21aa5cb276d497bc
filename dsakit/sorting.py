"""Comparison sorts: heap sort, merge sort and quick sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Return a new ascending list built with an in-place max-heap."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def merge(left: Sequence, right: Sequence) -> list:
    """Merge two ascending sequences into one ascending list."""
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable) -> list:
    """Return a new ascending list by recursive halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable) -> list:
    """Return a new ascending list, partitioning around the last element."""
    items = list(values)
    if len(items) < 2:
        return items
    pivot = items[-1]
    rest = items[:-1]
    smaller = [v for v in rest if v < pivot]
    larger = [v for v in rest if not v < pivot]
    return [*quick_sort(smaller), pivot, *quick_sort(larger)]