"""Array algorithms: elementary sorts, searches and in-place rearrangements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SortStep:
    """State of a sort after one pass: the pass number, the element it placed
    and a snapshot of the whole sequence."""

    step: int
    value: Any
    snapshot: tuple


def _out_of_order(left: Any, right: Any, descending: bool) -> bool:
    return left < right if descending else left > right


def bubble_sort(values: Iterable, descending: bool = False) -> list:
    """Return a new list with the values bubble-sorted."""
    items = list(values)
    n = len(items)
    for _ in range(n - 1):
        swapped = False
        for j in range(n - 1):
            if _out_of_order(items[j], items[j + 1], descending):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _insertion_passes(items: list, descending: bool) -> Iterator[SortStep]:
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and _out_of_order(items[j], key, descending):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
        yield SortStep(i, key, tuple(items))


def insertion_sort(values: Iterable, descending: bool = False) -> list:
    """Return a new list with the values insertion-sorted."""
    items = list(values)
    deque(_insertion_passes(items, descending), maxlen=0)
    return items


def insertion_sort_steps(values: Iterable, descending: bool = False) -> Iterator[SortStep]:
    """Yield the state after each element is inserted into the sorted prefix."""
    yield from _insertion_passes(list(values), descending)


def _selection_passes(items: list, descending: bool) -> Iterator[SortStep]:
    for i in range(len(items) - 1):
        chosen = i
        for j in range(i + 1, len(items)):
            if _out_of_order(items[chosen], items[j], descending):
                chosen = j
        items[i], items[chosen] = items[chosen], items[i]
        yield SortStep(i + 1, items[i], tuple(items))


def selection_sort(values: Iterable, descending: bool = False) -> list:
    """Return a new list with the values selection-sorted."""
    items = list(values)
    deque(_selection_passes(items, descending), maxlen=0)
    return items


def selection_sort_steps(values: Iterable, descending: bool = False) -> Iterator[SortStep]:
    """Yield the state after each position receives its selected element."""
    yield from _selection_passes(list(values), descending)


def insert_at(values: Iterable, index: int, value: Any) -> list:
    """Return a new list with ``value`` inserted before position ``index``.

    ``index`` may range from 0 to the length of the sequence inclusive.
    """
    items = list(values)
    if not 0 <= index <= len(items):
        raise IndexError(f"insert position {index} out of range 0..{len(items)}")
    return [*items[:index], value, *items[index:]]


def linear_search(values: Iterable, target: Any) -> int:
    """Return the index of the first element equal to ``target``, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def binary_search(values: Sequence, target: Any) -> int:
    """Return an index of ``target`` in the ascending ``values``, or -1."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def max_min(values: Iterable) -> tuple[Any, Any]:
    """Return ``(largest, smallest)`` of the values in one pass."""
    iterator = iter(values)
    try:
        largest = smallest = next(iterator)
    except StopIteration:
        raise ValueError("max_min() arg is an empty sequence") from None
    for value in iterator:
        if value > largest:
            largest = value
        if value < smallest:
            smallest = value
    return largest, smallest


def reverse_in_place(values: MutableSequence) -> MutableSequence:
    """Reverse ``values`` in place and return it."""
    values.reverse()
    return values


def swap_alternate(values: MutableSequence) -> MutableSequence:
    """Swap each pair of neighbours (0 with 1, 2 with 3, ...) in place."""
    paired = len(values) - len(values) % 2
    values[0:paired:2], values[1:paired:2] = values[1:paired:2], values[0:paired:2]
    return values


def zeros_to_end(values: MutableSequence) -> MutableSequence:
    """Move every zero to the end in place, keeping the other values' order."""
    nonzero = [value for value in values if value != 0]
    values[:] = nonzero + [0] * (len(values) - len(nonzero))
    return values


def zeros_to_front(values: MutableSequence) -> MutableSequence:
    """Move every zero to the front in place, keeping the other values' order."""
    nonzero = [value for value in values if value != 0]
    values[:] = [0] * (len(values) - len(nonzero)) + nonzero
    return values