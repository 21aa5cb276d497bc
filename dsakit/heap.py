"""Binary max-heap and min-heap backed by a Python list."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

_Before = Callable[[Any, Any], bool]


def _sift_up(data: list, index: int, before: _Before) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not before(data[index], data[parent]):
            return
        data[index], data[parent] = data[parent], data[index]
        index = parent


def _sift_down(data: list, index: int, before: _Before) -> None:
    size = len(data)
    while True:
        left = 2 * index + 1
        right = left + 1
        best = index
        if left < size and before(data[left], data[best]):
            best = left
        if right < size and before(data[right], data[best]):
            best = right
        if best == index:
            return
        data[index], data[best] = data[best], data[index]
        index = best


def _pop_root(data: list, before: _Before) -> Any:
    if not data:
        raise IndexError("heap is empty")
    root = data[0]
    last = data.pop()
    if data:
        data[0] = last
        _sift_down(data, 0, before)
    return root


class MaxHeap:
    """A heap whose root is always its largest value."""

    _before = staticmethod(operator.gt)

    def __init__(self, values: Iterable = ()) -> None:
        self._data: list = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        _sift_up(self._data, len(self._data) - 1, self._before)

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def extract_max(self) -> Any:
        """Remove and return the largest value."""
        return _pop_root(self._data, self._before)


class MinHeap:
    """A heap whose root is always its smallest value."""

    _before = staticmethod(operator.lt)

    def __init__(self, values: Iterable = ()) -> None:
        self._data: list = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        _sift_up(self._data, len(self._data) - 1, self._before)

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def extract_min(self) -> Any:
        """Remove and return the smallest value."""
        return _pop_root(self._data, self._before)

    def delete(self, index: int) -> Any:
        """Remove and return the value stored at heap position ``index``."""
        if not 0 <= index < len(self._data):
            raise IndexError("index out of range")
        removed = self._data[index]
        last = self._data.pop()
        if index < len(self._data):
            self._data[index] = last
            _sift_down(self._data, index, self._before)
            _sift_up(self._data, index, self._before)
        return removed