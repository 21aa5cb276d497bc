import pytest
from hypothesis import given, strategies as st

from dsakit.sorting import heap_sort, merge, merge_sort, quick_sort

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000))


@given(values=int_lists)
def test_sort_matches_sorted(values):
    expected = sorted(values)
    assert heap_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


@pytest.mark.parametrize(
    "values", [[3, 5, 1, 6, 2, 4], [5, 3, 8, 4, 2], [4, 2, 3, 7, 1, 3]]
)
def test_sample_examples(values):
    original = list(values)
    expected = sorted(original)

    assert heap_sort(values) == expected
    assert values == original

    assert merge_sort(values) == expected
    assert values == original

    assert quick_sort(values) == expected
    assert values == original


def test_trivial_inputs():
    assert heap_sort([]) == []
    assert heap_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]
    assert quick_sort([]) == []
    assert quick_sort([7]) == [7]


def test_accepts_any_iterable():
    assert heap_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]


@given(left=int_lists, right=int_lists)
def test_merge_sorted_halves(left, right):
    a, b = sorted(left), sorted(right)
    assert merge(a, b) == sorted(left + right)


@given(values=int_lists)
def test_merge_with_empty(values):
    ordered = sorted(values)
    assert merge(ordered, []) == ordered
    assert merge([], ordered) == ordered


@given(values=int_lists)
def test_sort_is_idempotent(values):
    once = merge_sort(values)
    assert quick_sort(once) == once
    assert heap_sort(once) == once