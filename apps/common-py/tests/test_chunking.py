"""Tests for sequence chunking."""

import math

import pytest

from common.utils.chunking import chunk


def test_chunk_pairs():
    assert chunk([1, 2, 3, 4, 5, 6], 2) == [[1, 2], [3, 4], [5, 6]]


def test_chunk_keeps_partial_final_group():
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]


def test_chunk_empty_input():
    assert chunk([], 2) == []


def test_chunk_accepts_iterators():
    assert chunk(iter("abcde"), 3) == [["a", "b", "c"], ["d", "e"]]


@pytest.mark.parametrize("length", range(0, 12))
@pytest.mark.parametrize("size", [1, 2, 3, 5])
def test_chunk_shape_and_order(length, size):
    items = list(range(length))
    groups = chunk(items, size)

    assert len(groups) == math.ceil(length / size)
    assert all(len(group) == size for group in groups[:-1])
    if groups:
        assert 1 <= len(groups[-1]) <= size
    assert [item for group in groups for item in group] == items


@pytest.mark.parametrize("size", [0, -1])
def test_chunk_rejects_invalid_size(size):
    with pytest.raises(ValueError, match="at least 1"):
        chunk([1, 2, 3], size)
