"""Sequence chunking helpers."""

from collections.abc import Iterable
from itertools import islice
from typing import TypeVar

T = TypeVar("T")


def chunk(items: Iterable[T], size: int = 2) -> list[list[T]]:
    """Split items into consecutive groups of ``size`` elements.

    Order is preserved. When the number of items is not a multiple of
    ``size`` the final group is shorter.

    Args:
        items: Items to split
        size: Number of elements per group (must be at least 1)

    Returns:
        List of groups

    Raises:
        ValueError: If size is smaller than 1
    """
    if size < 1:
        raise ValueError(f"Chunk size must be at least 1, got {size}")

    iterator = iter(items)
    chunks: list[list[T]] = []
    while group := list(islice(iterator, size)):
        chunks.append(group)
    return chunks
