"""Unordered pair generation over a dataset."""

from collections.abc import Sequence
from itertools import combinations
from typing import TypeVar

T = TypeVar("T")


def pairwise_indices(n: int) -> list[tuple[int, int]]:
    """All position pairs (i, j) with i < j, by ascending i then j."""
    return list(combinations(range(n), 2))


def pairwise(items: Sequence[T]) -> list[tuple[T, T]]:
    """Return every unordered pair of items at distinct positions.

    Pairs are formed by position, so equal values at two positions still
    pair; an item is never paired with itself. For n items the result
    has n * (n - 1) / 2 entries.

    Args:
        items: The dataset.

    Returns:
        Pairs ordered by the first position, then the second.
    """
    return [(items[i], items[j]) for i, j in pairwise_indices(len(items))]
