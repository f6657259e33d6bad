"""Combinations with repetition over an ordered pool of slots."""

from __future__ import annotations

from math import comb
from typing import Iterator, List, Sequence, Tuple, TypeVar


T = TypeVar("T")


def count_combinations_with_repetition(pool_size: int, k: int) -> int:
    """Return C(n + k - 1, k), the number of size-k multisets over n slots."""
    if k < 0 or pool_size < 0:
        return 0
    if k == 0:
        return 1
    if pool_size == 0:
        return 0
    return comb(pool_size + k - 1, k)


def iter_combinations_with_repetition(pool: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """Yield every size-k selection from ``pool`` allowing repeats.

    Selections are made over pool slots, not distinct values: a pool holding
    the same value twice contributes two slots. Slot indices are kept
    non-decreasing, so selections that differ only in order are produced once.
    Output is in lexicographic order of slot indices.
    """
    items = tuple(pool)
    n = len(items)
    if k < 0:
        return
    if k == 0:
        yield ()
        return
    if n == 0:
        return

    indices = [0] * k
    while True:
        yield tuple(items[i] for i in indices)
        # Rightmost position that can still advance.
        pos = k - 1
        while pos >= 0 and indices[pos] == n - 1:
            pos -= 1
        if pos < 0:
            return
        next_index = indices[pos] + 1
        for j in range(pos, k):
            indices[j] = next_index


def combinations_with_repetition(pool: Sequence[T], k: int) -> List[Tuple[T, ...]]:
    """Materialize :func:`iter_combinations_with_repetition` into a list."""
    return list(iter_combinations_with_repetition(pool, k))
