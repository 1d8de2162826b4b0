"""Invariant checks for generated graphs and traversal runs."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def symmetric(matrix: np.ndarray) -> bool:
    """Ensure an undirected matrix equals its transpose."""

    return bool(np.array_equal(matrix, matrix.T))


def or_closure(directed: np.ndarray, undirected: np.ndarray) -> bool:
    """Check ``undirected[i, j] == directed[i, j] or directed[j, i]``."""

    return bool(np.array_equal(undirected, directed | directed.T))


def single_progress(before: np.ndarray, after: np.ndarray) -> bool:
    """A step marks exactly one new node or leaves the flags untouched."""

    if not np.all(after[before]):
        return False
    added = int(after.sum()) - int(before.sum())
    return added in (0, 1)


def monotone(before: np.ndarray, after: np.ndarray) -> bool:
    """No flag set in ``before`` is cleared in ``after``."""

    return bool(np.all(after[before]))


def visits_each_once(order: Sequence[int], n: int) -> bool:
    """``order`` is a permutation of ``range(n)``."""

    return sorted(order) == list(range(n))
