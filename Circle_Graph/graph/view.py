from __future__ import annotations

import numpy as np

from .model import AdjacencyMatrix


class GraphView:
    """Answer edge queries under the directed or undirected interpretation.

    The view never stores the active mode. Every query takes ``directed`` so
    the caller owning the toggle decides which interpretation applies.
    """

    def __init__(self, matrix: AdjacencyMatrix) -> None:
        self.matrix = matrix
        self._undirected = matrix.symmetric()

    @property
    def size(self) -> int:
        return self.matrix.size

    def matrix_for(self, directed: bool) -> np.ndarray:
        """Return the read-only boolean array for the chosen mode."""
        return self.matrix.data if directed else self._undirected

    def edge_exists(self, i: int, j: int, directed: bool) -> bool:
        """Return ``True`` if ``(i, j)`` is an edge under ``directed``."""
        return bool(self.matrix_for(directed)[i, j])

    def undirected_edge(self, i: int, j: int) -> bool:
        return bool(self._undirected[i, j])

    def neighbours(self, node: int, directed: bool) -> list[int]:
        """Return neighbours of ``node`` in ascending order."""
        return [int(m) for m in np.flatnonzero(self.matrix_for(directed)[node])]
