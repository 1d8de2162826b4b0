from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class AdjacencyMatrix:
    """Immutable ``N x N`` boolean adjacency matrix.

    Entry ``(i, j)`` is ``True`` when the directed edge ``i -> j`` exists.
    Self-loops ``(i, i)`` are valid entries. The backing array is marked
    read-only on construction so neither the matrix nor anything derived from
    it can drift after generation.
    """

    data: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        arr = np.array(self.data, dtype=bool, copy=True)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"adjacency matrix must be square, got {arr.shape}")
        arr.flags.writeable = False
        object.__setattr__(self, "data", arr)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple[int, int]]) -> "AdjacencyMatrix":
        """Build a matrix with ``n`` nodes and the given directed ``edges``."""

        arr = np.zeros((n, n), dtype=bool)
        for src, dst in edges:
            arr[src, dst] = True
        return cls(arr)

    @property
    def size(self) -> int:
        """Number of nodes."""
        return int(self.data.shape[0])

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, key: tuple[int, int]) -> bool:
        i, j = key
        return bool(self.data[i, j])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def __hash__(self) -> int:
        return hash(self.data.tobytes())

    def edges(self) -> list[tuple[int, int]]:
        """Return all directed edges ``(i, j)`` in row-major order."""

        return [(int(i), int(j)) for i, j in zip(*np.nonzero(self.data))]

    def has_outgoing(self, node: int) -> bool:
        """Return ``True`` if ``node`` has at least one outgoing edge."""
        return bool(self.data[node].any())

    def first_with_outgoing(self) -> int | None:
        """Return the first node with an outgoing edge, or ``None``."""

        rows = np.flatnonzero(self.data.any(axis=1))
        if rows.size == 0:
            return None
        return int(rows[0])

    def symmetric(self) -> np.ndarray:
        """Return the undirected OR-closure ``data | data.T`` (read-only)."""

        sym = self.data | self.data.T
        sym.flags.writeable = False
        return sym

    def to_networkx(self, directed: bool = True):
        """Return the matrix as a ``networkx`` graph.

        Self-loops are kept. With ``directed=False`` the result is the
        undirected interpretation.
        """

        import networkx as nx

        g = nx.DiGraph() if directed else nx.Graph()
        g.add_nodes_from(range(self.size))
        g.add_edges_from(self.edges())
        return g

    def component_count(self) -> int:
        """Number of weakly connected components."""

        import networkx as nx

        return nx.number_connected_components(self.to_networkx(directed=False))
