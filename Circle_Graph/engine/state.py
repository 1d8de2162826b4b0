"""Visitation bookkeeping for the traversal engine.

The module defines the :class:`Edge` record pushed through the frontier and
the :class:`VisitationState` arrays that renderers read back. Visited edges
are always keyed on the directed pair, whichever view drives the traversal.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Edge:
    """A frontier entry from ``source`` to ``target``.

    ``source == target`` is either a real self-loop or, with ``seed`` set, a
    marker restarting the traversal at an unvisited node.
    """

    source: int
    target: int
    seed: bool = False

    @property
    def is_loop(self) -> bool:
        return self.source == self.target


class VisitationState:
    """Visited-node and visited-edge flags for ``n`` nodes."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.nodes = np.zeros(n, dtype=bool)
        self.edges = np.zeros((n, n), dtype=bool)

    def reset(self) -> None:
        """Clear every visited flag."""
        self.nodes[:] = False
        self.edges[:, :] = False

    def mark_node(self, v: int) -> None:
        self.nodes[v] = True

    def mark_edge(self, src: int, dst: int) -> None:
        self.edges[src, dst] = True

    def is_node_visited(self, v: int) -> bool:
        return bool(self.nodes[v])

    def is_edge_visited(self, src: int, dst: int) -> bool:
        return bool(self.edges[src, dst])

    def all_nodes_visited(self) -> bool:
        return bool(self.nodes.all())

    def first_unvisited(self) -> int | None:
        """Return the lowest unvisited node, or ``None`` when all are visited."""

        idx = np.flatnonzero(~self.nodes)
        if idx.size == 0:
            return None
        return int(idx[0])

    @property
    def visited_count(self) -> int:
        return int(self.nodes.sum())

    def visited_nodes_list(self) -> list[int]:
        return [int(v) for v in np.flatnonzero(self.nodes)]

    def visited_edges_list(self) -> list[tuple[int, int]]:
        return [(int(i), int(j)) for i, j in zip(*np.nonzero(self.edges))]

    def copy_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return read-only copies of the node and edge flags."""

        nodes = self.nodes.copy()
        edges = self.edges.copy()
        nodes.flags.writeable = False
        edges.flags.writeable = False
        return nodes, edges
