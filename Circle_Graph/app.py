"""Application context composing generator, view and traversal engine."""

from __future__ import annotations

import logging

from .config import Config
from .engine.logging.logger import log_record
from .engine.traversal import StepResult, TraversalEngine, TraversalStatus
from .graph.generator import generate_from_config
from .graph.model import AdjacencyMatrix
from .graph.view import GraphView
from .view import EdgeView, NodeView, ViewSnapshot

logger = logging.getLogger(__name__)


class GraphApp:
    """Own one graph and its traversal for the lifetime of the process.

    ``directed`` is the live mode toggle. It is handed to the engine on each
    step, so flipping it affects only neighbour expansions that happen later.
    Renderers should use the read accessors or :meth:`snapshot` and never
    touch the engine's frontier.
    """

    def __init__(self, matrix: AdjacencyMatrix, directed: bool = True) -> None:
        self.matrix = matrix
        self.view = GraphView(matrix)
        self.engine = TraversalEngine(self.view)
        self.directed = directed

    @classmethod
    def from_config(cls) -> "GraphApp":
        """Generate the graph described by :class:`Config`."""

        matrix = generate_from_config()
        logger.info(
            "Generated %d-node graph (seed=%s, density=%.3f, %d edges)",
            matrix.size,
            Config.seed,
            Config.density,
            len(matrix.edges()),
        )
        return cls(matrix, directed=bool(Config.directed))

    # ---- commands ------------------------------------------------------
    def toggle_directed(self) -> bool:
        """Flip the directed/undirected mode and return the new value."""

        self.directed = not self.directed
        logger.debug("Mode toggled; directed=%s", self.directed)
        log_record(
            "event",
            "mode_toggled",
            frame=self.engine.counters["steps"],
            value={"directed": self.directed},
        )
        return self.directed

    def reset_search(self) -> None:
        self.engine.reset()

    def step_breadth(self) -> StepResult | None:
        return self.engine.step_breadth(self.directed)

    def step_depth(self) -> StepResult | None:
        return self.engine.step_depth(self.directed)

    # ---- read accessors ------------------------------------------------
    @property
    def status(self) -> TraversalStatus:
        return self.engine.status

    def edge(self, i: int, j: int) -> bool:
        return self.matrix[i, j]

    def undirected_edge(self, i: int, j: int) -> bool:
        return self.view.undirected_edge(i, j)

    def is_node_visited(self, i: int) -> bool:
        return self.engine.state.is_node_visited(i)

    def is_edge_visited(self, i: int, j: int) -> bool:
        return self.engine.state.is_edge_visited(i, j)

    def is_edge_highlighted(self, i: int, j: int) -> bool:
        """Return ``True`` if the renderer should highlight ``(i, j)``.

        In undirected mode a traversal along ``(j, i)`` also lights ``(i, j)``.
        """

        if self.is_edge_visited(i, j):
            return True
        return not self.directed and self.is_edge_visited(j, i)

    def snapshot(self) -> ViewSnapshot:
        """Return a read-only copy of the state for rendering."""

        n = self.matrix.size
        nodes = [
            NodeView(id=i, visited=self.is_node_visited(i), self_loop=self.edge(i, i))
            for i in range(n)
        ]
        edges = [
            EdgeView(
                src=i,
                dst=j,
                visited=self.is_edge_visited(i, j),
                highlighted=self.is_edge_highlighted(i, j),
                bidirectional=self.edge(j, i),
            )
            for i, j in self.matrix.edges()
            if i != j
        ]
        return ViewSnapshot(
            frame=self.engine.counters["steps"],
            directed=self.directed,
            status=self.status.value,
            nodes=nodes,
            edges=edges,
            frontier_size=len(self.engine.frontier),
            counters=dict(self.engine.counters),
        )
