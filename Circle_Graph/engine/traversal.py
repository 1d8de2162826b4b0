"""Step-wise breadth-first and depth-first traversal.

The engine owns a :class:`~Circle_Graph.engine.frontier.Frontier` and a
:class:`~Circle_Graph.engine.state.VisitationState`. Breadth and depth
stepping share the frontier and the visit routine and differ only in which
end of the frontier they consume. The directed/undirected mode is passed in
on every step and is read only when the visited node's neighbours are
expanded, so toggling it mid-run changes future expansions and nothing else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..graph.view import GraphView
from .frontier import Frontier
from .logging.logger import flush_metrics, log_record
from .state import Edge, VisitationState

logger = logging.getLogger(__name__)


class TraversalStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one non-trivial engine step."""

    edge: Edge
    stale_skipped: int = 0
    enqueued: int = 0

    @property
    def node(self) -> int:
        return self.edge.target

    @property
    def restarted(self) -> bool:
        """``True`` when the step seeded a new component."""
        return self.edge.seed


class TraversalEngine:
    """State machine driving the traversal over a :class:`GraphView`."""

    def __init__(self, view: GraphView) -> None:
        self.view = view
        self.state = VisitationState(view.size)
        self.frontier = Frontier()
        self.order: list[int] = []
        self.counters = {"steps": 0, "stale_skipped": 0, "component_seeds": 0}
        self._started = False

    # ------------------------------------------------------------------
    @property
    def status(self) -> TraversalStatus:
        if not self._started:
            return TraversalStatus.IDLE
        if self.state.all_nodes_visited():
            return TraversalStatus.EXHAUSTED
        return TraversalStatus.RUNNING

    def reset(self) -> None:
        """Clear the run and seed the frontier at the first node with an edge."""

        self.state.reset()
        self.frontier.clear()
        self.order.clear()
        for key in self.counters:
            self.counters[key] = 0
        self._started = True

        start = self.view.matrix.first_with_outgoing()
        if start is not None:
            self.frontier.push(Edge(start, start))
        logger.info("Search reset; start node %s", start)
        log_record("event", "search_reset", frame=0, value={"start": start})

    def step_breadth(self, directed: bool) -> StepResult | None:
        """Visit the next node taking edges from the front of the frontier."""
        return self._step(directed, from_back=False)

    def step_depth(self, directed: bool) -> StepResult | None:
        """Visit the next node taking edges from the back of the frontier."""
        return self._step(directed, from_back=True)

    # ------------------------------------------------------------------
    def _is_stale(self, edge: Edge) -> bool:
        return self.state.is_node_visited(edge.target)

    def _step(self, directed: bool, *, from_back: bool) -> StepResult | None:
        if self.status is not TraversalStatus.RUNNING:
            return None

        edge, skipped = self.frontier.pop_usable(
            from_back=from_back, is_stale=self._is_stale
        )
        if edge is None:
            self.visit(None, directed)
            # visit(None) pushed exactly one seed for an unvisited node
            edge = self.frontier.pop_back()

        enqueued = self.visit(edge, directed)
        self.counters["steps"] += 1
        self.counters["stale_skipped"] += skipped
        frame = self.counters["steps"]
        log_record(
            "event",
            "node_visited",
            frame=frame,
            value={
                "from": edge.source,
                "to": edge.target,
                "seed": edge.seed,
                "directed": directed,
                "order": "depth" if from_back else "breadth",
                "stale_skipped": skipped,
            },
        )
        if self.state.all_nodes_visited():
            logger.info("All %d nodes visited after %d steps", self.state.n, frame)
            log_record("event", "search_exhausted", frame=frame)
        flush_metrics(frame)
        return StepResult(edge, stale_skipped=skipped, enqueued=enqueued)

    def visit(self, edge: Edge | None, directed: bool) -> int:
        """Visit ``edge`` or, for ``None``, seed the next component.

        Returns the number of edges pushed onto the frontier.
        """

        if edge is None:
            node = self.state.first_unvisited()
            if node is None:
                return 0
            self.frontier.push(Edge(node, node, seed=True))
            self.counters["component_seeds"] += 1
            logger.debug("Frontier exhausted; seeding component at node %d", node)
            log_record(
                "event",
                "component_seeded",
                frame=self.counters["steps"] + 1,
                value={"node": node},
            )
            return 1

        target = edge.target
        self.state.mark_node(target)
        self.state.mark_edge(edge.source, target)
        self.order.append(target)

        pushed = 0
        for m in self.view.neighbours(target, directed):
            if not self.state.is_node_visited(m):
                self.frontier.push(Edge(target, m))
                pushed += 1
        return pushed
