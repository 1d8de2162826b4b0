import logging
import random

import pytest

from Circle_Graph.engine.state import Edge
from Circle_Graph.engine.traversal import TraversalEngine, TraversalStatus
from Circle_Graph.graph.generator import generate
from Circle_Graph.graph.model import AdjacencyMatrix
from Circle_Graph.graph.view import GraphView
from invariants.checks import monotone, single_progress, visits_each_once


def _engine(matrix: AdjacencyMatrix) -> TraversalEngine:
    return TraversalEngine(GraphView(matrix))


def _run(engine, order: str, directed: bool = True) -> list[int]:
    step = engine.step_breadth if order == "breadth" else engine.step_depth
    engine.reset()
    while engine.status is TraversalStatus.RUNNING:
        step(directed)
    return list(engine.order)


def test_disconnected_scenario_breadth(scenario_matrix):
    engine = _engine(scenario_matrix)
    engine.reset()
    assert list(engine.frontier) == [Edge(0, 0)]

    first = engine.step_breadth(True)
    assert first.node == 0
    assert list(engine.frontier) == [Edge(0, 1)]

    assert engine.step_breadth(True).node == 1
    assert list(engine.frontier) == [Edge(1, 2)]

    assert engine.step_breadth(True).node == 2
    assert len(engine.frontier) == 0

    last = engine.step_breadth(True)
    assert last.edge == Edge(3, 3, seed=True)
    assert last.restarted
    assert engine.state.all_nodes_visited()
    assert engine.status is TraversalStatus.EXHAUSTED
    assert engine.order == [0, 1, 2, 3]
    assert engine.counters["component_seeds"] == 1

    nodes, edges = engine.state.copy_arrays()
    assert engine.step_breadth(True) is None
    assert engine.step_depth(False) is None
    assert (engine.state.nodes == nodes).all()
    assert (engine.state.edges == edges).all()


def test_seed_edges_are_marked_visited(scenario_matrix):
    engine = _engine(scenario_matrix)
    _run(engine, "breadth")
    assert engine.state.visited_edges_list() == [(0, 0), (0, 1), (1, 2), (3, 3)]


def test_step_before_reset_is_noop(scenario_matrix):
    engine = _engine(scenario_matrix)
    assert engine.status is TraversalStatus.IDLE
    assert engine.step_breadth(True) is None
    assert engine.step_depth(True) is None
    assert engine.state.visited_count == 0
    assert len(engine.frontier) == 0


def test_breadth_and_depth_orders_differ():
    matrix = AdjacencyMatrix.from_edges(5, [(0, 1), (0, 2), (1, 3), (2, 4)])
    engine = _engine(matrix)
    assert _run(engine, "breadth") == [0, 1, 2, 3, 4]
    assert _run(engine, "depth") == [0, 2, 4, 1, 3]


def test_stale_entries_are_skipped_within_one_step():
    matrix = AdjacencyMatrix.from_edges(4, [(0, 1), (0, 2), (1, 2)])
    engine = _engine(matrix)
    engine.reset()
    for _ in range(3):
        engine.step_breadth(True)
    assert engine.order == [0, 1, 2]
    assert list(engine.frontier) == [Edge(1, 2)]

    result = engine.step_breadth(True)
    assert result.stale_skipped == 1
    assert result.restarted
    assert result.node == 3
    assert engine.counters == {"steps": 4, "stale_skipped": 1, "component_seeds": 1}


def test_reset_clears_previous_run(scenario_matrix):
    engine = _engine(scenario_matrix)
    _run(engine, "depth")
    engine.reset()
    assert engine.state.visited_count == 0
    assert not engine.state.edges.any()
    assert engine.order == []
    assert engine.counters["steps"] == 0
    assert list(engine.frontier) == [Edge(0, 0)]
    assert engine.status is TraversalStatus.RUNNING


def test_reset_starts_at_first_node_with_edge():
    matrix = AdjacencyMatrix.from_edges(4, [(2, 0)])
    engine = _engine(matrix)
    engine.reset()
    assert list(engine.frontier) == [Edge(2, 2)]
    assert engine.step_depth(True).node == 2


def test_graph_without_edges_is_covered():
    engine = _engine(AdjacencyMatrix.from_edges(3, []))
    engine.reset()
    assert len(engine.frontier) == 0
    results = [engine.step_breadth(True) for _ in range(3)]
    assert [r.node for r in results] == [0, 1, 2]
    assert all(r.restarted for r in results)
    assert engine.step_breadth(True) is None


def test_toggle_only_affects_future_expansion():
    # 2 -> 0 is only reachable from 0 in the undirected view
    matrix = AdjacencyMatrix.from_edges(3, [(0, 1), (2, 0)])

    engine = _engine(matrix)
    engine.reset()
    engine.step_breadth(True)
    nodes, edges = engine.state.copy_arrays()
    # toggling is just a different flag on the next call
    assert monotone(nodes, engine.state.nodes)
    assert list(engine.frontier) == [Edge(0, 1)]
    assert engine.step_breadth(False).node == 1
    assert engine.step_breadth(False).restarted
    assert engine.order == [0, 1, 2]
    assert monotone(edges, engine.state.edges)

    engine.reset()
    engine.step_breadth(False)
    assert list(engine.frontier) == [Edge(0, 1), Edge(0, 2)]
    engine.step_breadth(True)
    result = engine.step_breadth(True)
    assert result.edge == Edge(0, 2)
    assert not result.restarted
    assert engine.state.is_edge_visited(0, 2)
    assert not engine.state.is_edge_visited(2, 0)


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("order", ["breadth", "depth"])
def test_every_node_visited_exactly_once(seed, order):
    matrix = generate(seed, 10, 0.7)
    engine = _engine(matrix)
    rng = random.Random(seed)
    engine.reset()
    step = engine.step_breadth if order == "breadth" else engine.step_depth
    steps = 0
    while engine.status is TraversalStatus.RUNNING:
        before = engine.state.nodes.copy()
        assert step(rng.random() < 0.5) is not None
        assert single_progress(before, engine.state.nodes)
        assert engine.state.visited_count == before.sum() + 1
        steps += 1
    assert steps == matrix.size
    assert visits_each_once(engine.order, matrix.size)


def test_reset_and_steps_are_logged(scenario_matrix, caplog):
    engine = _engine(scenario_matrix)
    with caplog.at_level(logging.DEBUG, logger="Circle_Graph.engine.traversal"):
        _run(engine, "breadth")
    messages = [rec.getMessage() for rec in caplog.records]
    assert any("Search reset; start node 0" in m for m in messages)
    assert any("seeding component at node 3" in m for m in messages)
    assert any("All 4 nodes visited after 4 steps" in m for m in messages)


def test_trace_records(monkeypatch, scenario_matrix):
    events = []

    def fake_log_record(category, label, *, frame=None, value=None, **kwargs):
        events.append((label, frame, value))

    monkeypatch.setattr("Circle_Graph.engine.traversal.log_record", fake_log_record)
    engine = _engine(scenario_matrix)
    _run(engine, "depth")

    labels = [label for label, _, _ in events]
    assert labels == [
        "search_reset",
        "node_visited",
        "node_visited",
        "node_visited",
        "component_seeded",
        "node_visited",
        "search_exhausted",
    ]
    seeded = events[4]
    assert seeded[1] == 4 and seeded[2] == {"node": 3}
    assert events[-2][2]["seed"] is True
    assert events[-2][2]["order"] == "depth"
