import pytest

from Circle_Graph.engine.frontier import Frontier
from Circle_Graph.engine.state import Edge, VisitationState


def test_visitation_state_marks_and_resets():
    state = VisitationState(3)
    assert state.first_unvisited() == 0
    state.mark_node(0)
    state.mark_node(2)
    state.mark_edge(0, 2)
    assert state.is_node_visited(2)
    assert state.is_edge_visited(0, 2)
    assert not state.is_edge_visited(2, 0)
    assert state.first_unvisited() == 1
    assert state.visited_nodes_list() == [0, 2]
    assert state.visited_count == 2
    state.mark_node(1)
    assert state.all_nodes_visited()
    assert state.first_unvisited() is None

    state.reset()
    assert state.visited_count == 0
    assert state.visited_edges_list() == []


def test_copies_are_read_only():
    state = VisitationState(2)
    nodes, _ = state.copy_arrays()
    with pytest.raises(ValueError):
        nodes[0] = True
    state.mark_node(0)
    assert not nodes[0]


def test_out_of_range_index():
    with pytest.raises(IndexError):
        VisitationState(2).mark_node(5)


def test_frontier_ends():
    frontier = Frontier()
    assert frontier.pop_front() is None
    assert frontier.pop_back() is None
    for i in range(3):
        frontier.push(Edge(0, i))
    assert frontier.pop_front() == Edge(0, 0)
    assert frontier.pop_back() == Edge(0, 2)
    assert len(frontier) == 1
    frontier.clear()
    assert not frontier


def test_pop_usable_discards_stale_lazily():
    frontier = Frontier()
    for target in (1, 2, 3):
        frontier.push(Edge(0, target))
    frontier.push(Edge(0, 1))
    assert len(frontier) == 4

    edge, skipped = frontier.pop_usable(
        from_back=True, is_stale=lambda e: e.target in {1, 3}
    )
    assert edge == Edge(0, 2)
    assert skipped == 2
    assert list(frontier) == [Edge(0, 1)]

    edge, skipped = frontier.pop_usable(from_back=False, is_stale=lambda e: True)
    assert edge is None and skipped == 1


def test_seed_edge_distinct_from_self_loop():
    assert Edge(3, 3).is_loop and Edge(3, 3, seed=True).is_loop
    assert Edge(3, 3) != Edge(3, 3, seed=True)
