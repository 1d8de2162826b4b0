"""UI-facing snapshot dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class NodeView:
    """Lightweight representation of a node for the UI."""

    id: int
    visited: bool = False
    self_loop: bool = False


@dataclass(frozen=True)
class EdgeView:
    """Lightweight representation of a directed matrix edge for the UI."""

    src: int
    dst: int
    visited: bool = False
    highlighted: bool = False
    # both (src, dst) and (dst, src) exist; drawn offset in directed mode
    bidirectional: bool = False


@dataclass(frozen=True)
class ViewSnapshot:
    """Read-only copy of the traversal state handed to renderers."""

    frame: int
    directed: bool
    status: str
    nodes: List[NodeView] = field(default_factory=list)
    edges: List[EdgeView] = field(default_factory=list)
    frontier_size: int = 0
    counters: Dict[str, int] = field(default_factory=dict)

    @property
    def visited_nodes(self) -> List[int]:
        return [n.id for n in self.nodes if n.visited]
