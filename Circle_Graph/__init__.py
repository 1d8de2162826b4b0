"""Circle_Graph package initialization."""

from __future__ import annotations

from .app import GraphApp
from .config import Config, ConfigError
from .engine.traversal import StepResult, TraversalEngine, TraversalStatus
from .graph.generator import generate
from .graph.model import AdjacencyMatrix
from .graph.view import GraphView

__all__ = [
    "AdjacencyMatrix",
    "Config",
    "ConfigError",
    "GraphApp",
    "GraphView",
    "StepResult",
    "TraversalEngine",
    "TraversalStatus",
    "generate",
]
