import sys
from copy import deepcopy
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from Circle_Graph.config import Config
from Circle_Graph.graph.model import AdjacencyMatrix

_SAVED_KEYS = (
    "config_file",
    "output_dir",
    "variant",
    "config_vector",
    "seed",
    "n",
    "density",
    "directed",
    "log_level",
    "log_traversal",
    "log_files",
)


@pytest.fixture(autouse=True)
def _restore_config():
    """Restore global :class:`Config` values after each test."""

    saved = {key: deepcopy(getattr(Config, key)) for key in _SAVED_KEYS}
    yield
    for key, value in saved.items():
        setattr(Config, key, value)


@pytest.fixture
def scenario_matrix() -> AdjacencyMatrix:
    """Four nodes: 0 -> 1 -> 2 and an isolated self-looping node 3."""

    return AdjacencyMatrix.from_edges(4, [(0, 1), (1, 2), (3, 3)])
