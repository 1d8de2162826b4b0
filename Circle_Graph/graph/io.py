"""Text helpers for :mod:`Circle_Graph.graph`."""

from __future__ import annotations

from typing import TextIO

import numpy as np

from .view import GraphView


def format_matrix(data: np.ndarray) -> str:
    """Return ``data`` as rows of ``0``/``1`` separated by spaces."""
    return "\n".join(" ".join("1" if cell else "0" for cell in row) for row in data)


def dump_matrices(view: GraphView, out: TextIO) -> None:
    """Write the directed and undirected matrices to ``out``."""
    out.write("Directed graph:\n")
    out.write(format_matrix(view.matrix_for(True)) + "\n")
    out.write("\nUndirected graph:\n")
    out.write(format_matrix(view.matrix_for(False)) + "\n")
