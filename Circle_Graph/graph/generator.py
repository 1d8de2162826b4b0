"""Seeded construction of random adjacency matrices."""

from __future__ import annotations

import random
from typing import Protocol

import numpy as np

from ..config import Config, validate_graph_params
from .model import AdjacencyMatrix


class RandomSource(Protocol):
    """Minimal PRNG interface used by :func:`generate`."""

    def seed(self, a: int) -> None: ...

    def random(self) -> float: ...


def edge_drawn(sample: float, density: float) -> bool:
    """Return ``True`` when ``sample`` in ``[0, 1)`` yields an edge."""

    return sample * 2.0 * density >= 1.0


def generate(
    seed: int,
    n: int,
    density: float,
    rng: RandomSource | None = None,
) -> AdjacencyMatrix:
    """Return a random ``n x n`` adjacency matrix.

    One sample is drawn per ordered pair ``(i, j)``, row by row and including
    the diagonal, from a generator seeded with ``seed``. The same arguments
    always produce the same matrix.

    Parameters
    ----------
    seed:
        Seed passed to ``rng.seed``.
    n:
        Number of nodes. Must be positive.
    density:
        Coefficient in ``[0, 1]``. ``0.5`` or less yields no edges, ``1.0``
        gives each pair an even chance.
    rng:
        Optional generator instance. Defaults to :class:`random.Random`.

    Raises
    ------
    ConfigError
        If ``n <= 0`` or ``density`` lies outside ``[0, 1]``.
    """

    validate_graph_params(n, density)
    rng = rng or random.Random()
    rng.seed(seed)
    data = np.zeros((n, n), dtype=bool)
    for i in range(n):
        for j in range(n):
            data[i, j] = edge_drawn(rng.random(), density)
    return AdjacencyMatrix(data)


def generate_from_config() -> AdjacencyMatrix:
    """Generate the matrix described by :class:`Config`."""

    return generate(Config.seed, Config.n, Config.density)
