"""Double-ended queue of pending edges."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterator

from .state import Edge


class Frontier:
    """Pending edges consumed from the front or the back.

    Breadth-first stepping pops from the front and depth-first stepping pops
    from the back of the same storage. Entries are never de-duplicated on
    insertion; stale ones are dropped by :meth:`pop_usable`.
    """

    def __init__(self) -> None:
        self._items: deque[Edge] = deque()

    def push(self, edge: Edge) -> None:
        """Append ``edge`` at the back."""
        self._items.append(edge)

    def pop_front(self) -> Edge | None:
        return self._items.popleft() if self._items else None

    def pop_back(self) -> Edge | None:
        return self._items.pop() if self._items else None

    def pop_usable(
        self, *, from_back: bool, is_stale: Callable[[Edge], bool]
    ) -> tuple[Edge | None, int]:
        """Pop until an edge that is not stale is found.

        Returns the edge (or ``None`` when the frontier ran dry) and the number
        of stale entries discarded on the way.
        """

        pop = self.pop_back if from_back else self.pop_front
        skipped = 0
        edge = pop()
        while edge is not None and is_stale(edge):
            skipped += 1
            edge = pop()
        return edge, skipped

    def clear(self) -> None:
        """Drop all pending edges."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
