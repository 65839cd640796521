"""The snake's body: an ordered run of cells from head to tail."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .coord import Coord


class SnakeBody:
    """Double-ended sequence of cells; the front is the head."""

    def __init__(self, cells: Iterable[Coord] = ()) -> None:
        self._cells: deque[Coord] = deque(cells)

    def push_front(self, cell: Coord) -> None:
        self._cells.appendleft(cell)

    def push_back(self, cell: Coord) -> None:
        self._cells.append(cell)

    def pop_front(self) -> Coord:
        """Remove and return the head; raises IndexError when empty."""
        if not self._cells:
            raise IndexError("pop from an empty snake body")
        return self._cells.popleft()

    def pop_back(self) -> Coord:
        """Remove and return the tail end; raises IndexError when empty."""
        if not self._cells:
            raise IndexError("pop from an empty snake body")
        return self._cells.pop()

    def is_empty(self) -> bool:
        return not self._cells

    @property
    def head(self) -> Coord:
        if not self._cells:
            raise IndexError("empty snake body has no head")
        return self._cells[0]

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __str__(self) -> str:
        return " -> ".join(str(cell) for cell in self._cells)