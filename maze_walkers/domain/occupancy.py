"""Shared record of every grid cell carved by any walker.

Growth is monotonic: cells are inserted one at a time and never removed, so a
reader between ticks always sees a consistent, non-shrinking set.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import TypeAlias

Cell: TypeAlias = tuple[int, int]
"""Integer grid coordinate ``(x, y)``; the grid has no origin bound."""


class OccupancySet:
    """Insert-only set of cells shared by all walkers of one session.

    With ``thread_safe=True`` insertion, membership and iteration are guarded
    by a lock so walkers may be stepped from several threads.
    """

    __slots__ = ("_cells", "_lock")

    def __init__(self, cells: Iterable[Cell] = (), thread_safe: bool = False) -> None:
        self._cells: set[Cell] = set()
        self._lock: threading.Lock | None = threading.Lock() if thread_safe else None
        for cell in cells:
            self.add(cell)

    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    def contains(self, cell: Cell) -> bool:
        if self._lock is None:
            return cell in self._cells
        with self._lock:
            return cell in self._cells

    def add(self, cell: Cell) -> None:
        """Insert *cell*; a no-op when it is already present."""
        if self._lock is None:
            self._cells.add(cell)
            return
        with self._lock:
            self._cells.add(cell)

    def size(self) -> int:
        return len(self._cells)

    def snapshot(self) -> frozenset[Cell]:
        """Return an immutable copy of the current cells."""
        if self._lock is None:
            return frozenset(self._cells)
        with self._lock:
            return frozenset(self._cells)

    def __contains__(self, cell: object) -> bool:
        return self.contains(cell)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"OccupancySet(size={self.size()}, thread_safe={self.thread_safe})"
