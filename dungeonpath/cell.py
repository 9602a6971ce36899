"""Grid coordinates and the four cardinal moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Row/column offsets for up, down, left and right, in that order."""


@dataclass(frozen=True)
class Cell:
    """A position in a dungeon grid, given as row and column."""

    r: int = 0
    c: int = 0

    def step(self, dr: int, dc: int) -> Cell:
        """Return the cell offset from this one by ``dr`` rows and ``dc`` columns."""
        return Cell(self.r + dr, self.c + dc)

    def neighbors(self) -> Iterator[Cell]:
        """Yield the four orthogonal neighbours in the order of ``DIRECTIONS``."""
        for dr, dc in DIRECTIONS:
            yield self.step(dr, dc)

    def is_adjacent(self, other: Cell) -> bool:
        """Tell whether ``other`` is exactly one orthogonal step away."""
        return abs(self.r - other.r) + abs(self.c - other.c) == 1