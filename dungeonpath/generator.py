"""Random dungeon generation by recursive backtracking."""

from __future__ import annotations

import random
from typing import Iterator, MutableSequence

WALL = "#"
OPEN = " "
START = "S"
EXIT = "E"

_CARVE_DIRECTIONS = ((-2, 0), (0, 2), (2, 0), (0, -2))
_MIN_SIZE = 5

Grid = MutableSequence[MutableSequence[str]]


def carve_passage(maze: Grid, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
    """Open the target cell and the wall cell halfway between it and the source."""
    maze[to_row][to_col] = OPEN
    maze[(from_row + to_row) // 2][(from_col + to_col) // 2] = OPEN


def _unvisited_neighbors(maze: Grid, row: int, col: int) -> Iterator[tuple[int, int]]:
    rows, cols = len(maze), len(maze[0])
    for dr, dc in _CARVE_DIRECTIONS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols and maze[nr][nc] != OPEN:
            yield nr, nc


def _shuffled_neighbors(maze: Grid, row: int, col: int, rng: random.Random) -> Iterator[tuple[int, int]]:
    neighbors = list(_unvisited_neighbors(maze, row, col))
    rng.shuffle(neighbors)
    return iter(neighbors)


def _carve_maze(maze: Grid, row: int, col: int, rng: random.Random) -> None:
    maze[row][col] = OPEN
    stack = [(row, col, _shuffled_neighbors(maze, row, col, rng))]
    while stack:
        r, c, pending = stack[-1]
        for nr, nc in pending:
            if maze[nr][nc] != OPEN:
                carve_passage(maze, r, c, nr, nc)
                stack.append((nr, nc, _shuffled_neighbors(maze, nr, nc, rng)))
                break
        else:
            stack.pop()


def _add_random_rooms(maze: Grid, room_rate: int, rng: random.Random) -> None:
    rows, cols = len(maze), len(maze[0])
    rooms_to_add = ((rows * cols) // 4 * room_rate) // 100
    for _ in range(rooms_to_add):
        row = 2 + rng.randrange(rows - 4)
        col = 2 + rng.randrange(cols - 4)
        if maze[row][col] == WALL:
            maze[row][col] = OPEN


def _place_start_and_exit(maze: Grid) -> None:
    rows, cols = len(maze), len(maze[0])
    open_cells = [
        (r, c)
        for r in range(1, rows - 1)
        for c in range(1, cols - 1)
        if maze[r][c] == OPEN
    ]
    if len(open_cells) >= 2:
        first_r, first_c = open_cells[0]
        last_r, last_c = open_cells[-1]
        maze[first_r][first_c] = START
        maze[last_r][last_c] = EXIT


def generate_dungeon(
    rows: int,
    cols: int,
    room_rate: int = 20,
    rng: random.Random | None = None,
) -> list[str]:
    """Generate a dungeon of at least 5x5 with odd dimensions.

    The grid is carved as a perfect maze from (1, 1), then ``room_rate``
    percent of a quarter of the cells are tried as extra openings. The first
    open interior cell becomes the start and the last one the exit.
    """
    rng = rng if rng is not None else random.Random()
    if rows % 2 == 0:
        rows += 1
    if cols % 2 == 0:
        cols += 1
    rows = max(rows, _MIN_SIZE)
    cols = max(cols, _MIN_SIZE)

    maze = [[WALL] * cols for _ in range(rows)]
    _carve_maze(maze, 1, 1, rng)
    _add_random_rooms(maze, room_rate, rng)
    _place_start_and_exit(maze)
    return ["".join(row) for row in maze]