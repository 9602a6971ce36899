"""Breadth-first path finding through dungeons, with keys and doors."""

from __future__ import annotations

from collections import deque
from typing import Hashable, Mapping, Sequence, TypeVar

from dungeonpath.cell import DIRECTIONS, Cell

Dungeon = Sequence[str]
_State = TypeVar("_State", bound=Hashable)


def find_position(dungeon: Dungeon, target: str) -> Cell | None:
    """Return the first cell holding ``target`` in row-major order, or None."""
    for r, row in enumerate(dungeon):
        c = row.find(target)
        if c != -1:
            return Cell(r, c)
    return None


def _in_bounds(dungeon: Dungeon, row: int, col: int) -> bool:
    return 0 <= row < len(dungeon) and 0 <= col < len(dungeon[0])


def _is_door(ch: str) -> bool:
    return "A" <= ch <= "F" and ch != "E"


def is_passable(dungeon: Dungeon, row: int, col: int) -> bool:
    """Tell whether a cell is inside the grid and neither wall nor door."""
    if not _in_bounds(dungeon, row, col):
        return False
    ch = dungeon[row][col]
    return ch != "#" and not _is_door(ch)


def can_pass_door(door: str, key_mask: int) -> bool:
    """Tell whether ``door`` opens for the keys in ``key_mask``.

    Anything that is not a door ``A``..``F`` (the exit ``E`` included) passes.
    """
    if door == "E" or not "A" <= door <= "F":
        return True
    return bool(key_mask & (1 << (ord(door) - ord("A"))))


def collect_key(key: str, key_mask: int) -> int:
    """Return ``key_mask`` with the bit for key ``a``..``f`` set; others leave it alone."""
    if not "a" <= key <= "f":
        return key_mask
    return key_mask | (1 << (ord(key) - ord("a")))


def _reconstruct(parents: Mapping[_State, _State], start: _State, goal: _State) -> list[_State]:
    path = [goal]
    current = goal
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


def bfs_path(dungeon: Dungeon) -> list[Cell]:
    """Return a shortest path from ``S`` to ``E``, or an empty list.

    Walls and every door block the way.
    """
    start = find_position(dungeon, "S")
    exit_cell = find_position(dungeon, "E")
    if start is None or exit_cell is None:
        return []

    queue = deque([start])
    parents: dict[Cell, Cell] = {start: start}
    while queue:
        current = queue.popleft()
        if current == exit_cell:
            return _reconstruct(parents, start, exit_cell)
        for neighbor in current.neighbors():
            if neighbor not in parents and is_passable(dungeon, neighbor.r, neighbor.c):
                parents[neighbor] = current
                queue.append(neighbor)
    return []


def bfs_path_keys(dungeon: Dungeon) -> list[Cell]:
    """Return a shortest path from ``S`` to ``E`` picking up keys to open doors.

    Stepping on ``a``..``f`` collects the key that opens ``A``..``F``.
    The search state is a cell together with the set of keys held, so a
    cell may appear more than once in the returned path.
    """
    start = find_position(dungeon, "S")
    exit_cell = find_position(dungeon, "E")
    if start is None or exit_cell is None:
        return []

    start_state = (start.r, start.c, 0)
    queue = deque([start_state])
    parents: dict[tuple[int, int, int], tuple[int, int, int]] = {start_state: start_state}
    while queue:
        current = queue.popleft()
        r, c, keys = current
        if (r, c) == (exit_cell.r, exit_cell.c):
            return [Cell(sr, sc) for sr, sc, _ in _reconstruct(parents, start_state, current)]
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if not _in_bounds(dungeon, nr, nc):
                continue
            ch = dungeon[nr][nc]
            if ch == "#" or (_is_door(ch) and not can_pass_door(ch, keys)):
                continue
            state = (nr, nc, collect_key(ch, keys))
            if state not in parents:
                parents[state] = current
                queue.append(state)
    return []