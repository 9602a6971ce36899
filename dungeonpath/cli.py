"""Command-line demonstration that runs the path finders on sample dungeons."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Sequence, TextIO

from dungeonpath.cell import Cell
from dungeonpath.generator import generate_dungeon
from dungeonpath.solver import bfs_path, bfs_path_keys, find_position

_SEPARATOR = "-" * 50
_RULE = "=" * 48
_TOTAL_CHECKS = 5

BASIC_DUNGEON = (
    "#######",
    "#S   E#",
    "#######",
)

COMPLEX_DUNGEON = (
    "#########",
    "#S#     #",
    "# # ### #",
    "#   #  E#",
    "#########",
)

KEY_DUNGEON = (
    "###########",
    "#S   a    #",
    "#A#########",
    "#       b #",
    "# #B#######",
    "# #     E #",
    "###########",
)

UNSOLVABLE_DUNGEON = (
    "#######",
    "#S###E#",
    "#######",
)


def format_dungeon(dungeon: Sequence[str], title: str = "") -> str:
    """Render a dungeon as text, preceded by ``title:`` when a title is given."""
    lines = [f"{title}:"] if title else []
    lines.extend(dungeon)
    return "\n".join(lines) + "\n\n"


def format_dungeon_with_path(
    dungeon: Sequence[str], path: Iterable[Cell], title: str = ""
) -> str:
    """Render a dungeon with path cells marked ``*``, keeping ``S`` and ``E``."""
    grid = [list(row) for row in dungeon]
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for cell in path:
        if 0 <= cell.r < height and 0 <= cell.c < width:
            if grid[cell.r][cell.c] not in ("S", "E"):
                grid[cell.r][cell.c] = "*"
    return format_dungeon(["".join(row) for row in grid], title)


def validate_path(dungeon: Sequence[str], path: Sequence[Cell]) -> bool:
    """Tell whether ``path`` runs from ``S`` to ``E`` in single steps avoiding walls."""
    if not path:
        return False
    start = find_position(dungeon, "S")
    exit_cell = find_position(dungeon, "E")
    if start is None or exit_cell is None:
        return False
    if path[0] != start or path[-1] != exit_cell:
        return False

    height, width = len(dungeon), len(dungeon[0])
    for cell in path:
        if not (0 <= cell.r < height and 0 <= cell.c < width):
            return False
        if dungeon[cell.r][cell.c] == "#":
            return False
    return all(prev.is_adjacent(cell) for prev, cell in zip(path, path[1:]))


def _report_path(
    out: TextIO, dungeon: Sequence[str], path: Sequence[Cell]
) -> bool:
    if not path:
        print("[ERROR] No path found!", file=out)
        return False
    if validate_path(dungeon, path):
        print("[OK] Valid path found!", file=out)
        out.write(format_dungeon_with_path(dungeon, path, "Solution"))
        return True
    print("[ERROR] Invalid path!", file=out)
    return False


def _finish(out: TextIO, success: bool) -> bool:
    print(_SEPARATOR, file=out)
    print(file=out)
    return success


def check_basic_pathfinding(out: TextIO) -> bool:
    """Solve a straight corridor with plain BFS and report the result."""
    print("=== Basic Pathfinding Test ===", file=out)
    out.write(format_dungeon(BASIC_DUNGEON, "Test Dungeon"))
    path = bfs_path(BASIC_DUNGEON)
    print(f"Path length: {len(path)}", file=out)
    return _finish(out, _report_path(out, BASIC_DUNGEON, path))


def check_complex_pathfinding(out: TextIO) -> bool:
    """Solve a dungeon with turns and dead ends with plain BFS."""
    print("=== Complex Pathfinding Test ===", file=out)
    out.write(format_dungeon(COMPLEX_DUNGEON, "Complex Test Dungeon"))
    path = bfs_path(COMPLEX_DUNGEON)
    print(f"Path length: {len(path)}", file=out)
    return _finish(out, _report_path(out, COMPLEX_DUNGEON, path))


def check_key_door_pathfinding(out: TextIO) -> bool:
    """Show plain BFS blocked by a door and key-aware BFS getting through."""
    print("=== Key-Door Pathfinding Test ===", file=out)
    out.write(format_dungeon(KEY_DUNGEON, "Key-Door Test Dungeon"))

    print("Step 1: Testing basic BFS (should fail due to locked door)...", file=out)
    basic_path = bfs_path(KEY_DUNGEON)
    if basic_path:
        print(
            f"Basic BFS result: [OK] Found path of length {len(basic_path)} (unexpected!)",
            file=out,
        )
    else:
        print(
            "Basic BFS result: [ERROR] No path found (expected - door blocks the way)",
            file=out,
        )
    print(file=out)

    print(
        "Step 2: Testing key-door BFS (should succeed by collecting key first)...",
        file=out,
    )
    key_path = bfs_path_keys(KEY_DUNGEON)
    success = False
    if not key_path:
        print("Key-Door BFS result: [ERROR] No path found with key system!", file=out)
    elif validate_path(KEY_DUNGEON, key_path):
        print(
            f"Key-Door BFS result: [OK] Valid key-door path found! Length: {len(key_path)}",
            file=out,
        )
        out.write(format_dungeon_with_path(KEY_DUNGEON, key_path, "Key-Door Solution"))
        print("Solution Analysis:", file=out)
        print("- The search first explores reachable areas", file=out)
        print("- Collects key 'a' when encountered", file=out)
        print("- Can then pass through door 'A' to reach exit", file=out)
        success = True
    else:
        print("Key-Door BFS result: [ERROR] Invalid key-door path!", file=out)
    return _finish(out, success)


def check_unsolvable_dungeon(out: TextIO) -> bool:
    """Confirm that plain BFS finds no path where none exists."""
    print("=== Unsolvable Dungeon Test ===", file=out)
    out.write(format_dungeon(UNSOLVABLE_DUNGEON, "Unsolvable Test Dungeon"))
    path = bfs_path(UNSOLVABLE_DUNGEON)
    if path:
        print("[ERROR] Found path in unsolvable dungeon!", file=out)
        return _finish(out, False)
    print("[OK] Correctly identified unsolvable dungeon!", file=out)
    return _finish(out, True)


def check_dungeon_generation(out: TextIO, rng: random.Random | None = None) -> bool:
    """Generate a 9x9 dungeon and confirm it has a start, an exit and a path."""
    print("=== Dungeon Generation Test ===", file=out)
    print("Generating 9x9 dungeon...", file=out)
    dungeon = generate_dungeon(9, 9, 10, rng)

    has_start = any("S" in row for row in dungeon)
    has_exit = any("E" in row for row in dungeon)
    if not (has_start and has_exit):
        print(
            "[ERROR] Dungeon generation incomplete - missing start (S) or exit (E)",
            file=out,
        )
        out.write(format_dungeon(dungeon, "Incomplete Generated Dungeon"))
        return _finish(out, False)

    out.write(format_dungeon(dungeon, "Generated 9x9 Dungeon"))
    print("Testing pathfinding on generated dungeon...", file=out)
    path = bfs_path(dungeon)
    if not path:
        print("[ERROR] No path found in the generated dungeon", file=out)
        return _finish(out, False)
    print(f"[OK] Generated dungeon is solvable! Path length: {len(path)}", file=out)
    out.write(format_dungeon_with_path(dungeon, path, "Solved Generated Dungeon"))
    return _finish(out, True)


def _verdict(passed: int, total: int) -> str:
    if passed == total:
        return "[EXCELLENT! All tests passed!]"
    if passed >= total * 0.8:
        return "[GREAT! Almost there!]"
    if passed >= total * 0.5:
        return "[GOOD! Making progress!]"
    if passed > 0:
        return "[GETTING STARTED! Keep going!]"
    return "[START HERE!]"


def run_checks(out: TextIO, rng: random.Random | None = None) -> int:
    """Run every check, print a summary and return how many passed."""
    print("Testing Dungeon Pathfinder Algorithms", file=out)
    print(_RULE, file=out)
    print(file=out)

    checks = (
        check_basic_pathfinding,
        check_complex_pathfinding,
        check_key_door_pathfinding,
        check_unsolvable_dungeon,
        lambda stream: check_dungeon_generation(stream, rng),
    )
    passed = 0
    for number, check in enumerate(checks, start=1):
        print(f"Running test {number}/{_TOTAL_CHECKS}...", file=out)
        if check(out):
            passed += 1

    print(_RULE, file=out)
    print("TEST PROGRESS SUMMARY", file=out)
    print(_RULE, file=out)
    print(
        f"Tests passed: {passed}/{_TOTAL_CHECKS} {_verdict(passed, _TOTAL_CHECKS)}",
        file=out,
    )
    print(file=out)
    return passed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration checks and print their report to standard output."""
    parser = argparse.ArgumentParser(
        prog="dungeonpath",
        description="Run the dungeon path finders on sample and generated dungeons.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the dungeon generator"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    run_checks(sys.stdout, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())