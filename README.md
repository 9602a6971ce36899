# dungeonpath

Generate grid dungeons made of text rows and find paths through them with
breadth-first search. Dungeons that contain keys and locked doors are solved
by a BFS that tracks which keys have been collected as a bitmask.

## The dungeon format

A dungeon is a sequence of equal-length strings:

| Character | Meaning                           |
|-----------|-----------------------------------|
| `#`       | wall                              |
| ` `       | open floor                        |
| `S`       | start                             |
| `E`       | exit                              |
| `a`–`f`   | keys                              |
| `A`–`F`   | doors, opened by the matching key |

Movement is in the four cardinal directions.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
dungeonpath
dungeonpath --seed 42
```

runs five checks: plain BFS on a straight corridor and on a dungeon with
turns, plain BFS failing and key-aware BFS succeeding on a key-and-door
dungeon, plain BFS on an unsolvable dungeon, and BFS on a freshly generated
9x9 dungeon. Each dungeon is printed, solutions are marked with `*`, and a
summary says how many checks passed. `--seed` seeds the dungeon generator so
the generated dungeon is reproducible.

The same checks are available from Python: `run_checks(out, rng)` in
`dungeonpath.cli` writes the report to any text stream and returns the number
of checks that passed; `check_basic_pathfinding`, `check_complex_pathfinding`,
`check_key_door_pathfinding`, `check_unsolvable_dungeon` and
`check_dungeon_generation` run one check each and return `True` or `False`.

## Library use

```python
import random

from dungeonpath.generator import generate_dungeon
from dungeonpath.solver import bfs_path, bfs_path_keys
from dungeonpath.cli import format_dungeon_with_path, validate_path

dungeon = [
    "###########",
    "#S   a    #",
    "#A#########",
    "#       b #",
    "# #B#######",
    "# #     E #",
    "###########",
]

print(bfs_path(dungeon))        # [] - the door 'A' blocks plain BFS
path = bfs_path_keys(dungeon)   # fetches key 'a' first, then opens 'A'
assert validate_path(dungeon, path)
print(format_dungeon_with_path(dungeon, path, "Solution"))

maze = generate_dungeon(9, 9, 10, random.Random(1))
print("\n".join(maze))
print(len(bfs_path(maze)))
```

### `dungeonpath.generator`

`generate_dungeon(rows, cols, room_rate=20, rng=None)` carves a perfect maze
by recursive backtracking from cell (1, 1), knocks out extra walls to open up
rooms and loops (`room_rate` percent of a quarter of the cells are tried), and
places `S` on the first open interior cell and `E` on the last. Even sizes are
rounded up to the next odd number and the smallest dungeon is 5 by 5. Pass a
`random.Random` as `rng` for reproducible output. `carve_passage` opens a
target cell and the wall between it and a source cell in a mutable grid.

### `dungeonpath.solver`

- `bfs_path(dungeon)` – a shortest path from `S` to `E` where walls and all
  doors block the way.
- `bfs_path_keys(dungeon)` – a shortest path where stepping on a key collects
  it and doors open for their key. A cell may appear more than once in the
  path, since the search state is a cell together with the keys held.
- `find_position(dungeon, target)` – the first cell holding a character, or
  `None`.
- `is_passable`, `can_pass_door`, `collect_key` – the cell and key-mask rules
  the searches use.

Paths are lists of `Cell` values from the start to the exit inclusive; an
empty list means no path exists, or the dungeon lacks `S` or `E`.

### `dungeonpath.cell`

`Cell(r, c)` is a frozen, hashable row/column pair with `step(dr, dc)`,
`neighbors()` (up, down, left, right) and `is_adjacent(other)`.

### `dungeonpath.cli`

`format_dungeon(dungeon, title="")` and
`format_dungeon_with_path(dungeon, path, title="")` render dungeons as text;
`validate_path(dungeon, path)` checks that a path runs from `S` to `E` in
single orthogonal steps without entering walls.

## What it does not do

There is no interactive play and no reading or writing of dungeon files:
dungeons are passed in and returned as lists of strings, and the command only
runs the fixed set of checks described above.