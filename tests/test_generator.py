import random

import pytest

from dungeonpath.generator import carve_passage, generate_dungeon
from dungeonpath.solver import bfs_path


def _count(dungeon, chars):
    return sum(row.count(ch) for row in dungeon for ch in chars)


def test_even_dimensions_are_rounded_up_to_odd():
    dungeon = generate_dungeon(8, 10, 20, random.Random(1))
    assert len(dungeon) == 9
    assert {len(row) for row in dungeon} == {11}


def test_tiny_dimensions_are_raised_to_minimum():
    dungeon = generate_dungeon(1, 2, 20, random.Random(1))
    assert len(dungeon) == 5
    assert {len(row) for row in dungeon} == {5}


def test_default_rng_and_room_rate_work():
    dungeon = generate_dungeon(11, 11)
    assert _count(dungeon, "S") == 1
    assert _count(dungeon, "E") == 1


@pytest.mark.parametrize("seed", range(8))
def test_border_is_all_wall(seed):
    dungeon = generate_dungeon(15, 21, 30, random.Random(seed))
    assert set(dungeon[0]) == {"#"}
    assert set(dungeon[-1]) == {"#"}
    assert all(row[0] == "#" and row[-1] == "#" for row in dungeon)


@pytest.mark.parametrize("seed", range(8))
def test_start_is_first_carved_cell_and_exit_present(seed):
    dungeon = generate_dungeon(9, 9, 10, random.Random(seed))
    assert dungeon[1][1] == "S"
    assert _count(dungeon, "S") == 1
    assert _count(dungeon, "E") == 1


@pytest.mark.parametrize("seed", range(10))
def test_generated_dungeon_is_solvable(seed):
    dungeon = generate_dungeon(9, 9, 10, random.Random(seed))
    path = bfs_path(dungeon)
    assert path
    assert dungeon[path[0].r][path[0].c] == "S"
    assert dungeon[path[-1].r][path[-1].c] == "E"


@pytest.mark.parametrize("size", [(5, 5), (9, 9), (11, 15)])
def test_zero_room_rate_gives_perfect_maze(size):
    rows, cols = size
    dungeon = generate_dungeon(rows, cols, 0, random.Random(3))
    cells = ((rows - 1) // 2) * ((cols - 1) // 2)
    # A spanning tree over the cells opens one wall per edge.
    assert _count(dungeon, " SE") == 2 * cells - 1


def test_rooms_only_add_openings():
    perfect = generate_dungeon(21, 21, 0, random.Random(4))
    roomy = generate_dungeon(21, 21, 100, random.Random(4))
    assert _count(roomy, " SE") >= _count(perfect, " SE")


def test_same_seed_gives_same_dungeon():
    first = generate_dungeon(13, 17, 25, random.Random(42))
    second = generate_dungeon(13, 17, 25, random.Random(42))
    assert first == second


def test_smallest_maze_places_exit_in_far_corner():
    dungeon = generate_dungeon(5, 5, 0, random.Random(0))
    assert dungeon[1][1] == "S"
    assert dungeon[3][3] == "E"


def test_carve_passage_opens_target_and_wall_between():
    maze = [["#"] * 5 for _ in range(5)]
    carve_passage(maze, 1, 1, 1, 3)
    assert maze[1][2] == " "
    assert maze[1][3] == " "
    assert maze[1][1] == "#"


def test_carve_passage_vertical():
    maze = [["#"] * 5 for _ in range(5)]
    carve_passage(maze, 3, 1, 1, 1)
    assert maze[2][1] == " "
    assert maze[1][1] == " "
    assert maze[3][1] == "#"