import pytest

from dungeonpath.cell import DIRECTIONS, Cell


def test_default_cell_is_origin():
    assert Cell() == Cell(0, 0)


def test_equality_and_hash():
    assert Cell(2, 3) == Cell(2, 3)
    assert Cell(2, 3) != Cell(3, 2)
    assert len({Cell(1, 1), Cell(1, 1), Cell(1, 2)}) == 2


def test_step_moves_by_offset():
    assert Cell(4, 5).step(-1, 0) == Cell(3, 5)
    assert Cell(4, 5).step(0, 1) == Cell(4, 6)


def test_neighbors_follow_direction_order():
    origin = Cell(5, 5)
    expected = [Cell(5 + dr, 5 + dc) for dr, dc in DIRECTIONS]
    assert list(origin.neighbors()) == expected


def test_neighbors_are_all_adjacent():
    origin = Cell(2, 7)
    assert all(origin.is_adjacent(n) for n in origin.neighbors())


@pytest.mark.parametrize(
    "other, adjacent",
    [
        (Cell(1, 2), True),
        (Cell(3, 2), True),
        (Cell(2, 1), True),
        (Cell(2, 3), True),
        (Cell(2, 2), False),
        (Cell(3, 3), False),
        (Cell(2, 4), False),
    ],
)
def test_is_adjacent(other, adjacent):
    assert Cell(2, 2).is_adjacent(other) is adjacent


def test_cell_is_immutable():
    cell = Cell(1, 1)
    with pytest.raises(AttributeError):
        cell.r = 4
    assert cell.r == 1
    assert cell == Cell(1, 1)