import pytest

from routeplanner.app.prompt import get_user_input, parse_coordinate, validate_choice
from routeplanner.core.errors import InvalidCoordinate
from routeplanner.core.types import CellState, Grid


def scripted(*lines):
    """read() replacement that hands out lines, then behaves like a closed stdin."""
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return read


@pytest.mark.parametrize("text,cell", [
    ("1 2", (1, 2)),
    ("1,2", (1, 2)),
    ("  3    4 ", (3, 4)),
    ("0, 5", (0, 5)),
])
def test_parse_coordinate(text, cell):
    assert parse_coordinate(text) == cell


@pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "1.5 2"])
def test_parse_coordinate_rejects(text):
    with pytest.raises(InvalidCoordinate):
        parse_coordinate(text)


def test_validate_choice(open_grid):
    assert validate_choice(open_grid, (0, 2)) == (0, 2)
    with pytest.raises(InvalidCoordinate, match="not on the 3x3 grid"):
        validate_choice(open_grid, (3, 0))
    with pytest.raises(InvalidCoordinate, match="not a free cell"):
        validate_choice(open_grid, (1, 1))
    open_grid.mark((0, 0), CellState.CHOSEN)
    with pytest.raises(InvalidCoordinate, match="already the start"):
        validate_choice(open_grid, (0, 0))


def test_happy_path_reserves_start(open_grid):
    out = []
    start, goal = get_user_input(open_grid, scripted("0 0", "2 2"), out.append)
    assert (start, goal) == ((0, 0), (2, 2))
    assert open_grid.state((0, 0)) is CellState.CHOSEN
    assert open_grid.state((2, 2)) is CellState.EMPTY
    assert not any("Invalid Input" in line for line in out)
    assert any('"2 2"' in line for line in out)   # rules show the bottom-right cell


def test_bad_start_is_reprompted(open_grid):
    out = []
    start, goal = get_user_input(open_grid, scripted("9 9", "1 1", "x", "0 1", "2 0"), out.append)
    assert (start, goal) == ((0, 1), (2, 0))
    assert sum("Invalid Input!!" in line for line in out) == 3


def test_bad_goal_rolls_start_back(open_grid):
    out = []
    read = scripted("0 0", "1 1", "2 2", "0 2")
    start, goal = get_user_input(open_grid, read, out.append)
    # (0,0) was released after the obstacle goal, then (2,2) became start
    assert (start, goal) == ((2, 2), (0, 2))
    assert open_grid.state((0, 0)) is CellState.EMPTY
    assert open_grid.state((2, 2)) is CellState.CHOSEN


def test_goal_equal_to_start_is_rejected(open_grid):
    out = []
    start, goal = get_user_input(open_grid, scripted("0 0", "0 0", "0 0", "1 0"), out.append)
    assert (start, goal) == ((0, 0), (1, 0))
    assert any("already the start" in line for line in out)


def test_eof_while_asking_goal_releases_start(open_grid):
    with pytest.raises(EOFError):
        get_user_input(open_grid, scripted("0 0"), lambda _s: None)
    assert open_grid.state((0, 0)) is CellState.EMPTY


def test_single_cell_grid_cannot_be_used():
    grid = Grid.from_matrix([[0]])
    with pytest.raises(InvalidCoordinate):
        get_user_input(grid, scripted("0 0", "0 0"), lambda _s: None)


def test_defaults_use_builtin_input(monkeypatch, capsys, open_grid):
    monkeypatch.setattr("builtins.input", scripted("2 0", "0 2"))
    assert get_user_input(open_grid) == ((2, 0), (0, 2))
    assert "Enter finishing cell" in capsys.readouterr().out
