import pytest

from routeplanner.core.errors import LoadError
from routeplanner.core.loader import list_grid_files, parse_grid, parse_line, read_grid_file
from routeplanner.core.types import CellState

E, X = CellState.EMPTY, CellState.OBSTACLE


def test_parse_line_basic():
    assert parse_line("0,1,0,0,") == [E, X, E, E]


def test_parse_line_tolerates_spaces_and_big_numbers():
    assert parse_line("  0 , 3,12 ,0,  ") == [E, X, X, E]


@pytest.mark.parametrize("line", [
    "",
    "   ",
    "0,1,0",      # no trailing comma
    "0,a,0,",
    "0;1;0;",
    "0,,1,",
    "-1,0,",
    ",0,1,",
])
def test_parse_line_rejects_malformed(line):
    with pytest.raises(LoadError):
        parse_line(line)


def test_parse_grid_reads_rows():
    g = parse_grid("0,1,0,\n0,0,0,\n")
    assert (g.rows, g.cols) == (2, 3)
    assert g.cells == [[E, X, E], [E, E, E]]


def test_parse_grid_ignores_trailing_blank_lines():
    g = parse_grid("0,0,\n0,1,\n\n\n")
    assert g.rows == 2


def test_parse_grid_accepts_crlf():
    g = parse_grid("0,0,\r\n1,0,\r\n")
    assert g.cells == [[E, E], [X, E]]


def test_parse_grid_uneven_rows_fails_whole_load():
    with pytest.raises(LoadError, match="line 2"):
        parse_grid("0,0,0,\n0,0,\n0,0,0,\n")


def test_parse_grid_blank_line_in_the_middle_fails():
    with pytest.raises(LoadError, match="line 2"):
        parse_grid("0,0,\n\n0,0,\n")


def test_parse_grid_empty_source_fails():
    with pytest.raises(LoadError):
        parse_grid("\n\n")


def test_read_grid_file(grid_file):
    path = grid_file([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    g = read_grid_file(path)
    assert g.to_matrix() == [[0, 0, 0], [0, 1, 0], [0, 0, 0]]


def test_read_grid_file_missing(tmp_path):
    with pytest.raises(LoadError, match="cannot read"):
        read_grid_file(tmp_path / "nope.board")


def test_read_grid_file_directory(tmp_path):
    with pytest.raises(LoadError):
        read_grid_file(tmp_path)


def test_list_grid_files(tmp_path):
    for name in ("b.board", "a.txt", "notes.md", "c.csv"):
        (tmp_path / name).write_text("0,\n")
    (tmp_path / "sub.board").mkdir()
    assert list_grid_files(tmp_path) == ["a.txt", "b.board", "c.csv"]
    assert list_grid_files(tmp_path / "missing") == []
