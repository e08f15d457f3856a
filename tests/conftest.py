# tests/conftest.py
import sys, os

import pytest

# project root (one level up from tests/)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from routeplanner.core.types import Grid

RING_GRID = [
    [0, 0, 0],
    [0, 1, 0],
    [0, 0, 0],
]

WALLED_GRID = [
    [0, 1, 0],
    [0, 1, 0],
    [0, 1, 0],
]


@pytest.fixture
def open_grid():
    return Grid.from_matrix(RING_GRID)


@pytest.fixture
def walled_grid():
    return Grid.from_matrix(WALLED_GRID)


@pytest.fixture
def grid_file(tmp_path):
    """Write rows (lists of ints) as a grid file and return its path."""
    def _write(rows, name="test.board"):
        p = tmp_path / name
        p.write_text("".join("".join(f"{v}," for v in r) + "\n" for r in rows))
        return p
    return _write
