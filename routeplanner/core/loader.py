#!/usr/bin/env python3
"""
Grid file loader.

A grid file holds one row per line, every cell written as a small
non-negative integer followed by a comma:

    0,1,0,0,0,0,
    0,1,0,0,0,0,
    0,0,1,0,1,0,

0 is free space, anything else is an obstacle. Loading is all or nothing:
one bad line and the whole file is rejected with LoadError.
"""

import re
from pathlib import Path
from typing import List, Union

from routeplanner.core.errors import LoadError
from routeplanner.core.types import CellState, Grid

_ROW_RE = re.compile(r"^\s*(?:\d+\s*,\s*)+$")
GRID_SUFFIXES = (".board", ".txt", ".csv")


def parse_line(line: str) -> List[CellState]:
    """One row of the grid file -> list of states. Raises LoadError."""
    if not _ROW_RE.match(line):
        raise LoadError(f"malformed row: {line.strip()!r}")
    tokens = [t.strip() for t in line.split(",")][:-1]  # last piece follows the trailing comma
    return [CellState.EMPTY if int(t) == 0 else CellState.OBSTACLE for t in tokens]


def parse_grid(text: str) -> Grid:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise LoadError("grid source is empty")

    cells: List[List[CellState]] = []
    for lineno, line in enumerate(lines, start=1):
        try:
            row = parse_line(line)
        except LoadError as ex:
            raise LoadError(f"line {lineno}: {ex}") from None
        if cells and len(row) != len(cells[0]):
            raise LoadError(f"line {lineno}: expected {len(cells[0])} cells, got {len(row)}")
        cells.append(row)
    return Grid(len(cells), len(cells[0]), cells)


def read_grid_file(path: Union[str, Path]) -> Grid:
    """Read and parse a grid file. Missing or unreadable files raise LoadError too."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise LoadError(f"cannot read {path}: {ex}") from ex
    return parse_grid(text)


def list_grid_files(directory: Union[str, Path]) -> List[str]:
    """Names of grid files in directory, sorted. Missing directory -> []."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(p.name for p in directory.iterdir()
                  if p.is_file() and p.suffix in GRID_SUFFIXES)
