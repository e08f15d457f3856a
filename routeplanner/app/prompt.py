# routeplanner/app/prompt.py
#!/usr/bin/env python3
"""
Ask the operator for a start and a goal cell.

- A coordinate is "row col" (a comma works too), 0-indexed.
- Both cells must be on the grid and free; start and goal must differ.
- An accepted start is reserved (CHOSEN) while the goal is asked for; a bad
  goal releases it and the operator starts over from the start prompt.
"""

from typing import Callable, Optional, Tuple

from routeplanner.core.errors import InvalidCoordinate
from routeplanner.core.types import Cell, CellState, Grid

RULE_BAR = "=" * 86


def parse_coordinate(text: str) -> Cell:
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise InvalidCoordinate(f"expected two numbers, got {text.strip()!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidCoordinate(f"not a number in {text.strip()!r}") from None


def validate_choice(grid: Grid, cell: Cell) -> Cell:
    if not grid.in_bounds(cell):
        raise InvalidCoordinate(f"{cell} is not on the {grid.rows}x{grid.cols} grid")
    state = grid.state(cell)
    if state is CellState.CHOSEN:
        raise InvalidCoordinate(f"{cell} is already the start cell")
    if state is not CellState.EMPTY:
        raise InvalidCoordinate(f"{cell} is not a free cell")
    return cell


def rules(grid: Grid) -> str:
    return "\n".join([
        "Rules to choose your own starting and finishing cell positions in the grid",
        RULE_BAR,
        "1. Row and column index values start from 0",
        f'   Meaning top left cell position is "0 0" and bottom right cell position '
        f'is "{grid.rows - 1} {grid.cols - 1}"',
        "2. Chosen cell position must be on the grid",
        "3. Only an empty cell can be chosen",
        "4. Starting and finishing cell cannot be same",
        RULE_BAR,
    ])


def get_user_input(grid: Grid,
                   read: Optional[Callable[[], str]] = None,
                   write: Optional[Callable[[str], None]] = None) -> Tuple[Cell, Cell]:
    """Prompt until a valid (start, goal) pair is given. Leaves start CHOSEN in grid."""
    read = read or input
    write = write or print
    if grid.count(CellState.EMPTY) < 2:
        raise InvalidCoordinate("grid needs at least two free cells to pick a start and a goal")

    write("")
    write(rules(grid))
    write("")
    while True:
        write("Enter starting cell row and column values in grid separated by a space")
        try:
            start = validate_choice(grid, parse_coordinate(read()))
        except InvalidCoordinate as ex:
            write(f"Invalid Input!! {ex}")
            continue
        grid.mark(start, CellState.CHOSEN)

        write("Enter finishing cell row and column values in grid separated by a space")
        try:
            goal = validate_choice(grid, parse_coordinate(read()))
        except InvalidCoordinate as ex:
            write(f"Invalid Input!! {ex}")
            grid.mark(start, CellState.EMPTY)
            continue
        except EOFError:
            grid.mark(start, CellState.EMPTY)
            raise
        return start, goal
