# routeplanner/app/cli.py
#!/usr/bin/env python3
"""
Terminal route planner.

    routeplanner [--grid=FILE] [--grid-dir=DIR] [--glyphs=ascii|emoji]

Reads a grid file, prints it, asks for a start and a goal cell, runs A* and
prints the solved grid (or "No path found").
"""

# --- bootstrap import path so `from routeplanner...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from typing import List, Optional

from routeplanner.app import config
from routeplanner.app.prompt import get_user_input
from routeplanner.app.render import legend, print_board
from routeplanner.core.astar import search
from routeplanner.core.errors import InvalidCoordinate, LoadError
from routeplanner.core.loader import list_grid_files, read_grid_file

BANNER = (
    "Using A* search algorithm, this program will find the optimum path\n"
    "between any 2 user given points in a 2 Dimensional Grid comprising\n"
    "of randomly placed obstacles.\n"
)


def _ask_grid_name(argv: Optional[List[str]]) -> str:
    grid_dir = config.resolve_grid_dir(argv)
    print(f"Choose a grid file from the {grid_dir} folder and enter its name below")
    names = list_grid_files(grid_dir)
    if names:
        print("Available: " + ", ".join(names))
    return input().strip()


def main(argv: Optional[List[str]] = None) -> int:
    glyphs = config.resolve_glyphs(argv)
    print(BANNER)

    try:
        name = config.flag("grid", argv) or _ask_grid_name(argv)
        grid = read_grid_file(config.resolve_grid_path(name, argv))
    except LoadError as ex:
        print("Invalid file path or grid file. Terminating program!")
        print(f"  ({ex})")
        return 1
    except EOFError:
        print("No grid file given. Terminating program!")
        return 1

    print("Valid grid board! Printing the grid")
    print_board(grid, glyphs)

    try:
        start, goal = get_user_input(grid)
    except InvalidCoordinate as ex:
        print(f"Cannot choose start and goal: {ex}")
        return 1
    except EOFError:
        print("Input closed before start and goal were chosen.")
        return 1
    print()

    result = search(grid, start, goal)
    if not result:
        print("No path found")
        return 0

    print("Optimum path found. Printing solution grid")
    print()
    print_board(result, glyphs)
    print()
    print(legend(glyphs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
