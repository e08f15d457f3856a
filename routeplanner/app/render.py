# routeplanner/app/render.py
#!/usr/bin/env python3
"""Text rendering of a grid: one token per cell, space separated, one row per line."""

from typing import Dict

from routeplanner.core.types import CellState, Grid

GLYPHS: Dict[str, Dict[CellState, str]] = {
    "ascii": {
        CellState.EMPTY:    ".",
        CellState.OBSTACLE: "#",
        CellState.VISITED:  "o",
        CellState.PATH:     "*",
        CellState.START:    "S",
        CellState.FINISH:   "G",
        CellState.CHOSEN:   "?",
    },
    "emoji": {
        CellState.EMPTY:    "0",
        CellState.OBSTACLE: "⛰️",
        CellState.VISITED:  "👀",
        CellState.PATH:     "🚗",
        CellState.START:    "🚦",
        CellState.FINISH:   "🏁",
        CellState.CHOSEN:   "📍",
    },
}

LEGEND_NAMES = {
    CellState.EMPTY:    "free",
    CellState.OBSTACLE: "obstacle",
    CellState.VISITED:  "queued",
    CellState.PATH:     "expanded",
    CellState.START:    "start",
    CellState.FINISH:   "finish",
    CellState.CHOSEN:   "chosen",
}


def cell_string(state: CellState, glyphs: str = "ascii") -> str:
    return GLYPHS[glyphs][state]


def render_board(grid: Grid, glyphs: str = "ascii") -> str:
    return "".join(" ".join(cell_string(s, glyphs) for s in row) + "\n"
                   for row in grid.cells)


def print_board(grid: Grid, glyphs: str = "ascii") -> None:
    print(render_board(grid, glyphs), end="")


def legend(glyphs: str = "ascii") -> str:
    return "  ".join(f"{cell_string(s, glyphs)} {LEGEND_NAMES[s]}" for s in CellState)
