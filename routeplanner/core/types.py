# routeplanner/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any, Sequence

from routeplanner.core.errors import IllegalTransition

Cell = Tuple[int, int]  # (row, col)


class CellState(Enum):
    EMPTY = "empty"
    OBSTACLE = "obstacle"
    VISITED = "visited"    # claimed by the frontier
    PATH = "path"          # expanded
    START = "start"
    FINISH = "finish"
    CHOSEN = "chosen"      # start reserved by the operator, goal not picked yet


# state -> states it may move to through Grid.mark()
TRANSITIONS: Dict[CellState, frozenset] = {
    CellState.EMPTY:    frozenset({CellState.VISITED, CellState.CHOSEN}),
    CellState.CHOSEN:   frozenset({CellState.EMPTY, CellState.VISITED}),
    CellState.VISITED:  frozenset({CellState.PATH, CellState.START, CellState.FINISH}),
    CellState.PATH:     frozenset({CellState.START}),
    CellState.OBSTACLE: frozenset(),
    CellState.START:    frozenset(),
    CellState.FINISH:   frozenset(),
}


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[CellState]]       # [row][col]

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("grid must have at least one row and one column")
        if len(self.cells) != self.rows or any(len(r) != self.cols for r in self.cells):
            raise ValueError("cells size mismatch")

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "Grid":
        """0 -> EMPTY, anything else -> OBSTACLE."""
        cells = [[CellState.EMPTY if v == 0 else CellState.OBSTACLE for v in row]
                 for row in matrix]
        cols = len(cells[0]) if cells else 0
        return cls(len(cells), cols, cells)

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def state(self, c: Cell) -> CellState:
        r, col = c
        return self.cells[r][col]

    def is_empty(self, c: Cell) -> bool:
        return self.in_bounds(c) and self.state(c) is CellState.EMPTY

    def mark(self, c: Cell, new_state: CellState) -> None:
        """Move cell c to new_state; the only place cells change."""
        old = self.state(c)
        if new_state not in TRANSITIONS[old]:
            raise IllegalTransition(f"cell {c}: {old.name} -> {new_state.name} not allowed")
        r, col = c
        self.cells[r][col] = new_state

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self.cells)

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(row) for row in self.cells])

    def to_matrix(self) -> List[List[int]]:
        return [[0 if s is not CellState.OBSTACLE else 1 for s in row] for row in self.cells]


@dataclass(frozen=True)
class SearchNode:
    cell: Cell
    g: int    # steps from start
    h: int    # manhattan to goal

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass(frozen=True)
class NoPathFound:
    start: Cell
    goal: Cell
    expanded: int = 0

    def __bool__(self) -> bool:
        return False


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[SearchNode] = None
    route: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
