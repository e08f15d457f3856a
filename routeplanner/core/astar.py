#!/usr/bin/env python3
"""
A* route planner on a 4-connected grid, one expansion per step().

Algorithm API (shared by the terminal program and the viewer):
- init(grid, start, goal) - reset() - step() -> StepResult - run()
- search(grid, start, goal) -> Grid | NoPathFound runs a whole search.

Heuristic:
- Manhattan distance; every step costs 1, so it is admissible and consistent.

Cell marking:
- A cell is marked VISITED the moment it enters the frontier, so it is
  never queued twice and its g/h never change afterwards.
- A popped cell that is not the goal is marked PATH. The solved grid
  therefore shows every expanded cell as PATH, not just the route.
- When the goal is popped, start becomes START and goal becomes FINISH.

Tie-breaking in the PQ:
- (f, seq, node): lower f first, then FIFO by seq.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional, Union
import heapq

from routeplanner.core.types import Cell, CellState, Grid, NoPathFound, SearchNode, StepResult

# up, left, down, right
DIRECTIONS: Tuple[Cell, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class AStarAlgo:
    name: str = "A*"

    # Internal state
    grid: Optional[Grid] = None            # workspace, mutated while searching
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    open_pq: List[Tuple[int, int, SearchNode]] = field(default_factory=list)  # (f, seq, node)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    goal_g: Optional[int] = None
    done: bool = False
    no_path: bool = False
    seq: int = 0  # monotonic counter for FIFO among equal f
    _source: Optional[Grid] = field(default=None, repr=False)

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Cell, goal: Cell) -> None:
        """Check preconditions and seed a search over a private copy of grid."""
        start, goal = tuple(start), tuple(goal)
        if not grid.in_bounds(start):
            raise ValueError(f"start {start} out of bounds")
        if not grid.in_bounds(goal):
            raise ValueError(f"goal {goal} out of bounds")
        if start == goal:
            raise ValueError("start and goal must differ")
        if grid.state(start) not in (CellState.EMPTY, CellState.CHOSEN):
            raise ValueError(f"start {start} is {grid.state(start).name}, expected EMPTY")
        if grid.state(goal) is not CellState.EMPTY:
            raise ValueError(f"goal {goal} is {grid.state(goal).name}, expected EMPTY")

        self._source = grid.copy()
        self.start = start
        self.goal = goal
        self.reset()

    def reset(self) -> None:
        """Throw away all progress and seed the frontier with the start node."""
        if self._source is None:
            return
        self.grid = self._source.copy()
        self.open_pq.clear()
        self.parent.clear()
        self.popped_count = 0
        self.goal_g = None
        self.done = False
        self.no_path = False
        self.seq = 0

        self._push(SearchNode(self.start, 0, manhattan(self.start, self.goal)))

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, node: SearchNode) -> None:
        heapq.heappush(self.open_pq, (node.f, self._bump(), node))
        self.grid.mark(node.cell, CellState.VISITED)

    def _neighbors4(self, c: Cell) -> List[Cell]:
        """In-bounds, still EMPTY neighbours of c in up/left/down/right order."""
        r, col = c
        out: List[Cell] = []
        for dr, dc in DIRECTIONS:
            n = (r + dr, col + dc)
            if self.grid.is_empty(n):
                out.append(n)
        return out

    def _reconstruct_route(self, end: Cell) -> List[Cell]:
        route: List[Cell] = [end]
        cur = end
        while cur != self.start:
            cur = self.parent[cur]
            route.append(cur)
        route.reverse()
        return route

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* step:
          - Pop the lowest-f node.
          - If goal, mark START/FINISH and finish.
          - Else mark it PATH and claim its empty neighbours.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            route = self._reconstruct_route(self.goal)
            return StepResult(status="done", route=route, metrics=self._metrics())

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.open_pq:
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        _, _, node = heapq.heappop(self.open_pq)
        self.popped_count += 1
        u = node.cell

        if u == self.goal:
            self.grid.mark(self.start, CellState.START)
            self.grid.mark(u, CellState.FINISH)
            self.goal_g = node.g
            self.done = True
            return StepResult(status="done", closed=[u], current=node,
                              route=self._reconstruct_route(u), metrics=self._metrics())

        self.grid.mark(u, CellState.PATH)

        opened_now: List[Cell] = []
        for v in self._neighbors4(u):
            self.parent[v] = u
            self._push(SearchNode(v, node.g + 1, manhattan(v, self.goal)))
            opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=node,
                          metrics=self._metrics())

    def run(self) -> StepResult:
        """Step until the search finishes either way."""
        res = self.step()
        while res.status == "running":
            res = self.step()
        return res

    # -------------------- metrics --------------------

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "frontier_size": len(self.open_pq),
            "visited_count": len(self.parent) + 1,
            "goal_g": self.goal_g,
        }


def search(grid: Grid, start: Cell, goal: Cell) -> Union[Grid, NoPathFound]:
    """Solve grid from start to goal. The caller's grid is left untouched."""
    algo = AStarAlgo()
    algo.init(grid, start, goal)
    res = algo.run()
    if res.status == "done":
        return algo.grid
    return NoPathFound(algo.start, algo.goal, algo.popped_count)
