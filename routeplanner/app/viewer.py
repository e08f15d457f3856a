# routeplanner/app/viewer.py
#!/usr/bin/env python3
"""
Route Planner Viewer: pick two cells, watch A* expand

- Mouse:
    left click   -> first click picks start, second click picks goal
- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset search (keeps start/goal)
    [C]          -> clear start/goal
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Flags: --grid=FILE --grid-dir=DIR --start=r,c --goal=r,c --speed=N
"""

# --- bootstrap import path so `from routeplanner...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

import time
from typing import List, Tuple, Optional

import pygame

from routeplanner.app import config
from routeplanner.app.prompt import validate_choice
from routeplanner.core.astar import AStarAlgo
from routeplanner.core.errors import InvalidCoordinate, LoadError
from routeplanner.core.loader import list_grid_files, read_grid_file
from routeplanner.core.types import Cell, CellState, Grid

PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 36
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
NEON_MINT   = (0,255,200)
CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

CELL_COLORS = {
    CellState.EMPTY:    (200,200,200),
    CellState.OBSTACLE: ( 40, 40, 44),
    CellState.VISITED:  (  0,150,255),
    CellState.PATH:     (255,  0,120),
    CellState.START:    ( 70,130,180),
    CellState.FINISH:   (220, 50, 47),
    CellState.CHOSEN:   ( 46,139, 87),
}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, steps_per_sec: int = config.DEFAULT_SPEED):
        pygame.init()

        self.grid = grid        # loaded grid; only start reservation touches it
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        cs = self._auto_cell_size(grid)
        win_w = GRID_MARGIN*2 + grid.cols * cs + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.rows * cs, 480)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Route Planner - A*")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.algo = AStarAlgo()
        self.start: Optional[Cell] = None
        self.goal: Optional[Cell] = None
        self.route: List[Cell] = []

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = steps_per_sec
        self.state = "Pick start"
        self.message = ""
        self._last_step_t = 0.0
        self._last_metrics: dict = {}

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid on the left."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(8, min(avail_w // self.grid.cols, avail_h // self.grid.rows)))
        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        grid_right = GRID_MARGIN*2 + self.grid.cols * self.cell_size
        self._right_band = pygame.Rect(grid_right, 0, max(PANEL_W, win_w - grid_right), win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.rows))

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        cell = (row, col)
        return cell if self.grid.in_bounds(cell) else None

    # ---------- picking ----------
    def pick(self, cell: Cell) -> bool:
        """Use cell as start (first pick) or goal (second pick)."""
        if self.goal is not None:
            return False
        try:
            validate_choice(self.grid, cell)
        except InvalidCoordinate as ex:
            self.message = str(ex)
            print(f"Invalid pick: {ex}")
            return False
        self.message = ""
        if self.start is None:
            self.grid.mark(cell, CellState.CHOSEN)
            self.start = cell
            self.state = "Pick goal"
        else:
            self.goal = cell
            self.algo.init(self.grid, self.start, self.goal)
            self.state = "Ready"
        return True

    def _clear_picks(self):
        if self.start is not None:
            self.grid.mark(self.start, CellState.EMPTY)
        self.start = self.goal = None
        self.algo = AStarAlgo()
        self.route = []
        self.running = False
        self.state = "Pick start"
        self._last_metrics = {}
        self._refresh_active_states()

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        if self.goal is None or self.state in ("Done", "No path"):
            return
        res = self.algo.step()
        if res.route is not None:
            self.route = res.route
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        self._last_metrics = res.metrics
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_c:
                    self._clear_picks()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
            elif e.type == pygame.VIDEORESIZE:
                w, h = max(480, e.w), max(360, e.h)
                self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                self._layout(w, h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                hit = any(b.handle_mouse(e) for b in list(self._buttons))
                if not hit and e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    cell = self._cell_at(e.pos)
                    if cell is not None:
                        self.pick(cell)

    def _reset(self):
        self.running = False
        self.route = []
        self._last_metrics = {}
        if self.goal is not None:
            self.algo.reset()
            self.state = "Ready"
        self._refresh_active_states()

    def _toggle_run(self):
        if self.goal is None or self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(config.MIN_SPEED, min(config.MAX_SPEED, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill((24, 26, 32))
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        shown = self.algo.grid if self.algo.grid is not None else self.grid

        for row in range(shown.rows):
            for col in range(shown.cols):
                rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
                pygame.draw.rect(self.screen, CELL_COLORS[shown.cells[row][col]], rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        # route (display only; the grid itself shows the expansion trace)
        if len(self.route) >= 2:
            pts = [(ox + c*cs + cs//2, oy + r*cs + cs//2) for (r, c) in self.route]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, 5)

        for cell, label in ((self.start, "S"), (self.goal, "G")):
            if cell is None:
                continue
            r, c = cell
            txt = self.font.render(label, True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=(ox + c*cs + cs//2, oy + r*cs + cs//2)))

    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10

        self.btn_run = UIButton("Run / Pause", pygame.Rect(x, y, w, h), self._toggle_run, togglable=True)
        self._buttons.append(self.btn_run); y += h + gap
        self._buttons.append(UIButton("Step Once", pygame.Rect(x, y, w, h), self._do_step)); y += h + gap
        self._buttons.append(UIButton("Reset", pygame.Rect(x, y, w, h), self._reset)); y += h + gap
        self._buttons.append(UIButton("Clear Start/Goal", pygame.Rect(x, y, w, h), self._clear_picks)); y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line(self.state, big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Frontier: {m.get('frontier_size', 0)}")
        line(f"Visited: {m.get('visited_count', 0)}")
        if m.get("goal_g") is not None:
            line(f"Steps to goal: {m['goal_g']}")
        line("-" * 26)
        line(f"Speed: {self.steps_per_sec} steps/s")
        if self.message:
            line(self.message[:34], color=(255, 140, 120))

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    grid_dir = config.resolve_grid_dir(argv)
    name = config.flag("grid", argv)
    if not name:
        names = list_grid_files(grid_dir)
        if not names:
            print(f"No grid files found in {grid_dir}")
            sys.exit(1)
        name = names[0]
    try:
        grid = read_grid_file(config.resolve_grid_path(name, argv))
    except LoadError as ex:
        print(f"Failed to load grid {name}: {ex}")
        sys.exit(1)

    viewer = Viewer(grid, steps_per_sec=config.resolve_speed(argv))
    for key in ("start", "goal"):
        cell = config.resolve_cell(key, argv)
        if cell is None:
            continue
        if (key == "goal" and viewer.start is None) or not viewer.pick(cell):
            print(f"Ignoring --{key}={cell[0]},{cell[1]}")
    viewer.run()

if __name__ == "__main__":
    main()
