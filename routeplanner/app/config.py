# routeplanner/app/config.py
#!/usr/bin/env python3
"""
Runtime settings. Each one reads an environment variable first and lets a
`--key=value` command-line flag override it.

- ROUTEPLANNER_GRID_DIR      / --grid-dir=  folder bare grid names are looked up in
- ROUTEPLANNER_GLYPHS        / --glyphs=    ascii | emoji
- ROUTEPLANNER_STEPS_PER_SEC / --speed=     viewer animation speed, 1..60

Flag-only: --grid=FILE (skip the file prompt), --start=r,c and --goal=r,c
(viewer preselection).
"""

import os
import sys
from pathlib import Path
from typing import List, Optional

from routeplanner.core.types import Cell

DEFAULT_GRID_DIR = "grid_files"
GLYPH_SETS = ("ascii", "emoji")
MIN_SPEED, MAX_SPEED, DEFAULT_SPEED = 1, 60, 8


def _argv(argv: Optional[List[str]]) -> List[str]:
    return sys.argv[1:] if argv is None else argv


def flag(name: str, argv: Optional[List[str]] = None) -> Optional[str]:
    """Value of the last --name=value in argv, or None."""
    value = None
    prefix = f"--{name}="
    for arg in _argv(argv):
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def resolve_grid_dir(argv: Optional[List[str]] = None) -> Path:
    d = os.getenv("ROUTEPLANNER_GRID_DIR", DEFAULT_GRID_DIR)
    d = flag("grid-dir", argv) or d
    return Path(d)


def resolve_glyphs(argv: Optional[List[str]] = None) -> str:
    glyphs = os.getenv("ROUTEPLANNER_GLYPHS", "ascii").lower()
    glyphs = (flag("glyphs", argv) or glyphs).lower()
    return glyphs if glyphs in GLYPH_SETS else "ascii"


def resolve_speed(argv: Optional[List[str]] = None) -> int:
    raw = flag("speed", argv) or os.getenv("ROUTEPLANNER_STEPS_PER_SEC", str(DEFAULT_SPEED))
    try:
        speed = int(raw)
    except ValueError:
        speed = DEFAULT_SPEED
    return max(MIN_SPEED, min(MAX_SPEED, speed))


def resolve_grid_path(name: str, argv: Optional[List[str]] = None) -> Path:
    """A bare file name is looked up in the grid dir; paths are used as given."""
    p = Path(name)
    if p.is_absolute() or p.parent != Path(".") or p.exists():
        return p
    return resolve_grid_dir(argv) / p


def resolve_cell(name: str, argv: Optional[List[str]] = None) -> Optional[Cell]:
    """--start=r,c / --goal=r,c; malformed values are ignored."""
    raw = flag(name, argv)
    if not raw:
        return None
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None
