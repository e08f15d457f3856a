from pathlib import Path

import pytest

from routeplanner.app import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("ROUTEPLANNER_GRID_DIR", "ROUTEPLANNER_GLYPHS", "ROUTEPLANNER_STEPS_PER_SEC"):
        monkeypatch.delenv(var, raising=False)


def test_flag_last_one_wins():
    assert config.flag("grid", ["--grid=a", "x", "--grid=b"]) == "b"
    assert config.flag("grid", ["--gridx=a"]) is None


def test_grid_dir_env_and_flag(monkeypatch):
    assert config.resolve_grid_dir([]) == Path("grid_files")
    monkeypatch.setenv("ROUTEPLANNER_GRID_DIR", "/maps")
    assert config.resolve_grid_dir([]) == Path("/maps")
    assert config.resolve_grid_dir(["--grid-dir=other"]) == Path("other")


def test_glyphs(monkeypatch):
    assert config.resolve_glyphs([]) == "ascii"
    monkeypatch.setenv("ROUTEPLANNER_GLYPHS", "EMOJI")
    assert config.resolve_glyphs([]) == "emoji"
    assert config.resolve_glyphs(["--glyphs=ascii"]) == "ascii"
    assert config.resolve_glyphs(["--glyphs=braille"]) == "ascii"


@pytest.mark.parametrize("argv,expected", [
    ([], config.DEFAULT_SPEED),
    (["--speed=20"], 20),
    (["--speed=0"], 1),
    (["--speed=500"], 60),
    (["--speed=fast"], config.DEFAULT_SPEED),
])
def test_speed(argv, expected):
    assert config.resolve_speed(argv) == expected


def test_speed_from_env(monkeypatch):
    monkeypatch.setenv("ROUTEPLANNER_STEPS_PER_SEC", "12")
    assert config.resolve_speed([]) == 12


def test_grid_path_resolution(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ROUTEPLANNER_GRID_DIR", "maps")
    assert config.resolve_grid_path("a.board", []) == Path("maps") / "a.board"
    assert config.resolve_grid_path("sub/a.board", []) == Path("sub/a.board")
    (tmp_path / "here.board").write_text("0,\n")
    assert config.resolve_grid_path("here.board", []) == Path("here.board")


@pytest.mark.parametrize("argv,expected", [
    (["--start=1,2"], (1, 2)),
    (["--start=3 4"], (3, 4)),
    (["--start=1"], None),
    (["--start=a,b"], None),
    ([], None),
])
def test_resolve_cell(argv, expected):
    assert config.resolve_cell("start", argv) == expected
