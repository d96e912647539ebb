from pathlib import Path

import pytest

import experiments
import main


def test_cli_open_grid_finds_path(capsys):
    assert main.main(["--height", "3", "--width", "3"]) == 0
    out = capsys.readouterr().out
    assert "S o o\n* o o\n* * E" in out
    assert "visited=9" in out
    assert "path length=5: 0,0 -> 1,0 -> 2,0 -> 2,1 -> 2,2" in out


def test_cli_map_file_unreachable(tmp_path, capsys):
    board = tmp_path / "board.txt"
    board.write_text("S#.\n##.\n..E\n", encoding="utf-8")
    assert main.main(["--map", str(board), "--quiet"]) == 1
    out = capsys.readouterr().out
    assert "visited=1" in out
    assert "End is unreachable" in out


def test_cli_explicit_markers_override_defaults(capsys):
    assert main.main(["--height", "2", "--width", "4", "--start", "1,3", "--end", "0,0", "--quiet"]) == 0
    assert "start=(1, 3) end=(0, 0)" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["--height", "0", "--width", "3"],
        ["--height", "2", "--width", "2", "--start", "5,5"],
    ],
)
def test_cli_input_errors_exit_2(argv, capsys):
    assert main.main(argv + ["--quiet"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_cli_missing_map_file(tmp_path):
    assert main.main(["--map", str(tmp_path / "nope.txt")]) == 2


def test_parse_position_rejects_garbage():
    with pytest.raises(SystemExit):
        main.main(["--start", "a,b"])


def test_batch_on_open_grids():
    row = experiments.run_batch(4, 4, 0.0, grids=5)
    assert row["reach_rate"] == 1.0
    assert row["avg_path"] == 7
    assert row["avg_visited"] == 16


def test_batch_on_solid_grids():
    row = experiments.run_batch(4, 4, 1.0, grids=3)
    assert row["reach_rate"] == 0.0
    assert row["avg_visited"] == 1
    assert row["avg_path"] == 0.0


def test_cli_default_start_on_a_wall(tmp_path, capsys):
    board = tmp_path / "board.txt"
    board.write_text("#.E\n", encoding="utf-8")
    assert main.main(["--map", str(board), "--quiet"]) == 2
    assert "start (0, 0) is a wall" in capsys.readouterr().err


@pytest.mark.parametrize(
    "extra,message",
    [
        (["--start", "0,1"], "start (0, 1) is a wall"),
        (["--end", "0,1"], "end (0, 1) is a wall"),
        (["--start", "1,2"], "start and end are the same cell"),
    ],
)
def test_cli_rejects_bad_markers(tmp_path, capsys, extra, message):
    board = tmp_path / "board.txt"
    board.write_text("S#.\n..E\n", encoding="utf-8")
    assert main.main(["--map", str(board), "--quiet"] + extra) == 2
    assert message in capsys.readouterr().err


def test_cli_path_always_starts_at_start(capsys):
    assert main.main(["--height", "4", "--width", "4", "--wall-prob", "0.3", "--seed", "3", "--quiet"]) in (0, 1)
    out = capsys.readouterr().out
    if "path length=" in out:
        assert out.split(": ", 1)[1].startswith("0,0 ->")


def test_batch_needs_at_least_one_grid():
    with pytest.raises(ValueError):
        experiments.run_batch(3, 3, 0.0, grids=0)


@pytest.mark.parametrize("grids", ["0", "-4"])
def test_experiments_cli_rejects_empty_batch(grids, capsys):
    with pytest.raises(SystemExit) as exc:
        experiments.main(["--grids", grids])
    assert exc.value.code == 2
    assert "--grids must be positive" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["--height", "0"], ["--width", "-3"]])
def test_gui_rejects_bad_dimensions_before_opening_a_window(argv, capsys):
    gui = pytest.importorskip("gui")
    with pytest.raises(SystemExit) as exc:
        gui.main(argv)
    assert exc.value.code == 2
    assert "must be a positive integer" in capsys.readouterr().err


def test_only_the_library_package_is_installed():
    tomllib = pytest.importorskip("tomllib")
    root = Path(__file__).resolve().parents[1]
    with (root / "pyproject.toml").open("rb") as f:
        config = tomllib.load(f)
    setuptools_cfg = config["tool"]["setuptools"]
    assert setuptools_cfg["packages"] == ["bfsgrid"]
    assert "py-modules" not in setuptools_cfg
