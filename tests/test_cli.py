import pytest

from aoc2024.cli import main, solve

DAY1_EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _write_day(root, day, test_text, real_text=None):
    directory = root / f"{day:02d}"
    directory.mkdir(parents=True)
    (directory / "test").write_text(test_text)
    if real_text is not None:
        (directory / "real").write_text(real_text)
    return directory


def test_solve_day1_example(tmp_path):
    directory = _write_day(tmp_path, 1, DAY1_EXAMPLE)
    assert solve(1, directory / "test", True) == ("11", "31")


def test_solve_unknown_day(tmp_path):
    with pytest.raises(ValueError):
        solve(21, tmp_path / "missing", True)


def test_solve_missing_file(tmp_path):
    with pytest.raises(OSError):
        solve(1, tmp_path / "missing", True)


def test_main_runs_day(tmp_path, capsys):
    _write_day(tmp_path, 1, DAY1_EXAMPLE, DAY1_EXAMPLE)
    assert main(["--inputs", str(tmp_path), "1"]) == 0
    out = capsys.readouterr().out
    assert "Day 1 part 1 test passed" in out
    assert "Day 1 part 2 test passed" in out
    assert "Day 1, part 2, solution took" in out


def test_main_reports_wrong_answer(tmp_path, capsys):
    _write_day(tmp_path, 1, "1   1\n", DAY1_EXAMPLE)
    assert main(["--inputs", str(tmp_path), "1"]) == 1
    assert "Expected: [11]" in capsys.readouterr().out


def test_main_reports_missing_real_input(tmp_path, capsys):
    _write_day(tmp_path, 1, DAY1_EXAMPLE)
    assert main(["--inputs", str(tmp_path), "1"]) == 1
    assert "Error occurred" in capsys.readouterr().out


def test_main_rejects_unknown_day(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--inputs", str(tmp_path), "21"])
    assert excinfo.value.code == 2