"""Integration tests for the diff command (read -> search -> render)"""

import pytest
from typer.testing import CliRunner

from linediff.cli.cli import app


@pytest.fixture(name="runner")
def runner_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return CliRunner()


@pytest.fixture(name="pair")
def pair_fixture(write_lines):
    return write_lines("a.txt", ["a", "b", "c"]), write_lines("b.txt", ["a", "x", "c"])


def test_classic_output(runner, pair):
    result = runner.invoke(app, [str(pair[0]), str(pair[1])])
    assert result.exit_code == 0, result.output
    assert result.output == "2c2\n< b\n---\n> x\n"


def test_unified_output(runner, pair):
    result = runner.invoke(app, ["-u", str(pair[0]), str(pair[1])])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith(f"--- {pair[0]}\t")
    assert lines[1].startswith(f"+++ {pair[1]}\t")
    assert lines[2:] == ["@@ -1,3 +1,3 @@", " a", "-b", "+x", " c"]


def test_identical_files_print_nothing(runner, write_lines):
    f1 = write_lines("a.txt", ["same"])
    f2 = write_lines("b.txt", ["same"])
    for args in ([str(f1), str(f2)], ["-u", str(f1), str(f2)]):
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert result.output == ""


def test_missing_file_exits_1(runner, pair, tmp_path):
    result = runner.invoke(app, [str(pair[0]), str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Cannot open" in result.output


@pytest.mark.parametrize("count", [0, 1, 3])
def test_wrong_argument_count_exits_1(runner, pair, count):
    args = [str(pair[0])] * count
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "usage" in result.output


def test_edit_distance_over_limit_exits_1(runner, pair):
    result = runner.invoke(app, ["--max-depth", "1", str(pair[0]), str(pair[1])])
    assert result.exit_code == 1
    assert "search limit of 1" in result.output


def test_max_depth_from_env(runner, pair, monkeypatch):
    monkeypatch.setenv("LINEDIFF_MAX_DEPTH", "1")
    result = runner.invoke(app, [str(pair[0]), str(pair[1])])
    assert result.exit_code == 1


def test_color_flag_forces_ansi(runner, pair):
    result = runner.invoke(app, ["--color", str(pair[0]), str(pair[1])])
    assert result.exit_code == 0
    assert "\x1b[31m< b" in result.output
    assert "\x1b[32m> x" in result.output


def test_no_color_is_plain(runner, pair):
    result = runner.invoke(app, ["--no-color", "-u", str(pair[0]), str(pair[1])])
    assert result.exit_code == 0
    assert "\x1b" not in result.output


def test_stat_summary(runner, pair):
    result = runner.invoke(app, ["--stat", str(pair[0]), str(pair[1])])
    assert result.exit_code == 0
    assert result.output == "1 added, 1 deleted, 2 unchanged\n"


def test_invalid_config_exits_1(runner, pair, tmp_path):
    (tmp_path / "linediff.yaml").write_text("color: [unclosed\n")
    result = runner.invoke(app, [str(pair[0]), str(pair[1])])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_form_feed_does_not_shift_line_numbers(runner, tmp_path):
    f1 = tmp_path / "old.c"
    f2 = tmp_path / "new.c"
    f1.write_bytes(b"x\x0cy\nold\n")
    f2.write_bytes(b"x\x0cy\nnew\n")
    result = runner.invoke(app, [str(f1), str(f2)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "2c2"


def test_crlf_and_lf_files_differ(runner, tmp_path):
    f1 = tmp_path / "crlf.txt"
    f2 = tmp_path / "lf.txt"
    f1.write_bytes(b"one\r\ntwo\r\n")
    f2.write_bytes(b"one\ntwo\n")
    result = runner.invoke(app, [str(f1), str(f2)])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("1,2c1,2\n")


def test_huge_max_depth_still_diffs(runner, pair):
    result = runner.invoke(app, ["--max-depth", "1000000000", str(pair[0]), str(pair[1])])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("2c2\n")
