"""Tests for the blame-lens command line interface."""

import pytest
from click.testing import CliRunner
from rich.console import Console

import blame_lens.__main__ as cli
from blame_lens import __version__


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Render results wide enough that tables never wrap in assertions."""
    monkeypatch.setattr(cli, "console", Console(width=200))


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.setenv("BLAME_LENS_DATA_DIR", str(tmp_path / "data"))
    return CliRunner()


@pytest.fixture
def app_path(repo_with_history):
    return str(repo_with_history / "app.py")


def test_version(runner):
    result = runner.invoke(cli.main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestLineCommand:
    """Tests for `blame-lens line`."""

    def test_prints_annotation_and_diff(self, runner, app_path, repo_with_history, git):
        head = git(repo_with_history, "rev-parse", "HEAD").strip()

        result = runner.invoke(cli.main, ["line", app_path, "2"])

        assert result.exit_code == 0
        assert head[:8] in result.output
        assert "Test User" in result.output
        assert "Bump value" in result.output
        assert f"Hash: {head}" in result.output
        assert "- value = 1" in result.output
        assert "+ value = 2" in result.output

    def test_no_diff(self, runner, app_path):
        result = runner.invoke(cli.main, ["line", app_path, "1", "--no-diff"])

        assert result.exit_code == 0
        assert "Add app" in result.output
        assert "Hash:" not in result.output

    def test_line_out_of_range_exits_nonzero(self, runner, app_path):
        result = runner.invoke(cli.main, ["line", app_path, "99"])

        assert result.exit_code == 1

    def test_line_zero_rejected(self, runner, app_path):
        result = runner.invoke(cli.main, ["line", app_path, "0"])

        assert result.exit_code == 2

    def test_missing_file_rejected(self, runner, repo_with_history):
        result = runner.invoke(cli.main, ["line", str(repo_with_history / "missing.py"), "1"])

        assert result.exit_code == 2

    def test_file_outside_repository(self, runner, tmp_path):
        loose = tmp_path / "loose.py"
        loose.write_text("x = 1\n")

        result = runner.invoke(cli.main, ["line", str(loose), "1"])

        assert result.exit_code == 1

    def test_debug_writes_git_logs(self, runner, app_path, tmp_path):
        data_dir = tmp_path / "debug-data"

        result = runner.invoke(
            cli.main,
            ["--debug", "--data-dir", str(data_dir), "line", app_path, "2", "--no-diff"],
        )

        assert result.exit_code == 0
        assert list((data_dir / "logs" / "git").glob("blame_*_invocation.json"))

    def test_missing_git_executable(self, runner, app_path):
        result = runner.invoke(
            cli.main,
            ["--git-executable", "definitely-not-a-git-binary", "line", app_path, "1"],
        )

        assert result.exit_code == 1


class TestFileCommand:
    """Tests for `blame-lens file`."""

    def test_prints_table(self, runner, app_path):
        result = runner.invoke(cli.main, ["file", app_path])

        assert result.exit_code == 0
        assert "Add app" in result.output
        assert "Bump value" in result.output
        assert "Test User" in result.output

    def test_untracked_file_exits_nonzero(self, runner, repo_with_history):
        scratch = repo_with_history / "scratch.py"
        scratch.write_text("x = 1\n")

        result = runner.invoke(cli.main, ["file", str(scratch)])

        assert result.exit_code == 1
