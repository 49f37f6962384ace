import subprocess
import tempfile
from pathlib import Path

import pytest

from blame_lens.utils.debug import DebugLogger


# Porcelain dump with two changes; "aaaa..." owns lines 1 and 3, "bbbb..." owns line 2.
SAMPLE_DUMP = "\n".join([
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa 1 1 1",
    "author Alice",
    "author-mail <alice@example.com>",
    "author-time 1700000000",
    "author-tz +0000",
    "committer Alice",
    "committer-mail <alice@example.com>",
    "committer-time 1700000000",
    "committer-tz +0000",
    "summary Initial import",
    "boundary",
    "filename app.py",
    "\timport os",
    "bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb 2 2 1",
    "author Bob",
    "author-mail <bob@example.com>",
    "author-time 1710000000",
    "author-tz +0100",
    "committer Bob",
    "committer-mail <bob@example.com>",
    "committer-time 1710000000",
    "committer-tz +0100",
    "summary Add main guard",
    "previous aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa app.py",
    "filename app.py",
    "\tif __name__ == '__main__':",
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa 2 3 1",
    "filename app.py",
    "\t    pass",
    "",
])


@pytest.fixture(autouse=True)
def reset_debug_logger():
    """Keep DebugLogger disabled unless a test enables it explicitly."""
    DebugLogger.configure(enabled=False, log_dir=None)
    yield
    DebugLogger.configure(enabled=False, log_dir=None)


@pytest.fixture
def sample_dump():
    return SAMPLE_DUMP


def run_git(repo_path: Path, *args: str) -> str:
    """Run a git command in a test repository and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git():
    """Fixture exposing run_git to tests."""
    return run_git


@pytest.fixture
def temp_repo_path():
    """Fixture providing a temporary Git repository."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir).resolve()
        run_git(repo_path, "init")
        run_git(repo_path, "config", "user.email", "test@example.com")
        run_git(repo_path, "config", "user.name", "Test User")
        run_git(repo_path, "config", "commit.gpgsign", "false")
        yield repo_path


@pytest.fixture
def repo_with_history(temp_repo_path):
    """Repository where app.py was created by one commit and edited by a second.

    Final content of app.py:
        1: import os            (first commit)
        2: value = 2            (second commit)
        3: print(value)         (first commit)
    """
    repo_path = temp_repo_path
    app = repo_path / "app.py"

    app.write_text("import os\nvalue = 1\nprint(value)\n")
    run_git(repo_path, "add", "app.py")
    run_git(repo_path, "commit", "-m", "Add app")

    app.write_text("import os\nvalue = 2\nprint(value)\n")
    run_git(repo_path, "commit", "-am", "Bump value")

    return repo_path
