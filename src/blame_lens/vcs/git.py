import subprocess
import time
from pathlib import Path
from typing import Optional

from blame_lens.config.settings import DEFAULT_GIT_EXECUTABLE, DEFAULT_GIT_TIMEOUT_SECONDS
from blame_lens.exceptions import BackendError
from blame_lens.vcs.base import VCSProvider
from blame_lens.utils.debug import DebugLogger
from blame_lens.utils.progress import log_debug


class Git(VCSProvider):
    """Git VCS provider implementation."""

    def __init__(
        self,
        executable: str = DEFAULT_GIT_EXECUTABLE,
        timeout: float = DEFAULT_GIT_TIMEOUT_SECONDS,
    ):
        self.executable = executable
        self.timeout = timeout

    @staticmethod
    def detect(workspace_path: str) -> bool:
        """Detect if this workspace is inside a Git work tree."""
        path = Path(workspace_path)
        if not path.is_dir():
            return False
        # Nested directories inherit the repository of any parent
        return any((candidate / ".git").exists() for candidate in (path, *path.parents))

    def get_blame_porcelain(self, workspace_path: str, file_path: str) -> str:
        """Run ``git blame --porcelain`` for one file."""
        result = self._run(
            "blame",
            [self.executable, "-C", workspace_path, "blame", "--porcelain", "--", file_path],
        )
        if result.returncode != 0:
            raise BackendError(
                f"git blame failed for {file_path}: {result.stderr.strip()}",
                command=result.args,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result.stdout

    def get_head_reference(self, workspace_path: str) -> str:
        """Resolve HEAD to a full commit hash."""
        result = self._run(
            "rev-parse",
            [self.executable, "-C", workspace_path, "rev-parse", "HEAD"],
        )
        head = result.stdout.strip()
        if result.returncode != 0 or not head:
            raise BackendError(
                f"git rev-parse HEAD failed in {workspace_path}: {result.stderr.strip()}",
                command=result.args,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return head

    def get_commit_diff(
        self,
        workspace_path: str,
        change: str,
        file_path: str,
    ) -> Optional[str]:
        """Diff between the change's first parent and the change, limited to one path.

        Root commits, unknown hashes and files absent at that revision make
        git exit non-zero; those map to None.
        """
        try:
            result = self._run(
                "diff",
                [self.executable, "-C", workspace_path, "diff", f"{change}^!", "--", file_path],
            )
        except BackendError as e:
            log_debug(f"Git.get_commit_diff: {e}")
            return None

        if result.returncode != 0:
            log_debug(
                f"Git.get_commit_diff: no diff for {change[:8]} {file_path}: {result.stderr.strip()}"
            )
            return None
        return result.stdout

    def _run(self, operation: str, cmd: list[str]) -> subprocess.CompletedProcess:
        """Run one git command, converting launch failures into BackendError."""
        log_debug(f"Git.{operation}: {' '.join(cmd)}")
        invocation_id = DebugLogger.log_invocation(operation, cmd)
        started = time.monotonic()

        try:
            # Bytes, not text mode: universal newlines would split lines on a lone "\r"
            completed = subprocess.run(cmd, capture_output=True, timeout=self.timeout)
        except FileNotFoundError as e:
            raise BackendError(
                f"git executable not found: {self.executable}",
                command=cmd,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise BackendError(
                f"git {operation} timed out after {self.timeout}s",
                command=cmd,
            ) from e

        # errors="replace" keeps non-UTF-8 file content readable
        result = subprocess.CompletedProcess(
            completed.args,
            completed.returncode,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
        )

        DebugLogger.log_result(
            operation,
            invocation_id,
            returncode=result.returncode,
            stderr=result.stderr,
            stdout_chars=len(result.stdout),
            elapsed_ms=(time.monotonic() - started) * 1000,
        )
        return result
