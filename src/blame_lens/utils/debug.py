"""Debug trace of git invocations.

When enabled, every backend call leaves two JSON files under
``<log_dir>/git/``: ``<operation>_<timestamp>_<id>_invocation.json`` with the
argument vector and ``<operation>_<timestamp>_<id>_result.json`` with the exit
status, stderr and the size of the output.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Sequence
import threading
import uuid


class DebugLogger:
    """Records git invocations and their results (singleton pattern)."""

    _enabled: bool = False
    _log_dir: Optional[Path] = None
    _lock = threading.Lock()

    @classmethod
    def configure(cls, enabled: bool = False, log_dir: Optional[Path] = None) -> None:
        """Configure the debug logger.

        Args:
            enabled: Whether invocations are recorded
            log_dir: Directory for trace files (default: ~/.blame-lens/logs)
        """
        with cls._lock:
            cls._enabled = enabled
            cls._log_dir = log_dir or Path.home() / ".blame-lens" / "logs"

            if cls._enabled and cls._log_dir:
                cls._log_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def is_enabled(cls) -> bool:
        """Check if debug mode is enabled."""
        return cls._enabled

    @classmethod
    def trace_dir(cls) -> Optional[Path]:
        """Directory holding the git trace files, or None before configure()."""
        if cls._log_dir is None:
            return None
        return cls._log_dir / "git"

    @classmethod
    def log_invocation(cls, operation: str, command: Sequence[str]) -> str:
        """Record a git command about to run.

        Args:
            operation: Git subcommand (e.g. "blame", "rev-parse", "diff")
            command: Full argument vector

        Returns:
            Invocation id to pass to log_result
        """
        invocation_id = uuid.uuid4().hex
        if cls._enabled:
            cls._write("invocation", operation, invocation_id, {"command": list(command)})
        return invocation_id

    @classmethod
    def log_result(
        cls,
        operation: str,
        invocation_id: str,
        returncode: int,
        stderr: str,
        stdout_chars: int,
        elapsed_ms: float,
    ) -> None:
        """Record how a git command finished."""
        if not cls._enabled:
            return

        cls._write("result", operation, invocation_id, {
            "returncode": returncode,
            "stderr": stderr,
            "stdout_chars": stdout_chars,
            "elapsed_ms": round(elapsed_ms, 1),
        })

    @classmethod
    def _write(cls, kind: str, operation: str, invocation_id: str, payload: Dict[str, Any]) -> None:
        trace_dir = cls.trace_dir()
        if not cls._enabled or trace_dir is None:
            return

        # Compact timestamp (e.g., 20251029T054015Z)
        now = datetime.now(timezone.utc)
        filename = f"{operation}_{now.strftime('%Y%m%dT%H%M%SZ')}_{invocation_id[:8]}_{kind}.json"

        entry = {
            "timestamp": now.isoformat(),
            "kind": kind,
            "operation": operation,
            "invocation_id": invocation_id,
            **payload,
        }

        with cls._lock:
            try:
                trace_dir.mkdir(parents=True, exist_ok=True)
                with open(trace_dir / filename, "w", encoding="utf-8") as f:
                    json.dump(entry, f, indent=2)
            except OSError:
                # A failed trace write never fails the git call it describes
                pass
