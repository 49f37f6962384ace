"""Fetches and memoizes single-change, single-file diffs."""

import threading
from pathlib import Path
from typing import Optional

from blame_lens.vcs.base import VCSProvider
from blame_lens.utils.progress import log_debug


class DiffFetcher:
    """Retrieves the diff one change introduced to one file.

    History is immutable, so successful results are cached forever per
    (change, file path). A failed fetch returns None and is not cached;
    the backend is asked again on the next call.
    """

    def __init__(self, vcs: VCSProvider):
        self.vcs = vcs
        self._cache: dict[tuple[str, str], str] = {}
        self._lock = threading.Lock()

    def fetch(self, change: str, file_path: str) -> Optional[str]:
        """Return the diff text, or None when the backend has nothing for it.

        Args:
            change: Change identifier
            file_path: Path of the file in the working tree

        Returns:
            Raw diff text (possibly empty), or None if not found
        """
        key = (change, str(file_path))
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        path = Path(file_path)
        diff = self.vcs.get_commit_diff(str(path.parent), change, path.name)
        if diff is None:
            log_debug(f"DiffFetcher.fetch: no diff for {change[:8]} {file_path}")
            return None

        with self._lock:
            # Another caller may have stored the same immutable text meanwhile
            return self._cache.setdefault(key, diff)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
