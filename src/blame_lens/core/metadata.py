"""Per-change metadata table used while parsing one attribution dump."""

import threading
from typing import Callable, Dict, Optional

from blame_lens.models.attribution import ChangeMetadata


class ChangeMetadataTable:
    """Stores the metadata of each change identifier exactly once.

    The porcelain format reports a change's metadata block only the first
    time the change appears, so later records resolve their author, date and
    summary through this table. A lock guards lookup-and-insert: the builder
    runs at most once per identifier and no reader ever sees a half-built
    entry.
    """

    def __init__(self):
        self._entries: Dict[str, ChangeMetadata] = {}
        self._lock = threading.Lock()

    def get_or_insert(
        self,
        identifier: str,
        builder: Callable[[], ChangeMetadata],
    ) -> ChangeMetadata:
        """Return the stored metadata, building and storing it on first use.

        Args:
            identifier: Change identifier (exact string match)
            builder: Zero-argument callable producing the metadata

        Returns:
            The metadata stored for identifier; the same object on every call
        """
        with self._lock:
            existing = self._entries.get(identifier)
            if existing is not None:
                return existing
            metadata = builder()
            self._entries[identifier] = metadata
            return metadata

    def get(self, identifier: str) -> Optional[ChangeMetadata]:
        with self._lock:
            return self._entries.get(identifier)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
