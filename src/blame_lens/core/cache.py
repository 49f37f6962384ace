"""Attribution index cache keyed by (file, head reference)."""

import threading
from collections import OrderedDict
from typing import Optional

from blame_lens.config.settings import DEFAULT_ATTRIBUTION_CACHE_SIZE
from blame_lens.models.attribution import AttributionIndex


class AttributionCache:
    """Bounded LRU memo of parsed attribution indexes.

    A commit moving HEAD produces a new key, so stale entries are never
    returned; they simply age out of the LRU. Entries are stored only once
    fully computed, and the lock covers lookup, insertion and eviction.
    """

    def __init__(self, max_entries: int = DEFAULT_ATTRIBUTION_CACHE_SIZE):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: "OrderedDict[tuple[str, str], AttributionIndex]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, file_path: str, head_reference: str) -> Optional[AttributionIndex]:
        """Return the cached index for (file_path, head_reference), or None on a miss."""
        key = (str(file_path), head_reference)
        with self._lock:
            index = self._entries.get(key)
            if index is not None:
                self._entries.move_to_end(key)
            return index

    def put(self, file_path: str, head_reference: str, index: AttributionIndex) -> None:
        """Store a complete index, evicting the least recently used entry when full."""
        key = (str(file_path), head_reference)
        with self._lock:
            self._entries[key] = index
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
