"""Session object owning the attribution engine and its caches."""

import threading
from dataclasses import dataclass, field
from typing import Optional

from blame_lens.config.settings import Settings
from blame_lens.core.cache import AttributionCache
from blame_lens.core.condenser import DiffCondenser
from blame_lens.core.diff_fetcher import DiffFetcher
from blame_lens.core.parser import LineAttributionParser
from blame_lens.core.query import AttributionQuery
from blame_lens.utils.debug import DebugLogger
from blame_lens.vcs.base import VCSProvider
from blame_lens.vcs.detector import create_provider
from blame_lens.vcs.git import Git


@dataclass
class AttributionSession:
    """Manages all dependencies for attribution queries.

    Components are created on first access and shared by every query made
    through the session, so the attribution and diff caches live exactly as
    long as the session. ``close()`` clears them (shutdown). A lock makes
    first access safe from several threads.

    Example:
        ```python
        with AttributionSession() as session:
            record = session.query.lookup("src/app.py", 42)
            if record:
                print(record.annotation())
        ```

    Attributes:
        settings: Optional settings; loaded from the environment when omitted
        vcs: Optional backend provider; a Git provider built from settings when omitted
    """

    settings: Optional[Settings] = None
    vcs: Optional[VCSProvider] = None

    # Lazy-initialized components (use field with init=False)
    _cache: Optional[AttributionCache] = field(default=None, init=False, repr=False)
    _fetcher: Optional[DiffFetcher] = field(default=None, init=False, repr=False)
    _query: Optional[AttributionQuery] = field(default=None, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self):
        if self.settings is None:
            self.settings = Settings()
        if self.settings.debug and not DebugLogger.is_enabled():
            DebugLogger.configure(enabled=True, log_dir=self.settings.debug_log_dir)
        if self.vcs is None:
            self.vcs = create_provider(Git, self.settings)

    @property
    def attribution_cache(self) -> AttributionCache:
        """Lazy-load the attribution cache."""
        with self._lock:
            if self._cache is None:
                self._cache = AttributionCache(max_entries=self.settings.attribution_cache_size)
            return self._cache

    @property
    def diff_fetcher(self) -> DiffFetcher:
        """Lazy-load the diff fetcher."""
        with self._lock:
            if self._fetcher is None:
                self._fetcher = DiffFetcher(self.vcs)
            return self._fetcher

    @property
    def query(self) -> AttributionQuery:
        """Lazy-load the attribution facade."""
        with self._lock:
            if self._query is None:
                self._query = AttributionQuery(
                    vcs=self.vcs,
                    parser=LineAttributionParser(
                        unknown_author=self.settings.unknown_author,
                        unknown_date=self.settings.unknown_date,
                    ),
                    cache=self.attribution_cache,
                    fetcher=self.diff_fetcher,
                    condenser=DiffCondenser(),
                )
            return self._query

    def close(self) -> None:
        """Clear every cache owned by this session."""
        with self._lock:
            if self._cache is not None:
                self._cache.clear()
            if self._fetcher is not None:
                self._fetcher.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
