"""Tests for AttributionSession."""

import threading
import time
from unittest.mock import Mock, patch

import pytest

from blame_lens.api import AttributionSession, annotate_line
from blame_lens.config.settings import Settings
from blame_lens.core.cache import AttributionCache
from blame_lens.utils.debug import DebugLogger
from blame_lens.vcs.git import Git


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path / "data", git_executable="git", attribution_cache_size=4)


def test_default_vcs_built_from_settings(tmp_path):
    session = AttributionSession(
        settings=Settings(data_dir=tmp_path, git_executable="/opt/git", git_timeout_seconds=3)
    )

    assert isinstance(session.vcs, Git)
    assert session.vcs.executable == "/opt/git"
    assert session.vcs.timeout == 3


def test_custom_vcs_is_used(settings):
    vcs = Mock()

    session = AttributionSession(settings=settings, vcs=vcs)

    assert session.vcs is vcs
    assert session.diff_fetcher.vcs is vcs


def test_components_are_created_once(settings):
    session = AttributionSession(settings=settings)

    assert session.query is session.query
    assert session.attribution_cache is session.attribution_cache
    assert session.diff_fetcher is session.diff_fetcher
    assert session.query.cache is session.attribution_cache
    assert session.query.fetcher is session.diff_fetcher


def test_cache_size_from_settings(settings):
    session = AttributionSession(settings=settings)

    assert session.attribution_cache.max_entries == 4


def test_parser_placeholders_from_settings(tmp_path):
    session = AttributionSession(
        settings=Settings(data_dir=tmp_path, unknown_author="nobody", unknown_date="n/a")
    )

    assert session.query.parser.unknown_author == "nobody"
    assert session.query.parser.unknown_date == "n/a"


def test_debug_setting_enables_logger(tmp_path):
    AttributionSession(settings=Settings(data_dir=tmp_path, debug=True))

    assert DebugLogger.is_enabled()
    assert (tmp_path / "logs").is_dir()


def test_close_clears_caches(settings, repo_with_history):
    session = AttributionSession(settings=settings)
    annotate_line(session, str(repo_with_history / "app.py"), 2)
    assert len(session.attribution_cache) == 1
    assert len(session.diff_fetcher) == 1

    session.close()

    assert len(session.attribution_cache) == 0
    assert len(session.diff_fetcher) == 0


def test_close_without_queries(settings):
    AttributionSession(settings=settings).close()


def test_context_manager_closes(settings, repo_with_history):
    with AttributionSession(settings=settings) as session:
        annotate_line(session, str(repo_with_history / "app.py"), 1, include_diff=False)
        assert len(session.attribution_cache) == 1

    assert len(session.attribution_cache) == 0


def test_caches_shared_across_queries(settings, repo_with_history):
    vcs = Mock(wraps=Git())
    session = AttributionSession(settings=settings, vcs=vcs)
    app = str(repo_with_history / "app.py")

    for line_number in (1, 2, 3):
        annotate_line(session, app, line_number, include_diff=False)

    assert vcs.get_blame_porcelain.call_count == 1


def test_concurrent_first_access_builds_one_set_of_components(settings):
    """Threads racing on first access all get the same cache and query."""
    session = AttributionSession(settings=settings, vcs=Mock())
    workers = 8
    barrier = threading.Barrier(workers)
    built = []
    results = []

    def slow_cache(*args, **kwargs):
        time.sleep(0.05)
        cache = AttributionCache(*args, **kwargs)
        built.append(cache)
        return cache

    def worker():
        barrier.wait()
        results.append((session.query, session.attribution_cache))

    with patch("blame_lens.api.context.AttributionCache", side_effect=slow_cache):
        threads = [threading.Thread(target=worker) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    assert len(built) == 1
    assert len({id(query) for query, _ in results}) == 1
    assert all(cache is built[0] and query.cache is built[0] for query, cache in results)
