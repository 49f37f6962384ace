"""Attribution facade: per-line lookups and condensed diffs."""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from blame_lens.core.cache import AttributionCache
from blame_lens.core.condenser import DiffCondenser
from blame_lens.core.diff_fetcher import DiffFetcher
from blame_lens.core.parser import LineAttributionParser
from blame_lens.exceptions import BackendError
from blame_lens.models.attribution import AttributionIndex, AttributionRecord
from blame_lens.models.diff import CondensedDiff
from blame_lens.utils.progress import log_debug, log_warning
from blame_lens.vcs.base import VCSProvider


class AttributionQuery:
    """Answers "who last changed this line, and how?" for files in a repository.

    All collaborators are injected so a session can own their lifecycle.
    Backend failures never escape: they are logged and reported as None,
    which callers render the same way as "no history recorded".
    """

    def __init__(
        self,
        vcs: VCSProvider,
        parser: LineAttributionParser,
        cache: AttributionCache,
        fetcher: DiffFetcher,
        condenser: DiffCondenser,
    ):
        self.vcs = vcs
        self.parser = parser
        self.cache = cache
        self.fetcher = fetcher
        self.condenser = condenser

    def index_for(self, file_path: str) -> Optional[AttributionIndex]:
        """Return the attribution index of a file, parsing it on a cache miss.

        Args:
            file_path: Path of a file inside a work tree

        Returns:
            The complete index, or None if attribution is unknown
        """
        path = Path(file_path).resolve()
        workspace = str(path.parent)

        try:
            head = self.vcs.get_head_reference(workspace)
            index = self.cache.get(str(path), head)
            if index is not None:
                return index

            log_debug(f"AttributionQuery: cache miss for {path} at {head[:8]}")
            dump = self.vcs.get_blame_porcelain(workspace, path.name)
            index = self.parser.parse(dump)
        except BackendError as e:
            log_warning(escape(f"No attribution for {path}: {e}"))
            return None

        self.cache.put(str(path), head, index)
        return index

    def lookup(self, file_path: str, line_number: int) -> Optional[AttributionRecord]:
        """Return the record for a 1-based line, or None if unknown or out of range."""
        if line_number < 1:
            return None
        index = self.index_for(file_path)
        if index is None:
            return None
        return index.get(line_number)

    def diff_for(
        self,
        record: AttributionRecord,
        file_path: str,
        line_of_interest: Optional[str] = None,
    ) -> CondensedDiff:
        """Condense the diff of the record's change for this file.

        A missing diff (root commit, renamed or deleted file, uncommitted
        line) condenses as an empty diff.
        """
        diff = self.fetcher.fetch(record.change, str(Path(file_path).resolve()))
        return self.condenser.condense(diff or "", line_of_interest)
