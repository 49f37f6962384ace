"""Porcelain attribution dump parser.

Format of ``git blame --porcelain`` (one record per line of the file)::

    <change> <original-line> <final-line> [<group-size>]
    author <name>                  # only the first time <change> appears
    author-mail <<mail>>
    author-time <seconds>
    ...
    committer-time <seconds>
    summary <text>
    filename <path>
    \t<line content>

Metadata blocks are emitted once per change, so later records refer back to
them by identifier only.
"""

import re
from dataclasses import dataclass
from typing import Optional

from blame_lens.config.settings import UNKNOWN_AUTHOR, UNKNOWN_DATE
from blame_lens.core.metadata import ChangeMetadataTable
from blame_lens.exceptions import BackendError
from blame_lens.models.attribution import AttributionIndex, AttributionRecord, ChangeMetadata


HEADER_PATTERN = re.compile(r"^(\S+) (\d+) (\d+)(?: (\d+))?$")

# Porcelain keys whose values could otherwise look like a record header
PORCELAIN_KEYS = frozenset({
    "author",
    "author-mail",
    "author-time",
    "author-tz",
    "committer",
    "committer-mail",
    "committer-time",
    "committer-tz",
    "summary",
    "previous",
    "boundary",
    "filename",
})


@dataclass
class _ScanState:
    """Mutable state threaded through one pass over a dump."""

    change: Optional[str] = None
    line: Optional[int] = None
    record: Optional[AttributionRecord] = None
    headers_seen: int = 0


def match_header(line: str) -> Optional[tuple[str, int]]:
    """Return (change, resulting line) if the line starts a porcelain record."""
    match = HEADER_PATTERN.match(line)
    if match is None or match.group(1) in PORCELAIN_KEYS:
        return None
    return match.group(1), int(match.group(3))


def _parse_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


class LineAttributionParser:
    """Turns a porcelain dump into an AttributionIndex in a single pass."""

    def __init__(self, unknown_author: str = UNKNOWN_AUTHOR, unknown_date: str = UNKNOWN_DATE):
        self.unknown_author = unknown_author
        self.unknown_date = unknown_date

    def parse(self, dump: str, table: Optional[ChangeMetadataTable] = None) -> AttributionIndex:
        """Parse a whole dump.

        Every dump line (re)asserts the record of the current resulting line,
        so content lines belong to the header that preceded them. Lines seen
        before the first header attribute nothing.

        Args:
            dump: Raw porcelain text
            table: Metadata table to resolve identifiers through; a fresh one
                per call when omitted, so files never share entries

        Returns:
            Mapping from 1-based line number to AttributionRecord

        Raises:
            BackendError: If the dump has content but no usable record
        """
        if table is None:
            table = ChangeMetadataTable()

        try:
            index = self._scan(dump.split("\n"), table)
        except ValueError as e:
            raise BackendError(f"Unparseable attribution dump: {e}") from e

        return dict(sorted(index.items()))

    def _scan(self, lines: list[str], table: ChangeMetadataTable) -> AttributionIndex:
        index: AttributionIndex = {}
        state = _ScanState()

        for position, raw in enumerate(lines):
            header = match_header(raw)
            if header is not None:
                change, resulting_line = header
                metadata = table.get_or_insert(
                    change,
                    lambda start=position + 1: self._read_metadata(lines, start),
                )
                state.change = change
                state.line = resulting_line
                state.record = AttributionRecord.from_metadata(
                    resulting_line,
                    change,
                    metadata,
                    unknown_date=self.unknown_date,
                )
                state.headers_seen += 1

            if state.record is None:
                continue
            index[state.line] = state.record

        if state.headers_seen == 0 and any(line.strip() for line in lines):
            raise ValueError("no record headers found")
        return index

    def _read_metadata(self, lines: list[str], start: int) -> ChangeMetadata:
        """Read the metadata block following a first-seen header.

        Missing or malformed fields fall back to placeholders.
        """
        author = ""
        author_mail = ""
        author_time: Optional[int] = None
        committer_time: Optional[int] = None
        summary = ""

        for raw in lines[start:]:
            if raw.startswith("\t") or match_header(raw) is not None:
                break
            key, _, value = raw.partition(" ")
            if key == "author":
                author = value.strip()
            elif key == "author-mail":
                author_mail = value.strip().strip("<>")
            elif key == "author-time":
                author_time = _parse_int(value)
            elif key == "committer-time":
                committer_time = _parse_int(value)
            elif key == "summary":
                summary = value.strip()

        return ChangeMetadata(
            author=author or self.unknown_author,
            author_mail=author_mail,
            timestamp=committer_time if committer_time is not None else author_time,
            summary=summary,
        )
