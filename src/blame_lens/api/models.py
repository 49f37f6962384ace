"""Response models for the blame-lens library API."""

from dataclasses import dataclass
from typing import Optional

from blame_lens.models.attribution import AttributionRecord
from blame_lens.models.diff import CondensedDiff


@dataclass
class LineAnnotation:
    """Everything the presentation layer shows for one inspected line.

    Attributes:
        file_path: File the line belongs to
        record: The change responsible for the line
        line_text: Current text of the line (None if the file could not be read)
        diff: Condensed diff of the change for this file, if requested
    """
    file_path: str
    record: AttributionRecord
    line_text: Optional[str] = None
    diff: Optional[CondensedDiff] = None

    @property
    def annotation(self) -> str:
        """Inline text shown after the line: ``author | date | summary``."""
        return self.record.annotation()

    @property
    def hover_text(self) -> str:
        """Hover content: the change identifier followed by the condensed diff."""
        header = f"Hash: {self.record.change}"
        if self.diff is None:
            return header
        return f"{header}\n\n{self.diff.rendered_text}"
