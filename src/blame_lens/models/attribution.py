"""Attribution data models: per-change metadata and per-line records."""

from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.settings import UNKNOWN_AUTHOR, UNKNOWN_DATE


# Identifier git reports for lines that are not committed yet
UNCOMMITTED_CHANGE = "0" * 40


def format_timestamp(timestamp: Optional[int], unknown: str = UNKNOWN_DATE) -> str:
    """Render a unix timestamp (seconds) as a YYYY-MM-DD date in UTC.

    Args:
        timestamp: Seconds since the epoch, or None when unknown
        unknown: Sentinel returned when the timestamp is missing or out of range

    Returns:
        Date string such as "2023-11-14", or the sentinel
    """
    if timestamp is None:
        return unknown
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
    except (OverflowError, OSError, ValueError):
        return unknown


class ChangeMetadata(BaseModel):
    """Metadata shared by every line attributed to one change.

    Built once per change identifier from the first metadata block the
    backend reports for it, and never mutated afterwards.

    Attributes:
        author: Author name, or the unknown-author placeholder
        author_mail: Author e-mail as reported by the backend (may be empty)
        timestamp: Committer time in seconds, None when not numeric
        summary: First line of the commit message (may be empty)
    """

    model_config = ConfigDict(frozen=True)

    author: str = Field(UNKNOWN_AUTHOR, description="Change author")
    author_mail: str = Field("", description="Change author e-mail")
    timestamp: Optional[int] = Field(None, description="Committer time in unix seconds")
    summary: str = Field("", description="One-line change summary")

    @property
    def date(self) -> str:
        """Committer date as YYYY-MM-DD, or the unknown-date sentinel."""
        return format_timestamp(self.timestamp)


class AttributionRecord(BaseModel):
    """The change responsible for one line of the current file.

    Attributes:
        line: 1-based line number in the current version of the file
        change: Change identifier (commit hash)
        author: Change author
        date: Committer date (YYYY-MM-DD) or the unknown-date sentinel
        summary: One-line change summary
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "line": 5,
                "change": "abc123def456",
                "author": "Jane",
                "date": "2023-11-14",
                "summary": "Fix bug",
            }
        },
    )

    line: int = Field(..., description="1-based line number in the current file")
    change: str = Field(..., description="Change identifier")
    author: str = Field(UNKNOWN_AUTHOR, description="Change author")
    date: str = Field(UNKNOWN_DATE, description="Committer date (YYYY-MM-DD)")
    summary: str = Field("", description="One-line change summary")

    @field_validator("line")
    @classmethod
    def validate_line(cls, v: int) -> int:
        """Validate that the line number is 1-based."""
        if v < 1:
            raise ValueError(f"Line numbers are 1-based, got {v}")
        return v

    @field_validator("change")
    @classmethod
    def validate_change(cls, v: str) -> str:
        """Validate that the change identifier is non-empty."""
        if not v or not v.strip():
            raise ValueError("Change identifier cannot be empty")
        return v.strip()

    @classmethod
    def from_metadata(
        cls,
        line: int,
        change: str,
        metadata: ChangeMetadata,
        unknown_date: str = UNKNOWN_DATE,
    ) -> "AttributionRecord":
        """Build a record for one line from its change's metadata."""
        return cls(
            line=line,
            change=change,
            author=metadata.author,
            date=format_timestamp(metadata.timestamp, unknown=unknown_date),
            summary=metadata.summary,
        )

    @property
    def short_change(self) -> str:
        """Abbreviated change identifier for display."""
        return self.change[:8]

    @property
    def is_uncommitted(self) -> bool:
        """True when the line only exists in the working tree."""
        return self.change == UNCOMMITTED_CHANGE

    def annotation(self) -> str:
        """Inline annotation text: ``author | date | summary``."""
        return f"{self.author} | {self.date} | {self.summary}"


# Mapping from 1-based line number to its record, in ascending line order
AttributionIndex = Dict[int, AttributionRecord]
