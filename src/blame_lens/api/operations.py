"""Core operations for the blame-lens API.

This module provides the main operations for annotating files:
- annotate_line: Attribution, annotation text and condensed diff for one line
- annotate_file: Attribution records for every line of a file
"""

from pathlib import Path
from typing import List, Optional

from blame_lens.core.condenser import split_git_lines
from blame_lens.exceptions import SourceFileNotFoundError
from blame_lens.models.attribution import AttributionRecord

from .context import AttributionSession
from .models import LineAnnotation


def _read_line(path: Path, line_number: int) -> Optional[str]:
    """Return the current text of a 1-based line, or None if unavailable."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            lines = split_git_lines(f.read())
    except OSError:
        return None
    if 1 <= line_number <= len(lines):
        return lines[line_number - 1]
    return None


def annotate_line(
    session: AttributionSession,
    file_path: str,
    line_number: int,
    include_diff: bool = True,
) -> Optional[LineAnnotation]:
    """Annotate one line of a file.

    Args:
        session: Session owning the caches to use
        file_path: Path of a file inside a work tree
        line_number: 1-based line number in the current file
        include_diff: Whether to fetch and condense the change's diff

    Returns:
        LineAnnotation, or None when the line has no known attribution

    Raises:
        SourceFileNotFoundError: If the file does not exist

    Example:
        ```python
        with AttributionSession() as session:
            result = annotate_line(session, "src/app.py", 42)
            if result:
                print(result.annotation)
                print(result.hover_text)
        ```
    """
    path = Path(file_path)
    if not path.is_file():
        raise SourceFileNotFoundError(str(file_path))

    record = session.query.lookup(str(path), line_number)
    if record is None:
        return None

    line_text = _read_line(path, line_number)
    diff = None
    if include_diff:
        diff = session.query.diff_for(record, str(path), line_of_interest=line_text)

    return LineAnnotation(
        file_path=str(path),
        record=record,
        line_text=line_text,
        diff=diff,
    )


def annotate_file(session: AttributionSession, file_path: str) -> List[AttributionRecord]:
    """Return attribution records for every line of a file, in line order.

    An empty list means attribution is unknown or the file is empty.

    Raises:
        SourceFileNotFoundError: If the file does not exist
    """
    path = Path(file_path)
    if not path.is_file():
        raise SourceFileNotFoundError(str(file_path))

    index = session.query.index_for(str(path))
    if index is None:
        return []
    return list(index.values())
