"""Diff condensation: keep additions and removals, elide unchanged context."""

import re
from typing import Optional

from blame_lens.models.diff import CondensedDiff


# Placeholder standing for a run of unchanged context lines
CONTEXT_PLACEHOLDER = " ..."
# Placeholder closing every rendering
TRAILING_PLACEHOLDER = "..."

# "--- a/f", "+++ b/f", "@@ -1,2 +1,2 @@", "diff --git ...", "index 1a2b..3c4d"
FILE_HEADER_PATTERN = re.compile(r"^(?:[+\-@]{2,3}|index\b|diff\b)")


def is_file_header(line: str) -> bool:
    """Whether a raw diff line is diff-format metadata rather than content."""
    return FILE_HEADER_PATTERN.match(line) is not None


def split_git_lines(text: str) -> list[str]:
    r"""Split text into lines the way git counts them.

    Only "\n" ends a line; form feeds and other Unicode line breaks stay part
    of the line. A trailing "\r" is dropped and so is the empty remainder after
    a final newline.
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class DiffCondenser:
    """Renders a raw diff as added/removed lines separated by placeholders.

    Args:
        space_dash_removals: Also treat lines starting with " -" as removals
            (unified "old/blank" marker layout)
    """

    def __init__(self, space_dash_removals: bool = False):
        self.space_dash_removals = space_dash_removals

    def condense(self, diff_text: str, line_of_interest: Optional[str] = None) -> CondensedDiff:
        """Condense a diff and locate the line of interest in the result.

        Args:
            diff_text: Raw diff; empty when no diff is available
            line_of_interest: Exact text of the inspected source line; the
                first emitted added/removed line equal to it is selected

        Returns:
            CondensedDiff whose selected_position is the match, or the last
            line when nothing matched
        """
        output: list[str] = []
        selected: Optional[int] = None
        structured = False

        for raw in split_git_lines(diff_text):
            if is_file_header(raw):
                structured = True
                continue

            changed = self._split_marker(raw)
            if changed is None:
                if not output or output[-1] != CONTEXT_PLACEHOLDER:
                    output.append(CONTEXT_PLACEHOLDER)
                continue

            structured = True
            marker, text = changed
            output.append(f"{marker} {text}")
            if selected is None and line_of_interest is not None and text == line_of_interest:
                selected = len(output)

        # Text without any diff structure (e.g. an error message) renders as empty
        if not structured:
            output = []

        output.append(TRAILING_PLACEHOLDER)

        return CondensedDiff(
            rendered_text="\n".join(output),
            selected_position=selected if selected is not None else len(output),
        )

    def _split_marker(self, line: str) -> Optional[tuple[str, str]]:
        """Return (marker, text) for an added/removed line, None for context."""
        if line.startswith(("+", "-")):
            return line[0], line[1:]
        if self.space_dash_removals and line.startswith(" -"):
            return "-", line[2:]
        return None
