"""blame-lens: per-line change attribution and condensed change diffs on top of git."""

__version__ = "0.1.0"
