"""Exceptions raised by the attribution engine and its backends."""

from typing import Optional, Sequence


class BlameLensError(Exception):
    """Base exception for all blame-lens errors."""
    pass


class BackendError(BlameLensError):
    """Raised when a version-control invocation fails or returns unusable output.

    Covers non-zero exits, timeouts, a missing executable and dumps whose
    structure cannot be parsed at all. Callers treat it as "attribution unknown
    for this file", never as "empty file".
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        """Initialize exception.

        Args:
            message: Human readable description of the failure
            command: Argument vector of the failed invocation, if any
            returncode: Exit status of the failed invocation, if any
            stderr: Captured standard error of the failed invocation
        """
        self.command = list(command) if command else []
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class SourceFileNotFoundError(BlameLensError):
    """Raised when a file to annotate does not exist."""

    def __init__(self, file_path: str, message: str = None):
        """Initialize exception.

        Args:
            file_path: Path of the missing file
            message: Optional custom message
        """
        self.file_path = file_path
        if message is None:
            message = f"File '{file_path}' does not exist."
        super().__init__(message)
