"""Base abstract class for version control system providers.

This module defines the VCSProvider abstract base class that all VCS
implementations must inherit from. It is the only seam through which the
attribution engine talks to a version-control executable: every method
returns raw backend text and leaves parsing to the core components.
"""

from abc import ABC, abstractmethod
from typing import Optional


class VCSProvider(ABC):
    """Abstract base class for version control system providers.

    Implementations raise BackendError for failed invocations, except
    get_commit_diff(), for which a missing diff is an expected outcome.
    """

    @staticmethod
    @abstractmethod
    def detect(workspace_path: str) -> bool:
        """Detect if this VCS is used in the given workspace.

        Args:
            workspace_path: Path to the workspace directory to check

        Returns:
            True if this VCS is detected in the workspace, False otherwise
        """
        pass

    @abstractmethod
    def get_blame_porcelain(self, workspace_path: str, file_path: str) -> str:
        """Get the porcelain attribution dump for one file.

        Args:
            workspace_path: Directory the backend is invoked from
            file_path: File to attribute, relative to workspace_path or absolute

        Returns:
            Raw porcelain text

        Raises:
            BackendError: If the backend invocation fails
        """
        pass

    @abstractmethod
    def get_head_reference(self, workspace_path: str) -> str:
        """Get the identifier of the currently checked-out revision.

        Args:
            workspace_path: Directory inside the repository

        Returns:
            Head reference, used as a cache freshness key

        Raises:
            BackendError: If the backend invocation fails
        """
        pass

    @abstractmethod
    def get_commit_diff(
        self,
        workspace_path: str,
        change: str,
        file_path: str,
    ) -> Optional[str]:
        """Get the diff a single change introduced to a single file.

        Args:
            workspace_path: Directory the backend is invoked from
            change: Change identifier
            file_path: File to restrict the diff to

        Returns:
            Raw diff text, or None if the change or file cannot be found
        """
        pass
