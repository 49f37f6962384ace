"""Auto-detection module for version control systems.

This module provides functionality to automatically detect which VCS
is in use in a given workspace and return an appropriate provider instance.
"""

from typing import Optional

from blame_lens.config.settings import Settings
from blame_lens.vcs.base import VCSProvider
from blame_lens.vcs.git import Git


# Registry of available VCS providers to check during auto-detection
# Providers are checked in order, so put more common ones first
VCS_PROVIDERS: list[type[VCSProvider]] = [
    Git,
]


def create_provider(provider_class: type[VCSProvider], settings: Optional[Settings] = None) -> VCSProvider:
    """Instantiate a provider with backend options taken from settings."""
    if settings is None:
        return provider_class()
    if provider_class is Git:
        return Git(executable=settings.git_executable, timeout=settings.git_timeout_seconds)
    return provider_class()


def detect_vcs(workspace_path: str, settings: Optional[Settings] = None) -> Optional[VCSProvider]:
    """Automatically detect which VCS is in use and return a provider instance.

    This function tries each registered VCS provider's detect() method in order
    and returns an instance of the first provider that successfully detects
    the VCS in the given workspace.

    Args:
        workspace_path: Path to the workspace directory to check
        settings: Optional settings supplying backend executable and timeout

    Returns:
        An instance of the detected VCS provider, or None if no VCS is detected

    Example:
        >>> vcs = detect_vcs("/path/to/my/project")
        >>> if vcs:
        ...     head = vcs.get_head_reference("/path/to/my/project")
        >>> else:
        ...     print("No VCS detected")
    """
    # Validate path is not empty or whitespace-only
    if not workspace_path or not workspace_path.strip():
        return None

    for provider_class in VCS_PROVIDERS:
        if provider_class.detect(workspace_path):
            return create_provider(provider_class, settings)

    return None
