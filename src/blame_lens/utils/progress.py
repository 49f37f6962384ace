"""Console reporting utilities shared by the CLI and the library facade."""

from typing import Any

from rich.console import Console
from rich.markup import escape

from .symbols import SYMBOLS

# Global console instance for consistent output
# Use stderr=True so library diagnostics never mix with rendered results on stdout
console = Console(stderr=True, legacy_windows=False)
error_console = Console(stderr=True, legacy_windows=False)


def log_info(message: str, **kwargs: Any) -> None:
    """Log an info message.
    
    Args:
        message: Message to log
        **kwargs: Additional arguments passed to rich console
    """
    console.print(f"[blue]{SYMBOLS['info']}[/blue] {message}", **kwargs)


def log_warning(message: str, **kwargs: Any) -> None:
    """Log a warning message.
    
    Args:
        message: Warning message to log
        **kwargs: Additional arguments passed to rich console
    """
    console.print(f"[yellow]{SYMBOLS['warning']}[/yellow] {message}", **kwargs)


def log_error(message: str, **kwargs: Any) -> None:
    """Log an error message.
    
    Args:
        message: Error message to log
        **kwargs: Additional arguments passed to rich console
    """
    error_console.print(f"[red]{SYMBOLS['error']}[/red] {message}", **kwargs)


def log_debug(message: str) -> None:
    """Print a dimmed diagnostic line when debug mode is enabled."""
    from .debug import DebugLogger

    if DebugLogger.is_enabled():
        console.print(f"[dim]{escape(message)}[/dim]", highlight=False)
