"""Public API for blame-lens library usage.

Available exports:
    - Context: AttributionSession owning the engine and its caches
    - Operations: annotate_line, annotate_file
    - Exceptions: BlameLensError, BackendError, SourceFileNotFoundError
    - Models: LineAnnotation

Example:
    ```python
    from blame_lens.api import AttributionSession, annotate_line

    with AttributionSession() as session:
        result = annotate_line(session, "src/app.py", 42)
        if result:
            print(result.annotation)
    ```
"""

# Context manager
from .context import AttributionSession

# Operations
from .operations import (
    annotate_file,
    annotate_line,
)

# Exceptions
from blame_lens.exceptions import (
    BackendError,
    BlameLensError,
    SourceFileNotFoundError,
)

# Models
from .models import LineAnnotation

__all__ = [
    # Context
    'AttributionSession',

    # Operations
    'annotate_line',
    'annotate_file',

    # Exceptions
    'BlameLensError',
    'BackendError',
    'SourceFileNotFoundError',

    # Models
    'LineAnnotation',
]
