from .attribution import (
    UNCOMMITTED_CHANGE,
    AttributionIndex,
    AttributionRecord,
    ChangeMetadata,
    format_timestamp,
)
from .diff import CondensedDiff
