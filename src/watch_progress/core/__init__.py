"""
Progress tracking core.

Parses completed/total amounts, computes completion percentages and
manages the tracked entry list with its pending edit and delete targets.
"""

from .timevalue import parse_duration, normalize_time_format, format_duration
from .progress import (
    ValueKind, Duration, Count, detect_kind, measure_value,
    compute_percent, remaining_percent
)
from .media import MEDIA_HOST_MARKERS, MediaRef, is_media_link, extract_youtube_id
from .models import Entry, EntryRow, TrackerError, ValidationError, EntryNotFoundError
from .storage import EntryStorage, JsonFileStorage, MemoryStorage
from .store import EntryStore
from .stats import ProgressStats, compute_stats
from .pending import PendingActions, PendingTarget
from .session import TrackerSession

__all__ = [
    # Parsing and calculation
    "parse_duration", "normalize_time_format", "format_duration",
    "ValueKind", "Duration", "Count", "detect_kind", "measure_value",
    "compute_percent", "remaining_percent",

    # Media links
    "MEDIA_HOST_MARKERS", "MediaRef", "is_media_link", "extract_youtube_id",

    # Models and exceptions
    "Entry", "EntryRow", "TrackerError", "ValidationError", "EntryNotFoundError",

    # Entry management
    "EntryStorage", "JsonFileStorage", "MemoryStorage", "EntryStore",
    "ProgressStats", "compute_stats",
    "PendingActions", "PendingTarget", "TrackerSession"
]
