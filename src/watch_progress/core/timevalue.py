"""Clock-style duration parsing."""

import re
from typing import Optional

# Separators accepted between duration parts
TIME_SEPARATORS = ":./-"

_SEPARATOR_PATTERN = re.compile(r"[./-]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def normalize_time_format(time_str: Optional[str]) -> Optional[str]:
    """Replace every accepted separator with a colon.

    Args:
        time_str: Raw duration text such as "1.02.03" or "12/30"

    Returns:
        Text using ":" as the only separator
    """
    if not time_str:
        return time_str

    return _SEPARATOR_PATTERN.sub(":", time_str)


def parse_int_part(text: str) -> int:
    """Parse the leading integer of a duration part, 0 when there is none."""
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # Digit strings beyond the interpreter's conversion limit
        return 0


def parse_duration(time_str: Optional[str]) -> int:
    """Convert H:M:S, M:S or S text to total seconds.

    Malformed parts count as zero and never raise. Only the first three
    parts are significant when more are given.

    Args:
        time_str: Duration text in any supported separator convention

    Returns:
        Total seconds, never negative
    """
    if not time_str:
        return 0

    parts = [parse_int_part(p) for p in normalize_time_format(time_str).split(":")][:3]

    if len(parts) == 3:
        seconds = parts[0] * 3600 + parts[1] * 60 + parts[2]
    elif len(parts) == 2:
        seconds = parts[0] * 60 + parts[1]
    else:
        seconds = parts[0]

    return max(seconds, 0)


def format_duration(seconds: int) -> str:
    """Format seconds as M:SS or H:MM:SS.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0:
        seconds = 0

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
