"""Aggregate completion statistics."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .models import Entry
from .progress import round_half_up


@dataclass
class ProgressStats:
    """Statistics over the current entry list."""
    count: int = 0
    average_percent: int = 0
    completed_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "average_percent": self.average_percent,
            "completed_count": self.completed_count,
        }


def compute_stats(entries: Iterable[Entry]) -> ProgressStats:
    """Compute statistics for a snapshot of entries.

    Nothing is cached; call again after every change.

    Args:
        entries: Current entries

    Returns:
        ProgressStats with the entry count, the rounded mean completion
        percentage and the number of fully completed entries
    """
    percentages = [entry.percent for entry in entries]
    if not percentages:
        return ProgressStats()

    return ProgressStats(
        count=len(percentages),
        average_percent=round_half_up(sum(percentages) / len(percentages)),
        completed_count=sum(1 for p in percentages if p == 100),
    )
