"""
Data models and exceptions for tracked entries.

An Entry keeps the user's raw ``total`` and ``completed`` text. The value
kind is decided from ``total`` once, when the entry is created, and carried
with it from then on.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .progress import ValueKind, detect_kind, percent_for_kind, remaining_percent


class TrackerError(Exception):
    """Base exception for tracker operations."""
    pass


class ValidationError(TrackerError):
    """Raised when user input is rejected."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class EntryNotFoundError(TrackerError, IndexError):
    """Raised when an entry index does not exist."""
    pass


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Entry:
    """One tracked series."""
    link: str
    title: str
    total: str
    completed: str = "0"
    kind: Optional[ValueKind] = None
    entry_id: str = field(default_factory=_new_entry_id)

    def __post_init__(self):
        if self.kind is None:
            self.kind = detect_kind(self.total)
        elif not isinstance(self.kind, ValueKind):
            self.kind = ValueKind(self.kind)

    @property
    def percent(self) -> int:
        """Completion percentage in [0, 100]."""
        return percent_for_kind(self.completed, self.total, self.kind)

    @property
    def remaining(self) -> int:
        """Remaining percentage, 100 minus the completion percentage."""
        return remaining_percent(self.percent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """Create an Entry from a stored record."""
        kwargs = {
            "link": data["link"],
            "title": data["title"],
            "total": str(data["total"]),
            "completed": str(data.get("completed") or "0"),
            "kind": data.get("kind"),
        }
        if data.get("entry_id"):
            kwargs["entry_id"] = data["entry_id"]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable record."""
        return {
            "link": self.link,
            "title": self.title,
            "total": self.total,
            "completed": self.completed,
            "kind": self.kind.value,
            "entry_id": self.entry_id,
        }


@dataclass
class EntryRow:
    """Display values for one entry."""
    index: int
    title: str
    link: str
    total: str
    completed_display: str
    completed_percent: int
    remaining_percent: int
    media_type: Optional[str] = None
    media_id: Optional[str] = None
