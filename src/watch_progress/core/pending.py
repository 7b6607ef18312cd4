"""Pending edit and delete targets awaiting confirmation."""

from dataclasses import dataclass
from typing import Optional

from .models import Entry


@dataclass
class PendingTarget:
    """An armed target: the entry key, its index when armed and a prefill."""
    entry_id: str
    index: int
    prefill: str = ""


class PendingActions:
    """Holds at most one edit target and one delete target.

    Each slot is either idle (None) or armed. Arming an armed slot replaces
    the held target, there is no queue.
    """

    def __init__(self):
        self.edit: Optional[PendingTarget] = None
        self.delete: Optional[PendingTarget] = None

    @property
    def edit_armed(self) -> bool:
        return self.edit is not None

    @property
    def delete_armed(self) -> bool:
        return self.delete is not None

    def arm_edit(self, index: int, entry: Entry) -> PendingTarget:
        """Select an entry for editing, capturing its completed value."""
        self.edit = PendingTarget(entry.entry_id, index, entry.completed or "0")
        return self.edit

    def arm_delete(self, index: int, entry: Entry) -> PendingTarget:
        """Select an entry for deletion."""
        self.delete = PendingTarget(entry.entry_id, index)
        return self.delete

    def clear_edit(self) -> None:
        self.edit = None

    def clear_delete(self) -> None:
        self.delete = None

    def reset(self) -> None:
        """Return both slots to idle."""
        self.edit = None
        self.delete = None
