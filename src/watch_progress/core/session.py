"""
Session facade consumed by a UI shell.

The session owns the pending-action state for one user session and exposes
the operations a shell triggers (add, begin/confirm/cancel edit and delete)
together with the display rows and statistics it renders.
"""

import logging
from typing import List, Optional

from .media import extract_youtube_id
from .models import Entry, EntryNotFoundError, EntryRow
from .pending import PendingActions, PendingTarget
from .progress import remaining_percent
from .stats import ProgressStats, compute_stats
from .store import EntryStore

# Configure logging
logger = logging.getLogger(__name__)


class TrackerSession:
    """Entry operations gated by pending edit/delete targets."""

    def __init__(self, store: EntryStore, pending: Optional[PendingActions] = None):
        """Initialize session.

        Args:
            store: Entry store
            pending: Pending-action state, a fresh one if not given
        """
        self.store = store
        self.pending = pending or PendingActions()

    def rows(self) -> List[EntryRow]:
        """Build display rows for the current entries."""
        rows = []
        for index, entry in enumerate(self.store.entries()):
            percent = entry.percent
            media = extract_youtube_id(entry.link)
            rows.append(EntryRow(
                index=index,
                title=entry.title,
                link=entry.link,
                total=entry.total,
                completed_display=entry.completed or "0",
                completed_percent=percent,
                remaining_percent=remaining_percent(percent),
                media_type=media.media_type if media else None,
                media_id=media.media_id if media else None
            ))
        return rows

    def stats(self) -> ProgressStats:
        """Recompute statistics for the current entries."""
        return compute_stats(self.store.entries())

    def add(self, link: str, title: str, total: str) -> Entry:
        """Add an entry. Pending targets are cleared after a successful add."""
        entry = self.store.add(link, title, total)
        self.pending.reset()
        return entry

    def begin_edit(self, index: int) -> str:
        """Arm the edit target.

        Args:
            index: Entry position

        Returns:
            The entry's current completed value, for prefilling input

        Raises:
            EntryNotFoundError: If there is no entry at index
        """
        entry = self._entry_at(index)
        return self.pending.arm_edit(index, entry).prefill

    def confirm_edit(self, new_value: str) -> bool:
        """Apply the armed edit.

        An empty value raises ValidationError and keeps the edit armed.

        Returns:
            True if an entry was updated, False if nothing was armed or the
            armed entry no longer exists
        """
        target = self.pending.edit
        if target is None:
            logger.warning("Edit confirmed with no entry selected")
            return False

        index = self._resolve(target)
        if index is None:
            self.pending.clear_edit()
            return False

        updated = self.store.update_completed(index, new_value)
        self.pending.reset()
        return updated

    def cancel_edit(self) -> None:
        self.pending.clear_edit()

    def begin_delete(self, index: int) -> Entry:
        """Arm the delete target.

        Args:
            index: Entry position

        Returns:
            The entry selected for deletion

        Raises:
            EntryNotFoundError: If there is no entry at index
        """
        entry = self._entry_at(index)
        self.pending.arm_delete(index, entry)
        return entry

    def confirm_delete(self) -> bool:
        """Apply the armed deletion.

        Returns:
            True if an entry was removed, False if nothing was armed or the
            armed entry no longer exists
        """
        target = self.pending.delete
        if target is None:
            logger.warning("Delete confirmed with no entry selected")
            return False

        index = self._resolve(target)
        if index is None:
            self.pending.clear_delete()
            return False

        removed = self.store.remove(index)
        self.pending.reset()
        return removed

    def cancel_delete(self) -> None:
        self.pending.clear_delete()

    def _entry_at(self, index: int) -> Entry:
        entries = self.store.entries()
        if not 0 <= index < len(entries):
            raise EntryNotFoundError(f"No entry at position {index + 1}")
        return entries[index]

    def _resolve(self, target: PendingTarget) -> Optional[int]:
        # Match by key; positions may have shifted since the target was armed.
        index = self.store.index_of(target.entry_id)
        if index is None:
            logger.warning(f"Entry selected at position {target.index + 1} no longer exists")
        return index
