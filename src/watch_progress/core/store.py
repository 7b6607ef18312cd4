"""Ordered list of tracked entries."""

import logging
from typing import Iterable, List, Optional

from .media import MEDIA_HOST_MARKERS, is_media_link
from .models import Entry, ValidationError
from .storage import EntryStorage

# Configure logging
logger = logging.getLogger(__name__)


class EntryStore:
    """Creates, updates and removes entries through a storage backend.

    Every mutation re-reads the full list from storage, applies one change
    and writes the full list back.
    """

    def __init__(
        self,
        storage: EntryStorage,
        media_hosts: Iterable[str] = MEDIA_HOST_MARKERS
    ):
        """Initialize entry store.

        Args:
            storage: Persistence backend
            media_hosts: Host markers a link must contain
        """
        self.storage = storage
        self.media_hosts = tuple(media_hosts)

    def entries(self) -> List[Entry]:
        """Return the current entry list."""
        return self.storage.load()

    def add(self, link: str, title: str, total: str) -> Entry:
        """Append a new entry with nothing completed.

        Args:
            link: Media link
            title: Display title
            total: Declared total, a count or a duration

        Returns:
            The stored entry

        Raises:
            ValidationError: If a field is empty or the link is not a
                recognized media link
        """
        link = (link or "").strip()
        title = (title or "").strip()
        total = (total or "").strip()

        for name, value in (("link", link), ("title", title), ("total", total)):
            if not value:
                raise ValidationError("Please fill in all fields before adding", field=name)

        if not is_media_link(link, self.media_hosts):
            raise ValidationError(f"Not a recognized media link: {link}", field="link")

        entry = Entry(link=link, title=title, total=total, completed="0")

        entries = self.storage.load()
        entries.append(entry)
        self.storage.save(entries)

        logger.info(f"Added entry '{title}' ({entry.kind.value}, total {total})")
        return entry

    def update_completed(self, index: int, new_value: str) -> bool:
        """Replace the completed amount of one entry.

        Args:
            index: Position of the entry
            new_value: New completed amount

        Returns:
            True if updated, False if the index no longer exists

        Raises:
            ValidationError: If the new value is empty
        """
        new_value = (new_value or "").strip()
        if not new_value:
            raise ValidationError("Please enter a value", field="completed")

        entries = self.storage.load()
        if not 0 <= index < len(entries):
            logger.warning(f"Entry {index} no longer exists, update skipped")
            return False

        entries[index].completed = new_value
        self.storage.save(entries)

        logger.info(f"Updated entry {index} completed to {new_value}")
        return True

    def remove(self, index: int) -> bool:
        """Remove one entry, shifting later entries down by one.

        Args:
            index: Position of the entry

        Returns:
            True if removed, False if the index no longer exists
        """
        entries = self.storage.load()
        if not 0 <= index < len(entries):
            logger.warning(f"Entry {index} no longer exists, removal skipped")
            return False

        removed = entries.pop(index)
        self.storage.save(entries)

        logger.info(f"Removed entry {index} '{removed.title}'")
        return True

    def index_of(self, entry_id: str) -> Optional[int]:
        """Find the current position of an entry by its stable key.

        Args:
            entry_id: Entry key assigned at creation

        Returns:
            Index, or None if no entry has that key
        """
        for i, entry in enumerate(self.storage.load()):
            if entry.entry_id == entry_id:
                return i
        return None
