"""Interactive prompts for editing and deleting entries."""

import logging

import questionary

from ..core.models import Entry, TrackerError

# Configure logging
logger = logging.getLogger(__name__)


class UserCancelledError(TrackerError):
    """Raised when user cancels a prompt."""
    pass


def format_percent(percent: int) -> str:
    """Format a percentage for display."""
    return f"{percent}%"


def format_entry_display(entry: Entry, max_title_length: int = 50) -> str:
    """Format an entry for prompt messages.

    Args:
        entry: Entry to describe
        max_title_length: Maximum characters for title before truncation

    Returns:
        Title with its progress, e.g. "Python Course (12/40, 30%)"
    """
    title = entry.title
    if len(title) > max_title_length:
        title = title[:max_title_length - 3] + "..."

    return f"{title} ({entry.completed or '0'}/{entry.total}, {format_percent(entry.percent)})"


def prompt_completed(entry: Entry, prefill: str) -> str:
    """Ask for a new completed amount.

    Args:
        entry: Entry being edited
        prefill: Current completed value shown as the default answer

    Returns:
        Entered value, possibly blank

    Raises:
        UserCancelledError: If user cancels the prompt
    """
    try:
        answer = questionary.text(
            message=f"Completed for {format_entry_display(entry)}:",
            default=prefill
        ).ask()
    except KeyboardInterrupt:
        answer = None

    if answer is None:
        logger.info("User cancelled edit prompt")
        raise UserCancelledError("User cancelled edit")

    return answer


def confirm_delete(entry: Entry) -> bool:
    """Ask whether an entry should be deleted.

    Args:
        entry: Entry selected for deletion

    Returns:
        True if the user confirmed

    Raises:
        UserCancelledError: If user cancels the prompt
    """
    try:
        answer = questionary.confirm(
            message=f"Delete {format_entry_display(entry)}?",
            default=False
        ).ask()
    except KeyboardInterrupt:
        answer = None

    if answer is None:
        logger.info("User cancelled delete prompt")
        raise UserCancelledError("User cancelled delete")

    return bool(answer)
