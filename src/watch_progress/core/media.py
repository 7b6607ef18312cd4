"""Media link recognition."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

MEDIA_HOST_MARKERS = ("youtube.com", "youtu.be")

_PLAYLIST_PATTERN = re.compile(r"[?&]list=([^&#]+)")
_VIDEO_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&?#]+)")


@dataclass(frozen=True)
class MediaRef:
    """Reference to a video or playlist extracted from a link."""
    media_type: str
    media_id: str


def is_media_link(link: str, markers: Iterable[str] = MEDIA_HOST_MARKERS) -> bool:
    """Check whether a link contains a recognized media host marker.

    Args:
        link: Link text
        markers: Host substrings to accept

    Returns:
        True if any marker occurs in the link
    """
    if not link:
        return False
    return any(marker in link for marker in markers)


def extract_youtube_id(url: str) -> Optional[MediaRef]:
    """Extract a playlist or video ID from a YouTube URL.

    A playlist parameter takes precedence over a video ID, so watch URLs
    opened from inside a playlist resolve to the playlist.

    Args:
        url: YouTube URL

    Returns:
        MediaRef, or None if the URL carries no recognizable ID
    """
    if not url:
        return None

    playlist_match = _PLAYLIST_PATTERN.search(url)
    if playlist_match:
        return MediaRef("playlist", playlist_match.group(1))

    video_match = _VIDEO_PATTERN.search(url)
    if video_match:
        return MediaRef("video", video_match.group(1))

    return None
