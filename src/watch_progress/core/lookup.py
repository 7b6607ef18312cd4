"""Suggest a total for a link from YouTube metadata."""

import logging
from typing import Any, Dict, Optional

import isodate
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .media import MediaRef, extract_youtube_id
from .models import TrackerError
from .timevalue import format_duration

# Configure logging
logger = logging.getLogger(__name__)


class LookupFailedError(TrackerError):
    """Raised when metadata for a link cannot be retrieved."""
    pass


class MetadataLookup:
    """Looks up playlist sizes and video durations via the YouTube Data API.

    A playlist's total is its item count; a video's total is its duration
    as a clock string, so the added entry is tracked by playback time.
    """

    def __init__(self, api_key: Optional[str] = None):
        """Initialize metadata lookup.

        Args:
            api_key: YouTube Data API key
        """
        self.api_key = api_key

        self._youtube = None
        if self.api_key:
            try:
                self._youtube = build('youtube', 'v3', developerKey=self.api_key)
            except Exception as e:
                logger.warning(f"Failed to initialize YouTube API client: {e}")

    def suggest_total(self, link: str) -> str:
        """Suggest a total for a media link.

        Args:
            link: YouTube video or playlist URL

        Returns:
            Item count for playlists, H:MM:SS or M:SS duration for videos

        Raises:
            LookupFailedError: If the link has no ID or the API call fails
        """
        media = extract_youtube_id(link)
        if media is None:
            raise LookupFailedError(f"No video or playlist ID in link: {link}")

        if media.media_type == "playlist":
            return self._playlist_total(media)
        return self._video_total(media)

    def _playlist_total(self, media: MediaRef) -> str:
        item = self._first_item("playlists", {
            "part": "contentDetails",
            "id": media.media_id
        })
        count = item.get("contentDetails", {}).get("itemCount", 0)
        logger.info(f"Playlist {media.media_id} has {count} items")
        return str(count)

    def _video_total(self, media: MediaRef) -> str:
        item = self._first_item("videos", {
            "part": "contentDetails",
            "id": media.media_id
        })
        seconds = self._parse_duration(item.get("contentDetails", {}).get("duration", ""))
        if seconds <= 0:
            raise LookupFailedError(f"No duration available for video {media.media_id}")
        logger.info(f"Video {media.media_id} runs {seconds} seconds")
        return format_duration(seconds)

    def _first_item(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        items = self._api_request(endpoint, params).get("items", [])
        if not items:
            raise LookupFailedError(f"Not found: {params['id']}")
        return items[0]

    def _api_request(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Make an authenticated API request.

        Args:
            endpoint: API endpoint (playlists, videos)
            params: Request parameters

        Returns:
            API response data
        """
        if not self._youtube:
            raise LookupFailedError("YouTube API client not initialized")

        try:
            if endpoint == "playlists":
                response = self._youtube.playlists().list(**params).execute()
            elif endpoint == "videos":
                response = self._youtube.videos().list(**params).execute()
            else:
                raise LookupFailedError(f"Unsupported endpoint: {endpoint}")

            logger.debug(f"API request successful: {endpoint}")
            return response

        except HttpError as e:
            if e.resp.status == 403:
                raise LookupFailedError("API quota exceeded or invalid API key")
            elif e.resp.status == 404:
                raise LookupFailedError("Resource not found")
            else:
                raise LookupFailedError(f"API request failed: {e}")
        except LookupFailedError:
            raise
        except Exception as e:
            raise LookupFailedError(f"API request failed: {e}")

    def _parse_duration(self, duration_str: str) -> int:
        """Parse ISO 8601 duration to seconds.

        Args:
            duration_str: ISO 8601 duration string (e.g., "PT5M30S")

        Returns:
            Duration in seconds
        """
        if not duration_str:
            return 0

        try:
            duration = isodate.parse_duration(duration_str)
            return int(duration.total_seconds())
        except (isodate.ISO8601Error, ValueError):
            return 0
