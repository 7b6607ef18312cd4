"""Track progress through YouTube videos and playlists."""

__version__ = "0.1.0"
