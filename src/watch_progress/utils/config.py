"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.media import MEDIA_HOST_MARKERS
from ..core.storage import DEFAULT_DATA_FILE

DEFAULT_CONFIG_FILE = Path.home() / ".watch_progress" / "config.json"


class Config:
    """Application configuration manager."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to configuration file
        """
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file."""
        self._config = self._get_default_config()
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    self._config.update(json.load(f))
            except (json.JSONDecodeError, IOError, TypeError, ValueError):
                self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "data_file": str(DEFAULT_DATA_FILE),
            "media_hosts": list(MEDIA_HOST_MARKERS),
            "youtube_api_key": None
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self._config[key] = value

    def save(self) -> None:
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(self._config, f, indent=2)

    @property
    def data_file(self) -> Path:
        """Entry data file, WATCH_PROGRESS_DATA overrides the config."""
        env_path = os.getenv('WATCH_PROGRESS_DATA')
        return Path(env_path or self.get("data_file")).expanduser()

    @property
    def media_hosts(self) -> List[str]:
        return list(self.get("media_hosts") or MEDIA_HOST_MARKERS)

    @property
    def youtube_api_key(self) -> Optional[str]:
        """YouTube API key, YOUTUBE_API_KEY overrides the config."""
        return os.getenv('YOUTUBE_API_KEY') or self.get("youtube_api_key")
