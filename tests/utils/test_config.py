"""Tests for configuration management."""

import json
import os
from pathlib import Path
from unittest.mock import patch

from watch_progress.utils.config import Config


class TestConfig:
    """Test configuration loading and overrides."""

    def test_defaults_when_missing(self, tmp_path):
        config = Config(tmp_path / "config.json")

        assert config.get("media_hosts") == ["youtube.com", "youtu.be"]
        assert config.get("youtube_api_key") is None
        assert config.get("data_file").endswith("entries.json")

    def test_file_values_override_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"media_hosts": ["vimeo.com"]}))

        config = Config(config_file)

        assert config.media_hosts == ["vimeo.com"]
        assert config.get("data_file").endswith("entries.json")

    def test_malformed_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("[1, 2")

        assert Config(config_file).media_hosts == ["youtube.com", "youtu.be"]

    def test_set_and_save(self, tmp_path):
        config_file = tmp_path / "sub" / "config.json"
        config = Config(config_file)
        config.set("youtube_api_key", "saved_key")
        config.save()

        assert Config(config_file).get("youtube_api_key") == "saved_key"

    def test_data_file_env_override(self, tmp_path):
        config = Config(tmp_path / "config.json")
        with patch.dict(os.environ, {"WATCH_PROGRESS_DATA": str(tmp_path / "x.json")}):
            assert config.data_file == tmp_path / "x.json"

    def test_data_file_from_config(self, tmp_path):
        config = Config(tmp_path / "config.json")
        config.set("data_file", str(tmp_path / "mine.json"))
        with patch.dict(os.environ, {}, clear=True):
            assert config.data_file == Path(tmp_path / "mine.json")

    def test_api_key_env_override(self, tmp_path):
        config = Config(tmp_path / "config.json")
        config.set("youtube_api_key", "config_key")

        with patch.dict(os.environ, {"YOUTUBE_API_KEY": "env_key"}):
            assert config.youtube_api_key == "env_key"
        with patch.dict(os.environ, {}, clear=True):
            assert config.youtube_api_key == "config_key"
