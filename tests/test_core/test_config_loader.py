"""
Tests for the configuration loader module.

Tests config loading, parsing, defaults, validation, and error handling.
"""

import json
import pytest
from pathlib import Path

from pdfscan.core.config_loader import (
    Config,
    get_config,
    reload_config,
)
from pdfscan.core.exceptions import ConfigurationError


class TestConfigFromFile:
    """Tests for loading config from file."""

    def test_load_valid_config(self, temp_config: Path, reset_config_singleton):
        """Test loading a valid configuration file."""
        config = Config.from_file(temp_config)

        assert config.extraction.primary_backend == "pypdf"
        assert config.analysis.workers == 2
        assert config.search.context_chars == 20
        assert config.logging.level == "DEBUG"

    def test_load_missing_config_raises_error(self, temp_dir: Path):
        """Test that loading non-existent config raises ConfigurationError."""
        fake_path = temp_dir / "nonexistent" / "config.json"

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(fake_path)

        assert "not found" in str(exc_info.value.message).lower()

    def test_load_invalid_json_raises_error(self, temp_dir: Path):
        """Test that invalid JSON raises ConfigurationError."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text("{ invalid json }")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_file(config_path)

        assert "invalid json" in str(exc_info.value.message).lower()

    def test_config_default_values(self, temp_dir: Path, reset_config_singleton):
        """Test that missing config values get defaults."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {}, "analysis": {}}))

        config = Config.from_file(config_path)

        assert config.extraction.primary_backend == "pypdf"
        assert config.extraction.fallback_backend == "pdfplumber"
        assert config.extraction.supported_extensions == [".pdf"]
        assert config.analysis.threshold == 0.1
        assert config.analysis.workers is None
        assert config.search.case_sensitive is False

    def test_relative_logs_directory_resolved(self, temp_dir: Path):
        """Test that relative paths resolve against the project root."""
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        config_path = config_dir / "config.json"
        config_path.write_text(json.dumps({"paths": {"logs_directory": "logs"}}))

        config = Config.from_file(config_path)

        assert config.paths.logs_directory == temp_dir / "logs"
        assert config.paths.logs_directory.is_absolute()

    def test_threshold_out_of_range_raises(self, temp_dir: Path):
        """Test that an invalid threshold is rejected."""
        config_path = temp_dir / "config.json"
        config_path.write_text(json.dumps({"analysis": {"threshold": 1.5}}))

        with pytest.raises(ConfigurationError, match="threshold"):
            Config.from_file(config_path)

    def test_invalid_workers_raises(self, temp_dir: Path):
        """Test that a non-positive worker count is rejected."""
        config_path = temp_dir / "config.json"
        config_path.write_text(json.dumps({"analysis": {"workers": 0}}))

        with pytest.raises(ConfigurationError, match="workers"):
            Config.from_file(config_path)

    def test_keyword_weights_normalized(self, temp_dir: Path):
        """Test that weight keys are trimmed and lowercased."""
        config_path = temp_dir / "config.json"
        config_path.write_text(json.dumps(
            {"analysis": {"keyword_weights": {" Neural Networks ": 2}}}
        ))

        config = Config.from_file(config_path)

        assert config.analysis.keyword_weights == {"neural networks": 2.0}


class TestDefaults:
    """Tests for the built-in default configuration."""

    def test_defaults_disable_file_logging(self):
        """Test that defaults do not write log files."""
        config = Config.defaults()

        assert config.paths.logs_directory is None
        assert config.analysis.threshold == 0.1

    def test_get_config_falls_back_to_defaults(self, temp_dir: Path, reset_config_singleton, monkeypatch):
        """Test that no config file means built-in defaults."""
        monkeypatch.chdir(temp_dir)

        config = get_config()

        assert config.paths.logs_directory is None
        assert config.extraction.primary_backend == "pypdf"


class TestGetConfig:
    """Tests for the get_config singleton function."""

    def test_get_config_returns_same_instance(self, temp_config: Path, reset_config_singleton):
        """Test that get_config returns singleton instance."""
        config1 = get_config(temp_config)
        config2 = get_config()

        assert config1 is config2

    def test_reload_config_creates_new_instance(self, temp_config: Path, reset_config_singleton):
        """Test that reload_config creates a fresh instance."""
        _config1 = get_config(temp_config)  # noqa: F841

        with open(temp_config, "r") as f:
            data = json.load(f)
        data["analysis"]["threshold"] = 0.5
        with open(temp_config, "w") as f:
            json.dump(data, f)

        config2 = reload_config(temp_config)

        assert config2.analysis.threshold == 0.5
