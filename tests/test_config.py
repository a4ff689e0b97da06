"""Tests for commitctx.config module."""

import pytest
import yaml

from commitctx.config import (
    DEFAULT_CONFIG,
    get_build_mode,
    get_config_file,
    get_max_chars,
    load_config,
    save_config,
)
from commitctx.exceptions import ConfigError
from commitctx.prompt.builder import BuildMode


def _write_config(repo_root, content: str) -> None:
    config_file = get_config_file(repo_root)
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(content)


class TestGetConfigFile:
    """Tests for get_config_file function."""

    def test_returns_correct_path(self, temp_dir):
        """Test that correct config path is returned."""
        config_file = get_config_file(temp_dir)
        assert config_file.name == "config.yaml"
        assert config_file.parent.name == ".commitctx"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_when_missing(self, temp_dir):
        """Test that defaults are returned and no file is created."""
        config = load_config(temp_dir)
        assert config == DEFAULT_CONFIG
        assert not get_config_file(temp_dir).exists()

    def test_returns_copy_of_defaults(self, temp_dir):
        """Test that callers cannot mutate the defaults."""
        config = load_config(temp_dir)
        config["max_chars"] = 1
        assert DEFAULT_CONFIG["max_chars"] == 50000

    def test_loads_existing_config(self, temp_dir):
        """Test loading an existing config file."""
        _write_config(temp_dir, yaml.dump({"max_chars": 1234, "mode": "simple"}))
        config = load_config(temp_dir)
        assert config["max_chars"] == 1234
        assert config["mode"] == "simple"

    def test_merges_with_defaults(self, temp_dir):
        """Test that missing keys are filled from defaults."""
        _write_config(temp_dir, yaml.dump({"max_chars": 10}))
        config = load_config(temp_dir)
        assert config["mode"] == DEFAULT_CONFIG["mode"]

    def test_corrupt_config_falls_back_to_defaults(self, temp_dir, caplog):
        """Test that invalid YAML yields defaults and a warning."""
        _write_config(temp_dir, "max_chars: [unclosed")
        config = load_config(temp_dir)
        assert config == DEFAULT_CONFIG
        assert "Ignoring unreadable config" in caplog.text

    def test_non_mapping_falls_back_to_defaults(self, temp_dir):
        """Test that a YAML list yields defaults."""
        _write_config(temp_dir, "- a\n- b\n")
        assert load_config(temp_dir) == DEFAULT_CONFIG

    def test_empty_file(self, temp_dir):
        """Test that an empty file yields defaults."""
        _write_config(temp_dir, "")
        assert load_config(temp_dir) == DEFAULT_CONFIG


class TestSaveConfig:
    """Tests for save_config function."""

    def test_round_trip(self, temp_dir):
        """Test that a saved config loads back."""
        save_config(temp_dir, {"max_chars": 777, "mode": "structured"})
        assert load_config(temp_dir) == {"max_chars": 777, "mode": "structured"}

    def test_creates_directory(self, temp_dir):
        """Test that the .commitctx directory is created."""
        save_config(temp_dir, DEFAULT_CONFIG)
        assert get_config_file(temp_dir).exists()


class TestGetMaxChars:
    """Tests for get_max_chars function."""

    def test_default(self, temp_dir):
        """Test the default ceiling."""
        assert get_max_chars(temp_dir) == 50000

    def test_configured(self, temp_dir):
        """Test a configured ceiling."""
        save_config(temp_dir, {"max_chars": 2000})
        assert get_max_chars(temp_dir) == 2000

    def test_zero_allowed(self, temp_dir):
        """Test that a zero ceiling is accepted and means no diff content."""
        save_config(temp_dir, {"max_chars": 0})
        assert get_max_chars(temp_dir) == 0

    @pytest.mark.parametrize("value", [-1, "lots", True, 1.5])
    def test_invalid_values(self, temp_dir, value):
        """Test that non-integer or negative ceilings raise ConfigError."""
        save_config(temp_dir, {"max_chars": value})
        with pytest.raises(ConfigError) as exc_info:
            get_max_chars(temp_dir)
        assert "Invalid max_chars" in str(exc_info.value)


class TestGetBuildMode:
    """Tests for get_build_mode function."""

    def test_default(self, temp_dir):
        """Test the default mode."""
        assert get_build_mode(temp_dir) == BuildMode.STRUCTURED

    def test_case_insensitive(self, temp_dir):
        """Test that mode names are case-insensitive."""
        save_config(temp_dir, {"mode": "SIMPLE"})
        assert get_build_mode(temp_dir) == BuildMode.SIMPLE

    def test_invalid_mode(self, temp_dir):
        """Test that unknown modes raise ConfigError."""
        save_config(temp_dir, {"mode": "verbose"})
        with pytest.raises(ConfigError) as exc_info:
            get_build_mode(temp_dir)
        assert "Valid modes: structured, simple" in str(exc_info.value)
