"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from canonical_reducer.config import (
    CONFIG_FILE_NAME,
    CanonicalReducerConfig,
    LogLevel,
    OutputFormat,
    create_default_config,
    find_config_file,
    load_config,
)


class TestCanonicalReducerConfig:
    """Test complete CanonicalReducerConfig model."""

    def test_defaults(self):
        """Test default configuration values."""
        config = CanonicalReducerConfig()
        assert config.output.format == OutputFormat.TABLE.value
        assert config.validation.fail_fast is False
        assert config.logging.level == LogLevel.WARN.value

    def test_config_from_dict(self):
        """Test config creation from dictionary with aliases."""
        config = CanonicalReducerConfig(**{
            "output": {"format": "json"},
            "validation": {"failFast": True},
            "logging": {"level": "debug"}
        })
        assert config.output.format == "json"
        assert config.validation.fail_fast is True
        assert config.logging.level == "debug"

    def test_field_name_population(self):
        """Test populating by field name instead of alias."""
        config = CanonicalReducerConfig(validation={"fail_fast": True})
        assert config.validation.fail_fast is True

    def test_extra_fields_forbidden(self):
        """Test that unknown top-level sections are rejected."""
        with pytest.raises(ValueError):
            CanonicalReducerConfig(unknown={"foo": "bar"})

    def test_invalid_format(self):
        """Test invalid output format is rejected."""
        with pytest.raises(ValueError):
            CanonicalReducerConfig(output={"format": "xml"})


class TestConfigLoading:
    """Test configuration loading functions."""

    def test_create_default_config(self):
        config = create_default_config()
        assert isinstance(config, CanonicalReducerConfig)

    def test_load_config_from_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / CONFIG_FILE_NAME
            config_file.write_text(json.dumps({"output": {"format": "markdown"}}), encoding="utf-8")

            config = load_config(config_file)

            assert config.output.format == "markdown"

    def test_load_config_missing_file_falls_back_to_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.json")
        assert config == create_default_config()

    def test_load_config_invalid_json(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("invalid json {", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(config_file)

    def test_load_config_invalid_values(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"logging": {"level": "loud"}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(config_file)

    def test_load_config_searches_when_no_path(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"validation": {"failFast": True}}), encoding="utf-8")

        with patch("canonical_reducer.config.find_config_file", return_value=config_file):
            config = load_config()

        assert config.validation.fail_fast is True

    def test_find_config_file_in_parent(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()

    def test_find_config_file_not_found(self, tmp_path):
        with patch("pathlib.Path.exists", return_value=False):
            assert find_config_file(tmp_path) is None
