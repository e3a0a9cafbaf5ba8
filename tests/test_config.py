"""Tests for configuration loading."""

import pytest
import yaml

from config import DEFAULT_CONFIG_PATH, get_config_value, load_config, merge_config


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary config file and return its path."""
    def _write(content):
        path = tmp_path / "textops.yaml"
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()

        assert DEFAULT_CONFIG_PATH.exists()
        assert get_config_value(config, "wrap.width") == 80
        assert get_config_value(config, "wrap.newline") == "\n"
        assert get_config_value(config, "wrap.wrap_long_words") is False
        assert get_config_value(config, "abbreviate.upper") == -1
        assert get_config_value(config, "initials.delimiters") is None

    def test_user_file_is_merged_over_defaults(self, write_config):
        config = load_config(write_config("wrap:\n  width: 8\n"))

        assert get_config_value(config, "wrap.width") == 8
        assert get_config_value(config, "wrap.wrap_on") == " "
        assert get_config_value(config, "abbreviate.suffix") == "..."

    def test_empty_file_keeps_defaults(self, write_config):
        assert load_config(write_config("")) == load_config()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml_raises(self, write_config):
        with pytest.raises(yaml.YAMLError):
            load_config(write_config("wrap: [unclosed\n"))

    def test_non_mapping_root_raises(self, write_config):
        with pytest.raises(yaml.YAMLError):
            load_config(write_config("- a\n- b\n"))


class TestConfigHelpers:
    """Tests for merge_config and get_config_value."""

    def test_merge_is_recursive_and_pure(self):
        base = {"wrap": {"width": 80, "wrap_on": " "}, "other": 1}
        override = {"wrap": {"width": 10}}

        merged = merge_config(base, override)

        assert merged == {"wrap": {"width": 10, "wrap_on": " "}, "other": 1}
        assert base["wrap"]["width"] == 80

    def test_get_config_value_default(self):
        config = {"wrap": {"width": 10}}

        assert get_config_value(config, "wrap.width") == 10
        assert get_config_value(config, "wrap.missing", 5) == 5
        assert get_config_value(config, "wrap.width.deeper", "x") == "x"
