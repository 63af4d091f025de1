"""Tests for validator configuration."""

import json

import pytest
import yaml

from dataknobs_validators import ConfigurationError, ValidatorConfig, v, validate


class TestValidatorConfig:
    """Test building configurations."""

    def test_defaults(self):
        """Test the default settings."""
        config = ValidatorConfig()
        assert config.first_error_only is True
        assert config.translate_rule is None
        assert config.translate_attribute is None

    def test_from_dict_accepts_camel_case(self):
        """Test snake_case and camelCase keys."""
        assert ValidatorConfig.from_dict({"firstErrorOnly": False}).first_error_only is False
        assert ValidatorConfig.from_dict({"first_error_only": False}).first_error_only is False

    def test_from_dict_ignores_unknown_keys(self):
        """Test that unknown settings are dropped."""
        config = ValidatorConfig.from_dict({"colour": "blue"})
        assert config == ValidatorConfig()

    def test_merge_returns_copy(self):
        """Test that merge leaves the original alone."""
        config = ValidatorConfig()
        merged = config.merge(first_error_only=False)
        assert merged.first_error_only is False
        assert config.first_error_only is True

    def test_coerce(self):
        """Test normalizing the validate() config argument."""
        config = ValidatorConfig(first_error_only=False)
        assert ValidatorConfig.coerce(config) is config
        assert ValidatorConfig.coerce(None) == ValidatorConfig()
        assert ValidatorConfig.coerce({"firstErrorOnly": False}).first_error_only is False

        with pytest.raises(ConfigurationError):
            ValidatorConfig.coerce(["first_error_only"])

    @pytest.mark.parametrize("raw,expected", [
        ("false", False),
        ("False", False),
        ("no", False),
        ("true", True),
        ("1", True),
        (0, False),
        (1, True),
    ])
    def test_from_dict_normalizes_flag(self, raw, expected):
        """Test that string and integer flags become booleans."""
        assert ValidatorConfig.from_dict({"firstErrorOnly": raw}).first_error_only is expected

    @pytest.mark.parametrize("raw", ["maybe", 2, [], None])
    def test_from_dict_rejects_bad_flag(self, raw):
        """Test that unreadable flags raise instead of being kept."""
        with pytest.raises(ConfigurationError) as exc_info:
            ValidatorConfig.from_dict({"first_error_only": raw})
        assert exc_info.value.context["setting"] == "first_error_only"

    def test_json_string_flag(self, tmp_path):
        """Test a quoted boolean in a JSON file."""
        path = tmp_path / "validators.json"
        path.write_text(json.dumps({"firstErrorOnly": "false"}))
        assert ValidatorConfig.from_file(path).first_error_only is False


class TestConfigFiles:
    """Test loading configuration from files."""

    def test_yaml_file(self, tmp_path):
        """Test a YAML file."""
        path = tmp_path / "validators.yaml"
        path.write_text(yaml.dump({"first_error_only": False}))
        assert ValidatorConfig.from_file(path).first_error_only is False

    def test_json_file_with_section(self, tmp_path):
        """Test a JSON file with a validators section."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"validators": {"firstErrorOnly": False}, "other": 1}))
        assert ValidatorConfig.from_file(str(path)).first_error_only is False

    def test_empty_yaml_file(self, tmp_path):
        """Test that an empty file gives the defaults."""
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert ValidatorConfig.from_file(path) == ValidatorConfig()

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(ConfigurationError) as exc_info:
            ValidatorConfig.from_file(tmp_path / "missing.yaml")
        assert "not found" in str(exc_info.value)

    def test_unsupported_format(self, tmp_path):
        """Test an unsupported extension."""
        path = tmp_path / "validators.ini"
        path.write_text("first_error_only = false")
        with pytest.raises(ConfigurationError) as exc_info:
            ValidatorConfig.from_file(path)
        assert exc_info.value.context["path"] == str(path.resolve())

    def test_non_mapping_content(self, tmp_path):
        """Test a file that does not hold a mapping."""
        path = tmp_path / "validators.yaml"
        path.write_text("- first_error_only\n")
        with pytest.raises(ConfigurationError):
            ValidatorConfig.from_file(path)


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_env_override(self, monkeypatch):
        """Test a boolean override."""
        monkeypatch.setenv("DATAKNOBS_VALIDATORS_FIRST_ERROR_ONLY", "false")
        assert ValidatorConfig.from_env().first_error_only is False

    def test_env_override_on_base(self, monkeypatch):
        """Test overriding a given base configuration."""
        monkeypatch.setenv("DATAKNOBS_VALIDATORS_FIRST_ERROR_ONLY", "yes")
        base = ValidatorConfig(first_error_only=False)
        assert ValidatorConfig.from_env(base).first_error_only is True

    def test_no_env(self, monkeypatch):
        """Test that the base is returned untouched without variables."""
        monkeypatch.delenv("DATAKNOBS_VALIDATORS_FIRST_ERROR_ONLY", raising=False)
        base = ValidatorConfig(first_error_only=False)
        assert ValidatorConfig.from_env(base) is base

    def test_invalid_env_value(self, monkeypatch):
        """Test that an unreadable override raises."""
        monkeypatch.setenv("DATAKNOBS_VALIDATORS_FIRST_ERROR_ONLY", "maybe")
        with pytest.raises(ConfigurationError):
            ValidatorConfig.from_env()


class TestConfigInValidation:
    """Test configuration passed to validate()."""

    @pytest.mark.asyncio
    async def test_dict_config(self):
        """Test a plain dict as configuration."""
        schema = v.string().min_length(5).email()
        result = await validate(schema, "ab", {"firstErrorOnly": False})
        assert len(result.errors) == 2

    @pytest.mark.asyncio
    async def test_config_is_not_shared_between_calls(self):
        """Test that a call's configuration never leaks into the next."""
        schema = v.string().min_length(5).email()
        await validate(schema, "ab", ValidatorConfig(first_error_only=False))
        assert len((await validate(schema, "ab")).errors) == 1
