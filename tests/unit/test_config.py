"""
Unit tests for generator settings.

Tests defaults, validation, dictionary conversion, file loading and
environment overrides.
"""

import dataclasses
import json
from unittest.mock import patch

import pytest
import yaml

from r4gen.utils.config import (
    Settings,
    apply_environment_overrides,
    load_settings,
    save_settings,
    settings_from_dict,
    settings_to_dict,
    validate_settings,
)
from r4gen.utils.constants import DEFAULT_REFERENCED_NAMESPACES
from r4gen.utils.exceptions import ConfigurationError


class TestSettings:
    """Test the settings object itself."""

    def test_defaults(self):
        settings = Settings()
        assert settings.generated_namespace == "R4Mvc"
        assert settings.helpers_prefix == "MVC"
        assert settings.referenced_namespaces == DEFAULT_REFERENCED_NAMESPACES
        assert settings.indent_size == 4

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.generated_namespace = "Other"

    def test_list_namespaces_become_tuple(self):
        settings = Settings(referenced_namespaces=["System", "System.Linq"])
        assert settings.referenced_namespaces == ("System", "System.Linq")


class TestValidation:
    """Test settings validation."""

    def test_valid_defaults(self):
        validate_settings(Settings())

    @pytest.mark.parametrize("namespace", ["", "1Bad", "Has Space", "Trailing.", ".Leading"])
    def test_invalid_namespace(self, namespace):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_settings(Settings(generated_namespace=namespace))
        assert exc_info.value.setting == "generated_namespace"

    def test_invalid_helpers_prefix(self):
        with pytest.raises(ConfigurationError):
            validate_settings(Settings(helpers_prefix="My.Helpers"))

    def test_invalid_referenced_namespace(self):
        with pytest.raises(ConfigurationError):
            validate_settings(Settings(referenced_namespaces=("System", "not valid")))

    def test_negative_indent(self):
        with pytest.raises(ConfigurationError):
            validate_settings(Settings(indent_size=-1))


class TestDictConversion:
    """Test conversion from and to dictionaries."""

    def test_from_empty_dict_is_default(self):
        assert settings_from_dict({}) == Settings()

    def test_from_dict_overrides(self):
        settings = settings_from_dict({
            "generated_namespace": "Project.R4",
            "helpers_prefix": "Links",
            "referenced_namespaces": ["System"],
            "indent_size": "2",
        })
        assert settings == Settings("Project.R4", "Links", ("System",), 2)

    def test_single_referenced_namespace_string(self):
        assert settings_from_dict({"referenced_namespaces": "System"}).referenced_namespaces == ("System",)

    def test_bad_indent_type(self):
        with pytest.raises(ConfigurationError):
            settings_from_dict({"indent_size": "wide"})

    def test_round_trip(self):
        settings = Settings(generated_namespace="A.B", indent_size=2)
        assert settings_from_dict(settings_to_dict(settings)) == settings


class TestLoading:
    """Test loading settings files."""

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_settings(tmp_path / "absent.json") == Settings()

    def test_load_json(self, tmp_path):
        path = tmp_path / "r4mvc.json"
        path.write_text(json.dumps({"generated_namespace": "Shop.R4"}))
        assert load_settings(path).generated_namespace == "Shop.R4"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "r4mvc.yaml"
        path.write_text(yaml.safe_dump({"helpers_prefix": "Links", "indent_size": 2}))
        settings = load_settings(path)
        assert settings.helpers_prefix == "Links"
        assert settings.indent_size == 2

    def test_empty_yaml_is_default(self, tmp_path):
        path = tmp_path / "r4mvc.yml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "r4mvc.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)
        assert exc_info.value.source == str(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "r4mvc.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_invalid_value_reports_source(self, tmp_path):
        path = tmp_path / "r4mvc.json"
        path.write_text(json.dumps({"generated_namespace": "bad namespace"}))
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)
        assert f"source={path}" in str(exc_info.value)

    def test_default_location(self, tmp_path, monkeypatch):
        (tmp_path / "r4mvc.json").write_text(json.dumps({"helpers_prefix": "Here"}))
        monkeypatch.chdir(tmp_path)
        assert load_settings().helpers_prefix == "Here"

    @pytest.mark.parametrize("suffix", [".json", ".yaml"])
    def test_save_and_load(self, tmp_path, suffix):
        path = tmp_path / f"settings{suffix}"
        settings = Settings(generated_namespace="Saved.R4", referenced_namespaces=("System",))
        save_settings(settings, path)
        assert load_settings(path) == settings


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_namespace_override(self):
        with patch.dict('os.environ', {'R4GEN_NAMESPACE': 'Env.R4'}):
            assert apply_environment_overrides(Settings()).generated_namespace == "Env.R4"

    def test_override_applies_after_file(self, tmp_path):
        path = tmp_path / "r4mvc.json"
        path.write_text(json.dumps({"generated_namespace": "File.R4"}))
        with patch.dict('os.environ', {'R4GEN_NAMESPACE': 'Env.R4'}):
            assert load_settings(path).generated_namespace == "Env.R4"

    def test_invalid_override_rejected(self):
        with patch.dict('os.environ', {'R4GEN_NAMESPACE': 'not valid'}):
            with pytest.raises(ConfigurationError):
                apply_environment_overrides(Settings())

    def test_blank_override_ignored(self):
        with patch.dict('os.environ', {'R4GEN_NAMESPACE': '   '}):
            assert apply_environment_overrides(Settings()) == Settings()
