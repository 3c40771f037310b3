"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from fleetform.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_nested_dicts(self) -> None:
        """Nested dictionaries are merged recursively."""
        base = {"formatting": {"default_country": "IN", "currency_max_digits": 8}}
        override = {"formatting": {"default_country": "AE"}}
        assert deep_merge(base, override) == {
            "formatting": {"default_country": "AE", "currency_max_digits": 8}
        }

    def test_lists_are_replaced(self) -> None:
        """Lists in override replace base lists."""
        base = {"formatting": {"extra_countries": [{"code": "KE"}]}}
        override = {"formatting": {"extra_countries": []}}
        assert deep_merge(base, override) == {"formatting": {"extra_countries": []}}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('[formatting]\ndefault_country = "AE"')
        assert load_toml(toml_file) == {"formatting": {"default_country": "AE"}}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLEETFORM_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FLEETFORM_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLEETFORM_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir() == test_config_dir

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLEETFORM_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_finds_config_in_parent(
        self, tmp_path: Path, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Looks upward from the working directory."""
        nested = tmp_path / "app" / "src"
        nested.mkdir(parents=True)
        monkeypatch.delenv("FLEETFORM_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)
        assert get_config_dir() == test_config_dir


class TestLoadConfig:
    """Tests for load_config function."""

    def test_merges_environment_config(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Environment config overrides default config."""
        mock_toml_files({
            "default.toml": "[formatting]\ndefault_country = 'IN'\ncurrency_max_digits = 8",
            "development.toml": "[formatting]\ndefault_country = 'AE'",
        })
        monkeypatch.setenv("FLEETFORM_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FLEETFORM_ENV", "development")

        assert load_config() == {
            "formatting": {"default_country": "AE", "currency_max_digits": 8}
        }

    def test_missing_environment_file_ignored(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": "[formatting]\ndefault_country = 'IN'"})
        monkeypatch.setenv("FLEETFORM_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FLEETFORM_ENV", "nonexistent")

        assert load_config() == {"formatting": {"default_country": "IN"}}

    def test_missing_default_raises(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLEETFORM_CONFIG_DIR", str(test_config_dir))
        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()

    def test_explicit_dir_and_environment(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Arguments take precedence over FLEETFORM_CONFIG_DIR and FLEETFORM_ENV."""
        mock_toml_files({
            "default.toml": "[formatting]\ndefault_country = 'IN'",
            "production.toml": "[formatting]\ndefault_country = 'QA'",
        })
        monkeypatch.setenv("FLEETFORM_CONFIG_DIR", "/nonexistent/fleetform/config")
        monkeypatch.setenv("FLEETFORM_ENV", "development")

        config = load_config(config_dir=test_config_dir, env="production")
        assert config == {"formatting": {"default_country": "QA"}}
