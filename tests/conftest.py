"""Shared test fixtures for the fleetform test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from fleetform.masking.countries import get_country_profile
from fleetform.masking.models import CountryPhoneProfile


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "[formatting]\ndefault_country = 'IN'",
                "development.toml": "[formatting]\ndefault_country = 'AE'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture
def india() -> CountryPhoneProfile:
    return get_country_profile("IN")


@pytest.fixture
def uae() -> CountryPhoneProfile:
    return get_country_profile("AE")


@pytest.fixture
def kenya() -> CountryPhoneProfile:
    """A profile that is not in the built-in table."""
    return CountryPhoneProfile(
        code="KE", name="Kenya", flag="🇰🇪", dial_code="+254", national_digit_limit=9
    )


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear cached settings and loaded TOML before and after each test."""
    from fleetform.config import get_settings
    from fleetform.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})
