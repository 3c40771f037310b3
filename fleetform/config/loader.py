"""Layered TOML configuration: ``default.toml``, then ``{env}.toml``."""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "FLEETFORM_CONFIG_DIR"
ENVIRONMENT_ENV = "FLEETFORM_ENV"
DEFAULT_ENVIRONMENT = "development"

# Levels searched above the working directory for config/
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Directory holding default.toml and the per-environment files.

    FLEETFORM_CONFIG_DIR wins. Otherwise the nearest ``config/`` at or
    above the working directory is used, falling back to ``./config``.

    Raises:
        FileNotFoundError: If FLEETFORM_CONFIG_DIR names a missing directory
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    cwd = Path.cwd()
    for candidate in [cwd, *cwd.parents][:_SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    """Current environment from FLEETFORM_ENV, 'development' by default."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` over ``base`` without modifying either.

    Tables merge recursively. Arrays and scalars are replaced, so an
    environment file's ``[[formatting.extra_countries]]`` replaces the
    default list rather than extending it.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path | None = None, env: str | None = None) -> dict[str, Any]:
    """Load ``default.toml`` and merge the environment file over it.

    Args:
        config_dir: Directory to read; ``get_config_dir()`` when omitted
        env: Environment name; ``get_environment()`` when omitted

    Returns:
        Merged configuration dictionary

    Raises:
        FileNotFoundError: If default.toml is missing; the environment
            file is optional
    """
    config_dir = config_dir or get_config_dir()
    env = env or get_environment()

    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}."
        )

    config = load_toml(default_path)
    env_path = config_dir / f"{env}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))
    return config
