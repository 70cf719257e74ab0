"""Configuration file management for fintrack."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_CONFIG: dict[str, Any] = {
    "business_name": "Financial Tracker",
    "currency": "$",
    "month": "",
    "seed_demo_data": True,
    "recent_limit": 5,
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "fintrack" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(dict(DEFAULT_CONFIG), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def load_config_or_default(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, filling missing keys with defaults.

    A missing config file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary with every default key present.
    """
    try:
        loaded = load_config(config_path)
    except FileNotFoundError:
        loaded = {}
    return {**DEFAULT_CONFIG, **loaded}


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def update_config(changes: dict[str, Any], config_path: Path | None = None) -> dict[str, Any]:
    """Update selected keys and save the result.

    Keys whose value is None are left unchanged.

    Args:
        changes: Keys to update.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The saved configuration.
    """
    if config_path is None:
        config_path = get_config_path()

    config = load_config_or_default(config_path)
    config.update({key: value for key, value in changes.items() if value is not None})

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(config, config_path)
    return config


def config_flag(config: dict[str, Any], key: str) -> bool:
    """Read a boolean config value.

    Accepts TOML booleans and the strings true/false, yes/no, on/off, 1/0.

    Raises:
        ValueError: If the value is not recognised as a boolean.
    """
    value = config[key]
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "yes", "on", "1"):
        return True
    if text in ("false", "no", "off", "0"):
        return False
    raise ValueError(f"{key} must be true or false, got {value!r}")


def config_count(config: dict[str, Any], key: str) -> int:
    """Read a non-negative integer config value.

    Raises:
        ValueError: If the value is not a whole number of zero or more.
    """
    value = config[key]
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a whole number, got {value!r}")
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a whole number, got {value!r}") from None
    if count < 0:
        raise ValueError(f"{key} must not be negative, got {value!r}")
    return count
