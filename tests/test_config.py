"""Tests for fintrack.config."""

import stat
from pathlib import Path

import pytest

from fintrack.config import (
    config_count,
    config_flag,
    DEFAULT_CONFIG,
    create_default_config,
    get_config_path,
    load_config,
    load_config_or_default,
    update_config,
)


class TestGetConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "fintrack" / "config.toml"


class TestCreateDefaultConfig:
    """Tests for create_default_config."""

    def test_writes_defaults_with_private_permissions(self, tmp_path: Path) -> None:
        """Should write the defaults readable only by the owner."""
        config_path = tmp_path / "nested" / "config.toml"

        create_default_config(config_path)

        assert load_config(config_path) == DEFAULT_CONFIG
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600


class TestLoadConfigOrDefault:
    """Tests for load_config_or_default."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults when no file exists."""
        assert load_config_or_default(tmp_path / "missing.toml") == DEFAULT_CONFIG

    def test_fills_missing_keys(self, tmp_path: Path) -> None:
        """Should keep file values and add missing defaults."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('business_name = "Acme"\n')

        config = load_config_or_default(config_path)

        assert config["business_name"] == "Acme"
        assert config["currency"] == DEFAULT_CONFIG["currency"]

    def test_load_config_raises_when_missing(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError from load_config."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestUpdateConfig:
    """Tests for update_config."""

    def test_updates_given_keys_only(self, tmp_path: Path) -> None:
        """Should change non-None values and keep the rest."""
        config_path = tmp_path / "config.toml"
        create_default_config(config_path)

        update_config({"business_name": "Acme", "currency": None}, config_path)

        config = load_config(config_path)
        assert config["business_name"] == "Acme"
        assert config["currency"] == DEFAULT_CONFIG["currency"]

    def test_creates_file(self, tmp_path: Path) -> None:
        """Should create the file when it does not exist yet."""
        config_path = tmp_path / "fintrack" / "config.toml"

        update_config({"currency": "£"}, config_path)

        assert load_config(config_path)["currency"] == "£"


class TestConfigFlag:
    """Tests for config_flag."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, True), (False, False), ("false", False), ("Yes", True), ("0", False)],
    )
    def test_accepts_booleans_and_words(self, value: object, expected: bool) -> None:
        """Should read TOML booleans and common boolean words."""
        assert config_flag({"seed_demo_data": value}, "seed_demo_data") is expected

    def test_rejects_unknown_text(self) -> None:
        """Should raise ValueError naming the key."""
        with pytest.raises(ValueError, match="seed_demo_data"):
            config_flag({"seed_demo_data": "maybe"}, "seed_demo_data")


class TestConfigCount:
    """Tests for config_count."""

    def test_accepts_numbers_and_numeric_text(self) -> None:
        """Should return an int for numbers and numeric strings."""
        assert config_count({"recent_limit": 5}, "recent_limit") == 5
        assert config_count({"recent_limit": "10"}, "recent_limit") == 10

    @pytest.mark.parametrize("value", ["five", -1, True, None])
    def test_rejects_bad_values(self, value: object) -> None:
        """Should raise ValueError for text, negatives, booleans and missing values."""
        with pytest.raises(ValueError, match="recent_limit"):
            config_count({"recent_limit": value}, "recent_limit")
