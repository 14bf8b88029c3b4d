"""Tests for forumtheme.config.settings."""

from pathlib import Path

import pytest
import yaml

from forumtheme.config.settings import CacheMode, ThemeSettings, dump_settings, load_settings
from forumtheme.errors import ErrorCode, ThemeConfigurationError


def test_defaults() -> None:
    settings = ThemeSettings()
    assert settings.client_asset_root == "/"
    assert settings.themes_folder == "Themes"
    assert settings.cache_mode is CacheMode.SHARED
    assert settings.log_missing_theme_item is False


def test_load_settings_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "theme.yaml"
    path.write_text(
        "client_asset_root: /forum/\n"
        "server_asset_root: /forum/\n"
        "themes_folder: themes\n"
        "default_theme: ' classic.xml '\n"
        "cache_mode: LIVE\n"
        "log_missing_theme_item: true\n",
        encoding="utf-8",
    )

    settings = load_settings(path)
    assert settings.client_asset_root == "/forum/"
    assert settings.themes_folder == "themes"
    assert settings.default_theme == "classic.xml"
    assert settings.cache_mode is CacheMode.LIVE
    assert settings.log_missing_theme_item is True
    assert settings.reject_duplicate_resources is False


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "theme.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == ThemeSettings()


def test_missing_file_raises_config_missing(tmp_path: Path) -> None:
    with pytest.raises(ThemeConfigurationError) as info:
        load_settings(tmp_path / "absent.yaml")
    assert info.value.code is ErrorCode.CONFIG_MISSING


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "themes_folder: [a, b]\n",
        "log_missing_theme_item: 'yes please'\n",
        "cache_mode: sometimes\n",
        "unknown_key: 1\n",
        "themes_folder: '/'\n",
        "client_asset_root: [unclosed\n",
    ],
)
def test_invalid_settings_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "theme.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ThemeConfigurationError) as info:
        load_settings(path)
    assert info.value.code is ErrorCode.CONFIG_INVALID


def test_dump_settings_round_trips_through_yaml(tmp_path: Path) -> None:
    settings = ThemeSettings(themes_folder="themes", cache_mode=CacheMode.LIVE, log_dir="/var/log/forum")

    path = dump_settings(settings, tmp_path / "nested" / "theme.yaml")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))

    assert raw["cache_mode"] == "live"
    assert load_settings(path) == settings
