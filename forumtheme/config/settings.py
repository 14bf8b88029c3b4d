"""Theme resolution settings loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml

from forumtheme.errors import ErrorCode, ThemeConfigurationError


class CacheMode(str, Enum):
    """How parsed theme documents are shared within the process."""

    SHARED = "shared"
    LIVE = "live"


@dataclass(frozen=True, slots=True)
class ThemeSettings:
    """Path roots and behaviour switches for theme resolution."""

    client_asset_root: str = "/"
    server_asset_root: str = "/"
    themes_folder: str = "Themes"
    default_theme: str = ""
    cache_mode: CacheMode = CacheMode.SHARED
    log_missing_theme_item: bool = False
    reject_duplicate_resources: bool = False
    log_dir: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ThemeSettings:
        allowed = {item.name for item in fields(cls)}
        unknown = sorted(key for key in data.keys() if key not in allowed)
        if unknown:
            raise ThemeConfigurationError(
                ErrorCode.CONFIG_INVALID,
                message=f"Unsupported theme settings: {', '.join(unknown)}",
            )

        values: dict[str, Any] = {}
        for key in ("client_asset_root", "server_asset_root", "themes_folder", "default_theme", "log_dir"):
            if key in data:
                values[key] = _clean_str(data, key)
        for key in ("log_missing_theme_item", "reject_duplicate_resources"):
            if key in data:
                raw = data[key]
                if not isinstance(raw, bool):
                    raise ThemeConfigurationError(
                        ErrorCode.CONFIG_INVALID,
                        message=f"Setting {key!r} must be true or false, got {raw!r}",
                    )
                values[key] = raw
        if "cache_mode" in data:
            values["cache_mode"] = _parse_cache_mode(data["cache_mode"])

        settings = cls(**values)
        if not settings.themes_folder.strip("/"):
            raise ThemeConfigurationError(
                ErrorCode.CONFIG_INVALID,
                message="Setting 'themes_folder' must name a folder",
            )
        return settings


def load_settings(path: str | Path) -> ThemeSettings:
    """Read settings from a YAML file. An empty file yields the defaults."""
    settings_path = Path(path)
    try:
        content = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ThemeConfigurationError(ErrorCode.CONFIG_MISSING, path=settings_path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeConfigurationError(
            ErrorCode.CONFIG_INVALID,
            message=f"Unable to read {settings_path}: {exc}",
            path=settings_path,
        ) from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ThemeConfigurationError(
            ErrorCode.CONFIG_INVALID,
            message=f"Invalid YAML in {settings_path}: {exc}",
            path=settings_path,
        ) from exc
    if data is None:
        return ThemeSettings()
    if not isinstance(data, dict):
        raise ThemeConfigurationError(
            ErrorCode.CONFIG_INVALID,
            message=f"Expected a mapping in {settings_path}",
            path=settings_path,
        )
    return ThemeSettings.from_mapping(data)


def dump_settings(settings: ThemeSettings, path: str | Path) -> Path:
    """Write settings as YAML and return the path written."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = {item.name: getattr(settings, item.name) for item in fields(settings)}
    data["cache_mode"] = settings.cache_mode.value
    target.write_text(yaml.dump(data, default_flow_style=False), encoding="utf-8")
    return target


def _clean_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ThemeConfigurationError(
            ErrorCode.CONFIG_INVALID,
            message=f"Setting {key!r} must be a string, got {value!r}",
        )
    return value.strip()


def _parse_cache_mode(raw: object) -> CacheMode:
    if isinstance(raw, CacheMode):
        return raw
    mode = str(raw or "").strip().lower()
    try:
        return CacheMode(mode)
    except ValueError as exc:
        choices = ", ".join(item.value for item in CacheMode)
        raise ThemeConfigurationError(
            ErrorCode.CONFIG_INVALID,
            message=f"Setting 'cache_mode' must be one of {choices}, got {raw!r}",
        ) from exc
