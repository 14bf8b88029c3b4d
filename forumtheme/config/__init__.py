"""Theme resolution configuration."""

from forumtheme.config.settings import CacheMode, ThemeSettings, dump_settings, load_settings

__all__ = [
    "CacheMode",
    "ThemeSettings",
    "dump_settings",
    "load_settings",
]
