"""Localized theme resource resolution for forum page rendering."""

from forumtheme.config.settings import CacheMode, ThemeSettings, load_settings
from forumtheme.context import PanelState, SessionPanelStates, StaticLocalization
from forumtheme.diagnostics import EventSeverity, LoggingEventSink
from forumtheme.errors import ErrorCode, ThemeConfigurationError, ThemeError, ThemeLoadError
from forumtheme.storage import FileSystemStorage
from forumtheme.themes import ThemeService, ThemeValidationError, is_valid_theme

__version__ = "0.1.0"

__all__ = [
    "CacheMode",
    "ErrorCode",
    "EventSeverity",
    "FileSystemStorage",
    "LoggingEventSink",
    "PanelState",
    "SessionPanelStates",
    "StaticLocalization",
    "ThemeConfigurationError",
    "ThemeError",
    "ThemeLoadError",
    "ThemeService",
    "ThemeSettings",
    "ThemeValidationError",
    "__version__",
    "is_valid_theme",
    "load_settings",
]
