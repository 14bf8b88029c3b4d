"""Per-request theme service: the entry point used by page rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from forumtheme.themes.panels import collapsible_panel_image_url
from forumtheme.themes.resolver import ThemeResolver
from forumtheme.themes.store import ThemeDocumentStore

if TYPE_CHECKING:
    from forumtheme.config.settings import ThemeSettings
    from forumtheme.context import LocalizationContext, PanelState, PanelStateStore
    from forumtheme.diagnostics import EventSink
    from forumtheme.storage import ThemeStorage
    from forumtheme.themes.cache import DocumentCache


class ThemeService:
    """Select a theme and resolve its resources for one request or session."""

    def __init__(
        self,
        storage: ThemeStorage,
        settings: ThemeSettings,
        localization: LocalizationContext,
        *,
        cache: DocumentCache | None = None,
        events: EventSink | None = None,
        actor_id: int | str | None = None,
        theme_file: str | None = None,
    ) -> None:
        self._store = ThemeDocumentStore(storage, settings, cache)
        self._resolver = ThemeResolver(
            self._store,
            localization,
            events=events,
            actor_id=actor_id,
        )
        initial = theme_file if theme_file is not None else settings.default_theme
        if initial:
            self._store.set_theme(initial)

    @property
    def theme_file(self) -> str | None:
        return self._store.theme_file

    @property
    def store(self) -> ThemeDocumentStore:
        return self._store

    @property
    def resolver(self) -> ThemeResolver:
        return self._resolver

    @property
    def log_missing_theme_item(self) -> bool:
        return self._resolver.log_missing_theme_item

    @log_missing_theme_item.setter
    def log_missing_theme_item(self, value: bool) -> None:
        self._resolver.log_missing_theme_item = value

    def set_theme(self, theme_file: str) -> bool:
        return self._store.set_theme(theme_file)

    def get_item(self, page: str, tag: str, default: str | None = None) -> str:
        return self._resolver.get_item(page, tag, default)

    def asset_directory(self) -> str:
        return self._store.asset_directory()

    def build_asset_path(self, filename: str) -> str:
        return self._store.build_asset_path(filename)

    def collapsible_panel_image_url(
        self,
        panel_id: str,
        default_state: PanelState,
        panel_states: PanelStateStore,
    ) -> str:
        return collapsible_panel_image_url(self._resolver, panel_id, default_state, panel_states)
