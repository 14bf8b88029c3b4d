"""Active theme identifier and lazily loaded theme document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forumtheme.config.settings import CacheMode, ThemeSettings
from forumtheme.errors import ErrorCode, ThemeConfigurationError, ThemeError, classify_load_exception
from forumtheme.paths import client_theme_dir, server_theme_dir, theme_document_path
from forumtheme.themes.cache import DocumentCache, shared_document_cache
from forumtheme.themes.models import ThemeDocument
from forumtheme.themes.validity import is_valid_theme

if TYPE_CHECKING:
    from forumtheme.storage import ThemeStorage

logger = logging.getLogger(__name__)


class ThemeDocumentStore:
    """Owns the current theme identifier and its parsed document."""

    def __init__(
        self,
        storage: ThemeStorage,
        settings: ThemeSettings,
        cache: DocumentCache | None = None,
    ) -> None:
        self._storage = storage
        self._settings = settings
        self._cache = cache if cache is not None else shared_document_cache()
        self._theme_file: str | None = None
        self._document: ThemeDocument | None = None

    @property
    def theme_file(self) -> str | None:
        return self._theme_file

    @property
    def settings(self) -> ThemeSettings:
        return self._settings

    def set_theme(self, theme_file: str) -> bool:
        """Adopt ``theme_file`` when it is valid; return whether it is now active.

        An invalid identifier leaves the current theme untouched.
        """
        if theme_file == self._theme_file:
            return True
        if not is_valid_theme(theme_file, storage=self._storage, settings=self._settings):
            logger.warning(
                "rejected theme %r; keeping %r",
                theme_file,
                self._theme_file,
            )
            return False
        logger.info("theme changed from %r to %r", self._theme_file, theme_file)
        self._theme_file = theme_file
        self._document = None
        return True

    def invalidate(self) -> None:
        """Drop the local document so the next access reloads it."""
        self._document = None

    def ensure_loaded(self) -> ThemeDocument | None:
        if self._theme_file is None:
            return None
        if self._document is not None:
            return self._document

        use_cache = self._settings.cache_mode is CacheMode.SHARED
        if use_cache:
            cached = self._cache.get(self._theme_file)
            if cached is not None:
                logger.debug("theme document %s served from cache", self._theme_file)
                self._document = cached
                return cached

        document = self._read_document(self._theme_file)
        self._document = document
        if use_cache:
            self._cache.set(self._theme_file, document)
        return document

    def require_document(self) -> ThemeDocument:
        document = self.ensure_loaded()
        if document is None:
            raise ThemeConfigurationError(ErrorCode.THEME_NOT_SET)
        return document

    def theme_directory(self) -> str:
        """The document's root ``dir`` attribute."""
        document = self.require_document()
        if not document.directory:
            raise ThemeConfigurationError(
                ErrorCode.THEME_DIR_MISSING,
                details={"theme_file": document.theme_file},
            )
        return document.directory

    def asset_directory(self) -> str:
        """Client path of the theme's asset folder, ending in ``/``."""
        return client_theme_dir(self._settings, self.theme_directory())

    def server_theme_path(self) -> str:
        """Server path substituted for the placeholder marker."""
        return server_theme_dir(self._settings, self.theme_directory())

    def build_asset_path(self, filename: str) -> str:
        return self.asset_directory() + filename

    def _read_document(self, theme_file: str) -> ThemeDocument:
        path = theme_document_path(self._settings, theme_file)
        try:
            document = self._storage.read_document(path)
        except ThemeError:
            raise
        except Exception as exc:
            raise classify_load_exception(exc) from exc
        logger.debug(
            "parsed theme document %s: %d page(s), %d resource(s)",
            path,
            len(document.pages),
            document.resource_count,
        )
        return document
