"""Theme resource lookup with language fallback and placeholder substitution."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from forumtheme.diagnostics import EventSeverity, EventSink, record_event_safely
from forumtheme.themes.constants import DEFAULT_ITEM_FORMAT, MISSING_ITEM_FORMAT, PLACEHOLDER_MARKER
from forumtheme.themes.models import ThemeDocument, ThemeResource

if TYPE_CHECKING:
    from forumtheme.context import LocalizationContext
    from forumtheme.themes.store import ThemeDocumentStore

logger = logging.getLogger(__name__)

_MARKER_RE = re.compile(re.escape(PLACEHOLDER_MARKER))


def default_item(page: str, tag: str) -> str:
    return DEFAULT_ITEM_FORMAT.format(page=page.upper(), tag=tag.upper())


def substitute_placeholder(value: str, theme_path: str) -> str:
    """Replace every placeholder marker in ``value`` with ``theme_path``.

    ``~images/x`` and ``~/images/x`` both become ``<theme_path>/images/x``;
    a marker at the end of the value, or before another marker, becomes
    exactly ``theme_path``.
    """
    if PLACEHOLDER_MARKER not in value:
        return value
    base = theme_path.rstrip("/")

    def _replace(match: re.Match[str]) -> str:
        following = value[match.end():match.end() + 1]
        if following and following not in ("/", PLACEHOLDER_MARKER):
            return base + "/"
        return base

    return _MARKER_RE.sub(_replace, value)


def find_resource(
    document: ThemeDocument,
    page: str,
    tag: str,
    language: str,
) -> ThemeResource | None:
    """Exact language match first, then any resource with the tag."""
    theme_page = document.page(page)
    if theme_page is None:
        return None
    tag = tag.upper()
    language = language.upper()
    if language:
        found = theme_page.find(tag, language)
        if found is not None:
            return found
    return theme_page.find(tag)


class ThemeResolver:
    """Resolves (page, tag) pairs against the store's current document."""

    def __init__(
        self,
        store: ThemeDocumentStore,
        localization: LocalizationContext,
        *,
        events: EventSink | None = None,
        actor_id: int | str | None = None,
        log_missing_theme_item: bool | None = None,
    ) -> None:
        self._store = store
        self._localization = localization
        self._events = events
        self._actor_id = actor_id
        if log_missing_theme_item is None:
            log_missing_theme_item = store.settings.log_missing_theme_item
        self.log_missing_theme_item = log_missing_theme_item

    def get_item(self, page: str, tag: str, default: str | None = None) -> str:
        if default is None:
            default = default_item(page, tag)

        document = self._store.ensure_loaded()
        if document is None:
            return default

        page_key = page.upper()
        tag_key = tag.upper()
        language = (self._localization.language_code or "").upper()

        resource = find_resource(document, page_key, tag_key, language)
        if resource is None:
            self._report_missing(page_key, tag_key)
            return default

        return substitute_placeholder(resource.value, self._store.server_theme_path())

    def _report_missing(self, page: str, tag: str) -> None:
        logger.debug("missing theme item %s.%s", page, tag)
        if not self.log_missing_theme_item or self._events is None:
            return
        record_event_safely(
            self._events,
            self._actor_id,
            f"themes/{page.lower()}",
            MISSING_ITEM_FORMAT.format(page=page, tag=tag),
            EventSeverity.ERROR,
        )
