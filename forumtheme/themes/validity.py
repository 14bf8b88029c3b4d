"""Theme identifier validity checks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forumtheme.paths import theme_document_path
from forumtheme.themes.constants import DOCUMENT_EXTENSION

if TYPE_CHECKING:
    from forumtheme.config.settings import ThemeSettings
    from forumtheme.storage import ThemeStorage

logger = logging.getLogger(__name__)


def is_valid_theme(candidate: str | None, *, storage: ThemeStorage, settings: ThemeSettings) -> bool:
    """Basic testing of a theme identifier: non-blank, ``.xml`` and present in storage."""
    if candidate is None:
        return False
    theme_file = candidate.strip()
    if not theme_file:
        return False
    if not theme_file.lower().endswith(DOCUMENT_EXTENSION):
        return False

    path = theme_document_path(settings, theme_file)
    try:
        return bool(storage.exists(path))
    except Exception as exc:  # any storage failure counts as "not there"
        logger.debug("existence check failed for %s: %r", path, exc)
        return False
