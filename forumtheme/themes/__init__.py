"""Theme resource resolution exports."""

from forumtheme.themes.cache import DocumentCache, ProcessDocumentCache, shared_document_cache
from forumtheme.themes.models import ThemeDocument, ThemePage, ThemeResource, ThemeValidationError
from forumtheme.themes.resolver import ThemeResolver
from forumtheme.themes.service import ThemeService
from forumtheme.themes.store import ThemeDocumentStore
from forumtheme.themes.validity import is_valid_theme

__all__ = [
    "DocumentCache",
    "ProcessDocumentCache",
    "ThemeDocument",
    "ThemeDocumentStore",
    "ThemePage",
    "ThemeResolver",
    "ThemeResource",
    "ThemeService",
    "ThemeValidationError",
    "is_valid_theme",
    "shared_document_cache",
]
