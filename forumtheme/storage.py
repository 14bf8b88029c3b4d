"""Storage backends that locate and read theme documents."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from forumtheme.themes.loader import load_theme_document
from forumtheme.themes.models import ThemeDocument

if TYPE_CHECKING:
    from forumtheme.config.settings import ThemeSettings


class ThemeStorage(Protocol):
    def exists(self, path: str) -> bool: ...

    def read_document(self, path: str) -> ThemeDocument: ...


class FileSystemStorage:
    """Maps virtual paths onto a physical site root."""

    def __init__(self, site_root: str | Path, *, reject_duplicates: bool = False) -> None:
        self._site_root = Path(site_root)
        self._reject_duplicates = reject_duplicates

    @classmethod
    def from_settings(cls, site_root: str | Path, settings: ThemeSettings) -> FileSystemStorage:
        return cls(site_root, reject_duplicates=settings.reject_duplicate_resources)

    @property
    def site_root(self) -> Path:
        return self._site_root

    def map_path(self, path: str) -> Path:
        """Return the physical location of a virtual path such as ``/forum/Themes/a.xml``."""
        relative = path.replace("\\", "/").lstrip("/")
        return self._site_root.joinpath(*[part for part in relative.split("/") if part])

    def exists(self, path: str) -> bool:
        try:
            return self.map_path(path).is_file()
        except OSError:
            return False

    def read_document(self, path: str) -> ThemeDocument:
        physical = self.map_path(path)
        return load_theme_document(
            physical,
            theme_file=physical.name,
            reject_duplicates=self._reject_duplicates,
        )
