"""Theme document models."""

from __future__ import annotations

from dataclasses import dataclass, field

from forumtheme.errors import ThemeLoadError


class ThemeValidationError(ThemeLoadError):
    """Raised when a theme document fails structural validation."""


@dataclass(frozen=True, slots=True)
class ThemeResource:
    """A single tagged value, optionally bound to one language."""

    tag: str
    value: str
    language: str | None = None


@dataclass(frozen=True, slots=True)
class ThemePage:
    """Resources grouped under one page name, in document order."""

    name: str
    resources: tuple[ThemeResource, ...] = ()

    def find(self, tag: str, language: str | None = None) -> ThemeResource | None:
        """Return the first resource for ``tag``.

        With ``language`` set only an exact language match counts; without it
        any resource carrying the tag matches.
        """
        for resource in self.resources:
            if resource.tag != tag:
                continue
            if language is None or resource.language == language:
                return resource
        return None


@dataclass(frozen=True, slots=True)
class ThemeDocument:
    """A fully parsed theme document."""

    theme_file: str
    directory: str | None
    pages: dict[str, ThemePage] = field(default_factory=dict)
    duplicates: tuple[tuple[str, str, str | None], ...] = ()

    def page(self, name: str) -> ThemePage | None:
        return self.pages.get(name.upper())

    @property
    def resource_count(self) -> int:
        return sum(len(page.resources) for page in self.pages.values())
