"""Theme document parsing and validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import defusedxml
import defusedxml.ElementTree as ET

from forumtheme.errors import ErrorCode, ThemeLoadError
from forumtheme.themes.constants import (
    PAGE_ELEMENT,
    PAGE_NAME_ATTRIBUTE,
    RESOURCE_ELEMENT,
    RESOURCE_LANGUAGE_ATTRIBUTE,
    RESOURCE_TAG_ATTRIBUTE,
    ROOT_DIR_ATTRIBUTE,
)
from forumtheme.themes.models import ThemeDocument, ThemePage, ThemeResource, ThemeValidationError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


def load_theme_document(
    path: Path,
    *,
    theme_file: str | None = None,
    reject_duplicates: bool = False,
) -> ThemeDocument:
    """Read and parse a theme document from disk."""
    try:
        content = path.read_bytes()
    except FileNotFoundError as exc:
        raise ThemeLoadError(ErrorCode.DOCUMENT_NOT_FOUND, path=path) from exc
    except OSError as exc:
        raise ThemeLoadError(
            ErrorCode.DOCUMENT_UNREADABLE,
            message=f"Unable to read {path}: {exc}",
            path=path,
        ) from exc
    return parse_theme_document(
        content,
        theme_file=theme_file or path.name,
        source=path,
        reject_duplicates=reject_duplicates,
    )


def parse_theme_document(
    content: str | bytes,
    *,
    theme_file: str,
    source: Path | None = None,
    reject_duplicates: bool = False,
) -> ThemeDocument:
    """Parse theme XML into a ThemeDocument.

    Page names, tags and language codes are upper-cased so lookups can be
    case-insensitive. Pages sharing a name are merged in document order.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise ThemeLoadError(
            ErrorCode.DOCUMENT_MALFORMED,
            message=f"Invalid XML in {source or theme_file}: {exc}",
            path=source,
        ) from exc
    except defusedxml.DefusedXmlException as exc:
        raise ThemeLoadError(
            ErrorCode.DOCUMENT_MALFORMED,
            message=f"Forbidden XML construct in {source or theme_file}: {exc}",
            path=source,
        ) from exc

    directory = (root.get(ROOT_DIR_ATTRIBUTE) or "").strip() or None

    grouped: dict[str, list[ThemeResource]] = {}
    seen: set[tuple[str, str, str | None]] = set()
    duplicates: list[tuple[str, str, str | None]] = []
    for page_element in root.iter(PAGE_ELEMENT):
        page_name = _required_attr(page_element, PAGE_NAME_ATTRIBUTE, theme_file, source).upper()
        resources = grouped.setdefault(page_name, [])
        for element in page_element.findall(RESOURCE_ELEMENT):
            resource = _parse_resource(element, page_name, theme_file, source)
            key = (page_name, resource.tag, resource.language)
            if key in seen:
                if reject_duplicates:
                    raise ThemeValidationError(
                        ErrorCode.DUPLICATE_RESOURCE,
                        message=f"{theme_file}: duplicate resource {_format_key(key)}",
                        path=source,
                    )
                duplicates.append(key)
            seen.add(key)
            resources.append(resource)

    if duplicates:
        logger.warning(
            "%s: %d duplicate resource(s), first match wins: %s",
            theme_file,
            len(duplicates),
            ", ".join(_format_key(key) for key in duplicates[:6]),
        )

    return ThemeDocument(
        theme_file=theme_file,
        directory=directory,
        pages={name: ThemePage(name=name, resources=tuple(items)) for name, items in grouped.items()},
        duplicates=tuple(duplicates),
    )


def _parse_resource(
    element: Element,
    page_name: str,
    theme_file: str,
    source: Path | None,
) -> ThemeResource:
    tag = _required_attr(element, RESOURCE_TAG_ATTRIBUTE, theme_file, source, context=page_name)
    language = (element.get(RESOURCE_LANGUAGE_ATTRIBUTE) or "").strip().upper() or None
    return ThemeResource(tag=tag.upper(), value="".join(element.itertext()), language=language)


def _required_attr(
    element: Element,
    name: str,
    theme_file: str,
    source: Path | None,
    *,
    context: str = "",
) -> str:
    value = (element.get(name) or "").strip()
    if not value:
        where = f" in page {context!r}" if context else ""
        raise ThemeValidationError(
            ErrorCode.DOCUMENT_INVALID,
            message=f"{theme_file}: <{element.tag}>{where} is missing attribute {name!r}",
            path=source,
        )
    return value


def _format_key(key: tuple[str, str, str | None]) -> str:
    page, tag, language = key
    return f"{page}.{tag}" + (f"[{language}]" if language else "")
