"""Theme framework constants."""

from __future__ import annotations

DOCUMENT_EXTENSION = ".xml"
PLACEHOLDER_MARKER = "~"
DEFAULT_ITEM_FORMAT = "[{page}.{tag}]"
MISSING_ITEM_FORMAT = "Missing Theme Item: {page}.{tag}"

ROOT_DIR_ATTRIBUTE = "dir"
PAGE_ELEMENT = "page"
PAGE_NAME_ATTRIBUTE = "name"
RESOURCE_ELEMENT = "Resource"
RESOURCE_TAG_ATTRIBUTE = "tag"
RESOURCE_LANGUAGE_ATTRIBUTE = "language"

ICONS_PAGE = "ICONS"
PANEL_COLLAPSE_TAG = "PANEL_COLLAPSE"
PANEL_EXPAND_TAG = "PANEL_EXPAND"
