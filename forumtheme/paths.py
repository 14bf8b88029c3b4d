"""Virtual path composition for theme documents and assets."""

from __future__ import annotations

from forumtheme.config.settings import ThemeSettings


def join_virtual(root: str, *parts: str) -> str:
    """Join a root and path segments with exactly one slash between each."""
    cleaned = [part.strip("/") for part in parts if part and part.strip("/")]
    if not root:
        return "/".join(cleaned)
    return "/".join([root.rstrip("/"), *cleaned])


def theme_document_path(settings: ThemeSettings, theme_file: str) -> str:
    """Virtual path of a theme document under the server asset root."""
    return join_virtual(settings.server_asset_root, settings.themes_folder, theme_file.strip())


def server_theme_dir(settings: ThemeSettings, directory: str) -> str:
    """Server-side theme asset path, without a trailing slash."""
    return join_virtual(settings.server_asset_root, settings.themes_folder, directory)


def client_theme_dir(settings: ThemeSettings, directory: str) -> str:
    """Browser-facing theme asset path, with a trailing slash."""
    return join_virtual(settings.client_asset_root, settings.themes_folder, directory) + "/"
