"""Package-type strategies supplying plugin and theme specific fields."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from ..extraction import parse_sections
from ..models import HeaderMap, SourceFile

PLUGIN_HEADERS: HeaderMap = {
    "version": "Version",
    "name": "Plugin Name",
    "requires": "Requires at least",
    "requires_php": "Requires PHP",
    "homepage": "Plugin URI",
    "author": "Author",
    "author_profile": "Author URI",
}

THEME_HEADERS: HeaderMap = {
    "name": "Theme Name",
    "homepage": "Theme URI",
    "version": "Version",
    "requires": "Requires at least",
    "requires_php": "Requires PHP",
}


class PackageVariant(Protocol):
    """Capabilities a package type contributes to the details document."""

    name: str

    def header_map(self) -> HeaderMap:
        """Return the ordered ``field -> header label`` map."""

    def slug(self, source: SourceFile) -> str:
        """Return the unique package slug, or an empty string."""

    def additional_data(self, readme: str) -> Dict[str, Any]:
        """Return package-type specific fields derived from the readme."""


class PluginVariant:
    """Plugin packages: slug from the main file name, readme sections."""

    name = "plugin"

    def header_map(self) -> HeaderMap:
        return dict(PLUGIN_HEADERS)

    def slug(self, source: SourceFile) -> str:
        return source.basename()

    def additional_data(self, readme: str) -> Dict[str, Any]:
        return {"sections": parse_sections(readme)}


class ThemeVariant:
    """Theme packages: explicit slug, readme description only."""

    name = "theme"

    def __init__(self, slug: Optional[str] = None) -> None:
        self._slug = slug or ""

    def header_map(self) -> HeaderMap:
        return dict(THEME_HEADERS)

    def slug(self, source: SourceFile) -> str:
        return self._slug

    def additional_data(self, readme: str) -> Dict[str, Any]:
        return {"description": parse_sections(readme).get("Description", "")}


PACKAGE_KINDS = ("plugin", "theme")


def get_variant(kind: str, *, slug: Optional[str] = None) -> PackageVariant:
    """Return the variant strategy for ``kind``."""
    if kind == "plugin":
        return PluginVariant()
    if kind == "theme":
        return ThemeVariant(slug)
    raise ValueError(f"Unknown package type '{kind}'. Expected one of: {', '.join(PACKAGE_KINDS)}")


__all__ = [
    "PACKAGE_KINDS",
    "PLUGIN_HEADERS",
    "THEME_HEADERS",
    "PackageVariant",
    "PluginVariant",
    "ThemeVariant",
    "get_variant",
]
