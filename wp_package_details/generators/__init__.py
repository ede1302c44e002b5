"""Package-details generators and package-type variants."""

from .details import DEFAULT_DATE_FORMAT, DetailsGenerator
from .variants import (
    PACKAGE_KINDS,
    PLUGIN_HEADERS,
    THEME_HEADERS,
    PackageVariant,
    PluginVariant,
    ThemeVariant,
    get_variant,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DetailsGenerator",
    "PACKAGE_KINDS",
    "PLUGIN_HEADERS",
    "THEME_HEADERS",
    "PackageVariant",
    "PluginVariant",
    "ThemeVariant",
    "get_variant",
]
