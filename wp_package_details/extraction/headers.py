"""Header extraction following the WordPress file-header convention."""

from __future__ import annotations

import re
from typing import Dict, Mapping

from ..logging import get_logger

logger = get_logger("extraction.headers")

# Leading comment-marker noise allowed before a header label.
_HEADER_PATTERN = r"^[ \t/*#@]*{label}:(.*)$"


def extract_header(source: str, label: str) -> str:
    """Return the value declared for ``label`` in ``source``.

    Mirrors WordPress' ``get_file_data``: the first line of the form
    ``Label: value`` wins, optionally prefixed with whitespace or comment
    markers. An absent header yields an empty string.
    """
    pattern = re.compile(
        _HEADER_PATTERN.format(label=re.escape(label)),
        re.IGNORECASE | re.MULTILINE,
    )
    match = pattern.search(source)
    if match is None:
        logger.debug("Header '%s' not found", label)
        return ""
    return match.group(1).strip()


def extract_headers(source: str, header_map: Mapping[str, str]) -> Dict[str, str]:
    """Extract every ``field -> label`` pair of ``header_map`` from ``source``."""
    return {field: extract_header(source, label) for field, label in header_map.items()}


__all__ = ["extract_header", "extract_headers"]
