"""Readme section parsing for the WordPress readme.txt format."""

from __future__ import annotations

import re
from typing import Dict

from ..logging import get_logger

logger = get_logger("extraction.sections")

_SECTION_PATTERN = re.compile(r"^\s*==([^=]+)==\s*$", re.MULTILINE)


def parse_sections(readme: str) -> Dict[str, str]:
    """Split readme text into ``title -> body`` pairs.

    Text before the first ``== Title ==`` line is discarded. A repeated title
    replaces the body recorded for the earlier one.
    """
    if not readme:
        return {}
    parts = _SECTION_PATTERN.split(readme)
    sections: Dict[str, str] = {}
    # parts = [preamble, title1, body1, title2, body2, ...]
    for index in range(1, len(parts) - 1, 2):
        title = parts[index].strip()
        sections[title] = parts[index + 1].strip()
    logger.debug("Parsed %d readme sections", len(sections))
    return sections


__all__ = ["parse_sections"]
