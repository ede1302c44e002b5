"""Value objects for the inputs of a package-details run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

HeaderMap = Dict[str, str]
SectionMap = Dict[str, str]
DetailsDocument = Dict[str, Any]


class InvalidResourceError(ValueError):
    """Raised when a source file, readme file or URL cannot be used."""


@dataclass(frozen=True)
class SourceFile:
    """A readable file on the local filesystem.

    Used for both the plugin/theme source file and the optional readme.
    Validation happens at construction so that a bad path fails before any
    extraction work starts.
    """

    path: Path

    def __init__(self, path: str | os.PathLike[str]) -> None:
        resolved = Path(path)
        if not resolved.is_file():
            raise InvalidResourceError(
                f"Invalid path provided for {type(self).__name__}. "
                f"No file found at path '{path}'."
            )
        if not os.access(resolved, os.R_OK):
            raise InvalidResourceError(
                f"Invalid path provided for {type(self).__name__}. "
                f"File '{path}' cannot be read."
            )
        object.__setattr__(self, "path", resolved)

    def contents(self) -> str:
        """Return the full file contents."""
        return self.path.read_text(encoding="utf-8", errors="replace")

    def basename(self) -> str:
        """Return the file name with its final extension removed."""
        return self.path.stem


@dataclass(frozen=True)
class Url:
    """Absolute URL to an external resource."""

    value: str

    def __post_init__(self) -> None:
        if not _is_valid_url(self.value):
            raise InvalidResourceError(
                f"Invalid url provided for {type(self).__name__}. "
                f"'{self.value}' does not match a known url pattern."
            )

    def __str__(self) -> str:
        return self.value


def _is_valid_url(value: str) -> bool:
    if not value or any(char.isspace() for char in value):
        return False
    try:
        parsed = urlparse(value)
        # Accessing port validates the numeric range.
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


__all__ = [
    "DetailsDocument",
    "HeaderMap",
    "InvalidResourceError",
    "SectionMap",
    "SourceFile",
    "Url",
]
