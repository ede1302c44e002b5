"""Details generation: merges headers, readme data and run parameters."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any, Callable, Dict, Optional

from ..extraction import extract_headers
from ..logging import get_logger
from ..models import DetailsDocument, SourceFile, Url
from .variants import PackageVariant

# RFC 7231 IMF-fixdate, rendered from a UTC clock.
DEFAULT_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S GMT"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DetailsGenerator:
    """Builds the package-details document for one source file.

    The document is computed on the first call to :meth:`details` and cached
    for the lifetime of the generator, so repeated calls share one
    ``last_updated`` timestamp.
    """

    def __init__(
        self,
        source: SourceFile,
        variant: PackageVariant,
        *,
        readme: SourceFile | None = None,
        url: Url | None = None,
        date_format: str | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._source = source
        self._variant = variant
        self._readme = readme
        self._url = url
        self._date_format = date_format or DEFAULT_DATE_FORMAT
        self._clock = clock
        self._details: Optional[DetailsDocument] = None
        self.logger = get_logger("generators")

    @property
    def variant(self) -> PackageVariant:
        return self._variant

    def details(self) -> DetailsDocument:
        """Return the merged details mapping with empty fields omitted."""
        if self._details is None:
            self._details = self._build()
        return self._details

    def serialize(self, pretty_print: bool = False) -> str:
        """Render :meth:`details` as JSON text."""
        if pretty_print:
            return json.dumps(self.details(), indent=4)
        return json.dumps(self.details(), separators=(",", ":"))

    def _build(self) -> DetailsDocument:
        self.logger.debug(
            "Generating %s details from %s", self._variant.name, self._source.path
        )
        document: Dict[str, Any] = {}
        document.update(self._common_data())
        document.update(self._variant.additional_data(self._readme_text()))
        details = {key: value for key, value in document.items() if _has_value(value)}
        omitted = sorted(set(document) - set(details))
        if omitted:
            self.logger.debug("Omitting empty fields: %s", ", ".join(omitted))
        return details

    def _common_data(self) -> Dict[str, Any]:
        source_text = self._source.contents()
        data: Dict[str, Any] = extract_headers(source_text, self._variant.header_map())
        data["slug"] = self._variant.slug(self._source)
        data["last_updated"] = self._current_time()
        data["download_link"] = str(self._url) if self._url is not None else ""
        return data

    def _current_time(self) -> str:
        return self._clock().strftime(self._date_format)

    def _readme_text(self) -> str:
        return self._readme.contents() if self._readme is not None else ""


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, dict, list)):
        return bool(value)
    return True


__all__ = ["DEFAULT_DATE_FORMAT", "DetailsGenerator"]
