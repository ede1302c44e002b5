"""Create-details command shared by the CLI and library callers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import DEFAULT_OUTPUT_FILE
from .generators import DetailsGenerator, get_variant
from .logging import get_logger
from .models import SourceFile, Url

logger = get_logger("commands")


@dataclass
class CreateRequest:
    """Parameters of a single package-details run."""

    kind: str
    source: str
    output: str = DEFAULT_OUTPUT_FILE
    readme: Optional[str] = None
    url: Optional[str] = None
    slug: Optional[str] = None
    pretty_print: bool = False
    date_format: Optional[str] = None


def build_generator(request: CreateRequest) -> DetailsGenerator:
    """Validate the request inputs and return a generator around them.

    Raises :class:`~wp_package_details.models.InvalidResourceError` before any
    file is read when a path or URL is unusable.
    """
    url = Url(request.url) if request.url else None
    source = SourceFile(request.source)
    readme = SourceFile(request.readme) if request.readme else None
    variant = get_variant(request.kind, slug=request.slug)
    return DetailsGenerator(
        source,
        variant,
        readme=readme,
        url=url,
        date_format=request.date_format,
    )


def create_details_file(request: CreateRequest) -> Path:
    """Generate the details document and write it to ``request.output``."""
    generator = build_generator(request)
    contents = generator.serialize(request.pretty_print)
    output = Path(request.output)
    write_details(output, contents)
    logger.info("Wrote %s details to %s", request.kind, output)
    return output


def write_details(path: Path, contents: str) -> None:
    """Write ``contents`` to ``path``, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")


__all__ = ["CreateRequest", "build_generator", "create_details_file", "write_details"]
