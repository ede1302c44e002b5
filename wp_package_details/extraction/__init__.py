"""Pattern-based extraction of WordPress headers and readme sections."""

from .headers import extract_header, extract_headers
from .sections import parse_sections

__all__ = ["extract_header", "extract_headers", "parse_sections"]
