"""Tests for input value objects."""

from __future__ import annotations

from pathlib import Path

import pytest

from wp_package_details.models import InvalidResourceError, SourceFile, Url


def test_source_file_reads_contents_and_basename(tmp_path: Path) -> None:
    path = tmp_path / "my-plugin.php"
    path.write_text("Plugin Name: Demo\n", encoding="utf-8")

    source = SourceFile(path)

    assert source.contents() == "Plugin Name: Demo\n"
    assert source.basename() == "my-plugin"
    assert source.path == path


def test_source_file_accepts_string_paths(tmp_path: Path) -> None:
    path = tmp_path / "style.css"
    path.write_text("", encoding="utf-8")
    assert SourceFile(str(path)).basename() == "style"


def test_source_file_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(InvalidResourceError, match="No file found"):
        SourceFile(tmp_path / "missing.php")


def test_source_file_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(InvalidResourceError):
        SourceFile(tmp_path)


def test_source_file_is_immutable(tmp_path: Path) -> None:
    path = tmp_path / "a.php"
    path.write_text("", encoding="utf-8")
    source = SourceFile(path)
    with pytest.raises(AttributeError):
        source.path = tmp_path / "b.php"  # type: ignore[misc]


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com/my-plugin.zip",
        "http://localhost:8080/releases/1.0.zip",
        "ftp://files.example.com/theme.zip",
    ],
)
def test_url_accepts_absolute_urls(value: str) -> None:
    assert str(Url(value)) == value


@pytest.mark.parametrize(
    "value",
    ["not a url", "", "example.com/plugin.zip", "https://", "https://exa mple.com", "http://host:99999/"],
)
def test_url_rejects_malformed_values(value: str) -> None:
    with pytest.raises(InvalidResourceError, match="does not match a known url pattern"):
        Url(value)


def test_invalid_resource_error_is_value_error() -> None:
    assert issubclass(InvalidResourceError, ValueError)
