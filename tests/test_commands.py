"""Tests for the create-details command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wp_package_details.commands import (
    CreateRequest,
    build_generator,
    create_details_file,
    write_details,
)
from wp_package_details.models import InvalidResourceError
from tests._fixtures.package_builder import PackageBuilder


def test_create_details_file_writes_plugin_json(package_builder: PackageBuilder) -> None:
    source = package_builder.plugin()
    output = package_builder.path("dist/nested/package-details.json")

    written = create_details_file(
        CreateRequest(
            kind="plugin",
            source=str(source),
            output=str(output),
            readme=str(package_builder.path("readme.txt")),
            url="https://example.com/my-plugin.zip",
            pretty_print=True,
        )
    )

    assert written == output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["slug"] == "my-plugin"
    assert data["download_link"] == "https://example.com/my-plugin.zip"
    assert "Description" in data["sections"]


def test_create_details_file_writes_theme_json(package_builder: PackageBuilder) -> None:
    source = package_builder.theme()
    output = package_builder.path("theme.json")

    create_details_file(
        CreateRequest(
            kind="theme",
            source=str(source),
            output=str(output),
            readme=str(package_builder.path("readme.txt")),
            slug="twentytwentytwo",
            date_format="%Y",
        )
    )

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["slug"] == "twentytwentytwo"
    assert data["description"] == "Here is a description of this nifty plugin."
    assert data["last_updated"].isdigit()


def test_invalid_url_fails_before_reading_or_writing(tmp_path: Path) -> None:
    output = tmp_path / "out" / "package-details.json"
    request = CreateRequest(
        kind="plugin",
        source=str(tmp_path / "missing.php"),
        output=str(output),
        url="not a url",
    )

    with pytest.raises(InvalidResourceError, match="url"):
        create_details_file(request)
    assert not output.exists()
    assert not output.parent.exists()


def test_missing_readme_fails_fast(package_builder: PackageBuilder) -> None:
    request = CreateRequest(
        kind="plugin",
        source=str(package_builder.plugin(readme=False)),
        readme=str(package_builder.path("readme.txt")),
    )
    with pytest.raises(InvalidResourceError, match="No file found"):
        build_generator(request)


def test_build_generator_selects_variant(package_builder: PackageBuilder) -> None:
    generator = build_generator(
        CreateRequest(kind="theme", source=str(package_builder.theme()), slug="slug")
    )
    assert generator.variant.name == "theme"


def test_write_details_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "details.json"
    write_details(target, "{}")
    assert target.read_text(encoding="utf-8") == "{}"
