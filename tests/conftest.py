from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from tests._fixtures.package_builder import PackageBuilder

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)


@pytest.fixture
def package_builder(tmp_path: Path) -> PackageBuilder:
    """Provide a reusable package builder rooted at the pytest tmp_path."""
    return PackageBuilder(tmp_path)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant timestamp."""
    return lambda: FIXED_NOW
