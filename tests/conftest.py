from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.declarations import DeclarationBuilder


@pytest.fixture
def declarations(tmp_path: Path) -> DeclarationBuilder:
    """Provide a declaration fixture writer rooted at the pytest tmp_path."""
    return DeclarationBuilder(tmp_path)
