"""Shared test fixtures for the wifimatrix test suite.

Provides a throwaway asset root laid out like the real control panel
and a TestClient serving it.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wifimatrix.server.app import create_app


# ---------------------------------------------------------------------------
# Asset Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """An asset root with an index page, a stylesheet and a nested script."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>OK</h1>", encoding="utf-8")
    (root / "style.css").write_text("body { color: red; }", encoding="utf-8")
    (root / "js").mkdir()
    (root / "js" / "app.js").write_text("console.log('matrix');", encoding="utf-8")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01\x02\xff")
    return root


@pytest.fixture
def client(asset_root: Path) -> TestClient:
    """A test client serving the asset_root fixture."""
    return TestClient(create_app(asset_root))
