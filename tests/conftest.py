"""
Shared pytest fixtures.

Puts the repository root on ``sys.path`` so ``treezip`` imports without an
install, and provides default settings plus an HTTP client with a clean
scaffold state.
"""

import os
import sys

import pytest

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from treezip.config import Settings  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Defaults, independent of the TREEZIP_* environment."""
    return Settings()


@pytest.fixture
def client(settings):
    from fastapi.testclient import TestClient

    from treezip.main import app, get_settings
    from treezip.pipeline import ScaffoldState

    app.dependency_overrides[get_settings] = lambda: settings
    app.state.scaffold = ScaffoldState()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        app.state.scaffold = ScaffoldState()
