from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any WEBAPP_* variables inherited from the shell."""
    for var in ("WEBAPP_HOST", "WEBAPP_PORT", "WEBAPP_LOG_LEVEL", "WEBAPP_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
