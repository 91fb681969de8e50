"""Test fixtures shared by unit/integration tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List

import pytest
from fastapi.testclient import TestClient

from myapp.config import Settings
from myapp.main import create_app

API_KEY = "s3cr3t-test-key"


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    path = tmp_path / "index.html"
    path.write_text(
        "<html><body><p>env={{ENVIRONMENT}}</p><p>ver={{VERSION}}</p></body></html>",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def make_client(template_path: Path) -> Iterator[Callable[..., TestClient]]:
    """Build a client around explicit settings, without touching the environment."""
    clients: List[TestClient] = []

    def _make(**overrides) -> TestClient:
        values = {
            "version": "2.3.4",
            "environment": "staging",
            "database_url": "postgres://db.internal:5432/app",
            "api_secret_key": API_KEY,
            "landing_template_path": template_path,
        }
        values.update(overrides)
        client = TestClient(create_app(Settings(**values)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
