from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from mddocs.config.models import ServerConfig
from mddocs.server.app import create_app


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    docs = tmp_path / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "api").mkdir()
    (docs / "index.md").write_text("# Home\n\nWelcome.\n", encoding="utf-8")
    (docs / "getting-started.md").write_text("# Getting Started\n\nInstall it.\n", encoding="utf-8")
    (docs / "guide" / "index.md").write_text("# Guide\n", encoding="utf-8")
    (docs / "api" / "index.md").write_text("# API\n", encoding="utf-8")
    (docs / "CHANGELOG").write_text("Plain changes\n", encoding="utf-8")
    # outside the served root
    (tmp_path / "secret.md").write_text("TOP SECRET\n", encoding="utf-8")
    return docs


@pytest.fixture
def make_client(docs_dir: Path):
    def _make_client(**overrides) -> TestClient:
        config = ServerConfig(docs_dir=docs_dir, **overrides)
        return TestClient(create_app(config))

    return _make_client


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client(base_path="/docs")
