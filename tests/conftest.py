import os
import tempfile

os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["ADMIN_PASSWORD"] = "letmein"
os.environ["UPLOADS_DIR"] = tempfile.mkdtemp(prefix="portfolio-uploads-")
os.environ.pop("PORTFOLIO_API_URL", None)

import mongomock
import pytest
from fastapi.testclient import TestClient

import content_store
from app import app


ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def mongo(monkeypatch):
    client = mongomock.MongoClient()
    monkeypatch.setattr(content_store, "_client", client)
    return client


@pytest.fixture
def api_client(mongo):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
