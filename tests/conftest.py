import pytest
from fastapi.testclient import TestClient

from recommendation_api.app.core.config import settings
from recommendation_api.app.core.db import get_connection, init_db
from recommendation_api.app.main import app
from recommendation_api.app.repositories.recommendation_repository import RecommendationRepository

LINK = "https://www.youtube.com/watch?v=5NV6Rdv1a3I"


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for every test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()


@pytest.fixture
def conn(database):
    conn = get_connection()
    yield conn
    conn.close()


@pytest.fixture
def repository(conn):
    return RecommendationRepository(conn)


@pytest.fixture
def client(database):
    with TestClient(app) as c:
        yield c
