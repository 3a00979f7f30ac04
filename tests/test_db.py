import sqlite3

import pytest

from recommendation_api.app.core.config import settings
from recommendation_api.app.core.db import MIGRATIONS, get_database_path, init_db


def test_relative_path_resolves_against_package_root(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "some.db")
    path = get_database_path()
    assert path.endswith("some.db")
    assert path != "some.db"


def test_migrations_are_recorded_once(conn):
    init_db()
    versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_name_is_unique(conn):
    conn.execute("INSERT INTO recommendations (name, youtube_link) VALUES ('a', 'https://youtu.be/x')")
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute("INSERT INTO recommendations (name, youtube_link) VALUES ('a', 'https://youtu.be/y')")


def test_score_defaults_to_zero(repository):
    row = repository.create("a", "https://youtu.be/x")
    assert row["score"] == 0


def test_failed_transaction_rolls_back(repository):
    row = repository.create("a", "https://youtu.be/x")
    with pytest.raises(RuntimeError):
        with repository.transaction() as cursor:
            repository.add_to_score(cursor, row["id"], -1)
            raise RuntimeError("boom")
    assert repository.find_by_id(row["id"])["score"] == 0


def test_out_of_range_ids_match_nothing(repository):
    repository.create("a", "https://youtu.be/x")
    huge = 2**64
    assert repository.find_by_id(huge) is None
    assert repository.find_by_id(-huge) is None
    with repository.transaction() as cursor:
        assert repository.add_to_score(cursor, huge, 1) is False


def test_limits_beyond_storage_range_return_every_row(repository):
    repository.create("a", "https://youtu.be/x")
    repository.create("b", "https://youtu.be/y")
    assert len(repository.find_top(2**64)) == 2
    assert len(repository.find_recent(2**64)) == 2
