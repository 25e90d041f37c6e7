from __future__ import annotations

import sys
from datetime import date, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

# Make the contactbook package importable when running tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contactbook.app import app  # noqa: E402
from contactbook.core import config as core_config  # noqa: E402
from contactbook.db import models  # noqa: E402
from contactbook.db import session as db_session  # noqa: E402
from contactbook.services import contact_service  # noqa: E402


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.create_all(bind=engine)

    yield

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    core_config.get_settings.cache_clear()


def _add(contact_id: str, name: str, email: str, born: date | None = None) -> None:
    stamp = datetime(2024, 1, 1)
    with db_session.get_session() as session:
        session.add(
            models.Contact(
                id=contact_id,
                name=name,
                email=email,
                date_of_birth=born,
                created_at=stamp,
                updated_at=stamp,
            )
        )
        session.commit()


def test_empty_store_returns_empty_array(db_env):
    client = TestClient(app)
    resp = client.get("/api/contacts")
    assert resp.status_code == 200
    assert resp.json() == []


def test_contacts_are_serialized_in_camel_case(db_env):
    _add("1", "Ada Lovelace", "ada@example.com")
    _add("2", "Alan Turing", "alan@example.com", born=date(1912, 6, 23))

    resp = TestClient(app).get("/api/contacts")

    assert resp.status_code == 200
    assert resp.json() == [
        {
            "id": "1",
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "dateOfBirth": None,
            "createdAt": "2024-01-01T00:00:00",
            "updatedAt": "2024-01-01T00:00:00",
        },
        {
            "id": "2",
            "name": "Alan Turing",
            "email": "alan@example.com",
            "dateOfBirth": "1912-06-23",
            "createdAt": "2024-01-01T00:00:00",
            "updatedAt": "2024-01-01T00:00:00",
        },
    ]


def test_response_matches_store_rows(db_env):
    for idx in range(5):
        _add(f"id-{idx}", f"Person {idx}", f"person{idx}@example.com")

    body = TestClient(app).get("/api/contacts").json()
    rows = contact_service.get_contacts()

    assert len(body) == len(rows)
    assert [item["id"] for item in body] == [row.id for row in rows]
    assert [item["email"] for item in body] == [row.email for row in rows]


def test_store_failure_becomes_default_server_error(db_env, monkeypatch):
    class _BrokenRepo:
        def list_contacts(self):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(contact_service, "_repo", _BrokenRepo())
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.get("/api/contacts")

    assert resp.status_code == 500
