"""
Integration tests for SqlSignatureHistoryRepository on SQLite.
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notaire.di import Container
from notaire.domain.entities import SignatureRecord
from notaire.infrastructure.persistence.database import Database
from notaire.infrastructure.persistence.repositories import (
    SqlSignatureHistoryRepository,
)
from notaire.main import create_app
from tests.conftest import build_settings
from tests.helpers.sign_message import (
    ALICE_ADDRESS,
    TEST_JWT_SECRET,
    make_token,
    sign_message,
)


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """File-backed SQLite database with tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path}/history.db")
    await db.connect()
    await db.create_tables()
    yield db
    await db.disconnect()


@pytest_asyncio.fixture
async def repository(database) -> SqlSignatureHistoryRepository:
    return SqlSignatureHistoryRepository(database)


def _record(user_id: str, message: str, minutes_ago: int = 0) -> SignatureRecord:
    return SignatureRecord(
        user_id=user_id,
        message=message,
        signature="0x01",
        is_valid=True,
        signer=ALICE_ADDRESS,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )


async def test_append_and_get_newest_first(repository):
    await repository.append("alice", _record("alice", "old", minutes_ago=5))
    await repository.append("alice", _record("alice", "new", minutes_ago=1))

    records = await repository.get("alice")

    assert [r.message for r in records] == ["new", "old"]
    assert records[0].signer == ALICE_ADDRESS
    assert records[0].created_at.tzinfo is not None


async def test_record_fields_round_trip(repository):
    original = _record("alice", "hello")
    await repository.append("alice", original)

    (stored,) = await repository.get("alice")

    assert stored.id == original.id
    assert stored.user_id == "alice"
    assert stored.signature == "0x01"
    assert stored.is_valid is True


async def test_users_are_isolated(repository):
    await repository.append("alice", _record("alice", "a"))
    await repository.append("bob", _record("bob", "b"))

    assert [r.message for r in await repository.get("bob")] == ["b"]


async def test_clear(repository):
    await repository.append("alice", _record("alice", "a"))
    await repository.append("alice", _record("alice", "b"))
    await repository.append("bob", _record("bob", "c"))

    assert await repository.clear("alice") == 2
    assert await repository.get("alice") == []
    assert len(await repository.get("bob")) == 1


async def test_history_is_capped_per_user(database):
    repository = SqlSignatureHistoryRepository(database, max_entries_per_user=3)

    for i in range(5):
        await repository.append("alice", _record("alice", f"m{i}", minutes_ago=10 - i))
    await repository.append("bob", _record("bob", "b", minutes_ago=30))

    assert [r.message for r in await repository.get("alice")] == ["m4", "m3", "m2"]
    assert [r.message for r in await repository.get("bob")] == ["b"]


async def test_default_history_limit_matches_in_memory_backend(database):
    repository = SqlSignatureHistoryRepository(database, max_entries_per_user=50)

    for i in range(60):
        await repository.append("u", _record("u", f"m{i}", minutes_ago=60 - i))

    records = await repository.get("u")
    assert len(records) == 50
    assert records[0].message == "m59"


async def test_health_check(repository, database):
    assert await repository.health_check() is True

    await database.disconnect()

    assert await repository.health_check() is False


async def test_api_with_database_backend(tmp_path):
    settings = build_settings(
        REQUIRE_AUTH=True,
        JWT_SECRET_KEY=TEST_JWT_SECRET,
        HISTORY_BACKEND="database",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path}/api.db",
    )
    container = Container(settings)
    await container.initialize()
    try:
        app = create_app(container=container)
        headers = {
            "Authorization": f"Bearer {make_token({'email': 'alice@example.com'})}"
        }

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            await ac.post(
                "/api/verify-signature",
                json={"message": "hi", "signature": sign_message("hi")},
                headers=headers,
            )
            history = await ac.get("/api/signatures", headers=headers)
            ready = await ac.get("/api/health/ready")

        assert history.json()["count"] == 1
        assert history.json()["items"][0]["signer"] == ALICE_ADDRESS
        assert ready.status_code == 200
    finally:
        await container.shutdown()


def test_container_applies_history_limit_to_database_backend(tmp_path):
    settings = build_settings(
        HISTORY_BACKEND="database",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path}/limit.db",
        HISTORY_LIMIT=7,
    )

    repository = Container(settings).history_repository

    assert isinstance(repository, SqlSignatureHistoryRepository)
    assert repository.max_entries_per_user == 7
