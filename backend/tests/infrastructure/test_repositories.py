"""SQL Repositories — UserStore/ChirpStore against in-memory SQLite.

Tests cover:
    - create persists the given timestamps and returns server-assigned ids
    - get_by_email / get_by_id return None when absent
    - list_all returns chirps oldest first
    - delete_all removes every user
    - Integrity violations surface as DatabaseError
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from chirpy.core.errors import DatabaseError
from chirpy.infrastructure.repositories import SqlChirpStore, SqlUserStore

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


async def test_user_create_and_lookup(test_db):
    store = SqlUserStore(test_db)
    user = await store.create("jesse@example.com", "hash", NOW)
    assert user.id is not None
    found = await store.get_by_email("jesse@example.com")
    assert found.id == user.id
    assert found.hashed_password == "hash"


async def test_user_lookup_missing_returns_none(test_db):
    assert await SqlUserStore(test_db).get_by_email("nobody@example.com") is None


async def test_user_duplicate_email_raises_database_error(test_db):
    store = SqlUserStore(test_db)
    await store.create("dup@example.com", None, NOW)
    with pytest.raises(DatabaseError):
        await store.create("dup@example.com", None, NOW)


async def test_user_delete_all(test_db):
    store = SqlUserStore(test_db)
    await store.create("a@example.com", None, NOW)
    await store.create("b@example.com", None, NOW)
    await store.delete_all()
    assert await store.get_by_email("a@example.com") is None
    assert await store.get_by_email("b@example.com") is None


async def test_chirp_create_keeps_timestamps_and_body(test_db):
    user = await SqlUserStore(test_db).create("c@example.com", None, NOW)
    chirp = await SqlChirpStore(test_db).create("raw body", user.id, NOW)
    assert chirp.body == "raw body"
    assert chirp.user_id == user.id
    assert chirp.created_at == chirp.updated_at


async def test_chirp_list_all_oldest_first(test_db):
    user = await SqlUserStore(test_db).create("d@example.com", None, NOW)
    store = SqlChirpStore(test_db)
    later = await store.create("later", user.id, NOW + timedelta(minutes=5))
    earlier = await store.create("earlier", user.id, NOW)
    assert [c.id for c in await store.list_all()] == [earlier.id, later.id]


async def test_chirp_get_by_id(test_db):
    user = await SqlUserStore(test_db).create("e@example.com", None, NOW)
    store = SqlChirpStore(test_db)
    chirp = await store.create("hello", user.id, NOW)
    assert (await store.get_by_id(chirp.id)).body == "hello"
    assert await store.get_by_id(uuid4()) is None
