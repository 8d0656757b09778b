"""Chirp Routes — end-to-end through FastAPI with an in-memory SQLite store.

Invariants verified:
    - validate_chirp returns cleaned_body, rejects >140 bytes with 400
    - POST /api/chirps: 201 with full representation, raw body stored
    - Oversized/profane/malformed bodies → 400 with {"error": ...}
    - GET /api/chirps returns [] when empty and creation order otherwise
    - GET /api/chirps/{id}: bad id and unknown id both → 404
"""

from uuid import UUID, uuid4

from sqlalchemy import select

from chirpy.models.chirp import Chirp


async def _create_chirp(client, user_id, body):
    return await client.post(
        "/api/chirps", json={"body": body, "user_id": user_id},
    )


# ─── POST /api/validate_chirp ───────────────────────────────────

async def test_validate_chirp_returns_cleaned_body(client):
    res = await client.post(
        "/api/validate_chirp", json={"body": "You are a Kerfuffle"},
    )
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert res.json() == {"cleaned_body": "You are a ****"}


async def test_validate_chirp_rejects_too_long(client):
    res = await client.post("/api/validate_chirp", json={"body": "x" * 141})
    assert res.status_code == 400
    assert res.json() == {"error": "Chirp is too long"}


async def test_validate_chirp_accepts_exactly_140(client):
    res = await client.post("/api/validate_chirp", json={"body": "x" * 140})
    assert res.status_code == 200
    assert res.json() == {"cleaned_body": "x" * 140}


async def test_validate_chirp_malformed_json_is_400(client):
    res = await client.post(
        "/api/validate_chirp", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert set(res.json()) == {"error"}


async def test_validate_chirp_lone_surrogate_is_replaced(client):
    res = await client.post(
        "/api/validate_chirp", content=b'{"body": "\\ud800 fornax"}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json() == {"cleaned_body": "\ufffd ****"}


# ─── POST /api/chirps ───────────────────────────────────────────

async def test_create_chirp_returns_201_with_full_representation(client, registered_user):
    res = await _create_chirp(client, registered_user["id"], "Hello, Chirpy!")
    assert res.status_code == 201
    body = res.json()
    assert set(body) == {"id", "created_at", "updated_at", "body", "user_id"}
    assert UUID(body["id"])
    assert body["body"] == "Hello, Chirpy!"
    assert body["user_id"] == registered_user["id"]
    assert body["created_at"] == body["updated_at"]


async def test_create_chirp_persists_original_body(client, registered_user, test_db):
    res = await _create_chirp(client, registered_user["id"], "This is a kerfuffle!")
    assert res.status_code == 201
    assert res.json()["body"] == "This is a kerfuffle!"

    result = await test_db.execute(
        select(Chirp).where(Chirp.id == UUID(res.json()["id"])),
    )
    assert result.scalar_one().body == "This is a kerfuffle!"


async def test_create_chirp_rejects_profanity(client, registered_user):
    res = await _create_chirp(client, registered_user["id"], "This is a kerfuffle")
    assert res.status_code == 400
    assert res.json() == {"error": "Chirp contains profanity"}


async def test_create_chirp_rejects_too_long_before_profanity(client, registered_user):
    res = await _create_chirp(client, registered_user["id"], "fornax " * 21)
    assert res.status_code == 400
    assert res.json() == {"error": "Chirp is too long"}


async def test_create_chirp_rejects_invalid_user_id(client):
    res = await _create_chirp(client, "not-a-uuid", "hello")
    assert res.status_code == 400
    assert "error" in res.json()


async def test_create_chirp_missing_body_field_is_400(client, registered_user):
    res = await client.post(
        "/api/chirps", json={"user_id": registered_user["id"]},
    )
    assert res.status_code == 400


# ─── GET /api/chirps ────────────────────────────────────────────

async def test_list_chirps_empty_is_empty_list(client):
    res = await client.get("/api/chirps")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_chirps_in_creation_order(client, registered_user):
    for text in ("first", "second", "third"):
        res = await _create_chirp(client, registered_user["id"], text)
        assert res.status_code == 201
    res = await client.get("/api/chirps")
    assert res.status_code == 200
    assert [c["body"] for c in res.json()] == ["first", "second", "third"]


# ─── GET /api/chirps/{chirp_id} ─────────────────────────────────

async def test_get_chirp_by_id(client, registered_user):
    created = (await _create_chirp(client, registered_user["id"], "find me")).json()
    res = await client.get(f"/api/chirps/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_get_chirp_unknown_id_is_404(client):
    res = await client.get(f"/api/chirps/{uuid4()}")
    assert res.status_code == 404
    assert set(res.json()) == {"error"}


async def test_get_chirp_malformed_id_is_404(client):
    res = await client.get("/api/chirps/definitely-not-a-uuid")
    assert res.status_code == 404
    assert set(res.json()) == {"error"}


async def test_create_chirp_lone_surrogate_is_stored_replaced(client, registered_user):
    payload = '{"body": "hi \\udfff", "user_id": "%s"}' % registered_user["id"]
    res = await client.post(
        "/api/chirps", content=payload.encode("utf-8"),
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 201
    assert res.json()["body"] == "hi \ufffd"
