"""Personality Routes — end-to-end HTTP behaviour over an in-memory SQLite store.

Tests cover:
    - welcome message on GET /
    - full lifecycle scenario: create → duplicate → get → rename → delete → 404
    - status mapping: 201/200/204, 400 (bad id, bad body, validation), 404, 409
    - non-numeric ids do not match the route (generic 404 envelope)
    - client-supplied ids are ignored
"""

from personality_api.api.routes.home import WELCOME_MESSAGE

TURING = {
    "name": "Alan Turing",
    "history": "British mathematician and father of theoretical computer science.",
}
LOVELACE = {
    "name": "Ada Lovelace",
    "history": "English mathematician, wrote the first published algorithm.",
}


async def test_home_returns_welcome_message(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": WELCOME_MESSAGE}


async def test_lifecycle_scenario(client):
    res = await client.post("/api/personalities", json=TURING)
    assert res.status_code == 201
    assert res.json() == {"id": 1, **TURING}

    res = await client.post("/api/personalities", json=TURING)
    assert res.status_code == 409
    assert res.json()["error"] == "Conflict"

    res = await client.get("/api/personalities/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, **TURING}

    res = await client.put("/api/personalities/1", json={"name": "Alan M. Turing"})
    assert res.status_code == 200
    assert res.json() == {
        "id": 1, "name": "Alan M. Turing", "history": TURING["history"],
    }

    res = await client.delete("/api/personalities/1")
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get("/api/personalities/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found", "message": "Personality not found"}


async def test_list_empty(client):
    res = await client.get("/api/personalities")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_is_ordered_by_id(client):
    for body in (TURING, LOVELACE, {"name": "Grace Hopper", "history": "Pioneer of compilers."}):
        await client.post("/api/personalities", json=body)

    res = await client.get("/api/personalities")

    assert [p["id"] for p in res.json()] == [1, 2, 3]
    assert res.json()[1] == {"id": 2, **LOVELACE}


async def test_client_supplied_id_is_ignored(client):
    res = await client.post("/api/personalities", json={"id": 99, **TURING})
    assert res.status_code == 201
    assert res.json()["id"] == 1


# ─── POST errors ─────────────────────────────────────────────────

async def test_create_validation_errors_have_field_details(client):
    res = await client.post("/api/personalities", json={"name": "", "history": "short"})
    assert res.status_code == 400
    assert res.json() == {
        "error": "Validation Error",
        "message": "The provided data is invalid",
        "details": {
            "name": "name is required",
            "history": "history must be at least 10 characters",
        },
    }


async def test_create_missing_fields_are_required(client):
    res = await client.post("/api/personalities", json={})
    assert res.status_code == 400
    assert set(res.json()["details"]) == {"name", "history"}


async def test_create_malformed_json_is_bad_request(client):
    res = await client.post(
        "/api/personalities", content=b'{"name": "Alan',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Bad Request"
    assert res.json()["message"] == "Invalid request body"


async def test_create_wrong_field_type_is_bad_request(client):
    res = await client.post("/api/personalities", json={"name": 123, "history": TURING["history"]})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request body"
    assert "name" in res.json()["details"]


async def test_create_without_body_is_bad_request(client):
    res = await client.post("/api/personalities")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request body"


async def test_duplicate_create_leaves_store_unchanged(client):
    await client.post("/api/personalities", json=TURING)
    await client.post(
        "/api/personalities",
        json={"name": "Alan Turing", "history": "A completely different biography."},
    )
    res = await client.get("/api/personalities")
    assert res.json() == [{"id": 1, **TURING}]


# ─── GET by id errors ────────────────────────────────────────────

async def test_get_zero_id_is_bad_request(client):
    res = await client.get("/api/personalities/0")
    assert res.status_code == 400
    assert res.json() == {"error": "Bad Request", "message": "Invalid ID"}


async def test_get_out_of_range_id_is_bad_request(client):
    res = await client.get("/api/personalities/99999999999")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid ID"


async def test_non_numeric_id_does_not_match_route(client):
    res = await client.get("/api/personalities/abc")
    assert res.status_code == 404
    assert res.json()["error"] == "Not Found"


async def test_get_unknown_id_is_not_found(client, seed_personality):
    res = await client.get(f"/api/personalities/{seed_personality.id + 1}")
    assert res.status_code == 404


async def test_get_seeded_personality(client, seed_personality):
    res = await client.get(f"/api/personalities/{seed_personality.id}")
    assert res.status_code == 200
    assert res.json()["name"] == "Alan Turing"


# ─── PUT ─────────────────────────────────────────────────────────

async def test_update_history_only_keeps_name(client):
    await client.post("/api/personalities", json=TURING)
    res = await client.put(
        "/api/personalities/1", json={"history": "Codebreaker at Bletchley Park."},
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Alan Turing"
    assert res.json()["history"] == "Codebreaker at Bletchley Park."


async def test_update_rename_onto_existing_name_conflicts(client):
    await client.post("/api/personalities", json=TURING)
    await client.post("/api/personalities", json=LOVELACE)

    res = await client.put("/api/personalities/1", json={"name": "Ada Lovelace"})
    assert res.status_code == 409

    res = await client.get("/api/personalities/1")
    assert res.json()["name"] == "Alan Turing"


async def test_update_validation_error(client):
    await client.post("/api/personalities", json=TURING)
    res = await client.put("/api/personalities/1", json={"history": "tiny"})
    assert res.status_code == 400
    assert res.json()["details"] == {
        "history": "history must be at least 10 characters",
    }


async def test_update_unknown_id_is_not_found(client):
    res = await client.put("/api/personalities/5", json={"name": "Nobody"})
    assert res.status_code == 404


async def test_update_zero_id_is_bad_request(client):
    res = await client.put("/api/personalities/0", json={"name": "Nobody"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid ID"


async def test_update_malformed_json_is_bad_request(client):
    await client.post("/api/personalities", json=TURING)
    res = await client.put(
        "/api/personalities/1", content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request body"


# ─── DELETE ──────────────────────────────────────────────────────

async def test_delete_twice_is_not_found(client):
    await client.post("/api/personalities", json=TURING)
    assert (await client.delete("/api/personalities/1")).status_code == 204
    assert (await client.delete("/api/personalities/1")).status_code == 404


async def test_delete_zero_id_is_bad_request(client):
    res = await client.delete("/api/personalities/0")
    assert res.status_code == 400


async def test_deleted_id_is_not_reused(client):
    await client.post("/api/personalities", json=TURING)
    await client.delete("/api/personalities/1")
    res = await client.post("/api/personalities", json=LOVELACE)
    assert res.json()["id"] == 2


async def test_openapi_documents_error_envelope(client):
    res = await client.get("/openapi.json")
    paths = res.json()["paths"]
    assert "/api/personalities/{personality_id}" in paths
    responses = paths["/api/personalities"]["post"]["responses"]
    assert {"201", "400", "409"} <= set(responses)
