"""Test cases for user CRUD endpoints"""
import pytest
from app.core.dependencies import get_user_store
from app.main import app

ALICE = {"name": "Alice", "email": "a@x.com", "password": "p1"}


async def _create(client, **overrides):
    response = await client.post("/api/users", json={**ALICE, **overrides})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_user(client):
    """Created user is returned without its password"""
    response = await client.post("/api/users", json=ALICE)

    assert response.status_code == 201
    assert response.json() == {"id": 1, "name": "Alice", "email": "a@x.com"}
    assert response.headers["Location"].endswith("/api/users/1")


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id(client):
    user = await _create(client, id=77)
    assert user["id"] == 1


@pytest.mark.asyncio
async def test_create_invalid_body(client):
    response = await client.post("/api/users", json={"name": "Alice"})

    assert response.status_code == 400
    data = response.json()
    assert data["Message"] == "One or more validation errors occurred."
    assert sorted(e["field"] for e in data["Errors"]) == ["email", "password"]


@pytest.mark.asyncio
async def test_create_malformed_json(client):
    response = await client.post(
        "/api/users",
        content="{not json",
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "Errors" in response.json()


@pytest.mark.asyncio
async def test_get_user_round_trip(client):
    created = await _create(client)

    response = await client.get(f"/api/users/{created['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data == {"id": 1, "name": "Alice", "email": "a@x.com"}
    assert "password" not in data


@pytest.mark.asyncio
async def test_get_missing_user(client):
    response = await client.get("/api/users/99")
    assert response.status_code == 404
    assert response.json() == {"Message": "User with ID 99 not found."}


@pytest.mark.asyncio
async def test_get_non_integer_id(client):
    response = await client.get("/api/users/abc")
    assert response.status_code == 400
    assert response.json()["Errors"][0]["field"] == "user_id"


@pytest.mark.asyncio
async def test_list_users_default_page(client):
    await _create(client)

    response = await client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Alice", "email": "a@x.com"}]


@pytest.mark.asyncio
async def test_list_users_pagination(client):
    for i in range(12):
        await _create(client, name=f"user{i}")

    response = await client.get("/api/users", params={"page": 2, "pageSize": 5})
    assert response.status_code == 200
    assert [u["id"] for u in response.json()] == [6, 7, 8, 9, 10]

    response = await client.get("/api/users", params={"page": 2})
    assert [u["id"] for u in response.json()] == [11, 12]

    response = await client.get("/api/users", params={"page": 4, "pageSize": 5})
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"page": 0}, {"pageSize": 0}, {"page": -3, "pageSize": 10}])
async def test_list_users_invalid_pagination(client, params):
    response = await client.get("/api/users", params=params)
    assert response.status_code == 400
    assert response.json() == {"Message": "Page and pageSize must be positive integers."}


@pytest.mark.asyncio
async def test_update_user(client):
    await _create(client)

    response = await client.put("/api/users/1", json={"name": "Bob", "email": "b@x.com", "password": "p2"})
    assert response.status_code == 204
    assert response.content == b""

    response = await client.get("/api/users/1")
    assert response.json() == {"id": 1, "name": "Bob", "email": "b@x.com"}
    assert app.state.user_store.get(1).value.password == "p2"


@pytest.mark.asyncio
async def test_update_missing_user(client):
    response = await client.put("/api/users/5", json=ALICE)
    assert response.status_code == 404
    assert response.json() == {"Message": "User with ID 5 not found."}


@pytest.mark.asyncio
async def test_update_validates_before_lookup(client):
    response = await client.put("/api/users/5", json={"email": "b@x.com"})
    assert response.status_code == 400
    assert sorted(e["field"] for e in response.json()["Errors"]) == ["name", "password"]


@pytest.mark.asyncio
async def test_delete_user(client):
    await _create(client)

    response = await client.delete("/api/users/1")
    assert response.status_code == 204

    response = await client.get("/api/users/1")
    assert response.status_code == 404

    response = await client.delete("/api/users/1")
    assert response.status_code == 404
    assert response.json() == {"Message": "User with ID 1 not found."}


@pytest.mark.asyncio
async def test_ids_keep_increasing_after_delete(client):
    await _create(client)
    await client.delete("/api/users/1")

    user = await _create(client)
    assert user["id"] == 2


class BrokenStore:
    """Store whose every operation fails unexpectedly"""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError("store exploded")
        return fail


@pytest.mark.asyncio
@pytest.mark.parametrize("method,url,body,message", [
    ("GET", "/api/users", None, "Unexpected error retrieving users."),
    ("GET", "/api/users/1", None, "Unexpected error retrieving user."),
    ("POST", "/api/users", ALICE, "Unexpected error creating user."),
    ("PUT", "/api/users/1", ALICE, "Unexpected error updating user."),
    ("DELETE", "/api/users/1", None, "Unexpected error deleting user."),
])
async def test_unexpected_errors_return_500(client, method, url, body, message):
    app.dependency_overrides[get_user_store] = lambda: BrokenStore()

    response = await client.request(method, url, json=body)
    assert response.status_code == 500
    assert response.json() == {"Message": message, "Details": "store exploded"}
