import asyncio
import uuid

import pytest

from pizzeria.models.user import User


pytestmark = pytest.mark.asyncio


async def register_user(client, username: str, password: str):
    return await client.post("/registro", json={"username": username, "password": password})


async def login_user(client, username: str, password: str):
    return await client.post("/login", json={"username": username, "password": password})


async def test_register_and_login_flow(client, tokens):
    resp = await register_user(client, "ana", "pw123")
    assert resp.status_code == 201
    assert resp.json() == {"message": "Usuario registrado exitosamente", "userId": 1, "username": "ana"}

    login_resp = await login_user(client, "ana", "pw123")
    body = login_resp.json()
    assert login_resp.status_code == 200
    assert body["message"] == "Autenticación exitosa"
    claims = tokens.verify(body["token"])
    assert claims.id == 1
    assert claims.username == "ana"


async def test_register_never_echoes_hash(client):
    resp = await register_user(client, "ana", "pw123")
    assert set(resp.json()) == {"message", "userId", "username"}
    assert "pw123" not in resp.text
    assert "$argon2" not in resp.text


async def test_duplicate_username_is_409_and_store_unchanged(client):
    first = await register_user(client, "ana", "pw123")
    assert first.status_code == 201

    dup = await register_user(client, "ana", "another")
    assert dup.status_code == 409
    assert dup.json()["code"] == "USERNAME_EXISTS"
    assert await User.all().count() == 1

    # Original password still valid, the duplicate did not overwrite it
    assert (await login_user(client, "ana", "pw123")).status_code == 200
    assert (await login_user(client, "ana", "another")).status_code == 401


async def test_concurrent_duplicate_registrations(client):
    username = f"user_{uuid.uuid4().hex[:6]}"
    results = await asyncio.gather(
        register_user(client, username, "pw-one"),
        register_user(client, username, "pw-two"),
    )
    assert sorted(r.status_code for r in results) == [201, 409]
    assert await User.filter(username=username).count() == 1


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"username": "ana"},
        {"password": "pw123"},
        {"username": "", "password": "pw123"},
        {"username": "ana", "password": ""},
        {"username": None, "password": None},
    ],
)
async def test_register_missing_fields_is_400(client, payload):
    resp = await client.post("/registro", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Nombre de usuario y contraseña son obligatorios.", "code": "VALIDATION_ERROR"}
    assert await User.all().count() == 0


@pytest.mark.parametrize("payload", [{}, {"username": "ana"}, {"password": "pw123"}])
async def test_login_missing_fields_is_400(client, payload):
    resp = await client.post("/login", json=payload)
    assert resp.status_code == 400


async def test_non_json_body_is_400(client):
    resp = await client.post(
        "/registro", content=b"username=ana", headers={"Content-Type": "application/x-www-form-urlencoded"}
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"


async def test_wrong_password_and_unknown_user_look_identical(client):
    await register_user(client, "ana", "pw123")

    wrong_password = await login_user(client, "ana", "nope")
    unknown_user = await login_user(client, "nadie", "pw123")

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {
        "error": "Credenciales inválidas.",
        "code": "INVALID_CREDENTIALS",
    }
