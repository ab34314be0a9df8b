from __future__ import annotations

import uuid
from datetime import datetime

from fastapi.testclient import TestClient

from backend_api.dependencies import get_character_service
from backend_api.main import app

BASE = "/api/character"


def _body(**overrides):
    data = {"name": "Conan", "class": "Warrior", "level": 10, "health": 100, "mana": 5}
    data.update(overrides)
    return data


def test_create_returns_201_with_location(client) -> None:
    resp = client.post(BASE, json=_body(name=" conan the  cimmerian ", **{"class": "WARRIOR"}))

    assert resp.status_code == 201
    data = resp.json()
    assert set(data) == {"id", "name", "class", "level", "health", "mana"}
    assert data["name"] == "Conan The  Cimmerian"
    assert data["class"] == "Warrior"
    assert resp.headers["location"] == f"{BASE}/{data['id']}"


def test_post_then_get_round_trip(client) -> None:
    created = client.post(BASE, json=_body()).json()

    resp = client.get(f"{BASE}/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_list_returns_all(client) -> None:
    client.post(BASE, json=_body(name="Conan"))
    client.post(BASE, json=_body(name="Sonja"))

    resp = client.get(BASE)
    assert resp.status_code == 200
    assert sorted(c["name"] for c in resp.json()) == ["Conan", "Sonja"]

    raw = client.get(f"{BASE}/sql")
    assert raw.status_code == 200
    assert sorted(raw.json(), key=lambda c: c["name"]) == sorted(resp.json(), key=lambda c: c["name"])


def test_duplicate_returns_400_with_error_body(client) -> None:
    assert client.post(BASE, json=_body(name="conan")).status_code == 201

    resp = client.post(BASE, json=_body(name="Conan"))
    assert resp.status_code == 400
    body = resp.json()
    assert body["Message"] == "A character with the name 'Conan' already exists."
    assert datetime.fromisoformat(body["Timestamp"]).tzinfo is not None
    assert resp.headers.get("x-request-id")


def test_rogue_level_cap(client) -> None:
    assert client.post(BASE, json=_body(name="Shade", **{"class": "rogue"}, level=41)).status_code == 400
    assert client.post(BASE, json=_body(name="Shade", **{"class": "rogue"}, level=40)).status_code == 201


def test_post_with_id_is_rejected(client) -> None:
    resp = client.post(BASE, json=_body(id=str(uuid.uuid4())))
    assert resp.status_code == 400
    assert resp.json()["Message"] == "Id must be empty when creating a character."


def test_missing_field_is_400(client) -> None:
    body = _body()
    del body["mana"]
    resp = client.post(BASE, json=body)
    assert resp.status_code == 400
    assert "mana" in resp.json()["Message"]


def test_get_unknown_id_is_bodiless_404(client) -> None:
    resp = client.get(f"{BASE}/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.content == b""


def test_malformed_id_is_400(client) -> None:
    assert client.get(f"{BASE}/not-a-uuid").status_code == 400


def test_put_updates_row(client) -> None:
    created = client.post(BASE, json=_body()).json()

    resp = client.put(BASE, json=_body(id=created["id"], name="conan", level=12, **{"class": "archer"}))
    assert resp.status_code == 200
    assert resp.json() == {**created, "level": 12, "class": "Archer"}


def test_put_without_id_is_400(client) -> None:
    resp = client.put(BASE, json=_body())
    assert resp.status_code == 400
    assert resp.json()["Message"] == "Id is required to update a character."


def test_put_unknown_id_is_404(client) -> None:
    resp = client.put(BASE, json=_body(id=str(uuid.uuid4())))
    assert resp.status_code == 404


def test_put_invalid_body_is_400(client) -> None:
    created = client.post(BASE, json=_body()).json()
    resp = client.put(BASE, json=_body(id=created["id"], health=-1))
    assert resp.status_code == 400
    assert resp.json()["Message"] == "Health must be between 0 and 10000."


def test_delete(client) -> None:
    created = client.post(BASE, json=_body()).json()

    resp = client.delete(BASE, params={"id": created["id"]})
    assert resp.status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404
    assert client.delete(BASE, params={"id": created["id"]}).status_code == 404


def test_request_id_is_echoed(client) -> None:
    resp = client.get(BASE, headers={"X-Request-Id": "ABC123"})
    assert resp.headers["x-request-id"] == "ABC123"


class _BrokenService:
    def list_characters(self):
        raise RuntimeError("database is gone")


def test_unhandled_error_is_500_with_error_body(engine) -> None:
    app.dependency_overrides[get_character_service] = lambda: _BrokenService()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            resp = c.get(BASE)
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json()["Message"] == "internal server error"


def test_mana_outside_int32_is_400(client) -> None:
    for mana in (2**31, 2**70):
        resp = client.post(BASE, json=_body(mana=mana))
        assert resp.status_code == 400
        assert resp.json()["Message"] == "Mana must be between 1 and 2147483647."

    created = client.post(BASE, json=_body(mana=2**31 - 1))
    assert created.status_code == 201
    assert created.json()["mana"] == 2**31 - 1
