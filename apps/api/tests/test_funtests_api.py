from __future__ import annotations

import uuid

from sqlalchemy import text

BASE = "/api/funtest"


def test_crud_cycle(client) -> None:
    resp = client.post(BASE, json={"name": "first", "info": "hello"})
    assert resp.status_code == 201
    created = resp.json()
    assert created == {"id": created["id"], "name": "first", "info": "hello"}

    assert client.get(BASE).json() == [created]
    assert client.get(f"{BASE}/{created['id']}").json() == created

    updated = client.put(BASE, json={"id": created["id"], "name": "first", "info": "bye"})
    assert updated.status_code == 200
    assert updated.json()["info"] == "bye"

    assert client.delete(BASE, params={"id": created["id"]}).status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_info_is_stored_in_data_column(client, engine) -> None:
    client.post(BASE, json={"name": "n", "info": "payload"})
    with engine.connect() as conn:
        row = conn.execute(text("SELECT name, data FROM funtest")).one()
    assert tuple(row) == ("n", "payload")


def test_empty_body_uses_defaults(client) -> None:
    resp = client.post(BASE, json={})
    assert resp.status_code == 201
    assert resp.json()["name"] == ""
    assert resp.json()["info"] == ""


def test_missing_rows(client) -> None:
    missing = str(uuid.uuid4())
    assert client.get(f"{BASE}/{missing}").status_code == 404
    assert client.put(BASE, json={"id": missing, "name": "x", "info": "y"}).status_code == 404
    assert client.delete(BASE, params={"id": missing}).status_code == 404
