"""End-to-end HTTP behavior (memory store unless a test selects the SQL store)."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

PAYLOAD = {"textbox1": "a", "textbox2": "b", "textbox3": 10, "textbox4": 4, "textbox5": "c"}


def _create(client: TestClient, payload: dict | None = None) -> int:
    resp = client.post("/api/interests", json=payload or PAYLOAD)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    return body["data"]["id"]


def test_health_reports_memory_store(client: TestClient):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "store": "memory"}


def test_list_empty(client: TestClient):
    resp = client.get("/api/interests")

    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "data": {
            "interests": [],
            "summary": {"sumTextbox3": 0, "sumTextbox4": 0, "difference": 0},
        },
    }


def test_create_then_list_reports_summary(client: TestClient):
    interest_id = _create(client)

    resp = client.get("/api/interests")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [i["id"] for i in data["interests"]] == [interest_id]
    record = data["interests"][0]
    assert set(record) == {"id", "textbox1", "textbox2", "textbox3", "textbox4", "textbox5", "created_at"}
    assert record["textbox3"] == 10
    assert data["summary"] == {"sumTextbox3": 10, "sumTextbox4": 4, "difference": 6}


def test_list_is_newest_first(client: TestClient):
    ids = [_create(client, {**PAYLOAD, "textbox1": name}) for name in ("A", "B", "C")]

    data = client.get("/api/interests").json()["data"]

    assert [i["id"] for i in data["interests"]] == list(reversed(ids))
    assert data["summary"]["difference"] == 18


def test_get_by_id(client: TestClient):
    interest_id = _create(client)

    resp = client.get(f"/api/interests/{interest_id}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["id"] == interest_id
    assert body["data"]["textbox1"] == "a"
    assert body["data"]["textbox5"] == "c"


def test_get_missing_returns_404(client: TestClient):
    resp = client.get("/api/interests/999999")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Interest not found"}


def test_put_updates_content_but_not_identity(client: TestClient):
    interest_id = _create(client)
    before = client.get(f"/api/interests/{interest_id}").json()["data"]

    resp = client.put(
        f"/api/interests/{interest_id}",
        json={"textbox1": "x", "textbox2": "y", "textbox3": 1, "textbox4": 2, "textbox5": "z"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": {"id": interest_id}}
    after = client.get(f"/api/interests/{interest_id}").json()["data"]
    assert after["id"] == before["id"]
    assert after["created_at"] == before["created_at"]
    assert (after["textbox1"], after["textbox3"], after["textbox5"]) == ("x", 1, "z")


def test_put_missing_returns_404_and_creates_nothing(client: TestClient):
    resp = client.put("/api/interests/999999", json=PAYLOAD)

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Interest not found or not updated"}
    assert client.get("/api/interests").json()["data"]["interests"] == []


def test_delete(client: TestClient):
    interest_id = _create(client)

    resp = client.delete(f"/api/interests/{interest_id}")

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Interest deleted successfully"}
    assert client.get(f"/api/interests/{interest_id}").status_code == 404


def test_delete_missing_returns_404(client: TestClient):
    resp = client.delete("/api/interests/999999")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Interest not found or not deleted"}


def test_numeric_strings_are_coerced(client: TestClient):
    interest_id = _create(client, {**PAYLOAD, "textbox3": "12.5", "textbox4": ""})

    record = client.get(f"/api/interests/{interest_id}").json()["data"]

    assert record["textbox3"] == 12.5
    assert record["textbox4"] == 0


def test_non_numeric_input_is_rejected(client: TestClient):
    resp = client.post("/api/interests", json={**PAYLOAD, "textbox3": "ten"})

    assert resp.status_code == 422
    assert resp.json() == {"success": False, "error": "Invalid request"}
    assert client.get("/api/interests").json()["data"]["interests"] == []


def test_non_integer_id_is_rejected(client: TestClient):
    resp = client.get("/api/interests/abc")

    assert resp.status_code == 422
    assert resp.json()["success"] is False


def test_omitted_fields_default_to_empty(client: TestClient):
    interest_id = _create(client, {"textbox1": "only"})

    record = client.get(f"/api/interests/{interest_id}").json()["data"]

    assert record["textbox1"] == "only"
    assert record["textbox2"] == ""
    assert record["textbox3"] == 0


def test_summary_overflow_is_rejected(client: TestClient):
    _create(client, {**PAYLOAD, "textbox3": 1e308, "textbox4": -1e308})

    resp = client.get("/api/interests")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to fetch interests"}


OVERSIZED_ID = 2**64


@pytest.fixture(params=["memory", "sql"])
def any_store_client(request: pytest.FixtureRequest, monkeypatch, local_db_url) -> Iterator[TestClient]:
    if request.param == "sql":
        monkeypatch.setenv("TURSO_DATABASE_URL", local_db_url)
        monkeypatch.setenv("TURSO_AUTH_TOKEN", "test-token")

    from main import app

    with TestClient(app) as test_client:
        assert test_client.get("/health").json()["store"] == request.param
        yield test_client


@pytest.mark.parametrize(
    ("method", "error"),
    [
        ("get", "Interest not found"),
        ("put", "Interest not found or not updated"),
        ("delete", "Interest not found or not deleted"),
    ],
)
def test_oversized_id_is_not_found_for_every_store(any_store_client: TestClient, method, error):
    kwargs = {"json": PAYLOAD} if method == "put" else {}

    resp = getattr(any_store_client, method)(f"/api/interests/{OVERSIZED_ID}", **kwargs)

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": error}
