from fastapi.testclient import TestClient

from voxlist.api import create_app


def test_health_endpoint(monkeypatch) -> None:
    monkeypatch.delenv("VOXLIST_ENV", raising=False)
    client = TestClient(create_app())

    response = client.get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["version"] == "0.1.0"
    assert payload["env"] == "dev"


def test_parse_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/parse",
        json={"utterance": "two cucumbers, tomatoes, and eggs", "language": "en"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["language"] == "en"
    assert payload["command"]["kind"] == "add"
    assert payload["command"]["items"] == [
        {"name": "cucumbers", "quantity": 2},
        {"name": "tomatoes", "quantity": 1},
        {"name": "eggs", "quantity": 1},
    ]


def test_parse_endpoint_hebrew_clear() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/parse", json={"utterance": "מחק רשימה", "language": "he-IL"})

    assert response.status_code == 200
    assert response.json()["command"] == {"kind": "clear"}


def test_parse_endpoint_rejects_empty_utterance() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/parse", json={"utterance": ""})

    assert response.status_code == 422


def test_stitch_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/stitch",
        json={
            "chunks": [
                {"index": 0, "text": "two cuc", "is_final": False},
                {"index": 1, "text": "two cucumbers", "is_final": True},
            ]
        },
    )

    assert response.status_code == 200
    assert response.json() == {"text": "two cucumbers"}
