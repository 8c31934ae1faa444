from datetime import datetime

import pytest

URL = "/api/tutorial-status"


def test_get_returns_initial_status(client):
    res = client.get(URL)

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Tutorial status retrieved"
    assert body["data"]["completed"] is False
    assert body["data"]["currentStep"] == 1
    datetime.fromisoformat(body["data"]["lastVisited"])


def test_post_echoes_update(client):
    res = client.post(URL, json={"completed": True, "currentStep": 4})

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Tutorial status updated"
    assert body["data"]["completed"] is True
    assert body["data"]["currentStep"] == 4
    assert "updatedAt" in body["data"]


def test_post_is_not_persisted(client):
    client.post(URL, json={"completed": True, "currentStep": 4})
    data = client.get(URL).json()["data"]
    assert data["completed"] is False
    assert data["currentStep"] == 1


def test_post_without_body(client):
    res = client.post(URL)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["completed"] is None
    assert data["currentStep"] is None


def test_post_echoes_values_unchanged(client):
    res = client.post(URL, json={"completed": "yes", "currentStep": "3"})

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["completed"] == "yes"
    assert data["currentStep"] == "3"


def test_post_rejects_non_object_body(client):
    res = client.post(URL, json=["completed"])
    assert res.status_code == 400
    assert res.json()["error"] == "Request body must be a JSON object"


@pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
def test_wrong_method(client, method):
    res = client.request(method, URL)

    assert res.status_code == 405
    assert res.json() == {
        "success": False,
        "message": "Method not allowed",
        "error": "Only GET and POST requests are accepted",
    }
