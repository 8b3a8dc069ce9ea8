"""Tests for the FastAPI action and history routes."""

import json

import httpx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from artisan_core.api import router
from artisan_core.history import PromptHistory
from artisan_core.schema.action import ActionKind
from artisan_core.service import ArtisanService


def _client(handler, tmp_path) -> TestClient:
    app = FastAPI()
    app.include_router(router, prefix="/api")
    app.state.artisan_service = ArtisanService("https://example.test/rpc", transport=httpx.MockTransport(handler))
    app.state.history = PromptHistory(path=str(tmp_path / "history.json"))
    return TestClient(app)


def _json_reply(value: object):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"result": {"data": {"json": json.dumps(value)}}})

    return handler


def test_list_actions(tmp_path) -> None:
    client = _client(_json_reply({}), tmp_path)

    response = client.get("/api/actions")

    assert response.status_code == 200
    rows = {row["action"]: row for row in response.json()}
    assert set(rows) == {action.value for action in ActionKind}
    assert rows["sceneExtender"]["shape"] == "text"
    assert rows["inferVisualParams"]["audio_variant"] is False
    assert rows["mainPromptGen"]["audio_variant"] is True
    assert rows["mainPromptGen"]["count_options"] == [1, 3, 5]
    assert rows["promptCritique"]["count_options"] == []


def test_run_action_returns_tagged_payload_and_records_history(tmp_path) -> None:
    client = _client(_json_reply([{"prompt_text": "A"}]), tmp_path)

    response = client.post(
        "/api/actions/mainPromptGen",
        json={"audio_mode": True, "text": "  a harbour  ", "args": {"prompt_count": 3}},
    )

    assert response.status_code == 200
    assert response.json() == {"action": "mainPromptGen", "kind": "array", "value": [{"prompt_text": "A"}]}
    assert client.get("/api/history").json() == ["a harbour"]


def test_unknown_action_is_bad_request(tmp_path) -> None:
    client = _client(_json_reply({}), tmp_path)

    response = client.post("/api/actions/nope", json={})

    assert response.status_code == 400
    assert "nope" in response.json()["detail"]["error"]


def test_missing_argument_is_bad_request(tmp_path) -> None:
    client = _client(_json_reply({}), tmp_path)

    response = client.post("/api/actions/styleTransfer", json={"text": "x", "args": {"original_prompt": "x"}})

    assert response.status_code == 400
    assert "target_style" in response.json()["detail"]["error"]


def test_resolution_failure_reports_step(tmp_path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"result": {}})

    client = _client(handler, tmp_path)

    response = client.post("/api/actions/storyboardGen", json={"args": {"concept": "c"}})

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["step"] == "envelope"
    assert detail["excerpt"] == '{"result": {}}'


def test_upstream_error_is_bad_gateway(tmp_path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": {"message": "Boom"}})

    client = _client(handler, tmp_path)

    response = client.post("/api/actions/sceneExtender", json={"text": "x"})

    assert response.status_code == 502
    assert response.json()["detail"]["status_code"] == 500


def test_network_error_is_service_unavailable(tmp_path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = _client(handler, tmp_path)

    response = client.post("/api/actions/sceneExtender", json={"text": "x"})

    assert response.status_code == 503


def test_history_routes(tmp_path) -> None:
    client = _client(_json_reply({}), tmp_path)

    client.post("/api/history", json={"prompt": "one"})
    assert client.post("/api/history", json={"prompt": "two"}).json() == ["two", "one"]
    assert client.delete("/api/history").json() == []
    assert client.get("/api/history").json() == []


def test_deeply_nested_response_is_reported_as_resolution_failure(tmp_path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"result": {"data": {"json": "[" * 200000}}})

    client = _client(handler, tmp_path)

    response = client.post("/api/actions/promptCritique", json={"args": {"original_prompt": "x"}})

    assert response.status_code == 502
    assert response.json()["detail"]["step"] == "parse"
