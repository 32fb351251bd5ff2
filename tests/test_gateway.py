from unittest.mock import Mock, patch

import pytest
import requests

from functions.gateway import handle, read_prompt
from functions.providers import PROVIDERS, ANTHROPIC, GOOGLE, OPENAI


def _response(data):
    response = Mock()
    response.json.return_value = data
    return response


@pytest.mark.parametrize("body", [None, "", "{}", "not json", "[1, 2]", '"text"', '{"prompt": 42}', '{"other": "x"}'])
def test_unusable_bodies_mean_empty_prompt(body):
    assert read_prompt(body) == ""


def test_read_prompt():
    assert read_prompt('{"prompt": "Draft it"}') == "Draft it"


@pytest.mark.parametrize("provider", list(PROVIDERS.values()))
def test_missing_credential(provider):
    with patch("functions.gateway.requests.post") as post:
        status, body = handle(provider, '{"prompt": "x"}')

    assert status == 500
    assert body == {"error": f"Missing {provider.credential_name} environment variable."}
    post.assert_not_called()


@patch("functions.gateway.requests.post")
def test_anthropic_success(post, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-test")
    post.return_value = _response({"content": [{"text": "LICENSE"}]})

    status, body = handle(ANTHROPIC, '{"prompt": "Draft it"}')

    assert (status, body) == (200, {"result": "LICENSE"})
    kwargs = post.call_args.kwargs
    assert kwargs["headers"]["x-api-key"] == "ak-test"
    assert kwargs["json"]["messages"] == [{"role": "user", "content": "Draft it"}]


@patch("functions.gateway.requests.post")
def test_malformed_body_still_calls_provider(post, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    post.return_value = _response({"choices": [{"message": {"content": "ok"}}]})

    status, body = handle(OPENAI, "{broken")

    assert (status, body) == (200, {"result": "ok"})
    assert post.call_args.kwargs["json"]["messages"][1]["content"] == ""


@patch("functions.gateway.requests.post")
def test_unexpected_shape_returns_empty_result(post, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "gk-test")
    post.return_value = _response({"error": {"code": 400}})

    assert handle(GOOGLE, '{"prompt": "x"}') == (200, {"result": ""})


@patch("functions.gateway.requests.post")
def test_network_failure(post, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-test")
    post.side_effect = requests.ConnectionError("connection refused")

    assert handle(ANTHROPIC, '{"prompt": "x"}') == (500, {"error": "connection refused"})


@patch("functions.gateway.requests.post")
def test_failure_message_hides_key(post, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "SECRET-GK")

    def refuse(url, **kwargs):
        raise requests.ConnectionError(f"Max retries exceeded with url: {url} (Caused by NewConnectionError)")

    post.side_effect = refuse

    status, body = handle(GOOGLE, '{"prompt": "x"}')

    assert status == 500
    assert "SECRET-GK" not in body["error"]
    assert "generateContent?key=***" in body["error"]


@patch("functions.gateway.requests.post")
def test_non_json_response(post, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-test")
    post.return_value.json.side_effect = ValueError("Expecting value")

    assert handle(ANTHROPIC, "{}") == (500, {"error": "Expecting value"})


@patch("functions.gateway.requests.post")
def test_error_without_message(post, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-test")
    post.side_effect = RuntimeError()

    assert handle(ANTHROPIC, "{}") == (500, {"error": "Unknown error"})


# ---------------- ROUTES ----------------

@pytest.mark.parametrize("key", ["claude", "gemini", "chatgpt"])
def test_route_without_credential(client, key):
    res = client.post(f"/functions/generate_license_{key}", json={"prompt": "x"})
    assert res.status_code == 500
    assert "error" in res.get_json()


@patch("functions.gateway.requests.post")
def test_route_success(post, client, monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "gk-test")
    post.return_value = _response({"candidates": [{"content": {"parts": [{"text": "A"}, {"text": "B"}]}}]})

    res = client.post("/functions/generate_license_gemini", data="")

    assert res.status_code == 200
    assert res.get_json() == {"result": "AB"}


def test_unknown_function_is_404(client):
    assert client.post("/functions/generate_license_llama", json={}).status_code == 404
