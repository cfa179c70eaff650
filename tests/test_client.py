"""Tests for the chat completion client."""
import httpx
import pytest

from aicommit.client import DEFAULT_TIMEOUT, GROQ_CHAT_COMPLETIONS_URL, CompletionClient
from aicommit.exceptions import EmptyResponse, MissingCredential, TransportError, UpstreamError
from aicommit.models import Message

from conftest import RecordingTransport, completion_body

MESSAGES = [
    Message(role="system", content="You write commit messages."),
    Message(role="user", content="Here's the git diff:\n+print('hi')"),
]


def make_client(transport, api_key="gsk_test"):
    return CompletionClient(api_key, transport=transport)


def test_empty_api_key_is_rejected():
    with pytest.raises(MissingCredential):
        CompletionClient("")


def test_from_config_without_key(config_store):
    with pytest.raises(MissingCredential):
        CompletionClient.from_config(config_store)


def test_from_config_uses_stored_key(configured_store):
    client = CompletionClient.from_config(configured_store)
    assert client.api_key == "test-api-key"
    client.close()


def test_default_timeout():
    with CompletionClient("gsk_test") as client:
        assert DEFAULT_TIMEOUT == 30.0
        assert client.http.timeout.read == 30.0
        assert client.http.timeout.connect == 30.0


def test_request_wire_format():
    transport = RecordingTransport(body=completion_body("[Add] (app.py) greet the user"))

    with make_client(transport) as client:
        client.complete(MESSAGES, "llama3-8b-8192")

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == GROQ_CHAT_COMPLETIONS_URL
    assert request.headers["Authorization"] == "Bearer gsk_test"
    assert request.headers["Content-Type"] == "application/json"
    assert transport.sent_json() == {
        "model": "llama3-8b-8192",
        "messages": [
            {"role": "system", "content": "You write commit messages."},
            {"role": "user", "content": "Here's the git diff:\n+print('hi')"},
        ],
    }


def test_returns_first_choice_only():
    transport = RecordingTransport(body=completion_body("  [Fix] first\n", "[Fix] second"))

    with make_client(transport) as client:
        assert client.complete(MESSAGES, "m") == "  [Fix] first\n"


def test_empty_choices():
    transport = RecordingTransport(body={"choices": []})

    with make_client(transport) as client:
        with pytest.raises(EmptyResponse):
            client.complete(MESSAGES, "m")


@pytest.mark.parametrize("body", [
    {},
    {"choices": None},
    {"choices": [{}]},
    {"choices": [{"message": {}}]},
    {"choices": [{"message": {"content": None}}]},
])
def test_malformed_body(body):
    transport = RecordingTransport(body=body)

    with make_client(transport) as client:
        with pytest.raises(EmptyResponse):
            client.complete(MESSAGES, "m")


def test_non_json_body():
    transport = RecordingTransport(content=b"<html>gateway</html>")

    with make_client(transport) as client:
        with pytest.raises(EmptyResponse):
            client.complete(MESSAGES, "m")


def test_unauthorized_is_not_retried():
    transport = RecordingTransport(status_code=401, body={"error": {"message": "Invalid API Key"}})

    with make_client(transport) as client:
        with pytest.raises(UpstreamError) as exc_info:
            client.complete(MESSAGES, "m")

    assert exc_info.value.status_code == 401
    assert "401" in str(exc_info.value)
    assert len(transport.requests) == 1


@pytest.mark.parametrize("status_code", [400, 404, 429, 500, 503])
def test_non_success_status(status_code):
    transport = RecordingTransport(status_code=status_code, body={})

    with make_client(transport) as client:
        with pytest.raises(UpstreamError) as exc_info:
            client.complete(MESSAGES, "m")

    assert exc_info.value.status_code == status_code


def test_any_2xx_is_success():
    transport = RecordingTransport(status_code=201, body=completion_body("[Chore] ok"))

    with make_client(transport) as client:
        assert client.complete(MESSAGES, "m") == "[Chore] ok"


def test_transport_failure():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with make_client(httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError):
            client.complete(MESSAGES, "m")
