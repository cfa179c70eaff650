import json
from pathlib import Path

import httpx
import pytest
from git import Repo

from aicommit.client import CompletionClient
from aicommit.config import ConfigStore


def completion_body(*contents):
    """Build a chat completion response body with one choice per content."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            for i, content in enumerate(contents)
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """Mock transport that answers with a fixed response and keeps the requests."""

    def __init__(self, status_code=200, body=None, content=None):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body if body is not None else {})

        super().__init__(handler)

    def sent_json(self, index=0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def config_store(tmp_path):
    """A configuration store in a temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return ConfigStore(home / ".ai-commit")


@pytest.fixture
def configured_store(config_store):
    config_store.set("API_KEY", "test-api-key")
    return config_store


@pytest.fixture
def client_factory_for():
    """Return a function building a client factory bound to a transport."""
    def _factory(transport):
        def build(store):
            return CompletionClient.from_config(store, transport=transport)
        return build
    return _factory


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a temporary git repository with one commit."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    repo = Repo.init(repo_dir)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    test_file = repo_dir / "test.txt"
    test_file.write_text("Initial content\n")
    repo.index.add(["test.txt"])
    repo.index.commit("Initial commit")

    yield repo_dir
