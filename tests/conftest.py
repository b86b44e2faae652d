# Shared fixtures: a fake gateway client so no test touches the network.

import pytest
from fastapi.testclient import TestClient

from ietf_assistant import app as app_module
from ietf_assistant.generate import CompletionProxy
from ietf_assistant.generate.types import UpstreamReply
from ietf_assistant.settings import Settings


class FakeClient:
    """Records every generate() call and replays a canned reply."""

    def __init__(self, reply=None, exc=None):
        self.reply = reply or UpstreamReply(200, '{"choices":[{"message":{"content":"Hello"}}]}')
        self.exc = exc
        self.calls = []

    def generate(self, api_key, model, messages, params):
        self.calls.append({"api_key": api_key, "model": model, "messages": messages, "params": params})
        if self.exc is not None:
            raise self.exc
        return self.reply


def make_settings(**overrides):
    values = {"OPENROUTER_API_KEY": "sk-test", "_env_file": None}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def client(monkeypatch, fake_client):
    monkeypatch.setattr(app_module, "proxy", CompletionProxy(make_settings(), client=fake_client))
    return TestClient(app_module.app)
