"""Shared fixtures: an app wired to a fake Gemini endpoint via httpx.MockTransport."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from roastmaster.core.settings import Settings
from roastmaster.main import create_app


class FakeGemini:
    """Records outbound requests and answers with a canned generateContent reply."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = {"candidates": [{"content": {"parts": [{"text": "Nice shirt. Did it come free with the haircut?"}]}}]}
        self.error = None

    def reply(self, text):
        self.body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}

    def fail(self, status, text):
        self.status = status
        self.body = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status, text=self.body)
        return httpx.Response(self.status, json=self.body)

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def make_client(fake_gemini):
    opened = []

    def _make(**overrides):
        opts = {"gemini_api_key": "test-key", **overrides}
        settings = Settings(_env_file=None, **opts)
        client = TestClient(create_app(settings, transport=httpx.MockTransport(fake_gemini)))
        client.__enter__()
        opened.append(client)
        return client

    yield _make
    for client in opened:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def sound_client(make_client):
    return make_client(roast_variant="sound", sound_asset_base_url="https://sfx.example.com/")
