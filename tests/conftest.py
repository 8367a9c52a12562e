"""Pytest configuration and shared fixtures for twitch-api-client tests."""

import json

import httpx
import pytest

from twitch_api_client.testing import create_status_payload


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear credential environment variables before each test."""
    import os

    test_prefixes = ("TEST_", "TWITCH_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def status_payload():
    return create_status_payload(["user_read", "channel_read"])


class RecordingHandler:
    """MockTransport handler that records requests and replays queued responses.

    The last queued response is repeated once the queue runs dry.
    """

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses) or [httpx.Response(200, json={})]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        return httpx.Response(template.status_code, headers=template.headers, content=template.content)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def recording_handler():
    return RecordingHandler
