"""Shared test fixtures"""

import json

import httpx
import pytest

from session_client.models.config import ClientConfig, RetryConfig


class RecordingBackend:
    """httpx handler that replays queued responses and records requests"""

    def __init__(self):
        self.requests = []
        self._responses = []
        self._last = httpx.Response(200, json={})

    def queue(self, *responses):
        """Queue responses (or exceptions to raise) in call order

        Once the queue is drained the last outcome is replayed.
        """
        self._responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            self._last = self._responses.pop(0)
        outcome = self._last
        if isinstance(outcome, Exception):
            raise outcome
        # fresh copy, a queued response may be replayed
        return httpx.Response(
            outcome.status_code,
            headers=outcome.headers,
            content=outcome.content
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ambient SESSION_API_* variables out of tests"""
    for name in (
        "SESSION_API_CONFIG_PATH",
        "SESSION_API_BASE_URL",
        "SESSION_API_TIMEOUT",
        "SESSION_API_MAX_RETRIES",
        "SESSION_API_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def backend():
    """Recording mock backend"""
    return RecordingBackend()


@pytest.fixture
def http_client(backend):
    """httpx client wired to the mock backend"""
    return httpx.AsyncClient(transport=httpx.MockTransport(backend))


@pytest.fixture
def config():
    """Client configuration with instant retries"""
    return ClientConfig(
        base_url="http://api.test",
        timeout=5,
        retry=RetryConfig(max_retries=2, initial_delay=0),
    )
