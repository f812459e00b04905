"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import httpx
import pytest

from gym_companion.ai.client import GatewayClient
from gym_companion.config import Settings


class FakeGateway:
    """Scripted stand-in for the chat-completion gateway.

    Queue replies with ``reply``/``fail``; every request body is recorded.
    """

    def __init__(self):
        self.requests: list[dict] = []
        self._responses: list[httpx.Response] = []

    def reply(self, content: str) -> None:
        """Queue a successful completion whose text is ``content``."""
        self._responses.append(
            httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})
        )

    def reply_json(self, data: dict) -> None:
        self.reply(json.dumps(data))

    def fail(self, status: int, body: str = "upstream error") -> None:
        self._responses.append(httpx.Response(status, text=body))

    def raw(self, response: httpx.Response) -> None:
        self._responses.append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if not self._responses:
            return httpx.Response(500, text="no scripted response")
        return self._responses.pop(0)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary data dir with a dummy API key."""
    return Settings(
        gateway_url="https://gateway.test/v1/chat/completions",
        gateway_api_key="test-key",
        data_dir=tmp_path / "data",
        redirect_delay_ms=10,
        max_upload_bytes=1024,
    )


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def gateway_client(settings, fake_gateway):
    """Gateway client wired to the fake gateway."""
    return GatewayClient(settings, transport=fake_gateway.transport)


@pytest.fixture
def sample_exercises():
    """A generated plan as the model would return it."""
    return {
        "exercises": [
            {
                "name": "Seated Leg Press",
                "description": "Press the platform away with both feet.",
                "sets": "4",
                "reps": "8-10",
                "rest": "90 seconds",
                "tips": "Keep your lower back against the pad.",
            },
            {
                "name": "Single-Leg Press",
                "description": "Press with one leg at a time.",
                "sets": 3,
                "reps": 12,
                "rest": "60 seconds",
                "tips": "Do not lock the knee at the top.",
                "youtubeSearch": "single leg press form",
            },
        ]
    }
