"""
Shared pytest fixtures.

Upstream Gemini calls are served by an httpx.MockTransport so no test
touches the network.
"""

import json

import httpx
import pytest

from maps_grounding.clients.gemini_maps_client import GeminiMapsGroundingClient
from maps_grounding.servers import maps_grounding_server


class RecordingUpstream:
    """MockTransport handler that records requests and replays one canned response."""

    def __init__(
        self,
        status_code: int = 200,
        payload: dict | None = None,
        text: str | None = None,
        error: Exception | None = None,
    ):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload or {})

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


def candidate_payload(text: str, grounding_metadata: dict | None = None, usage: dict | None = None) -> dict:
    candidate: dict = {
        "content": {"parts": [{"text": text}], "role": "model"},
        "finishReason": "STOP",
    }
    if grounding_metadata is not None:
        candidate["groundingMetadata"] = grounding_metadata
    payload: dict = {"candidates": [candidate]}
    if usage is not None:
        payload["usageMetadata"] = usage
    return payload


@pytest.fixture
def make_client():
    """Build a client whose HTTP traffic goes to the given upstream handler."""

    def _make(upstream: RecordingUpstream, api_key: str = "test-key") -> GeminiMapsGroundingClient:
        return GeminiMapsGroundingClient(api_key=api_key, transport=httpx.MockTransport(upstream))

    return _make


@pytest.fixture
def stub_upstream(monkeypatch, make_client):
    """Install a stubbed client as the server's lazy singleton."""

    def _install(upstream: RecordingUpstream) -> RecordingUpstream:
        monkeypatch.setattr(maps_grounding_server, "_client", make_client(upstream))
        return upstream

    return _install


@pytest.fixture
def upstream():
    """Factory for RecordingUpstream handlers."""
    return RecordingUpstream


@pytest.fixture
def gemini_payload():
    """Factory for single-candidate generateContent payloads."""
    return candidate_payload
