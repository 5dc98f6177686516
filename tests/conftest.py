import json

import httpx
import pytest

from assemblyai_client.config import ClientConfig
from assemblyai_client.dependencies import build_http_client
from assemblyai_client.infrastructure import AssemblyAIClient

API_KEY = "test-api-key"


class RecordingHandler:
    """MockTransport handler that records requests and replays a canned reply."""

    def __init__(self, status_code=200, body=None, content=None):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_client():
    def _make(handler, **config_overrides):
        config = ClientConfig(api_key=API_KEY, **config_overrides)
        http_client = build_http_client(config, transport=httpx.MockTransport(handler))
        return AssemblyAIClient(http_client)

    return _make
