"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import httpx
import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from genai_client.config import OpenAIOptions
from genai_client.infra.endpoint import EndpointResolver
from genai_client.transport.http import ApiHttpService


class RecordingTransport:
    """
    httpx.MockTransport handler that records every outgoing request.

    `responder` may return an httpx.Response or a coroutine resolving to one,
    or raise an httpx exception to simulate a network failure.
    """

    def __init__(self):
        self.requests = []
        self.responder = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def options():
    return OpenAIOptions(api_key="sk-test")


@pytest.fixture
def azure_options():
    return OpenAIOptions(
        provider="azure",
        api_key="az-key",
        azure_resource_name="contoso",
        azure_deployment_id="gpt4o",
    )


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def http_client(recorder):
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder))


@pytest.fixture
def resolver(options):
    return EndpointResolver(options)


@pytest.fixture
def http_service(options, resolver, http_client):
    return ApiHttpService(options, endpoint_resolver=resolver, client=http_client)
