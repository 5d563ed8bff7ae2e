"""
tests/services/test_client_bootstrap.py

Tests for GenAIClient wiring.

Verifies:
✔ All façades share one executor
✔ from_env builds options from the environment
✔ Closing the client leaves an injected httpx client open
✔ Unsupported provider fails at construction
"""

import httpx
import pytest

from genai_client import GenAIClient, OpenAIOptions
from genai_client.errors import ConfigurationError


class TestGenAIClient:
    def test_facades_share_executor(self, options, http_client):
        client = GenAIClient(options, http_client=http_client)
        assert client.runs._http is client.http
        assert client.run_steps._http is client.http
        assert client.moderation._http is client.http
        assert client.translation._http is client.http

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_PROVIDER", "openai")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
        client = GenAIClient.from_env()
        assert client.options.api_key == "sk-from-env"

    def test_unsupported_provider(self):
        with pytest.raises(ConfigurationError):
            GenAIClient(OpenAIOptions(provider="other"))

    @pytest.mark.asyncio
    async def test_end_to_end_get(self, options, http_client, recorder):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1", "status": "completed"})
        async with GenAIClient(options, http_client=http_client) as client:
            result = await client.runs.get("t1", "r1")
        assert result.value.status == "completed"
        assert not http_client.is_closed
