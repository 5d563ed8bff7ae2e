"""
tests/transport/test_http_executor.py

Tests for ApiHttpService outcome classification.

Verifies:
✔ 2xx JSON → success with decoded value and status code
✔ 2xx undecodable body → transport_fault (not api_error)
✔ Non-2xx with error body → api_error carrying decoded message
✔ Non-2xx with non-JSON body → api_error with raw body
✔ Timeout / connection failure → transport_fault, never raises
✔ Cancellation before or during the call → cancelled transport_fault
✔ Auth, organization and beta headers are sent
✔ POST without request sends no body
✔ Trace events emitted; a failing tracer never changes the result
✔ Injected clients are not closed by the executor
✔ Body factory failures → transport_fault, no call made
✔ JSON bodies decode regardless of content-type
"""

import asyncio
import json
from unittest.mock import MagicMock

import httpx
import pytest

from genai_client.config import OpenAIOptions
from genai_client.errors import ConfigurationError, PayloadError
from genai_client.models import ModerationRequest, RunResponse, TranslationResponse
from genai_client.transport.cancellation import CancellationToken
from genai_client.transport.http import ApiHttpService

URI = "https://api.openai.com/v1/threads/t1/runs/r1"


# ─────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────


def make_mock_tracer():
    tracer = MagicMock()
    tracer.record_event = MagicMock()
    return tracer


def traced_events(tracer):
    return [c.args[0] for c in tracer.record_event.call_args_list]


# ─────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────


class TestSuccess:
    @pytest.mark.asyncio
    async def test_json_success(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1", "status": "queued"})
        result = await http_service.get(URI, RunResponse)
        assert result.is_success
        assert result.status_code == 200
        assert result.value.id == "r1"
        assert result.value.status == "queued"

    @pytest.mark.asyncio
    async def test_unknown_fields_tolerated(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1", "brand_new_field": 1})
        result = await http_service.get(URI, RunResponse)
        assert result.is_success

    @pytest.mark.asyncio
    async def test_plain_text_body_into_text_model(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(
            200, text="Hello there", headers={"content-type": "text/plain"}
        )
        result = await http_service.post(URI, TranslationResponse, None)
        assert result.is_success
        assert result.value.text == "Hello there"

    @pytest.mark.asyncio
    async def test_json_body_with_text_content_type_is_decoded(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(
            200, content=b'{"text": "decoded"}', headers={"content-type": "text/plain"}
        )
        result = await http_service.post(URI, TranslationResponse, None)
        assert result.value.text == "decoded"


class TestDecodeFailure:
    @pytest.mark.asyncio
    async def test_malformed_json(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(
            200, content=b"{not json", headers={"content-type": "application/json"}
        )
        result = await http_service.get(URI, RunResponse)
        assert result.status == "transport_fault"
        assert result.status_code == 200
        assert not result.cancelled

    @pytest.mark.asyncio
    async def test_shape_mismatch(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(200, json={"object": "thread.run"})
        result = await http_service.get(URI, RunResponse)
        assert result.status == "transport_fault"


class TestApiError:
    @pytest.mark.asyncio
    async def test_error_body_decoded(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(
            404,
            json={"error": {"message": "No run found with id 'r1'.", "type": "invalid_request_error"}},
        )
        result = await http_service.get(URI, RunResponse)
        assert result.status == "api_error"
        assert result.status_code == 404
        assert result.error_message == "No run found with id 'r1'."
        assert result.api_error.type == "invalid_request_error"
        assert result.value is None

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(502, text="Bad gateway")
        result = await http_service.get(URI, RunResponse)
        assert result.status == "api_error"
        assert result.status_code == 502
        assert result.api_error is None
        assert result.raw_body == "Bad gateway"


class TestTransportFault:
    @pytest.mark.asyncio
    async def test_timeout(self, http_service, recorder):
        def raise_timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)

        recorder.responder = raise_timeout
        result = await http_service.get(URI, RunResponse)
        assert result.status == "transport_fault"
        assert isinstance(result.exception, httpx.TimeoutException)
        assert "timed out" in result.error_message

    @pytest.mark.asyncio
    async def test_connection_error(self, http_service, recorder):
        def raise_connect(request):
            raise httpx.ConnectError("connection refused", request=request)

        recorder.responder = raise_connect
        result = await http_service.get(URI, RunResponse)
        assert result.status == "transport_fault"
        assert result.status_code is None


# ─────────────────────────────────────────────────────
# Cancellation
# ─────────────────────────────────────────────────────


class TestCancellation:
    @pytest.mark.asyncio
    async def test_pre_cancelled_makes_no_call(self, http_service, recorder):
        token = CancellationToken()
        token.cancel()
        result = await http_service.get(URI, RunResponse, cancellation=token)
        assert result.is_cancelled
        assert result.status == "transport_fault"
        assert recorder.call_count == 0

    @pytest.mark.asyncio
    async def test_cancelled_in_flight(self, http_service, recorder):
        async def slow(request):
            await asyncio.sleep(10)
            return httpx.Response(200, json={"id": "r1"})

        recorder.responder = slow
        token = CancellationToken()
        token.cancel_after(0.01)
        result = await http_service.get(URI, RunResponse, cancellation=token)
        assert result.is_cancelled

    @pytest.mark.asyncio
    async def test_pre_cancelled_post_skips_factory(self, http_service, recorder):
        factory_calls = []

        async def factory(request, token):
            factory_calls.append(request)

        token = CancellationToken()
        token.cancel()
        result = await http_service.post(URI, RunResponse, object(), content_factory=factory, cancellation=token)
        assert result.is_cancelled
        assert factory_calls == []


# ─────────────────────────────────────────────────────
# Request shape
# ─────────────────────────────────────────────────────


class TestRequestShape:
    @pytest.mark.asyncio
    async def test_headers(self, recorder, http_client):
        options = OpenAIOptions(api_key="sk-test", organization="org-1")
        service = ApiHttpService(options, client=http_client)
        await service.get(URI, RunResponse)
        headers = recorder.last.headers
        assert headers["authorization"] == "Bearer sk-test"
        assert headers["openai-organization"] == "org-1"
        assert headers["openai-beta"] == "assistants=v2"
        assert headers["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_azure_key_header(self, azure_options, recorder, http_client):
        service = ApiHttpService(azure_options, client=http_client)
        await service.get(URI, RunResponse)
        assert recorder.last.headers["api-key"] == "az-key"
        assert "authorization" not in recorder.last.headers

    @pytest.mark.asyncio
    async def test_json_body_drops_unset_fields(self, http_service, recorder):
        await http_service.post(URI, RunResponse, ModerationRequest(input="hello"))
        assert recorder.last.method == "POST"
        assert json.loads(recorder.last.content) == {"input": "hello"}

    @pytest.mark.asyncio
    async def test_post_without_request_has_no_body(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1"})
        await http_service.post(URI, RunResponse)
        assert recorder.last.content == b""

    @pytest.mark.asyncio
    async def test_delete(self, http_service, recorder):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1"})
        result = await http_service.delete(URI, RunResponse)
        assert result.is_success
        assert recorder.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_payload_error_becomes_caller_input_error(self, http_service, recorder):
        async def factory(request, token):
            raise PayloadError("Missing audio_file content data.", "audio_file")

        result = await http_service.post(URI, TranslationResponse, object(), content_factory=factory)
        assert result.status == "caller_input_error"
        assert result.error_fields == ("audio_file",)
        assert recorder.call_count == 0

    @pytest.mark.asyncio
    async def test_factory_failure_becomes_transport_fault(self, http_service, recorder):
        async def factory(request, token):
            raise OSError("read failed")

        result = await http_service.post(URI, TranslationResponse, object(), content_factory=factory)
        assert result.status == "transport_fault"
        assert isinstance(result.exception, OSError)
        assert recorder.call_count == 0


# ─────────────────────────────────────────────────────
# Tracing and lifecycle
# ─────────────────────────────────────────────────────


class TestTracing:
    @pytest.mark.asyncio
    async def test_success_events(self, options, recorder, http_client):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1"})
        tracer = make_mock_tracer()
        service = ApiHttpService(options, client=http_client, tracer=tracer)
        await service.get(URI, RunResponse)
        assert traced_events(tracer) == ["http_request_sent", "http_response_received"]

    @pytest.mark.asyncio
    async def test_failure_event(self, options, recorder, http_client):
        def raise_connect(request):
            raise httpx.ConnectError("refused", request=request)

        recorder.responder = raise_connect
        tracer = make_mock_tracer()
        service = ApiHttpService(options, client=http_client, tracer=tracer)
        await service.get(URI, RunResponse)
        assert "http_request_failed" in traced_events(tracer)

    @pytest.mark.asyncio
    async def test_failing_tracer_is_ignored(self, options, recorder, http_client):
        recorder.responder = lambda request: httpx.Response(200, json={"id": "r1"})
        tracer = make_mock_tracer()
        tracer.record_event.side_effect = RuntimeError("tracer down")
        service = ApiHttpService(options, client=http_client, tracer=tracer)
        result = await service.get(URI, RunResponse)
        assert result.is_success


class TestLifecycle:
    def test_none_options(self):
        with pytest.raises(ConfigurationError):
            ApiHttpService(None)

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self, options, http_client):
        async with ApiHttpService(options, client=http_client):
            pass
        assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_owned_client_closed(self, options):
        service = ApiHttpService(options)
        client = service._get_http_client()
        assert service._get_http_client() is client
        await service.aclose()
        assert client.is_closed
