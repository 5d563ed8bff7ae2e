"""
HTTP executor.

Issues GET / POST / DELETE calls against the API and classifies every
outcome into an OperationResult:

  outcome                              result
  ───────────────────────────────────  ───────────────────────────────────
  2xx, body decodes                    success(value, status_code)
  2xx, body does not decode            transport_fault (deserialization)
  non-2xx, error body decodes          api_error(status_code, ErrorDetail)
  non-2xx, error body undecodable      api_error(status_code, raw body)
  httpx.TimeoutException               transport_fault (timeout)
  other httpx / network failure        transport_fault
  token cancelled before/during call   transport_fault, cancelled=True
  PayloadError from a body factory     caller_input_error, no network call
  other error from a body factory      transport_fault, no network call

Invariants:
- Never raises for any of the outcomes above
- Credentials never logged
- One pooled httpx.AsyncClient per executor, created lazily and reused by
  every concurrent call; a client passed in is never closed here
- No retries (see transport.retry for the caller-side hook)
- Trace events: http_request_sent, http_response_received,
  http_request_failed
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from genai_client.config import OpenAIOptions
from genai_client.errors import ConfigurationError, OperationCancelled, PayloadError
from genai_client.infra.endpoint import EndpointResolver
from genai_client.models.common import ErrorResponse
from genai_client.models.result import OperationResult
from genai_client.tracing import Tracer, emit_event
from genai_client.transport.cancellation import CancellationToken
from genai_client.transport.multipart import MultipartPayload

logger = logging.getLogger(__name__)

T = TypeVar("T")

ContentFactory = Callable[[Any, CancellationToken], Awaitable[MultipartPayload]]


class ApiHttpService:
    """
    Generic request executor shared by every resource façade.

    Usage:
        async with ApiHttpService(options) as http:
            result = await http.get(uri, RunResponse)
            if result.is_success:
                run = result.value
    """

    def __init__(
        self,
        options: OpenAIOptions,
        endpoint_resolver: Optional[EndpointResolver] = None,
        client: Optional[httpx.AsyncClient] = None,
        tracer: Optional[Tracer] = None,
    ):
        if options is None:
            raise ConfigurationError("options")

        self._options = options
        self._resolver = endpoint_resolver or EndpointResolver(options)
        self._client = client
        self._owns_client = client is None
        self.tracer = tracer

    # ── Connection pool ───────────────────────────────────────

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the pooled async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._options.request_timeout_s)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ApiHttpService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _build_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        headers.update(self._resolver.auth_headers())
        if self._options.organization:
            headers["OpenAI-Organization"] = self._options.organization
        if self._options.assistants_header:
            headers["OpenAI-Beta"] = self._options.assistants_header
        return headers

    # ──────────────────────────────────────────────────────────
    # PUBLIC VERBS
    # ──────────────────────────────────────────────────────────

    async def get(
        self,
        uri: str,
        response_type: Type[T],
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[T]:
        return await self._execute("GET", uri, response_type, cancellation=cancellation)

    async def delete(
        self,
        uri: str,
        response_type: Type[T],
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[T]:
        return await self._execute("DELETE", uri, response_type, cancellation=cancellation)

    async def post(
        self,
        uri: str,
        response_type: Type[T],
        request: Any = None,
        content_factory: Optional[ContentFactory] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[T]:
        """
        POST with a JSON body, a multipart body, or no body.

        Args:
            uri: Absolute URI.
            response_type: Pydantic model the 2xx body decodes into.
            request: Request value. Serialized to JSON unless
                `content_factory` is given. None sends no body.
            content_factory: Async callable building a multipart payload
                from `request`; may raise PayloadError.
            cancellation: Token checked before and during the call.
        """
        token = cancellation or CancellationToken.none()
        if token.is_cancelled:
            return self._cancelled("POST", uri)

        json_body = None
        files = None

        if content_factory is not None:
            try:
                payload = await content_factory(request, token)
            except PayloadError as e:
                logger.warning(
                    f"Payload rejected before send: {e}",
                    extra={"uri": uri, "field": e.field},
                )
                fields = (e.field,) if e.field else ()
                return OperationResult.caller_input_error(str(e), *fields)
            except OperationCancelled:
                return self._cancelled("POST", uri)
            except Exception as e:
                logger.error(f"Payload encoding failed for POST {uri}: {e}", exc_info=True)
                return self._fault("POST", uri, "payload_read_error", f"Payload encoding failed: {e}", e)
            files = payload.parts
        elif request is not None:
            json_body = _to_json(request)

        return await self._execute(
            "POST",
            uri,
            response_type,
            json_body=json_body,
            files=files,
            cancellation=token,
        )

    # ──────────────────────────────────────────────────────────
    # EXECUTION
    # ──────────────────────────────────────────────────────────

    async def _execute(
        self,
        method: str,
        uri: str,
        response_type: Type[T],
        json_body: Any = None,
        files: Any = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[T]:
        token = cancellation or CancellationToken.none()
        if token.is_cancelled:
            return self._cancelled(method, uri)

        emit_event(self.tracer, "http_request_sent", {"method": method, "uri": uri})

        try:
            client = self._get_http_client()
            http_request = client.build_request(
                method,
                uri,
                json=json_body,
                files=files,
                headers=self._build_headers(),
            )
            response = await token.run(client.send(http_request))

        except OperationCancelled:
            return self._cancelled(method, uri)

        except httpx.TimeoutException as e:
            return self._fault(method, uri, "timeout", f"Request timed out: {e}", e)

        except httpx.HTTPError as e:
            return self._fault(method, uri, "http_error", f"HTTP request failed: {e}", e)

        except Exception as e:
            logger.error(f"Unexpected error calling {method} {uri}: {e}", exc_info=True)
            return self._fault(method, uri, "unexpected_error", f"Unexpected error: {e}", e)

        emit_event(self.tracer, "http_response_received", {
            "method": method,
            "uri": uri,
            "status_code": response.status_code,
        })
        return self._classify(response, response_type)

    def _classify(self, response: httpx.Response, response_type: Type[T]) -> OperationResult[T]:
        status_code = response.status_code

        if response.is_success:
            try:
                value = _decode(response, response_type)
            except ValueError as e:
                # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
                logger.error(
                    f"Could not decode {status_code} response: {e}",
                    extra={"status_code": status_code, "uri": str(response.request.url)},
                )
                return OperationResult.transport_fault(
                    f"Response deserialization failed: {e}",
                    status_code=status_code,
                    exception=e,
                )
            return OperationResult.success(value, status_code)

        api_error = None
        try:
            api_error = ErrorResponse.model_validate(response.json()).error
        except (ValueError, ValidationError):
            pass

        logger.warning(
            f"API error: {status_code} - {api_error.message if api_error else response.text[:200]}",
            extra={"status_code": status_code, "uri": str(response.request.url)},
        )
        return OperationResult.from_api_error(status_code, api_error, raw_body=response.text)

    # ── Helpers ───────────────────────────────────────────────

    def _cancelled(self, method: str, uri: str) -> OperationResult:
        logger.info(f"{method} {uri} cancelled", extra={"method": method, "uri": uri})
        emit_event(self.tracer, "http_request_failed", {
            "method": method,
            "uri": uri,
            "reason": "cancelled",
        })
        return OperationResult.cancelled_fault()

    def _fault(
        self,
        method: str,
        uri: str,
        reason: str,
        message: str,
        exc: BaseException,
    ) -> OperationResult:
        status_code = None
        response = getattr(exc, "response", None)
        if response is not None:
            status_code = getattr(response, "status_code", None)

        logger.error(
            message,
            extra={"method": method, "uri": uri, "reason": reason, "status_code": status_code},
        )
        emit_event(self.tracer, "http_request_failed", {
            "method": method,
            "uri": uri,
            "reason": reason,
            "error": type(exc).__name__,
        })
        return OperationResult.transport_fault(message, status_code=status_code, exception=exc)


def _to_json(request: Any) -> Any:
    """Pydantic requests drop unset fields and path parameters."""
    if hasattr(request, "model_dump"):
        return request.model_dump(mode="json", exclude_none=True)
    return request


def _decode(response: httpx.Response, response_type: Optional[Type[T]]) -> Any:
    fields = getattr(response_type, "model_fields", {})

    try:
        data = response.json()
    except ValueError:
        # text/srt/vtt translation bodies are plain text
        if "text" in fields:
            return response_type(text=response.text)
        raise

    if response_type is None:
        return data
    if "text" in fields and not isinstance(data, dict):
        # a bare JSON scalar such as "42" is still a plain text body
        return response_type(text=response.text)
    return response_type.model_validate(data)
