"""
Shared façade plumbing.

Every resource façade runs the same per-call pipeline:

  Created → caller input check → Validating → URI built → Sending → result

Caller-input and validation failures return before any URI is built or any
network call is made.
"""

from typing import Iterable, Optional, Tuple

from genai_client.config import OpenAIOptions
from genai_client.errors import ConfigurationError
from genai_client.infra.endpoint import EndpointResolver
from genai_client.infra.uri import build_uri
from genai_client.models.result import OperationResult
from genai_client.transport.cancellation import CancellationToken
from genai_client.transport.http import ApiHttpService
from genai_client.validation import RequestValidator


class BaseService:
    """
    Base class for resource façades.

    Subclasses list the option names of the path templates they use in
    `required_uris`; a blank template is a construction-time error.
    """

    required_uris: Tuple[str, ...] = ()

    def __init__(
        self,
        options: OpenAIOptions,
        http_service: ApiHttpService,
        endpoint_resolver: EndpointResolver,
        validator: Optional[RequestValidator] = None,
    ):
        if options is None:
            raise ConfigurationError("options")
        if http_service is None:
            raise ConfigurationError("http_service")
        if endpoint_resolver is None:
            raise ConfigurationError("endpoint_resolver")

        for name in self.required_uris:
            if not (getattr(options, name, None) or "").strip():
                raise ConfigurationError(name, f"required by {type(self).__name__}")

        self._options = options
        self._http = http_service
        self._resolver = endpoint_resolver
        self._validator = validator or RequestValidator()

    # ── Pipeline steps ────────────────────────────────────────

    @staticmethod
    def _missing_argument(**arguments: Optional[str]) -> Optional[OperationResult]:
        """First None/blank argument as a caller_input_error, else None."""
        for name, value in arguments.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                return OperationResult.caller_input_error(f"{name} is required.", name)
        return None

    def _check_request(
        self,
        request,
        cancellation: Optional[CancellationToken] = None,
    ) -> Optional[OperationResult]:
        """Reject a missing or invalid request; None means proceed."""
        if request is None:
            return OperationResult.caller_input_error("request is required.", "request")

        if cancellation is not None and cancellation.is_cancelled:
            return OperationResult.cancelled_fault()

        outcome = self._validator.validate(request)
        if not outcome.is_valid:
            return OperationResult.validation_error(outcome.message, *outcome.fields)
        return None

    def _uri(
        self,
        template_name: str,
        *path_params: str,
        query: Optional[Iterable[Tuple[str, object]]] = None,
    ) -> str:
        pairs = list(query or []) + self._resolver.default_query()
        return build_uri(
            self._resolver.resolve(),
            getattr(self._options, template_name),
            *path_params,
            query=pairs,
        )
