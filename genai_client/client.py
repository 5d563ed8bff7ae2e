"""
Client bootstrap.

Wires options → endpoint resolver → HTTP executor → resource façades.
All façades share one executor and therefore one connection pool.

Usage:
    async with GenAIClient.from_env() as client:
        result = await client.runs.get("thread_abc", "run_abc")
"""

import logging
from typing import Optional

import httpx

from genai_client.config import OpenAIOptions
from genai_client.errors import ConfigurationError
from genai_client.infra.endpoint import EndpointResolver
from genai_client.services import ModerationService, RunService, RunStepService, TranslationService
from genai_client.tracing import Tracer
from genai_client.transport.http import ApiHttpService

logger = logging.getLogger(__name__)


class GenAIClient:
    """Entry point exposing every resource façade."""

    def __init__(
        self,
        options: OpenAIOptions,
        http_client: Optional[httpx.AsyncClient] = None,
        tracer: Optional[Tracer] = None,
    ):
        if options is None:
            raise ConfigurationError("options")

        self.options = options
        self.endpoint_resolver = EndpointResolver(options)
        self.http = ApiHttpService(
            options,
            endpoint_resolver=self.endpoint_resolver,
            client=http_client,
            tracer=tracer,
        )

        self.runs = RunService(options, self.http, self.endpoint_resolver)
        self.run_steps = RunStepService(options, self.http, self.endpoint_resolver)
        self.moderation = ModerationService(options, self.http, self.endpoint_resolver)
        self.translation = TranslationService(options, self.http, self.endpoint_resolver)

        logger.info(
            f"GenAI client ready (provider={options.provider})",
            extra={"provider": options.provider},
        )

    @classmethod
    def from_env(
        cls,
        http_client: Optional[httpx.AsyncClient] = None,
        tracer: Optional[Tracer] = None,
    ) -> "GenAIClient":
        return cls(OpenAIOptions.from_env(), http_client=http_client, tracer=tracer)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "GenAIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
