"""
Moderation façade.

Classifies whether text violates the provider's usage policies.
"""

from typing import Optional

from genai_client.models.moderation import ModerationRequest, ModerationResponse
from genai_client.models.result import OperationResult
from genai_client.services.base import BaseService
from genai_client.transport.cancellation import CancellationToken


class ModerationService(BaseService):
    required_uris = ("moderation_uri",)

    async def get(
        self,
        request: ModerationRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[ModerationResponse]:
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        return await self._http.post(
            self._uri("moderation_uri"),
            ModerationResponse,
            request,
            cancellation=cancellation,
        )
