"""
Run steps façade.

Read-only access to the steps a run went through.
"""

from typing import Optional

from genai_client.infra.uri import list_query_pairs
from genai_client.models.result import OperationResult
from genai_client.models.run_steps import RunStepResponse, RunStepsListRequest, RunStepsListResponse
from genai_client.services.base import BaseService
from genai_client.transport.cancellation import CancellationToken


class RunStepService(BaseService):
    required_uris = ("run_steps_get_uri", "run_steps_list_uri")

    async def get(
        self,
        thread_id: str,
        run_id: str,
        step_id: str,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunStepResponse]:
        rejected = self._missing_argument(thread_id=thread_id, run_id=run_id, step_id=step_id)
        if rejected:
            return rejected

        uri = self._uri("run_steps_get_uri", thread_id, run_id, step_id)
        return await self._http.get(uri, RunStepResponse, cancellation=cancellation)

    async def list(
        self,
        request: RunStepsListRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunStepsListResponse]:
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        uri = self._uri(
            "run_steps_list_uri",
            request.thread_id,
            request.run_id,
            query=list_query_pairs(request.order, request.after, request.limit, request.before),
        )
        return await self._http.get(uri, RunStepsListResponse, cancellation=cancellation)
