"""
Runs façade.

An execution run on a thread.
ref: https://platform.openai.com/docs/api-reference/runs
"""

from typing import Optional

from genai_client.infra.uri import list_query_pairs
from genai_client.models.result import OperationResult
from genai_client.models.runs import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    ModifyRunRequest,
    RunListRequest,
    RunListResponse,
    RunResponse,
    SubmitToolOutputsToRunRequest,
)
from genai_client.services.base import BaseService
from genai_client.transport.cancellation import CancellationToken


class RunService(BaseService):
    required_uris = (
        "run_create_uri",
        "run_thread_and_run_create_uri",
        "run_get_uri",
        "run_list_uri",
        "run_modify_uri",
        "run_submit_tool_outputs_uri",
        "run_cancel_uri",
    )

    async def create(
        self,
        request: CreateRunRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunResponse]:
        """Create a run on an existing thread."""
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        uri = self._uri("run_create_uri", request.thread_id)
        return await self._http.post(uri, RunResponse, request, cancellation=cancellation)

    async def create_thread_and_run(
        self,
        request: CreateThreadAndRunRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunResponse]:
        """Create a thread and run it in one request."""
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        uri = self._uri("run_thread_and_run_create_uri")
        return await self._http.post(uri, RunResponse, request, cancellation=cancellation)

    async def get(
        self,
        thread_id: str,
        run_id: str,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunResponse]:
        rejected = self._missing_argument(thread_id=thread_id, run_id=run_id)
        if rejected:
            return rejected

        uri = self._uri("run_get_uri", thread_id, run_id)
        return await self._http.get(uri, RunResponse, cancellation=cancellation)

    async def list(
        self,
        request: RunListRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunListResponse]:
        """One page of runs belonging to a thread."""
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        uri = self._uri(
            "run_list_uri",
            request.thread_id,
            query=list_query_pairs(request.order, request.after, request.limit, request.before),
        )
        return await self._http.get(uri, RunListResponse, cancellation=cancellation)

    async def modify(
        self,
        request: ModifyRunRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunResponse]:
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        uri = self._uri("run_modify_uri", request.thread_id, request.run_id)
        return await self._http.post(uri, RunResponse, request, cancellation=cancellation)

    async def submit_tool_outputs(
        self,
        request: SubmitToolOutputsToRunRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunResponse]:
        """
        Submit tool call outputs for a run in `requires_action` state.

        All outputs must be submitted in a single request.
        """
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        uri = self._uri("run_submit_tool_outputs_uri", request.thread_id, request.run_id)
        return await self._http.post(uri, RunResponse, request, cancellation=cancellation)

    async def cancel(
        self,
        thread_id: str,
        run_id: str,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[RunResponse]:
        """Cancel an in_progress run. POST with no body."""
        rejected = self._missing_argument(thread_id=thread_id, run_id=run_id)
        if rejected:
            return rejected

        uri = self._uri("run_cancel_uri", thread_id, run_id)
        return await self._http.post(uri, RunResponse, None, cancellation=cancellation)
