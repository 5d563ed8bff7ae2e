"""
Run step schemas.

ref: https://platform.openai.com/docs/api-reference/run-steps
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from genai_client.models.common import ListRequest, ListResponse
from genai_client.validation import ValidationOutcome, first_failure, require_text


class RunStepsListRequest(ListRequest):
    """GET threads/{thread_id}/runs/{run_id}/steps"""

    thread_id: str = Field(..., exclude=True)
    run_id: str = Field(..., exclude=True)

    def validate_request(self) -> ValidationOutcome:
        return first_failure(
            lambda: require_text(self.thread_id, "thread_id"),
            lambda: require_text(self.run_id, "run_id"),
            *self.list_filter_checks(),
        )


class RunStepResponse(BaseModel):
    """A single step (message creation or tool calls) of a run."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str = "thread.run.step"
    created_at: Optional[int] = None
    assistant_id: Optional[str] = None
    thread_id: Optional[str] = None
    run_id: Optional[str] = None
    type: Optional[str] = None  # message_creation | tool_calls
    status: Optional[str] = None
    step_details: Optional[Dict[str, Any]] = None
    last_error: Optional[Dict[str, Any]] = None
    expired_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    usage: Optional[Dict[str, Any]] = None


class RunStepsListResponse(ListResponse[RunStepResponse]):
    """Page of run steps."""
