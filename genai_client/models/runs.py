"""
Run schemas.

ref: https://platform.openai.com/docs/api-reference/runs

Path parameters (thread_id, run_id) are excluded from the JSON body; the
façade places them in the URI.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from genai_client.models.common import ListRequest, ListResponse
from genai_client.validation import (
    ValidationOutcome,
    first_failure,
    require_items,
    require_range,
    require_text,
)


# ============================================================================
# REQUESTS
# ============================================================================

class CreateRunRequest(BaseModel):
    """POST threads/{thread_id}/runs"""

    model_config = ConfigDict(frozen=True)

    thread_id: str = Field(..., exclude=True)
    assistant_id: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    additional_instructions: Optional[str] = None
    additional_messages: Optional[List[Dict[str, Any]]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_prompt_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    truncation_strategy: Optional[Dict[str, Any]] = None
    tool_choice: Optional[Any] = None
    response_format: Optional[Any] = None
    parallel_tool_calls: Optional[bool] = None

    def validate_request(self) -> ValidationOutcome:
        return first_failure(
            lambda: require_text(self.thread_id, "thread_id"),
            lambda: require_text(self.assistant_id, "assistant_id"),
            lambda: require_range(self.temperature, "temperature", 0.0, 2.0),
            lambda: require_range(self.top_p, "top_p", 0.0, 1.0),
        )


class CreateThreadAndRunRequest(BaseModel):
    """POST threads/runs"""

    model_config = ConfigDict(frozen=True)

    assistant_id: str
    thread: Optional[Dict[str, Any]] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None

    def validate_request(self) -> ValidationOutcome:
        return first_failure(
            lambda: require_text(self.assistant_id, "assistant_id"),
            lambda: require_range(self.temperature, "temperature", 0.0, 2.0),
            lambda: require_range(self.top_p, "top_p", 0.0, 1.0),
        )


class RunListRequest(ListRequest):
    """GET threads/{thread_id}/runs"""

    thread_id: str = Field(..., exclude=True)

    def validate_request(self) -> ValidationOutcome:
        return first_failure(
            lambda: require_text(self.thread_id, "thread_id"),
            *self.list_filter_checks(),
        )


class ModifyRunRequest(BaseModel):
    """POST threads/{thread_id}/runs/{run_id}"""

    model_config = ConfigDict(frozen=True)

    thread_id: str = Field(..., exclude=True)
    run_id: str = Field(..., exclude=True)
    metadata: Optional[Dict[str, str]] = None

    def validate_request(self) -> ValidationOutcome:
        return first_failure(
            lambda: require_text(self.thread_id, "thread_id"),
            lambda: require_text(self.run_id, "run_id"),
        )


class ToolOutput(BaseModel):
    """Output of one tool call, keyed by the call id."""

    model_config = ConfigDict(frozen=True)

    tool_call_id: str
    output: Optional[str] = None


class SubmitToolOutputsToRunRequest(BaseModel):
    """
    POST threads/{thread_id}/runs/{run_id}/submit_tool_outputs

    Valid only while the run is `requires_action`; all outputs must be
    submitted in a single request.
    """

    model_config = ConfigDict(frozen=True)

    thread_id: str = Field(..., exclude=True)
    run_id: str = Field(..., exclude=True)
    tool_outputs: List[ToolOutput] = Field(default_factory=list)

    def validate_request(self) -> ValidationOutcome:
        return first_failure(
            lambda: require_text(self.thread_id, "thread_id"),
            lambda: require_text(self.run_id, "run_id"),
            lambda: require_items(self.tool_outputs, "tool_outputs"),
            *(
                (lambda o=o: require_text(o.tool_call_id, "tool_outputs.tool_call_id"))
                for o in self.tool_outputs
            ),
        )


# ============================================================================
# RESPONSES
# ============================================================================

class RunResponse(BaseModel):
    """A run object."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str = "thread.run"
    created_at: Optional[int] = None
    thread_id: Optional[str] = None
    assistant_id: Optional[str] = None
    status: Optional[str] = None
    required_action: Optional[Dict[str, Any]] = None
    last_error: Optional[Dict[str, Any]] = None
    expires_at: Optional[int] = None
    started_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    incomplete_details: Optional[Dict[str, Any]] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: List[Dict[str, Any]] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    usage: Optional[Dict[str, Any]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None


class RunListResponse(ListResponse[RunResponse]):
    """Page of runs."""
