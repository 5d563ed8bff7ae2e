"""
Request/response schemas and the operation result envelope.

PURE DATA MODELS: each request knows how to validate itself; nothing here
performs I/O.
"""

from .common import ErrorDetail, ErrorResponse, FileContent, ListRequest, ListResponse
from .moderation import ModerationRequest, ModerationResponse, ModerationResult
from .result import OperationResult, ResultStatus
from .run_steps import RunStepResponse, RunStepsListRequest, RunStepsListResponse
from .runs import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    ModifyRunRequest,
    RunListRequest,
    RunListResponse,
    RunResponse,
    SubmitToolOutputsToRunRequest,
    ToolOutput,
)
from .translation import TranslationRequest, TranslationResponse

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    "FileContent",
    "ListRequest",
    "ListResponse",
    # Result
    "OperationResult",
    "ResultStatus",
    # Runs
    "CreateRunRequest",
    "CreateThreadAndRunRequest",
    "ModifyRunRequest",
    "RunListRequest",
    "RunListResponse",
    "RunResponse",
    "SubmitToolOutputsToRunRequest",
    "ToolOutput",
    # Run steps
    "RunStepResponse",
    "RunStepsListRequest",
    "RunStepsListResponse",
    # Moderation
    "ModerationRequest",
    "ModerationResponse",
    "ModerationResult",
    # Translation
    "TranslationRequest",
    "TranslationResponse",
]
