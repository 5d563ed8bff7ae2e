"""
Shared request/response schemas.

Response models allow unknown fields: the remote API adds fields over time
and decoding must not break on them.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from genai_client.validation import (
    ValidationOutcome,
    first_failure,
    require_choice,
    require_range,
)

T = TypeVar("T")

ListOrder = Literal["asc", "desc"]

MAX_LIST_LIMIT = 100


# ============================================================================
# ERRORS (WIRE)
# ============================================================================

class ErrorDetail(BaseModel):
    """The `error` object of an API error body."""

    model_config = ConfigDict(extra="allow", frozen=True)

    message: Optional[str] = None
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[Union[str, int]] = None


class ErrorResponse(BaseModel):
    """Error body: {"error": {"message": ..., "type": ..., ...}}"""

    model_config = ConfigDict(extra="allow")

    error: ErrorDetail


# ============================================================================
# BINARY PAYLOAD DESCRIPTOR
# ============================================================================

@dataclass
class FileContent:
    """
    Binary upload source.

    Exactly one of `source_content` (bytes) or `source_stream` (object with a
    sync or async `read(n)`) is expected. `content_name` is the file name
    sent with the multipart part.
    """

    content_name: str
    source_content: Optional[bytes] = None
    source_stream: Optional[Any] = None


# ============================================================================
# PAGINATED LISTS
# ============================================================================

class ListRequest(BaseModel):
    """Ordering and cursor filters shared by every list request."""

    model_config = ConfigDict(frozen=True)

    order: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None
    before: Optional[str] = None

    def list_filter_checks(self):
        return (
            lambda: require_choice(self.order, "order", ("asc", "desc")),
            lambda: require_range(self.limit, "limit", 1, MAX_LIST_LIMIT),
        )

    def validate_request(self) -> ValidationOutcome:
        return first_failure(*self.list_filter_checks())


class ListResponse(BaseModel, Generic[T]):
    """Cursor-paginated list envelope."""

    model_config = ConfigDict(extra="allow")

    object: str = "list"
    data: List[T] = Field(default_factory=list)
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
