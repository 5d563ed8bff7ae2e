"""
Operation result envelope.

Every public façade operation returns an OperationResult. Callers branch on
`status`, never on exceptions, for expected failures:

  status               meaning
  ───────────────────  ───────────────────────────────────────────────────
  success              typed value + HTTP status code
  caller_input_error   missing/blank argument, detected before any I/O
  validation_error     request invariant violated, detected before any I/O
  api_error            non-2xx response (decoded error body when possible)
  transport_fault      network / timeout / decode failure / cancellation

Invariant: a success carries a value and no error information; a failure
carries an error message and no value.
"""

from dataclasses import dataclass
from typing import Generic, Literal, Optional, Tuple, TypeVar

from genai_client.errors import OperationFailed
from genai_client.models.common import ErrorDetail

T = TypeVar("T")

ResultStatus = Literal[
    "success",
    "caller_input_error",
    "validation_error",
    "api_error",
    "transport_fault",
]

BAD_REQUEST = 400


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    status: ResultStatus
    value: Optional[T] = None
    status_code: Optional[int] = None

    # failure fields
    error_message: Optional[str] = None
    error_fields: Tuple[str, ...] = ()
    api_error: Optional[ErrorDetail] = None
    raw_body: Optional[str] = None
    cancelled: bool = False
    exception: Optional[BaseException] = None

    def __post_init__(self):
        if self.status == "success":
            if (
                self.error_message is not None
                or self.error_fields
                or self.api_error is not None
                or self.raw_body is not None
                or self.cancelled
                or self.exception is not None
            ):
                raise ValueError("A success result cannot carry error information.")
        else:
            if self.value is not None:
                raise ValueError("A failure result cannot carry a value.")
            if not self.error_message:
                raise ValueError("A failure result requires an error message.")
            if self.cancelled and self.status != "transport_fault":
                raise ValueError("Only transport faults can be cancelled.")

    # ── Constructors ──────────────────────────────────────────

    @classmethod
    def success(cls, value: T, status_code: int = 200) -> "OperationResult[T]":
        return cls(status="success", value=value, status_code=status_code)

    @classmethod
    def caller_input_error(cls, message: str, *fields: str) -> "OperationResult[T]":
        return cls(
            status="caller_input_error",
            status_code=BAD_REQUEST,
            error_message=message,
            error_fields=tuple(fields),
        )

    @classmethod
    def validation_error(cls, message: str, *fields: str) -> "OperationResult[T]":
        return cls(
            status="validation_error",
            status_code=BAD_REQUEST,
            error_message=message,
            error_fields=tuple(fields),
        )

    @classmethod
    def from_api_error(
        cls,
        status_code: int,
        api_error: Optional[ErrorDetail] = None,
        raw_body: Optional[str] = None,
    ) -> "OperationResult[T]":
        message = api_error.message if api_error and api_error.message else f"HTTP {status_code}"
        return cls(
            status="api_error",
            status_code=status_code,
            error_message=message,
            api_error=api_error,
            raw_body=raw_body,
        )

    @classmethod
    def transport_fault(
        cls,
        message: str,
        status_code: Optional[int] = None,
        exception: Optional[BaseException] = None,
    ) -> "OperationResult[T]":
        return cls(
            status="transport_fault",
            status_code=status_code,
            error_message=message,
            exception=exception,
        )

    @classmethod
    def cancelled_fault(cls, message: str = "Operation was cancelled.") -> "OperationResult[T]":
        return cls(status="transport_fault", error_message=message, cancelled=True)

    # ── Accessors ─────────────────────────────────────────────

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled

    def unwrap(self) -> T:
        """Return the value, or raise OperationFailed for a failure."""
        if not self.is_success:
            raise OperationFailed(self)
        return self.value
