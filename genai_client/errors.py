"""
Exception types for the client core.

Only ConfigurationError is allowed to escape a public operation; it signals
a programmer error (missing collaborator or configuration). The others are
internal signals converted into OperationResult failures by the executor,
or raised on explicit request via OperationResult.unwrap().
"""

from typing import Optional


class ConfigurationError(ValueError):
    """Required configuration or collaborator is missing."""

    def __init__(self, setting: str, detail: str = ""):
        self.setting = setting
        self.detail = detail
        message = f"Missing or invalid configuration: {setting}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class PayloadError(ValueError):
    """
    Outbound payload cannot be assembled from the request.

    Raised before any multipart part is built. Surfaced to callers as a
    caller_input_error result citing `field`.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class OperationCancelled(Exception):
    """Cancellation was requested through a CancellationToken."""


class OperationFailed(Exception):
    """Raised by OperationResult.unwrap() when the result is a failure."""

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"{result.status} (status_code={result.status_code}): {result.error_message}"
        )
