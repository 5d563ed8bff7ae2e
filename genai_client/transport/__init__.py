"""
Transport layer.

Pure I/O: cancellation, multipart encoding, HTTP execution, and the
caller-side retry hook. No resource-specific logic lives here.
"""

from .cancellation import CancellationToken
from .http import ApiHttpService
from .multipart import MultipartPayload, encode_translation, read_stream
from .retry import NoRetryPolicy, RetryPolicy, TransientFaultRetryPolicy, run_with_retry

__all__ = [
    "CancellationToken",
    "ApiHttpService",
    "MultipartPayload",
    "encode_translation",
    "read_stream",
    "RetryPolicy",
    "NoRetryPolicy",
    "TransientFaultRetryPolicy",
    "run_with_retry",
]
