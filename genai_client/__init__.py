"""
Async client for a generative-AI JSON/HTTP API.

Every public operation returns an OperationResult instead of raising for
expected failures (bad input, API errors, network faults, cancellation).
"""

from .client import GenAIClient
from .config import OpenAIOptions, get_options
from .errors import ConfigurationError, OperationCancelled, OperationFailed, PayloadError
from .models.result import OperationResult
from .transport.cancellation import CancellationToken

__all__ = [
    "GenAIClient",
    "OpenAIOptions",
    "get_options",
    "OperationResult",
    "CancellationToken",
    "ConfigurationError",
    "PayloadError",
    "OperationCancelled",
    "OperationFailed",
]

__version__ = "0.1.0"
