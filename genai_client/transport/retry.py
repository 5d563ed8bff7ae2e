"""
Caller-side retry hook.

The executor never retries. A caller that wants retries wraps the WHOLE
public operation in run_with_retry, which re-invokes it according to a
RetryPolicy.

Never retried:
- caller_input_error / validation_error (same input fails the same way)
- cancelled transport faults
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

from genai_client.errors import OperationCancelled
from genai_client.models.result import OperationResult
from genai_client.transport.cancellation import CancellationToken

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 409, 429, 500, 502, 503, 504})


class RetryPolicy(ABC):
    """Decides whether a finished call should be re-invoked."""

    @abstractmethod
    def should_retry(self, result: OperationResult, attempt: int) -> bool:
        """
        Args:
            result: Result of the attempt that just finished.
            attempt: 1-based number of that attempt.
        """
        raise NotImplementedError

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait before attempt `attempt + 1`."""
        return 0.0


class NoRetryPolicy(RetryPolicy):
    """Default: every call is attempted exactly once."""

    def should_retry(self, result: OperationResult, attempt: int) -> bool:
        return False


class TransientFaultRetryPolicy(RetryPolicy):
    """Retry transport faults and throttling/server errors with backoff."""

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay_s: float = 0.5,
        max_delay_s: float = 8.0,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.max_attempts = max_attempts
        self.base_delay_s = base_delay_s
        self.max_delay_s = max_delay_s

    def should_retry(self, result: OperationResult, attempt: int) -> bool:
        if attempt >= self.max_attempts:
            return False
        if result.status == "transport_fault":
            return not result.cancelled
        if result.status == "api_error":
            return result.status_code in RETRYABLE_STATUS_CODES
        return False

    def delay_for(self, attempt: int) -> float:
        return min(self.base_delay_s * (2 ** (attempt - 1)), self.max_delay_s)


async def run_with_retry(
    call: Callable[[], Awaitable[OperationResult]],
    policy: Optional[RetryPolicy] = None,
    cancellation: Optional[CancellationToken] = None,
) -> OperationResult:
    """
    Invoke `call` until it succeeds or the policy gives up.

    `call` must build a fresh request each time, e.g.
        lambda: runs.get(thread_id, run_id, cancellation=token)
    """
    policy = policy or NoRetryPolicy()
    token = cancellation or CancellationToken.none()
    attempt = 0

    while True:
        attempt += 1
        result = await call()

        if result.is_success or result.status in ("caller_input_error", "validation_error"):
            return result
        if result.cancelled or token.is_cancelled:
            return result
        if not policy.should_retry(result, attempt):
            return result

        delay = policy.delay_for(attempt)
        logger.warning(
            f"Retrying after {result.status} (status_code={result.status_code}). "
            f"attempt={attempt} delay={delay:.2f}s"
        )
        if delay > 0:
            try:
                await token.run(asyncio.sleep(delay))
            except OperationCancelled:
                return OperationResult.cancelled_fault()
