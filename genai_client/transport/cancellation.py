"""
Explicit cancellation signal.

A CancellationToken is passed down through every suspension point of a call
(validation, stream draining, the network request) instead of relying on
ambient task state. One token can cancel a whole call tree.

Token cancellation surfaces as a cancelled transport_fault result. It is
distinct from asyncio task cancellation, which propagates as usual.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from genai_client.errors import OperationCancelled

T = TypeVar("T")


class CancellationToken:
    """Cooperative, one-shot cancellation flag."""

    def __init__(self):
        self._cancelled = False
        self._event: Optional[asyncio.Event] = None
        self._timer: Optional[asyncio.TimerHandle] = None

    @classmethod
    def none(cls) -> "CancellationToken":
        """A fresh token nobody will cancel."""
        return cls()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        if self._cancelled:
            return
        self._cancelled = True
        if self._event is not None:
            self._event.set()
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def cancel_after(self, delay_s: float) -> None:
        """Schedule cancellation on the running loop."""
        if self._cancelled:
            return
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = loop.call_later(delay_s, self.cancel)

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelled("Operation was cancelled.")

    async def wait(self) -> None:
        """Suspend until cancellation is requested."""
        if self._event is None:
            self._event = asyncio.Event()
            if self._cancelled:
                self._event.set()
        await self._event.wait()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """
        Await `awaitable` unless cancellation wins the race.

        Raises:
            OperationCancelled: token cancelled before or during the await.
                The inner task is cancelled and awaited before raising.
        """
        if self._cancelled:
            # close an unawaited coroutine to avoid a "never awaited" warning
            close = getattr(awaitable, "close", None)
            if close is not None:
                close()
            self.raise_if_cancelled()

        work = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self.wait())
        try:
            done, _ = await asyncio.wait(
                {work, waiter}, return_when=asyncio.FIRST_COMPLETED
            )
        except BaseException:
            work.cancel()
            waiter.cancel()
            raise

        if work in done:
            waiter.cancel()
            return work.result()

        work.cancel()
        try:
            await work
        except asyncio.CancelledError:
            pass
        except Exception:
            # the work failed while being torn down; cancellation still wins
            pass
        raise OperationCancelled("Operation was cancelled.")
