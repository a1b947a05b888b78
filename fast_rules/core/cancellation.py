from __future__ import annotations

import asyncio
from typing import Awaitable, Set, TypeVar

from fast_rules.exceptions.common_exceptions import OperationCancelledException

T = TypeVar("T")


class CancellationToken:
    """
    Cooperative cancellation signal threaded into asynchronous validity checks.

    A check that honours the token either polls `raise_if_cancellation_requested()`
    at its suspension points or wraps its awaitables with `guard()`. A check that
    ignores the token simply completes.

    Example usage:
        token = CancellationToken()
        task = asyncio.create_task(validator.validate_async(context, token))
        token.cancel()
        await task  # raises OperationCancelledException
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._waiters: Set[asyncio.Event] = set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        for waiter in self._waiters:
            waiter.set()

    def raise_if_cancellation_requested(self) -> None:
        if self._cancelled:
            raise OperationCancelledException()

    async def wait(self) -> None:
        """
        Suspend until `cancel()` is called.

        Each call waits on its own event, created in the running loop, so one
        token can be shared by runs on different event loops.
        """
        if self._cancelled:
            return
        waiter = asyncio.Event()
        self._waiters.add(waiter)
        try:
            await waiter.wait()
        finally:
            self._waiters.discard(waiter)

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """
        Await `awaitable` unless the token fires first.

        Raises:
            OperationCancelledException: If the token is, or becomes, cancelled.
        """
        if self._cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise OperationCancelledException()

        work = asyncio.ensure_future(awaitable)
        cancelled = asyncio.ensure_future(self.wait())
        try:
            await asyncio.wait({work, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            work.cancel()
            raise
        finally:
            cancelled.cancel()

        if work.done():
            return work.result()

        work.cancel()
        raise OperationCancelledException()

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CancellationToken(cancelled={self._cancelled!r})"


__all__ = [
    "CancellationToken",
]
