"""Per-call cancellation and deadline handling."""

import asyncio
import time
from collections.abc import Awaitable
from typing import TypeVar

from shodan_sdk.exceptions import ShodanCancelledError, ShodanTimeoutError

T = TypeVar("T")


class CallContext:
    """Cancellation signal and optional deadline for API calls.

    Pass one to any ShodanClient method via ``context=``. Calling ``cancel()``
    or letting the deadline pass aborts the in-flight exchange; the pending
    call raises ShodanCancelledError or ShodanTimeoutError instead of waiting
    on the transport timeout.

    A context may be shared by several concurrent calls to cancel them
    together. It must be used from the event loop that runs those calls.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        """Initialize the context.

        Args:
            timeout: Optional deadline, in seconds from now.
        """
        if timeout is not None and timeout < 0:
            raise ValueError("timeout must not be negative")
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = asyncio.Event()

    def cancel(self) -> None:
        """Signal cancellation to every call using this context."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def deadline(self) -> float | None:
        """Deadline on the ``time.monotonic()`` clock, if any."""
        return self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """Raise if the context is already cancelled or expired."""
        if self.cancelled:
            raise ShodanCancelledError("call cancelled")
        if self.remaining() == 0.0:
            raise ShodanTimeoutError("call deadline exceeded")

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` unless cancellation or the deadline comes first.

        The losing operation is cancelled and awaited, so no work is left
        running once this returns or raises.
        """
        task = asyncio.ensure_future(awaitable)
        try:
            self.check()
        except BaseException:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            raise

        waiter = asyncio.ensure_future(self._cancelled.wait())
        try:
            done, _ = await asyncio.wait(
                {task, waiter},
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        if task in done:
            return task.result()

        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        if self.cancelled:
            raise ShodanCancelledError("call cancelled")
        raise ShodanTimeoutError("call deadline exceeded")
