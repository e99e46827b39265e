"""Tests for CallContext."""

import asyncio

import pytest

from shodan_sdk._internal.dispatch.context import CallContext
from shodan_sdk.exceptions import ShodanCancelledError, ShodanTimeoutError


async def _slow(result: str, delay: float = 10.0, events: list[str] | None = None) -> str:
    try:
        await asyncio.sleep(delay)
    except asyncio.CancelledError:
        if events is not None:
            events.append("cancelled")
        raise
    return result


class TestCallContext:
    """Tests for CallContext state."""

    def test_new_context_is_active(self):
        """Should start neither cancelled nor expired."""
        context = CallContext()
        assert context.cancelled is False
        assert context.deadline is None
        assert context.remaining() is None
        context.check()

    def test_cancel(self):
        """Should report cancellation after cancel()."""
        context = CallContext()
        context.cancel()
        assert context.cancelled is True
        with pytest.raises(ShodanCancelledError):
            context.check()

    def test_expired_deadline(self):
        """Should raise a timeout once the deadline has passed."""
        context = CallContext(timeout=0)
        assert context.remaining() == 0.0
        with pytest.raises(ShodanTimeoutError):
            context.check()

    def test_negative_timeout_rejected(self):
        """Should reject negative timeouts."""
        with pytest.raises(ValueError):
            CallContext(timeout=-1)


class TestCallContextRun:
    """Tests for CallContext.run()."""

    async def test_returns_result(self):
        """Should return the awaited result when it finishes first."""
        context = CallContext(timeout=5)
        assert await context.run(_slow("done", delay=0)) == "done"

    async def test_propagates_errors(self):
        """Should re-raise errors from the awaited operation."""

        async def boom() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await CallContext().run(boom())

    async def test_cancel_aborts_operation(self):
        """Should abort the operation and raise promptly on cancel()."""
        context = CallContext()
        events: list[str] = []
        asyncio.get_running_loop().call_later(0.05, context.cancel)

        with pytest.raises(ShodanCancelledError):
            await asyncio.wait_for(context.run(_slow("late", events=events)), timeout=2)
        assert events == ["cancelled"]

    async def test_deadline_aborts_operation(self):
        """Should abort the operation once the deadline passes."""
        context = CallContext(timeout=0.05)
        events: list[str] = []

        with pytest.raises(ShodanTimeoutError):
            await asyncio.wait_for(context.run(_slow("late", events=events)), timeout=2)
        assert events == ["cancelled"]

    async def test_already_cancelled_never_runs(self):
        """Should not start the operation when already cancelled."""
        context = CallContext()
        context.cancel()
        started: list[bool] = []

        async def op() -> None:
            started.append(True)

        with pytest.raises(ShodanCancelledError):
            await context.run(op())
        assert started == []

    async def test_task_cancellation_propagates(self):
        """Cancelling the calling task should cancel the operation too."""
        context = CallContext()
        events: list[str] = []
        task = asyncio.ensure_future(context.run(_slow("late", events=events)))
        await asyncio.sleep(0.01)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0)
        assert events == ["cancelled"]
