"""Request deadline middleware.

Races the inner app against a fixed deadline. When the deadline wins, the
inner task is cancelled, anything it still tries to send is dropped, and
:class:`~slowroute.errors.Elapsed` is raised for the error translator.
"""

import asyncio
from typing import Callable, Any

from slowroute.errors import Elapsed


def _discard_outcome(task: "asyncio.Future") -> None:
    # Retrieve the abandoned task's exception so asyncio does not report it
    if not task.cancelled():
        task.exception()


class TimeoutMiddleware:
    def __init__(self, app: Callable, timeout_ms: int = 300):
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        self.app = app
        self.timeout_ms = timeout_ms

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    async def __call__(self, scope: dict, receive: Callable, send: Callable[[dict], Any]):
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        expired = False

        async def send_wrapper(message: dict):
            if expired:
                return
            await send(message)

        # asyncio.wait arms its timer in the same step the task is scheduled,
        # before the inner app runs a single line
        inner = asyncio.ensure_future(self.app(scope, receive, send_wrapper))
        try:
            done, _ = await asyncio.wait({inner}, timeout=self.timeout_seconds)
        except asyncio.CancelledError:
            inner.cancel()
            raise

        if inner in done:
            # Propagates the inner app's own exception unchanged
            inner.result()
            return

        expired = True
        inner.add_done_callback(_discard_outcome)
        inner.cancel()
        raise Elapsed()
