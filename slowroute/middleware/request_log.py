"""ASGI middleware that logs each request before dispatch."""

from typing import Callable, Any, Optional
import uuid

from slowroute.obs.context import request_id_var
from slowroute.obs.logger import LogSink, log_event


class RequestLogMiddleware:
    def __init__(self, app: Callable, sink: Optional[LogSink] = None):
        self.app = app
        self.sink = sink or log_event

    async def __call__(self, scope: dict, receive: Callable, send: Callable[[dict], Any]):
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        # Also kept on the scope for outer layers, which run after the reset
        req_id = str(uuid.uuid4())
        scope["request_id"] = req_id
        token = request_id_var.set(req_id)
        try:
            self.sink(
                "request_received",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
            )
            await self.app(scope, receive, send)
        finally:
            request_id_var.reset(token)
