"""Error translation: the last layer before the server runtime.

Every exception escaping the inner chain becomes an HTML response here.
"""

from typing import Callable, Any, Optional
import html

from fastapi.responses import HTMLResponse

from slowroute.errors import ErrorKind, classify_error, error_message
from slowroute.obs.logger import LogSink, log_event


TIMEOUT_BODY = "<h1>Request took too long</h1>"


def translate_error(exc: BaseException) -> HTMLResponse:
    """Map ``exc`` to the response the client receives. Never raises."""
    if classify_error(exc) is ErrorKind.TIMEOUT:
        return HTMLResponse(TIMEOUT_BODY, status_code=408)

    try:
        message = error_message(exc)
    except Exception:
        message = type(exc).__name__
    body = f"<h1>Unhandled internal error</h1><p>{html.escape(message)}</p>"
    return HTMLResponse(body, status_code=500)


class ErrorTranslatorMiddleware:
    def __init__(self, app: Callable, sink: Optional[LogSink] = None):
        self.app = app
        self.sink = sink or log_event

    async def __call__(self, scope: dict, receive: Callable, send: Callable[[dict], Any]):
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        response_started = False

        async def send_wrapper(message: dict):
            nonlocal response_started
            if message.get("type") == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            kind = classify_error(exc)
            self.sink(
                "request_error",
                level="WARNING" if kind is ErrorKind.TIMEOUT else "ERROR",
                kind=kind.value,
                error=repr(exc),
                path=scope.get("path", ""),
                request_id=scope.get("request_id"),
                response_already_started=response_started,
            )
            if response_started:
                return
            response = translate_error(exc)
            await response(scope, receive, send)
