"""ASGI middleware layers.

Each layer holds the next app as ``self.app`` and is itself an ASGI app, so
layers stack by wrapping. Entry order, outermost first::

    ErrorTranslatorMiddleware -> RequestLogMiddleware -> TimeoutMiddleware -> routes
"""

from slowroute.middleware.errors import ErrorTranslatorMiddleware, translate_error
from slowroute.middleware.request_log import RequestLogMiddleware
from slowroute.middleware.timeout import TimeoutMiddleware

__all__ = [
    "ErrorTranslatorMiddleware",
    "RequestLogMiddleware",
    "TimeoutMiddleware",
    "translate_error",
]
