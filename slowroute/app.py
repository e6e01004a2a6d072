"""Application factory: routes plus the middleware chain."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from slowroute import __version__
from slowroute.config import Settings, settings as default_settings
from slowroute.middleware import (
    ErrorTranslatorMiddleware,
    RequestLogMiddleware,
    TimeoutMiddleware,
)
from slowroute.obs.logger import LogSink, log_event
from slowroute.routes import router


def create_app(settings: Optional[Settings] = None, sink: Optional[LogSink] = None) -> FastAPI:
    settings = settings or default_settings
    sink = sink or log_event

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sink(
            "listening",
            host=settings.HOST,
            port=settings.PORT,
            timeout_ms=settings.REQUEST_TIMEOUT_MS,
            env=settings.APP_ENV,
        )
        yield
        sink("shutdown")

    app = FastAPI(title="slowroute", version=__version__, lifespan=lifespan)
    app.include_router(router)

    # add_middleware puts the last added layer outermost. The request log
    # must wrap the timeout so timed-out requests are still logged.
    app.add_middleware(TimeoutMiddleware, timeout_ms=settings.REQUEST_TIMEOUT_MS)
    app.add_middleware(RequestLogMiddleware, sink=sink)
    app.add_middleware(ErrorTranslatorMiddleware, sink=sink)
    return app
