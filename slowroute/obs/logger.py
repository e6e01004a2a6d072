"""Structured JSON logging to stdout.

Every component that logs takes a ``sink`` callable with the signature of
:func:`log_event`, so tests can swap in a capturing sink.
"""

from typing import Any, Callable, Dict
from datetime import datetime, timezone
import json

from slowroute.obs.context import request_id_var


LogSink = Callable[..., None]


def log_event(event: str, **fields: Any) -> None:
    now = datetime.now(timezone.utc).isoformat()
    payload: Dict[str, Any] = {
        "ts": now,
        "level": fields.pop("level", "INFO"),
        "event": event,
        "request_id": request_id_var.get(),
    }
    payload.update(fields)

    try:
        print(json.dumps(payload, separators=(",", ":"), default=str), flush=True)
    except (TypeError, ValueError, OSError):
        # Never let logging take a request down
        pass
