import os
import sys
import asyncio
import inspect

import pytest

# Ensure project root is on sys.path so `import slowroute` and `import main` work in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def pytest_pyfunc_call(pyfuncitem):
    """Allow running async tests without pytest-asyncio.

    If the test function is a coroutine, run it in a fresh event loop.
    """
    testfunction = pyfuncitem.obj
    if inspect.iscoroutinefunction(testfunction):
        funcargs = pyfuncitem.funcargs
        sig = inspect.signature(testfunction)
        # Filter only the parameters that the test function expects
        allowed = {name: funcargs[name] for name in sig.parameters.keys() if name in funcargs}
        asyncio.run(testfunction(**allowed))
        return True
    return None


class EventLog:
    """Capturing log sink with the same signature as log_event."""

    def __init__(self):
        self.records = []

    def __call__(self, event, **fields):
        self.records.append((event, fields))

    def named(self, event):
        return [fields for name, fields in self.records if name == event]


@pytest.fixture
def events():
    return EventLog()


@pytest.fixture
def app(events):
    from slowroute.app import create_app
    from slowroute.config import Settings
    return create_app(Settings(REQUEST_TIMEOUT_MS=300), sink=events)


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c