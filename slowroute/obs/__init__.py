"""Observability helpers.

Structured stdout logging and request-scoped context shared by the
middleware layers.
"""

__all__ = [
    "logger",
    "context",
]
