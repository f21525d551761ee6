"""Request hooks shared by every route.

Trace ids + structlog contextvars, plus an in-process visitor counter with a
snapshot endpoint for local development.
"""
