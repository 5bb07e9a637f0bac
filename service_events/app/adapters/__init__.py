"""
Adapters package for the Events Service.

Contains the HTTP client for the remote event source (data document and
JSON Schema). Keep adapters thin: no retries here, the provider owns the
retry budget for the whole cycle.
"""

from .event_source_client import EventSourceClient

__all__ = ["EventSourceClient"]
