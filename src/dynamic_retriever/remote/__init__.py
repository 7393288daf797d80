"""Client for the remote retrieval service."""

from .client import RemoteRetrievalError, base_request, named_remote_retrieve

__all__ = ["RemoteRetrievalError", "base_request", "named_remote_retrieve"]
