"""Configurable retrieval strategies over vector stores and a remote retrieval service."""

from .retrievers import (
    Document,
    FixedRetriever,
    LiveRetriever,
    StrategyKind,
    make_retriever,
    normalize_documents,
)
from .remote import RemoteRetrievalError, base_request, named_remote_retrieve
from .vectorstore import DocumentStore

__all__ = [
    "Document",
    "DocumentStore",
    "FixedRetriever",
    "LiveRetriever",
    "RemoteRetrievalError",
    "StrategyKind",
    "base_request",
    "make_retriever",
    "named_remote_retrieve",
    "normalize_documents",
]
