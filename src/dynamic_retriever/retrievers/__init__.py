"""Retrieval strategies for document search."""

from .base import Document, Retriever
from .factory import StrategyKind, is_local_strategy, make_retriever, parse_strategy
from .handles import FixedRetriever, LiveRetriever, RetrieverHandle
from .normalize import normalize_document, normalize_documents

__all__ = [
    "Document",
    "FixedRetriever",
    "LiveRetriever",
    "Retriever",
    "RetrieverHandle",
    "StrategyKind",
    "is_local_strategy",
    "make_retriever",
    "normalize_document",
    "normalize_documents",
    "parse_strategy",
]
