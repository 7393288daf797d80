"""Vector store clients and the document store adapter."""

from .client import WeaviateClient, get_weaviate_client
from .store import DocumentStore, EphemeralVectorStore

__all__ = ["DocumentStore", "EphemeralVectorStore", "WeaviateClient", "get_weaviate_client"]
