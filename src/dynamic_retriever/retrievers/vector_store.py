"""Plain vector store retriever."""

from langchain_core.vectorstores import VectorStoreRetriever

from ..vectorstore.store import DocumentStore


def vector_store(store: DocumentStore) -> VectorStoreRetriever:
    """Return the store's own retriever unchanged."""
    return store.as_retriever()
