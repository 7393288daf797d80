"""Shared steps for strategies that index a per-call copy of the store."""

import logging
from typing import List, Optional

from langchain_core.documents import Document as LCDocument
from langchain_core.embeddings import Embeddings

from ..llm import get_embeddings
from ..vectorstore.store import DocumentStore, EphemeralVectorStore

logger = logging.getLogger(__name__)


def resolve_embeddings(
    store: DocumentStore, embeddings: Optional[Embeddings] = None
) -> Embeddings:
    """Pick the embedding model for a per-call store: explicit, the store's, or the default."""
    if embeddings is not None:
        return embeddings
    if store.embeddings is not None:
        return store.embeddings
    return get_embeddings()


def new_ephemeral_store(
    store: DocumentStore, embeddings: Optional[Embeddings] = None
) -> EphemeralVectorStore:
    return EphemeralVectorStore(embedding=resolve_embeddings(store, embeddings))


def fetch_seed_documents(store: DocumentStore, query: str) -> List[LCDocument]:
    """Run one retrieval pass against the base store to obtain documents to index."""
    documents = store.get_relevant_documents(query)
    if not documents:
        logger.warning(f"No seed documents found for query: {query[:50]}...")
    else:
        logger.info(f"Fetched {len(documents)} seed documents")
    return documents
