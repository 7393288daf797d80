"""Time-weighted retriever: similarity combined with recency of access."""

import logging
from typing import Optional

from langchain.retrievers import TimeWeightedVectorStoreRetriever
from langchain_core.embeddings import Embeddings

from ..vectorstore.store import DocumentStore
from .seeding import fetch_seed_documents, new_ephemeral_store

logger = logging.getLogger(__name__)


def time_weighted(
    store: DocumentStore,
    query: str,
    embeddings: Optional[Embeddings] = None,
    search_k: int = 2,
) -> TimeWeightedVectorStoreRetriever:
    """
    Build a recency-aware retriever over a fresh in-memory store.

    Seed documents fetched from ``store`` for ``query`` are added to the
    memory stream before the retriever is returned.

    Args:
        store: Base document store to fetch seed documents from
        query: Current query text used for the seeding pass
        embeddings: Embedding model for the in-memory index
        search_k: Number of candidates fetched by similarity per query
    """
    retriever = TimeWeightedVectorStoreRetriever(
        vectorstore=new_ephemeral_store(store, embeddings),
        memory_stream=[],
        search_kwargs={"k": search_k},
    )

    documents = fetch_seed_documents(store, query)
    if documents:
        retriever.add_documents(documents)

    logger.info(f"Created TimeWeightedVectorStoreRetriever with {len(documents)} memories")
    return retriever
