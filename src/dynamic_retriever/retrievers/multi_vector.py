"""Multi-vector retriever backed by a byte store of source documents."""

import logging

from langchain.retrievers import MultiVectorRetriever
from langchain_core.stores import InMemoryByteStore

from ..vectorstore.store import DocumentStore

logger = logging.getLogger(__name__)


def multi_vector(store: DocumentStore, id_key: str = "doc_id") -> MultiVectorRetriever:
    """
    Pair the store's vectors with an empty byte store of full documents.

    Vector hits are mapped through their ``id_key`` metadata to documents in
    the byte store; populating that store is left to the caller.
    """
    logger.info("Creating MultiVectorRetriever")
    return MultiVectorRetriever(
        vectorstore=store.vector_store,
        byte_store=InMemoryByteStore(),
        id_key=id_key,
    )
