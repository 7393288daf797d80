"""Parent-document retriever: search small chunks, return their enclosing chunks."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from langchain.retrievers import ParentDocumentRetriever
from langchain_core.callbacks import (
    AsyncCallbackManagerForRetrieverRun,
    CallbackManagerForRetrieverRun,
)
from langchain_core.documents import Document as LCDocument
from langchain_core.embeddings import Embeddings
from langchain_core.stores import InMemoryStore
from langchain_text_splitters import RecursiveCharacterTextSplitter

from ..vectorstore.store import DocumentStore
from .seeding import fetch_seed_documents, new_ephemeral_store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParentDocumentConfig:
    """Chunk sizes and result widths for parent/child chunking."""

    parent_chunk_size: int = 500
    parent_chunk_overlap: int = 0
    child_chunk_size: int = 50
    child_chunk_overlap: int = 0
    child_k: int = 20
    parent_k: int = 5


class CappedParentDocumentRetriever(ParentDocumentRetriever):
    """ParentDocumentRetriever that returns at most ``parent_k`` parents."""

    parent_k: int = 5

    def _get_relevant_documents(
        self, query: str, *, run_manager: CallbackManagerForRetrieverRun
    ) -> List[LCDocument]:
        documents = super()._get_relevant_documents(query, run_manager=run_manager)
        return documents[: self.parent_k]

    async def _aget_relevant_documents(
        self, query: str, *, run_manager: AsyncCallbackManagerForRetrieverRun
    ) -> List[LCDocument]:
        documents = await super()._aget_relevant_documents(
            query, run_manager=run_manager
        )
        return documents[: self.parent_k]


def parent_document(
    store: DocumentStore,
    query: str,
    embeddings: Optional[Embeddings] = None,
    config: ParentDocumentConfig = ParentDocumentConfig(),
) -> CappedParentDocumentRetriever:
    """
    Build a parent-document retriever seeded from the store.

    The documents the store returns for ``query`` are split into parent
    chunks kept in a key-value store and child chunks indexed in a fresh
    in-memory vector store. The retriever is returned only after indexing.

    Args:
        store: Base document store to fetch seed documents from
        query: Current query text used for the seeding pass
        embeddings: Embedding model for the child index
        config: Chunk sizes and result widths

    Returns:
        Seeded CappedParentDocumentRetriever
    """
    retriever = CappedParentDocumentRetriever(
        vectorstore=new_ephemeral_store(store, embeddings),
        docstore=InMemoryStore(),
        parent_splitter=RecursiveCharacterTextSplitter(
            chunk_size=config.parent_chunk_size,
            chunk_overlap=config.parent_chunk_overlap,
        ),
        child_splitter=RecursiveCharacterTextSplitter(
            chunk_size=config.child_chunk_size,
            chunk_overlap=config.child_chunk_overlap,
        ),
        search_kwargs={"k": config.child_k},
        parent_k=config.parent_k,
    )

    documents = fetch_seed_documents(store, query)
    if documents:
        retriever.add_documents(documents)

    logger.info(f"Created ParentDocumentRetriever from {len(documents)} seed documents")
    return retriever
