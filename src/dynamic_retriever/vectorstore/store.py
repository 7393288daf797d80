"""Document store adapter over persistent and in-memory vector stores."""

import logging
from typing import Callable, Iterable, List, Optional

from langchain_core.documents import Document as LCDocument
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore, VectorStore, VectorStoreRetriever

from .client import WeaviateClient

logger = logging.getLogger(__name__)


class EphemeralVectorStore(InMemoryVectorStore):
    """
    In-memory vector store used for per-call indexes.

    Scores are cosine similarities in [-1, 1]; relevance is rescaled to
    [0, 1] so threshold and recency scoring can compare against it.
    """

    def _select_relevance_score_fn(self) -> Callable[[float], float]:
        return lambda score: (score + 1.0) / 2.0


class DocumentStore:
    """
    A store that returns documents relevant to a text query.

    Wraps an already-constructed LangChain vector store. No validation is
    done here: an unconfigured store fails when it is first queried.
    """

    def __init__(self, vector_store: VectorStore):
        self.vector_store = vector_store

    @classmethod
    def from_weaviate(
        cls,
        client: WeaviateClient,
        collection_name: str,
        embedding: Optional[Embeddings] = None,
    ) -> "DocumentStore":
        """Adapter over a persistent Weaviate collection."""
        return cls(client.vector_store(collection_name, embedding=embedding))

    @classmethod
    def in_memory(
        cls, embedding: Embeddings, documents: Optional[Iterable[LCDocument]] = None
    ) -> "DocumentStore":
        """Adapter over a fresh in-memory store, optionally pre-populated."""
        vector_store = EphemeralVectorStore(embedding=embedding)
        if documents:
            vector_store.add_documents(list(documents))
        return cls(vector_store)

    @property
    def embeddings(self) -> Optional[Embeddings]:
        return self.vector_store.embeddings

    def as_retriever(self, **kwargs) -> VectorStoreRetriever:
        return self.vector_store.as_retriever(**kwargs)

    def get_relevant_documents(self, query: str) -> List[LCDocument]:
        documents = self.as_retriever().invoke(query)
        logger.info(f"Store returned {len(documents)} documents for query: {query[:50]}...")
        return documents

    async def aget_relevant_documents(self, query: str) -> List[LCDocument]:
        return await self.as_retriever().ainvoke(query)
