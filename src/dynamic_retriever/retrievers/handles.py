"""Retriever handles returned to callers: live per-query or fixed pre-fetched."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from langchain_core.retrievers import BaseRetriever

from .base import Document
from .normalize import normalize_documents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiveRetriever:
    """
    Handle that runs a LangChain retriever for every query.

    The wrapped retriever owns any per-call vector store it was built with,
    so the store lives exactly as long as this handle.
    """

    strategy: str
    retriever: BaseRetriever
    prefetched = False

    def retrieve(self, query: str) -> List[Document]:
        documents = normalize_documents(self.retriever.invoke(query))
        logger.info(
            f"Strategy {self.strategy} retrieved {len(documents)} documents "
            f"for query: {query[:50]}..."
        )
        return documents

    async def aretrieve(self, query: str) -> List[Document]:
        return normalize_documents(await self.retriever.ainvoke(query))


@dataclass(frozen=True)
class FixedRetriever:
    """Handle over documents that were already fetched; the query is ignored."""

    documents: Tuple[Document, ...]
    source: str = ""
    prefetched = True

    def retrieve(self, query: Optional[str] = None) -> List[Document]:
        return list(self.documents)

    async def aretrieve(self, query: Optional[str] = None) -> List[Document]:
        return list(self.documents)


RetrieverHandle = Union[LiveRetriever, FixedRetriever]
