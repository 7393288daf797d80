"""Factory for creating retriever handles based on strategy."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseLanguageModel
from langchain_core.retrievers import BaseRetriever

from ..llm import get_chat_model
from ..vectorstore.store import DocumentStore
from .compression import contextual_compression
from .handles import LiveRetriever
from .multi_vector import multi_vector
from .multiquery import multi_query
from .parent_document import parent_document
from .score_threshold import similarity_score
from .self_query import self_query
from .time_weighted import time_weighted
from .vector_store import vector_store

logger = logging.getLogger(__name__)


class StrategyKind(str, Enum):
    CONTEXTUAL_COMPRESSION = "contextual-compression"
    MULTI_QUERY = "multi-query"
    PARENT_DOCUMENT = "parent-document"
    SELF_QUERY = "self-query"
    SIMILARITY_SCORE = "similarity-score"
    TIME_WEIGHTED = "time-weighted"
    VECTOR_STORE = "vector-store"
    MULTI_VECTOR = "multi-vector"


@dataclass
class StrategyRequest:
    """Inputs available to a strategy constructor."""

    store: DocumentStore
    query: Optional[str] = None
    llm: Optional[BaseLanguageModel] = None
    embeddings: Optional[Embeddings] = None

    def require_llm(self) -> BaseLanguageModel:
        if self.llm is None:
            self.llm = get_chat_model()
        return self.llm

    def require_query(self, kind: StrategyKind) -> str:
        if self.query is None:
            raise ValueError(
                f"Strategy {kind.value} indexes documents for the current query; "
                "a query is required"
            )
        return self.query


_BUILDERS: Dict[StrategyKind, Callable[[StrategyRequest], BaseRetriever]] = {
    StrategyKind.CONTEXTUAL_COMPRESSION: lambda r: contextual_compression(
        r.require_llm(), r.store
    ),
    StrategyKind.MULTI_QUERY: lambda r: multi_query(r.require_llm(), r.store),
    StrategyKind.PARENT_DOCUMENT: lambda r: parent_document(
        r.store, r.require_query(StrategyKind.PARENT_DOCUMENT), r.embeddings
    ),
    StrategyKind.SELF_QUERY: lambda r: self_query(
        r.require_llm(),
        r.store,
        r.require_query(StrategyKind.SELF_QUERY),
        r.embeddings,
    ),
    StrategyKind.SIMILARITY_SCORE: lambda r: similarity_score(r.store),
    StrategyKind.TIME_WEIGHTED: lambda r: time_weighted(
        r.store, r.require_query(StrategyKind.TIME_WEIGHTED), r.embeddings
    ),
    StrategyKind.VECTOR_STORE: lambda r: vector_store(r.store),
    StrategyKind.MULTI_VECTOR: lambda r: multi_vector(r.store),
}


def parse_strategy(strategy: Union[StrategyKind, str]) -> StrategyKind:
    """
    Resolve a strategy name to its StrategyKind.

    Raises:
        ValueError: If strategy is not supported
    """
    try:
        return StrategyKind(strategy)
    except ValueError:
        supported = ", ".join(kind.value for kind in StrategyKind)
        raise ValueError(
            f"Unknown retrieval strategy: {strategy}. "
            f"Supported strategies: {supported}"
        ) from None


def is_local_strategy(strategy: Union[StrategyKind, str]) -> bool:
    """True for strategies built here, False for ids served by the remote service."""
    if isinstance(strategy, StrategyKind):
        return True
    return strategy in {kind.value for kind in StrategyKind}


def make_retriever(
    strategy: Union[StrategyKind, str],
    store: DocumentStore,
    *,
    query: Optional[str] = None,
    llm: Optional[BaseLanguageModel] = None,
    embeddings: Optional[Embeddings] = None,
) -> LiveRetriever:
    """
    Factory function to create retriever handles based on strategy.

    Strategies that index a per-call copy of the store (parent-document,
    self-query, time-weighted) fetch and index their documents before this
    function returns.

    Args:
        strategy: The retrieval strategy to use
        store: Base document store
        query: Current query text, required by the seeding strategies
        llm: Chat model for LLM-driven strategies; defaults to the configured model
        embeddings: Embedding model for per-call stores

    Returns:
        A LiveRetriever wrapping the configured LangChain retriever

    Raises:
        ValueError: If strategy is not supported or a required query is missing
    """
    kind = parse_strategy(strategy)
    logger.info(f"Creating retriever for strategy: {kind.value}")

    request = StrategyRequest(store=store, query=query, llm=llm, embeddings=embeddings)
    retriever = _BUILDERS[kind](request)
    return LiveRetriever(strategy=kind.value, retriever=retriever)
