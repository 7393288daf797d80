"""Score-threshold retriever that widens its search until results run out."""

import logging
from typing import Any, Dict, List, Tuple

from langchain_core.callbacks import CallbackManagerForRetrieverRun
from langchain_core.documents import Document as LCDocument
from langchain_core.retrievers import BaseRetriever
from langchain_core.vectorstores import VectorStore
from pydantic import Field, model_validator

from ..vectorstore.store import DocumentStore

logger = logging.getLogger(__name__)


class ScoreThresholdRetriever(BaseRetriever):
    """
    Return up to ``max_k`` documents whose relevance meets a minimum score.

    The candidate pool starts at ``k_increment`` and grows by the same step
    while every fetched candidate passes the threshold and ``max_k`` has not
    been reached.
    """

    vectorstore: VectorStore
    min_similarity_score: float = 0.0
    max_k: int = 5
    k_increment: int = 2
    search_kwargs: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_widths(self) -> "ScoreThresholdRetriever":
        if self.max_k <= 0:
            raise ValueError(f"max_k must be positive, got {self.max_k}")
        if self.k_increment <= 0:
            raise ValueError(f"k_increment must be positive, got {self.k_increment}")
        return self

    def _scored_search(self, query: str, k: int) -> List[Tuple[LCDocument, float]]:
        try:
            return self.vectorstore.similarity_search_with_relevance_scores(
                query, k=k, **self.search_kwargs
            )
        except NotImplementedError:
            # Stores without a relevance function report raw similarity
            return self.vectorstore.similarity_search_with_score(
                query, k=k, **self.search_kwargs
            )

    def _get_relevant_documents(
        self, query: str, *, run_manager: CallbackManagerForRetrieverRun
    ) -> List[LCDocument]:
        current_k = 0
        filtered: List[LCDocument] = []

        while True:
            current_k += self.k_increment
            results = self._scored_search(query, current_k)
            filtered = [
                doc for doc, score in results if score >= self.min_similarity_score
            ]
            if len(filtered) < current_k or current_k >= self.max_k:
                break

        logger.info(
            f"Score threshold search kept {min(len(filtered), self.max_k)} documents "
            f"(k={current_k}, min_score={self.min_similarity_score})"
        )
        return filtered[: self.max_k]


def similarity_score(
    store: DocumentStore,
    min_similarity_score: float = 0.0,
    max_k: int = 5,
    k_increment: int = 2,
) -> ScoreThresholdRetriever:
    """Build a ScoreThresholdRetriever over the store's vector store."""
    return ScoreThresholdRetriever(
        vectorstore=store.vector_store,
        min_similarity_score=min_similarity_score,
        max_k=max_k,
        k_increment=k_increment,
    )
