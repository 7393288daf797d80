"""Multi-query retriever using LLM query expansion."""

import logging

from langchain.retrievers.multi_query import MultiQueryRetriever
from langchain_core.language_models import BaseLanguageModel

from ..vectorstore.store import DocumentStore

logger = logging.getLogger(__name__)


def multi_query(llm: BaseLanguageModel, store: DocumentStore) -> MultiQueryRetriever:
    """
    Expand each query into paraphrases and merge their results.

    The model writes alternative phrasings one per line; documents retrieved
    for any phrasing are merged with duplicates removed.
    """
    logger.info("Creating MultiQueryRetriever")
    return MultiQueryRetriever.from_llm(
        retriever=store.as_retriever(),
        llm=llm,
        include_original=False,
    )
