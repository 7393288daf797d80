"""Contextual compression: trim retrieved documents to their query-relevant excerpts."""

import logging

from langchain.retrievers import ContextualCompressionRetriever
from langchain.retrievers.document_compressors import LLMChainExtractor
from langchain_core.language_models import BaseLanguageModel

from ..vectorstore.store import DocumentStore

logger = logging.getLogger(__name__)


def contextual_compression(
    llm: BaseLanguageModel, store: DocumentStore
) -> ContextualCompressionRetriever:
    """
    Wrap the store's retriever with an LLM extraction step.

    Documents for which the model finds nothing relevant are dropped.
    """
    logger.info("Creating ContextualCompressionRetriever")
    return ContextualCompressionRetriever(
        base_compressor=LLMChainExtractor.from_llm(llm),
        base_retriever=store.as_retriever(),
    )
