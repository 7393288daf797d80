"""Self-query retriever: the model turns natural-language filters into metadata filters."""

import logging
from typing import Optional, Sequence

from langchain.chains.query_constructor.schema import AttributeInfo
from langchain.retrievers.self_query.base import SelfQueryRetriever
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseLanguageModel

from ..vectorstore.store import DocumentStore
from .attributes import ATTRIBUTE_INFO
from .filters import InMemoryFilterTranslator
from .seeding import fetch_seed_documents, new_ephemeral_store

logger = logging.getLogger(__name__)


def self_query(
    llm: BaseLanguageModel,
    store: DocumentStore,
    query: str,
    embeddings: Optional[Embeddings] = None,
    attribute_info: Sequence[AttributeInfo] = ATTRIBUTE_INFO,
) -> SelfQueryRetriever:
    """
    Build a self-query retriever over a re-indexed subset of the store.

    Searches never touch ``store`` directly: the documents it returns for
    ``query`` are indexed into a fresh in-memory store, and the structured
    query produced by the model runs against that index.

    Args:
        llm: Model that writes the structured query
        store: Base document store to fetch documents from
        query: Current query text, also used as the document contents description
        embeddings: Embedding model for the re-indexed store
        attribute_info: Metadata fields the model may filter on
    """
    documents = fetch_seed_documents(store, query)

    reindexed = new_ephemeral_store(store, embeddings)
    if documents:
        reindexed.add_documents(documents)

    logger.info(f"Creating SelfQueryRetriever over {len(documents)} re-indexed documents")
    return SelfQueryRetriever.from_llm(
        llm=llm,
        vectorstore=reindexed,
        document_contents=query,
        metadata_field_info=list(attribute_info),
        structured_query_translator=InMemoryFilterTranslator(),
    )
