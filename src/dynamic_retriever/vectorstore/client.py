"""Weaviate client wrapper exposing collections as LangChain vector stores."""

import logging
import os
from functools import cache
from typing import Optional

import weaviate
from dotenv import load_dotenv
from langchain_core.embeddings import Embeddings
from langchain_weaviate import WeaviateVectorStore

logger = logging.getLogger(__name__)

# Chunk properties returned alongside the text of every search hit
CHUNK_ATTRIBUTES = ["document_id", "chunk_index", "chunk_size"]


class WeaviateClient:
    """Wrapper around the Weaviate client for the persistent document store."""

    def __init__(self, api_key: Optional[str] = None):
        """Initialize Weaviate client."""
        if not api_key:
            raise ValueError(
                "OpenAI API key is required for text2vec-openai vectorizer"
            )

        self.api_key = api_key

        # The collection vectorizer calls OpenAI with this key
        self.client = weaviate.connect_to_local(headers={"X-OpenAI-Api-Key": api_key})

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the Weaviate client connection."""
        self.client.close()

    def collection_exists(self, collection_name: str) -> bool:
        """Check if collection exists."""
        return self.client.collections.exists(collection_name)

    def get_collection_count(self, collection_name: str) -> int:
        """Get the number of objects in a collection."""
        if not self.collection_exists(collection_name):
            return 0

        collection = self.client.collections.get(collection_name)
        return collection.aggregate.over_all(total_count=True).total_count

    def vector_store(
        self, collection_name: str, embedding: Optional[Embeddings] = None
    ) -> WeaviateVectorStore:
        """
        Expose a collection as a LangChain vector store.

        Args:
            collection_name: Name of the Weaviate collection
            embedding: Embedding model for client-side vectors; when omitted
                the collection's own vectorizer handles queries

        Returns:
            WeaviateVectorStore bound to the collection
        """
        logger.info(f"Opening vector store for collection: {collection_name}")
        return WeaviateVectorStore(
            client=self.client,
            index_name=collection_name,
            text_key="text",
            embedding=embedding,
            attributes=CHUNK_ATTRIBUTES,
        )


@cache
def get_weaviate_client() -> WeaviateClient:
    """
    Get or create a singleton WeaviateClient instance.

    Uses functools.cache to ensure only one client is created per process.

    Raises:
        ValueError: If OPENAI_API_KEY environment variable is not set
    """
    load_dotenv()
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY environment variable not set")

    logger.info("Creating singleton WeaviateClient instance")
    return WeaviateClient(api_key=api_key)
