"""Shared test fixtures and utilities."""

import pytest
from langchain_core.documents import Document as LCDocument
from langchain_core.embeddings import DeterministicFakeEmbedding

from dynamic_retriever.config import get_settings
from dynamic_retriever.vectorstore.store import DocumentStore

TOPICS = [
    "Thyroid hormones regulate metabolism and energy levels across the body.",
    "Weaviate stores vectors alongside objects so similarity search stays fast.",
    "Recursive character splitting keeps paragraphs together before sentences.",
    "Reciprocal rank fusion merges ranked lists from several query variants.",
    "Time weighted retrieval favours memories that were accessed recently.",
    "Self querying turns natural language filters into structured metadata queries.",
    "Parent document retrieval searches small chunks and returns larger context.",
    "Contextual compression keeps only the sentences relevant to the question.",
]


def _make_chunks(count: int, repeat: int = 1) -> list[LCDocument]:
    """Build chunk documents with the metadata written at ingestion time."""
    documents = []
    for index in range(count):
        text = " ".join([TOPICS[index % len(TOPICS)]] * repeat)
        documents.append(
            LCDocument(
                page_content=text,
                metadata={
                    "document_id": index,
                    "chunk_index": index % 2,
                    "chunk_size": len(text),
                },
            )
        )
    return documents


@pytest.fixture
def embeddings():
    """Deterministic fake embedding model."""
    return DeterministicFakeEmbedding(size=32)


@pytest.fixture
def chunk_documents():
    """Six short chunk documents."""
    return _make_chunks(6)


@pytest.fixture
def store(embeddings, chunk_documents):
    """In-memory document store holding the sample chunks."""
    return DocumentStore.in_memory(embeddings, chunk_documents)


@pytest.fixture
def empty_store(embeddings):
    """In-memory document store with no documents."""
    return DocumentStore.in_memory(embeddings)


@pytest.fixture
def remote_settings(monkeypatch):
    """Point the remote client at a test host and reset cached settings."""
    monkeypatch.setenv("PYTHON_MICRO_SERVER", "http://retrievers.test/")
    monkeypatch.delenv("REMOTE_REQUEST_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def make_chunks():
    """Factory for chunk documents: make_chunks(count, repeat=1)."""
    return _make_chunks
