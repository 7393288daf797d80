"""Unit tests for ScoreThresholdRetriever."""

from unittest.mock import Mock

import pytest
from langchain_core.documents import Document as LCDocument
from langchain_core.vectorstores import InMemoryVectorStore, VectorStore

from dynamic_retriever.retrievers.factory import make_retriever
from dynamic_retriever.retrievers.score_threshold import (
    ScoreThresholdRetriever,
    similarity_score,
)
from dynamic_retriever.vectorstore.store import DocumentStore


class TestScoreThresholdRetriever:
    """Tests for the widening score-threshold search."""

    @pytest.fixture
    def mock_vectorstore(self):
        """Vector store returning ``available`` documents scored 0.9."""
        vectorstore = Mock(spec=VectorStore)
        available = [LCDocument(page_content=f"doc {i}") for i in range(8)]

        def search(query, k):
            return [(doc, 0.9) for doc in available[:k]]

        vectorstore.similarity_search_with_relevance_scores.side_effect = search
        return vectorstore

    def test_fewer_than_max_k_matches_returns_all(self, embeddings, make_chunks):
        """Test that a store with 3 documents yields 3 results."""
        store = DocumentStore.in_memory(embeddings, make_chunks(3))

        documents = similarity_score(store).invoke("thyroid")

        assert len(documents) == 3

    def test_at_least_max_k_matches_returns_exactly_max_k(self, embeddings, make_chunks):
        """Test that a store with 8 documents yields exactly 5 results."""
        store = DocumentStore.in_memory(embeddings, make_chunks(8))

        documents = similarity_score(store).invoke("thyroid")

        assert len(documents) == 5

    def test_empty_store_returns_empty_list(self, empty_store):
        """Test that an empty store is not an error."""
        assert similarity_score(empty_store).invoke("anything") == []

    def test_pool_grows_by_increment_until_max_k(self, mock_vectorstore):
        """Test the k sequence 2, 4, 6 for a store with plenty of matches."""
        retriever = ScoreThresholdRetriever(vectorstore=mock_vectorstore)

        documents = retriever.invoke("query")

        ks = [
            call.kwargs["k"]
            for call in mock_vectorstore.similarity_search_with_relevance_scores.call_args_list
        ]
        assert ks == [2, 4, 6]
        assert [doc.page_content for doc in documents] == [f"doc {i}" for i in range(5)]

    def test_below_threshold_results_stop_the_search(self):
        """Test that filtered-out candidates end widening early."""
        vectorstore = Mock(spec=VectorStore)
        vectorstore.similarity_search_with_relevance_scores.return_value = [
            (LCDocument(page_content="close"), 0.9),
            (LCDocument(page_content="far"), 0.2),
        ]
        retriever = ScoreThresholdRetriever(
            vectorstore=vectorstore, min_similarity_score=0.5
        )

        documents = retriever.invoke("query")

        assert [doc.page_content for doc in documents] == ["close"]
        vectorstore.similarity_search_with_relevance_scores.assert_called_once_with(
            "query", k=2
        )

    def test_policy_is_configurable(self, mock_vectorstore):
        """Test that max_k and k_increment come from configuration."""
        retriever = ScoreThresholdRetriever(
            vectorstore=mock_vectorstore, max_k=3, k_increment=3
        )

        assert len(retriever.invoke("query")) == 3
        mock_vectorstore.similarity_search_with_relevance_scores.assert_called_once()

    @pytest.mark.parametrize("field", ["max_k", "k_increment"])
    def test_non_positive_widths_raise_error(self, mock_vectorstore, field):
        """Test that zero widths are rejected at construction."""
        with pytest.raises(ValueError, match=field):
            ScoreThresholdRetriever(vectorstore=mock_vectorstore, **{field: 0})

    def test_similarity_score_defaults(self, store):
        """Test the default threshold policy."""
        retriever = similarity_score(store)

        assert retriever.vectorstore is store.vector_store
        assert retriever.min_similarity_score == 0.0
        assert retriever.max_k == 5
        assert retriever.k_increment == 2

    def test_store_without_relevance_function_uses_raw_scores(self):
        """Test the fallback to raw similarity scores."""
        vectorstore = Mock(spec=VectorStore)
        vectorstore.similarity_search_with_relevance_scores.side_effect = (
            NotImplementedError
        )
        vectorstore.similarity_search_with_score.return_value = [
            (LCDocument(page_content="close"), 0.8),
            (LCDocument(page_content="far"), -0.3),
        ]

        documents = ScoreThresholdRetriever(vectorstore=vectorstore).invoke("query")

        assert [doc.page_content for doc in documents] == ["close"]
        vectorstore.similarity_search_with_score.assert_called_once_with("query", k=2)


class TestScoreThresholdOverPlainInMemoryStore:
    """Tests against langchain_core's InMemoryVectorStore, which has no relevance function."""

    @pytest.fixture
    def plain_store(self, embeddings, make_chunks):
        vectorstore = InMemoryVectorStore(embeddings)
        vectorstore.add_documents(make_chunks(8))
        return DocumentStore(vectorstore)

    def test_factory_strategy_retrieves(self, plain_store):
        """Test that the similarity-score strategy runs on a plain store."""
        handle = make_retriever("similarity-score", plain_store)

        documents = handle.retrieve("thyroid")

        assert len(documents) <= 5
        assert all(doc.content for doc in documents)

    def test_permissive_threshold_returns_exactly_max_k(self, plain_store):
        """Test that 8 candidates above the threshold yield exactly 5."""
        retriever = similarity_score(plain_store, min_similarity_score=-1.0)

        assert len(retriever.invoke("thyroid")) == 5

    def test_strict_threshold_keeps_exact_match(self, plain_store, make_chunks):
        """Test that raw cosine scores are compared against the threshold."""
        target = make_chunks(1)[0].page_content
        retriever = similarity_score(plain_store, min_similarity_score=0.99)

        documents = retriever.invoke(target)

        assert [doc.page_content for doc in documents] == [target]
