"""Tests for the default self-query attribute info."""

from dynamic_retriever.retrievers.attributes import ATTRIBUTE_INFO
from dynamic_retriever.vectorstore.client import CHUNK_ATTRIBUTES


class TestAttributeInfo:
    """The self-query fields describe the chunk properties the store returns."""

    def test_fields_match_chunk_properties(self):
        """Test that every described field is a property the store returns."""
        assert [info.name for info in ATTRIBUTE_INFO] == CHUNK_ATTRIBUTES

    def test_chunk_properties_are_integers(self):
        """Test that the types match the collection's INT properties."""
        assert {info.name: info.type for info in ATTRIBUTE_INFO} == {
            "document_id": "integer",
            "chunk_index": "integer",
            "chunk_size": "integer",
        }
