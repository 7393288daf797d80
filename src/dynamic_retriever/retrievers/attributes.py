"""Metadata fields the self-query model may filter on."""

from langchain.chains.query_constructor.schema import AttributeInfo

# Mirrors the chunk properties of the Weaviate collection
ATTRIBUTE_INFO = [
    AttributeInfo(
        name="document_id",
        description="Numeric identifier of the source document the chunk was cut from",
        type="integer",
    ),
    AttributeInfo(
        name="chunk_index",
        description="Position of the chunk within its source document, starting at 0",
        type="integer",
    ),
    AttributeInfo(
        name="chunk_size",
        description="Number of characters in the chunk",
        type="integer",
    ),
]
