"""Map heterogeneous retrieval results onto the Document record."""

from collections.abc import Mapping
from typing import Any, Iterable, List

from langchain_core.documents import Document as LCDocument

from .base import Document


def normalize_document(entry: Any) -> Document:
    """
    Normalize one result entry.

    Accepts LangChain documents, Document instances, and mappings shaped like
    the remote service's JSON (``content``) or a serialized LangChain document
    (``page_content``). Only content and metadata are kept.

    Raises:
        ValueError: If the entry carries no content or its metadata is not a mapping
    """
    if isinstance(entry, Document):
        return entry

    if isinstance(entry, LCDocument):
        content, metadata = entry.page_content, entry.metadata
    elif isinstance(entry, Mapping):
        content = entry.get("content", entry.get("page_content"))
        metadata = entry.get("metadata")
    else:
        raise ValueError(f"Cannot normalize entry of type {type(entry).__name__}")

    if content is None:
        raise ValueError("Retrieved entry has no content")
    if metadata is not None and not isinstance(metadata, Mapping):
        raise ValueError(
            f"Retrieved entry metadata must be a mapping, got {type(metadata).__name__}"
        )

    return Document(
        content=str(content),
        metadata=dict(metadata) if metadata is not None else None,
    )


def normalize_documents(entries: Iterable[Any]) -> List[Document]:
    return [normalize_document(entry) for entry in entries]
