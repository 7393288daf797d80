"""Base types and protocols for retrieval strategies."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol


@dataclass(frozen=True)
class Document:
    """
    Normalized retrieval result.

    Attributes:
        content: The text content of the document
        metadata: Metadata about the document, or None when the source had none
    """

    content: str
    metadata: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "metadata": self.metadata}


class Retriever(Protocol):
    """Protocol shared by every retriever handle."""

    prefetched: bool

    def retrieve(self, query: str) -> List[Document]:
        """
        Retrieve documents relevant to the query.

        Args:
            query: The search query text

        Returns:
            List of normalized Document objects
        """
        ...
