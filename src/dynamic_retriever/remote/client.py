"""HTTP client for retrievers served by the remote retrieval service."""

import logging
from typing import Any, Optional

import requests

from ..config import get_settings
from ..retrievers.handles import FixedRetriever
from ..retrievers.normalize import normalize_documents

logger = logging.getLogger(__name__)


class RemoteRetrievalError(Exception):
    """Raised when the remote retrieval service rejects or garbles a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _post(path: str, payload: dict, timeout: Optional[float]) -> requests.Response:
    settings = get_settings()
    url = f"{settings.require_micro_server()}{path}"
    if timeout is None:
        timeout = settings.request_timeout

    logger.info(f"POST {url}")
    return requests.post(
        url,
        json=payload,
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )


def _error_message(response: requests.Response) -> Any:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "message" in body:
        return body["message"]
    return body


def base_request(
    query: str, retriever_id: str, *, timeout: Optional[float] = None
) -> requests.Response:
    """
    Send a query to the service's generic query endpoint.

    The response is returned as-is; status and body are left to the caller.

    Args:
        query: The search query text
        retriever_id: Identifier the service uses to pick its retriever
        timeout: Request timeout in seconds (defaults to settings)
    """
    return _post("/api/query", {"query": query, "id": retriever_id}, timeout)


def named_remote_retrieve(
    query: str, retriever_id: str, *, timeout: Optional[float] = None
) -> FixedRetriever:
    """
    Run a named remote retriever and wrap its documents.

    Args:
        query: The search query text
        retriever_id: Name of the remote retriever (e.g. ``graph-rag-li``)
        timeout: Request timeout in seconds (defaults to settings)

    Returns:
        FixedRetriever over the documents the service returned

    Raises:
        RemoteRetrievalError: If the service answers with an error status or
            a body without a well-formed ``documents`` list
    """
    response = _post(f"/api/python-retrievers/{retriever_id}", {"query": query}, timeout)

    if not response.ok:
        message = _error_message(response)
        logger.error(
            f"Remote retriever {retriever_id} failed with status "
            f"{response.status_code}: {message}"
        )
        raise RemoteRetrievalError(
            f"Error fetching server: {message}", status_code=response.status_code
        )

    data = response.json()
    entries = data.get("documents") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise RemoteRetrievalError(
            f"Remote retriever {retriever_id} returned no documents list",
            status_code=response.status_code,
        )

    try:
        documents = normalize_documents(entries)
    except ValueError as e:
        logger.error(f"Remote retriever {retriever_id} returned a malformed entry: {e}")
        raise RemoteRetrievalError(
            f"Remote retriever {retriever_id} returned a malformed entry: {e}",
            status_code=response.status_code,
        ) from e

    logger.info(f"Remote retriever {retriever_id} returned {len(documents)} documents")
    return FixedRetriever(documents=tuple(documents), source=retriever_id)
