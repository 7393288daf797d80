import logging
from typing import Literal

from langchain_core.messages import HumanMessage, SystemMessage

from ..llm import get_chat_model
from ..remote.client import named_remote_retrieve
from ..retrievers.factory import is_local_strategy, make_retriever
from ..vectorstore.client import get_weaviate_client
from ..vectorstore.store import DocumentStore
from .agent_state import AgentState

logger = logging.getLogger(__name__)


def route_retrieval(state: AgentState) -> Literal["local", "remote"]:
    """Local strategies query the collection; any other name is a remote retriever id."""
    if is_local_strategy(state["retrieval_strategy"]):
        return "local"
    return "remote"


def local_retrieval_node(state: AgentState) -> dict:
    """
    Build a strategy over the Weaviate collection named in the state and retrieve.

    Args:
        state: Agent state containing collection, strategy and query

    Returns:
        Dictionary with documents key containing retrieved documents
    """
    query = state["query"]
    store = DocumentStore.from_weaviate(get_weaviate_client(), state["collection"])
    handle = make_retriever(state["retrieval_strategy"], store, query=query)

    return {"documents": handle.retrieve(query)}


def remote_retrieval_node(state: AgentState) -> dict:
    """Fetch documents from the named remote retriever."""
    strategy = state["retrieval_strategy"]
    query = state["query"]

    logger.info(f"Delegating retrieval to remote retriever: {strategy}")
    handle = named_remote_retrieve(query, strategy)

    return {"documents": handle.retrieve(query)}


def model_node(state: AgentState) -> dict:
    """
    Model node that generates an answer based on retrieved documents.

    Args:
        state: Agent state containing query and retrieved documents

    Returns:
        Dictionary with messages key containing the full conversation
    """
    query = state["query"]
    documents = state["documents"]

    context = "\n\n".join([doc.content for doc in documents])

    system_message = SystemMessage(
        content=(
            "You are a helpful assistant that answers questions based on the provided context. "
            "Use only the information from the context to answer the question. "
            "If the context doesn't contain enough information, say so."
        )
    )

    user_message = HumanMessage(
        content=f"Context:\n{context}\n\nQuestion: {query}\n\nAnswer:"
    )

    response = get_chat_model().invoke([system_message, user_message])

    return {"messages": [system_message, user_message, response]}
