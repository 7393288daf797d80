from typing import List

from typing_extensions import Annotated, TypedDict

from langgraph.graph import add_messages
from langchain_core.messages import AnyMessage

from ..retrievers.base import Document


class AgentState(TypedDict):
    query: str
    messages: Annotated[List[AnyMessage], add_messages]
    collection: str
    # A local strategy name, or the id of a retriever on the remote service
    retrieval_strategy: str
    documents: List[Document]
