from functools import cache

from langgraph.graph import START, END
from langgraph.graph.state import StateGraph, CompiledStateGraph

from .agent_state import AgentState
from .nodes import local_retrieval_node, model_node, remote_retrieval_node, route_retrieval


@cache
def get_graph() -> CompiledStateGraph:
    """Retrieve from a local strategy or a remote retriever, then answer."""
    graph = StateGraph(AgentState)
    graph.add_node("local_retrieval_node", local_retrieval_node)
    graph.add_node("remote_retrieval_node", remote_retrieval_node)
    graph.add_node("model_node", model_node)

    graph.add_conditional_edges(
        START,
        route_retrieval,
        {"local": "local_retrieval_node", "remote": "remote_retrieval_node"},
    )
    graph.add_edge("local_retrieval_node", "model_node")
    graph.add_edge("remote_retrieval_node", "model_node")
    graph.add_edge("model_node", END)

    return graph.compile()
