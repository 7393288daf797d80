"""Retrieve-then-answer agent graph."""

from .graph import get_graph

__all__ = ["get_graph"]
