"""Default OpenAI models used when callers do not inject their own."""

from langchain_openai import ChatOpenAI, OpenAIEmbeddings

from .config import get_settings


def get_chat_model() -> ChatOpenAI:
    """Create the chat model used by LLM-driven strategies (uses OPENAI_API_KEY)."""
    return ChatOpenAI(model=get_settings().openai_model, temperature=0.0)


def get_embeddings() -> OpenAIEmbeddings:
    """Create the embedding model used to index per-call vector stores."""
    return OpenAIEmbeddings(model=get_settings().embedding_model)
