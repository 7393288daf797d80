"""Runtime settings loaded from the environment (and a local .env file)."""

import logging
import os
from dataclasses import dataclass
from functools import cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Environment-derived configuration.

    Attributes:
        python_micro_server: Base URL of the remote retrieval service
        openai_model: Chat model used by LLM-driven strategies
        embedding_model: Embedding model used for per-call vector stores
        request_timeout: Timeout in seconds for remote retrieval requests
    """

    python_micro_server: Optional[str] = None
    openai_model: str = "gpt-5-mini"
    embedding_model: str = "text-embedding-3-small"
    request_timeout: float = 30.0

    def require_micro_server(self) -> str:
        """Return the remote service base URL without a trailing slash."""
        if not self.python_micro_server:
            raise ValueError("PYTHON_MICRO_SERVER environment variable not set")
        return self.python_micro_server.rstrip("/")


@cache
def get_settings() -> Settings:
    """
    Get or create the process-wide Settings instance.

    Loads a .env file if present, then reads the environment. Call
    ``get_settings.cache_clear()`` to pick up environment changes.
    """
    load_dotenv()

    timeout = os.getenv("REMOTE_REQUEST_TIMEOUT")
    settings = Settings(
        python_micro_server=os.getenv("PYTHON_MICRO_SERVER"),
        openai_model=os.getenv("OPENAI_MODEL", Settings.openai_model),
        embedding_model=os.getenv("OPENAI_EMBEDDING_MODEL", Settings.embedding_model),
        request_timeout=float(timeout) if timeout else Settings.request_timeout,
    )

    logger.info(
        f"Loaded settings (model={settings.openai_model}, "
        f"embeddings={settings.embedding_model})"
    )
    return settings
