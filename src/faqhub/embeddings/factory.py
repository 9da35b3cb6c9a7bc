"""Embedding provider factory: registry and lazy import.

Providers are always built from settings, so every call returns a new
instance; the caller owns it and closes it when done.
"""

from __future__ import annotations

import importlib
import logging

from faqhub.embeddings.base import EmbeddingProvider

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Provider registry: (provider_key, module_path, class_name)
# ---------------------------------------------------------------------------

_PROVIDER_REGISTRY: list[tuple[str, str, str]] = [
    ("http", "faqhub.embeddings.http_provider", "HTTPEmbeddingProvider"),
]


def get_embedding_provider(
    provider: str = "http",
    **kwargs,
) -> EmbeddingProvider:
    """Build an embedding provider by name.

    Args:
        provider: Registered provider key (``http``).
        **kwargs: Passed to the provider constructor.

    Returns:
        A new ``EmbeddingProvider`` instance.
    """
    key = provider.lower()

    for reg_key, module_path, cls_name in _PROVIDER_REGISTRY:
        if reg_key == key:
            mod = importlib.import_module(module_path)
            cls = getattr(mod, cls_name)
            logger.debug("Creating embedding provider %s", cls_name)
            return cls(**kwargs)

    available = [k for k, _, _ in _PROVIDER_REGISTRY]
    raise ValueError(f"Unknown embedding provider '{provider}'. Available: {available}")


def available_providers() -> list[str]:
    """Return names of registered embedding providers."""
    return [k for k, _, _ in _PROVIDER_REGISTRY]
