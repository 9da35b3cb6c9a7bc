"""Embedding providers: OpenAI-compatible HTTP embedding services."""

from faqhub.embeddings.base import EmbeddingProvider, EmbeddingResponseError
from faqhub.embeddings.factory import available_providers, get_embedding_provider

__all__ = [
    "EmbeddingProvider",
    "EmbeddingResponseError",
    "available_providers",
    "get_embedding_provider",
]
