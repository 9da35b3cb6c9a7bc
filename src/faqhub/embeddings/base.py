"""Abstract base class for embedding providers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmbeddingResponseError(ValueError):
    """Raised when the embedding service answers without a usable vector."""


class EmbeddingProvider(ABC):
    """Interface for text embedding services."""

    @abstractmethod
    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Embed several texts.

        Args:
            texts: Strings to embed.

        Returns:
            List of embedding vectors (same order as input).
        """

    @abstractmethod
    def embed_query(self, query: str) -> list[float]:
        """Embed a single search query.

        Args:
            query: The search query.

        Returns:
            Embedding vector.
        """

    def embed_text(self, text: str) -> list[float]:
        """Embed a single document chunk."""
        return self.embed_texts([text])[0]

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Return the embedding dimensionality."""

    @classmethod
    def provider_name(cls) -> str:
        """Return human-readable provider name."""
        return cls.__name__

    def close(self) -> None:
        """Release resources held by the provider (connections, sessions)."""

    def __enter__(self) -> EmbeddingProvider:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
