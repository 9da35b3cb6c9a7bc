"""Abstract base class for vector stores."""

from __future__ import annotations

from abc import ABC, abstractmethod

from faqhub.vectorstore.schemas import MetadataFilter, SearchResult, VectorRecord


class VectorStore(ABC):
    """Interface for vector store backends."""

    @abstractmethod
    def add(self, records: list[VectorRecord]) -> int:
        """Insert records, overwriting any record with the same id.

        Returns:
            Number of records written.
        """

    @abstractmethod
    def search(
        self,
        query_embedding: list[float],
        top_k: int = 3,
        metadata_filter: MetadataFilter | None = None,
    ) -> list[SearchResult]:
        """Return the ``top_k`` nearest records, closest first."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of records in the store."""

    @abstractmethod
    def delete(self, ids: list[str]) -> int:
        """Delete records by ID.

        Returns:
            Number of records deleted.
        """

    @abstractmethod
    def clear(self) -> None:
        """Delete all records."""

    @classmethod
    def store_name(cls) -> str:
        """Return human-readable store name."""
        return cls.__name__
