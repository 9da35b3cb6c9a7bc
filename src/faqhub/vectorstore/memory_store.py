"""In-memory vector store: numpy brute force, no infrastructure.

Distances are squared L2, the same metric as a default Chroma collection.
"""

from __future__ import annotations

import logging

import numpy as np

from faqhub.vectorstore.base import VectorStore
from faqhub.vectorstore.schemas import MetadataFilter, SearchResult, VectorRecord

logger = logging.getLogger(__name__)


class MemoryStore(VectorStore):
    """Dict-backed store keyed by record id."""

    def __init__(self, dimension: int | None = None):
        self._dimension = dimension
        self._records: dict[str, VectorRecord] = {}

    def add(self, records: list[VectorRecord]) -> int:
        for record in records:
            if self._dimension is None:
                self._dimension = len(record.embedding)
            elif len(record.embedding) != self._dimension:
                raise ValueError(
                    f"Embedding dimension {len(record.embedding)} does not match "
                    f"store dimension {self._dimension}"
                )
            self._records[record.id] = record

        logger.debug("MemoryStore added %d records (total: %d)", len(records), self.count())
        return len(records)

    def search(
        self,
        query_embedding: list[float],
        top_k: int = 3,
        metadata_filter: MetadataFilter | None = None,
    ) -> list[SearchResult]:
        candidates = [
            r for r in self._records.values()
            if metadata_filter is None or metadata_filter.matches(r.metadata)
        ]
        if not candidates:
            return []

        matrix = np.array([r.embedding for r in candidates], dtype=np.float32)
        query = np.array(query_embedding, dtype=np.float32)
        distances = np.sum((matrix - query) ** 2, axis=1)

        order = np.argsort(distances, kind="stable")[:top_k]
        return [
            SearchResult(
                id=candidates[i].id,
                text=candidates[i].text,
                distance=float(distances[i]),
                metadata=dict(candidates[i].metadata),
            )
            for i in order
        ]

    def count(self) -> int:
        return len(self._records)

    def delete(self, ids: list[str]) -> int:
        deleted = 0
        for record_id in ids:
            if self._records.pop(record_id, None) is not None:
                deleted += 1
        return deleted

    def clear(self) -> None:
        self._records.clear()
