"""Chroma vector store: remote Chroma server over HTTP.

Requires the ``chroma`` extra. Records are written with ``upsert`` so
re-ingesting a file overwrites its ``{file}-{index}`` ids in place.
"""

from __future__ import annotations

import logging
from typing import Any

from faqhub.vectorstore.base import VectorStore
from faqhub.vectorstore.schemas import MetadataFilter, SearchResult, VectorRecord

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "internal-faq"


class ChromaStore(VectorStore):
    """Chroma-backed vector store."""

    def __init__(
        self,
        collection_name: str = DEFAULT_COLLECTION,
        host: str = "localhost",
        port: int = 8000,
        ssl: bool = False,
        client: Any | None = None,
    ):
        if client is None:
            try:
                import chromadb
            except ImportError as exc:
                raise ImportError(
                    "chromadb required: pip install internal-faq-hub[chroma]"
                ) from exc
            client = chromadb.HttpClient(host=host, port=port, ssl=ssl)
            logger.info(
                "Connected to Chroma at %s://%s:%d",
                "https" if ssl else "http", host, port,
            )

        self._client = client
        self._collection_name = collection_name
        self._collection = self._client.get_or_create_collection(name=collection_name)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, records: list[VectorRecord]) -> int:
        if not records:
            return 0

        self._collection.upsert(
            ids=[r.id for r in records],
            embeddings=[r.embedding for r in records],
            documents=[r.text for r in records],
            metadatas=[r.metadata for r in records],
        )
        return len(records)

    def search(
        self,
        query_embedding: list[float],
        top_k: int = 3,
        metadata_filter: MetadataFilter | None = None,
    ) -> list[SearchResult]:
        kwargs: dict[str, Any] = {
            "query_embeddings": [query_embedding],
            "n_results": top_k,
        }
        where = metadata_filter.to_where() if metadata_filter else None
        if where:
            kwargs["where"] = where

        raw = self._collection.query(**kwargs)
        return self._to_results(raw)

    def count(self) -> int:
        return self._collection.count()

    def delete(self, ids: list[str]) -> int:
        if not ids:
            return 0
        existing = self._collection.get(ids=ids)["ids"]
        if existing:
            self._collection.delete(ids=existing)
        return len(existing)

    def clear(self) -> None:
        self._client.delete_collection(name=self._collection_name)
        self._collection = self._client.get_or_create_collection(name=self._collection_name)
        logger.info("Cleared Chroma collection '%s'", self._collection_name)

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    @staticmethod
    def _to_results(raw: Any) -> list[SearchResult]:
        """Read the first query's row out of Chroma's arrays-of-arrays result."""
        ids = (raw.get("ids") or [[]])[0]
        documents = (raw.get("documents") or [[]])[0]
        metadatas = (raw.get("metadatas") or [[]])[0]
        distances = (raw.get("distances") or [[]])[0]

        results: list[SearchResult] = []
        for i, record_id in enumerate(ids):
            results.append(SearchResult(
                id=record_id,
                text=documents[i] if i < len(documents) and documents[i] else "",
                distance=float(distances[i]) if i < len(distances) else 0.0,
                metadata=dict(metadatas[i] or {}) if i < len(metadatas) else {},
            ))
        return results
