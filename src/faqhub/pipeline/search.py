"""Search pipeline: question → embed → nearest-neighbour chunks."""

from __future__ import annotations

import logging

from faqhub.embeddings.base import EmbeddingProvider
from faqhub.pipeline.schemas import SearchHit, SearchResponse
from faqhub.vectorstore.base import VectorStore
from faqhub.vectorstore.schemas import MetadataFilter

logger = logging.getLogger(__name__)


class SearchPipeline:
    """Embed a query and return the closest stored FAQ chunks."""

    def __init__(self, embedding_provider: EmbeddingProvider, vector_store: VectorStore):
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store

    def search(self, query: str, limit: int = 3, file: str | None = None) -> SearchResponse:
        """Run a semantic search.

        Args:
            query: The question to search for.
            limit: Maximum number of chunks to return.
            file: Only search chunks from this document.

        Returns:
            A ``SearchResponse`` with hits ordered closest first.

        Raises:
            ValueError: If ``query`` is empty or ``limit`` is below 1.
        """
        if not isinstance(query, str) or not query.strip():
            raise ValueError("query is required and must be a non-empty string")
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        embedding = self.embedding_provider.embed_query(query)
        results = self.vector_store.search(
            query_embedding=embedding,
            top_k=limit,
            metadata_filter=MetadataFilter(file=file) if file else None,
        )

        hits = [
            SearchHit(document=r.text, metadata=r.metadata, distance=r.distance, id=r.id)
            for r in results
        ]
        logger.info("Search returned %d hits for query (limit=%d)", len(hits), limit)
        return SearchResponse(query=query, hits=hits)
