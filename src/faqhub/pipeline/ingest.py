"""Ingestion pipeline: file → load → chunk → embed → store.

Chunks are embedded and stored one at a time. A failure from the embedding
service or the store stops the run; chunks stored before the failure stay
in the store.
"""

from __future__ import annotations

import logging
from pathlib import Path

from faqhub.chunking.factory import get_chunker
from faqhub.chunking.schemas import ChunkingConfig, SentenceChunkingConfig
from faqhub.documents.loader import DocumentLoader
from faqhub.embeddings.base import EmbeddingProvider
from faqhub.pipeline.schemas import DirectoryIngestResult, IngestResult
from faqhub.vectorstore.base import VectorStore
from faqhub.vectorstore.schemas import VectorRecord

logger = logging.getLogger(__name__)


class IngestPipeline:
    """Orchestrates document ingestion: load → chunk → embed → store."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        chunking: ChunkingConfig | None = None,
        loader: DocumentLoader | None = None,
    ):
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store
        self.chunker = get_chunker(chunking or SentenceChunkingConfig())
        self.loader = loader or DocumentLoader()

    def ingest_text(self, text: str, source_name: str = "inline") -> IngestResult:
        """Chunk, embed and store raw text under ``source_name``.

        Chunk ids are ``{source_name}-{index}``, so ingesting the same source
        again overwrites its earlier chunks.

        Raises:
            TypeError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")

        chunks = self.chunker.chunk(text, source=source_name)
        if not chunks:
            return IngestResult(
                source=source_name,
                chunks_created=0,
                chunks_embedded=0,
                chunks_stored=0,
                warnings=["Document contains no text"],
            )

        embedded = 0
        stored = 0
        for chunk in chunks:
            if not chunk.text:
                continue

            embedding = self.embedding_provider.embed_text(chunk.text)
            embedded += 1

            stored += self.vector_store.add([VectorRecord(
                id=chunk.id,
                text=chunk.text,
                embedding=embedding,
                metadata=chunk.metadata.to_dict(),
            )])
            logger.debug("Embedded %s chunk %d/%d", source_name, chunk.index + 1, len(chunks))

        logger.info(
            "Ingested %s: %d chunks → %d embedded → %d stored",
            source_name, len(chunks), embedded, stored,
        )

        return IngestResult(
            source=source_name,
            chunks_created=len(chunks),
            chunks_embedded=embedded,
            chunks_stored=stored,
        )

    def ingest_file(self, path: str | Path) -> IngestResult:
        """Ingest a single file; its name becomes the chunk id prefix."""
        result = self.loader.load_file(path)
        ingest_result = self.ingest_text(result.document.text, source_name=result.document.name)
        ingest_result.warnings = result.warnings + ingest_result.warnings
        return ingest_result

    def ingest_directory(self, directory: str | Path, reset: bool = False) -> DirectoryIngestResult:
        """Ingest every file in ``directory`` in name order.

        Args:
            directory: Folder of plaintext FAQ documents.
            reset: Clear the store first, dropping ids left behind by
                documents that now produce fewer chunks.
        """
        files = self.loader.list_files(directory)
        if reset:
            self.vector_store.clear()
            logger.info("Cleared vector store before ingesting %s", directory)

        summary = DirectoryIngestResult(directory=str(directory))
        for path in files:
            summary.files.append(self.ingest_file(path))

        logger.info(
            "Ingested %d files from %s (%d chunks stored)",
            len(summary.files), directory, summary.chunks_stored,
        )
        return summary
