"""Abstract base class for all chunkers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from faqhub.chunking.schemas import Chunk, ChunkingStrategy, ChunkMetadata

logger = logging.getLogger(__name__)


class BaseChunker(ABC):
    """Interface for text chunking strategies.

    Subclasses implement :meth:`split`, the pure text transform. :meth:`chunk`
    wraps its output into numbered ``Chunk`` objects tagged with their source.
    """

    strategy: ChunkingStrategy

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """Split text into an ordered list of chunk strings.

        Args:
            text: Full document text.

        Returns:
            Chunk texts in document order. Empty for blank input.
        """

    def chunk(self, text: str, source: str | None = None) -> list[Chunk]:
        """Split text and wrap each piece as a ``Chunk``.

        Args:
            text: Full document text.
            source: Document name used for chunk ids and metadata.

        Returns:
            List of ``Chunk`` objects indexed from 0.
        """
        pieces = self.split(text)
        chunks = [
            Chunk(
                text=piece,
                index=i,
                source=source,
                metadata=ChunkMetadata(file=source, chunk_index=i, strategy=self.strategy),
            )
            for i, piece in enumerate(pieces)
        ]
        logger.debug(
            "%s produced %d chunks from %d chars",
            self.strategy_name(), len(chunks), len(text),
        )
        return chunks

    @classmethod
    def strategy_name(cls) -> str:
        """Return human-readable strategy name."""
        return cls.__name__
