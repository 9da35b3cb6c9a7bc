"""Data models for chunks and chunking configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ChunkingStrategy(StrEnum):
    """Available chunking strategies."""

    SMART = "smart"
    NAIVE = "naive"


class ChunkingConfigError(ValueError):
    """Raised when chunk size / overlap values cannot produce chunks."""


@dataclass(frozen=True)
class NaiveChunkingConfig:
    """Fixed character windows, ``overlap_chars`` shared between neighbours."""

    chunk_size: int = 500
    overlap_chars: int = 50

    strategy = ChunkingStrategy.NAIVE

    def validate(self) -> None:
        if self.chunk_size <= 0:
            raise ChunkingConfigError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.overlap_chars < 0:
            raise ChunkingConfigError(f"overlap must be >= 0, got {self.overlap_chars}")
        if self.overlap_chars >= self.chunk_size:
            raise ChunkingConfigError(
                f"overlap ({self.overlap_chars}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )


@dataclass(frozen=True)
class SentenceChunkingConfig:
    """Whole-sentence chunks near ``target_size``, ``overlap_sentences`` shared."""

    target_size: int = 500
    overlap_sentences: int = 1

    strategy = ChunkingStrategy.SMART

    def validate(self) -> None:
        if self.target_size <= 0:
            raise ChunkingConfigError(f"target_size must be positive, got {self.target_size}")
        if self.overlap_sentences < 0:
            raise ChunkingConfigError(
                f"overlap_sentences must be >= 0, got {self.overlap_sentences}"
            )


ChunkingConfig = NaiveChunkingConfig | SentenceChunkingConfig


@dataclass(frozen=True)
class ChunkMetadata:
    """Metadata carried by each chunk, stored alongside embeddings."""

    file: str | None = None
    chunk_index: int = 0
    strategy: ChunkingStrategy = ChunkingStrategy.SMART

    def to_dict(self) -> dict[str, Any]:
        """Flatten to the scalar-only dict vector stores accept."""
        d: dict[str, Any] = {
            "chunk_index": self.chunk_index,
            "strategy": self.strategy.value,
        }
        if self.file:
            d["file"] = self.file
        return d


@dataclass
class Chunk:
    """A single retrievable piece of a document."""

    text: str
    index: int = 0
    source: str | None = None
    metadata: ChunkMetadata = field(default_factory=ChunkMetadata)

    @property
    def id(self) -> str:
        """Storage identifier, ``{document-name}-{index}``."""
        return f"{self.source or 'inline'}-{self.index}"
