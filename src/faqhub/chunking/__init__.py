"""Text chunking: fixed windows and sentence-boundary grouping."""

from faqhub.chunking.base import BaseChunker
from faqhub.chunking.factory import available_chunkers, get_chunker
from faqhub.chunking.naive_chunker import NaiveChunker, chunk_naive
from faqhub.chunking.schemas import (
    Chunk,
    ChunkingConfig,
    ChunkingConfigError,
    ChunkingStrategy,
    ChunkMetadata,
    NaiveChunkingConfig,
    SentenceChunkingConfig,
)
from faqhub.chunking.selector import (
    chunk_text,
    chunk_with_config,
    chunking_config_from_legacy,
    sentence_overlap_from_legacy,
)
from faqhub.chunking.sentence_chunker import SentenceChunker, chunk_smart, split_sentences

__all__ = [
    "BaseChunker",
    "Chunk",
    "ChunkMetadata",
    "ChunkingConfig",
    "ChunkingConfigError",
    "ChunkingStrategy",
    "NaiveChunker",
    "NaiveChunkingConfig",
    "SentenceChunker",
    "SentenceChunkingConfig",
    "available_chunkers",
    "chunk_naive",
    "chunk_smart",
    "chunk_text",
    "chunk_with_config",
    "chunking_config_from_legacy",
    "get_chunker",
    "sentence_overlap_from_legacy",
    "split_sentences",
]
