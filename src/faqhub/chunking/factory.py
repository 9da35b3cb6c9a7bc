"""Chunker factory: registry and lazy import keyed by strategy."""

from __future__ import annotations

import importlib
import logging

from faqhub.chunking.base import BaseChunker
from faqhub.chunking.schemas import (
    ChunkingConfig,
    ChunkingStrategy,
    NaiveChunkingConfig,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Chunker registry
#
# Each entry: (strategy, module_path, class_name)
# ---------------------------------------------------------------------------

_CHUNKER_REGISTRY: list[tuple[ChunkingStrategy, str, str]] = [
    (ChunkingStrategy.SMART, "faqhub.chunking.sentence_chunker", "SentenceChunker"),
    (ChunkingStrategy.NAIVE, "faqhub.chunking.naive_chunker", "NaiveChunker"),
]


def get_chunker(config: ChunkingConfig) -> BaseChunker:
    """Get a chunker configured from a typed chunking config.

    Raises:
        ChunkingConfigError: If the config values are degenerate.
    """
    config.validate()

    for strategy, module_path, cls_name in _CHUNKER_REGISTRY:
        if strategy == config.strategy:
            mod = importlib.import_module(module_path)
            cls = getattr(mod, cls_name)
            if isinstance(config, NaiveChunkingConfig):
                return cls(chunk_size=config.chunk_size, overlap=config.overlap_chars)
            return cls(
                target_size=config.target_size,
                overlap_sentences=config.overlap_sentences,
            )

    raise ValueError(f"No chunker registered for strategy '{config.strategy}'")


def available_chunkers() -> list[str]:
    """Return names of registered chunking strategies."""
    return [s.value for s, _, _ in _CHUNKER_REGISTRY]
