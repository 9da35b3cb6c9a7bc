"""Strategy selector: the single chunking entry point for callers.

``chunk_text`` keeps the historical ``(chunk_size, overlap)`` signature shared
by both strategies. The overlap means characters for the naive strategy and
sentences for the smart one; :func:`sentence_overlap_from_legacy` is the only
place where the two meanings are bridged.
"""

from __future__ import annotations

import logging

from faqhub.chunking.naive_chunker import chunk_naive
from faqhub.chunking.schemas import (
    ChunkingConfig,
    ChunkingStrategy,
    NaiveChunkingConfig,
    SentenceChunkingConfig,
)
from faqhub.chunking.sentence_chunker import chunk_smart

logger = logging.getLogger(__name__)

# Overlaps above this are character counts meant for the naive strategy
MAX_SENTENCE_OVERLAP = 10
CLAMPED_SENTENCE_OVERLAP = 1


def sentence_overlap_from_legacy(overlap: int) -> int:
    """Reinterpret a legacy overlap value as a sentence count.

    Values above 10 are clamped to a single sentence.
    """
    if overlap > MAX_SENTENCE_OVERLAP:
        logger.debug(
            "Overlap %d looks like a character count, using %d sentence(s)",
            overlap, CLAMPED_SENTENCE_OVERLAP,
        )
        return CLAMPED_SENTENCE_OVERLAP
    return overlap


def chunking_config_from_legacy(
    strategy: ChunkingStrategy | str = ChunkingStrategy.SMART,
    chunk_size: int = 500,
    overlap: int = 50,
) -> ChunkingConfig:
    """Build the typed config for ``strategy`` from a ``(chunk_size, overlap)`` pair."""
    strategy = ChunkingStrategy(strategy)
    if strategy is ChunkingStrategy.NAIVE:
        return NaiveChunkingConfig(chunk_size=chunk_size, overlap_chars=overlap)
    return SentenceChunkingConfig(
        target_size=chunk_size,
        overlap_sentences=sentence_overlap_from_legacy(overlap),
    )


def chunk_with_config(text: str, config: ChunkingConfig) -> list[str]:
    """Chunk ``text`` according to a typed chunking config."""
    if isinstance(config, NaiveChunkingConfig):
        return chunk_naive(text, config.chunk_size, config.overlap_chars)
    return chunk_smart(text, config.target_size, config.overlap_sentences)


def chunk_text(
    text: str,
    chunk_size: int = 500,
    overlap: int = 50,
    strategy: ChunkingStrategy | str = ChunkingStrategy.SMART,
) -> list[str]:
    """Split text into overlapping chunks with the chosen strategy.

    Args:
        text: The text to split.
        chunk_size: Window size (naive) or target size (smart), in characters.
        overlap: Characters (naive) or sentences (smart) shared between
            neighbouring chunks. For the smart strategy values above 10 are
            treated as one sentence.
        strategy: ``smart`` (default) or ``naive``.

    Returns:
        Chunk texts in document order.
    """
    return chunk_with_config(text, chunking_config_from_legacy(strategy, chunk_size, overlap))
