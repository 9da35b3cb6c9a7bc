"""Fixed-window character chunker.

Slices the text at fixed offsets with a character overlap between
neighbouring windows. Ignores word and sentence boundaries, so chunks can
start or end mid-word.
"""

from __future__ import annotations

from faqhub.chunking.base import BaseChunker
from faqhub.chunking.schemas import ChunkingStrategy, NaiveChunkingConfig


def chunk_naive(text: str, chunk_size: int = 500, overlap: int = 50) -> list[str]:
    """Split ``text`` into windows of ``chunk_size`` characters.

    Window *i* starts at ``i * (chunk_size - overlap)``. The last window may
    be shorter. Blank input yields no chunks.

    Raises:
        ChunkingConfigError: If ``chunk_size <= 0`` or the overlap is negative
            or not smaller than ``chunk_size`` (the offset would never advance).
    """
    NaiveChunkingConfig(chunk_size=chunk_size, overlap_chars=overlap).validate()

    if not text.strip():
        return []

    step = chunk_size - overlap
    return [text[start : start + chunk_size] for start in range(0, len(text), step)]


class NaiveChunker(BaseChunker):
    """Chunker wrapping :func:`chunk_naive`."""

    strategy = ChunkingStrategy.NAIVE

    def __init__(self, chunk_size: int = 500, overlap: int = 50):
        NaiveChunkingConfig(chunk_size=chunk_size, overlap_chars=overlap).validate()
        self.chunk_size = chunk_size
        self.overlap = overlap

    def split(self, text: str) -> list[str]:
        return chunk_naive(text, self.chunk_size, self.overlap)
