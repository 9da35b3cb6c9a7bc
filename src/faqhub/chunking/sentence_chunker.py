"""Sentence-boundary chunker.

Groups whole sentences into chunks near a target character size and carries
the last few sentences of each chunk into the next one, so context survives
the chunk boundary.

Segmentation is a regex heuristic, not a language-aware tokenizer: a
terminator run (``.``, ``!``, ``?``) ends a sentence only when followed by
whitespace or end of text. ``"Dr.Smith"`` stays whole, ``"Dr. Smith"`` is
split after ``"Dr."``.
"""

from __future__ import annotations

import logging
import re

from faqhub.chunking.base import BaseChunker
from faqhub.chunking.schemas import ChunkingStrategy, SentenceChunkingConfig

logger = logging.getLogger(__name__)

TERMINATORS = ".!?"

# Terminator run followed by whitespace or end of input
_SENTENCE_END = re.compile(r"[.!?]+(?=\s|\Z)")


def _is_noise(segment: str) -> bool:
    """True for blank segments and bare terminator runs like ``'...'``."""
    return not segment.strip(TERMINATORS + " \t\r\n\f\v")


def split_sentences(text: str) -> list[str]:
    """Split text into trimmed sentences, in order.

    Text after the last sentence terminator is kept as a final sentence.
    Returns an empty list when the text has no sentence terminator at all.
    """
    sentences: list[str] = []
    start = 0
    for match in _SENTENCE_END.finditer(text):
        segment = text[start : match.end()]
        start = match.end()
        if not _is_noise(segment):
            sentences.append(segment.strip())

    if not sentences:
        return []

    tail = text[start:]
    if not _is_noise(tail):
        sentences.append(tail.strip())
    return sentences


def chunk_smart(text: str, target_size: int = 500, overlap_sentences: int = 1) -> list[str]:
    """Group sentences into chunks of roughly ``target_size`` characters.

    A chunk is closed before the sentence that would push it past
    ``target_size``, provided it already holds more sentences than the
    overlap carries forward, so every chunk adds at least one new sentence.
    The first chunk follows the same rule: with ``overlap_sentences=k`` every
    chunk holds at least ``k + 1`` sentences when the text has that many.
    The last ``overlap_sentences`` sentences of a closed chunk open the next
    one. Sentences are never truncated: a single long sentence can make a
    chunk larger than ``target_size``.

    Text without any sentence terminator comes back unchanged as the only
    chunk. Blank input yields no chunks.

    Raises:
        ChunkingConfigError: If ``target_size <= 0`` or ``overlap_sentences < 0``.
    """
    SentenceChunkingConfig(
        target_size=target_size, overlap_sentences=overlap_sentences
    ).validate()

    if not text.strip():
        return []

    sentences = split_sentences(text)
    if not sentences:
        return [text]

    chunks: list[str] = []
    current: list[str] = []
    current_size = 0

    for sentence in sentences:
        if current_size + len(sentence) > target_size and len(current) > overlap_sentences:
            chunks.append(" ".join(current))

            current = current[-overlap_sentences:] if overlap_sentences else []
            current_size = len(" ".join(current)) + 1 if current else 0

        current.append(sentence)
        current_size += len(sentence) + 1  # +1 for the joining space

    if current:
        chunks.append(" ".join(current))

    logger.debug(
        "chunk_smart: %d sentences -> %d chunks (target=%d, overlap=%d)",
        len(sentences), len(chunks), target_size, overlap_sentences,
    )
    return chunks


class SentenceChunker(BaseChunker):
    """Chunker wrapping :func:`chunk_smart`."""

    strategy = ChunkingStrategy.SMART

    def __init__(self, target_size: int = 500, overlap_sentences: int = 1):
        SentenceChunkingConfig(
            target_size=target_size, overlap_sentences=overlap_sentences
        ).validate()
        self.target_size = target_size
        self.overlap_sentences = overlap_sentences

    def split(self, text: str) -> list[str]:
        return chunk_smart(text, self.target_size, self.overlap_sentences)
