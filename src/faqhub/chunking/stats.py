"""Chunk quality summary: how often chunks cut a sentence in half."""

from __future__ import annotations

import re
from dataclasses import dataclass

_STARTS_LOWER = re.compile(r"^[a-z]")
_ENDS_TERMINATED = re.compile(r"[.!?]$")


def is_broken(chunk: str) -> bool:
    """True when a chunk starts or ends mid-sentence."""
    stripped = chunk.strip()
    return bool(_STARTS_LOWER.match(stripped)) or not _ENDS_TERMINATED.search(stripped)


@dataclass(frozen=True)
class ChunkStats:
    count: int
    avg_chars: int
    broken: int

    @property
    def broken_pct(self) -> int:
        return round(self.broken * 100 / self.count) if self.count else 0


def summarize_chunks(chunks: list[str]) -> ChunkStats:
    if not chunks:
        return ChunkStats(count=0, avg_chars=0, broken=0)
    return ChunkStats(
        count=len(chunks),
        avg_chars=round(sum(len(c) for c in chunks) / len(chunks)),
        broken=sum(1 for c in chunks if is_broken(c)),
    )
