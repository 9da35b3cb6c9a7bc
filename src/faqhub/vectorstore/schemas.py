"""Data models for vector store operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class VectorRecord:
    """A chunk with its embedding, ready for storage."""

    id: str
    text: str
    embedding: list[float]
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchResult:
    """A single nearest-neighbour hit. Lower ``distance`` is closer."""

    id: str
    text: str
    distance: float
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class MetadataFilter:
    """Restrict search results by metadata fields (AND logic)."""

    file: str | None = None

    def matches(self, metadata: dict[str, Any]) -> bool:
        return not (self.file and metadata.get("file") != self.file)

    def to_where(self) -> dict[str, Any] | None:
        """Convert to a Chroma ``where`` clause, ``None`` when empty."""
        if self.file:
            return {"file": self.file}
        return None
