"""Data models for the ingestion and search pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class IngestResult:
    """Result of ingesting one document."""

    source: str
    chunks_created: int
    chunks_embedded: int
    chunks_stored: int
    warnings: list[str] = field(default_factory=list)


@dataclass
class DirectoryIngestResult:
    """Result of ingesting every document in a directory."""

    directory: str
    files: list[IngestResult] = field(default_factory=list)

    @property
    def files_processed(self) -> list[str]:
        return [r.source for r in self.files]

    @property
    def chunks_stored(self) -> int:
        return sum(r.chunks_stored for r in self.files)


@dataclass(frozen=True)
class SearchHit:
    """One retrieved chunk."""

    document: str
    metadata: dict[str, Any]
    distance: float
    id: str

    @property
    def file(self) -> str | None:
        return self.metadata.get("file")


@dataclass
class SearchResponse:
    """Output of a semantic FAQ search."""

    query: str
    hits: list[SearchHit] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.hits)
