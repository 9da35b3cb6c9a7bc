"""Data models for document loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Document:
    """Raw text of a source document plus its identifying name."""

    name: str
    text: str


@dataclass
class LoadResult:
    """Result of loading a single document file.

    Attributes:
        document: The loaded document.
        source_path: Filesystem path the document was read from.
        char_count: Length of the document text.
        warnings: Non-fatal issues encountered during loading.
    """

    document: Document
    source_path: str | None = None
    char_count: int = 0
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FileInfo:
    """Listing entry for one FAQ document."""

    name: str
    path: str
    size: int
    modified: datetime
