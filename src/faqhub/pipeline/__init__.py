"""FAQ pipelines: ingestion and semantic search."""

from faqhub.pipeline.ingest import IngestPipeline
from faqhub.pipeline.schemas import (
    DirectoryIngestResult,
    IngestResult,
    SearchHit,
    SearchResponse,
)
from faqhub.pipeline.search import SearchPipeline

__all__ = [
    "DirectoryIngestResult",
    "IngestPipeline",
    "IngestResult",
    "SearchHit",
    "SearchPipeline",
    "SearchResponse",
]
