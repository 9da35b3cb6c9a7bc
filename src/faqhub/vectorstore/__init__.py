"""Vector store backends: Chroma (server) and in-memory."""

from faqhub.vectorstore.base import VectorStore
from faqhub.vectorstore.factory import available_stores, get_vector_store
from faqhub.vectorstore.schemas import MetadataFilter, SearchResult, VectorRecord

__all__ = [
    "MetadataFilter",
    "SearchResult",
    "VectorRecord",
    "VectorStore",
    "available_stores",
    "get_vector_store",
]
