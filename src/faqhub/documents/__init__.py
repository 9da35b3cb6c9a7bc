"""Document source: plaintext files on the local filesystem."""

from faqhub.documents.loader import DocumentLoader
from faqhub.documents.schemas import Document, FileInfo, LoadResult

__all__ = ["Document", "DocumentLoader", "FileInfo", "LoadResult"]
