"""Directory-backed document source: list files, read UTF-8 text."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from faqhub.documents.schemas import Document, FileInfo, LoadResult

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Load plaintext FAQ documents from the filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def list_files(self, directory: str | Path) -> list[Path]:
        """Return the regular, non-hidden files in ``directory``, sorted by name."""
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Document directory not found: {directory}")

        return sorted(
            p for p in directory.iterdir()
            if p.is_file() and not p.name.startswith(".")
        )

    def load_file(self, path: str | Path) -> LoadResult:
        """Load a document from a filesystem path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        return self.load_bytes(path.read_bytes(), path.name, source_path=str(path))

    def describe_files(self, directory: str | Path) -> list[FileInfo]:
        """Name, size and modification time of every file in ``directory``."""
        infos = []
        for path in self.list_files(directory):
            stat = path.stat()
            infos.append(FileInfo(
                name=path.name,
                path=str(path),
                size=stat.st_size,
                modified=datetime.fromtimestamp(stat.st_mtime),
            ))
        return infos

    def load_named(self, directory: str | Path, name: str) -> LoadResult:
        """Load the document called ``name`` from ``directory``.

        Only files that :meth:`list_files` would return can be loaded, so a
        name cannot reach outside the directory or pick a hidden file.

        Raises:
            FileNotFoundError: If no such document exists in ``directory``.
        """
        for path in self.list_files(directory):
            if path.name == name:
                return self.load_file(path)
        raise FileNotFoundError(f"No FAQ document named '{name}' in {directory}")

    def load_bytes(
        self,
        data: bytes,
        name: str,
        source_path: str | None = None,
    ) -> LoadResult:
        """Load a document from in-memory bytes."""
        warnings: list[str] = []
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError:
            text = data.decode(self.encoding, errors="replace")
            warnings.append(
                f"{name} is not valid {self.encoding}; undecodable bytes were replaced"
            )
            logger.warning("Decoding fell back to replacement characters for %s", name)

        return LoadResult(
            document=Document(name=name, text=text),
            source_path=source_path or name,
            char_count=len(text),
            warnings=warnings,
        )

    def load_directory(self, directory: str | Path) -> Iterator[LoadResult]:
        """Yield a ``LoadResult`` for every file in ``directory``."""
        for path in self.list_files(directory):
            yield self.load_file(path)
