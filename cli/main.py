"""CLI entry point: Typer app for faqhub commands.

Usage:
    faqhub ingest --dir data/faqs --reset
    faqhub query "How do I request medical leave?"
    faqhub chunk data/faqs/hr.txt --strategy compare
    faqhub embed "paid time off"
    faqhub files
    faqhub show hr-policies.txt
    faqhub status
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from faqhub import __version__
from faqhub.config import ConfigError, Settings, load_settings

app = typer.Typer(
    name="faqhub",
    help="Internal FAQ hub. Chunk, embed, ingest and search FAQ documents.",
    no_args_is_help=True,
)

console = Console()

_CHUNK_PATH = typer.Argument(..., help="Text file to preview chunking for")

# Failures from collaborators that end a command with exit code 1
_COMMAND_ERRORS = (httpx.HTTPError, OSError, ValueError, ImportError)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    level = "DEBUG" if verbose else _settings().logging.level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _fail(action: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]Failed to {action}:[/] {exc}")
    return typer.Exit(code=1)


def _embedding_provider(settings: Settings):
    from faqhub.embeddings.factory import get_embedding_provider

    cfg = settings.embedding
    return get_embedding_provider(
        cfg.provider,
        url=cfg.url,
        model=cfg.model,
        dimension=cfg.dimension,
        timeout=cfg.timeout,
        api_key=cfg.api_key,
    )


def _vector_store(settings: Settings, backend: str | None = None):
    from faqhub.vectorstore.factory import get_vector_store

    cfg = settings.vectorstore
    backend = (backend or cfg.backend).lower()
    if backend == "chroma":
        return get_vector_store(
            "chroma",
            collection_name=cfg.collection,
            host=cfg.host,
            port=cfg.port,
            ssl=cfg.ssl,
        )
    return get_vector_store(backend)


@app.command()
def ingest(
    directory: Path | None = typer.Option(
        None, "--dir", "-d", help="FAQ directory (default: FAQS_PATH)",
    ),
    chunk_size: int | None = typer.Option(
        None, "--chunk-size", "-c", help="Chunk size in characters",
    ),
    overlap: int | None = typer.Option(
        None, "--overlap", "-o",
        help="Overlap: characters (naive) or sentences (smart)",
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s", help="Chunking strategy (smart, naive)",
    ),
    store: str | None = typer.Option(
        None, "--store", help="Vector store backend (chroma, memory)",
    ),
    reset: bool = typer.Option(
        False, "--reset", help="Clear the collection before ingesting",
    ),
) -> None:
    """Chunk, embed and store every FAQ document in a directory."""
    from faqhub.chunking.selector import chunking_config_from_legacy
    from faqhub.pipeline.ingest import IngestPipeline

    settings = _settings()
    directory = directory or settings.ingestion.faqs_path

    try:
        chunking = chunking_config_from_legacy(
            strategy or settings.chunking.strategy,
            chunk_size if chunk_size is not None else settings.chunking.chunk_size,
            overlap if overlap is not None else settings.chunking.overlap,
        )
        with _embedding_provider(settings) as embedder:
            pipeline = IngestPipeline(
                embedding_provider=embedder,
                vector_store=_vector_store(settings, store),
                chunking=chunking,
            )
            result = pipeline.ingest_directory(directory, reset=reset)
    except _COMMAND_ERRORS as exc:
        raise _fail("ingest files", exc) from exc

    for file_result in result.files:
        console.print(
            f"[green]Ingested:[/] {file_result.source} "
            f"({file_result.chunks_stored}/{file_result.chunks_created} chunks stored)"
        )
        for w in file_result.warnings:
            console.print(f"  [yellow]Warning:[/] {w}")

    console.print(
        f"\n[bold green]Done:[/] {len(result.files)} files, "
        f"{result.chunks_stored} chunks stored"
    )


@app.command()
def query(
    question: str | None = typer.Argument(None, help="Question to search for"),
    limit: int | None = typer.Option(
        None, "--limit", "-k", help="Number of results",
    ),
    file: str | None = typer.Option(
        None, "--file", "-f", help="Only search this document",
    ),
    store: str | None = typer.Option(
        None, "--store", help="Vector store backend (chroma, memory)",
    ),
) -> None:
    """Search the FAQ collection for chunks relevant to a question."""
    from faqhub.pipeline.search import SearchPipeline

    settings = _settings()
    if question is None:
        question = typer.prompt("Ask a question about your FAQs")

    try:
        with _embedding_provider(settings) as embedder:
            pipeline = SearchPipeline(
                embedding_provider=embedder,
                vector_store=_vector_store(settings, store),
            )
            response = pipeline.search(
                question,
                limit=limit if limit is not None else settings.search.limit,
                file=file,
            )
    except _COMMAND_ERRORS as exc:
        raise _fail("search FAQs", exc) from exc

    console.print(f"\n[bold]Query:[/] {response.query}")
    if not response.hits:
        console.print("[yellow]No matching FAQ entries.[/]")
        return

    console.print("Top relevant results:\n")
    preview = settings.search.preview_chars
    for i, hit in enumerate(response.hits, start=1):
        console.print(f"[cyan]{i}.[/] ({hit.file}) [dim]distance={hit.distance:.4f}[/]")
        console.print(f"{hit.document[:preview]}...\n", markup=False)


@app.command()
def chunk(
    path: Annotated[Path, _CHUNK_PATH],
    chunk_size: int | None = typer.Option(
        None, "--chunk-size", "-c", help="Chunk size (default: CHUNK_SIZE)",
    ),
    overlap: int | None = typer.Option(
        None, "--overlap", "-o", help="Overlap (default: CHUNK_OVERLAP)",
    ),
    strategy: str | None = typer.Option(
        None, "--strategy", "-s",
        help="smart, naive, or compare (default: CHUNKING_STRATEGY)",
    ),
) -> None:
    """Preview how a document would be chunked with the ingest settings."""
    from faqhub.chunking.selector import chunk_text
    from faqhub.chunking.stats import is_broken, summarize_chunks
    from faqhub.documents.loader import DocumentLoader

    settings = _settings()
    strategy = strategy or settings.chunking.strategy.value
    if chunk_size is None:
        chunk_size = settings.chunking.chunk_size
    if overlap is None:
        overlap = settings.chunking.overlap

    try:
        text = DocumentLoader().load_file(path).document.text
        if strategy == "compare":
            runs = {
                name: chunk_text(text, chunk_size, overlap, strategy=name)
                for name in ("naive", "smart")
            }
        else:
            runs = {strategy: chunk_text(text, chunk_size, overlap, strategy=strategy)}
    except _COMMAND_ERRORS as exc:
        raise _fail("chunk text", exc) from exc

    for name, chunks in runs.items():
        console.rule(f"{name} chunking")
        for i, piece in enumerate(chunks, start=1):
            flag = " [yellow](mid-sentence)[/]" if is_broken(piece) else ""
            console.print(f"\n[bold]Chunk {i}[/] ({len(piece)} chars){flag}")
            console.print(piece, markup=False)

    table = Table(title=f"{path.name} ({len(text)} chars)")
    table.add_column("Strategy", style="cyan")
    table.add_column("Chunks", justify="right")
    table.add_column("Avg chars", justify="right")
    table.add_column("Mid-sentence", justify="right")
    for name, chunks in runs.items():
        stats = summarize_chunks(chunks)
        table.add_row(
            name, str(stats.count), str(stats.avg_chars),
            f"{stats.broken} ({stats.broken_pct}%)",
        )
    console.print()
    console.print(table)


@app.command()
def embed(
    text: str = typer.Argument(..., help="Text to embed"),
) -> None:
    """Embed a piece of text and show the vector size."""
    settings = _settings()
    try:
        with _embedding_provider(settings) as embedder:
            vector = embedder.embed_query(text)
    except _COMMAND_ERRORS as exc:
        raise _fail("embed text", exc) from exc

    head = ", ".join(f"{v:.4f}" for v in vector[:5])
    console.print(f"[bold]Dimensions:[/] {len(vector)}")
    console.print(f"[dim][{head}, ...][/]")


@app.command()
def files(
    directory: Path | None = typer.Option(
        None, "--dir", "-d", help="FAQ directory (default: FAQS_PATH)",
    ),
) -> None:
    """List the FAQ documents available for ingestion."""
    from faqhub.documents.loader import DocumentLoader

    settings = _settings()
    directory = directory or settings.ingestion.faqs_path
    try:
        infos = DocumentLoader().describe_files(directory)
    except _COMMAND_ERRORS as exc:
        raise _fail("list FAQ files", exc) from exc

    console.print(f"[bold]Directory:[/] {directory}", highlight=False)
    if not infos:
        console.print("[yellow]No FAQ files found.[/]")
        return

    table = Table(title="FAQ files")
    table.add_column("Name", style="cyan")
    table.add_column("Size (bytes)", justify="right")
    table.add_column("Modified")
    for info in infos:
        table.add_row(info.name, str(info.size), info.modified.strftime("%Y-%m-%d %H:%M:%S"))
    console.print(table)
    console.print(f"{len(infos)} files")


@app.command()
def show(
    name: str = typer.Argument(..., help="FAQ file name, as listed by `faqhub files`"),
    directory: Path | None = typer.Option(
        None, "--dir", "-d", help="FAQ directory (default: FAQS_PATH)",
    ),
) -> None:
    """Print the content of one FAQ document."""
    from faqhub.documents.loader import DocumentLoader

    settings = _settings()
    try:
        result = DocumentLoader().load_named(directory or settings.ingestion.faqs_path, name)
    except _COMMAND_ERRORS as exc:
        raise _fail("read FAQ file", exc) from exc

    for w in result.warnings:
        console.print(f"[yellow]Warning:[/] {w}")
    console.print(result.document.text, markup=False, highlight=False)


@app.command()
def status() -> None:
    """Show configuration and available components."""
    from faqhub.chunking.factory import available_chunkers
    from faqhub.embeddings.factory import available_providers
    from faqhub.vectorstore.factory import available_stores

    settings = _settings()
    console.print(f"\n[bold green]internal-faq-hub[/] v{__version__}\n")

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Embedding service", f"{settings.embedding.url} ({settings.embedding.model})")
    table.add_row(
        "Vector store",
        f"{settings.vectorstore.backend} "
        f"{settings.vectorstore.host}:{settings.vectorstore.port}"
        f"/{settings.vectorstore.collection}",
    )
    table.add_row(
        "Chunking",
        f"{settings.chunking.strategy.value} "
        f"(size={settings.chunking.chunk_size}, overlap={settings.chunking.overlap})",
    )
    table.add_row("FAQ directory", str(settings.ingestion.faqs_path))
    table.add_row("Chunkers", ", ".join(available_chunkers()))
    table.add_row("Embedding providers", ", ".join(available_providers()))
    table.add_row("Vector stores", ", ".join(available_stores()))

    console.print(table)


if __name__ == "__main__":
    app()
