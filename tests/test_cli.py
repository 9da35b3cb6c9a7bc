"""Tests for the Typer CLI: memory store and hash embedder, no services."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import HashEmbedder
from typer.testing import CliRunner

import cli.main as cli_main
from cli.main import app
from faqhub.config import ENV_OVERRIDES
from faqhub.vectorstore.factory import clear_cache

runner = CliRunner()


class ClosingEmbedder(HashEmbedder):
    """Hash embedder that records whether it was closed."""

    def __init__(self):
        super().__init__()
        self.closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, embedder: HashEmbedder):
    for var in [*ENV_OVERRIDES, "FAQHUB_PROFILE"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_main, "_embedding_provider", lambda settings: embedder)
    clear_cache()
    yield
    clear_cache()


class TestChunkCommand:
    def test_single_strategy(self, faq_dir: Path):
        result = runner.invoke(app, ["chunk", str(faq_dir / "hr.txt"), "--chunk-size", "200"])
        assert result.exit_code == 0, result.output
        assert "smart chunking" in result.output
        assert "Chunk 1" in result.output

    def test_compare(self, faq_dir: Path):
        result = runner.invoke(
            app,
            ["chunk", str(faq_dir / "hr.txt"), "-c", "200", "-o", "30", "--strategy", "compare"],
        )
        assert result.exit_code == 0, result.output
        assert "naive chunking" in result.output
        assert "smart chunking" in result.output
        assert "mid-sentence" in result.output

    def test_defaults_follow_chunking_settings(self, faq_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHUNKING_STRATEGY", "naive")
        monkeypatch.setenv("CHUNK_SIZE", "100")
        monkeypatch.setenv("CHUNK_OVERLAP", "10")
        result = runner.invoke(app, ["chunk", str(faq_dir / "hr.txt")])
        assert result.exit_code == 0, result.output
        assert "naive chunking" in result.output
        assert "smart chunking" not in result.output
        assert "(100 chars)" in result.output

    def test_option_overrides_setting(self, faq_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHUNKING_STRATEGY", "naive")
        result = runner.invoke(app, ["chunk", str(faq_dir / "hr.txt"), "-s", "smart"])
        assert result.exit_code == 0, result.output
        assert "smart chunking" in result.output

    def test_unknown_strategy(self, faq_dir: Path):
        result = runner.invoke(app, ["chunk", str(faq_dir / "hr.txt"), "-s", "semantic"])
        assert result.exit_code == 1
        assert "Failed to chunk text" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["chunk", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1


class TestIngestAndQuery:
    def test_ingest_then_query(self, faq_dir: Path):
        result = runner.invoke(app, ["ingest", "--dir", str(faq_dir), "--store", "memory"])
        assert result.exit_code == 0, result.output
        assert "Ingested:" in result.output
        assert "hr.txt" in result.output
        assert "Done:" in result.output

        result = runner.invoke(
            app, ["query", "How do I reset my password?", "--store", "memory", "-f", "it.txt"],
        )
        assert result.exit_code == 0, result.output
        assert "Top relevant results" in result.output
        assert "(it.txt)" in result.output

    def test_ingest_uses_faqs_path(self, faq_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FAQS_PATH", str(faq_dir))
        result = runner.invoke(app, ["ingest", "--store", "memory", "--strategy", "naive"])
        assert result.exit_code == 0, result.output
        assert "it.txt" in result.output

    def test_ingest_missing_directory(self, tmp_path: Path):
        result = runner.invoke(app, ["ingest", "--dir", str(tmp_path / "nope"), "--store", "memory"])
        assert result.exit_code == 1
        assert "Failed to ingest files" in result.output

    def test_ingest_degenerate_naive_config(self, faq_dir: Path):
        result = runner.invoke(
            app,
            ["ingest", "-d", str(faq_dir), "--store", "memory", "-s", "naive", "-c", "10", "-o", "10"],
        )
        assert result.exit_code == 1

    def test_query_empty_store(self):
        result = runner.invoke(app, ["query", "anything", "--store", "memory"])
        assert result.exit_code == 0, result.output
        assert "No matching FAQ entries." in result.output

    def test_query_prompts_for_question(self):
        result = runner.invoke(app, ["query", "--store", "memory"], input="PTO policy\n")
        assert result.exit_code == 0, result.output
        assert "Ask a question" in result.output
        assert "PTO policy" in result.output

    def test_blank_question(self):
        result = runner.invoke(app, ["query", "   ", "--store", "memory"])
        assert result.exit_code == 1
        assert "Failed to search FAQs" in result.output

    def test_zero_limit_rejected(self, faq_dir: Path):
        runner.invoke(app, ["ingest", "--dir", str(faq_dir), "--store", "memory"])
        result = runner.invoke(app, ["query", "PTO", "--store", "memory", "-k", "0"])
        assert result.exit_code == 1
        assert "limit" in result.output


class TestOtherCommands:
    def test_embed(self):
        result = runner.invoke(app, ["embed", "paid time off"])
        assert result.exit_code == 0, result.output
        assert "Dimensions: 32" in result.output

    def test_status(self):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0, result.output
        assert "internal-faq-hub" in result.output
        assert "Configuration" in result.output

    def test_bad_settings_file(self, tmp_path: Path):
        (tmp_path / "settings.yaml").write_text("chunking:\n  chunk_size: -1\n", encoding="utf-8")
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_embedding_provider_closed_after_command(self, monkeypatch: pytest.MonkeyPatch):
        embedder = ClosingEmbedder()
        monkeypatch.setattr(cli_main, "_embedding_provider", lambda settings: embedder)
        result = runner.invoke(app, ["embed", "paid time off"])
        assert result.exit_code == 0, result.output
        assert embedder.closed


class TestFileCommands:
    def test_files_lists_directory(self, faq_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FAQS_PATH", str(faq_dir))
        result = runner.invoke(app, ["files"])
        assert result.exit_code == 0, result.output
        assert "hr.txt" in result.output
        assert "it.txt" in result.output
        assert str((faq_dir / "hr.txt").stat().st_size) in result.output
        assert "2 files" in result.output

    def test_files_dir_option(self, faq_dir: Path):
        result = runner.invoke(app, ["files", "--dir", str(faq_dir)])
        assert result.exit_code == 0, result.output
        assert "2 files" in result.output

    def test_files_empty_directory(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["files", "-d", str(empty)])
        assert result.exit_code == 0, result.output
        assert "No FAQ files found." in result.output

    def test_files_missing_directory(self, tmp_path: Path):
        result = runner.invoke(app, ["files", "-d", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Failed to list FAQ files" in result.output

    def test_show_prints_content(self, faq_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FAQS_PATH", str(faq_dir))
        result = runner.invoke(app, ["show", "it.txt"])
        assert result.exit_code == 0, result.output
        assert "How do I reset my password?" in result.output

    def test_show_unknown_file(self, faq_dir: Path):
        result = runner.invoke(app, ["show", "../hr.txt", "--dir", str(faq_dir)])
        assert result.exit_code == 1
        assert "Failed to read FAQ file" in result.output
