"""Application settings loaded from YAML with environment variable overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from faqhub.chunking.schemas import ChunkingConfig, ChunkingStrategy
from faqhub.chunking.selector import chunking_config_from_legacy
from faqhub.embeddings.http_provider import DEFAULT_MODEL, DEFAULT_URL
from faqhub.vectorstore.chroma_store import DEFAULT_COLLECTION


class ConfigError(ValueError):
    """Raised when settings are invalid."""


# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class EmbeddingSettings(BaseModel):
    provider: str = "http"
    url: str = DEFAULT_URL
    model: str = DEFAULT_MODEL
    dimension: int | None = None
    timeout: float = 60.0
    api_key: str | None = None


class VectorStoreSettings(BaseModel):
    backend: str = "chroma"
    host: str = "localhost"
    port: int = Field(default=8000, ge=1, le=65535)
    ssl: bool = False
    collection: str = DEFAULT_COLLECTION


class ChunkingSettings(BaseModel):
    strategy: ChunkingStrategy = ChunkingStrategy.SMART
    chunk_size: int = Field(default=500, gt=0)
    overlap: int = Field(default=50, ge=0)

    def to_config(self) -> ChunkingConfig:
        """Typed chunking config for the selected strategy."""
        return chunking_config_from_legacy(self.strategy, self.chunk_size, self.overlap)


class SearchSettings(BaseModel):
    limit: int = Field(default=3, ge=1)
    preview_chars: int = 300


class IngestionSettings(BaseModel):
    faqs_path: Path = Path("data/faqs")


class LoggingSettings(BaseModel):
    level: str = "INFO"


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    vectorstore: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Environment variable -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "EMBEDDING_SERVICE_URL": ("embedding", "url"),
    "EMBED_MODEL": ("embedding", "model"),
    "EMBEDDING_API_KEY": ("embedding", "api_key"),
    "CHROMA_HOST": ("vectorstore", "host"),
    "CHROMA_PORT": ("vectorstore", "port"),
    "CHROMA_SSL": ("vectorstore", "ssl"),
    "COLLECTION_NAME": ("vectorstore", "collection"),
    "VECTOR_STORE": ("vectorstore", "backend"),
    "CHUNKING_STRATEGY": ("chunking", "strategy"),
    "CHUNK_SIZE": ("chunking", "chunk_size"),
    "CHUNK_OVERLAP": ("chunking", "overlap"),
    "FAQS_PATH": ("ingestion", "faqs_path"),
    "LOG_LEVEL": ("logging", "level"),
}


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv("FAQHUB_PROFILE", "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    for var, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(var)
        if value is None or value == "":
            continue
        if var == "CHROMA_SSL":
            value = value.strip().lower() == "true"
        raw.setdefault(section, {})[key] = value
    return raw


def load_settings(path: str | Path | None = None, use_dotenv: bool = True) -> Settings:
    """Load settings from YAML, then apply environment overrides.

    Args:
        path: Explicit settings file. Defaults to the nearest ``settings.yaml``.
        use_dotenv: Load a ``.env`` file from the working directory first.

    Raises:
        ConfigError: If the file or the resulting values are invalid.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    settings_path = Path(path) if path is not None else _find_settings_file()
    raw: dict[str, Any] = {}
    if settings_path is not None:
        try:
            with open(settings_path, encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read settings file {settings_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Settings file {settings_path} must contain a mapping")

    try:
        settings = Settings(**_apply_env_overrides(raw))
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc

    faqs_path = settings.ingestion.faqs_path
    if not faqs_path.is_absolute():
        # FAQS_PATH from the environment is cwd-relative, a YAML value file-relative
        from_env = bool(os.getenv("FAQS_PATH"))
        if settings_path is not None and not from_env:
            base = settings_path.parent
        else:
            base = Path.cwd()
        settings.ingestion.faqs_path = (base / faqs_path).resolve()

    return settings
