"""Shared fixtures for tests: synthetic FAQ documents, no network calls."""

from __future__ import annotations

import hashlib
import textwrap
from pathlib import Path

import numpy as np
import pytest

from faqhub.embeddings.base import EmbeddingProvider

DIM = 32


class HashEmbedder(EmbeddingProvider):
    """Deterministic embedding provider for tests."""

    def __init__(self, dim: int = DIM):
        self._dim = dim
        self.calls: list[str] = []

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        return [self._hash_embed(t) for t in texts]

    def embed_query(self, query: str) -> list[float]:
        return self._hash_embed(query)

    @property
    def dimension(self) -> int:
        return self._dim

    def _hash_embed(self, text: str) -> list[float]:
        self.calls.append(text)
        h = hashlib.sha256(text.encode()).digest()
        vec = np.array([h[i % len(h)] / 255.0 for i in range(self._dim)], dtype=np.float32)
        vec /= np.linalg.norm(vec)
        return vec.tolist()


@pytest.fixture
def embedder() -> HashEmbedder:
    return HashEmbedder()


@pytest.fixture
def sample_faq_text() -> str:
    return textwrap.dedent("""\
        Question: What is our PTO policy?

        Answer: Full-time employees receive 15 days of paid time off per year. Part-time
        employees receive prorated PTO based on hours worked. PTO must be requested at
        least 2 weeks in advance through the HR portal. Unused PTO does not roll over to
        the next calendar year.

        Question: How do I request medical leave?

        Answer: Medical leave requires documentation from your healthcare provider.
        Submit Form ML-100 to HR at least 5 days before your requested leave date.
        Short-term disability may be available for leaves exceeding 2 weeks.
    """)


@pytest.fixture
def numbered_sentences() -> str:
    """Forty short, unique sentences."""
    return " ".join(f"Sentence number {i} is here." for i in range(40))


@pytest.fixture
def faq_dir(tmp_path: Path, sample_faq_text: str) -> Path:
    d = tmp_path / "faqs"
    d.mkdir()
    (d / "hr.txt").write_text(sample_faq_text, encoding="utf-8")
    (d / "it.txt").write_text(
        "Question: How do I reset my password? "
        "Answer: Use the self-service portal. Contact the help desk if you are locked out.",
        encoding="utf-8",
    )
    return d
