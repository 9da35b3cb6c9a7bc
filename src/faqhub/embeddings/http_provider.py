"""HTTP embedding provider for OpenAI-compatible ``/v1/embeddings`` endpoints.

Works with LM Studio, llama.cpp server, vLLM, Ollama's OpenAI-compatible API
and similar. One request per text: the ingestion loop embeds and stores a
chunk before moving on to the next.
"""

from __future__ import annotations

import logging

import httpx

from faqhub.embeddings.base import EmbeddingProvider, EmbeddingResponseError

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://127.0.0.1:1234/v1/embeddings"
DEFAULT_MODEL = "text-embedding-nomic-embed-text-v1.5"


class HTTPEmbeddingProvider(EmbeddingProvider):
    """Embed text by POSTing ``{"model", "input"}`` to an embeddings endpoint.

    HTTP errors (``httpx.HTTPStatusError``) and connection errors
    (``httpx.TransportError``) are not retried; they propagate to the caller.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        model: str = DEFAULT_MODEL,
        dimension: int | None = None,
        timeout: float = 60.0,
        api_key: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.url = url
        self.model = model
        self._dimension = dimension
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = httpx.Client(timeout=timeout, headers=headers, transport=transport)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        return [self._embed_single(text) for text in texts]

    def embed_query(self, query: str) -> list[float]:
        return self._embed_single(query)

    @property
    def dimension(self) -> int:
        """Embedding size; probes the service once when not configured."""
        if self._dimension is None:
            self._dimension = len(self._embed_single("dimension probe"))
            logger.info("Embedding dimension for %s: %d", self.model, self._dimension)
        return self._dimension

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _embed_single(self, text: str) -> list[float]:
        resp = self._client.post(self.url, json={"model": self.model, "input": text})
        resp.raise_for_status()

        try:
            embedding = resp.json()["data"][0]["embedding"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise EmbeddingResponseError(
                f"Embedding service at {self.url} returned no embedding"
            ) from exc

        if self._dimension is None:
            self._dimension = len(embedding)
        return embedding
