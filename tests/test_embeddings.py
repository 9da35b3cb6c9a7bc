"""Tests for embedding providers: httpx mock transport, no network calls."""

from __future__ import annotations

import json

import httpx
import pytest

from faqhub.embeddings.base import EmbeddingProvider, EmbeddingResponseError
from faqhub.embeddings.factory import (
    available_providers,
    get_embedding_provider,
)
from faqhub.embeddings.http_provider import DEFAULT_MODEL, HTTPEmbeddingProvider

URL = "http://embeddings.test/v1/embeddings"


def _provider(handler, **kwargs) -> HTTPEmbeddingProvider:
    return HTTPEmbeddingProvider(url=URL, transport=httpx.MockTransport(handler), **kwargs)


def _ok(vector: list[float]):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": [{"index": 0, "embedding": vector}]})
    return handler


# ---------------------------------------------------------------------------
# Base class tests
# ---------------------------------------------------------------------------


class TestEmbeddingProviderABC:
    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            EmbeddingProvider()  # type: ignore[abstract]

    def test_provider_name(self):
        assert HTTPEmbeddingProvider.provider_name() == "HTTPEmbeddingProvider"


# ---------------------------------------------------------------------------
# HTTP provider
# ---------------------------------------------------------------------------


class TestHTTPEmbeddingProvider:
    def test_request_payload(self):
        seen: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            assert str(request.url) == URL
            return httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2, 0.3]}]})

        provider = _provider(handler, model="nomic")
        assert provider.embed_query("paid time off") == [0.1, 0.2, 0.3]
        assert seen == [{"model": "nomic", "input": "paid time off"}]

    def test_default_model(self):
        seen: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(200, json={"data": [{"embedding": [1.0]}]})

        _provider(handler).embed_text("hello")
        assert seen[0]["model"] == DEFAULT_MODEL

    def test_one_request_per_text(self):
        count = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal count
            count += 1
            text = json.loads(request.content)["input"]
            return httpx.Response(200, json={"data": [{"embedding": [float(len(text))]}]})

        embeddings = _provider(handler).embed_texts(["a", "bb", "ccc"])
        assert embeddings == [[1.0], [2.0], [3.0]]
        assert count == 3

    def test_embed_texts_empty(self):
        assert _provider(_ok([1.0])).embed_texts([]) == []

    def test_api_key_header(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "Bearer secret"
            return httpx.Response(200, json={"data": [{"embedding": [1.0]}]})

        _provider(handler, api_key="secret").embed_query("q")

    def test_http_error_propagates(self):
        provider = _provider(lambda request: httpx.Response(500, json={"error": "boom"}))
        with pytest.raises(httpx.HTTPStatusError):
            provider.embed_query("q")

    def test_connection_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            _provider(handler).embed_query("q")

    @pytest.mark.parametrize("body", [{}, {"data": []}, {"data": [{"index": 0}]}])
    def test_malformed_response(self, body: dict):
        provider = _provider(lambda request: httpx.Response(200, json=body))
        with pytest.raises(EmbeddingResponseError):
            provider.embed_query("q")

    def test_non_json_response(self):
        provider = _provider(lambda request: httpx.Response(200, text="not json"))
        with pytest.raises(EmbeddingResponseError):
            provider.embed_query("q")

    def test_dimension_probes_once(self):
        count = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal count
            count += 1
            return httpx.Response(200, json={"data": [{"embedding": [0.0] * 8}]})

        provider = _provider(handler)
        assert provider.dimension == 8
        assert provider.dimension == 8
        assert count == 1

    def test_dimension_learned_from_first_call(self):
        provider = _provider(_ok([0.5] * 4))
        provider.embed_query("q")
        assert provider.dimension == 4

    def test_configured_dimension(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        assert _provider(handler, dimension=768).dimension == 768

    def test_context_manager_closes_client(self):
        with _provider(_ok([0.1, 0.2])) as provider:
            assert provider.embed_query("q") == [0.1, 0.2]
        assert provider._client.is_closed


# ---------------------------------------------------------------------------
# Factory tests
# ---------------------------------------------------------------------------


class TestEmbeddingFactory:
    def test_available_providers(self):
        assert available_providers() == ["http"]

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown embedding provider"):
            get_embedding_provider("nonexistent")

    def test_builds_configured_provider(self):
        provider = get_embedding_provider("HTTP", url=URL, model="other", timeout=5.0)
        assert isinstance(provider, HTTPEmbeddingProvider)
        assert provider.url == URL
        assert provider.model == "other"
        provider.close()

    def test_returns_new_instance_per_call(self):
        p1 = get_embedding_provider("http", url=URL)
        p2 = get_embedding_provider("http", url=URL)
        assert p1 is not p2
        p1.close()
        p2.close()
