"""
Shared pytest fixtures for printful_source tests.

Provides in-process fakes for the Printful API client and for the aiohttp
session used by the asset downloader, plus sample vendor payloads.
"""

import inspect

import aiohttp
import pytest

from printful_source.schemas.config import SourceConfig
from printful_source.storage.node_store import NodeStore


# ─────────────────────────────────────────────────────────────────────
# Fake Printful API client
# ─────────────────────────────────────────────────────────────────────

class FakeClient:
    """
    Stands in for PrintfulClient.

    ``routes`` maps an endpoint path to a payload, an exception to raise, or a
    callable ``(params) -> payload`` (sync or async).
    """

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    async def get(self, path, params=None):
        params = dict(params or {})
        self.calls.append((path, params))
        handler = self.routes[path]
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            result = handler(params)
            if inspect.isawaitable(result):
                result = await result
            return result
        return handler

    def paths(self):
        return [path for path, _ in self.calls]


def paged(records, total="auto"):
    """Build a handler that serves ``records`` with limit/offset paging."""

    def handler(params):
        limit = params["limit"]
        offset = params["offset"]
        payload = {"code": 200, "result": records[offset:offset + limit]}
        if total is not None:
            payload["paging"] = {
                "total": len(records) if total == "auto" else total,
                "offset": offset,
                "limit": limit,
            }
        return payload

    return handler


# ─────────────────────────────────────────────────────────────────────
# Fake aiohttp session for downloads
# ─────────────────────────────────────────────────────────────────────

class FakeContent:
    def __init__(self, chunks, error=None):
        self.chunks = chunks
        self.error = error

    async def iter_chunked(self, n):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


class FakeResponse:
    def __init__(self, chunks=(b"image-bytes",), error=None):
        self.status = 200
        self.content = FakeContent(list(chunks), error=error)

    def raise_for_status(self):
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    Records every requested URL.

    ``responses`` maps URL to a FakeResponse or an exception to raise;
    unknown URLs get a default one-chunk response.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.requested = []

    def get(self, url):
        self.requested.append(url)
        response = self.responses.get(url, FakeResponse())
        if isinstance(response, Exception):
            raise response
        return response


# ─────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def node_store():
    return NodeStore()


@pytest.fixture
def base_config():
    """Config with no downloads and a small page size."""
    return SourceConfig(api_key="test-key", pagination_limit=2)


@pytest.fixture
def sample_countries():
    return [
        {"code": "US", "name": "United States", "states": [{"code": "CA", "name": "California"}]},
        {"code": "LV", "name": "Latvia", "states": None},
    ]


@pytest.fixture
def sample_tax_countries():
    return [
        {"id": 1, "code": "US", "name": "United States", "states": [{"code": "CA", "rate": 0.0725}]},
        {"id": 2, "code": "CA", "name": "Canada", "states": []},
    ]


@pytest.fixture
def sample_warehouse_products():
    return [
        {"id": 301, "name": "Sticker Pack", "status": "approved", "thumbnail_url": None},
        {"id": 302, "name": "Enamel Mug", "status": "approved"},
        {"id": 303, "status": "draft"},
    ]


def sync_product_detail(product_id, name, files_per_variant=1):
    """Detail payload for ``GET sync/products/{id}``."""
    variants = []
    for v in range(2):
        variant_id = product_id * 10 + v
        variants.append({
            "id": variant_id,
            "sync_product_id": product_id,
            "name": f"{name} / {'S' if v == 0 else 'M'}",
            "retail_price": "19.99" if v == 0 else "21.50",
            "currency": "USD",
            "files": [
                {
                    "id": variant_id * 100 + f,
                    "type": "default",
                    "thumbnail_url": f"https://files.cdn.printful.com/thumb/{variant_id}_{f}.PNG?v=1",
                    "preview_url": f"https://files.cdn.printful.com/preview/{variant_id}_{f}.png",
                }
                for f in range(files_per_variant)
            ],
        })
    return {
        "code": 200,
        "result": {
            "sync_product": {
                "id": product_id,
                "external_id": f"ext-{product_id}",
                "name": name,
                "variants": len(variants),
                "synced": len(variants),
                "thumbnail_url": f"https://files.cdn.printful.com/products/{product_id}/Thumb.JPG",
            },
            "sync_variants": variants,
        },
    }


@pytest.fixture
def sync_product_routes():
    """Two listed sync products with full detail payloads."""
    listing = [{"id": 1, "name": "Unisex Tee"}, {"id": 2, "name": "Canvas Tote"}]
    return {
        "sync/products": paged(listing),
        "sync/products/1": sync_product_detail(1, "Unisex Tee"),
        "sync/products/2": sync_product_detail(2, "Canvas Tote"),
    }


@pytest.fixture
def connection_error():
    return aiohttp.ClientConnectionError("connection reset")


@pytest.fixture
def fake_client():
    """Factory: ``fake_client(routes)`` -> FakeClient."""
    return FakeClient


@pytest.fixture
def paged_route():
    """Factory: ``paged_route(records, total="auto")`` -> paging handler."""
    return paged


@pytest.fixture
def fake_response():
    """Factory: ``fake_response(chunks, error=None)`` -> FakeResponse."""
    return FakeResponse


@pytest.fixture
def session_factory():
    """Factory: ``session_factory(responses)`` -> FakeSession."""
    return FakeSession


@pytest.fixture
def product_detail():
    """Factory: ``product_detail(product_id, name, files_per_variant=1)``."""
    return sync_product_detail
