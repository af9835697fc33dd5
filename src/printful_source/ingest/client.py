"""
Authenticated Printful API client.

One client is built per run and shared by every fetcher. It wraps a single
aiohttp session that carries the Basic auth header and logs each outgoing
request as ``METHOD path`` through a trace hook.
"""

import base64
from typing import Any, Dict, Optional

import aiohttp
from loguru import logger

PRINTFUL_API_URL = "https://api.printful.com"


class ConfigurationError(Exception):
    """Raised when the API key cannot be turned into an auth header."""


async def _log_request(session, trace_config_ctx, params):
    logger.debug(f"{params.method.upper()} {params.url.path_qs}")


def _auth_header(api_key: str) -> str:
    if not isinstance(api_key, str):
        raise ConfigurationError(
            f"Printful API key must be a string, got {type(api_key).__name__}"
        )
    token = base64.b64encode(api_key.encode()).decode()
    return f"Basic {token}"


class PrintfulClient:
    """Thin JSON client bound to the Printful base URL."""

    def __init__(self, session: aiohttp.ClientSession, base_url: str = PRINTFUL_API_URL):
        self.session = session
        self.base_url = base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        GET a Printful endpoint and return the decoded envelope.

        Raises:
            aiohttp.ClientResponseError: on any non-2xx status
            aiohttp.ClientError: on network failures
        """
        async with self.session.get(self.url_for(path), params=params) as resp:
            resp.raise_for_status()
            return await resp.json()

    async def close(self):
        await self.session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


def make_client(api_key: str, base_url: str = PRINTFUL_API_URL) -> PrintfulClient:
    """
    Build a client for the given API key.

    Must be called from inside a running event loop. No retries and no
    timeout override: aiohttp defaults apply.

    Raises:
        ConfigurationError: if the key is unset or not a string
    """
    headers = {
        "Authorization": _auth_header(api_key),
        "Accept": "application/json",
    }
    trace_config = aiohttp.TraceConfig()
    trace_config.on_request_start.append(_log_request)

    session = aiohttp.ClientSession(headers=headers, trace_configs=[trace_config])
    return PrintfulClient(session, base_url=base_url)
