"""
Run every configured fetcher against one shared client.

Unknown object types are logged and skipped. The fetchers run concurrently
and independently; once all have settled, the first failure is re-raised.
Nothing already emitted or downloaded is rolled back.
"""

import asyncio
from contextlib import AsyncExitStack
from typing import Dict, List, Optional

import aiohttp
from loguru import logger

from printful_source.ingest.client import PrintfulClient, make_client
from printful_source.ingest.downloader import AssetDownloader
from printful_source.ingest.fetchers import FETCHER_REGISTRY, BaseFetcher
from printful_source.schemas.config import ResourceKind, SourceConfig
from printful_source.storage.local import ensure_directory


def resolve_kinds(object_types) -> List[ResourceKind]:
    kinds = []
    for name in object_types:
        try:
            kind = ResourceKind(name)
        except ValueError:
            logger.error(f"No fetcher for object type '{name}', skipping")
            continue
        if kind not in FETCHER_REGISTRY:
            logger.error(f"No fetcher registered for {kind.value}, skipping")
            continue
        kinds.append(kind)
    return kinds


async def fetch_content(
    config: SourceConfig,
    store,
    client: Optional[PrintfulClient] = None,
    asset_session: Optional[aiohttp.ClientSession] = None,
) -> Dict[str, int]:
    """
    Fetch all configured resource kinds into ``store``.

    Args:
        config: Source options
        store: Host sink with ``add_collection(type_name=...)``
        client: Shared API client; built from ``config.api_key`` when omitted
        asset_session: Session for image downloads; created when downloads
            are enabled and none is given

    Returns:
        Emitted node count per collection name
    """
    kinds = resolve_kinds(config.object_types)
    if not kinds:
        logger.warning("No known object types configured, nothing to fetch")
        return {}

    async with AsyncExitStack() as stack:
        downloader = None
        if config.download_files:
            directory = ensure_directory(config.image_directory)
            if asset_session is None:
                asset_session = await stack.enter_async_context(aiohttp.ClientSession())
            downloader = AssetDownloader(asset_session, directory)

        if client is None:
            client = await stack.enter_async_context(make_client(config.api_key))

        fetchers: List[BaseFetcher] = [
            FETCHER_REGISTRY[kind](client, config, downloader=downloader)
            for kind in kinds
        ]
        logger.info(f"Fetching {', '.join(k.value for k in kinds)}")

        # Let every fetcher settle before the shared sessions are closed
        results = await asyncio.gather(
            *(fetcher.run(store) for fetcher in fetchers), return_exceptions=True
        )

    failures = [
        (fetcher, result)
        for fetcher, result in zip(fetchers, results)
        if isinstance(result, BaseException)
    ]
    for fetcher, error in failures:
        logger.error(f"[{fetcher.kind.value}] Failed: {error!r}")
    if failures:
        raise failures[0][1]

    return {fetcher.type_name: count for fetcher, count in zip(fetchers, results)}
