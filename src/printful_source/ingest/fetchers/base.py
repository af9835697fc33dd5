"""
Base fetcher class. Every resource kind has one subclass.

BaseFetcher handles:
- Collection naming (``{type_name}{Kind}``)
- Slug derivation from ``name``
- Emitting normalized records to the host sink, in order

To add a resource kind, subclass BaseFetcher, set ``kind`` and implement
``fetch_records()``, then register the class in FETCHER_REGISTRY.
"""

import inspect
from typing import Any, Dict, List, Optional

from loguru import logger
from slugify import slugify

from printful_source.ingest.downloader import AssetDownloader
from printful_source.schemas.config import ResourceKind, SourceConfig


class BaseFetcher:
    kind: ResourceKind

    def __init__(
        self,
        client,
        config: SourceConfig,
        downloader: Optional[AssetDownloader] = None,
    ):
        self.client = client
        self.config = config
        self.downloader = downloader

    @property
    def type_name(self) -> str:
        return self.config.collection_name(self.kind)

    # -- Override in subclasses --

    async def fetch_records(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    # -- Shared infrastructure --

    def normalize(self, node: Dict[str, Any]) -> Dict[str, Any]:
        if node.get("name"):
            node["slug"] = slugify(str(node["name"]), lowercase=True)
        return node

    async def download(self, owner_id, url: Optional[str]) -> Optional[str]:
        """Fail-open download; returns the local path as a string, or None without a URL."""
        if self.downloader is None:
            return None
        result = await self.downloader.fetch(owner_id, url)
        if result is None:
            return None
        if not result.ok:
            logger.warning(f"[{self.kind.value}] Using missing file {result.path.name} for owner {owner_id}")
        return str(result.path)

    async def run(self, store) -> int:
        """
        Fetch, normalize and emit every record of this kind.

        Each ``add_node`` call completes (and is awaited when the sink is
        async) before the next record is emitted.

        Returns:
            Number of records emitted
        """
        logger.info(f"[{self.kind.value}] Fetching")
        records = await self.fetch_records()

        collection = store.add_collection(type_name=self.type_name)
        for node in records:
            self.normalize(node)
            logger.debug(f"Add node {self.kind.value} {node.get('id')}")
            added = collection.add_node(node)
            if inspect.isawaitable(added):
                await added

        logger.info(f"[{self.kind.value}] Emitted {len(records)} nodes to {self.type_name}")
        return len(records)
