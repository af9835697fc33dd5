"""
Sync products: the store's own catalog with variants and print files.

Listing is paginated and only yields ids; each product is then fetched in
full, concurrently. Image downloads run concurrently across products but one
file at a time within a product, which bounds the burst against the CDN.
"""

import asyncio
from typing import Any, Dict, List, Optional

from loguru import logger

from printful_source.ingest.paginator import fetch_all
from printful_source.schemas.config import ResourceKind

from .base import BaseFetcher


def to_float(value) -> Optional[float]:
    """Coerce a price string such as "19.99" to float; unparseable values become None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class SyncProductFetcher(BaseFetcher):
    kind = ResourceKind.SYNC_PRODUCT

    LIST_ENDPOINT = "sync/products"

    async def fetch_records(self) -> List[Dict[str, Any]]:
        listing = await fetch_all(self.client, self.LIST_ENDPOINT, self.config.pagination_limit)
        logger.info(f"[{self.kind.value}] Listed {len(listing)} products")

        # gather keeps listing order regardless of completion order
        products = await asyncio.gather(
            *(self._fetch_product(item["id"]) for item in listing)
        )

        if self.downloader is not None:
            await asyncio.gather(*(self._download_assets(product) for product in products))

        return list(products)

    async def _fetch_product(self, product_id) -> Dict[str, Any]:
        payload = await self.client.get(f"{self.LIST_ENDPOINT}/{product_id}")
        result = payload["result"]

        product = dict(result["sync_product"])
        product["variants"] = [
            {**variant, "retail_price": to_float(variant.get("retail_price"))}
            for variant in result.get("sync_variants") or []
        ]
        return product

    async def _download_assets(self, product: Dict[str, Any]):
        if self.config.download_product_thumbnail and product.get("thumbnail_url"):
            product["thumbnail_img"] = await self.download(product["id"], product["thumbnail_url"])

        if not self.config.download_product_images:
            return

        for variant in product.get("variants") or []:
            for file in variant.get("files") or []:
                file["thumbnail_img"] = await self.download(file.get("id"), file.get("thumbnail_url"))
                file["preview_img"] = await self.download(file.get("id"), file.get("preview_url"))
