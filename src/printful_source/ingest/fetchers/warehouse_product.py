"""Warehouse products: items stored in Printful's fulfillment warehouses."""

from typing import Any, Dict, List

from printful_source.ingest.paginator import fetch_all
from printful_source.schemas.config import ResourceKind

from .base import BaseFetcher


class WarehouseProductFetcher(BaseFetcher):
    """
    Paginated listing only.

    Thumbnails are not downloaded for this kind, even with downloads enabled.
    """

    kind = ResourceKind.WAREHOUSE_PRODUCT

    LIST_ENDPOINT = "warehouse/products"

    async def fetch_records(self) -> List[Dict[str, Any]]:
        return await fetch_all(self.client, self.LIST_ENDPOINT, self.config.pagination_limit)
