"""Offset/limit pagination over Printful list endpoints."""

from typing import Any, Dict, List

from loguru import logger


async def fetch_all(client, endpoint: str, limit: int) -> List[Dict[str, Any]]:
    """
    Fetch every page of ``endpoint`` and return the accumulated records.

    Pages are requested one after another in offset order. Exhaustion is
    reached when a page is shorter than ``limit`` or when ``paging.total``
    matches the number of records collected so far; either signal stops.

    Args:
        client: PrintfulClient (anything with an async ``get(path, params)``)
        endpoint: Path relative to the API root, e.g. ``sync/products``
        limit: Page size, must be > 0

    Returns:
        All records, in page order
    """
    records: List[Dict[str, Any]] = []
    offset = 0

    while True:
        payload = await client.get(endpoint, params={"limit": limit, "offset": offset})
        page = payload.get("result") or []
        records.extend(page)
        offset += limit

        total = (payload.get("paging") or {}).get("total")
        if len(page) < limit or total == len(records):
            logger.debug(f"{endpoint}: {len(records)} records in {offset // limit} pages")
            return records
