"""Countries and states where Printful collects sales tax."""

from typing import Any, Dict, List

from printful_source.schemas.config import ResourceKind

from .base import BaseFetcher


class TaxRateFetcher(BaseFetcher):
    kind = ResourceKind.TAX_RATE

    ENDPOINT = "tax/countries"

    async def fetch_records(self) -> List[Dict[str, Any]]:
        payload = await self.client.get(self.ENDPOINT)
        return payload.get("result") or []
