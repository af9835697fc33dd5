"""Countries supported for shipping."""

from typing import Any, Dict, List

from printful_source.schemas.config import ResourceKind

from .base import BaseFetcher


class CountryFetcher(BaseFetcher):
    kind = ResourceKind.COUNTRY

    ENDPOINT = "countries"

    async def fetch_records(self) -> List[Dict[str, Any]]:
        payload = await self.client.get(self.ENDPOINT)
        return payload.get("result") or []

    def normalize(self, node: Dict[str, Any]) -> Dict[str, Any]:
        # Countries have no numeric id; the ISO code stands in
        node["id"] = node.get("code")
        return super().normalize(node)
