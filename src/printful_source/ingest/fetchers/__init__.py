from printful_source.schemas.config import ResourceKind

from .base import BaseFetcher
from .country import CountryFetcher
from .sync_product import SyncProductFetcher
from .tax_rate import TaxRateFetcher
from .warehouse_product import WarehouseProductFetcher

FETCHER_REGISTRY = {
    ResourceKind.SYNC_PRODUCT: SyncProductFetcher,
    ResourceKind.WAREHOUSE_PRODUCT: WarehouseProductFetcher,
    ResourceKind.COUNTRY: CountryFetcher,
    ResourceKind.TAX_RATE: TaxRateFetcher,
}

__all__ = [
    "BaseFetcher",
    "CountryFetcher",
    "FETCHER_REGISTRY",
    "SyncProductFetcher",
    "TaxRateFetcher",
    "WarehouseProductFetcher",
]
