"""
Ingestion layer: Printful API client, pagination, asset downloads and the
per-resource fetchers.
"""

from .client import PRINTFUL_API_URL, ConfigurationError, PrintfulClient, make_client
from .downloader import AssetDownloader, DownloadResult, DownloadStatus
from .paginator import fetch_all

__all__ = [
    "AssetDownloader",
    "ConfigurationError",
    "DownloadResult",
    "DownloadStatus",
    "PRINTFUL_API_URL",
    "PrintfulClient",
    "fetch_all",
    "make_client",
]
