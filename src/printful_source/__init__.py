"""
Printful content source.

Pulls sync products, warehouse products, countries and tax rates from the
Printful API and hands them to a host sink as normalized nodes, optionally
downloading product images to disk.
"""

from .orchestration.runner import fetch_content
from .schemas.config import ResourceKind, SourceConfig
from .source import PrintfulSource

__all__ = ["PrintfulSource", "ResourceKind", "SourceConfig", "fetch_content"]

__version__ = "0.1.0"
