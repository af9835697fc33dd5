"""
Host plugin entry point.

The host constructs the source with its options and calls ``register`` with
its API object; the source hooks ``fetch_content`` into the host's load phase:

    source = PrintfulSource({"apiKey": "...", "objectTypes": ["SyncProduct"]})
    source.register(api)   # api.load_source(source.fetch_content)
"""

from typing import Any, Dict, Optional, Union

from printful_source.orchestration.runner import fetch_content
from printful_source.schemas.config import SourceConfig


class PrintfulSource:
    def __init__(self, options: Optional[Union[SourceConfig, Dict[str, Any]]] = None):
        if isinstance(options, SourceConfig):
            self.config = options
        else:
            self.config = SourceConfig.model_validate(options or {})

    @staticmethod
    def default_options() -> Dict[str, Any]:
        return SourceConfig().model_dump()

    def register(self, api):
        api.load_source(self.fetch_content)
        return self

    async def fetch_content(self, store) -> Dict[str, int]:
        return await fetch_content(self.config, store)
