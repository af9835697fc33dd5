"""
In-memory node sink.

Implements the host contract the fetchers write to: ``add_collection`` hands
back a named collection and ``add_node`` appends one record to it. Any host
object with the same two methods can be used instead.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from loguru import logger


class Collection:
    """Append-only list of nodes under one type name."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        self.nodes: List[Dict[str, Any]] = []

    def add_node(self, node: Dict[str, Any]) -> Dict[str, Any]:
        self.nodes.append(node)
        return node

    def __len__(self):
        return len(self.nodes)


class NodeStore:
    def __init__(self):
        self.collections: Dict[str, Collection] = {}

    def add_collection(self, type_name: str) -> Collection:
        if type_name not in self.collections:
            self.collections[type_name] = Collection(type_name)
        return self.collections[type_name]

    def get_collection(self, type_name: str) -> Collection:
        return self.collections[type_name]

    def counts(self) -> Dict[str, int]:
        return {name: len(col) for name, col in self.collections.items()}

    def dump(self, output_dir: Path) -> List[Path]:
        """
        Write one ``{type_name}.json`` file per collection.

        Returns:
            Paths of the written files
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for name, col in self.collections.items():
            path = output_dir / f"{name}.json"
            with open(path, "w", encoding="utf-8") as f:
                json.dump(col.nodes, f, ensure_ascii=False, indent=2, default=str)
            logger.info(f"Saved {len(col)} nodes to {path}")
            written.append(path)
        return written
