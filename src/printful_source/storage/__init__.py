from .local import ensure_directory, summarize_directory
from .node_store import Collection, NodeStore

__all__ = ["Collection", "NodeStore", "ensure_directory", "summarize_directory"]
