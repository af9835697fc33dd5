from .runner import fetch_content, resolve_kinds

__all__ = ["fetch_content", "resolve_kinds"]
