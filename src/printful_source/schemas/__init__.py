"""
Configuration schemas.

Provides the pydantic model for source options and the resource kind enum.
"""

from .config import DEFAULT_OBJECT_TYPES, ResourceKind, SourceConfig

__all__ = [
    "DEFAULT_OBJECT_TYPES",
    "ResourceKind",
    "SourceConfig",
]
