"""
Pydantic schema for the source configuration.

The host hands options over once at startup. Both snake_case names and the
camelCase names of the host plugin contract are accepted:

    SourceConfig.model_validate({"apiKey": "...", "objectTypes": ["Country"]})
    SourceConfig(api_key="...", object_types=["Country"])
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PositiveInt, field_validator


class ResourceKind(str, Enum):
    """Catalog entity categories ingested from Printful."""

    SYNC_PRODUCT = "SyncProduct"
    WAREHOUSE_PRODUCT = "WarehouseProduct"
    COUNTRY = "Country"
    TAX_RATE = "TaxRate"

    def collection_name(self, prefix: str) -> str:
        return f"{prefix}{self.value}"


DEFAULT_OBJECT_TYPES = tuple(kind.value for kind in ResourceKind)


class SourceConfig(BaseModel):
    """Immutable options for one ingestion run."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type_name: str = Field(
        "Printful",
        validation_alias=AliasChoices("type_name", "typeName"),
        description="Prefix for every collection name",
    )
    object_types: Tuple[str, ...] = Field(
        DEFAULT_OBJECT_TYPES,
        validation_alias=AliasChoices("object_types", "objectTypes"),
    )
    api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("api_key", "apiKey", "secretKey"),
    )
    pagination_limit: PositiveInt = Field(
        20,
        validation_alias=AliasChoices("pagination_limit", "paginationLimit"),
    )
    download_files: bool = Field(
        False,
        validation_alias=AliasChoices("download_files", "downloadFiles"),
    )
    # Defaults to True to keep older configurations working
    download_product_thumbnail: bool = Field(
        True,
        validation_alias=AliasChoices("download_product_thumbnail", "downloadProductThumbnail"),
    )
    download_product_images: bool = Field(
        False,
        validation_alias=AliasChoices("download_product_images", "downloadProductImages"),
    )
    image_directory: str = Field(
        "printful_images",
        validation_alias=AliasChoices("image_directory", "imageDirectory"),
    )

    @field_validator("object_types", mode="before")
    @classmethod
    def dedupe_object_types(cls, v):
        """Accept ResourceKind members or names, singly or as a sequence;
        drop repeats, keep order.

        Unknown names are kept on purpose: the runner logs and skips them.
        """
        if v is None:
            return DEFAULT_OBJECT_TYPES
        if isinstance(v, str):
            v = [v]
        seen = []
        for name in v:
            # str() of a str-mixin Enum member is "ResourceKind.X" on 3.11+
            name = name.value if isinstance(name, ResourceKind) else str(name)
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return tuple(seen)

    def collection_name(self, kind: ResourceKind) -> str:
        return kind.collection_name(self.type_name)
