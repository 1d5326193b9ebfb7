"""Printful REST payloads (v1 sync products, v2 products and variants)."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class PrintfulStoreLink(BaseModel):
    """Where a product is published; ``sync_product_id`` is the storefront identity."""

    model_config = ConfigDict(extra="allow")

    store_id: int | None = None
    sync_product_id: int
    sync_product_external_id: str | None = None


class PrintfulProduct(BaseModel):
    """Product as returned by the v2 product list and detail endpoints."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    external_id: str | None = None
    source: str | None = None
    name: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None
    image: str | None = None
    tags: list[str] | None = None
    published_to_stores: list[PrintfulStoreLink] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.title or ""

    @property
    def sync_product_id(self) -> int | None:
        if self.published_to_stores:
            return self.published_to_stores[0].sync_product_id
        return self.id

    def is_published_as(self, sync_product_id: int) -> bool:
        return any(s.sync_product_id == sync_product_id for s in self.published_to_stores)


class PrintfulPaging(BaseModel):
    total: int = 0
    offset: int = 0
    limit: int = 20


class PrintfulProductList(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: list[PrintfulProduct] = Field(default_factory=list)
    paging: PrintfulPaging = Field(default_factory=PrintfulPaging)


class PrintfulOption(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    value: Any = None


class PrintfulFile(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = None
    type: str | None = None
    url: str | None = None
    preview_url: str | None = None
    visible: bool = True


class PrintfulCatalogProductRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    variant_id: int | None = None
    product_id: int | None = None
    image: str | None = None
    name: str | None = None


class PrintfulSyncProductInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    external_id: str | None = None
    name: str = ""
    thumbnail: str | None = None
    thumbnail_url: str | None = None
    is_ignored: bool = False
    created: int | None = None
    updated: int | None = None
    variants: int | None = None
    synced: int | None = None


class PrintfulSyncVariant(BaseModel):
    """v1 sync variant: prices are decimal strings; options carry color/size."""

    model_config = ConfigDict(extra="allow")

    id: int
    external_id: str | None = None
    sync_product_id: int | None = None
    name: str = ""
    synced: bool = True
    variant_id: int | None = None
    retail_price: str | None = None
    currency: str = "USD"
    product: PrintfulCatalogProductRef | None = None
    files: list[PrintfulFile] = Field(default_factory=list)
    options: list[PrintfulOption] = Field(default_factory=list)

    def option_value(self, option_id: str) -> str | None:
        for option in self.options:
            if option.id == option_id and option.value:
                return str(option.value)
        return None


class PrintfulSyncProduct(BaseModel):
    """v1 ``/sync/products/{id}`` body."""

    model_config = ConfigDict(extra="allow")

    sync_product: PrintfulSyncProductInfo
    sync_variants: list[PrintfulSyncVariant] = Field(default_factory=list)


class PrintfulVariant(BaseModel):
    """v2 sync variant, optionally enriched with catalog color/size."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str | None = None
    retail_price: str | float | None = None
    retail_price_currency: str | None = None
    catalog_variant_id: int | None = None

    # Filled in from the catalog variant endpoint
    color: str | None = None
    size: str | None = None
    catalog_info: dict[str, Any] | None = None


class PrintfulDetailImage(BaseModel):
    src: str
    alt: str | None = None


class PrintfulDetailVariant(BaseModel):
    """Variant of a combined product detail; price already parsed."""

    id: int
    title: str
    price: float = 0.0
    currency: str = "USD"
    is_enabled: bool = True
    color: str | None = None
    size: str | None = None
    catalog_info: dict[str, Any] | None = None
    variant_id: int | None = None
    product_id: int | None = None
    image: str | None = None
    files: list[dict[str, Any]] = Field(default_factory=list)
    options: list[PrintfulOption] = Field(default_factory=list)


class PrintfulProductDetail(BaseModel):
    """
    Product detail assembled from more than one Printful endpoint.

    ``fidelity`` is ``"full"`` when joined from v1 and v2, ``"basic"`` when
    only the v2 product and variant endpoints were available.
    """

    id: int
    external_id: str | None = None
    name: str = ""
    thumbnail_url: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    variants: list[PrintfulDetailVariant] = Field(default_factory=list)
    images: list[PrintfulDetailImage] = Field(default_factory=list)
    fidelity: Literal["full", "basic"] = "full"
    created: int | None = None
    updated: int | None = None
    variant_count: int | None = None
    synced_count: int | None = None
