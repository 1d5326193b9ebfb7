"""Catalog models for unified product data across fulfillment platforms."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from storefront.exceptions import InvalidProductIdError


class Platform(str, Enum):
    """Fulfillment platforms the storefront sells through."""

    PRINTIFY = "printify"
    PRINTFUL = "printful"


def compose_product_id(platform: Platform | str, native_id: int | str) -> str:
    """Build the composite product id ``"{platform}-{native_id}"``."""
    return f"{Platform(platform).value}-{native_id}"


def parse_product_id(product_id: str) -> tuple[Platform, str]:
    """
    Split a composite product id into platform and native id.

    Splits on the first hyphen only. Platform names never contain a hyphen,
    so native ids that do (e.g. ``"printify-abc-123"``) still round-trip.

    Raises:
        InvalidProductIdError: Unknown platform prefix or empty native id.
    """
    prefix, sep, native_id = product_id.partition("-")
    if not sep or not native_id:
        raise InvalidProductIdError(product_id)
    try:
        platform = Platform(prefix)
    except ValueError:
        raise InvalidProductIdError(product_id) from None
    return platform, native_id


class ProductImage(BaseModel):
    """Product image reference."""

    src: str = Field(description="Image URL")
    alt: str | None = Field(default=None, description="Alt text")


class VariantOption(BaseModel):
    """Generic vendor option (e.g. ``{"id": "Color", "value": "Navy"}``)."""

    id: str
    value: Any = None


class ProductVariant(BaseModel):
    """A purchasable variant of a product, priced in major currency units."""

    id: int | str = Field(description="Vendor-native variant ID")
    title: str = Field(default="", description="Variant label")
    price: float = Field(default=0.0, ge=0, description="Price in currency units")
    currency: str = Field(default="USD")
    is_enabled: bool = Field(default=True)

    # Facets, when the vendor provides them
    color: str | None = None
    size: str | None = None
    catalog_info: dict[str, Any] | None = None
    options: list[VariantOption] = Field(default_factory=list)
    files: list[dict[str, Any]] = Field(default_factory=list)
    image: str | None = None

    def option_value(self, option_id: str) -> str | None:
        """Return the value of the option with the given id, if present."""
        for option in self.options:
            if option.id == option_id and option.value:
                return str(option.value)
        return None


class UnifiedProduct(BaseModel):
    """
    Product information normalized across Printify and Printful.

    ``id`` is the composite ``"{platform}-{native_id}"`` key; the platform is
    always recoverable from it with :func:`parse_product_id`.
    """

    id: str = Field(description="Composite product ID")
    name: str = Field(description="Display name")
    description: str | None = Field(default=None, description="Vendor-supplied rich text")
    images: list[ProductImage] = Field(default_factory=list)
    variants: list[ProductVariant] = Field(default_factory=list)
    tags: list[str] | None = None
    platform: Platform

    # Raw vendor payload for lossless fallback rendering
    original_data: dict[str, Any] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "printify-5f1a",
                    "name": "Custom Hoodie",
                    "images": [{"src": "https://images.printify.com/hoodie.jpg", "alt": "Custom Hoodie"}],
                    "variants": [
                        {"id": 5, "title": "Small - Black", "price": 45.0, "currency": "USD"}
                    ],
                    "platform": "printify",
                }
            ]
        }
    }

    @property
    def native_id(self) -> str:
        return parse_product_id(self.id)[1]

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    @property
    def price_range(self) -> tuple[float, float] | None:
        if not self.variants:
            return None
        prices = [v.price for v in self.variants]
        return min(prices), max(prices)

    def find_variant(self, variant_id: int | str) -> ProductVariant | None:
        """Look up a variant by id, comparing ids as strings."""
        for variant in self.variants:
            if str(variant.id) == str(variant_id):
                return variant
        return None


class UnifiedProductPage(BaseModel):
    """A bounded slice of the unified catalog."""

    items: list[UnifiedProduct] = Field(default_factory=list)
    total: int = Field(default=0, ge=0, description="Products fetched across vendors")
    has_more: bool = False


class VariantChoice(BaseModel):
    """Variant entry prepared for a selection UI."""

    id: int | str
    label: str
    swatch: str = Field(description="CSS color for the swatch")
    price: float
    currency: str = "USD"
    is_enabled: bool = True
