"""Data models for the storefront."""

from storefront.models.cart import (
    CartItem,
    PlatformCart,
    SelectedVariant,
    UnifiedCart,
    cart_item_id,
)
from storefront.models.catalog import (
    Platform,
    ProductImage,
    ProductVariant,
    UnifiedProduct,
    UnifiedProductPage,
    VariantChoice,
    VariantOption,
    compose_product_id,
    parse_product_id,
)

__all__ = [
    # Catalog
    "Platform",
    "ProductImage",
    "ProductVariant",
    "UnifiedProduct",
    "UnifiedProductPage",
    "VariantChoice",
    "VariantOption",
    "compose_product_id",
    "parse_product_id",
    # Cart
    "CartItem",
    "PlatformCart",
    "SelectedVariant",
    "UnifiedCart",
    "cart_item_id",
]
