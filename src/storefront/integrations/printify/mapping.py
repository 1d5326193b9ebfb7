"""Mapping of Printify products onto the unified catalog model."""

from storefront.integrations.printify.models import PrintifyProduct, PrintifyVariant
from storefront.models.catalog import (
    Platform,
    ProductImage,
    ProductVariant,
    UnifiedProduct,
    compose_product_id,
)


def minor_units_to_price(amount: int) -> float:
    """Printify reports prices in cents."""
    return amount / 100


def map_variant(variant: PrintifyVariant) -> ProductVariant:
    return ProductVariant(
        id=variant.id,
        title=variant.title,
        price=minor_units_to_price(variant.price),
        currency=variant.currency,
        is_enabled=variant.is_enabled,
    )


def map_product(product: PrintifyProduct) -> UnifiedProduct:
    """Map a Printify product to UnifiedProduct."""
    return UnifiedProduct(
        id=compose_product_id(Platform.PRINTIFY, product.id),
        name=product.title,
        description=product.description,
        images=[ProductImage(src=img.src, alt=product.title) for img in product.images],
        variants=[map_variant(v) for v in product.variants],
        tags=product.tags,
        platform=Platform.PRINTIFY,
        original_data=product.model_dump(mode="json"),
    )
