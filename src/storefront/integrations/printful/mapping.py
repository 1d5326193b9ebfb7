"""Mapping of Printful payloads onto the unified catalog model."""

from storefront.integrations.printful.models import (
    PrintfulDetailVariant,
    PrintfulProduct,
    PrintfulProductDetail,
    PrintfulSyncProduct,
    PrintfulSyncVariant,
    PrintfulVariant,
)
from storefront.models.catalog import (
    Platform,
    ProductImage,
    ProductVariant,
    UnifiedProduct,
    VariantOption,
    compose_product_id,
)

MAX_PRODUCT_IMAGES = 10


def parse_decimal_price(value: str | float | None) -> float:
    """Printful reports prices as decimal strings (``"45.00"``)."""
    if value is None:
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if price != price or price < 0:  # NaN or negative
        return 0.0
    return price


def variant_from_sync_variant(variant: PrintfulSyncVariant) -> PrintfulDetailVariant:
    """v1 sync variant -> detail variant, pulling color/size out of the options."""
    return PrintfulDetailVariant(
        id=variant.id,
        title=variant.name,
        price=parse_decimal_price(variant.retail_price),
        currency=variant.currency or "USD",
        is_enabled=variant.synced,
        color=variant.option_value("Color"),
        size=variant.option_value("Size"),
        variant_id=variant.variant_id,
        product_id=variant.product.product_id if variant.product else None,
        image=variant.product.image if variant.product else None,
        files=[f.model_dump(mode="json") for f in variant.files],
        options=variant.options,
    )


def variant_from_v2_variant(variant: PrintfulVariant) -> PrintfulDetailVariant:
    """v2 sync variant (possibly catalog-enriched) -> detail variant."""
    return PrintfulDetailVariant(
        id=variant.id,
        title=variant.name or f"Variant {variant.id}",
        price=parse_decimal_price(variant.retail_price),
        currency=variant.retail_price_currency or "USD",
        is_enabled=True,
        color=variant.color,
        size=variant.size,
        catalog_info=variant.catalog_info,
    )


def build_full_detail(
    sync_product_id: int,
    v1: PrintfulSyncProduct,
    v2: PrintfulProduct,
) -> PrintfulProductDetail:
    """Join the v1 sync product (variants, files, options) with the v2 product (basic info)."""
    name = v2.display_name or v1.sync_product.name
    images = [
        {"src": f.url, "alt": name}
        for variant in v1.sync_variants
        for f in variant.files
        if f.visible and f.type == "preview" and f.url
    ][:MAX_PRODUCT_IMAGES]
    thumbnail = v2.thumbnail_url or v1.sync_product.thumbnail_url or v1.sync_product.thumbnail

    return PrintfulProductDetail(
        id=sync_product_id,
        external_id=v2.external_id or v1.sync_product.external_id,
        name=name,
        thumbnail_url=thumbnail,
        description=v2.description,
        tags=v2.tags,
        variants=[variant_from_sync_variant(v) for v in v1.sync_variants],
        images=images,
        fidelity="full",
        created=v1.sync_product.created,
        updated=v1.sync_product.updated,
        variant_count=v1.sync_product.variants,
        synced_count=v1.sync_product.synced,
    )


def build_basic_detail(
    sync_product_id: int,
    product: PrintfulProduct,
    variants: list[PrintfulVariant],
) -> PrintfulProductDetail:
    """Reduced-fidelity detail from the v2 product and variant endpoints only."""
    images = []
    if product.thumbnail_url:
        images.append({"src": product.thumbnail_url, "alt": product.display_name})
    return PrintfulProductDetail(
        id=sync_product_id,
        external_id=product.external_id,
        name=product.display_name,
        thumbnail_url=product.thumbnail_url,
        description=product.description,
        tags=product.tags,
        variants=[variant_from_v2_variant(v) for v in variants],
        images=images,
        fidelity="basic",
    )


def map_detail_variant(variant: PrintfulDetailVariant) -> ProductVariant:
    return ProductVariant(
        id=variant.id,
        title=variant.title,
        price=variant.price,
        currency=variant.currency,
        is_enabled=variant.is_enabled,
        color=variant.color,
        size=variant.size,
        catalog_info=variant.catalog_info,
        options=[VariantOption(id=o.id, value=o.value) for o in variant.options],
        files=variant.files,
        image=variant.image,
    )


def map_list_product(
    product: PrintfulProduct,
    variants: list[PrintfulVariant] | None = None,
    native_id: int | None = None,
) -> UnifiedProduct:
    """
    Map a product from the v2 list endpoint.

    The list endpoint carries no variants; they are attached later when a
    detail page or the cart needs them. A product published to several
    stores is labelled with its first store link unless ``native_id`` names
    the sync id it was requested under.
    """
    if native_id is None:
        native_id = product.sync_product_id
    image = product.thumbnail_url or product.image
    return UnifiedProduct(
        id=compose_product_id(Platform.PRINTFUL, native_id),
        name=product.display_name,
        description=product.description,
        images=[ProductImage(src=image, alt=product.display_name)] if image else [],
        variants=[map_detail_variant(variant_from_v2_variant(v)) for v in variants or []],
        tags=product.tags,
        platform=Platform.PRINTFUL,
        original_data=product.model_dump(mode="json"),
    )


def map_product_detail(detail: PrintfulProductDetail) -> UnifiedProduct:
    """Map a combined product detail to UnifiedProduct."""
    images = [ProductImage(src=img.src, alt=img.alt or detail.name) for img in detail.images]
    if not images and detail.thumbnail_url:
        images = [ProductImage(src=detail.thumbnail_url, alt=detail.name)]
    return UnifiedProduct(
        id=compose_product_id(Platform.PRINTFUL, detail.id),
        name=detail.name,
        description=detail.description,
        images=images,
        variants=[map_detail_variant(v) for v in detail.variants],
        tags=detail.tags,
        platform=Platform.PRINTFUL,
        original_data=detail.model_dump(mode="json"),
    )
