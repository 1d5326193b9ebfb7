"""Unified catalog: vendor merge, lookup and variant presentation."""

from storefront.catalog.service import CatalogService
from storefront.catalog.swatches import (
    build_variant_choices,
    resolve_swatch_color,
    variant_display_name,
)

__all__ = [
    "CatalogService",
    "build_variant_choices",
    "resolve_swatch_color",
    "variant_display_name",
]
