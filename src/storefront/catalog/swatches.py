"""Color swatches and display labels for variant selection."""

import re

from storefront.models.catalog import ProductVariant, UnifiedProduct, VariantChoice

DEFAULT_SWATCH = "#CCCCCC"

# Ordered: the first pattern found in the title wins, so more specific
# names must come before the generic ones they contain ("navy" before "blue").
COLOR_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(pattern, re.IGNORECASE), hex_value)
    for pattern, hex_value in [
        (r"black", "#000000"),
        (r"white", "#FFFFFF"),
        (r"navy", "#000080"),
        (r"red", "#FF0000"),
        (r"blue", "#0000FF"),
        (r"green", "#008000"),
        (r"yellow", "#FFFF00"),
        (r"purple", "#800080"),
        (r"pink", "#FFC0CB"),
        (r"orange", "#FFA500"),
        (r"gray|grey", "#808080"),
        (r"brown", "#A52A2A"),
        (r"maroon", "#800000"),
        (r"olive", "#808000"),
        (r"teal", "#008080"),
        (r"lime", "#00FF00"),
        (r"aqua|cyan", "#00FFFF"),
        (r"silver", "#C0C0C0"),
        (r"gold", "#FFD700"),
        (r"cream", "#FFFDD0"),
        (r"beige", "#F5F5DC"),
        (r"tan", "#D2B48C"),
        (r"khaki", "#C3B091"),
        (r"burgundy", "#800020"),
        (r"coral", "#FF7F50"),
        (r"salmon", "#FA8072"),
        (r"lavender", "#E6E6FA"),
        (r"mint", "#98FF98"),
        (r"turquoise", "#40E0D0"),
        (r"indigo", "#4B0082"),
        (r"violet", "#8B00FF"),
        (r"magenta", "#FF00FF"),
        (r"fuchsia", "#FF00FF"),
        (r"plum", "#DDA0DD"),
        (r"orchid", "#DA70D6"),
        (r"thistle", "#D8BFD8"),
        (r"wheat", "#F5DEB3"),
        (r"bisque", "#FFE4C4"),
        (r"peach", "#FFCBA4"),
        (r"moccasin", "#FFE4B5"),
        (r"navajo", "#FFDEAD"),
        (r"blanched", "#FFEBCD"),
        (r"antique", "#FAEBD7"),
        (r"linen", "#FAF0E6"),
        (r"old", "#FDF5E6"),
        (r"seashell", "#FFF5EE"),
        (r"cornsilk", "#FFF8DC"),
        (r"ivory", "#FFFFF0"),
        (r"honeydew", "#F0FFF0"),
        (r"azure", "#F0FFFF"),
        (r"alice", "#F0F8FF"),
        (r"ghost", "#F8F8FF"),
        (r"snow", "#FFFAFA"),
        (r"misty", "#FFE4E1"),
        (r"rosy", "#FFE4E1"),
        (r"light", "#F0F0F0"),
        (r"dark", "#404040"),
    ]
]


def color_from_title(title: str) -> str | None:
    """Match the title against the color table; None when nothing matches."""
    for pattern, hex_value in COLOR_PATTERNS:
        if pattern.search(title):
            return hex_value
    return None


def resolve_swatch_color(variant: ProductVariant) -> str:
    """
    Pick the swatch color for a variant.

    Priority: explicit color, catalog-info color, ``Color`` option, keyword
    match against the title, then a neutral gray.
    """
    if variant.color:
        return variant.color
    if variant.catalog_info and variant.catalog_info.get("color"):
        return str(variant.catalog_info["color"])
    option_color = variant.option_value("Color")
    if option_color:
        return option_color
    if variant.title:
        matched = color_from_title(variant.title)
        if matched:
            return matched
    return DEFAULT_SWATCH


def variant_display_name(variant: ProductVariant) -> str:
    """Label a variant from its size/color options or facets, else its title."""
    size = variant.option_value("Size")
    color = variant.option_value("Color")
    if size and color:
        return f"{size} - {color}"
    if size:
        return f"{size} - {variant.title}"
    if color:
        return f"{color} - {variant.title}"

    if variant.size and variant.color:
        return f"{variant.size} - {variant.color}"
    if variant.size:
        return f"{variant.size} - {variant.title}"
    if variant.color:
        return f"{variant.color} - {variant.title}"
    return variant.title


def build_variant_choices(product: UnifiedProduct) -> list[VariantChoice]:
    """Variant choices for a selection UI; empty when there is nothing to choose."""
    if len(product.variants) <= 1:
        return []
    return [
        VariantChoice(
            id=v.id,
            label=variant_display_name(v),
            swatch=resolve_swatch_color(v),
            price=v.price,
            currency=v.currency,
            is_enabled=v.is_enabled,
        )
        for v in product.variants
    ]
