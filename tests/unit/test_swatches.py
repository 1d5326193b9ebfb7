"""Unit tests for swatch color resolution and variant labels."""

from storefront.catalog.swatches import (
    DEFAULT_SWATCH,
    build_variant_choices,
    color_from_title,
    resolve_swatch_color,
    variant_display_name,
)
from storefront.models.catalog import Platform, ProductVariant, UnifiedProduct


class TestResolveSwatchColor:
    """Tests for the swatch priority chain."""

    def test_explicit_color_wins(self):
        variant = ProductVariant(
            id=1,
            title="Large - Red",
            color="#123456",
            catalog_info={"color": "#654321"},
            options=[{"id": "Color", "value": "Green"}],
        )
        assert resolve_swatch_color(variant) == "#123456"

    def test_catalog_info_color(self):
        variant = ProductVariant(
            id=1,
            title="Large - Red",
            catalog_info={"color": "#654321"},
            options=[{"id": "Color", "value": "Green"}],
        )
        assert resolve_swatch_color(variant) == "#654321"

    def test_color_option(self):
        variant = ProductVariant(
            id=1,
            title="Large - Red",
            options=[{"id": "Color", "value": "Heather Grey"}],
        )
        assert resolve_swatch_color(variant) == "Heather Grey"

    def test_title_navy_before_blue(self):
        """'Navy Blue' matches navy, which precedes blue in the table."""
        variant = ProductVariant(id=7, title="Large - Navy Blue")
        assert resolve_swatch_color(variant) == "#000080"

    def test_title_match_is_case_insensitive(self):
        assert resolve_swatch_color(ProductVariant(id=1, title="SMALL - BLACK")) == "#000000"

    def test_grey_spelling(self):
        assert color_from_title("Medium - Grey") == "#808080"
        assert color_from_title("Medium - Gray") == "#808080"

    def test_default_gray(self):
        assert resolve_swatch_color(ProductVariant(id=1, title="One size")) == DEFAULT_SWATCH
        assert resolve_swatch_color(ProductVariant(id=1, title="")) == DEFAULT_SWATCH


class TestVariantDisplayName:
    """Tests for variant labels."""

    def test_size_and_color_options(self):
        variant = ProductVariant(
            id=1,
            title="Polo",
            options=[{"id": "Color", "value": "Navy"}, {"id": "Size", "value": "M"}],
        )
        assert variant_display_name(variant) == "M - Navy"

    def test_size_option_only(self):
        variant = ProductVariant(id=1, title="Polo", options=[{"id": "Size", "value": "M"}])
        assert variant_display_name(variant) == "M - Polo"

    def test_catalog_facets(self):
        assert variant_display_name(ProductVariant(id=1, title="Polo", size="L", color="Red")) == "L - Red"
        assert variant_display_name(ProductVariant(id=1, title="Polo", color="Red")) == "Red - Polo"

    def test_title_fallback(self):
        assert variant_display_name(ProductVariant(id=1, title="Small - White")) == "Small - White"


class TestBuildVariantChoices:
    """Tests for build_variant_choices."""

    def test_single_variant_has_no_choices(self):
        product = UnifiedProduct(
            id="printify-2",
            name="Mug",
            platform=Platform.PRINTIFY,
            variants=[ProductVariant(id=4, title="Standard - White", price=15.0)],
        )
        assert build_variant_choices(product) == []

    def test_choices(self):
        product = UnifiedProduct(
            id="printify-3",
            name="Hoodie",
            platform=Platform.PRINTIFY,
            variants=[
                ProductVariant(id=5, title="Small - Black", price=45.0),
                ProductVariant(id=6, title="Medium - White", price=45.0, is_enabled=False),
            ],
        )
        choices = build_variant_choices(product)
        assert [c.id for c in choices] == [5, 6]
        assert choices[0].swatch == "#000000"
        assert choices[0].label == "Small - Black"
        assert choices[1].swatch == "#FFFFFF"
        assert choices[1].is_enabled is False
