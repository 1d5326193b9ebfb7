"""Unit tests for catalog models and composite product ids."""

import pytest

from storefront.exceptions import InvalidProductIdError
from storefront.models.catalog import (
    Platform,
    ProductVariant,
    UnifiedProduct,
    compose_product_id,
    parse_product_id,
)


class TestProductIds:
    """Tests for compose_product_id / parse_product_id."""

    def test_compose(self):
        assert compose_product_id(Platform.PRINTIFY, "42") == "printify-42"
        assert compose_product_id("printful", 301) == "printful-301"

    def test_parse(self):
        assert parse_product_id("printify-42") == (Platform.PRINTIFY, "42")
        assert parse_product_id("printful-301") == (Platform.PRINTFUL, "301")

    @pytest.mark.parametrize(
        "product_id",
        ["printify-42", "printful-301", "printify-5f1a-77b2", "printify-a-b-c"],
    )
    def test_round_trip(self, product_id):
        """Splitting and recomposing yields the same id, hyphens in the native id included."""
        assert compose_product_id(*parse_product_id(product_id)) == product_id

    def test_native_id_keeps_hyphens(self):
        assert parse_product_id("printify-5f1a-77b2") == (Platform.PRINTIFY, "5f1a-77b2")

    @pytest.mark.parametrize("product_id", ["", "printify", "printify-", "etsy-12", "-12"])
    def test_invalid_ids(self, product_id):
        with pytest.raises(InvalidProductIdError) as exc_info:
            parse_product_id(product_id)
        assert exc_info.value.status_code == 400


class TestUnifiedProduct:
    """Tests for UnifiedProduct helpers."""

    @pytest.fixture
    def product(self) -> UnifiedProduct:
        return UnifiedProduct(
            id="printify-42",
            name="Custom Hoodie",
            platform=Platform.PRINTIFY,
            variants=[
                ProductVariant(id=5, title="Small - Black", price=45.0),
                ProductVariant(id=7, title="Large - Navy Blue", price=25.0),
            ],
        )

    def test_native_id(self, product):
        assert product.native_id == "42"

    def test_price_range(self, product):
        assert product.price_range == (25.0, 45.0)

    def test_price_range_without_variants(self):
        product = UnifiedProduct(id="printful-301", name="Polo", platform=Platform.PRINTFUL)
        assert product.price_range is None
        assert product.has_variants is False

    def test_find_variant_compares_as_strings(self, product):
        assert product.find_variant(7).title == "Large - Navy Blue"
        assert product.find_variant("7").title == "Large - Navy Blue"
        assert product.find_variant(99) is None

    def test_option_value(self):
        variant = ProductVariant(
            id=1,
            title="Polo",
            options=[{"id": "Color", "value": "Navy"}, {"id": "Size", "value": ""}],
        )
        assert variant.option_value("Color") == "Navy"
        assert variant.option_value("Size") is None
        assert variant.option_value("Material") is None
