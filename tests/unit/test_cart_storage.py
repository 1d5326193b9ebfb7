"""Unit tests for cart snapshot storage and the versioned envelope."""

import json

import pytest

from storefront.cart.storage import (
    CART_ENVELOPE_VERSION,
    InMemoryCartStorage,
    JsonFileCartStorage,
    decode_cart_envelope,
    encode_cart_envelope,
)
from storefront.models.cart import CartItem, SelectedVariant, UnifiedCart
from storefront.models.catalog import Platform, UnifiedProduct


@pytest.fixture
def cart() -> UnifiedCart:
    product = UnifiedProduct(
        id="printify-42",
        name="Custom Hoodie",
        platform=Platform.PRINTIFY,
        variants=[{"id": 7, "title": "Large - Navy Blue", "price": 25.0}],
    )
    cart = UnifiedCart()
    cart.printify.items.append(
        CartItem(
            id="printify-42-7",
            product=product,
            quantity=2,
            selected_variant=SelectedVariant(id=7, title="Large - Navy Blue", price=25.0),
        )
    )
    cart.recompute()
    return cart


def legacy_document() -> dict:
    """A bare cart as persisted before snapshots were versioned."""
    return {
        "printify": {
            "items": [
                {
                    "id": "printify-42-7",
                    "product": {
                        "id": "printify-42",
                        "name": "Custom Hoodie",
                        "platform": "printify",
                        "variants": [{"id": 7, "title": "Large - Navy Blue", "price": 25.0}],
                        "originalData": {"id": "42", "title": "Custom Hoodie"},
                    },
                    "quantity": 3,
                    "selectedVariant": {"id": 7, "title": "Large - Navy Blue", "price": 25.0},
                }
            ],
            "total": 999,
            "itemCount": 999,
        },
        "printful": {"items": [], "total": 0, "itemCount": 0},
        "totalItems": 999,
        "totalValue": 999,
    }


class TestCartEnvelope:
    """Tests for encoding and decoding stored carts."""

    def test_encode(self, cart):
        document = encode_cart_envelope(cart)

        assert document["version"] == CART_ENVELOPE_VERSION
        assert document["payload"]["total_value"] == 50.0
        assert document["payload"]["printify"]["items"][0]["product"]["platform"] == "printify"
        json.dumps(document)

    def test_decode_current_version(self, cart):
        decoded = decode_cart_envelope(json.loads(json.dumps(encode_cart_envelope(cart))))
        assert decoded.model_dump() == cart.model_dump()

    def test_decode_recomputes_totals(self, cart):
        document = encode_cart_envelope(cart)
        document["payload"]["total_value"] = 1.0
        document["payload"]["printify"]["item_count"] = 77

        decoded = decode_cart_envelope(document)

        assert decoded.total_value == 50.0
        assert decoded.printify.item_count == 2

    def test_migrates_unversioned_document(self):
        decoded = decode_cart_envelope(legacy_document())

        item = decoded.printify.items[0]
        assert item.selected_variant.id == 7
        assert item.product.original_data is None
        assert decoded.printify.total == 75.0
        assert decoded.total_items == 3
        assert decoded.total_value == 75.0

    @pytest.mark.parametrize(
        "document",
        [
            None,
            [],
            "cart",
            {"version": 99, "payload": {}},
            {"version": CART_ENVELOPE_VERSION, "payload": "nope"},
            {"version": CART_ENVELOPE_VERSION, "payload": {"printify": {"items": [{"id": "x"}]}}},
        ],
    )
    def test_malformed_documents_reset_to_empty(self, document):
        decoded = decode_cart_envelope(document)

        assert decoded.model_dump() == UnifiedCart().model_dump()

    def test_missing_partition_defaults_empty(self, cart):
        document = encode_cart_envelope(cart)
        del document["payload"]["printful"]

        decoded = decode_cart_envelope(document)

        assert decoded.printful.items == []
        assert decoded.total_items == 2


class TestInMemoryCartStorage:
    """Tests for the in-process storage."""

    def test_missing_key(self):
        assert InMemoryCartStorage().load("absent") is None

    def test_round_trip(self, cart):
        storage = InMemoryCartStorage()
        storage.save("k", encode_cart_envelope(cart))
        assert storage.load("k")["version"] == CART_ENVELOPE_VERSION


class TestJsonFileCartStorage:
    """Tests for the file-backed storage."""

    def test_missing_file(self, tmp_path):
        assert JsonFileCartStorage(tmp_path).load("absent") is None

    def test_save_creates_directory(self, tmp_path, cart):
        storage = JsonFileCartStorage(tmp_path / "carts")

        storage.save("storefront-cart-default", encode_cart_envelope(cart))

        path = tmp_path / "carts" / "storefront-cart-default.json"
        assert path.exists()
        assert json.loads(path.read_text())["payload"]["total_items"] == 2
        # No temp files left behind
        assert [p.name for p in (tmp_path / "carts").iterdir()] == [path.name]

    def test_overwrite(self, tmp_path, cart):
        storage = JsonFileCartStorage(tmp_path)
        storage.save("k", encode_cart_envelope(cart))
        storage.save("k", encode_cart_envelope(UnifiedCart()))

        assert decode_cart_envelope(storage.load("k")).total_items == 0

    def test_invalid_json_raises(self, tmp_path):
        (tmp_path / "k.json").write_text("{not json")

        with pytest.raises(ValueError):
            JsonFileCartStorage(tmp_path).load("k")
