"""Partitioned shopping cart: store, persistence and sessions."""

from storefront.cart.registry import CartRegistry
from storefront.cart.storage import (
    CartStorage,
    InMemoryCartStorage,
    JsonFileCartStorage,
    decode_cart_envelope,
    encode_cart_envelope,
)
from storefront.cart.store import CartStore, format_price

__all__ = [
    "CartRegistry",
    "CartStorage",
    "CartStore",
    "InMemoryCartStorage",
    "JsonFileCartStorage",
    "decode_cart_envelope",
    "encode_cart_envelope",
    "format_price",
]
