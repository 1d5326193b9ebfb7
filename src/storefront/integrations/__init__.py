"""Fulfillment vendor integrations."""

from storefront.integrations.base import VendorClient
from storefront.integrations.printful import PrintfulClient
from storefront.integrations.printify import PrintifyClient

__all__ = [
    "VendorClient",
    "PrintfulClient",
    "PrintifyClient",
]
