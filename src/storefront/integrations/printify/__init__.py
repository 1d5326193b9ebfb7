"""Printify integration: REST client and catalog mapping."""

from storefront.integrations.printify.client import PrintifyClient
from storefront.integrations.printify.mapping import map_product

__all__ = ["PrintifyClient", "map_product"]
