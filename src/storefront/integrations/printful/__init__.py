"""Printful integration: REST client, envelope decoders and catalog mapping."""

from storefront.integrations.printful.client import PrintfulClient
from storefront.integrations.printful.mapping import map_list_product, map_product_detail

__all__ = ["PrintfulClient", "map_list_product", "map_product_detail"]
