"""Unified catalog across the Printify and Printful integrations."""

import asyncio
import logging
import math

from storefront.exceptions import EnrichmentWarning, NotFoundError, VendorRequestError
from storefront.integrations.printful import PrintfulClient
from storefront.integrations.printful.mapping import map_list_product, map_product_detail
from storefront.integrations.printify import PrintifyClient
from storefront.integrations.printify.mapping import map_product as map_printify_product
from storefront.models.catalog import (
    Platform,
    ProductVariant,
    UnifiedProduct,
    UnifiedProductPage,
    parse_product_id,
)

logger = logging.getLogger(__name__)

# Printful products are resolved by scanning the storefront list this deep
PRINTFUL_LOOKUP_LIMIT = 100


class CatalogService:
    """
    Product catalog merged from both fulfillment vendors.

    Vendor failures never propagate out of this service: listings degrade to
    the vendors that answered and lookups return None.
    """

    def __init__(
        self,
        printify: PrintifyClient | None = None,
        printful: PrintfulClient | None = None,
    ) -> None:
        """
        Initialize the catalog service.

        Args:
            printify: Printify client, or None when Printify is not configured.
            printful: Printful client, or None when Printful is not configured.
        """
        self.printify = printify
        self.printful = printful

    @property
    def platforms(self) -> list[Platform]:
        configured = []
        if self.printify is not None:
            configured.append(Platform.PRINTIFY)
        if self.printful is not None:
            configured.append(Platform.PRINTFUL)
        return configured

    async def close(self) -> None:
        for client in (self.printify, self.printful):
            if client is not None:
                await client.close()

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def _list_printify(self, limit: int) -> list[UnifiedProduct]:
        if self.printify is None:
            return []
        try:
            page = await self.printify.list_products(page=1, limit=limit)
        except VendorRequestError as e:
            logger.error(f"Error fetching Printify products: {e}")
            return []
        return [map_printify_product(p) for p in page.data]

    async def _list_printful(self, limit: int) -> list[UnifiedProduct]:
        if self.printful is None:
            return []
        try:
            listing = await self.printful.list_storefront_products(offset=0, limit=limit)
        except VendorRequestError as e:
            logger.error(f"Error fetching Printful products: {e}")
            return []
        return [map_list_product(p) for p in listing.data if p.sync_product_id is not None]

    async def list_unified(self, limit: int = 20) -> UnifiedProductPage:
        """
        List products from both vendors, sorted by name.

        Each vendor contributes at most ``ceil(limit / 2)`` products; both
        fetches run concurrently and a failing vendor contributes nothing.

        Args:
            limit: Maximum number of products returned.

        Returns:
            UnifiedProductPage with ``total`` counting every product fetched.
        """
        per_vendor = math.ceil(limit / 2)
        printify_products, printful_products = await asyncio.gather(
            self._list_printify(per_vendor),
            self._list_printful(per_vendor),
        )
        products = [*printify_products, *printful_products]
        products.sort(key=lambda p: p.name.casefold())

        return UnifiedProductPage(
            items=products[:limit],
            total=len(products),
            has_more=len(products) > limit,
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    async def get_unified(self, product_id: str) -> UnifiedProduct | None:
        """
        Fetch one product by composite id.

        Args:
            product_id: Composite id, e.g. ``"printify-5f1a"``.

        Returns:
            UnifiedProduct if found, None otherwise.

        Raises:
            InvalidProductIdError: The id has no known platform prefix.
        """
        platform, native_id = parse_product_id(product_id)
        if platform == Platform.PRINTIFY:
            return await self._get_printify(native_id)
        return await self._get_printful(native_id)

    async def require_unified(self, product_id: str) -> UnifiedProduct:
        """Like get_unified, but a missing product raises NotFoundError."""
        product = await self.get_unified(product_id)
        if product is None:
            raise NotFoundError(f"Product not found: {product_id}")
        return product

    async def _get_printify(self, native_id: str) -> UnifiedProduct | None:
        if self.printify is None:
            return None
        try:
            product = await self.printify.get_product(native_id)
        except VendorRequestError as e:
            logger.error(f"Error fetching Printify product {native_id}: {e}")
            return None
        return map_printify_product(product)

    async def _get_printful(self, native_id: str) -> UnifiedProduct | None:
        """
        Resolve a Printful product through the storefront listing.

        The product must be published under the requested sync id; only
        then is the detail fetched. If the combined detail fetch fails, the
        listed product is returned with catalog-enriched variants.
        """
        if self.printful is None:
            return None
        try:
            sync_product_id = int(native_id)
        except ValueError:
            logger.info(f"Printful product id is not numeric: {native_id}")
            return None

        try:
            listing = await self.printful.list_storefront_products(
                offset=0, limit=PRINTFUL_LOOKUP_LIMIT
            )
        except VendorRequestError as e:
            logger.error(f"Error fetching Printful products: {e}")
            return None

        listed = next(
            (p for p in listing.data if p.is_published_as(sync_product_id)),
            None,
        )
        if listed is None:
            logger.info(f"No Printful storefront product with sync id {sync_product_id}")
            return None

        try:
            detail = await self.printful.get_product_comprehensive(sync_product_id)
            return map_product_detail(detail)
        except VendorRequestError as e:
            logger.warning(
                f"Comprehensive fetch failed for Printful product {sync_product_id}, "
                f"using listing data: {e}"
            )

        try:
            variants = await self.printful.list_variants_with_catalog_info(sync_product_id)
        except VendorRequestError as e:
            logger.error(f"Error fetching Printful variants for {sync_product_id}: {e}")
            return None
        return map_list_product(listed, variants, native_id=sync_product_id)

    # ------------------------------------------------------------------
    # Enrichment
    # ------------------------------------------------------------------

    async def load_variants(self, product: UnifiedProduct) -> list[ProductVariant]:
        """
        Return the product's variants, fetching them when the listing omitted them.

        Raises:
            EnrichmentWarning: The variants could not be fetched.
        """
        if product.variants or product.platform != Platform.PRINTFUL:
            return product.variants
        if self.printful is None:
            raise EnrichmentWarning(f"Printful is not configured; cannot load variants for {product.id}")
        try:
            detail = await self.printful.get_product_comprehensive(int(product.native_id))
        except (VendorRequestError, ValueError) as e:
            raise EnrichmentWarning(f"Could not load variants for {product.id}", cause=e) from e
        return map_product_detail(detail).variants
