"""Printful REST API client (read-only catalog access)."""

import asyncio
import logging
from typing import Any

from storefront.exceptions import VendorRequestError
from storefront.integrations.base import VendorClient
from storefront.integrations.printful.decoders import (
    decode_list_envelope,
    decode_model,
    decode_object_envelope,
    decode_sync_product,
    raise_for_api_error,
)
from storefront.integrations.printful.mapping import build_basic_detail, build_full_detail
from storefront.integrations.printful.models import (
    PrintfulPaging,
    PrintfulProduct,
    PrintfulProductDetail,
    PrintfulProductList,
    PrintfulSyncProduct,
    PrintfulVariant,
)

logger = logging.getLogger(__name__)

# The v2 list endpoint is scanned in one page this large when filtering
STOREFRONT_SCAN_LIMIT = 100


class PrintfulClient(VendorClient):
    """
    Printful REST API client.

    Talks to two API generations: v2 for products, variants and catalog
    data, and v1 for sync products, which is the only place variant
    options (color/size) and print files are available together.

    Authentication uses the private token as a bearer token on both.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.printful.com/v2",
        v1_base_url: str = "https://api.printful.com",
        name_keywords: list[str] | None = None,
        tag_keywords: list[str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the Printful client.

        Args:
            api_key: Printful private token.
            base_url: v2 API base URL.
            v1_base_url: v1 API base URL.
            name_keywords: Name keywords selecting storefront products.
            tag_keywords: Tag keywords selecting storefront products.
            timeout: Request timeout in seconds.
        """
        super().__init__(api_key, base_url, timeout)
        self.v1_base_url = v1_base_url.rstrip("/")
        self.name_keywords = [k.lower() for k in name_keywords or []]
        self.tag_keywords = [k.lower() for k in tag_keywords or []]

    @property
    def platform_name(self) -> str:
        return "printful"

    async def _request_v2(self, path: str, **kwargs: Any) -> Any:
        data = await self._request("GET", f"{self.base_url}{path}", **kwargs)
        raise_for_api_error(data)
        return data

    async def _request_v1(self, path: str, **kwargs: Any) -> Any:
        return await self._request("GET", f"{self.v1_base_url}{path}", **kwargs)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(self, offset: int = 0, limit: int = 20) -> PrintfulProductList:
        """List products (v2)."""
        data = await self._request_v2("/products", params={"offset": offset, "limit": limit})
        return decode_model(PrintfulProductList, data)

    async def list_store_products(
        self,
        store_id: int,
        offset: int = 0,
        limit: int = 20,
    ) -> PrintfulProductList:
        """List products of one store (v2)."""
        data = await self._request_v2(
            f"/stores/{store_id}/products",
            params={"offset": offset, "limit": limit},
        )
        return decode_model(PrintfulProductList, data)

    def is_storefront_product(self, product: PrintfulProduct) -> bool:
        """Whether the product's name or tags match the storefront keywords."""
        if not self.name_keywords and not self.tag_keywords:
            return True
        name = product.display_name.lower()
        if name and any(k in name for k in self.name_keywords):
            return True
        for tag in product.tags or []:
            if tag and any(k in tag.lower() for k in self.tag_keywords):
                return True
        return False

    async def list_storefront_products(
        self,
        offset: int = 0,
        limit: int = 20,
    ) -> PrintfulProductList:
        """
        List the products that belong to this storefront.

        Fetches one large page and filters it by keyword; paging reflects the
        filtered result.
        """
        all_products = await self.list_products(offset=0, limit=STOREFRONT_SCAN_LIMIT)
        matches = [p for p in all_products.data if self.is_storefront_product(p)]
        logger.debug(
            f"Printful storefront filter: {len(matches)} of {len(all_products.data)} products matched"
        )
        return PrintfulProductList(
            data=matches[offset:offset + limit],
            paging=PrintfulPaging(total=len(matches), offset=offset, limit=limit),
        )

    async def get_product(self, sync_product_id: int) -> PrintfulProduct:
        """Fetch basic product info for a sync product (v2)."""
        data = await self._request_v2(f"/products/sp{sync_product_id}")
        envelope = decode_object_envelope(data)
        return decode_model(PrintfulProduct, envelope.body)

    async def get_product_v1(self, sync_product_id: int) -> PrintfulSyncProduct:
        """Fetch the sync product with its variants, files and options (v1)."""
        data = await self._request_v1(f"/sync/products/{sync_product_id}")
        return decode_sync_product(data)

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    async def list_variants(self, sync_product_id: int) -> list[PrintfulVariant]:
        """List sync variants of a product (v2)."""
        data = await self._request_v2(f"/products/sp{sync_product_id}/variants")
        return [decode_model(PrintfulVariant, v) for v in decode_list_envelope(data)]

    async def get_catalog_variant(self, catalog_variant_id: int) -> dict[str, Any] | None:
        """
        Fetch catalog info (color, size, name) for a catalog variant.

        Tries the primary endpoint, then the alternate one. Returns None when
        neither answers.
        """
        for path in (
            f"/catalog/variants/{catalog_variant_id}",
            f"/catalog/variant/{catalog_variant_id}",
        ):
            try:
                data = await self._request_v2(path)
                return decode_object_envelope(data).body
            except VendorRequestError as e:
                logger.debug(f"Catalog variant {catalog_variant_id} not available at {path}: {e}")
        return None

    async def _with_catalog_info(self, variant: PrintfulVariant) -> PrintfulVariant:
        if not variant.catalog_variant_id:
            return variant
        catalog = await self.get_catalog_variant(variant.catalog_variant_id)
        if not catalog:
            return variant
        return variant.model_copy(update={
            "catalog_info": catalog,
            "color": catalog.get("color") or None,
            "size": catalog.get("size") or None,
            "name": catalog.get("name") or variant.name or f"Variant {variant.id}",
        })

    async def list_variants_with_catalog_info(self, sync_product_id: int) -> list[PrintfulVariant]:
        """
        List sync variants enriched with catalog color and size.

        Catalog lookups run concurrently. A variant whose lookup fails is kept
        without color/size.
        """
        variants = await self.list_variants(sync_product_id)
        return list(await asyncio.gather(*(self._with_catalog_info(v) for v in variants)))

    # ------------------------------------------------------------------
    # Combined product detail
    # ------------------------------------------------------------------

    async def get_product_comprehensive(self, sync_product_id: int) -> PrintfulProductDetail:
        """
        Fetch the richest available product detail.

        Joins the v1 sync product (variant options, files, prices) with the v2
        product (name, description, tags). If either call fails, falls back to
        the v2 product plus catalog-enriched v2 variants, which lacks print
        files and option lists.

        Raises:
            VendorRequestError: Both the joined fetch and the fallback failed.
        """
        try:
            v1 = await self.get_product_v1(sync_product_id)
            v2 = await self.get_product(sync_product_id)
            return build_full_detail(sync_product_id, v1, v2)
        except VendorRequestError as error:
            logger.warning(
                f"Comprehensive fetch failed for sync product {sync_product_id}, "
                f"using v2 fallback: {error}"
            )
            try:
                product = await self.get_product(sync_product_id)
                variants = await self.list_variants_with_catalog_info(sync_product_id)
            except VendorRequestError as fallback_error:
                logger.error(f"v2 fallback failed for sync product {sync_product_id}: {fallback_error}")
                raise error from fallback_error
            return build_basic_detail(sync_product_id, product, variants)

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    async def list_stores(self) -> list[dict[str, Any]]:
        data = await self._request_v2("/stores")
        return decode_list_envelope(data)

    async def get_store(self, store_id: int) -> dict[str, Any]:
        data = await self._request_v2(f"/stores/{store_id}")
        return decode_object_envelope(data).body

    async def health_check(self) -> bool:
        try:
            await self.list_stores()
        except VendorRequestError as e:
            logger.warning(f"Printful health check failed: {e}")
            return False
        return True
