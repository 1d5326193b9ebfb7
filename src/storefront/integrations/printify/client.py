"""Printify REST API client (read-only catalog access)."""

import logging
from typing import Any

from pydantic import ValidationError

from storefront.exceptions import VendorRequestError
from storefront.integrations.base import VendorClient
from storefront.integrations.printify.models import PrintifyProduct, PrintifyProductPage

logger = logging.getLogger(__name__)


class PrintifyClient(VendorClient):
    """
    Printify REST API client (v1).

    Products live under a shop; the shop id is fixed per storefront.
    Authentication uses a personal access token as a bearer token.
    """

    def __init__(
        self,
        api_key: str,
        shop_id: str,
        base_url: str = "https://api.printify.com/v1",
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the Printify client.

        Args:
            api_key: Printify personal access token.
            shop_id: Shop whose products are listed.
            base_url: API base URL.
            timeout: Request timeout in seconds.
        """
        super().__init__(api_key, base_url, timeout)
        self.shop_id = shop_id

    @property
    def platform_name(self) -> str:
        return "printify"

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _decode(self, model: type[PrintifyProduct] | type[PrintifyProductPage], data: Any):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise VendorRequestError(
                self.platform_name,
                f"Unexpected {model.__name__} payload: {e.error_count()} validation errors",
            ) from e

    async def list_shops(self) -> list[dict[str, Any]]:
        """List the shops available to the token."""
        data = await self._request("GET", self._url("/shops.json"))
        return data if isinstance(data, list) else []

    async def list_products(self, page: int = 1, limit: int = 20) -> PrintifyProductPage:
        """
        List products of the configured shop.

        Args:
            page: 1-based page number.
            limit: Page size.
        """
        data = await self._request(
            "GET",
            self._url(f"/shops/{self.shop_id}/products.json"),
            params={"page": page, "limit": limit},
        )
        return self._decode(PrintifyProductPage, data)

    async def get_product(self, product_id: str) -> PrintifyProduct:
        """Fetch a single product by its Printify id."""
        data = await self._request(
            "GET",
            self._url(f"/shops/{self.shop_id}/products/{product_id}.json"),
        )
        return self._decode(PrintifyProduct, data)

    async def health_check(self) -> bool:
        try:
            await self.list_shops()
        except VendorRequestError as e:
            logger.warning(f"Printify health check failed: {e}")
            return False
        return True
