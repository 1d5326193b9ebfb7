"""Base vendor client shared by the fulfillment platform integrations."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from storefront.exceptions import VendorRequestError

logger = logging.getLogger(__name__)


class VendorClient(ABC):
    """
    Abstract base class for fulfillment vendor REST clients.

    Subclasses provide read-only access to a vendor's product catalog.
    Every call is a single attempt; failures surface as VendorRequestError.
    """

    def __init__(self, api_key: str, base_url: str, timeout: float = 30.0) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the platform name (e.g., 'printify')."""
        ...

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """
        Make an API request and return the decoded JSON body.

        Args:
            method: HTTP method.
            url: Absolute URL (clients may talk to more than one API version).

        Raises:
            VendorRequestError: Transport failure, non-2xx status or non-JSON body.
        """
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{self.platform_name} request failed: {method} {url}: {e}")
            raise VendorRequestError(self.platform_name, str(e) or type(e).__name__) from e

        if response.is_error:
            raise VendorRequestError(
                self.platform_name,
                f"{response.status_code} {self._error_message(response)}",
                vendor_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise VendorRequestError(
                self.platform_name,
                "Response body is not valid JSON",
                vendor_status=response.status_code,
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Best-effort extraction of the vendor's error message."""
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str):
                return error
            if body.get("message"):
                return str(body["message"])
        return response.reason_phrase

    async def health_check(self) -> bool:
        """
        Check if the vendor connection is healthy.

        Returns:
            True if connection is working.
        """
        return True
