"""Unit tests for the Printify client and mapping."""

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from storefront.exceptions import VendorRequestError
from storefront.integrations.printify.client import PrintifyClient
from storefront.integrations.printify.mapping import map_product, minor_units_to_price
from storefront.integrations.printify.models import PrintifyProduct
from storefront.models.catalog import Platform, compose_product_id, parse_product_id


class TestPrintifyMapping:
    """Tests for Printify -> UnifiedProduct mapping."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(2500, 25.00), (4500, 45.00), (1999, 19.99), (0, 0.0), (1, 0.01)],
    )
    def test_minor_units(self, raw, expected):
        assert minor_units_to_price(raw) == raw / 100
        assert minor_units_to_price(raw) == pytest.approx(expected)

    def test_map_product(self, printify_product_payload):
        product = map_product(PrintifyProduct.model_validate(printify_product_payload))

        assert product.id == "printify-42"
        assert product.platform == Platform.PRINTIFY
        assert product.name == "Custom Hoodie"
        assert [img.src for img in product.images] == [
            "https://images.printify.com/mock/hoodie-1.jpg",
            "https://images.printify.com/mock/hoodie-2.jpg",
        ]
        assert all(img.alt == "Custom Hoodie" for img in product.images)
        assert [v.price for v in product.variants] == [45.00, 25.00]
        assert product.variants[1].id == 7
        assert product.tags == ["hoodie", "warm", "custom"]
        assert product.original_data["id"] == "42"

    def test_mapped_id_round_trips(self, printify_product_payload):
        product = map_product(PrintifyProduct.model_validate(printify_product_payload))
        assert compose_product_id(*parse_product_id(product.id)) == product.id


class TestPrintifyClient:
    """Tests for PrintifyClient."""

    @pytest.fixture
    def client(self):
        return PrintifyClient(api_key="test_token", shop_id="shop-1")

    def test_platform_name(self, client):
        assert client.platform_name == "printify"

    def test_auth_headers(self, client):
        assert client.client.headers["Authorization"] == "Bearer test_token"

    @pytest.mark.asyncio
    async def test_list_products(self, client, printify_product_payload):
        page_payload = {
            "current_page": 1,
            "last_page": 3,
            "total": 41,
            "data": [printify_product_payload],
        }
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_req:
            mock_req.return_value = page_payload
            page = await client.list_products(page=1, limit=5)

        mock_req.assert_called_once_with(
            "GET",
            "https://api.printify.com/v1/shops/shop-1/products.json",
            params={"page": 1, "limit": 5},
        )
        assert page.total == 41
        assert page.has_more is True
        assert page.data[0].variants[0].price == 4500

    @pytest.mark.asyncio
    async def test_get_product(self, client, printify_product_payload):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_req:
            mock_req.return_value = printify_product_payload
            product = await client.get_product("42")

        mock_req.assert_called_once_with(
            "GET", "https://api.printify.com/v1/shops/shop-1/products/42.json"
        )
        assert product.title == "Custom Hoodie"

    @pytest.mark.asyncio
    async def test_unexpected_payload_raises_vendor_error(self, client):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_req:
            mock_req.return_value = {"unexpected": True}
            with pytest.raises(VendorRequestError):
                await client.get_product("42")


class TestVendorRequestErrors:
    """Tests for HTTP error conversion in the shared base client."""

    def _client_with(self, handler) -> PrintifyClient:
        client = PrintifyClient(api_key="test_token", shop_id="shop-1")
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client

    @pytest.mark.asyncio
    async def test_non_2xx_carries_status_and_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "Unauthenticated."})

        client = self._client_with(handler)
        with pytest.raises(VendorRequestError) as exc_info:
            await client.get_product("42")
        await client.close()

        assert exc_info.value.vendor_status == 401
        assert exc_info.value.platform == "printify"
        assert "Unauthenticated." in exc_info.value.vendor_message

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = self._client_with(handler)
        with pytest.raises(VendorRequestError) as exc_info:
            await client.list_products()
        await client.close()

        assert exc_info.value.vendor_status is None

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        client = self._client_with(handler)
        with pytest.raises(VendorRequestError) as exc_info:
            await client.list_products()
        await client.close()

        assert exc_info.value.vendor_status == 200

    @pytest.mark.asyncio
    async def test_health_check_false_on_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"message": "down"})

        client = self._client_with(handler)
        assert await client.health_check() is False
        await client.close()

    @pytest.mark.asyncio
    async def test_success(self, printify_product_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/shops/shop-1/products/42.json"
            return httpx.Response(200, json=printify_product_payload)

        client = self._client_with(handler)
        product = await client.get_product("42")
        await client.close()

        assert product.id == "42"
