"""API routes for the storefront catalog and cart."""

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request
from pydantic import BaseModel, Field

from storefront.cart import CartRegistry, CartStore, format_price
from storefront.catalog import CatalogService, build_variant_choices
from storefront.exceptions import CartValidationError
from storefront.models.cart import UnifiedCart
from storefront.models.catalog import (
    Platform,
    UnifiedProduct,
    UnifiedProductPage,
    VariantChoice,
)

router = APIRouter()


def get_catalog(request: Request) -> CatalogService:
    """Get the catalog service attached to the application."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="Catalog not initialized")
    return catalog


def get_cart_registry(request: Request) -> CartRegistry:
    """Get the cart registry attached to the application."""
    registry = getattr(request.app.state, "cart_registry", None)
    if registry is None:
        raise HTTPException(status_code=503, detail="Cart not initialized")
    return registry


def get_cart(
    x_cart_session: str | None = Header(default=None),
    registry: CartRegistry = Depends(get_cart_registry),
) -> CartStore:
    """Resolve the shopper's cart from the X-Cart-Session header."""
    return registry.get(x_cart_session)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    vendors: list[Platform] = Field(default_factory=list)


class AddCartItemRequest(BaseModel):
    """Request body for adding a product to the cart."""

    product_id: str = Field(description="Composite product id")
    quantity: int = Field(default=1, ge=1)
    variant_id: int | str | None = Field(default=None, description="Variant to add, if any")

    model_config = {"json_schema_extra": {"examples": [
        {"product_id": "printify-5f1a", "quantity": 2, "variant_id": 7}
    ]}}


class UpdateCartItemRequest(BaseModel):
    """Request body for changing an item's quantity."""

    product_id: str
    platform: Platform
    quantity: int = Field(description="New quantity; zero or less removes the item")
    variant_id: int | str | None = None


class CheckoutResponse(BaseModel):
    """Per-platform checkout hand-off."""

    urls: dict[Platform, str] = Field(default_factory=dict)
    totals: dict[Platform, str] = Field(default_factory=dict, description="Formatted partition totals")


@router.get(
    "/v1/products",
    response_model=UnifiedProductPage,
    summary="List products from both vendors",
)
async def list_products(
    limit: int = Query(default=20, ge=1, le=100),
    catalog: CatalogService = Depends(get_catalog),
) -> UnifiedProductPage:
    """
    List products merged from Printify and Printful, sorted by name.

    A vendor that is down simply contributes no products.
    """
    return await catalog.list_unified(limit=limit)


@router.get(
    "/v1/products/{product_id}",
    response_model=UnifiedProduct,
    summary="Get a product by composite id",
    responses={404: {"description": "Product not found"}},
)
async def get_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog),
) -> UnifiedProduct:
    return await catalog.require_unified(product_id)


@router.get(
    "/v1/products/{product_id}/variants",
    response_model=list[VariantChoice],
    summary="Variant choices with swatches and labels",
)
async def get_product_variants(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog),
) -> list[VariantChoice]:
    product = await catalog.require_unified(product_id)
    return build_variant_choices(product)


@router.get("/v1/cart", response_model=UnifiedCart, summary="Get the cart")
async def get_cart_contents(cart: CartStore = Depends(get_cart)) -> UnifiedCart:
    return cart.get_cart()


@router.post("/v1/cart/items", response_model=UnifiedCart, summary="Add a product to the cart")
async def add_cart_item(
    body: AddCartItemRequest,
    cart: CartStore = Depends(get_cart),
    catalog: CatalogService = Depends(get_catalog),
) -> UnifiedCart:
    """
    Add a product (optionally a specific variant) to its platform's cart.

    The product is looked up fresh so the price snapshot reflects the vendor
    at add-time.
    """
    product = await catalog.require_unified(body.product_id)
    variant = None
    if body.variant_id is not None:
        variant = product.find_variant(body.variant_id)
        if variant is None:
            raise CartValidationError(
                f"Variant {body.variant_id} does not belong to product {product.id}"
            )
    await cart.add_item(product, quantity=body.quantity, variant=variant)
    return cart.get_cart()


@router.patch("/v1/cart/items", response_model=UnifiedCart, summary="Change an item's quantity")
async def update_cart_item(
    body: UpdateCartItemRequest,
    cart: CartStore = Depends(get_cart),
) -> UnifiedCart:
    cart.update_quantity(body.product_id, body.platform, body.quantity, body.variant_id)
    return cart.get_cart()


@router.delete("/v1/cart/items", response_model=UnifiedCart, summary="Remove an item")
async def remove_cart_item(
    product_id: str,
    platform: Platform,
    variant_id: str | None = None,
    cart: CartStore = Depends(get_cart),
) -> UnifiedCart:
    cart.remove_item(product_id, platform, variant_id)
    return cart.get_cart()


@router.delete("/v1/cart", response_model=UnifiedCart, summary="Empty the cart")
async def clear_cart(cart: CartStore = Depends(get_cart)) -> UnifiedCart:
    cart.clear_cart()
    return cart.get_cart()


@router.delete("/v1/cart/{platform}", response_model=UnifiedCart, summary="Empty one platform's cart")
async def clear_platform_cart(
    platform: Platform,
    cart: CartStore = Depends(get_cart),
) -> UnifiedCart:
    cart.clear_platform_cart(platform)
    return cart.get_cart()


@router.get("/v1/cart/checkout", response_model=CheckoutResponse, summary="Checkout hand-off URLs")
async def get_checkout(cart: CartStore = Depends(get_cart)) -> CheckoutResponse:
    """
    Checkout URL per platform with items.

    Payment happens on the vendor platform; this only hands the shopper off.
    """
    urls = cart.get_checkout_urls()
    return CheckoutResponse(
        urls=urls,
        totals={
            platform: format_price(cart.get_platform_cart(platform).total)
            for platform in urls
        },
    )
