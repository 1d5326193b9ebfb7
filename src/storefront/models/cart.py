"""Cart models: one partition per fulfillment platform."""

from pydantic import BaseModel, Field

from storefront.models.catalog import Platform, UnifiedProduct


def cart_item_id(product_id: str, variant_id: int | str | None = None) -> str:
    """Cart identity: the product id, suffixed with the variant id when one is selected."""
    if variant_id is None or variant_id == "":
        return product_id
    return f"{product_id}-{variant_id}"


class SelectedVariant(BaseModel):
    """Variant snapshot taken when the item was added; never re-fetched."""

    id: int | str
    title: str = ""
    price: float = Field(default=0.0, ge=0)


class CartItem(BaseModel):
    """A product (optionally a specific variant) and its quantity."""

    id: str
    product: UnifiedProduct
    quantity: int = Field(ge=1)
    selected_variant: SelectedVariant | None = None

    @property
    def unit_price(self) -> float:
        if self.selected_variant is not None:
            return self.selected_variant.price
        if self.product.variants:
            return self.product.variants[0].price
        return 0.0

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


class PlatformCart(BaseModel):
    """Items checked out together through one platform."""

    items: list[CartItem] = Field(default_factory=list)
    total: float = 0.0
    item_count: int = 0

    def recompute(self) -> None:
        """Rebuild derived totals from the item list."""
        self.total = round(sum(item.line_total for item in self.items), 2)
        self.item_count = sum(item.quantity for item in self.items)

    def find(self, item_id: str) -> CartItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None


class UnifiedCart(BaseModel):
    """The shopper's cart, partitioned per platform."""

    printify: PlatformCart = Field(default_factory=PlatformCart)
    printful: PlatformCart = Field(default_factory=PlatformCart)
    total_items: int = 0
    total_value: float = 0.0

    def partition(self, platform: Platform | str) -> PlatformCart:
        return getattr(self, Platform(platform).value)

    def partitions(self) -> dict[Platform, PlatformCart]:
        return {platform: self.partition(platform) for platform in Platform}

    def recompute(self) -> None:
        """Rebuild every derived field, partitions first."""
        for cart in self.partitions().values():
            cart.recompute()
        self.total_items = sum(c.item_count for c in self.partitions().values())
        self.total_value = round(sum(c.total for c in self.partitions().values()), 2)
