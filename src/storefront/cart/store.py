"""Shopping cart partitioned per fulfillment platform."""

import logging
from collections.abc import Awaitable, Callable

from storefront.cart.storage import CartStorage, decode_cart_envelope, encode_cart_envelope
from storefront.exceptions import CartValidationError, EnrichmentWarning
from storefront.models.cart import (
    CartItem,
    PlatformCart,
    SelectedVariant,
    UnifiedCart,
    cart_item_id,
)
from storefront.models.catalog import Platform, ProductVariant, UnifiedProduct

logger = logging.getLogger(__name__)

VariantLoader = Callable[[UnifiedProduct], Awaitable[list[ProductVariant]]]


def format_price(price: float) -> str:
    """Format an amount as US dollars, e.g. ``$1,234.50``."""
    sign = "-" if price < 0 else ""
    return f"{sign}${abs(price):,.2f}"


class CartStore:
    """
    One shopper's cart.

    Every mutation works on the in-memory cart, recomputes the derived
    totals, then persists the whole snapshot. The in-memory cart stays
    authoritative if persisting fails.
    """

    def __init__(
        self,
        storage: CartStorage,
        storage_key: str,
        variant_loader: VariantLoader | None = None,
        checkout_base_path: str = "/checkout",
    ) -> None:
        """
        Initialize the cart store.

        Args:
            storage: Where snapshots are persisted.
            storage_key: Key of this cart's snapshot.
            variant_loader: Fetches variants for products listed without them.
            checkout_base_path: Prefix of the per-platform checkout URLs.
        """
        self.storage = storage
        self.storage_key = storage_key
        self.variant_loader = variant_loader
        self.checkout_base_path = checkout_base_path.rstrip("/")
        self._cart = UnifiedCart()

    def load(self) -> None:
        """Replace the in-memory cart with the persisted snapshot."""
        try:
            document = self.storage.load(self.storage_key)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading cart {self.storage_key} from storage: {e}")
            return
        self._cart = decode_cart_envelope(document)

    def _commit(self) -> None:
        self._cart.recompute()
        try:
            self.storage.save(self.storage_key, encode_cart_envelope(self._cart))
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving cart {self.storage_key} to storage: {e}")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def add_item(
        self,
        product: UnifiedProduct,
        quantity: int = 1,
        variant: ProductVariant | None = None,
    ) -> CartItem:
        """
        Add a product, or a specific variant of it, to its platform's cart.

        Adding an identity already in the cart increases its quantity.
        Products listed without variants get them loaded first; if that
        fails the product is added as-is.

        Raises:
            CartValidationError: quantity is less than 1.
        """
        if quantity < 1:
            raise CartValidationError(f"Quantity must be at least 1, got {quantity}")

        item_id = cart_item_id(product.id, variant.id if variant else None)
        existing = self._cart.partition(product.platform).find(item_id)
        if existing is not None:
            existing.quantity += quantity
            self._commit()
            return existing

        snapshot = product.model_copy(update={"original_data": None}, deep=True)
        if not snapshot.variants and self.variant_loader is not None:
            try:
                snapshot.variants = await self.variant_loader(product)
            except EnrichmentWarning as e:
                logger.warning(f"Error fetching variants for cart item {product.id}: {e}")

        # The cart may have changed while variants were loading
        cart = self._cart.partition(product.platform)
        existing = cart.find(item_id)
        if existing is not None:
            existing.quantity += quantity
            self._commit()
            return existing

        item = CartItem(
            id=item_id,
            product=snapshot,
            quantity=quantity,
            selected_variant=SelectedVariant(
                id=variant.id,
                title=variant.title,
                price=variant.price,
            ) if variant else None,
        )
        cart.items.append(item)
        self._commit()
        return item

    def remove_item(
        self,
        product_id: str,
        platform: Platform | str,
        variant_id: int | str | None = None,
    ) -> None:
        """Remove an item; a no-op when it is not in the cart."""
        item_id = cart_item_id(product_id, variant_id)
        cart = self._cart.partition(platform)
        cart.items = [item for item in cart.items if item.id != item_id]
        self._commit()

    def update_quantity(
        self,
        product_id: str,
        platform: Platform | str,
        quantity: int,
        variant_id: int | str | None = None,
    ) -> None:
        """Set an item's quantity; zero or less removes it."""
        if quantity <= 0:
            self.remove_item(product_id, platform, variant_id)
            return
        item = self._cart.partition(platform).find(cart_item_id(product_id, variant_id))
        if item is None:
            return
        item.quantity = quantity
        self._commit()

    def clear_cart(self) -> None:
        self._cart = UnifiedCart()
        self._commit()

    def clear_platform_cart(self, platform: Platform | str) -> None:
        setattr(self._cart, Platform(platform).value, PlatformCart())
        self._commit()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_cart(self) -> UnifiedCart:
        return self._cart

    def get_platform_cart(self, platform: Platform | str) -> PlatformCart:
        return self._cart.partition(platform)

    def has_items(self) -> bool:
        return self._cart.total_items > 0

    def has_platform_items(self, platform: Platform | str) -> bool:
        return self._cart.partition(platform).item_count > 0

    def get_checkout_urls(self) -> dict[Platform, str]:
        """Checkout hand-off URL for every platform with items in the cart."""
        return {
            platform: f"{self.checkout_base_path}/{platform.value}"
            for platform in Platform
            if self.has_platform_items(platform)
        }
