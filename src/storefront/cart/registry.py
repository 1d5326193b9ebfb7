"""Cart sessions: one CartStore per shopper session."""

import logging
import re
from collections import OrderedDict

from storefront.cart.storage import CartStorage
from storefront.cart.store import CartStore, VariantLoader
from storefront.exceptions import InvalidCartSessionError

logger = logging.getLogger(__name__)

DEFAULT_SESSION = "default"
DEFAULT_MAX_SESSIONS = 1000

_SESSION_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,64}")


class CartRegistry:
    """
    Keeps the most recently used session carts in memory.

    Carts are created on first use. When more than ``max_sessions`` are held
    the least recently used one is dropped; every mutation has already been
    persisted, so the next request for that session reloads it from storage.
    """

    def __init__(
        self,
        storage: CartStorage,
        storage_key: str = "storefront-cart",
        variant_loader: VariantLoader | None = None,
        checkout_base_path: str = "/checkout",
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {max_sessions}")
        self.storage = storage
        self.storage_key = storage_key
        self.variant_loader = variant_loader
        self.checkout_base_path = checkout_base_path
        self.max_sessions = max_sessions
        self._carts: OrderedDict[str, CartStore] = OrderedDict()

    def __len__(self) -> int:
        return len(self._carts)

    def get(self, session_id: str | None = None) -> CartStore:
        """
        Return the cart for a session, loading its snapshot when not held.

        Raises:
            InvalidCartSessionError: The session id is not a safe storage key.
        """
        session_id = session_id or DEFAULT_SESSION
        if not _SESSION_ID_RE.fullmatch(session_id):
            raise InvalidCartSessionError(session_id)

        store = self._carts.get(session_id)
        if store is not None:
            self._carts.move_to_end(session_id)
            return store

        store = CartStore(
            storage=self.storage,
            storage_key=f"{self.storage_key}-{session_id}",
            variant_loader=self.variant_loader,
            checkout_base_path=self.checkout_base_path,
        )
        store.load()
        self._carts[session_id] = store

        while len(self._carts) > self.max_sessions:
            evicted, _ = self._carts.popitem(last=False)
            logger.debug(f"Evicted cart session {evicted} from memory")
        return store
