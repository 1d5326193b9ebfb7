"""Persistence of cart snapshots in a versioned envelope."""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from storefront.models.cart import UnifiedCart

logger = logging.getLogger(__name__)

CART_ENVELOPE_VERSION = 1


class CartStorage(ABC):
    """Key/document store for cart snapshots."""

    @abstractmethod
    def load(self, key: str) -> Any | None:
        """Return the stored document, or None when nothing is stored."""
        ...

    @abstractmethod
    def save(self, key: str, document: dict[str, Any]) -> None:
        """Overwrite the stored document."""
        ...


class InMemoryCartStorage(CartStorage):
    """Dict-backed storage; documents are kept JSON-encoded like on disk."""

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def load(self, key: str) -> Any | None:
        raw = self._documents.get(key)
        return None if raw is None else json.loads(raw)

    def save(self, key: str, document: dict[str, Any]) -> None:
        self._documents[key] = json.dumps(document)


class JsonFileCartStorage(CartStorage):
    """One ``<key>.json`` file per cart under a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Any | None:
        """
        Read a stored document.

        Raises:
            OSError: The file exists but cannot be read.
            ValueError: The file is not valid JSON.
        """
        path = self._path(key)
        if not path.exists():
            return None
        with path.open(encoding="utf-8") as f:
            return json.load(f)

    def save(self, key: str, document: dict[str, Any]) -> None:
        """Write atomically: a temp file in the same directory, then replace."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f)
            os.replace(tmp_path, self._path(key))
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise


def encode_cart_envelope(cart: UnifiedCart) -> dict[str, Any]:
    """Wrap a cart snapshot as ``{"version", "payload"}``."""
    return {
        "version": CART_ENVELOPE_VERSION,
        "payload": cart.model_dump(mode="json"),
    }


def _migrate_unversioned(document: dict[str, Any]) -> dict[str, Any]:
    """
    Unversioned documents are bare carts using camelCase derived fields.

    Derived fields are dropped; they are recomputed after decoding.
    """
    payload: dict[str, Any] = {}
    for platform in ("printify", "printful"):
        partition = document.get(platform)
        if isinstance(partition, dict):
            items = []
            for item in partition.get("items") or []:
                if not isinstance(item, dict):
                    continue
                item = dict(item)
                if "selectedVariant" in item and "selected_variant" not in item:
                    item["selected_variant"] = item.pop("selectedVariant")
                product = item.get("product")
                if isinstance(product, dict) and "originalData" in product:
                    product = {k: v for k, v in product.items() if k != "originalData"}
                    item["product"] = product
                items.append(item)
            payload[platform] = {"items": items}
    return payload


def decode_cart_envelope(document: Any) -> UnifiedCart:
    """
    Rebuild a cart from a stored document.

    Current-version envelopes are validated; unversioned bare carts are
    migrated; anything else resets to an empty cart. Derived totals are
    always recomputed.
    """
    if document is None:
        return UnifiedCart()
    if not isinstance(document, dict):
        logger.warning("Stored cart is not an object; starting with an empty cart")
        return UnifiedCart()

    if "version" not in document:
        payload = _migrate_unversioned(document)
        logger.info("Migrating unversioned stored cart")
    elif document.get("version") == CART_ENVELOPE_VERSION and isinstance(document.get("payload"), dict):
        payload = document["payload"]
    else:
        logger.warning(
            f"Unsupported stored cart version {document.get('version')!r}; starting with an empty cart"
        )
        return UnifiedCart()

    try:
        cart = UnifiedCart.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            f"Stored cart is malformed ({e.error_count()} errors); starting with an empty cart"
        )
        return UnifiedCart()

    cart.recompute()
    return cart
