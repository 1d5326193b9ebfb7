"""Domain exceptions for the storefront API.

These map to consistent HTTP responses when handled by the global exception handler.
"""


class StorefrontError(Exception):
    """Base exception for storefront domain errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail or message


class VendorRequestError(StorefrontError):
    """
    Raised when a call to a fulfillment vendor fails.

    Covers non-2xx responses, transport failures and bodies that cannot be
    decoded. Callers treat this as non-fatal and degrade to empty results.
    """

    def __init__(
        self,
        platform: str,
        message: str,
        *,
        vendor_status: int | None = None,
    ) -> None:
        super().__init__(
            f"{platform} API error: {message}",
            status_code=502,
        )
        self.platform = platform
        self.vendor_status = vendor_status
        self.vendor_message = message


class NotFoundError(StorefrontError):
    """Raised when a requested product or resource does not exist."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=404, detail=detail or message)


class InvalidProductIdError(StorefrontError):
    """Raised when a composite product id cannot be parsed."""

    def __init__(self, product_id: str) -> None:
        super().__init__(
            f"Invalid product id: {product_id!r}",
            status_code=400,
        )
        self.product_id = product_id


class CartValidationError(StorefrontError):
    """Raised when a cart operation receives invalid input."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=400, detail=detail or message)


class InvalidCartSessionError(StorefrontError):
    """Raised when the cart session identifier is malformed."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            "Invalid cart session id",
            status_code=400,
            detail="Cart session ids may only contain letters, digits, '-' and '_' (max 64)",
        )
        self.session_id = session_id


class EnrichmentWarning(StorefrontError):
    """
    A secondary data fetch failed while the primary operation can continue.

    Only ever logged; never surfaced to the end user.
    """

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
