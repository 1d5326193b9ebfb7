"""Decoders for the response envelopes Printful wraps its payloads in.

The v1 API wraps bodies as ``{"code": 200, "result": ...}``; the v2 API uses
``{"data": ...}``; some endpoints and proxies return ``{"product": ...}`` or
the bare object. Each accepted shape is an explicit case here, and anything
else is rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from storefront.exceptions import VendorRequestError
from storefront.integrations.printful.models import PrintfulSyncProduct

PLATFORM = "printful"

M = TypeVar("M", bound=BaseModel)


class EnvelopeShape(str, Enum):
    """How a single-object payload was wrapped."""

    RESULT = "result"
    DATA = "data"
    PRODUCT = "product"
    BARE = "bare"


@dataclass
class Envelope:
    """A decoded envelope: which shape matched and the unwrapped body."""

    shape: EnvelopeShape
    body: Any


def raise_for_api_error(payload: Any) -> None:
    """v2 can report failures inside a 2xx body as ``{"error": {...}}``."""
    if isinstance(payload, dict) and payload.get("error"):
        error = payload["error"]
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise VendorRequestError(PLATFORM, message or "Unknown error")


def decode_object_envelope(payload: Any) -> Envelope:
    """
    Unwrap a single-object response.

    Raises:
        VendorRequestError: The payload matches none of the known shapes.
    """
    raise_for_api_error(payload)
    if not isinstance(payload, dict):
        raise VendorRequestError(PLATFORM, f"Unrecognized envelope: {type(payload).__name__}")

    for shape in (EnvelopeShape.RESULT, EnvelopeShape.DATA, EnvelopeShape.PRODUCT):
        body = payload.get(shape.value)
        if isinstance(body, dict):
            return Envelope(shape=shape, body=body)

    if "id" in payload or "name" in payload:
        return Envelope(shape=EnvelopeShape.BARE, body=payload)

    raise VendorRequestError(PLATFORM, "Unrecognized envelope: no product object found")


def decode_list_envelope(payload: Any) -> list[Any]:
    """Unwrap a list response (``{"data": [...]}``, ``{"result": [...]}`` or a bare list)."""
    raise_for_api_error(payload)
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in (EnvelopeShape.DATA.value, EnvelopeShape.RESULT.value):
            body = payload.get(key)
            if isinstance(body, list):
                return body
    raise VendorRequestError(PLATFORM, "Unrecognized list envelope")


def decode_model(model: type[M], body: Any) -> M:
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise VendorRequestError(
            PLATFORM,
            f"Unexpected {model.__name__} payload: {e.error_count()} validation errors",
        ) from e


def decode_sync_product(payload: Any) -> PrintfulSyncProduct:
    """Decode the v1 sync product body, enveloped in ``result`` or bare."""
    raise_for_api_error(payload)
    if isinstance(payload, dict):
        result = payload.get(EnvelopeShape.RESULT.value)
        if isinstance(result, dict) and "sync_product" in result:
            return decode_model(PrintfulSyncProduct, result)
        if "sync_product" in payload:
            return decode_model(PrintfulSyncProduct, payload)
    raise VendorRequestError(PLATFORM, "Unrecognized sync product envelope")
