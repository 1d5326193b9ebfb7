"""Request context middleware: request ids, cart sessions, timing and headers."""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from storefront.cart.registry import DEFAULT_SESSION

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
CART_SESSION_HEADER = "X-Cart-Session"
PROCESSING_TIME_HEADER = "X-Processing-Time-Ms"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}


def _is_cart_request(request: Request) -> bool:
    return request.url.path.startswith("/v1/cart")


class StorefrontRequestMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with a request id and, for cart routes, the cart session.

    One log line is written per request. Cart responses echo the session
    they were served from so clients can tell which cart they touched.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        cart_session = None
        if _is_cart_request(request):
            cart_session = request.headers.get(CART_SESSION_HEADER) or DEFAULT_SESSION
            context["cart_session"] = cart_session

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{request.method} {request.url.path} failed: {e}",
                extra={**context, "processing_time_ms": _elapsed_ms(start_time)},
            )
            raise

        elapsed = _elapsed_ms(start_time)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESSING_TIME_HEADER] = str(elapsed)
        if cart_session is not None:
            response.headers[CART_SESSION_HEADER] = cart_session
        response.headers.update(SECURITY_HEADERS)

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={**context, "status_code": response.status_code, "processing_time_ms": elapsed},
        )
        return response


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)
