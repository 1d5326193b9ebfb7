"""FastAPI application server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from storefront.api.middleware import StorefrontRequestMiddleware
from storefront.api.routes import HealthResponse, router
from storefront.cart import CartRegistry, JsonFileCartStorage
from storefront.catalog import CatalogService
from storefront.config import Settings, get_settings
from storefront.exceptions import StorefrontError
from storefront.integrations import PrintfulClient, PrintifyClient
from storefront.observability.logging import configure_logging

logger = logging.getLogger(__name__)


def build_catalog(settings: Settings) -> CatalogService:
    """Construct the vendor clients that have credentials and the catalog over them."""
    printify = None
    if settings.printify_configured:
        printify = PrintifyClient(
            api_key=settings.printify_api_key,
            shop_id=settings.printify_shop_id,
            base_url=settings.printify_base_url,
            timeout=settings.vendor_timeout_seconds,
        )
    else:
        logger.warning("Printify not configured (PRINTIFY_API_KEY / PRINTIFY_SHOP_ID); skipping")

    printful = None
    if settings.printful_configured:
        printful = PrintfulClient(
            api_key=settings.printful_api_key,
            base_url=settings.printful_base_url,
            v1_base_url=settings.printful_v1_base_url,
            name_keywords=settings.printful_name_keywords,
            tag_keywords=settings.printful_tag_keywords,
            timeout=settings.vendor_timeout_seconds,
        )
    else:
        logger.warning("Printful not configured (PRINTFUL_API_KEY); skipping")

    return CatalogService(printify=printify, printful=printful)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Builds the catalog and cart registry once and attaches them to app
    state for dependency injection; closes vendor clients on shutdown.
    """
    settings: Settings = app.state.settings

    configure_logging(level=settings.log_level, json_format=settings.log_json)
    logger.info("Starting storefront...")

    catalog = build_catalog(settings)
    app.state.catalog = catalog
    app.state.cart_registry = CartRegistry(
        storage=JsonFileCartStorage(settings.cart_storage_dir),
        storage_key=settings.cart_storage_key,
        variant_loader=catalog.load_variants,
        checkout_base_path=settings.checkout_base_path,
        max_sessions=settings.max_cart_sessions,
    )
    logger.info(
        "Storefront ready",
        extra={"vendors": [p.value for p in catalog.platforms]},
    )

    yield

    logger.info("Shutting down storefront...")
    await catalog.close()
    logger.info("Shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=(
            "Print-on-demand storefront API. "
            "Unified Printify and Printful catalog with a per-platform cart."
        ),
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Domain exception handler: map StorefrontError to JSON response
    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(StorefrontRequestMiddleware)

    app.include_router(router)

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request) -> HealthResponse:
        """Liveness: reports which vendors are configured."""
        catalog: CatalogService | None = getattr(request.app.state, "catalog", None)
        return HealthResponse(
            status="healthy",
            version=settings.api_version,
            vendors=catalog.platforms if catalog else [],
        )

    @app.get("/ready", include_in_schema=False)
    async def ready(request: Request):
        """Readiness: 200 when every configured vendor answers, 503 otherwise."""
        catalog: CatalogService | None = getattr(request.app.state, "catalog", None)
        if catalog is None:
            return JSONResponse(status_code=503, content={"status": "not_ready"})

        checks = {}
        for platform, client in (("printify", catalog.printify), ("printful", catalog.printful)):
            if client is not None:
                checks[platform] = "ok" if await client.health_check() else "error"

        ok = all(status == "ok" for status in checks.values())
        return JSONResponse(
            status_code=200 if ok else 503,
            content={"status": "ready" if ok else "not_ready", **checks},
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
