"""
Application entry point.

Creates the FastAPI application and wires together:
- Product store and response strategy (app.state)
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Middleware (request context, URL format, security headers)
- Rate limiting (app-level dependency)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI

from catalog.core.config import Settings, settings as default_settings
from catalog.domain.catalog.ports import ProductRepository
from catalog.infrastructure.catalog.fixtures import PRODUCT_FIXTURES
from catalog.infrastructure.catalog.product_repository import (
    InMemoryProductRepository,
)
from catalog.interfaces.catalog.router import router as catalog_router
from catalog.interfaces.health import router as health_router
from catalog.shared.errors.handlers import register_error_handlers
from catalog.shared.logging import configure_logging
from catalog.shared.middleware import (
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    URLFormatMiddleware,
)
from catalog.shared.responder import JSONResponder, Responder, SanitizingResponder
from catalog.shared.security.rate_limiting import build_limiter, enforce_rate_limit

logger = logging.getLogger(__name__)


def build_responder(settings: Settings) -> Responder:
    """Build the response strategy used for every emission."""
    return SanitizingResponder(
        JSONResponder(), default_status=settings.default_error_status
    )


def create_app(
    settings: Optional[Settings] = None,
    product_repository: Optional[ProductRepository] = None,
    responder: Optional[Responder] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Settings override. Defaults to the environment.
        product_repository: Store override. Defaults to the fixture set.
        responder: Emission strategy override. Defaults to the sanitizing
            JSON responder.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        dependencies=[Depends(enforce_rate_limit)],
    )

    app.state.settings = settings
    app.state.product_repository = product_repository or InMemoryProductRepository(
        PRODUCT_FIXTURES
    )
    app.state.responder = responder or build_responder(settings)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)

    # --- Middleware (last added runs first) ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(URLFormatMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(catalog_router)

    logger.info("%s %s configured", settings.project_name, settings.version)
    return app


app = create_app()
