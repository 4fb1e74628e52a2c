"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to rendered error payloads.
No stack traces or internal details are exposed to clients.
Anything not recognized here reaches the catch-all, which emits the raw
exception through the responder so the sanitizer replaces it.
"""

import logging

from fastapi import FastAPI, Request
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from catalog.domain.catalog.errors import CatalogDomainError, ProductNotFoundError
from catalog.shared.context import REQUEST_ID_KEY, get_context, set_status
from catalog.shared.errors.payloads import (
    ERR_NOT_FOUND,
    ErrResponse,
    err_internal,
    err_rate_limited,
)
from catalog.shared.logging import NO_REQUEST_ID, bind_request_id, reset_request_id
from catalog.shared.middleware import REQUEST_ID_HEADER, apply_secure_headers
from catalog.shared.render import render_one
from catalog.shared.responder import respond

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


def handle_rate_limit_exceeded(request: Request, exc: RateLimitExceeded) -> Response:
    """Handle requests rejected by the rate limiter."""
    logger.warning("Rate limit exceeded on %s: %s", request.url.path, exc.detail)
    return render_one(request, err_rate_limited(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        request: Request, exc: ProductNotFoundError
    ) -> Response:
        """Handle unknown or empty product identifiers."""
        logger.warning("Product not found: %r", exc.product_id)
        return render_one(request, ERR_NOT_FOUND)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        request: Request, exc: CatalogDomainError
    ) -> Response:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return render_one(request, err_internal(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Render framework HTTP errors (unmatched routes, bad methods)."""
        if exc.status_code == HTTP_404:
            response = render_one(request, ERR_NOT_FOUND)
        else:
            response = render_one(
                request,
                ErrResponse(http_status_code=exc.status_code, status_text=str(exc.detail)),
            )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    app.add_exception_handler(RateLimitExceeded, handle_rate_limit_exceeded)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals.

        Runs outside the middleware stack, so the request id binding and
        the response headers those middlewares add are restored here.
        """
        request_id = get_context(request).get(REQUEST_ID_KEY)
        token = bind_request_id(request_id or NO_REQUEST_ID)
        try:
            set_status(request, HTTP_500)
            response = respond(request, exc)
        finally:
            reset_request_id(token)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return apply_secure_headers(response)
