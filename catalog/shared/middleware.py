"""
HTTP middleware.

- RequestContextMiddleware: request id, start time, access log.
- URLFormatMiddleware: ``/products/3.json`` is served as ``/products/3``.
- SecurityHeadersMiddleware: restrictive default headers on every response.

No business logic. Pure cross-cutting concerns.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from catalog.shared.context import (
    REQUEST_ID_KEY,
    STARTED_AT_KEY,
    RequestContext,
)
from catalog.shared.logging import bind_request_id, reset_request_id

logger = logging.getLogger("catalog.access")

REQUEST_ID_HEADER = "X-Request-ID"
KNOWN_URL_FORMATS = frozenset({"json"})

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Seeds the request context and writes one access-log line per request.

    The request id is also bound for logging, so every record emitted while
    the request is handled carries it.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started_at = time.perf_counter()
        request.state.context = (
            RequestContext.empty()
            .with_value(REQUEST_ID_KEY, request_id)
            .with_value(STARTED_AT_KEY, started_at)
        )

        token = bind_request_id(request_id)
        try:
            response = await call_next(request)

            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                '"%s %s" - %d in %.3fms',
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started_at) * 1000,
            )
        finally:
            reset_request_id(token)
        return response


class URLFormatMiddleware:
    """Strips a known format extension from the last path segment.

    Pure ASGI so the rewrite happens before routing.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            head, _, last = path.rpartition("/")
            stem, dot, ext = last.rpartition(".")
            if dot and stem and ext in KNOWN_URL_FORMATS:
                new_path = f"{head}/{stem}"
                scope = dict(scope, path=new_path, raw_path=new_path.encode())
        await self.app(scope, receive, send)


def apply_secure_headers(response: Response) -> Response:
    """Set SECURE_HEADERS on response, replacing any existing values."""
    response.headers.update(SECURE_HEADERS)
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Applies SECURE_HEADERS to every response that passes through the stack.

    Responses built by the server-error fallback never reach this
    middleware; the catch-all handler applies the headers itself.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return apply_secure_headers(await call_next(request))
