"""
Response emission strategies.

Every rendered value leaves the application through the Responder stored
on ``app.state.responder``. The strategy is picked once in ``create_app``
and never swapped afterwards.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from catalog.shared.context import get_status, set_status
from catalog.shared.renderer import Renderer

logger = logging.getLogger(__name__)

SANITIZED_ERROR_BODY = {"status": "error"}


class Responder(ABC):
    """Strategy that turns a value into an HTTP response."""

    @abstractmethod
    def respond(self, request: Request, value: Any) -> Response:
        raise NotImplementedError


class JSONResponder(Responder):
    """Default emission: JSON body, status taken from the request context."""

    def respond(self, request: Request, value: Any) -> Response:
        status_code = get_status(request) or 200
        return JSONResponse(status_code=status_code, content=self._encode(value))

    def _encode(self, value: Any) -> Any:
        if isinstance(value, Renderer):
            return value.payload()
        if isinstance(value, (list, tuple)):
            return [self._encode(item) for item in value]
        return jsonable_encoder(value)


class SanitizingResponder(Responder):
    """Intercepts error values before they reach the client.

    An exception handed to ``respond`` is logged with its cause and
    replaced by a fixed body. Anything else goes to ``inner`` untouched.
    """

    def __init__(self, inner: Responder, default_status: int = 400) -> None:
        self._inner = inner
        self._default_status = default_status

    def respond(self, request: Request, value: Any) -> Response:
        if isinstance(value, BaseException):
            if get_status(request) is None:
                set_status(request, self._default_status)
            logger.error(
                "Error response sanitized on %s: %s: %s",
                request.url.path,
                type(value).__name__,
                value,
                exc_info=value,
            )
            return self._inner.respond(request, dict(SANITIZED_ERROR_BODY))
        return self._inner.respond(request, value)


def get_responder(request: Request) -> Responder:
    """Return the application's configured responder."""
    return request.app.state.responder


def respond(request: Request, value: Any) -> Response:
    """Emit value through the application's responder."""
    return get_responder(request).respond(request, value)
