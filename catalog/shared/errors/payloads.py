"""
Error response payloads.

ErrResponse is itself a Renderer: its hook only sets the HTTP status,
and its own aliased fields are the body. The low-level cause and the
status code are never serialized.
"""

from typing import Optional

from pydantic import ConfigDict, Field
from starlette.requests import Request

from catalog.shared.context import set_status
from catalog.shared.renderer import RenderModel


class ErrResponse(RenderModel):
    """Renderer for all error responses.

    Attributes:
        err: Low-level runtime error. Excluded from the body.
        http_status_code: HTTP response status code. Excluded from the body.
        status_text: User-level status message, emitted as ``status``.
        app_code: Application-specific error code, emitted as ``code``.
        error_text: Application-level error message for debugging,
            emitted as ``error``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    err: Optional[BaseException] = Field(default=None, exclude=True)
    http_status_code: int = Field(exclude=True)
    status_text: str = Field(serialization_alias="status")
    app_code: Optional[int] = Field(default=None, serialization_alias="code")
    error_text: Optional[str] = Field(default=None, serialization_alias="error")

    def render(self, request: Request) -> None:
        set_status(request, self.http_status_code)


ERR_NOT_FOUND = ErrResponse(http_status_code=404, status_text="Resource not found.")


def err_render(err: BaseException) -> ErrResponse:
    """Build the payload for a render hook that failed."""
    return ErrResponse(
        err=err,
        http_status_code=422,
        status_text="Error rendering response.",
        error_text=str(err),
    )


def err_rate_limited(err: BaseException) -> ErrResponse:
    """Build the payload for a request rejected by the rate limiter."""
    return ErrResponse(
        err=err,
        http_status_code=429,
        status_text="Rate limit exceeded.",
        error_text=str(getattr(err, "detail", err)),
    )


def err_internal(err: BaseException) -> ErrResponse:
    """Build the payload for an unexpected domain failure."""
    return ErrResponse(
        err=err,
        http_status_code=500,
        status_text="Internal server error.",
    )
