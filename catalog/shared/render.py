"""
Render dispatcher.

render_one and render_many run each value's render hook and hand the
result to the application's responder. A failing hook never leaks a
half-rendered value: the failure is converted into the 422 error payload,
which is rendered instead. Values that are not Renderers are refused the
same way, so a raw dict or model can never bypass its render hook.
"""

import logging
from typing import Any, Sequence

from starlette.requests import Request
from starlette.responses import Response

from catalog.shared.errors.payloads import err_render
from catalog.shared.renderer import Renderer, RenderError
from catalog.shared.responder import respond

logger = logging.getLogger(__name__)


def _render(request: Request, value: Any) -> None:
    if not isinstance(value, Renderer):
        raise RenderError(f"{type(value).__name__} is not renderable")
    value.render(request)


def render_one(request: Request, value: Renderer) -> Response:
    """Render a single value and emit it."""
    try:
        _render(request, value)
    except Exception as exc:
        logger.warning("Render hook failed for %s: %s", type(value).__name__, exc)
        payload = err_render(exc)
        payload.render(request)
        return respond(request, payload)
    return respond(request, value)


def render_many(request: Request, values: Sequence[Renderer]) -> Response:
    """Render every value in order and emit them as one JSON array.

    An empty sequence emits an empty array.
    """
    rendered = list(values)
    for value in rendered:
        try:
            _render(request, value)
        except Exception as exc:
            logger.warning("Render hook failed for %s: %s", type(value).__name__, exc)
            return render_one(request, err_render(exc))
    return respond(request, rendered)
