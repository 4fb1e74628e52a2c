"""
The renderable capability.

A response payload implements ``render`` as a pre-emission hook (set a
status, stamp computed fields) and ``payload`` to produce its JSON body.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel
from starlette.requests import Request


class RenderError(Exception):
    """Raised by a render hook that cannot prepare its payload."""


class Renderer(ABC):
    """Anything the render dispatcher can emit."""

    @abstractmethod
    def render(self, request: Request) -> None:
        """Prepare the payload for emission. May raise to abort rendering."""
        raise NotImplementedError

    @abstractmethod
    def payload(self) -> Any:
        """Return the JSON-compatible response body."""
        raise NotImplementedError


class RenderModel(BaseModel, Renderer):
    """Pydantic response model that is also a Renderer.

    The body is the model dumped by alias with unset optionals omitted.
    """

    def render(self, request: Request) -> None:
        return None

    def payload(self) -> Any:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
