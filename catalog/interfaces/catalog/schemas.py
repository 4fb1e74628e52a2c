"""
Response payloads for the catalog API.

Each payload is a RenderModel, so handlers emit it through the
render dispatcher instead of returning it directly.
"""

import time
from typing import Iterable, Optional

from pydantic import BaseModel
from starlette.requests import Request

from catalog.domain.catalog.entities import Product
from catalog.shared.context import STARTED_AT_KEY, get_context
from catalog.shared.renderer import RenderError, RenderModel


class ProductResponse(RenderModel):
    """Response payload for a single product.

    ``elapsed`` is computed by the render hook and is never part of the
    stored product.
    """

    id: str
    name: str
    description: str
    price: float
    sku: str
    elapsed: Optional[int] = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price),
            sku=product.sku,
        )

    def render(self, request: Request) -> None:
        """Stamp whole milliseconds since the request started.

        Raises:
            RenderError: If this payload was already rendered.
        """
        if self.elapsed is not None:
            raise RenderError(f"product {self.id!r} response already rendered")
        started_at = get_context(request).get(STARTED_AT_KEY)
        if started_at is None:
            self.elapsed = 0
            return
        self.elapsed = int((time.perf_counter() - started_at) * 1000)


def new_product_list_response(products: Iterable[Product]) -> list[ProductResponse]:
    """Wrap every product in its own response payload, preserving order."""
    return [ProductResponse.from_entity(product) for product in products]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
