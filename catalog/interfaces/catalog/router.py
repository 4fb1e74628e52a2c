"""
FastAPI router for the catalog bounded context.

Path tree:
    GET /products                 list every product
    GET /products/{product_id}    single product, loaded by the context loader
    GET /products/                empty identifier, answered like an unknown one

Responses are emitted through the render dispatcher.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from catalog.application.catalog.list_products import ListProductsUseCase
from catalog.interfaces.catalog.context_loader import (
    current_product,
    load_product_context,
)
from catalog.interfaces.catalog.dependencies import get_list_products_use_case
from catalog.interfaces.catalog.schemas import (
    ProductResponse,
    new_product_list_response,
)
from catalog.shared.render import render_many, render_one

router = APIRouter(prefix="/products", tags=["products"])

product_router = APIRouter(dependencies=[Depends(load_product_context)])


@router.get(
    "",
    summary="List products",
    description="Return every product in catalog order.",
)
def list_products(
    request: Request,
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> Response:
    """List all products."""
    products = use_case.execute()
    return render_many(request, new_product_list_response(products))


@product_router.get(
    "/{product_id}",
    summary="Get product",
    description="Return a single product by identifier.",
)
@product_router.get("/", include_in_schema=False)
def get_product(request: Request) -> Response:
    """Return the product loaded onto the request context."""
    product = current_product(request)
    return render_one(request, ProductResponse.from_entity(product))


router.include_router(product_router)
