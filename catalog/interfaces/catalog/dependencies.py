"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the application's
product store into use cases via constructor injection.
"""

from fastapi import Depends, Request

from catalog.application.catalog.list_products import ListProductsUseCase
from catalog.application.catalog.resolve_product import ResolveProductUseCase
from catalog.domain.catalog.ports import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    """Return the product store built by the composition root."""
    return request.app.state.product_repository


def get_list_products_use_case(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    """Build ListProductsUseCase with its infrastructure dependencies."""
    return ListProductsUseCase(product_repo=product_repo)


def get_resolve_product_use_case(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> ResolveProductUseCase:
    """Build ResolveProductUseCase with its infrastructure dependencies."""
    return ResolveProductUseCase(product_repo=product_repo)
