"""
Product context loader.

Router-level dependency for every route under ``/products/{product_id}``.
It resolves the path parameter and extends the request context with the
Product before the handler runs. Unknown or empty identifiers raise
ProductNotFoundError, which the error handlers render as 404, so the
handler is never reached.

Handlers read the product with ``current_product`` and never look it up
themselves.
"""

from fastapi import Depends, Request

from catalog.application.catalog.dtos import ResolveProductQuery
from catalog.application.catalog.resolve_product import ResolveProductUseCase
from catalog.domain.catalog.entities import Product
from catalog.interfaces.catalog.dependencies import get_resolve_product_use_case
from catalog.shared.context import ContextKey, bind, get_context

PRODUCT_ID_PARAM = "product_id"

_PRODUCT_KEY: ContextKey[Product] = ContextKey("product", Product)


def with_product(request: Request, product: Product) -> None:
    """Bind product to the request context."""
    bind(request, _PRODUCT_KEY, product)


def current_product(request: Request) -> Product:
    """Return the product loaded for this request.

    Raises:
        MissingContextValueError: If the loader did not run for this route.
    """
    return get_context(request).value(_PRODUCT_KEY)


def load_product_context(
    request: Request,
    use_case: ResolveProductUseCase = Depends(get_resolve_product_use_case),
) -> None:
    """Resolve the product named in the path and bind it to the context."""
    product_id = request.path_params.get(PRODUCT_ID_PARAM, "")
    product = use_case.execute(ResolveProductQuery(product_id=product_id))
    with_product(request, product)
