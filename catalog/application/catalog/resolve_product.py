"""
Use case: Resolve a product identifier into a Product entity.

Input: ResolveProductQuery (product_id)
Output: Product
Side effects: None (read-only query).
Failure cases: ProductNotFoundError (empty or unknown identifier).
"""

import logging

from catalog.application.catalog.dtos import ResolveProductQuery
from catalog.domain.catalog.entities import Product
from catalog.domain.catalog.errors import ProductNotFoundError
from catalog.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class ResolveProductUseCase:
    """Orchestrates a single product lookup.

    An empty identifier is rejected before the repository is consulted.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, query: ResolveProductQuery) -> Product:
        """Run the resolve product use case.

        Args:
            query: The lookup request carrying the raw identifier.

        Returns:
            The matching product.

        Raises:
            ProductNotFoundError: If the identifier is empty or unknown.
        """
        if not query.product_id:
            raise ProductNotFoundError(query.product_id)

        logger.info("Resolving product: product_id=%s", query.product_id)
        return self._product_repo.lookup(query.product_id)
