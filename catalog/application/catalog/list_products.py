"""
Use case: List every product in the catalog.

Input: None
Output: list[Product] in store order
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from catalog.domain.catalog.entities import Product
from catalog.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """Orchestrates listing the full product catalog."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self) -> list[Product]:
        """Run the list products use case.

        Returns:
            All products, in the order the store holds them.
        """
        products = self._product_repo.list_all()
        logger.info("Listing products: count=%d", len(products))
        return products
