"""
Adapter: In-memory product store.

Implements ProductRepository port.
Holds an immutable snapshot of the fixture set; safe for
unsynchronized concurrent reads because nothing mutates it.
"""

import logging
from typing import Iterable

from catalog.domain.catalog.entities import Product
from catalog.domain.catalog.errors import ProductNotFoundError
from catalog.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):
    """Concrete adapter serving products from memory.

    Identifiers are matched by exact string equality:
    no normalization, no case-folding.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """Initialize the store.

        Args:
            products: Products in display order.

        Raises:
            ValueError: If two products share an identifier.
        """
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[str, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"Duplicate product id: {product.id!r}")
            self._by_id[product.id] = product
        logger.debug("Product store loaded: count=%d", len(self._products))

    def lookup(self, product_id: str) -> Product:
        """Return the product with the given identifier.

        Args:
            product_id: Identifier to match exactly.

        Returns:
            The matching product.

        Raises:
            ProductNotFoundError: If no product matches.
        """
        try:
            return self._by_id[product_id]
        except KeyError:
            raise ProductNotFoundError(product_id) from None

    def list_all(self) -> list[Product]:
        """Return a fresh list of every product in store order."""
        return list(self._products)
