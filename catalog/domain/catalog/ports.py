"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from catalog.domain.catalog.entities import Product


class ProductRepository(ABC):
    """Port for read-only product lookups."""

    @abstractmethod
    def lookup(self, product_id: str) -> Product:
        """Return the product whose identifier equals product_id exactly.

        Raises:
            ProductNotFoundError: If no product matches.
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in store order."""
        raise NotImplementedError
