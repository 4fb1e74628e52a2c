"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProductNotFoundError(CatalogDomainError):
    """Raised when no product matches the requested identifier."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id!r}")
        self.product_id = product_id
