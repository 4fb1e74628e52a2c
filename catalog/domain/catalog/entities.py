"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """A product offered in the catalog.

    Attributes:
        id: Identifier, unique within the store. Matched exactly.
        name: Display name.
        description: Free-text description.
        price: Unit price. Never negative.
        sku: Stock-keeping code.
    """

    id: str
    name: str
    description: str
    price: Decimal
    sku: str

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product {self.id!r} has a negative price: {self.price}")
