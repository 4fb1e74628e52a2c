"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolveProductQuery:
    """Input DTO for resolving a single product.

    Attributes:
        product_id: Raw identifier taken from the request path. May be empty.
    """

    product_id: str
