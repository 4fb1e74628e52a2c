"""Product fixture data loaded at startup."""

from decimal import Decimal

from catalog.domain.catalog.entities import Product

PRODUCT_FIXTURES: tuple[Product, ...] = (
    Product(
        id="1",
        name="Latte",
        description="Frothy milky coffe",
        price=Decimal("2.45"),
        sku="abc123",
    ),
    Product(
        id="2",
        name="Esspresso",
        description="Short and strong coffee without milk",
        price=Decimal("1.99"),
        sku="def456",
    ),
    Product(
        id="3",
        name="Affogato",
        description="Coffee in the realms of dessert",
        price=Decimal("3.14"),
        sku="ghi789",
    ),
    Product(
        id="4",
        name="Cappucino",
        description="The gateway into coffee",
        price=Decimal("2.34"),
        sku="jkl135",
    ),
    Product(
        id="5",
        name="Americano",
        description="Simple coffee topped up with hot water",
        price=Decimal("2.12"),
        sku="mno246",
    ),
)
